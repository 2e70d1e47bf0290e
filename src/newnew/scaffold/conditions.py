"""Evaluation of ``if`` / ``if-not`` conditions against resolved variables."""

from collections.abc import Mapping

NEGATION_PREFIX = "!"


def evaluate_condition(condition: str, environment: Mapping[str, str]) -> bool:
    """Evaluate a condition naming a variable, optionally negated with "!".

    A variable that was never set counts as not "true": ``name`` is then
    False and ``!name`` is True.
    """
    if condition.startswith(NEGATION_PREFIX):
        return environment.get(condition[len(NEGATION_PREFIX) :]) != "true"
    return environment.get(condition) == "true"


def conditions_met(
    if_condition: str | None,
    if_not_condition: str | None,
    environment: Mapping[str, str],
) -> bool:
    """Check both conditions of a variable or step; both must pass."""
    if if_condition is not None and not evaluate_condition(if_condition, environment):
        return False
    if if_not_condition is not None and evaluate_condition(if_not_condition, environment):
        return False
    return True
