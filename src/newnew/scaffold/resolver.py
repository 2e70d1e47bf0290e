"""Collect template variables from the user in declaration order."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from newnew.prompts import Prompter
from newnew.scaffold.conditions import conditions_met
from newnew.templates.base import TemplateVariable, VariableKind

logger = logging.getLogger(__name__)

TRUTHY_DEFAULTS = frozenset({"true", "yes", "y", "1"})


def parse_bool_default(default: str | None) -> bool:
    """Interpret a boolean variable's default; unset means False."""
    if default is None:
        return False
    return default.strip().lower() in TRUTHY_DEFAULTS


def prompt_variable(variable: TemplateVariable, prompter: Prompter) -> str:
    """Ask for one variable and return its environment value."""
    if variable.kind is VariableKind.BOOLEAN:
        answer = prompter.confirm(variable.prompt, default=parse_bool_default(variable.default))
        return "true" if answer else "false"

    if variable.kind is VariableKind.MULTISELECT:
        return ",".join(prompter.multiselect(variable.prompt, variable.options))

    if variable.kind is VariableKind.SELECT:
        return prompter.select(variable.prompt, variable.options)

    answer = prompter.text(variable.prompt)
    if not answer:
        return variable.default or ""
    return answer


def resolve_variables(
    variables: Iterable[TemplateVariable],
    initial_env: Mapping[str, str],
    prompter: Prompter,
) -> dict[str, str]:
    """Build the environment for a template.

    Variables are visited in order, so a condition can only observe
    variables declared before it. A variable whose conditions fail is
    neither prompted nor added.

    Args:
        variables: The template's variables, in declaration order.
        initial_env: Seed values such as ``project_name``. Not modified.
        prompter: Source of user answers.

    Returns:
        A new dict holding the seed values plus every prompted variable.
    """
    environment = dict(initial_env)

    for variable in variables:
        if not conditions_met(variable.if_condition, variable.if_not_condition, environment):
            logger.debug("Skipping variable %s: condition not met", variable.name)
            continue
        environment[variable.name] = prompt_variable(variable, prompter)

    return environment
