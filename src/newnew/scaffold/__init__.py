"""Variable resolution and step execution for templates."""

from newnew.scaffold.conditions import conditions_met, evaluate_condition
from newnew.scaffold.executor import execute_steps, run_step
from newnew.scaffold.resolver import resolve_variables
from newnew.scaffold.substitution import expand_variables, tokenize_command

__all__ = [
    "conditions_met",
    "evaluate_condition",
    "execute_steps",
    "expand_variables",
    "resolve_variables",
    "run_step",
    "tokenize_command",
]
