"""Tests for variable resolution."""

import pytest

from conftest import FakePrompter
from newnew.scaffold.resolver import parse_bool_default, prompt_variable, resolve_variables
from newnew.templates.base import TemplateVariable, VariableKind


def _var(name: str, kind: VariableKind = VariableKind.STRING, **kwargs) -> TemplateVariable:
    return TemplateVariable(name=name, prompt=f"{name}?", kind=kind, **kwargs)


class TestParseBoolDefault:
    """Tests for boolean default parsing."""

    @pytest.mark.parametrize("value", ["true", "True", "yes", "y", "1", " TRUE "])
    def test_truthy(self, value: str) -> None:
        assert parse_bool_default(value) is True

    @pytest.mark.parametrize("value", [None, "false", "no", "", "maybe"])
    def test_falsy(self, value: str | None) -> None:
        assert parse_bool_default(value) is False


class TestPromptVariable:
    """Tests for per-kind prompting."""

    def test_boolean_true(self) -> None:
        prompter = FakePrompter({"flag?": True})
        assert prompt_variable(_var("flag", VariableKind.BOOLEAN), prompter) == "true"

    def test_boolean_uses_default(self) -> None:
        prompter = FakePrompter()
        var = _var("flag", VariableKind.BOOLEAN, default="true")
        assert prompt_variable(var, prompter) == "true"
        var = _var("flag", VariableKind.BOOLEAN)
        assert prompt_variable(var, prompter) == "false"

    def test_select(self) -> None:
        prompter = FakePrompter({"kind?": "bin"})
        var = _var("kind", VariableKind.SELECT, options=("lib", "bin"))
        assert prompt_variable(var, prompter) == "bin"

    def test_multiselect_joined_in_selection_order(self) -> None:
        prompter = FakePrompter({"tools?": ["mypy", "pytest"]})
        var = _var("tools", VariableKind.MULTISELECT, options=("pytest", "ruff", "mypy"))
        assert prompt_variable(var, prompter) == "mypy,pytest"

    def test_multiselect_nothing_chosen(self) -> None:
        var = _var("tools", VariableKind.MULTISELECT, options=("pytest",))
        assert prompt_variable(var, FakePrompter()) == ""

    def test_text_verbatim(self) -> None:
        prompter = FakePrompter({"desc?": "  spaced  "})
        assert prompt_variable(_var("desc", default="d"), prompter) == "  spaced  "

    def test_text_empty_falls_back_to_default(self) -> None:
        assert prompt_variable(_var("desc", default="d"), FakePrompter()) == "d"

    def test_text_empty_without_default(self) -> None:
        assert prompt_variable(_var("desc"), FakePrompter()) == ""


class TestResolveVariables:
    """Tests for resolve_variables."""

    def test_seed_values_kept_and_not_mutated(self) -> None:
        seed = {"project_name": "demo"}
        env = resolve_variables([_var("desc")], seed, FakePrompter({"desc?": "hi"}))
        assert env == {"project_name": "demo", "desc": "hi"}
        assert seed == {"project_name": "demo"}

    def test_conditional_variable_skipped(self) -> None:
        """Test that B (if: A) is never prompted when A is false."""
        variables = [_var("A", VariableKind.BOOLEAN), _var("B", if_condition="A")]
        prompter = FakePrompter({"A?": False, "B?": "value"})

        env = resolve_variables(variables, {}, prompter)

        assert env == {"A": "false"}
        assert "B?" not in prompter.asked

    def test_conditional_variable_prompted(self) -> None:
        variables = [_var("A", VariableKind.BOOLEAN), _var("B", if_condition="A")]
        prompter = FakePrompter({"A?": True, "B?": "value"})

        env = resolve_variables(variables, {}, prompter)

        assert env == {"A": "true", "B": "value"}
        assert prompter.asked == ["A?", "B?"]

    def test_if_not_condition(self) -> None:
        variables = [
            _var("use_docker", VariableKind.BOOLEAN),
            _var("python_path", if_not_condition="use_docker"),
        ]
        env = resolve_variables(variables, {}, FakePrompter({"use_docker?": True}))
        assert "python_path" not in env

    def test_forward_reference_never_satisfied(self) -> None:
        variables = [_var("B", if_condition="A"), _var("A", VariableKind.BOOLEAN)]
        prompter = FakePrompter({"A?": True})

        env = resolve_variables(variables, {}, prompter)

        assert env == {"A": "true"}
        assert prompter.asked == ["A?"]

    def test_condition_on_skipped_variable(self) -> None:
        """Test that a skipped variable reads as "not true" to later conditions."""
        variables = [
            _var("A", VariableKind.BOOLEAN),
            _var("B", VariableKind.BOOLEAN, if_condition="A"),
            _var("C", if_condition="B"),
            _var("D", if_condition="!B"),
        ]
        prompter = FakePrompter({"A?": False, "B?": True, "C?": "c", "D?": "d"})

        env = resolve_variables(variables, {}, prompter)

        assert env == {"A": "false", "D": "d"}

    def test_both_conditions_required(self) -> None:
        variables = [
            _var("a", VariableKind.BOOLEAN),
            _var("b", VariableKind.BOOLEAN),
            _var("c", if_condition="a", if_not_condition="b"),
        ]
        prompter = FakePrompter({"a?": True, "b?": True, "c?": "x"})
        assert "c" not in resolve_variables(variables, {}, prompter)

        prompter = FakePrompter({"a?": True, "b?": False, "c?": "x"})
        assert resolve_variables(variables, {}, prompter)["c"] == "x"

    def test_seed_can_satisfy_condition(self) -> None:
        variables = [_var("x", if_condition="preset")]
        env = resolve_variables(variables, {"preset": "true"}, FakePrompter({"x?": "y"}))
        assert env["x"] == "y"
