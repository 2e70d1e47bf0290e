"""Template definitions: variables, steps and the template itself."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class VariableKind(str, Enum):
    """Closed set of variable kinds a template may declare."""

    STRING = "string"
    BOOLEAN = "boolean"
    SELECT = "select"
    MULTISELECT = "multiselect"


def _as_str(value: Any) -> str | None:
    """Coerce a YAML scalar to the string form used in the environment.

    YAML booleans become "true"/"false" so they compare equal to the
    values produced by boolean prompts.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        raise ValueError(f"expected a scalar, got {type(value).__name__}")
    return str(value)


def _require_str(data: dict[str, Any], key: str, what: str) -> str:
    value = _as_str(data.get(key))
    if not value:
        raise ValueError(f"{what} is missing required field '{key}'")
    return value


@dataclass(frozen=True)
class TemplateVariable:
    """A value collected from the user before any step runs."""

    name: str
    prompt: str
    kind: VariableKind = VariableKind.STRING
    default: str | None = None
    if_condition: str | None = None
    if_not_condition: str | None = None
    options: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the on-disk shape, omitting unset fields."""
        result: dict[str, Any] = {"name": self.name, "prompt": self.prompt}
        if self.kind is not VariableKind.STRING:
            result["type"] = self.kind.value
        if self.default is not None:
            result["default"] = self.default
        if self.if_condition is not None:
            result["if"] = self.if_condition
        if self.if_not_condition is not None:
            result["if-not"] = self.if_not_condition
        if self.options:
            result["options"] = list(self.options)
        return result

    @classmethod
    def from_dict(cls, data: Any) -> TemplateVariable:
        """Create from a parsed ``variables`` entry.

        Raises ValueError for unknown types, or for select/multiselect
        variables without options.
        """
        if not isinstance(data, dict):
            raise ValueError("each variable must be a mapping")

        name = _require_str(data, "name", "variable")
        prompt = _require_str(data, "prompt", f"variable '{name}'")

        type_raw = data.get("type")
        if type_raw is None:
            kind = VariableKind.STRING
        else:
            try:
                kind = VariableKind(str(type_raw).lower())
            except ValueError:
                allowed = ", ".join(k.value for k in VariableKind)
                raise ValueError(
                    f"variable '{name}' has unknown type '{type_raw}' "
                    f"(expected one of: {allowed})"
                ) from None

        options_raw = data.get("options")
        options: tuple[str, ...] = ()
        if options_raw is not None:
            if not isinstance(options_raw, list):
                raise ValueError(f"variable '{name}' options must be a list")
            options = tuple(_as_str(o) or "" for o in options_raw)
        if kind in (VariableKind.SELECT, VariableKind.MULTISELECT) and not options:
            raise ValueError(f"variable '{name}' of type {kind.value} needs options")

        # "if_condition" was accepted by older templates
        if_condition = _as_str(data.get("if", data.get("if_condition")))

        return cls(
            name=name,
            prompt=prompt,
            kind=kind,
            default=_as_str(data.get("default")),
            if_condition=if_condition,
            if_not_condition=_as_str(data.get("if-not")),
            options=options,
        )


@dataclass(frozen=True)
class CopyAction:
    """Copy a template file into the project, expanding variables."""

    source: str  # relative to the template directory
    destination: str  # relative to the project directory

    @classmethod
    def from_dict(cls, data: Any, step_name: str) -> CopyAction:
        if not isinstance(data, dict):
            raise ValueError(f"step '{step_name}' copy must be a mapping")
        return cls(
            source=_require_str(data, "from", f"step '{step_name}' copy"),
            destination=_require_str(data, "to", f"step '{step_name}' copy"),
        )


@dataclass(frozen=True)
class Step:
    """One unit of scaffold work.

    A step may check for a command, copy a file, run commands, or any
    combination; a step with none of them only announces its name.
    """

    name: str
    if_condition: str | None = None
    if_not_condition: str | None = None
    check: str | None = None
    error: str | None = None
    copy: CopyAction | None = None
    run: str | None = None  # newline-separated command lines

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the on-disk shape, omitting unset fields."""
        result: dict[str, Any] = {"name": self.name}
        if self.if_condition is not None:
            result["if"] = self.if_condition
        if self.if_not_condition is not None:
            result["if-not"] = self.if_not_condition
        if self.check is not None:
            result["check"] = self.check
        if self.error is not None:
            result["error"] = self.error
        if self.copy is not None:
            result["copy"] = {"from": self.copy.source, "to": self.copy.destination}
        if self.run is not None:
            result["run"] = self.run
        return result

    @classmethod
    def from_dict(cls, data: Any) -> Step:
        """Create from a parsed ``steps`` entry."""
        if not isinstance(data, dict):
            raise ValueError("each step must be a mapping")

        name = _require_str(data, "name", "step")

        copy_raw = data.get("copy")
        copy = CopyAction.from_dict(copy_raw, name) if copy_raw is not None else None

        run_raw = data.get("run")
        if run_raw is not None and not isinstance(run_raw, str):
            raise ValueError(f"step '{name}' run must be a string")

        return cls(
            name=name,
            if_condition=_as_str(data.get("if")),
            if_not_condition=_as_str(data.get("if-not")),
            check=_as_str(data.get("check")),
            error=_as_str(data.get("error")),
            copy=copy,
            run=run_raw,
        )


@dataclass(frozen=True)
class Template:
    """Immutable definition of a project scaffold."""

    name: str
    description: str = ""
    emoji: str = ""
    variables: tuple[TemplateVariable, ...] = ()
    steps: tuple[Step, ...] = ()
    source: Path | None = None  # Definition file the template was loaded from

    @property
    def label(self) -> str:
        """Display label, e.g. "🐍 Python"."""
        return f"{self.emoji} {self.name}".strip()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the on-disk shape, excluding source."""
        return {
            "name": self.name,
            "description": self.description,
            "emoji": self.emoji,
            "variables": [v.to_dict() for v in self.variables],
            "steps": [s.to_dict() for s in self.steps],
        }

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], name: str = "", source: Path | None = None
    ) -> Template:
        """Deserialize a parsed definition.

        ``name`` is used when the definition does not declare one.
        """
        variables_raw = data.get("variables") or []
        if not isinstance(variables_raw, list):
            raise ValueError("variables must be a list")
        variables = tuple(TemplateVariable.from_dict(v) for v in variables_raw)

        seen: set[str] = set()
        for variable in variables:
            if variable.name in seen:
                raise ValueError(f"variable '{variable.name}' is declared twice")
            seen.add(variable.name)

        if "steps" not in data:
            raise ValueError("template is missing required field 'steps'")
        steps_raw = data.get("steps") or []
        if not isinstance(steps_raw, list):
            raise ValueError("steps must be a list")
        steps = tuple(Step.from_dict(s) for s in steps_raw)

        return cls(
            name=_as_str(data.get("name")) or name,
            description=_as_str(data.get("description")) or "",
            emoji=_as_str(data.get("emoji")) or "",
            variables=variables,
            steps=steps,
            source=source,
        )
