"""Exceptions raised while loading templates and creating projects."""

from __future__ import annotations

from pathlib import Path


class NewnewError(Exception):
    """Base exception for all newnew failures."""


class LoadError(NewnewError):
    """Raised when no usable templates could be loaded.

    ``had_errors`` separates an empty template directory from one where
    every definition failed to parse, so callers can give different advice.
    """

    def __init__(
        self,
        message: str,
        template_dir: Path | None = None,
        had_errors: bool = False,
    ) -> None:
        super().__init__(message)
        self.template_dir = template_dir
        self.had_errors = had_errors


class TemplateParseError(NewnewError):
    """Raised when a single template definition cannot be read or validated."""

    def __init__(self, path: Path | None, message: str) -> None:
        self.path = path
        self.reason = message
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class LegacyTemplateFormatError(TemplateParseError):
    """Raised for templates that declare ``variables`` as a mapping."""


class UnknownTemplateError(NewnewError):
    """Raised when a requested template is not among the loaded ones."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        choices = ", ".join(available) if available else "(none)"
        super().__init__(f"Unknown template: {name}. Available templates: {choices}")


class StepError(NewnewError):
    """Base exception for a step that aborted project creation."""

    def __init__(self, step: str, message: str) -> None:
        super().__init__(message)
        self.step = step


class PreconditionError(StepError):
    """Raised when a step's required command is not installed."""


class CopyError(StepError):
    """Raised when a copy step cannot read its source or write its destination."""

    def __init__(self, step: str, source: Path, destination: Path, message: str) -> None:
        super().__init__(step, message)
        self.source = source
        self.destination = destination


class CommandError(StepError):
    """Raised when a run step command cannot be spawned or exits non-zero."""

    def __init__(
        self,
        step: str,
        command: str,
        message: str,
        returncode: int | None = None,
    ) -> None:
        super().__init__(step, message)
        self.command = command
        self.returncode = returncode


class ConfigError(NewnewError):
    """Raised when the configuration file exists but cannot be used."""


class GitError(NewnewError):
    """Raised when git or GitHub repository setup fails."""
