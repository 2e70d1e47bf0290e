"""Shared fixtures and test doubles."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest
import yaml

from newnew.prompts import Prompter
from newnew.shell import ShellRunner


class Answers(list):
    """Successive answers for a prompt that is asked more than once."""


class FakePrompter(Prompter):
    """Prompter that answers from a script keyed by prompt text.

    Every prompt it receives is recorded in ``asked`` so tests can check
    what was (not) asked.
    """

    def __init__(self, answers: dict[str, Any] | None = None) -> None:
        self.answers = dict(answers or {})
        self.asked: list[str] = []

    def _answer(self, prompt: str, fallback: Any) -> Any:
        self.asked.append(prompt)
        if prompt not in self.answers:
            return fallback
        answer = self.answers[prompt]
        if isinstance(answer, Answers):
            return answer.pop(0)
        return answer

    def text(self, prompt: str) -> str:
        return self._answer(prompt, "")

    def confirm(self, prompt: str, default: bool = False) -> bool:
        return self._answer(prompt, default)

    def select(self, prompt: str, options: Sequence[str]) -> str:
        return self._answer(prompt, options[0])

    def multiselect(self, prompt: str, options: Sequence[str]) -> list[str]:
        return list(self._answer(prompt, []))


class FakeShell(ShellRunner):
    """ShellRunner that records commands instead of running them."""

    def __init__(
        self,
        installed: Sequence[str] = (),
        returncodes: dict[str, int] | None = None,
        spawn_errors: Sequence[str] = (),
    ) -> None:
        self.installed = set(installed)
        self.returncodes = returncodes or {}
        self.spawn_errors = set(spawn_errors)
        self.calls: list[tuple[list[str], Path]] = []

    def run(self, argv: Sequence[str], cwd: Path) -> int:
        argv = list(argv)
        self.calls.append((argv, cwd))
        if argv[0] in self.spawn_errors:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        return self.returncodes.get(argv[0], 0)

    def command_exists(self, command: str) -> bool:
        return command in self.installed

    @property
    def commands(self) -> list[list[str]]:
        return [argv for argv, _ in self.calls]


@pytest.fixture
def prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture
def shell() -> FakeShell:
    return FakeShell()


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    path = tmp_path / "templates"
    path.mkdir()
    return path


def write_template(template_dir: Path, name: str, data: dict[str, Any]) -> Path:
    """Write a template definition as YAML and return its path."""
    path = template_dir / f"{name}.yml"
    path.write_text(yaml.safe_dump(data, sort_keys=False, allow_unicode=True))
    return path
