"""Interactive prompts used to collect template variables."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

import click
from rich.markup import escape

from newnew.console import console


class Prompter(ABC):
    """Capability for asking the user for values."""

    @abstractmethod
    def text(self, prompt: str) -> str:
        """Ask for a line of text. An empty answer returns ""."""
        ...

    @abstractmethod
    def confirm(self, prompt: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...

    @abstractmethod
    def select(self, prompt: str, options: Sequence[str]) -> str:
        """Ask for exactly one of ``options``."""
        ...

    @abstractmethod
    def multiselect(self, prompt: str, options: Sequence[str]) -> list[str]:
        """Ask for any number of ``options``, returned in the order chosen."""
        ...


def _match_option(answer: str, options: Sequence[str]) -> str | None:
    """Resolve an answer given as an option name or 1-based number."""
    answer = answer.strip()
    if answer in options:
        return answer
    if answer.isdigit() and 1 <= int(answer) <= len(options):
        return options[int(answer) - 1]
    return None


def _print_options(options: Sequence[str]) -> None:
    for i, option in enumerate(options, 1):
        console.print(f"  {i}. {escape(option)}")


class ClickPrompter(Prompter):
    """Prompter backed by click prompts and the rich console."""

    def text(self, prompt: str) -> str:
        result: str = click.prompt(prompt, default="", show_default=False)
        return result.strip()

    def confirm(self, prompt: str, default: bool = False) -> bool:
        return click.confirm(prompt, default=default)

    def select(self, prompt: str, options: Sequence[str]) -> str:
        console.print(f"\n[bold]{escape(prompt)}[/bold]")
        _print_options(options)

        while True:
            answer: str = click.prompt(f"Choose (1-{len(options)})")
            choice = _match_option(answer, options)
            if choice is not None:
                return choice
            console.print(f"[red]Invalid choice: {escape(answer)}[/red]")

    def multiselect(self, prompt: str, options: Sequence[str]) -> list[str]:
        console.print(f"\n[bold]{escape(prompt)}[/bold]")
        _print_options(options)
        console.print("[dim]Enter comma-separated numbers, or leave blank for none.[/dim]")

        while True:
            answer: str = click.prompt("Choose", default="", show_default=False)
            chosen: list[str] = []
            invalid: list[str] = []
            for part in answer.split(","):
                if not part.strip():
                    continue
                choice = _match_option(part, options)
                if choice is None:
                    invalid.append(part.strip())
                elif choice not in chosen:
                    chosen.append(choice)
            if not invalid:
                return chosen
            console.print(f"[red]Invalid choice: {escape(', '.join(invalid))}[/red]")
