"""Interactive configuration wizard."""

from pathlib import Path

import click
from rich.markup import escape

from newnew.config.loader import config_exists, load_config, save_config
from newnew.config.schema import DEFAULT_CONFIG, NewnewConfig
from newnew.console import console


def run_config_wizard(path: Path, available_templates: list[str]) -> NewnewConfig:
    """Run interactive wizard to create the config file.

    Args:
        path: Where the configuration is saved.
        available_templates: Template names that can be enabled.

    Returns the created NewnewConfig.
    """
    current = load_config(path)
    console.print("\n[bold]Let's create your newnew configuration.[/bold]\n")

    config = NewnewConfig()

    # 1. Projects directory
    config.projects_dir = click.prompt(
        "Projects directory",
        default=current.projects_dir or DEFAULT_CONFIG.projects_dir,
    )

    # 2. Enabled templates
    config.enabled_templates = _wizard_select_templates(
        available_templates, current.enabled_templates
    )

    # 3. GitHub visibility
    config.github_private = click.confirm(
        "Create GitHub repositories as private?",
        default=current.github_private if current.github_private is not None else True,
    )

    # 4. Default branch
    config.default_branch = click.prompt(
        "Default git branch",
        default=current.default_branch or DEFAULT_CONFIG.default_branch,
    )

    # Review
    console.print("\n[bold]Review Configuration:[/bold]")
    for key, value in config.to_dict().items():
        console.print(f"  {key}: {escape(str(value))}")

    if click.confirm("\nSave configuration?", default=True):
        save_config(config, path)
        console.print(f"\n[green]Configuration saved to {path}[/green]")
    else:
        console.print("\n[yellow]Configuration not saved.[/yellow]")

    return config


def _wizard_select_templates(
    available: list[str], current: tuple[str, ...] | None
) -> tuple[str, ...] | None:
    """Prompt for the templates offered when creating a project."""
    if not available:
        return current

    console.print("\n[bold]Enabled Templates[/bold]")
    for i, name in enumerate(available, 1):
        console.print(f"    {i}. {escape(name)}")
    console.print("  [dim]Enter comma-separated names, or leave blank for all.[/dim]")

    default = ",".join(current) if current else ""
    answer: str = click.prompt("Templates", default=default, show_default=bool(default))
    names = tuple(n.strip() for n in answer.split(",") if n.strip())
    return names or None


def show_current_config(path: Path) -> None:
    """Display the current effective configuration."""
    config = load_config(path)
    console.print("\n[bold]Current Effective Configuration:[/bold]")
    console.print(f"  [dim]File: {path}[/dim]")
    console.print()

    for key, value in config.to_dict().items():
        console.print(f"  {key}: {escape(str(value))}")

    if config.enabled_templates is None:
        console.print("  enabled_templates: [dim](all)[/dim]")

    console.print()
    if config_exists(path):
        console.print("  [green]Config file: exists[/green]")
    else:
        console.print("  [dim]Config file: not found (using built-in defaults)[/dim]")
