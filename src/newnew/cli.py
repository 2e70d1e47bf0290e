"""Command-line interface for newnew."""

import logging
from pathlib import Path

import click
from rich.markup import escape

from newnew import __version__
from newnew.config.loader import get_config_path, load_config
from newnew.config.wizard import run_config_wizard, show_current_config
from newnew.console import console, err_console
from newnew.errors import LoadError, NewnewError
from newnew.git import GitOperations
from newnew.project import create_project, prompt_project_config, validate_project_name
from newnew.prompts import ClickPrompter
from newnew.templates import (
    discover_template_files,
    get_template_dir,
    install_example_templates,
    load_templates,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: If True, enable DEBUG level logging
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"newnew [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


def _template_dir(ctx: click.Context) -> Path:
    path: Path | None = ctx.obj.get("template_dir")
    return path or get_template_dir()


def _config_path(ctx: click.Context) -> Path:
    path: Path | None = ctx.obj.get("config_path")
    return path or get_config_path()


def _install_examples(template_dir: Path, overwrite: bool = False) -> None:
    copied = install_example_templates(template_dir, overwrite=overwrite)
    if copied:
        console.print(f"[green]Copied {len(copied)} example template entries to {template_dir}[/green]")
    else:
        console.print("[dim]Example templates already installed.[/dim]")


def _print_error(error: NewnewError) -> None:
    err_console.print(f"[red]❌ Error creating project: {escape(str(error))}[/red]")
    if isinstance(error, LoadError):
        if error.had_errors:
            err_console.print("[dim]Fix the template files listed above and try again.[/dim]")
        else:
            err_console.print(
                "[dim]Run 'newnew new --examples' or 'newnew templates install' "
                "to install example templates.[/dim]"
            )


@click.group(invoke_without_command=True)
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--template-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="NEWNEW_TEMPLATE_DIR",
    help="Directory containing template definitions.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="NEWNEW_CONFIG",
    help="Path to the configuration file.",
)
@click.pass_context
def main(
    ctx: click.Context,
    verbose: bool,
    template_dir: Path | None,
    config_path: Path | None,
) -> None:
    """newnew - create new projects from templates."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["template_dir"] = template_dir
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand is None:
        console.print("[bold]newnew[/bold] - create new projects from templates")
        console.print("\nRun [cyan]newnew new[/cyan] to create a project.")
        console.print("Run [cyan]newnew --help[/cyan] for available commands.")


@main.command()
@click.argument("name", required=False)
@click.option("--template", "-t", "template_name", help="Template to use.")
@click.option(
    "--examples", is_flag=True, help="Install example templates before starting."
)
@click.option(
    "--github/--no-github",
    default=None,
    help="Create a GitHub repository (asked when not given).",
)
@click.option(
    "--git/--no-git",
    "init_git",
    default=False,
    help="Initialize a git repository (implied by --github).",
)
@click.option(
    "--base-dir",
    type=click.Path(file_okay=False),
    help="Create the project here instead of the configured projects directory.",
)
@click.option(
    "--upgrade-legacy",
    is_flag=True,
    help="Accept templates that declare variables as a mapping.",
)
@click.pass_context
def new(
    ctx: click.Context,
    name: str | None,
    template_name: str | None,
    examples: bool,
    github: bool | None,
    init_git: bool,
    base_dir: str | None,
    upgrade_legacy: bool,
) -> None:
    """Create a new project from a template."""
    if name is not None:
        problem = validate_project_name(name)
        if problem is not None:
            raise click.BadParameter(problem, param_hint="NAME")

    template_dir = _template_dir(ctx)
    config = load_config(_config_path(ctx))

    try:
        if examples:
            _install_examples(template_dir)

        templates = load_templates(template_dir, upgrade_legacy=upgrade_legacy)
        project = prompt_project_config(
            templates,
            config,
            ClickPrompter(),
            name=name,
            template_name=template_name,
            create_github_repo=github,
            base_path=base_dir,
        )

        console.print(f"\n[bold]Creating {escape(project.name)}[/bold] [dim]({project.project_path})[/dim]")
        project_path = create_project(project, template_dir)

        if init_git or project.create_github_repo:
            git = GitOperations()
            branch = config.default_branch or "main"
            git.init_repository(project_path, branch=branch)
            if project.create_github_repo:
                private = config.github_private if config.github_private is not None else True
                git.create_github_repository(
                    project_path, project.name, private=private, branch=branch
                )
    except NewnewError as e:
        logger.debug("Project creation failed", exc_info=True)
        _print_error(e)
        ctx.exit(1)

    console.print("✨ Project created successfully!")


@main.group(invoke_without_command=True)
@click.pass_context
def templates(ctx: click.Context) -> None:
    """Manage project templates."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(templates_list)


@templates.command("list")
@click.option("--verbose", "-v", is_flag=True, help="Show template details.")
@click.option(
    "--upgrade-legacy",
    is_flag=True,
    help="Accept templates that declare variables as a mapping.",
)
@click.pass_context
def templates_list(ctx: click.Context, verbose: bool = False, upgrade_legacy: bool = False) -> None:
    """List available templates."""
    template_dir = _template_dir(ctx)
    config = load_config(_config_path(ctx))

    try:
        loaded = load_templates(template_dir, upgrade_legacy=upgrade_legacy)
    except LoadError as e:
        console.print(f"[yellow]{escape(str(e))}[/yellow]")
        console.print(f"[dim]Template directory: {template_dir}[/dim]")
        return

    console.print(f"[bold]Available Templates ({template_dir}):[/bold]\n")
    for key, tmpl in loaded.items():
        disabled = (
            config.enabled_templates is not None and key not in config.enabled_templates
        )
        status = " [dim](disabled)[/dim]" if disabled else ""
        console.print(f"  {escape(tmpl.label)} [cyan]{escape(key)}[/cyan]{status}")
        if verbose:
            if tmpl.description:
                console.print(f"    {escape(tmpl.description.strip())}")
            console.print(
                f"    [dim]Variables: {len(tmpl.variables)}, Steps: {len(tmpl.steps)}[/dim]"
            )
            if tmpl.variables:
                names = ", ".join(v.name for v in tmpl.variables)
                console.print(f"    [dim]Asks for: {escape(names)}[/dim]")
            console.print()


@templates.command("install")
@click.option("--overwrite", is_flag=True, help="Replace existing templates.")
@click.pass_context
def templates_install(ctx: click.Context, overwrite: bool) -> None:
    """Install the bundled example templates."""
    _install_examples(_template_dir(ctx), overwrite=overwrite)


@main.command("config")
@click.option("--show", is_flag=True, help="Show the current effective configuration.")
@click.pass_context
def config_command(ctx: click.Context, show: bool) -> None:
    """Create or show the newnew configuration."""
    path = _config_path(ctx)
    if show:
        show_current_config(path)
        return

    available = sorted(discover_template_files(_template_dir(ctx)))
    run_config_wizard(path, available)
