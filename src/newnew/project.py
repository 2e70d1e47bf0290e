"""Project session: choose a template, collect answers, create the project."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape

from newnew.config.loader import resolve_projects_dir
from newnew.config.schema import NewnewConfig
from newnew.console import console
from newnew.errors import LoadError, NewnewError, UnknownTemplateError
from newnew.files import FileSystem
from newnew.prompts import Prompter
from newnew.scaffold.executor import execute_steps
from newnew.scaffold.resolver import resolve_variables
from newnew.shell import ShellRunner
from newnew.templates.base import Template

logger = logging.getLogger(__name__)


@dataclass
class ProjectConfig:
    """Everything needed to create one project."""

    name: str
    template_name: str
    template: Template
    base_path: str
    create_github_repo: bool = False
    variables: dict[str, str] = field(default_factory=dict)

    @property
    def project_path(self) -> Path:
        """Directory the project is created in, with ``~`` expanded."""
        return resolve_projects_dir(self.base_path) / self.name


def enabled_templates(
    templates: dict[str, Template], config: NewnewConfig
) -> dict[str, Template]:
    """Filter loaded templates by the config's ``enabled_templates``."""
    if config.enabled_templates is None:
        return dict(templates)
    return {
        name: tmpl for name, tmpl in templates.items() if name in config.enabled_templates
    }


def validate_project_name(name: str) -> str | None:
    """Return a reason the project name is unusable, or None if it is fine."""
    if not name:
        return "Project name cannot be empty."
    if name in (".", "..") or "/" in name or "\\" in name:
        return f"Invalid project name: {name}"
    return None


def prompt_project_name(prompter: Prompter) -> str:
    """Ask for a project name until a usable one is given."""
    while True:
        name = prompter.text("Project name")
        problem = validate_project_name(name)
        if problem is None:
            return name
        console.print(f"[red]{escape(problem)}[/red]")


def select_template(
    templates: dict[str, Template],
    prompter: Prompter,
    template_name: str | None = None,
) -> str:
    """Pick a template by name, or ask when no name is given.

    Returns the key of the chosen template.
    """
    if not templates:
        raise LoadError("No enabled templates. Check enabled_templates in your config.")

    if template_name is not None:
        if template_name not in templates:
            raise UnknownTemplateError(template_name, sorted(templates))
        return template_name

    console.print("\n[bold]Available project templates:[/bold]")
    for key, tmpl in templates.items():
        description = f" - {escape(tmpl.description)}" if tmpl.description else ""
        console.print(f"  {escape(tmpl.label)} [dim]({escape(key)})[/dim]{description}")

    return prompter.select("Choose template", list(templates))


def prompt_project_config(
    templates: dict[str, Template],
    config: NewnewConfig,
    prompter: Prompter,
    name: str | None = None,
    template_name: str | None = None,
    create_github_repo: bool | None = None,
    base_path: str | None = None,
) -> ProjectConfig:
    """Interactively build a ProjectConfig.

    Values passed in explicitly are not asked for.

    Args:
        templates: Loaded templates, keyed by name.
        config: Effective configuration (projects dir, enabled templates).
        prompter: Source of user answers.
        name: Project name, if already known.
        template_name: Template key, if already known.
        create_github_repo: Whether to create a GitHub repository, if known.
        base_path: Override for the configured projects directory.
    """
    if name is None:
        name = prompt_project_name(prompter)
    else:
        problem = validate_project_name(name)
        if problem is not None:
            raise ValueError(problem)

    key = select_template(enabled_templates(templates, config), prompter, template_name)
    # Each session works on its own copy of the template
    template = dataclasses.replace(templates[key])

    variables = resolve_variables(template.variables, {"project_name": name}, prompter)

    if create_github_repo is None:
        create_github_repo = prompter.confirm("Create GitHub repository?", default=False)

    return ProjectConfig(
        name=name,
        template_name=key,
        template=template,
        base_path=base_path or config.projects_dir or "~/Dev",
        create_github_repo=create_github_repo,
        variables=variables,
    )


def create_project(
    project: ProjectConfig,
    template_dir: Path,
    shell: ShellRunner | None = None,
    files: FileSystem | None = None,
) -> Path:
    """Create the project directory and run the template's steps in it.

    Returns the project path. On failure the partially created project
    is left in place.
    """
    project_path = project.project_path
    try:
        project_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise NewnewError(f"Cannot create project directory {project_path}: {e}") from e
    logger.debug("Creating %s from template %s", project_path, project.template_name)

    execute_steps(
        project.template.steps,
        project.variables,
        project_path,
        template_dir,
        shell=shell,
        files=files,
    )
    return project_path
