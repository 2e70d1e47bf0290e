"""Run a template's steps to materialize a project directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from rich.markup import escape

from newnew.console import console
from newnew.errors import CommandError, CopyError, PreconditionError
from newnew.files import FileSystem
from newnew.scaffold.conditions import conditions_met
from newnew.scaffold.substitution import expand_variables, tokenize_command
from newnew.shell import ShellRunner
from newnew.templates.base import CopyAction, Step

logger = logging.getLogger(__name__)


def check_precondition(step: Step, shell: ShellRunner) -> None:
    """Fail if the command named by ``step.check`` is not installed."""
    if step.check is None or shell.command_exists(step.check):
        return
    raise PreconditionError(step.name, step.error or f"{step.check} is not installed")


def copy_file(
    step_name: str,
    copy: CopyAction,
    environment: Mapping[str, str],
    project_path: Path,
    template_dir: Path,
    files: FileSystem,
) -> Path:
    """Copy one template file into the project with placeholders expanded.

    Returns the destination path.
    """
    source = template_dir / expand_variables(copy.source, environment)
    destination = project_path / expand_variables(copy.destination, environment)

    try:
        content = files.read_text(source)
    except (OSError, UnicodeDecodeError) as e:
        raise CopyError(
            step_name,
            source,
            destination,
            f"Failed to read template file '{source}': {e}",
        ) from e

    try:
        files.write_text(destination, expand_variables(content, environment))
    except OSError as e:
        raise CopyError(
            step_name,
            source,
            destination,
            f"Failed to write file '{destination}': {e}",
        ) from e

    logger.debug("Copied %s -> %s", source, destination)
    return destination


def run_commands(
    step_name: str,
    script: str,
    environment: Mapping[str, str],
    project_path: Path,
    shell: ShellRunner,
) -> None:
    """Run each non-blank line of ``script`` as its own command.

    Lines are expanded and tokenized individually; there is no shell,
    so pipes and redirections are passed through as plain arguments.
    """
    for line in script.split("\n"):
        line = line.strip()
        if not line:
            continue

        command = expand_variables(line, environment)
        argv = tokenize_command(command)
        if not argv:
            continue

        try:
            returncode = shell.run(argv, cwd=project_path)
        except OSError as e:
            raise CommandError(
                step_name, command, f"Failed to run command '{command}': {e}"
            ) from e

        if returncode != 0:
            raise CommandError(
                step_name,
                command,
                f"Command '{command}' failed with exit code {returncode}",
                returncode=returncode,
            )


def run_step(
    step: Step,
    environment: Mapping[str, str],
    project_path: Path,
    template_dir: Path,
    shell: ShellRunner,
    files: FileSystem,
) -> bool:
    """Run a single step.

    Returns False if the step was skipped because its conditions failed.
    """
    if not conditions_met(step.if_condition, step.if_not_condition, environment):
        logger.debug("Skipping step %s: condition not met", step.name)
        return False

    console.print(f"⚡ {escape(step.name)}")

    check_precondition(step, shell)

    if step.copy is not None:
        copy_file(step.name, step.copy, environment, project_path, template_dir, files)

    if step.run is not None:
        run_commands(step.name, step.run, environment, project_path, shell)

    return True


def execute_steps(
    steps: Iterable[Step],
    environment: Mapping[str, str],
    project_path: Path,
    template_dir: Path,
    shell: ShellRunner | None = None,
    files: FileSystem | None = None,
) -> None:
    """Run a template's steps in order against an existing project directory.

    ``project_dir`` is added to a copy of ``environment``. The first
    failing step raises a StepError subclass; files written by earlier
    steps are left in place.

    Args:
        steps: The template's steps, in declaration order.
        environment: Resolved variables, including ``project_name``.
        project_path: Directory the project is created in.
        template_dir: Directory copy sources are resolved against.
        shell: Command runner (defaults to ShellRunner).
        files: Filesystem access (defaults to FileSystem).
    """
    shell = shell or ShellRunner()
    files = files or FileSystem()

    env = dict(environment)
    env["project_dir"] = str(project_path.resolve())

    for step in steps:
        run_step(step, env, project_path, template_dir, shell, files)
