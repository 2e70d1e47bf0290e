"""Template loading and discovery."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from rich.markup import escape

from newnew.console import console
from newnew.errors import LegacyTemplateFormatError, LoadError, TemplateParseError
from newnew.files import FileSystem
from newnew.templates.base import Template

logger = logging.getLogger(__name__)

# Constants
TEMPLATE_DIRNAME = "templates"
TEMPLATE_SUFFIXES: tuple[str, ...] = (".yml", ".yaml")

LEGACY_VARIABLES_HINT = "\n".join(
    (
        "The template format has changed. Variables should now be a sequence.",
        "Update your template from:",
        "  variables:",
        "    use_typescript:",
        "      prompt: \"Use TypeScript?\"",
        "To:",
        "  variables:",
        "    - name: use_typescript",
        "      prompt: \"Use TypeScript?\"",
    )
)


def get_config_root() -> Path:
    """Get the newnew configuration directory: ~/.config/newnew/."""
    return Path.home() / ".config" / "newnew"


def get_template_dir(config_root: Path | None = None) -> Path:
    """Get the user template directory: ~/.config/newnew/templates/."""
    return (config_root or get_config_root()) / TEMPLATE_DIRNAME


def get_example_templates_path() -> Path:
    """Get path to the example templates bundled with the package."""
    return Path(__file__).parent / "examples"


def discover_template_files(template_dir: Path) -> dict[str, Path]:
    """Discover template definition files within a directory.

    Returns dict mapping template name (file stem) -> definition path,
    in file name order.
    """
    templates: dict[str, Path] = {}
    if not template_dir.exists():
        return templates

    for item in sorted(template_dir.iterdir()):
        if item.is_file() and item.suffix in TEMPLATE_SUFFIXES:
            if item.stem in templates:
                logger.warning(
                    "Ignoring %s: template %r is already defined by %s",
                    item,
                    item.stem,
                    templates[item.stem],
                )
                continue
            templates[item.stem] = item

    return templates


def upgrade_legacy_variables(variables: dict[Any, Any]) -> list[dict[str, Any]]:
    """Convert mapping-shaped variables into the sequence shape.

    Declaration order is taken from mapping order, which the old format
    never defined, so conditions between variables may need reordering.
    """
    upgraded: list[dict[str, Any]] = []
    for name, body in variables.items():
        if body is None:
            body = {}
        if not isinstance(body, dict):
            raise ValueError(f"legacy variable '{name}' must be a mapping")
        upgraded.append({**body, "name": str(name)})
    return upgraded


def parse_template(
    data: Any,
    name: str,
    source: Path | None = None,
    upgrade_legacy: bool = False,
) -> Template:
    """Validate a parsed definition into a Template.

    Raises TemplateParseError (or LegacyTemplateFormatError for the old
    mapping-shaped ``variables``) when the definition is malformed.
    """
    if not isinstance(data, dict):
        raise TemplateParseError(source, "template definition must be a mapping")

    variables = data.get("variables")
    if isinstance(variables, dict):
        if not upgrade_legacy:
            raise LegacyTemplateFormatError(
                source, "variables: invalid type: map, expected a sequence"
            )
        logger.warning(
            "Upgrading legacy variables mapping in %s; variable order is approximate",
            source or name,
        )
        try:
            data = {**data, "variables": upgrade_legacy_variables(variables)}
        except ValueError as e:
            raise TemplateParseError(source, str(e)) from e

    try:
        return Template.from_dict(data, name=name, source=source)
    except ValueError as e:
        raise TemplateParseError(source, str(e)) from e


def load_template_file(path: Path, upgrade_legacy: bool = False) -> Template:
    """Load a single template definition file."""
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateParseError(path, f"cannot read file: {e}") from e
    except yaml.YAMLError as e:
        raise TemplateParseError(path, f"invalid YAML: {e}") from e

    return parse_template(data, path.stem, source=path, upgrade_legacy=upgrade_legacy)


def _report_parse_error(error: TemplateParseError) -> None:
    logger.warning("Skipping template %s: %s", error.path, error.reason)
    console.print(
        f"[yellow]⚠️  Error parsing template '{escape(str(error.path))}': "
        f"{escape(error.reason)}[/yellow]"
    )
    console.print("[dim]   This template will be skipped. Please check the YAML format.[/dim]")
    if isinstance(error, LegacyTemplateFormatError):
        console.print(f"\nℹ️  {LEGACY_VARIABLES_HINT}\n", style="cyan", markup=False)


def load_templates(template_dir: Path, upgrade_legacy: bool = False) -> dict[str, Template]:
    """Load every template definition in ``template_dir``.

    A file that fails to load is reported and skipped. A missing
    directory is created and counts as empty.

    Returns dict mapping template name -> Template.

    Raises:
        LoadError: if no template could be loaded. ``had_errors`` is True
            when at least one file failed to parse.
    """
    try:
        template_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise LoadError(
            f"Cannot create template directory {template_dir}: {e}", template_dir
        ) from e

    templates: dict[str, Template] = {}
    had_errors = False

    try:
        files = discover_template_files(template_dir)
    except OSError as e:
        raise LoadError(
            f"Cannot read template directory {template_dir}: {e}", template_dir
        ) from e

    for name, path in files.items():
        try:
            templates[name] = load_template_file(path, upgrade_legacy=upgrade_legacy)
        except TemplateParseError as e:
            had_errors = True
            _report_parse_error(e)

    if not templates:
        if had_errors:
            raise LoadError(
                "No valid templates found due to parsing errors. "
                "Please fix the template files and try again.",
                template_dir,
                had_errors=True,
            )
        raise LoadError(
            "No templates found. Try running with --examples to install example templates.",
            template_dir,
        )

    logger.debug("Loaded %d template(s) from %s", len(templates), template_dir)
    return templates


def install_example_templates(
    template_dir: Path,
    overwrite: bool = False,
    files: FileSystem | None = None,
) -> list[str]:
    """Copy the bundled example templates into ``template_dir``.

    Definition files are copied first, then the resource directories
    they reference.

    Args:
        overwrite: If True, replace existing entries. If False, skip them.

    Returns:
        List of entry names that were copied.
    """
    files = files or FileSystem()
    example_dir = get_example_templates_path()
    template_dir.mkdir(parents=True, exist_ok=True)

    copied: list[str] = []

    for path in discover_template_files(example_dir).values():
        dest = template_dir / path.name
        if dest.exists() and not overwrite:
            continue
        files.write_text(dest, files.read_text(path))
        copied.append(path.name)

    for path in sorted(example_dir.iterdir()):
        if not path.is_dir() or path.name.startswith(("_", ".")):
            continue
        dest = template_dir / path.name
        if dest.exists() and not overwrite:
            continue
        files.copy_tree(path, dest)
        copied.append(path.name)

    return copied
