"""Project template definitions and discovery."""

from newnew.templates.base import (
    CopyAction,
    Step,
    Template,
    TemplateVariable,
    VariableKind,
)
from newnew.templates.loader import (
    LEGACY_VARIABLES_HINT,
    discover_template_files,
    get_config_root,
    get_example_templates_path,
    get_template_dir,
    install_example_templates,
    load_template_file,
    load_templates,
    parse_template,
)

__all__ = [
    "CopyAction",
    "LEGACY_VARIABLES_HINT",
    "Step",
    "Template",
    "TemplateVariable",
    "VariableKind",
    "discover_template_files",
    "get_config_root",
    "get_example_templates_path",
    "get_template_dir",
    "install_example_templates",
    "load_template_file",
    "load_templates",
    "parse_template",
]

# Example template names shipped with the package
EXAMPLE_TEMPLATES: tuple[str, ...] = (
    "platformio",
    "python",
    "rust",
)
