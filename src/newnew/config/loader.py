"""Configuration file loading."""

import logging
from pathlib import Path

import yaml
from rich.markup import escape

from newnew.config.schema import DEFAULT_CONFIG, NewnewConfig
from newnew.console import console
from newnew.errors import ConfigError
from newnew.templates.loader import get_config_root

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"


def get_config_path(config_root: Path | None = None) -> Path:
    """Get path to the config file: ~/.config/newnew/config.yaml."""
    return (config_root or get_config_root()) / CONFIG_FILENAME


def config_exists(path: Path | None = None) -> bool:
    """Check if the config file exists."""
    return (path or get_config_path()).exists()


def read_config(path: Path) -> NewnewConfig | None:
    """Read a config file, return None if not found or empty.

    Raises:
        ConfigError: if the file cannot be read or is not a valid config.
    """
    if not path.exists():
        return None
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    try:
        return NewnewConfig.from_dict(data)
    except ValueError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e


def load_config(path: Path | None = None) -> NewnewConfig:
    """Load the effective configuration.

    Settings from the config file are layered over the built-in defaults.
    A broken config file is reported and the defaults are used instead.
    """
    path = path or get_config_path()
    config = DEFAULT_CONFIG

    try:
        file_config = read_config(path)
    except ConfigError as e:
        logger.warning("Using default configuration: %s", e)
        console.print(f"[yellow]⚠️  {escape(str(e))}[/yellow]")
        console.print("[dim]   Using default configuration.[/dim]")
        return config

    if file_config is not None:
        config = config.merge(file_config)

    return config


def save_config(config: NewnewConfig, path: Path) -> None:
    """Save config to a YAML file.

    Creates parent directories if needed.
    Only saves non-None values.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.to_dict()
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


def resolve_projects_dir(projects_dir: str) -> Path:
    """Expand a leading ``~`` in the configured projects directory."""
    return Path(projects_dir).expanduser()
