"""Configuration loading and the setup wizard."""

from newnew.config.loader import (
    config_exists,
    get_config_path,
    load_config,
    read_config,
    resolve_projects_dir,
    save_config,
)
from newnew.config.schema import DEFAULT_CONFIG, NewnewConfig

__all__ = [
    "DEFAULT_CONFIG",
    "NewnewConfig",
    "config_exists",
    "get_config_path",
    "load_config",
    "read_config",
    "resolve_projects_dir",
    "save_config",
]
