"""Configuration schema for newnew."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass
class NewnewConfig:
    """newnew configuration schema.

    None values indicate "not set" and will use defaults or be inherited.
    """

    # Directory new projects are created in
    projects_dir: str | None = None

    # Template names offered for selection (None = all loaded templates)
    enabled_templates: tuple[str, ...] | None = None

    # GitHub repository settings
    github_private: bool | None = None
    default_branch: str | None = None

    def merge(self, other: NewnewConfig) -> NewnewConfig:
        """Merge another config into this one.

        Values from `other` take precedence when they are not None.
        Returns a new NewnewConfig instance.
        """
        return NewnewConfig(
            projects_dir=(
                other.projects_dir if other.projects_dir is not None else self.projects_dir
            ),
            enabled_templates=(
                other.enabled_templates
                if other.enabled_templates is not None
                else self.enabled_templates
            ),
            github_private=(
                other.github_private
                if other.github_private is not None
                else self.github_private
            ),
            default_branch=(
                other.default_branch
                if other.default_branch is not None
                else self.default_branch
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary, excluding None values."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            result[f.name] = list(value) if isinstance(value, tuple) else value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NewnewConfig:
        """Create a NewnewConfig from a dictionary.

        Unknown keys are ignored. Raises ValueError for values of the
        wrong type.
        """
        projects_dir_raw = data.get("projects_dir")
        projects_dir = str(projects_dir_raw) if projects_dir_raw is not None else None

        enabled_raw = data.get("enabled_templates")
        enabled_templates: tuple[str, ...] | None = None
        if enabled_raw is not None:
            if not isinstance(enabled_raw, list):
                raise ValueError("enabled_templates must be a list of template names")
            enabled_templates = tuple(str(t) for t in enabled_raw)

        private_raw = data.get("github_private")
        github_private = bool(private_raw) if private_raw is not None else None

        branch_raw = data.get("default_branch")
        default_branch = str(branch_raw) if branch_raw is not None else None

        return cls(
            projects_dir=projects_dir,
            enabled_templates=enabled_templates,
            github_private=github_private,
            default_branch=default_branch,
        )


# Default configuration values (used when not specified anywhere)
DEFAULT_CONFIG = NewnewConfig(
    projects_dir="~/Dev",
    github_private=True,
    default_branch="main",
)
