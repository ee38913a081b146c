"""gbc-admin configuration.

Path conventions and generator knobs shared by the menu resolver and the
resource scaffolder.  Settings use a Pydantic v2 model so they are validated
at construction time and can be serialised to/from JSON or read from
environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global gbc-admin configuration.

    ``root`` is the Rails application root; ``admin_root`` is relative to it
    and holds both the menu file and the generated admin resources.
    """

    root: Path = Field(default=Path("."), description="Rails application root")
    admin_root: str = Field(default="app/admin", min_length=1)
    menu_file: str = Field(default="menu.yml", min_length=1)
    file_extension: str = Field(default="rb", description="Extension of generated files")
    icon_prefix: str = Field(default="fa", description="CSS class prefix for menu icons")
    default_target: str = Field(default="_self", min_length=1)
    legacy_empty_defaults: bool = Field(
        default=False,
        description="Forward absent icon/badge to the menu builder as empty strings",
    )

    @field_validator("file_extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        value = value.strip()
        if not value or value.startswith("."):
            raise ValueError("file_extension must be non-empty and have no leading dot")
        return value

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def admin_path(self) -> Path:
        """Absolute-or-relative path of the admin directory."""
        return self.root / self.admin_root

    @property
    def menu_path(self) -> Path:
        """Path to the menu YAML file."""
        return self.admin_path / self.menu_file

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.  Parent directories are created.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GBC_ROOT, GBC_ADMIN_ROOT, GBC_MENU_FILE, GBC_FILE_EXTENSION,
            GBC_ICON_PREFIX, GBC_DEFAULT_TARGET, GBC_LEGACY_EMPTY_DEFAULTS.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GBC_ROOT"):
            kwargs["root"] = Path(os.environ["GBC_ROOT"])
        if os.environ.get("GBC_ADMIN_ROOT"):
            kwargs["admin_root"] = os.environ["GBC_ADMIN_ROOT"]
        if os.environ.get("GBC_MENU_FILE"):
            kwargs["menu_file"] = os.environ["GBC_MENU_FILE"]
        if os.environ.get("GBC_FILE_EXTENSION"):
            kwargs["file_extension"] = os.environ["GBC_FILE_EXTENSION"]
        if os.environ.get("GBC_ICON_PREFIX"):
            kwargs["icon_prefix"] = os.environ["GBC_ICON_PREFIX"]
        if os.environ.get("GBC_DEFAULT_TARGET"):
            kwargs["default_target"] = os.environ["GBC_DEFAULT_TARGET"]
        if os.environ.get("GBC_LEGACY_EMPTY_DEFAULTS"):
            kwargs["legacy_empty_defaults"] = (
                os.environ["GBC_LEGACY_EMPTY_DEFAULTS"].strip().lower() in _TRUTHY
            )
        return cls(**kwargs)
