"""Menu file loading.

Reads ``menu.yml`` with PyYAML and tells apart the three ways it can be
unusable: missing, malformed, or parsed into something other than a mapping.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from gbc_admin.errors import ConfigError, MenuFileNotFoundError, MenuParseError


def load_menu_config(path: str | Path) -> dict[str, Any]:
    """Load and parse a menu YAML file.

    The file is read on every call; nothing is cached.

    Args:
        path: Path to the menu file.

    Returns:
        The parsed top-level mapping (group key -> group entry).

    Raises:
        MenuFileNotFoundError: If the file does not exist.
        MenuParseError: If the file is not valid YAML.
        ConfigError: If the document root is not a mapping (an empty file
            included).
    """
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise MenuFileNotFoundError("menu file not found", source=file_path) from exc
    except UnicodeDecodeError as exc:
        raise MenuParseError(f"menu file is not valid UTF-8: {exc}", source=file_path) from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise MenuParseError(f"menu file is not valid YAML: {exc}", source=file_path) from exc

    if not isinstance(data, dict):
        raise ConfigError("menu config root is not a mapping", source=file_path)
    return data
