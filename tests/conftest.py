"""Shared pytest fixtures for the gbc-admin test suite.

Provides reusable fixtures for:
- Menu configuration mappings and menu files on disk
- A Rails-like application root in a temp directory
- Configured resolver and scaffolder instances
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import pytest
import yaml

from gbc_admin.config import Config
from gbc_admin.menu import MenuEntryResolver
from gbc_admin.scaffolder import ResourceScaffolder


# ---------------------------------------------------------------------------
# Menu configuration
# ---------------------------------------------------------------------------

_MENU: dict[str, Any] = {
    "admin": {
        "label": "Admin",
        "priority": 1,
        "items": {
            "dashboard": {
                "label": "Dashboard",
                "url": "/admin/dashboard",
                "icon": "fa-dashboard",
                "priority": 1,
            },
        },
    },
    "analytics": {
        "label": "Analytics",
        "priority": 2,
        "items": {
            "sales_report": {
                "url": "/admin/sales",
                "label": "Sales Report",
                "icon": "chart-line",
                "priority": 5,
                "target": "_blank",
                "badge": {"text": "New", "type": "success"},
            },
            "visitors": {
                "url": "/admin/visitors",
                "priority": 3,
            },
        },
    },
    "settings_area": {
        "items": {
            "general_settings": {"url": "/admin/settings"},
        },
    },
}


@pytest.fixture
def menu() -> dict[str, Any]:
    """A menu mapping as loaded from ``menu.yml`` (a fresh copy per test)."""
    return copy.deepcopy(_MENU)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def app_root(tmp_path: Path) -> Path:
    """Temporary Rails application root with an empty ``app/admin`` directory."""
    root = tmp_path / "rails-app"
    (root / "app" / "admin").mkdir(parents=True)
    yield root


@pytest.fixture
def config(app_root: Path) -> Config:
    """Config pointing at the temporary application root."""
    return Config(root=app_root)


@pytest.fixture
def menu_file(config: Config, menu: dict[str, Any]) -> Path:
    """The ``menu`` fixture written to ``app/admin/menu.yml``."""
    path = config.menu_path
    path.write_text(yaml.safe_dump(menu, sort_keys=False), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------

@pytest.fixture
def resolver(config: Config) -> MenuEntryResolver:
    return MenuEntryResolver(config)


@pytest.fixture
def scaffolder(config: Config) -> ResourceScaffolder:
    return ResourceScaffolder(config)
