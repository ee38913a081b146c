"""Unit tests for Config (gbc_admin.config).

Tests cover:
- Defaults and derived paths
- file_extension validation
- save/load
- from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from gbc_admin.config import Config


# ---------------------------------------------------------------------------
# Defaults & derived paths
# ---------------------------------------------------------------------------


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.root == Path(".")
        assert config.admin_root == "app/admin"
        assert config.menu_file == "menu.yml"
        assert config.file_extension == "rb"
        assert config.icon_prefix == "fa"
        assert config.default_target == "_self"
        assert config.legacy_empty_defaults is False

    @pytest.mark.unit
    def test_admin_path(self, tmp_path: Path):
        config = Config(root=tmp_path)
        assert config.admin_path == tmp_path / "app" / "admin"

    @pytest.mark.unit
    def test_menu_path(self, tmp_path: Path):
        config = Config(root=tmp_path, menu_file="navigation.yml")
        assert config.menu_path == tmp_path / "app" / "admin" / "navigation.yml"

    @pytest.mark.unit
    def test_custom_admin_root(self):
        config = Config(admin_root="lib/admin")
        assert config.menu_path == Path("lib/admin/menu.yml")


class TestFileExtension:
    @pytest.mark.unit
    def test_leading_dot_rejected(self):
        with pytest.raises(ValidationError):
            Config(file_extension=".rb")

    @pytest.mark.unit
    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            Config(file_extension="  ")

    @pytest.mark.unit
    def test_whitespace_stripped(self):
        assert Config(file_extension=" erb ").file_extension == "erb"


# ---------------------------------------------------------------------------
# Config.save / Config.load
# ---------------------------------------------------------------------------


class TestConfigSaveLoad:
    @pytest.mark.unit
    def test_load_roundtrip(self, tmp_path: Path):
        config = Config(root=tmp_path, icon_prefix="fas", legacy_empty_defaults=True)
        saved_path = config.save(tmp_path / "gbc-admin.json")

        loaded = Config.load(saved_path)
        assert loaded == config

    @pytest.mark.unit
    def test_save_creates_parent_dirs(self, tmp_path: Path):
        deep_path = tmp_path / "deep" / "nested" / "config.json"
        Config().save(deep_path)
        assert deep_path.exists()


# ---------------------------------------------------------------------------
# Config.from_env
# ---------------------------------------------------------------------------


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_defaults_when_no_env(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config == Config()

    @pytest.mark.unit
    def test_paths_from_env(self):
        env = {
            "GBC_ROOT": "/srv/app",
            "GBC_ADMIN_ROOT": "app/backoffice",
            "GBC_MENU_FILE": "nav.yml",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.menu_path == Path("/srv/app/app/backoffice/nav.yml")

    @pytest.mark.unit
    def test_rendering_options_from_env(self):
        env = {
            "GBC_FILE_EXTENSION": "erb",
            "GBC_ICON_PREFIX": "fas",
            "GBC_DEFAULT_TARGET": "_blank",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.file_extension == "erb"
        assert config.icon_prefix == "fas"
        assert config.default_target == "_blank"

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [("1", True), ("true", True), ("no", False)])
    def test_legacy_flag_from_env(self, value, expected):
        with patch.dict(os.environ, {"GBC_LEGACY_EMPTY_DEFAULTS": value}, clear=True):
            config = Config.from_env()
        assert config.legacy_empty_defaults is expected

    @pytest.mark.unit
    def test_invalid_extension_from_env(self):
        with patch.dict(os.environ, {"GBC_FILE_EXTENSION": ".rb"}, clear=True):
            with pytest.raises(ValidationError):
                Config.from_env()
