"""Unit tests for Config and InstallConfig (boilerplate.config).

Tests cover:
- InstallConfig defaults, command construction, validation
- Config defaults, save/load round trip, from_env
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from boilerplate.config import Config, InstallConfig


# ---------------------------------------------------------------------------
# InstallConfig
# ---------------------------------------------------------------------------


class TestInstallConfig:
    @pytest.mark.unit
    def test_defaults(self):
        cfg = InstallConfig()
        assert cfg.package_manager == "npm"
        assert cfg.install_args == ["install"]
        assert cfg.skip is False

    @pytest.mark.unit
    def test_command(self):
        cfg = InstallConfig()
        assert cfg.command(["express", "ejs"]) == ["npm", "install", "express", "ejs"]

    @pytest.mark.unit
    def test_dev_command(self):
        cfg = InstallConfig()
        assert cfg.command(["nodemon"], dev=True) == ["npm", "install", "--save-dev", "nodemon"]

    @pytest.mark.unit
    def test_other_package_manager(self):
        cfg = InstallConfig(package_manager="pnpm", install_args=["add"], dev_flag="-D")
        assert cfg.command(["nodemon"], dev=True) == ["pnpm", "add", "-D", "nodemon"]

    @pytest.mark.unit
    def test_timeout_lower_bound(self):
        with pytest.raises(ValidationError):
            InstallConfig(timeout=1)


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.layout == "fullstack"
        assert config.catalog_path is None
        assert isinstance(config.install, InstallConfig)

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        config = Config(layout="basic", install=InstallConfig(skip=True))
        path = config.save(tmp_path / "nested" / "config.json")
        assert path.exists()

        loaded = Config.load(path)
        assert loaded.layout == "basic"
        assert loaded.install.skip is True

    @pytest.mark.unit
    def test_from_env_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            config = Config.from_env()
        assert config.layout == "fullstack"
        assert config.install.package_manager == "npm"

    @pytest.mark.unit
    def test_from_env_overrides(self):
        env = {
            "BP_LAYOUT": "split",
            "BP_CATALOG": "/tmp/catalog.json",
            "BP_PACKAGE_MANAGER": "yarn",
            "BP_INSTALL_TIMEOUT": "90",
            "BP_SKIP_INSTALL": "true",
        }
        with patch.dict("os.environ", env, clear=True):
            config = Config.from_env()
        assert config.layout == "split"
        assert config.catalog_path == Path("/tmp/catalog.json")
        assert config.install.package_manager == "yarn"
        assert config.install.timeout == 90
        assert config.install.skip is True

    @pytest.mark.unit
    def test_from_env_skip_install_false(self):
        with patch.dict("os.environ", {"BP_SKIP_INSTALL": "no"}, clear=True):
            config = Config.from_env()
        assert config.install.skip is False
