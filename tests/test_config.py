"""Unit tests for Config and GenerationOptions (laravel_package_cli.config).

Tests cover:
- GenerationOptions defaults and immutability
- Config defaults and validation
- save/load round trip
- from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from laravel_package_cli.config import Config, GenerationOptions


# ---------------------------------------------------------------------------
# GenerationOptions
# ---------------------------------------------------------------------------


class TestGenerationOptions:
    @pytest.mark.unit
    def test_defaults(self):
        options = GenerationOptions()
        assert options.force is False
        assert options.skip_config is False
        assert options.license == ""
        assert options.strict_license is False

    @pytest.mark.unit
    def test_frozen(self):
        options = GenerationOptions()
        with pytest.raises(ValidationError):
            options.force = True

    @pytest.mark.unit
    def test_any_license_string_accepted(self):
        assert GenerationOptions(license="wtfpl").license == "wtfpl"


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.destination_root == Path(".")
        assert config.template_dir is None
        assert config.staging_suffix == ".stub"
        assert config.quiet is False
        assert config.defaults == GenerationOptions()

    @pytest.mark.unit
    @pytest.mark.parametrize("suffix", ["", ".", "stub", ".a/b"])
    def test_bad_staging_suffix(self, suffix):
        with pytest.raises(ValidationError):
            Config(staging_suffix=suffix)

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        config = Config(
            destination_root=tmp_path / "out",
            staging_suffix=".tmp",
            quiet=True,
            defaults=GenerationOptions(license="mit", skip_config=True),
        )
        saved = config.save(tmp_path / "nested" / "config.json")
        assert saved.exists()
        assert Config.load(saved) == config


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_empty_env(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config == Config()

    @pytest.mark.unit
    def test_paths_and_suffix(self, tmp_path: Path):
        env = {
            "LPC_DESTINATION_ROOT": str(tmp_path),
            "LPC_TEMPLATE_DIR": str(tmp_path / "templates"),
            "LPC_STAGING_SUFFIX": ".partial",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.destination_root == tmp_path
        assert config.template_dir == tmp_path / "templates"
        assert config.staging_suffix == ".partial"

    @pytest.mark.unit
    def test_flags(self):
        env = {"LPC_QUIET": "yes", "LPC_FORCE": "1", "LPC_SKIP_CONFIG": "true"}
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.quiet is True
        assert config.defaults.force is True
        assert config.defaults.skip_config is True

    @pytest.mark.unit
    def test_false_flags(self):
        env = {"LPC_QUIET": "0", "LPC_FORCE": "no"}
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.quiet is False
        assert config.defaults.force is False

    @pytest.mark.unit
    def test_license(self):
        with patch.dict(os.environ, {"LPC_LICENSE": "Apache 2.0"}, clear=True):
            config = Config.from_env()
        assert config.defaults.license == "Apache 2.0"
