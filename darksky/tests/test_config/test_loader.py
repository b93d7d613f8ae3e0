"""Tests for YAML config loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from darksky.config.loader import load_config
from darksky.config.schema import DEFAULT_BASE_URL


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.api_key == "yaml-key"
        assert config.timeout == 5.0
        assert config.base_url == DEFAULT_BASE_URL

    def test_blank_base_url_uses_default(self, fixtures_dir: Path):
        config = load_config(fixtures_dir / "config_default.yaml")
        assert config.api_key == "test-key-0123456789"
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == 10.0

    def test_empty_yaml_missing_key(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValidationError, match="api_key"):
            load_config(path)

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("api_key: k\nretries: 3\n")
        with pytest.raises(ValidationError):
            load_config(path)
