"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from darksky.config.schema import ClientConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def sample_body() -> bytes:
    """Raw body of a recorded forecast response."""
    return (FIXTURE_DIR / "forecast_sample.json").read_bytes()


@pytest.fixture
def sample_forecast_json(sample_body: bytes) -> dict:
    """Recorded forecast response parsed into a dict."""
    return json.loads(sample_body)


@pytest.fixture
def client_config() -> ClientConfig:
    """Return a ClientConfig pointing at a test host."""
    return ClientConfig(api_key="gibberish-key", base_url="https://test-darksky.example.com")


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {"api_key": "yaml-key", "timeout": 5.0}
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
