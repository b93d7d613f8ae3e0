"""YAML config loader for the Dark Sky client."""

from pathlib import Path

import yaml

from darksky.config.schema import ClientConfig


def load_config(path: str | Path) -> ClientConfig:
    """Load and validate client settings from a YAML file.

    Raises pydantic.ValidationError if api_key is missing or a value is invalid.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    # "base_url:" with no value means use the default endpoint
    if "base_url" in raw and raw["base_url"] is None:
        raw["base_url"] = ""

    return ClientConfig(**raw)
