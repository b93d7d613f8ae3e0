"""Tests for client config schema validation."""

import pytest
from pydantic import ValidationError

from darksky.config.schema import DEFAULT_BASE_URL, ClientConfig


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig(api_key="k")
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == 30.0

    def test_empty_base_url_resolved_eagerly(self):
        config = ClientConfig(api_key="k", base_url="")
        assert config.base_url == "https://api.darksky.net"

    def test_custom_base_url(self):
        config = ClientConfig(api_key="k", base_url="http://127.0.0.1:8080/")
        assert config.base_url == "http://127.0.0.1:8080"

    def test_api_key_required(self):
        with pytest.raises(ValidationError):
            ClientConfig()  # type: ignore[call-arg]

    def test_empty_api_key_rejected(self):
        with pytest.raises(ValidationError):
            ClientConfig(api_key="")

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            ClientConfig(api_key="k", timeout=0)

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            ClientConfig(api_key="k", units="si")

    def test_frozen(self):
        config = ClientConfig(api_key="k", base_url="")
        with pytest.raises(ValidationError):
            config.base_url = "http://other.example.com"

    def test_key_not_in_repr(self):
        assert "secret-key" not in repr(ClientConfig(api_key="secret-key"))
