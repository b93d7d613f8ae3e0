"""Pydantic v2 configuration schema for the Dark Sky client."""

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://api.darksky.net"


class ClientConfig(BaseModel):
    """Immutable client settings.

    An empty base_url is replaced by DEFAULT_BASE_URL at validation time, so
    the value never changes after construction.
    """

    model_config = {"extra": "forbid", "frozen": True}

    api_key: str = Field(min_length=1, repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=30.0, gt=0.0)

    @field_validator("base_url")
    @classmethod
    def _default_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        return value or DEFAULT_BASE_URL
