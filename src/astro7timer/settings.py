from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ValidationError

VERSION = "0.1.0"

DEFAULT_SCHEME = "https"
DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_AGENT = f"astro7timer/{VERSION}"


class ClientSettings(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    scheme: Literal["http", "https"] = DEFAULT_SCHEME
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0, allow_inf_nan=False)
    agent: str = DEFAULT_AGENT

    @field_validator("scheme", mode="before")
    @classmethod
    def normalize_scheme(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("agent")
    @classmethod
    def validate_agent(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("agent must not be empty")
        return text


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ASTRO7TIMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    scheme: str = DEFAULT_SCHEME
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    agent: str = DEFAULT_AGENT


def build_settings(**values: Any) -> ClientSettings:
    """Validate client settings, dropping values left as ``None``."""
    provided = {key: value for key, value in values.items() if value is not None}
    try:
        return ClientSettings.model_validate(provided)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


@lru_cache(maxsize=1)
def load_settings() -> ClientSettings:
    try:
        env = EnvSettings()
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc
    return build_settings(scheme=env.scheme, timeout=env.timeout, agent=env.agent)
