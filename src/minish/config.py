"""Configuration management for minish."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from minish.errors import ConfigurationError


class Settings(BaseSettings):
    """Shell settings."""

    model_config = SettingsConfigDict(
        env_prefix="MINISH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Interpreter
    program_name: str = Field(default="minish", description="Name shown in the start-up banner")
    prompt: str = Field(default="% ", description="Prompt marker written before each read")
    exit_directive: str = Field(default="exit", min_length=1, description="Line prefix that ends the shell")
    show_banner: bool = Field(default=True, description="Print the version banner on start-up")

    # Limits
    max_tokens: int = Field(default=64, ge=1, description="Maximum number of tokens kept from one line")
    max_line_length: int = Field(default=4096, ge=1, description="Maximum number of characters read per line")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")
    log_format: Literal["text", "rich"] = Field(default="text", description="Log format")


def load_settings(**overrides: Any) -> Settings:
    """Load settings from the environment, then apply the overrides that are not None.

    Raises:
        ConfigurationError: if the resulting settings are invalid.
    """
    updates = {key: value for key, value in overrides.items() if value is not None}
    try:
        # Keyword values take precedence over MINISH_* variables.
        settings = Settings(**updates)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc
    return settings
