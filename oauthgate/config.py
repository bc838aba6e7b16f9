# -*- coding: utf-8 -*-
"""Location: ./oauthgate/config.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Process settings for oauthgate.

Values are read from the environment (prefix ``OAUTHGATE_``) or a ``.env``
file. The ``oauth_*`` fields seed :class:`oauthgate.oauth2.models.OAuthServerConfig`
through ``OAuthServerConfig.from_settings``.

Examples:
    >>> s = Settings(log_level="DEBUG")
    >>> s.log_level
    'DEBUG'
    >>> s.oauth_access_token_lifetime
    3600
"""

# Standard
from functools import lru_cache
from typing import Any, Literal, Optional

# Third-Party
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """oauthgate configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OAUTHGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"
    log_to_file: bool = False
    log_file: Optional[str] = None
    log_folder: Optional[str] = None

    # OAuth engine
    oauth_passthrough_errors: bool = False
    oauth_debug: bool = False
    oauth_access_token_lifetime: int = 3600
    oauth_refresh_token_lifetime: int = 1209600
    oauth_auth_code_lifetime: int = 30
    oauth_client_id_regex: str = r"^[a-z0-9-_]{3,40}$"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Upper-case and check the log level name.

        Args:
            value: Raw level name.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level


@lru_cache
def get_settings(**overrides: Any) -> Settings:
    """Get cached settings instance.

    Args:
        **overrides: Field values that take precedence over the environment.

    Returns:
        Settings: The settings instance for these overrides.
    """
    return Settings(**overrides)


settings = get_settings()
