# -*- coding: utf-8 -*-
"""Location: ./oauthgate/oauth2/models.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Typed configuration for the OAuth2 engine.
"""

# Standard
from dataclasses import dataclass, field, fields, replace
import re
from typing import Any, Dict, List, Mapping, Optional

# First-Party
from oauthgate.config import Settings
from oauthgate.oauth2.exceptions import OAuthServerConfigError

# Engine option names as the engine spells them.
_CAMEL_CASE_ALIASES = {
    "passthroughErrors": "passthrough_errors",
    "continueAfterResponse": "continue_after_response",
    "accessTokenLifetime": "access_token_lifetime",
    "refreshTokenLifetime": "refresh_token_lifetime",
    "authCodeLifetime": "auth_code_lifetime",
    "clientIdRegex": "client_id_regex",
}


@dataclass(slots=True)
class OAuthServerConfig:
    """Configuration handed to the engine factory.

    ``model`` is the engine's storage/validation model object and ``grants``
    the grant types it should accept; both are opaque to the adapter.
    Options the adapter does not know about travel in ``extra``.

    Examples:
        >>> cfg = OAuthServerConfig(grants=["password"])
        >>> cfg.passthrough_errors, cfg.continue_after_response
        (False, False)
        >>> cfg.with_continue_after_response().continue_after_response
        True
    """

    model: Any = None
    grants: List[str] = field(default_factory=list)
    debug: bool = False
    passthrough_errors: bool = False
    continue_after_response: bool = False
    access_token_lifetime: Optional[int] = 3600
    refresh_token_lifetime: Optional[int] = 1209600
    auth_code_lifetime: int = 30
    client_id_regex: str = r"^[a-z0-9-_]{3,40}$"
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("access_token_lifetime", "refresh_token_lifetime", "auth_code_lifetime"):
            value = getattr(self, name)
            # None means "never expires" for access and refresh tokens.
            if value is None and name != "auth_code_lifetime":
                continue
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise OAuthServerConfigError(f"{name} must be a positive integer, got {value!r}")
        try:
            re.compile(self.client_id_regex)
        except re.error as exc:
            raise OAuthServerConfigError(f"Invalid client_id_regex {self.client_id_regex!r}: {exc}") from exc

    @property
    def client_id_pattern(self) -> "re.Pattern[str]":
        """Compiled, case-insensitive client id pattern.

        Returns:
            re.Pattern[str]: Pattern built from ``client_id_regex``.
        """
        return re.compile(self.client_id_regex, re.IGNORECASE)

    def with_continue_after_response(self) -> "OAuthServerConfig":
        """Copy of this config with ``continue_after_response`` enabled.

        Returns:
            OAuthServerConfig: New config instance.
        """
        return replace(self, continue_after_response=True, grants=list(self.grants), extra=dict(self.extra))

    @classmethod
    def from_settings(cls, settings: Settings, model: Any = None, grants: Optional[List[str]] = None, **extra: Any) -> "OAuthServerConfig":
        """Build a config from process settings.

        Args:
            settings: Process settings.
            model: Engine model object.
            grants: Grant types to enable.
            **extra: Engine-specific options.

        Returns:
            OAuthServerConfig: The config.
        """
        return cls(
            model=model,
            grants=list(grants or []),
            debug=settings.oauth_debug,
            passthrough_errors=settings.oauth_passthrough_errors,
            access_token_lifetime=settings.oauth_access_token_lifetime,
            refresh_token_lifetime=settings.oauth_refresh_token_lifetime,
            auth_code_lifetime=settings.oauth_auth_code_lifetime,
            client_id_regex=settings.oauth_client_id_regex,
            extra=dict(extra),
        )

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "OAuthServerConfig":
        """Build a config from a plain mapping.

        Keys may use snake_case or the engine's camelCase spelling; unknown
        keys are kept in ``extra``.

        Args:
            options: Engine options.

        Returns:
            OAuthServerConfig: The config.

        Examples:
            >>> cfg = OAuthServerConfig.from_mapping({"passthroughErrors": True, "realm": "api"})
            >>> cfg.passthrough_errors, cfg.extra
            (True, {'realm': 'api'})
        """
        known = {f.name for f in fields(cls)} - {"extra"}
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = dict(options.get("extra") or {})
        for key, value in options.items():
            if key == "extra":
                continue
            name = _CAMEL_CASE_ALIASES.get(key, key)
            if name in known:
                kwargs[name] = value
            else:
                extra[key] = value
        return cls(extra=extra, **kwargs)
