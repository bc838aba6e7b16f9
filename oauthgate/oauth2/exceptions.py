# -*- coding: utf-8 -*-
"""Location: ./oauthgate/oauth2/exceptions.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

OAuth2 adapter exceptions.
"""

# Standard
from typing import Mapping, Optional


class OAuthGateError(Exception):
    """Base exception for oauthgate."""


class OAuthServerConfigError(OAuthGateError):
    """Raised when the adapter or engine configuration is unusable."""


class EngineError(OAuthGateError):
    """Failure reported by the OAuth2 engine.

    Attributes that were not supplied stay ``None`` and are left out of the
    translated response body.

    Examples:
        >>> err = EngineError(401, "invalid_token", "Token expired")
        >>> err.code, err.error, err.error_description
        (401, 'invalid_token', 'Token expired')
        >>> err.headers is None and err.type is None
        True
        >>> str(err)
        'invalid_token: Token expired'
    """

    def __init__(
        self,
        code: Optional[int] = None,
        error: Optional[str] = None,
        error_description: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(": ".join(part for part in (error, error_description) if part) or "OAuth engine error")
        self.code = code
        self.error = error
        self.error_description = error_description
        self.headers = dict(headers) if headers else None
        # Category marker, set to "oauth" when the adapter reports the error.
        self.type: Optional[str] = None
