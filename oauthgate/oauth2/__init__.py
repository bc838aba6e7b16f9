# -*- coding: utf-8 -*-
"""Location: ./oauthgate/oauth2/__init__.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Public exports for the OAuth2 engine adapter.
"""

# First-Party
from oauthgate.oauth2.context import (
    ContextJSONWriter,
    JSONBodyWriter,
    JSONPResponse,
    OAuthResponse,
    RequestContext,
)
from oauthgate.oauth2.engine import call_engine, EngineFactory, EngineHandler, OAuth2Engine
from oauthgate.oauth2.exceptions import EngineError, OAuthGateError, OAuthServerConfigError
from oauthgate.oauth2.models import OAuthServerConfig
from oauthgate.oauth2.server import create_oauth_server, handle_error, OAuthServer

__all__ = [
    "ContextJSONWriter",
    "EngineError",
    "EngineFactory",
    "EngineHandler",
    "JSONBodyWriter",
    "JSONPResponse",
    "OAuth2Engine",
    "OAuthGateError",
    "OAuthResponse",
    "OAuthServer",
    "OAuthServerConfig",
    "OAuthServerConfigError",
    "RequestContext",
    "call_engine",
    "create_oauth_server",
    "handle_error",
]
