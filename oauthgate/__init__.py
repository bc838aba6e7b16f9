# -*- coding: utf-8 -*-
"""Location: ./oauthgate/__init__.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

oauthgate - OAuth2 engine adapter for Starlette middleware pipelines.
"""

__version__ = "0.1.0"

# First-Party
from oauthgate.oauth2 import (  # noqa: E402
    create_oauth_server,
    EngineError,
    OAuthServer,
    OAuthServerConfig,
    RequestContext,
)

__all__ = [
    "EngineError",
    "OAuthServer",
    "OAuthServerConfig",
    "RequestContext",
    "__version__",
    "create_oauth_server",
]
