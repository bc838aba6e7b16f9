# -*- coding: utf-8 -*-
"""Location: ./oauthgate/middleware/__init__.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Starlette integration for the OAuth2 adapter.
"""

# First-Party
from oauthgate.middleware.oauth_middleware import OAuthMiddleware, token_endpoint

__all__ = ["OAuthMiddleware", "token_endpoint"]
