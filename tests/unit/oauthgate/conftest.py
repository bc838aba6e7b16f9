# -*- coding: utf-8 -*-
"""Location: ./tests/unit/oauthgate/conftest.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Shared fixtures: a scriptable stand-in for the OAuth2 engine and request helpers.
"""

# Standard
from typing import Any, Dict, List, Optional, Tuple

# Third-Party
import pytest
from starlette.requests import Request

# First-Party
from oauthgate.oauth2 import EngineError, OAuthServer, OAuthServerConfig, RequestContext
from oauthgate.services.error_channel import ErrorChannel


class FakeEngine:
    """Engine double following the callback handler convention."""

    def __init__(self, config: OAuthServerConfig):
        self.config = config
        self.passthrough_errors = config.passthrough_errors
        self.authorise_error: Optional[BaseException] = None
        self.grant_error: Optional[BaseException] = None
        self.grant_payload: Dict[str, Any] = {"access_token": "abc", "token_type": "bearer"}
        self.calls: List[Tuple[str, Any, Any]] = []

    def authorise(self):
        def handler(request, response, callback):
            self.calls.append(("authorise", request, response))
            callback(self.authorise_error)

        return handler

    def grant(self):
        def handler(request, response, callback):
            self.calls.append(("grant", request, response))
            if self.grant_error is not None:
                callback(self.grant_error)
                return
            response.jsonp(self.grant_payload, "callback")
            callback()

        return handler


def make_request(path: str = "/", method: str = "GET", headers: Optional[Dict[str, str]] = None) -> Request:
    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "query_string": b"",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
    }
    return Request(scope)


@pytest.fixture
def error_channel():
    return ErrorChannel()


@pytest.fixture
def reported(error_channel):
    """Probe listener collecting every reported error."""
    seen: List[Tuple[BaseException, Any]] = []
    error_channel.subscribe(lambda err, ctx: seen.append((err, ctx)))
    return seen


@pytest.fixture
def server(error_channel):
    return OAuthServer(OAuthServerConfig(grants=["password"]), FakeEngine, errors=error_channel)


@pytest.fixture
def passthrough_server(error_channel):
    return OAuthServer(OAuthServerConfig(passthrough_errors=True), FakeEngine, errors=error_channel)


@pytest.fixture
def ctx(error_channel):
    return RequestContext(make_request(), app=error_channel)


@pytest.fixture
def expired_token_error():
    return EngineError(401, "invalid_token", "Token expired", headers={"WWW-Authenticate": 'Bearer realm="Service"'})


@pytest.fixture
def engine_factory():
    """Engine factory handed to ``OAuthServer``."""
    return FakeEngine


@pytest.fixture(name="make_request")
def make_request_fixture():
    return make_request
