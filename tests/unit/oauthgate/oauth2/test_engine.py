# -*- coding: utf-8 -*-
"""Location: ./tests/unit/oauthgate/oauth2/test_engine.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Tests for the callback-to-awaitable engine bridge.
"""

# Standard
import asyncio
import gc

# Third-Party
import pytest

# First-Party
from oauthgate.oauth2 import call_engine, EngineError, OAuth2Engine, OAuthGateError


@pytest.mark.asyncio
async def test_callback_success_resolves():
    def handler(request, response, callback):
        assert (request, response) == ("req", "res")
        callback()

    assert await call_engine(handler, "req", "res") is None


@pytest.mark.asyncio
async def test_callback_error_raises():
    err = EngineError(401, "invalid_token", "Token expired")

    def handler(request, response, callback):
        callback(err)

    with pytest.raises(EngineError) as exc_info:
        await call_engine(handler, None, None)
    assert exc_info.value is err


@pytest.mark.asyncio
async def test_only_first_callback_counts():
    def handler(request, response, callback):
        callback()
        callback(EngineError(500, "server_error"))

    await call_engine(handler, None, None)


@pytest.mark.asyncio
async def test_sync_raise_propagates():
    def handler(request, response, callback):
        raise EngineError(400, "invalid_request", "Malformed request")

    with pytest.raises(EngineError, match="invalid_request"):
        await call_engine(handler, None, None)


@pytest.mark.asyncio
async def test_deferred_callback():
    def handler(request, response, callback):
        asyncio.get_running_loop().call_soon(callback)

    await asyncio.wait_for(call_engine(handler, None, None), timeout=1)


@pytest.mark.asyncio
async def test_async_handler_without_callback_completes():
    async def handler(request, response, callback):
        await asyncio.sleep(0)

    await asyncio.wait_for(call_engine(handler, None, None), timeout=1)


@pytest.mark.asyncio
async def test_async_handler_raise_propagates():
    async def handler(request, response, callback):
        raise EngineError(401, "invalid_token")

    with pytest.raises(EngineError, match="invalid_token"):
        await call_engine(handler, None, None)


@pytest.mark.asyncio
async def test_async_handler_callback_error():
    async def handler(request, response, callback):
        callback(EngineError(400, "invalid_grant"))

    with pytest.raises(EngineError, match="invalid_grant"):
        await call_engine(handler, None, None)


@pytest.mark.asyncio
async def test_non_exception_failure_wrapped():
    def handler(request, response, callback):
        callback("nope")

    with pytest.raises(OAuthGateError, match="non-exception failure"):
        await call_engine(handler, None, None)


def test_engine_protocol_runtime_check():
    class Engine:
        passthrough_errors = False

        def authorise(self):
            return lambda req, res, cb: cb()

        def grant(self):
            return lambda req, res, cb: cb()

    assert isinstance(Engine(), OAuth2Engine)
    assert not isinstance(object(), OAuth2Engine)


@pytest.mark.asyncio
async def test_sync_raise_after_callback_error_leaves_nothing_unretrieved():
    loop = asyncio.get_running_loop()
    reports = []
    previous = loop.get_exception_handler()
    loop.set_exception_handler(lambda loop, context: reports.append(context))

    def handler(request, response, callback):
        callback(EngineError(401, "invalid_token"))
        raise RuntimeError("engine crashed")

    try:
        with pytest.raises(RuntimeError, match="engine crashed"):
            await call_engine(handler, None, None)
        gc.collect()
    finally:
        loop.set_exception_handler(previous)
    assert [c for c in reports if "never retrieved" in c.get("message", "")] == []
