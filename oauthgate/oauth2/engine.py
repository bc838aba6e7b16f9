# -*- coding: utf-8 -*-
"""Location: ./oauthgate/oauth2/engine.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Interface of the external OAuth2 engine and the bridge that makes its
callback-style handlers awaitable.

Engine handlers follow the ``handler(request, response, callback)``
convention and signal completion with ``callback(err=None)``. Handlers may
also be coroutine functions; both forms are awaited the same way.
"""

# Standard
import asyncio
import inspect
from typing import Any, Callable, Optional, Protocol, runtime_checkable

# First-Party
from oauthgate.oauth2.exceptions import OAuthGateError
from oauthgate.services.logging_service import LoggingService

logging_service = LoggingService()
logger = logging_service.get_logger(__name__)

EngineCallback = Callable[..., None]
EngineHandler = Callable[[Any, Any, EngineCallback], Any]


@runtime_checkable
class OAuth2Engine(Protocol):
    """What the adapter needs from an OAuth2 engine."""

    passthrough_errors: bool

    def authorise(self) -> EngineHandler:
        """Return the handler that checks a request's access token."""

    def grant(self) -> EngineHandler:
        """Return the handler that issues tokens (the token endpoint)."""


EngineFactory = Callable[[Any], OAuth2Engine]


async def call_engine(handler: EngineHandler, request: Any, response: Any) -> None:
    """Run an engine handler and wait for it to complete.

    The completion callback resolves the wait exactly once; later calls are
    ignored.

    Args:
        handler: Engine handler taking ``(request, response, callback)``.
        request: The incoming request.
        response: The response object the engine writes to.

    Raises:
        BaseException: Whatever failure the handler reports or raises.

    Examples:
        >>> def ok(req, res, callback):
        ...     callback()
        >>> asyncio.run(call_engine(ok, None, None)) is None
        True
    """
    loop = asyncio.get_running_loop()
    done: "asyncio.Future[None]" = loop.create_future()

    def _callback(err: Optional[Any] = None, *_: Any) -> None:
        if done.done():
            logger.debug("Engine completion callback invoked more than once; ignoring")
            return
        if err is None:
            done.set_result(None)
        elif isinstance(err, BaseException):
            done.set_exception(err)
        else:
            done.set_exception(OAuthGateError(f"Engine reported a non-exception failure: {err!r}"))

    def _discard_callback_failure() -> None:
        # Mark the callback's failure as retrieved; the raised one wins.
        if done.done() and not done.cancelled():
            done.exception()

    try:
        result = handler(request, response, _callback)
    except BaseException:
        _discard_callback_failure()
        raise
    if inspect.isawaitable(result):
        try:
            await result
        except BaseException:
            _discard_callback_failure()
            raise
        if not done.done():
            return

    await done
