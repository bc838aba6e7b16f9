# -*- coding: utf-8 -*-
"""Location: ./oauthgate/oauth2/server.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

OAuth2 engine adapter.

:class:`OAuthServer` owns one engine instance and turns its ``authorise`` and
``grant`` handlers into ``async (ctx, call_next)`` middleware. Engine failures
are either translated into a JSON error response and reported on the host's
error channel, or re-raised untouched when the engine is configured with
``passthrough_errors``.
"""

# Standard
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

# First-Party
from oauthgate.oauth2.context import ContextJSONWriter, JSONPResponse, RequestContext
from oauthgate.oauth2.engine import call_engine, EngineFactory, EngineHandler
from oauthgate.oauth2.exceptions import EngineError, OAuthServerConfigError
from oauthgate.oauth2.models import OAuthServerConfig
from oauthgate.services.error_channel import ErrorChannel
from oauthgate.services.logging_service import LoggingService

logging_service = LoggingService()
logger = logging_service.get_logger(__name__)

Continuation = Callable[[], Awaitable[Any]]
Middleware = Callable[[RequestContext, Continuation], Awaitable[Any]]

ERROR_BODY_FIELDS = ("code", "error", "error_description")


class OAuthServer:
    """Adapter exposing engine operations as pipeline middleware.

    Attributes:
        config: Config the engine was built with (``continue_after_response`` forced on).
        engine: The engine instance, shared by every request.
        errors: Error channel failures are reported on when not passed through.
    """

    def __init__(
        self,
        config: Union[OAuthServerConfig, Mapping[str, Any]],
        engine_factory: EngineFactory,
        errors: Optional[ErrorChannel] = None,
    ) -> None:
        """Build the engine.

        Args:
            config: Engine configuration, as a config object or a mapping of options.
            engine_factory: Callable building the engine from the config.
            errors: Host error channel; a new one is created when omitted.

        Raises:
            OAuthServerConfigError: If the factory does not return a usable engine.
        """
        if not isinstance(config, OAuthServerConfig):
            config = OAuthServerConfig.from_mapping(config)
        # Continuation is decided by the pipeline.
        self.config = config.with_continue_after_response()
        self.engine = engine_factory(self.config)
        for name in ("authorise", "grant"):
            if not callable(getattr(self.engine, name, None)):
                raise OAuthServerConfigError(f"Engine {type(self.engine).__name__} does not provide {name}()")
        self.errors = errors if errors is not None else ErrorChannel()
        logger.info(f"OAuth server ready (engine={type(self.engine).__name__}, passthrough_errors={self.passthrough_errors})")

    @property
    def passthrough_errors(self) -> bool:
        """Whether engine errors are re-raised instead of translated."""
        return bool(getattr(self.engine, "passthrough_errors", self.config.passthrough_errors))

    def authorise(self) -> Middleware:
        """Middleware that lets a request through only if the engine authorises it.

        Returns:
            Middleware: ``async (ctx, call_next)`` callable.
        """
        handler = self.engine.authorise()

        async def authorise(ctx: RequestContext, call_next: Continuation) -> Any:
            return await self._run(handler, ctx, ctx.response, call_next)

        return authorise

    def grant(self) -> Middleware:
        """Middleware that issues tokens; normally mounted at ``/oauth/token``.

        Returns:
            Middleware: ``async (ctx, call_next)`` callable.
        """
        handler = self.engine.grant()

        async def grant(ctx: RequestContext, call_next: Continuation) -> Any:
            response = JSONPResponse(ctx.response, ContextJSONWriter(ctx))
            return await self._run(handler, ctx, response, call_next)

        return grant

    async def _run(self, handler: EngineHandler, ctx: RequestContext, response: Any, call_next: Continuation) -> Any:
        try:
            await call_engine(handler, ctx.request, response)
        except EngineError as err:
            if self.passthrough_errors:
                logger.debug(f"Passing OAuth error through: {err}")
                raise
            logger.info(f"OAuth request rejected with {err.code}: {err}")
            return handle_error(err, self, ctx)
        return await call_next()


def handle_error(err: EngineError, server: OAuthServer, ctx: RequestContext) -> bool:
    """Write an engine error to the response and report it.

    Body fields the error does not carry are left out rather than defaulted.
    An error without a numeric code is sent as 500.

    Args:
        err: The engine failure.
        server: The adapter that caught it.
        ctx: The request context.

    Returns:
        bool: Result of emitting the error on the context's error channel.
    """
    ctx.type = "json"
    ctx.status = err.code if isinstance(err.code, int) else 500

    if err.headers:
        ctx.set(err.headers)

    body: Dict[str, Any] = {}
    for key in ERROR_BODY_FIELDS:
        value = getattr(err, key, None)
        if value is not None:
            body[key] = value
    ctx.body = body

    err.type = "oauth"

    logger.debug(f"OAuth error response written by {type(server.engine).__name__}")
    return ctx.app.emit("error", err, ctx)


def create_oauth_server(
    config: Union[OAuthServer, OAuthServerConfig, Mapping[str, Any]],
    engine_factory: Optional[EngineFactory] = None,
    errors: Optional[ErrorChannel] = None,
) -> OAuthServer:
    """Plain-function form of ``OAuthServer(...)``.

    Args:
        config: Engine configuration, or an existing server which is returned unchanged.
        engine_factory: Callable building the engine from the config.
        errors: Host error channel.

    Returns:
        OAuthServer: The adapter.

    Raises:
        OAuthServerConfigError: If no engine factory is given for a new server.
    """
    if isinstance(config, OAuthServer):
        return config
    if engine_factory is None:
        raise OAuthServerConfigError("engine_factory is required to build an OAuth server")
    return OAuthServer(config, engine_factory, errors=errors)
