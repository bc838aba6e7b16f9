# -*- coding: utf-8 -*-
"""Location: ./oauthgate/middleware/oauth_middleware.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Starlette glue for :class:`oauthgate.oauth2.server.OAuthServer`.

``OAuthMiddleware`` guards routes with the adapter's ``authorise()``
middleware; ``token_endpoint`` serves the adapter's ``grant()`` middleware as
a route (normally ``/oauth/token``).

Examples:
    >>> from starlette.applications import Starlette
    >>> from starlette.middleware import Middleware
    >>> from starlette.routing import Route
    >>> def build(server):
    ...     return Starlette(
    ...         routes=[Route("/oauth/token", token_endpoint(server), methods=["POST"])],
    ...         middleware=[Middleware(OAuthMiddleware, server=server, protected_prefixes=("/api/",))],
    ...     )
"""

# Standard
from typing import Any, Callable, Iterable, Optional

# Third-Party
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

# First-Party
from oauthgate.oauth2.context import RequestContext
from oauthgate.oauth2.server import OAuthServer
from oauthgate.services.logging_service import LoggingService

logging_service = LoggingService()
logger = logging_service.get_logger(__name__)


class OAuthMiddleware(BaseHTTPMiddleware):
    """Authorise requests to protected paths before they reach the app.

    Rejected requests get the engine's error rendered as JSON. Accepted
    requests carry their :class:`RequestContext` on ``request.state.oauth``.
    """

    def __init__(
        self,
        app: ASGIApp,
        server: OAuthServer,
        protected_prefixes: Iterable[str] = ("/",),
        public_paths: Optional[Iterable[str]] = None,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The downstream ASGI application.
            server: Adapter whose ``authorise()`` middleware guards requests.
            protected_prefixes: Path prefixes that require authorisation.
            public_paths: Exact paths exempt from authorisation.
        """
        super().__init__(app)
        self.server = server
        self.protected_prefixes = tuple(protected_prefixes)
        self.public_paths = frozenset(public_paths or ())
        self._authorise = server.authorise()

    def requires_auth(self, path: str) -> bool:
        """Check whether a path must be authorised.

        Args:
            path: Request path.

        Returns:
            bool: True if the path is protected and not public.
        """
        if path in self.public_paths:
            return False
        return any(path.startswith(prefix) for prefix in self.protected_prefixes)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Run the adapter's authorise middleware around the downstream app.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware or endpoint handler

        Returns:
            Response: The downstream response, or the rendered OAuth error.
        """
        if not self.requires_auth(request.url.path):
            return await call_next(request)

        ctx = RequestContext(request, app=self.server.errors)

        async def _continue() -> Response:
            request.state.oauth = ctx
            return await call_next(request)

        outcome = await self._authorise(ctx, _continue)
        if isinstance(outcome, Response):
            return outcome
        return ctx.response.render()


def token_endpoint(server: OAuthServer) -> Callable[[Request], Any]:
    """Build a Starlette endpoint serving the adapter's grant middleware.

    Args:
        server: The adapter.

    Returns:
        Callable[[Request], Any]: Endpoint coroutine function.
    """
    grant = server.grant()

    async def _done() -> None:
        return None

    async def endpoint(request: Request) -> Response:
        ctx = RequestContext(request, app=server.errors)
        await grant(ctx, _done)
        return ctx.response.render()

    return endpoint
