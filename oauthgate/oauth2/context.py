# -*- coding: utf-8 -*-
"""Location: ./oauthgate/oauth2/context.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Per-request context handed to adapter middleware.

A :class:`RequestContext` pairs the incoming Starlette request with a mutable
:class:`OAuthResponse` that middleware and the engine write to, and with the
host application's error channel. The response is turned into a real
Starlette response once the pipeline is done.

The engine writes token payloads through a ``jsonp`` method that Starlette
responses do not have. :class:`JSONPResponse` supplies it by wrapping the
context's response with a :class:`JSONBodyWriter`.
"""

# Standard
from collections.abc import Mapping
from typing import Any, Optional, Protocol, runtime_checkable

# Third-Party
from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

# First-Party
from oauthgate.services.error_channel import ErrorChannel

# Short names accepted by ``RequestContext.type``.
MEDIA_TYPES = {
    "json": "application/json",
    "html": "text/html",
    "text": "text/plain",
    "form": "application/x-www-form-urlencoded",
}


class OAuthResponse:
    """Mutable response state for one request.

    Examples:
        >>> r = OAuthResponse()
        >>> r.set({"Cache-Control": "no-store"})
        >>> r.headers["cache-control"]
        'no-store'
        >>> r.body = {"ok": True}
        >>> r.render().status_code
        200
    """

    def __init__(self, status: int = 200) -> None:
        self.status = status
        self.headers = MutableHeaders()
        self.body: Any = None
        self.media_type: Optional[str] = None

    def set(self, headers: Mapping) -> None:
        """Apply headers verbatim, replacing existing values.

        Args:
            headers: Header names and values.
        """
        for name, value in headers.items():
            self.headers[name] = str(value)

    def render(self) -> Response:
        """Build the Starlette response for the current state.

        Returns:
            Response: A plain ``Response`` carrying ``str``/``bytes`` bodies as
            they are, a ``JSONResponse`` encoding any other body.
        """
        headers = dict(self.headers)
        if self.body is None:
            return Response(status_code=self.status, headers=headers, media_type=self.media_type)
        if isinstance(self.body, (str, bytes)):
            return Response(content=self.body, status_code=self.status, headers=headers, media_type=self.media_type or MEDIA_TYPES["text"])
        return JSONResponse(content=self.body, status_code=self.status, headers=headers)


class RequestContext:
    """Request/response pair for one in-flight exchange.

    ``app`` is the host's error channel, so handlers report failures with
    ``ctx.app.emit("error", err, ctx)``.
    """

    def __init__(self, request: Request, app: ErrorChannel, response: Optional[OAuthResponse] = None) -> None:
        self.request = request
        self.response = response or OAuthResponse()
        self.app = app

    @property
    def status(self) -> int:
        """Response status code."""
        return self.response.status

    @status.setter
    def status(self, value: int) -> None:
        self.response.status = value

    @property
    def body(self) -> Any:
        """Response body."""
        return self.response.body

    @body.setter
    def body(self, value: Any) -> None:
        self.response.body = value

    @property
    def type(self) -> Optional[str]:
        """Response media type."""
        return self.response.media_type

    @type.setter
    def type(self, value: str) -> None:
        self.response.media_type = MEDIA_TYPES.get(value, value)

    def set(self, headers: Mapping) -> None:
        """Apply response headers.

        Args:
            headers: Header names and values.
        """
        self.response.set(headers)


@runtime_checkable
class JSONBodyWriter(Protocol):
    """Capability the engine relies on to write a token payload."""

    def jsonp(self, body: Any, *args: Any, **kwargs: Any) -> None:
        """Write ``body`` as the response body."""


class ContextJSONWriter:
    """Writes JSON payloads straight into a request context's body."""

    def __init__(self, ctx: RequestContext) -> None:
        self.ctx = ctx

    def jsonp(self, body: Any, *args: Any, **kwargs: Any) -> None:
        """Assign ``body`` to the context; callback-style arguments are ignored.

        Args:
            body: Payload to send.
            *args: Ignored.
            **kwargs: Ignored.
        """
        self.ctx.body = body


class JSONPResponse:
    """Response view given to the engine's grant handler.

    Attribute reads and writes go to the wrapped :class:`OAuthResponse`;
    ``jsonp`` goes to the injected writer.

    Examples:
        >>> class _Ctx:
        ...     body = None
        >>> ctx = _Ctx()
        >>> view = JSONPResponse(OAuthResponse(), ContextJSONWriter(ctx))
        >>> view.jsonp({"access_token": "abc"}, "callback")
        >>> ctx.body
        {'access_token': 'abc'}
    """

    __slots__ = ("_response", "_writer")

    def __init__(self, response: OAuthResponse, writer: JSONBodyWriter) -> None:
        object.__setattr__(self, "_response", response)
        object.__setattr__(self, "_writer", writer)

    @property
    def wrapped(self) -> OAuthResponse:
        """The underlying response."""
        return self._response

    def jsonp(self, body: Any, *args: Any, **kwargs: Any) -> None:
        """Write ``body`` through the injected writer.

        Args:
            body: Payload to send.
            *args: Passed to the writer, which ignores them.
            **kwargs: Passed to the writer, which ignores them.
        """
        self._writer.jsonp(body, *args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        if name in JSONPResponse.__slots__:
            raise AttributeError(name)
        return getattr(self._response, name)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(self._response, name, value)
