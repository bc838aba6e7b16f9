# -*- coding: utf-8 -*-
"""Location: ./oauthgate/services/error_channel.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Host error-reporting channel.

Listeners are registered once at startup and notified whenever the adapter
reports a failure. Notification is fire-and-forget: synchronous listeners run
inline, coroutine listeners are scheduled as tasks and never awaited by the
emitter.
"""

# Standard
import asyncio
import inspect
from typing import Any, Awaitable, Callable, Dict, List, Set, Union

# First-Party
from oauthgate.services.logging_service import LoggingService

logging_service = LoggingService()
logger = logging_service.get_logger(__name__)

Listener = Callable[..., Union[None, Awaitable[None]]]


class ErrorChannel:
    """Observer registry for application-level error notifications.

    Examples:
        >>> channel = ErrorChannel()
        >>> seen = []
        >>> channel.subscribe(lambda err, ctx: seen.append(str(err)))
        >>> channel.emit("error", ValueError("boom"), None)
        True
        >>> seen
        ['boom']
    """

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}
        self._pending: Set[asyncio.Task] = set()

    def subscribe(self, listener: Listener, event: str = "error") -> None:
        """Register a listener for an event.

        Args:
            listener: Callable taking ``(err, ctx)``; may be a coroutine function.
            event: Event name.
        """
        self._listeners.setdefault(event, []).append(listener)

    def unsubscribe(self, listener: Listener, event: str = "error") -> None:
        """Remove a previously registered listener.

        Args:
            listener: The listener to remove.
            event: Event name.
        """
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event: str = "error") -> int:
        """Number of listeners registered for an event.

        Args:
            event: Event name.

        Returns:
            int: Listener count.
        """
        return len(self._listeners.get(event, []))

    def emit(self, event: str, err: BaseException, ctx: Any) -> bool:
        """Notify every listener of ``event``.

        Args:
            event: Event name.
            err: The error being reported.
            ctx: The request context the error belongs to.

        Returns:
            bool: True if at least one listener was registered.
        """
        listeners = list(self._listeners.get(event, []))
        if not listeners:
            logger.warning(f"Unhandled {event} event: {err!r}")
            return False

        for listener in listeners:
            try:
                result = listener(err, ctx)
            except Exception:
                logger.exception(f"Error listener {listener!r} failed")
                continue
            if inspect.isawaitable(result):
                self._schedule(result)
        return True

    def _schedule(self, awaitable: Awaitable[None]) -> None:
        """Run an async listener in the background and keep a reference until it finishes.

        Args:
            awaitable: Result of calling a coroutine listener.
        """
        task = asyncio.ensure_future(awaitable)
        self._pending.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Async error listener failed: {exc!r}", exc_info=exc)

    async def drain(self) -> None:
        """Wait for scheduled async listeners to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
