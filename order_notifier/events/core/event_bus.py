"""Asynchronous in-process event bus."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections import defaultdict
from typing import Awaitable, Callable, Dict, List, Sequence

from .event import Event
from .exceptions import HandlerExecutionError, HandlerFailure

logger = logging.getLogger(__name__)

EventHandler = Callable[[Event], Awaitable[None]]


class EventBus:
    """Routes published events to the callbacks subscribed to their type.

    Callbacks for one event run concurrently; a failing callback does not
    stop the others. Failures are collected and re-raised together as a
    HandlerExecutionError once every callback has finished.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._lock = asyncio.Lock()

    async def subscribe(self, event_type: str, handler: EventHandler) -> None:
        if not inspect.iscoroutinefunction(handler):
            raise TypeError("Event handler must be an async function")

        async with self._lock:
            handlers = self._handlers[str(event_type)]
            if handler in handlers:
                return
            handlers.append(handler)
            logger.debug("Handler %s subscribed to event '%s'", handler, event_type)

    async def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        async with self._lock:
            handlers = self._handlers.get(str(event_type))
            if not handlers or handler not in handlers:
                return
            handlers.remove(handler)
            logger.debug("Handler %s unsubscribed from event '%s'", handler, event_type)
            if not handlers:
                self._handlers.pop(str(event_type), None)

    def subscribers(self, event_type: str) -> List[EventHandler]:
        return list(self._handlers.get(str(event_type), ()))

    async def publish(self, event: Event) -> None:
        """Deliver the event to every subscriber of its type."""

        async with self._lock:
            handlers = tuple(self._handlers.get(event.event_type, ()))

        if not handlers:
            logger.debug("No handlers registered for event '%s'", event.event_type)
            return

        await self._dispatch(event, handlers)

    async def _dispatch(self, event: Event, handlers: Sequence[EventHandler]) -> None:
        results = await asyncio.gather(
            *(handler(event) for handler in handlers), return_exceptions=True
        )

        failures: list[HandlerFailure] = []
        for handler, result in zip(handlers, results):
            if isinstance(result, HandlerExecutionError):
                failures.extend(result.failures)
            elif isinstance(result, Exception):
                failures.append(HandlerFailure(handler=handler, event=event, exception=result))

        for failure in failures:
            logger.error(
                "Error while executing handler %s for event '%s'",
                failure.handler,
                event.event_type,
                exc_info=failure.exception,
            )

        if failures:
            raise HandlerExecutionError.merge(failures)
