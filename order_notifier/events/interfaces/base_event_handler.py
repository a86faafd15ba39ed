"""Base abstractions for event handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Tuple

from ..core.event import Event, EventType


class BaseEventHandler(ABC):
    """Base class for all event handlers.

    ``event_types`` lists the event types the handler is subscribed to when
    its plugin is registered on the bus.
    """

    event_types: ClassVar[Tuple[EventType, ...]] = ()

    def __init__(self, *, name: Optional[str] = None) -> None:
        self._name = name or self.__class__.__name__

    @property
    def name(self) -> str:
        return self._name

    def can_handle(self, event: Event) -> bool:
        return any(event.event_type == event_type.value for event_type in self.event_types)

    async def __call__(self, event: Event) -> None:
        await self.handle(event)

    @abstractmethod
    async def handle(self, event: Event) -> None:
        raise NotImplementedError
