"""Interface definition for event handler plugins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Optional

from .base_event_handler import BaseEventHandler

PluginMetadata = Dict[str, Any]


class EventHandlerPlugin(ABC):
    """A named bundle of handlers registered on the bus together.

    ``config_key`` is the key of the plugin's section under ``plugins`` in the
    event configuration file.
    """

    config_key: ClassVar[str] = ""
    version: ClassVar[str] = "1.0.0"

    def __init__(self, *, name: Optional[str] = None) -> None:
        self._name = name or self.config_key or self.__class__.__name__

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def get_handlers(self) -> List[BaseEventHandler]:
        raise NotImplementedError

    def get_metadata(self) -> PluginMetadata:
        return {"version": self.version}

    async def on_load(self) -> None:
        """Called once the plugin's handlers are subscribed."""

    async def on_unload(self) -> None:
        """Called after the plugin's handlers are unsubscribed."""
