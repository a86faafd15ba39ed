"""Pydantic models describing the event configuration file."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PluginSettings(BaseModel):
    """Section of a single plugin; keys other than ``enabled`` are plugin specific."""

    model_config = ConfigDict(extra="allow")

    enabled: Optional[bool] = None

    def options(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class EventConfig(BaseModel):
    """Root configuration model for the event system."""

    model_config = ConfigDict(extra="forbid")

    enabled_handlers: List[str] = Field(default_factory=list)
    disabled_handlers: List[str] = Field(default_factory=list)
    plugins: Dict[str, PluginSettings] = Field(default_factory=dict)

    @field_validator("enabled_handlers", "disabled_handlers", mode="after")
    @classmethod
    def normalise_handler_lists(cls, value: Sequence[str]) -> List[str]:
        seen: set[str] = set()
        ordered: list[str] = []
        for handler in value:
            handler_name = handler.strip()
            if handler_name and handler_name not in seen:
                seen.add(handler_name)
                ordered.append(handler_name)
        return ordered

    @field_validator("plugins", mode="before")
    @classmethod
    def allow_empty_sections(cls, value: Any) -> Any:
        # "slack_notification:" with nothing below it parses as None
        if isinstance(value, dict):
            return {name: settings or {} for name, settings in value.items()}
        return value

    def plugin_settings(self, plugin_name: str) -> PluginSettings:
        return self.plugins.get(plugin_name) or PluginSettings()

    def is_plugin_enabled(self, plugin_name: str) -> bool:
        settings = self.plugins.get(plugin_name)
        if settings and settings.enabled is not None:
            return settings.enabled
        return True

    def is_handler_enabled(self, handler_name: str) -> bool:
        name = handler_name.strip()
        if not name:
            return False

        if name in self.disabled_handlers:
            return False

        if self.enabled_handlers:
            return name in self.enabled_handlers

        return True
