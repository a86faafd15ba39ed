"""Configuration helpers for the event system."""

from .config_loader import EventConfigLoader
from .config_schema import EventConfig, PluginSettings

__all__ = ["EventConfigLoader", "EventConfig", "PluginSettings"]
