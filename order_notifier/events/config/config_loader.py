"""Loading of the event configuration file."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, MutableMapping, Optional

import yaml
from pydantic import ValidationError

from .config_schema import EventConfig


class EventConfigLoader:
    """Read, validate and cache the YAML event configuration."""

    def __init__(self, config_path: str | Path) -> None:
        self._path = Path(config_path)
        self._lock = threading.RLock()
        self._cached_config: Optional[EventConfig] = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self, *, use_cache: bool = True) -> EventConfig:
        with self._lock:
            if use_cache and self._cached_config is not None:
                return self._cached_config.model_copy(deep=True)

            if not self._path.exists():
                raise FileNotFoundError(
                    f"Event configuration file '{self._path}' does not exist"
                )

            raw_config = self._read_yaml()
            try:
                config = EventConfig.model_validate(raw_config)
            except ValidationError as exc:
                raise ValueError(f"Invalid event configuration in '{self._path}'") from exc

            self._cached_config = config
            return config.model_copy(deep=True)

    def refresh(self) -> EventConfig:
        return self.load(use_cache=False)

    def use(self, config: EventConfig) -> None:
        """Serve ``config`` from the cache without touching the file."""
        with self._lock:
            self._cached_config = config.model_copy(deep=True)

    def _read_yaml(self) -> MutableMapping[str, Any]:
        with self._path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
            if not isinstance(data, MutableMapping):
                raise ValueError("Event configuration must be a YAML mapping")
            return dict(data)
