"""
Environment Config Provider - Load configuration from environment variables.

Variables:
- PORT_TRACKER_API_URL: Exposure Service base URL (required)
- PORT_TRACKER_HOST_SWITCH_IP: Switch-side address bindings are forwarded to
- PORT_TRACKER_TIMEOUT: Per-request timeout in seconds
- PORT_TRACKER_POOL_CONNECTIONS / PORT_TRACKER_POOL_MAXSIZE: HTTP pool sizes
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from porttracker.core.exceptions import ConfigError
from porttracker.core.ports.config_provider import ConfigProviderPort, TrackerConfig


ENV_PREFIX = "PORT_TRACKER_"


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that loads from environment variables.

    Values set with set() override the environment.
    """

    def __init__(self, env: Mapping[str, str] | None = None):
        """
        Initialize the provider.

        Args:
            env: Environment mapping to read (defaults to os.environ)
        """
        self._env = env if env is not None else os.environ
        self._overrides: dict[str, Any] = {}
        self._config: TrackerConfig | None = None
        self.logger = logging.getLogger("EnvironmentConfigProvider")

    @property
    def name(self) -> str:
        return "Environment"

    def load(self) -> TrackerConfig:
        values: dict[str, Any] = {}
        for config_field in fields(TrackerConfig):
            raw = self.get(config_field.name)
            if raw is None:
                continue
            values[config_field.name] = self._coerce(config_field.name, raw)

        values.setdefault("api_url", "")
        self._config = TrackerConfig(**values)
        self.logger.debug(f"Loaded config for {self._config.api_url or '<unset>'}")
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._overrides:
            return self._overrides[key]
        return self._env.get(f"{ENV_PREFIX}{key.upper()}", default)

    def set(self, key: str, value: Any) -> None:
        self._overrides[key] = value
        self._config = None

    def validate(self) -> list[str]:
        try:
            config = self._config or self.load()
        except ConfigError as e:
            return [e.message]
        return config.validate()

    def _coerce(self, key: str, raw: Any) -> Any:
        """Convert a raw string value to the field's type."""
        if not isinstance(raw, str):
            return raw
        try:
            if key == "timeout":
                return float(raw)
            if key in ("pool_connections", "pool_maxsize"):
                return int(raw)
        except ValueError as e:
            raise ConfigError(f"Invalid value for {ENV_PREFIX}{key.upper()}: {raw!r}", cause=e) from e
        return raw.strip()
