"""
Configuration Provider Port - Abstract interface for configuration.

Implementations:
- EnvironmentConfigProvider: Load from PORT_TRACKER_* environment variables
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from porttracker.core.domain.entities import HOST_SWITCH_IP


@dataclass
class TrackerConfig:
    """Configuration for the tracker and its Exposure Service client."""

    api_url: str
    host_switch_ip: str = HOST_SWITCH_IP

    # HTTP client
    timeout: float = 30.0
    pool_connections: int = 10
    pool_maxsize: int = 10

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.api_url:
            errors.append("Missing Exposure Service URL (PORT_TRACKER_API_URL)")
        elif not self.api_url.startswith(("http://", "https://")):
            errors.append(f"Exposure Service URL must be http(s): {self.api_url}")
        if not self.host_switch_ip:
            errors.append("Missing host switch IP (PORT_TRACKER_HOST_SWITCH_IP)")
        if self.timeout <= 0:
            errors.append(f"Timeout must be positive, got {self.timeout}")
        if self.pool_connections < 1 or self.pool_maxsize < 1:
            errors.append("Connection pool sizes must be at least 1")

        return errors

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return not self.validate()


class ConfigProviderPort(ABC):
    """
    Abstract interface for configuration providers.

    Configuration can come from various sources:
    - Environment variables
    - Explicit overrides set by the embedding program
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the provider name."""
        ...

    @abstractmethod
    def load(self) -> TrackerConfig:
        """
        Load configuration from source.

        Returns:
            Tracker configuration
        """
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a specific configuration value.

        Args:
            key: Configuration key (TrackerConfig field name)
            default: Default value if not found

        Returns:
            Configuration value
        """
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key
            value: Value to set
        """
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """
        Validate loaded configuration.

        Returns:
            List of validation errors
        """
        ...
