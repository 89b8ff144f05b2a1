"""
Adapters - Concrete implementations of the core ports.

- forwarder/: HTTP Exposure Service (ExposureServicePort)
- config/: Configuration providers (ConfigProviderPort)
"""

from .config import EnvironmentConfigProvider
from .forwarder import ForwarderAdapter, ForwarderApiClient


__all__ = [
    "EnvironmentConfigProvider",
    "ForwarderAdapter",
    "ForwarderApiClient",
]
