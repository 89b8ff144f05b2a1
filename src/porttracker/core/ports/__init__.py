"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .config_provider import ConfigProviderPort, TrackerConfig
from .exposure_service import (
    ApiError,
    ExposeRequest,
    ExposureServicePort,
    UnexposeRequest,
)
from .port_tracker import PortTrackerPort


__all__ = [
    "ApiError",
    # Config
    "ConfigProviderPort",
    # Exposure service
    "ExposeRequest",
    "ExposureServicePort",
    # Tracker
    "PortTrackerPort",
    "TrackerConfig",
    "UnexposeRequest",
]
