"""
porttracker - Track container ports exposed through a network-switch forwarder.

Records which host-side bindings each workload has exposed through the
Exposure Service and keeps that service in sync as bindings come and go.
"""

from porttracker.application.tracker import APITracker
from porttracker.core.domain import HOST_SWITCH_IP, PortBinding, PortMap
from porttracker.core.exceptions import (
    ApiError,
    BindingError,
    ConfigError,
    ExposeError,
    PortTrackerError,
    UnexposeError,
    ValidationError,
)


__version__ = "0.1.0"

__all__ = [
    "HOST_SWITCH_IP",
    "APITracker",
    "ApiError",
    "BindingError",
    "ConfigError",
    "ExposeError",
    "PortBinding",
    "PortMap",
    "PortTrackerError",
    "UnexposeError",
    "ValidationError",
    "__version__",
]
