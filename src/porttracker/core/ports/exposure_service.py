"""
Exposure Service Port - Abstract interface for the network-switch forwarder.

The Exposure Service performs the actual forwarding once it is told to
expose or unexpose a host-side address.

Implementations:
- ForwarderAdapter: HTTP forwarder API (/services/forwarder/*)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from porttracker.core.exceptions import ApiError


__all__ = [
    "ApiError",
    "ExposeRequest",
    "ExposureServicePort",
    "UnexposeRequest",
]


@dataclass(frozen=True)
class ExposeRequest:
    """
    Body of an expose call.

    Fields:
    - local: host-side "ip:port" to listen on
    - remote: switch-side "ip:port" to forward to
    """

    local: str
    remote: str

    def to_dict(self) -> dict[str, str]:
        return {"local": self.local, "remote": self.remote}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExposeRequest":
        return cls(local=data["local"], remote=data["remote"])


@dataclass(frozen=True)
class UnexposeRequest:
    """Body of an unexpose call. ``local`` is the host-side "ip:port"."""

    local: str

    def to_dict(self) -> dict[str, str]:
        return {"local": self.local}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UnexposeRequest":
        return cls(local=data["local"])


class ExposureServicePort(ABC):
    """
    Abstract interface for the Exposure Service.

    Both operations return None on success and raise ApiError on any
    failure (non-2xx status, transport error, timeout). Implementations
    never retry.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the service name."""
        ...

    @abstractmethod
    def expose(self, request: ExposeRequest, timeout: float | None = None) -> None:
        """
        Ask the service to start forwarding ``request.local`` to ``request.remote``.

        Args:
            request: Expose request
            timeout: Per-call deadline in seconds (None uses the default)

        Raises:
            ApiError: If the service did not confirm the call
        """
        ...

    @abstractmethod
    def unexpose(self, request: UnexposeRequest, timeout: float | None = None) -> None:
        """
        Ask the service to stop forwarding ``request.local``.

        Args:
            request: Unexpose request
            timeout: Per-call deadline in seconds (None uses the default)

        Raises:
            ApiError: If the service did not confirm the call
        """
        ...
