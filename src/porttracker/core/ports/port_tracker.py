"""
Port Tracker Port - Abstract interface for tracking exposed workload ports.

Implementations:
- APITracker: Tracks bindings confirmed by an ExposureServicePort
"""

from abc import ABC, abstractmethod

from porttracker.core.domain.entities import PortMap


class PortTrackerPort(ABC):
    """
    Abstract interface for port trackers.

    A tracker maps workload IDs to the bindings currently exposed for them.
    Orchestration code (e.g. a container event watcher) drives it.
    """

    @abstractmethod
    def add(self, workload_id: str, port_map: PortMap, timeout: float | None = None) -> None:
        """
        Expose and track every binding in ``port_map``.

        Raises:
            ExposeError: If any binding failed. Successful bindings stay tracked.
        """
        ...

    @abstractmethod
    def get(self, workload_id: str) -> PortMap | None:
        """Return a copy of the tracked port map, or None if untracked."""
        ...

    @abstractmethod
    def remove(self, workload_id: str, timeout: float | None = None) -> None:
        """
        Unexpose and forget every binding of a workload.

        Raises:
            UnexposeError: If any binding failed. The workload is forgotten anyway.
        """
        ...

    @abstractmethod
    def remove_all(self, timeout: float | None = None) -> None:
        """
        Remove every tracked workload.

        Raises:
            UnexposeError: The first failure seen. Every workload is still removed.
        """
        ...

    @abstractmethod
    def workloads(self) -> list[str]:
        """List tracked workload IDs in insertion order."""
        ...

    def __contains__(self, workload_id: object) -> bool:
        return workload_id in self.workloads()

    def __len__(self) -> int:
        return len(self.workloads())
