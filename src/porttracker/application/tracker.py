"""
API Tracker - Tracks workload ports exposed through the Exposure Service.

The tracker keeps an in-memory table of workload ID -> PortMap holding only
bindings the Exposure Service confirmed. Every mutating call talks to the
service first and updates the table second:

- add(): failed bindings are never recorded, successful ones always are
- remove(): the workload is forgotten even when unexposing fails
- remove_all(): remove() on every workload, first failure re-raised

Remote calls are made without holding the table lock. A per-workload lock
keeps each workload's read-modify-write atomic without blocking other
workloads.
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from porttracker.core.domain.entities import (
    HOST_SWITCH_IP,
    PortBinding,
    PortMap,
    copy_port_map,
    count_bindings,
    iter_bindings,
)
from porttracker.core.exceptions import (
    ApiError,
    BindingFailure,
    ExposeError,
    UnexposeError,
)
from porttracker.core.ports.exposure_service import (
    ExposeRequest,
    ExposureServicePort,
    UnexposeRequest,
)
from porttracker.core.ports.port_tracker import PortTrackerPort


@dataclass
class _WorkloadLock:
    """Lock for one workload, dropped once nobody holds or waits on it."""

    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


class APITracker(PortTrackerPort):
    """
    Port tracker backed by an ExposureServicePort.

    Thread-safe. Calls within one batch are sequential, so the first
    failure of a batch is always the first one in processing order.
    """

    def __init__(
        self,
        exposure_service: ExposureServicePort,
        host_switch_ip: str = HOST_SWITCH_IP,
    ):
        """
        Initialize the tracker.

        Args:
            exposure_service: Service that exposes and unexposes bindings
            host_switch_ip: Switch-side address every binding forwards to
        """
        self._service = exposure_service
        self.host_switch_ip = host_switch_ip
        self.logger = logging.getLogger("APITracker")

        self._ports: dict[str, PortMap] = {}
        self._lock = threading.Lock()
        self._workload_locks: dict[str, _WorkloadLock] = {}

    @classmethod
    def from_url(
        cls,
        base_url: str,
        host_switch_ip: str = HOST_SWITCH_IP,
        timeout: float | None = None,
    ) -> "APITracker":
        """
        Create a tracker talking to the forwarder API at ``base_url``.

        Args:
            base_url: Exposure Service base URL
            host_switch_ip: Switch-side address every binding forwards to
            timeout: Default request timeout in seconds
        """
        from porttracker.adapters.forwarder import ForwarderAdapter, ForwarderApiClient

        client = ForwarderApiClient(
            base_url,
            timeout=timeout if timeout is not None else ForwarderApiClient.DEFAULT_TIMEOUT,
        )
        return cls(ForwarderAdapter(client=client), host_switch_ip=host_switch_ip)

    @property
    def exposure_service(self) -> ExposureServicePort:
        return self._service

    # -------------------------------------------------------------------------
    # Locking
    # -------------------------------------------------------------------------

    @contextmanager
    def _locked_workload(self, workload_id: str) -> Iterator[None]:
        """Hold the workload's lock for the duration of the block."""
        with self._lock:
            entry = self._workload_locks.get(workload_id)
            if entry is None:
                entry = self._workload_locks[workload_id] = _WorkloadLock()
            entry.users += 1

        entry.lock.acquire()
        try:
            yield
        finally:
            entry.lock.release()
            with self._lock:
                entry.users -= 1
                if entry.users == 0:
                    del self._workload_locks[workload_id]

    def _is_tracked(self, workload_id: str, key: str, binding: PortBinding) -> bool:
        with self._lock:
            return binding in self._ports.get(workload_id, {}).get(key, ())

    # -------------------------------------------------------------------------
    # PortTrackerPort Implementation
    # -------------------------------------------------------------------------

    def add(self, workload_id: str, port_map: PortMap, timeout: float | None = None) -> None:
        """
        Expose every binding in ``port_map`` and track the ones that succeed.

        A failing binding does not stop the batch. Bindings already tracked
        under the same key are skipped.

        Args:
            workload_id: Workload (container) ID
            port_map: Bindings to expose, grouped by protocol key
            timeout: Per-call deadline in seconds

        Raises:
            ExposeError: Naming the first failing binding. Every binding that
                succeeded stays tracked.
        """
        failures: list[BindingFailure] = []
        exposed = 0

        with self._locked_workload(workload_id):
            for key, binding in iter_bindings(port_map):
                if self._is_tracked(workload_id, key, binding):
                    self.logger.debug(f"{workload_id}: {key} {binding} already exposed")
                    continue

                request = ExposeRequest(
                    local=binding.address,
                    remote=binding.remote_address(self.host_switch_ip),
                )
                try:
                    self._service.expose(request, timeout=timeout)
                except ApiError as e:
                    self.logger.warning(f"{workload_id}: failed exposing {binding} ({key}): {e}")
                    failures.append((binding, e))
                    continue

                with self._lock:
                    self._ports.setdefault(workload_id, {}).setdefault(key, []).append(binding)
                exposed += 1

        self.logger.info(
            f"{workload_id}: exposed {exposed}/{exposed + len(failures)} bindings"
            if failures
            else f"{workload_id}: exposed {exposed} bindings"
        )

        if failures:
            binding, cause = failures[0]
            raise ExposeError(binding, cause, failures=failures)

    def get(self, workload_id: str) -> PortMap | None:
        with self._lock:
            port_map = self._ports.get(workload_id)
            return copy_port_map(port_map) if port_map is not None else None

    def remove(self, workload_id: str, timeout: float | None = None) -> None:
        """
        Unexpose every binding of a workload and forget it.

        Untracked workloads are a no-op. The workload is forgotten even if
        some unexpose calls fail: its remote state is unknown at that point
        and is not kept as tracked.

        Args:
            workload_id: Workload (container) ID
            timeout: Per-call deadline in seconds

        Raises:
            UnexposeError: Naming the first failing binding
        """
        failures: list[BindingFailure] = []

        with self._locked_workload(workload_id):
            with self._lock:
                port_map = self._ports.get(workload_id)
                if port_map is None:
                    self.logger.debug(f"{workload_id}: not tracked, nothing to remove")
                    return
                bindings = list(iter_bindings(port_map))

            try:
                for key, binding in bindings:
                    try:
                        self._service.unexpose(
                            UnexposeRequest(local=binding.address), timeout=timeout
                        )
                    except ApiError as e:
                        self.logger.warning(
                            f"{workload_id}: failed unexposing {binding} ({key}): {e}"
                        )
                        failures.append((binding, e))
            finally:
                # Forgotten even when the service raised something unexpected
                with self._lock:
                    self._ports.pop(workload_id, None)

        self.logger.info(
            f"{workload_id}: removed {len(bindings)} bindings ({len(failures)} failed)"
        )

        if failures:
            binding, cause = failures[0]
            raise UnexposeError(binding, cause, failures=failures)

    def remove_all(self, timeout: float | None = None) -> None:
        """
        Remove every workload tracked when the call starts.

        Each workload is attempted even if an earlier one failed, whatever
        the failure was.

        Raises:
            UnexposeError: The first failure encountered
            Exception: An unexpected error from the service, if it came first
        """
        with self._lock:
            workload_ids = list(self._ports)

        first_error: Exception | None = None
        for workload_id in workload_ids:
            try:
                self.remove(workload_id, timeout=timeout)
            except UnexposeError as e:
                if first_error is None:
                    first_error = e
            except Exception as e:
                self.logger.error(f"{workload_id}: unexpected error during removal: {e}")
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error

    def workloads(self) -> list[str]:
        with self._lock:
            return list(self._ports)

    def __len__(self) -> int:
        with self._lock:
            return len(self._ports)

    def __repr__(self) -> str:
        with self._lock:
            total = sum(count_bindings(port_map) for port_map in self._ports.values())
            return f"APITracker(workloads={len(self._ports)}, bindings={total})"
