"""
Forwarder Adapter - Implements ExposureServicePort over the forwarder HTTP API.

Maps the request value types onto ForwarderApiClient calls, keeping JSON
serialization out of the tracker.
"""

import logging
from typing import Any

from porttracker.core.ports.config_provider import TrackerConfig
from porttracker.core.ports.exposure_service import (
    ExposeRequest,
    ExposureServicePort,
    UnexposeRequest,
)

from .client import ForwarderApiClient


class ForwarderAdapter(ExposureServicePort):
    """
    Forwarder implementation of the ExposureServicePort.

    Either pass a ready client or let the adapter build one from a config.
    """

    def __init__(
        self,
        config: TrackerConfig | None = None,
        client: ForwarderApiClient | None = None,
    ):
        """
        Initialize the forwarder adapter.

        Args:
            config: Tracker configuration, used to build a client
            client: Pre-built API client (takes precedence over config)
        """
        if client is None:
            if config is None:
                raise ValueError("ForwarderAdapter needs a config or a client")
            client = ForwarderApiClient(
                base_url=config.api_url,
                timeout=config.timeout,
                pool_connections=config.pool_connections,
                pool_maxsize=config.pool_maxsize,
            )
        self._client = client
        self.logger = logging.getLogger("ForwarderAdapter")

    @property
    def name(self) -> str:
        return "Forwarder"

    @property
    def client(self) -> ForwarderApiClient:
        return self._client

    def expose(self, request: ExposeRequest, timeout: float | None = None) -> None:
        self.logger.debug(f"Exposing {request.local} -> {request.remote}")
        self._client.post("expose", json=request.to_dict(), timeout=timeout)

    def unexpose(self, request: UnexposeRequest, timeout: float | None = None) -> None:
        self.logger.debug(f"Unexposing {request.local}")
        self._client.post("unexpose", json=request.to_dict(), timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ForwarderAdapter":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
