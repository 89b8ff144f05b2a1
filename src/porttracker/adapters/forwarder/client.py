"""
Forwarder API Client - Low-level HTTP client for the switch forwarder API.

This handles the raw HTTP communication with the Exposure Service.
The ForwarderAdapter uses this to implement the ExposureServicePort.

Endpoints:
- POST /services/forwarder/expose    {"local": "ip:port", "remote": "ip:port"}
- POST /services/forwarder/unexpose  {"local": "ip:port"}
"""

import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter

from porttracker.core.exceptions import ApiError


class ForwarderApiClient:
    """
    Low-level forwarder API client.

    Handles request/response and error handling.

    Features:
    - Connection pooling for performance
    - Per-request timeout, overridable per call
    - Every failure mapped to ApiError; no retries
    """

    SERVICE_PATH = "/services/forwarder"

    # Connection pool settings
    DEFAULT_POOL_CONNECTIONS = 10
    DEFAULT_POOL_MAXSIZE = 10
    DEFAULT_TIMEOUT = 30.0

    # Truncate error bodies in messages
    MAX_ERROR_BODY = 500

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        pool_connections: int = DEFAULT_POOL_CONNECTIONS,
        pool_maxsize: int = DEFAULT_POOL_MAXSIZE,
    ):
        """
        Initialize the forwarder client.

        Args:
            base_url: Exposure Service URL (e.g., http://192.168.127.1:80)
            timeout: Default request timeout in seconds
            pool_connections: Number of connection pools to cache
            pool_maxsize: Maximum connections per pool
        """
        self.base_url = base_url.rstrip("/")
        self.api_url = f"{self.base_url}{self.SERVICE_PATH}"
        self.timeout = timeout
        self.logger = logging.getLogger("ForwarderApiClient")

        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

        # Configure session with connection pooling
        self._session = requests.Session()
        self._session.headers.update(self.headers)

        adapter = HTTPAdapter(
            pool_connections=pool_connections,
            pool_maxsize=pool_maxsize,
        )
        self._session.mount("https://", adapter)
        self._session.mount("http://", adapter)

    # -------------------------------------------------------------------------
    # Core Request Methods
    # -------------------------------------------------------------------------

    def request(
        self,
        method: str,
        endpoint: str,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """
        Make a request to the forwarder API.

        Args:
            method: HTTP method
            endpoint: API endpoint relative to the service path (e.g., 'expose')
            **kwargs: Additional arguments for requests

        Returns:
            JSON response as dict (empty when the body is empty or not an object)

        Raises:
            ApiError: On non-2xx responses, connection errors and timeouts
        """
        url = f"{self.api_url}/{endpoint.lstrip('/')}"

        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout

        self.logger.debug(f"{method} {url}")

        try:
            response = self._session.request(method, url, **kwargs)
        except requests.exceptions.Timeout as e:
            raise ApiError(f"request to {endpoint} timed out", cause=e) from e
        except requests.exceptions.RequestException as e:
            raise ApiError(f"request to {endpoint} failed: {e}", cause=e) from e

        return self._handle_response(response, endpoint)

    def post(
        self,
        endpoint: str,
        json: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Perform a POST request."""
        return self.request("POST", endpoint, json=json, **kwargs)

    # -------------------------------------------------------------------------
    # Response Handling
    # -------------------------------------------------------------------------

    def _handle_response(self, response: requests.Response, endpoint: str) -> dict[str, Any]:
        """Handle API response and convert errors to ApiError."""
        if response.ok:
            if response.text:
                try:
                    json_data = response.json()
                except ValueError:
                    # The forwarder answers success with an empty or plain body
                    return {}
                if isinstance(json_data, dict):
                    return json_data
            return {}

        status = response.status_code
        error_body = response.text.strip()[: self.MAX_ERROR_BODY] if response.text else ""

        self.logger.debug(f"{endpoint} returned {status}: {error_body}")

        raise ApiError(
            f"{endpoint} returned {status}: {error_body}" if error_body else f"{endpoint} returned {status}",
            status_code=status,
            body=error_body,
        )

    # -------------------------------------------------------------------------
    # Resource Cleanup
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Close the session and release the connection pool."""
        self._session.close()
        self.logger.debug("Closed HTTP session")

    def __enter__(self) -> "ForwarderApiClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
