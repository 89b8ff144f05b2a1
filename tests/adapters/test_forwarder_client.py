"""
Dedicated tests for the forwarder API client.

Tests cover:
- Client initialization and URL handling
- Error handling (non-2xx, network errors, timeouts)
- Edge cases (empty and non-JSON success bodies)
- Connection pooling and session management
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from porttracker.adapters.forwarder.client import ForwarderApiClient
from porttracker.core.exceptions import ApiError


# =============================================================================
# Client Initialization Tests
# =============================================================================


class TestForwarderClientInit:
    """Tests for forwarder client initialization."""

    def test_client_initialization(self):
        """Should initialize with correct settings."""
        with patch("porttracker.adapters.forwarder.client.requests.Session"):
            client = ForwarderApiClient(base_url="http://192.168.127.1:80")

        assert client.base_url == "http://192.168.127.1:80"
        assert client.api_url == "http://192.168.127.1:80/services/forwarder"
        assert client.timeout == ForwarderApiClient.DEFAULT_TIMEOUT

    def test_client_initialization_with_trailing_slash(self):
        """Should handle trailing slash in URL."""
        with patch("porttracker.adapters.forwarder.client.requests.Session"):
            client = ForwarderApiClient(base_url="http://forwarder.test/")

        assert client.base_url == "http://forwarder.test"

    def test_session_mounts_pool_adapter(self):
        """Should mount a pooled HTTPAdapter for both schemes."""
        with patch("porttracker.adapters.forwarder.client.requests.Session") as mock:
            session = MagicMock()
            mock.return_value = session
            ForwarderApiClient(base_url="http://forwarder.test")

        mounted = [call.args[0] for call in session.mount.call_args_list]
        assert mounted == ["https://", "http://"]


# =============================================================================
# Request Tests
# =============================================================================


class TestForwarderRequests:
    """Tests for request building and response handling."""

    @pytest.fixture
    def mock_session(self):
        """Create a mock session."""
        with patch("porttracker.adapters.forwarder.client.requests.Session") as mock:
            session = MagicMock()
            mock.return_value = session
            yield session

    @pytest.fixture
    def client(self, mock_session):
        """Create test client."""
        return ForwarderApiClient(base_url="http://forwarder.test", timeout=5.0)

    def test_post_expose(self, client, mock_session):
        """Should POST the JSON body to the expose endpoint."""
        response = MagicMock()
        response.ok = True
        response.text = ""
        mock_session.request.return_value = response

        result = client.post("expose", json={"local": "127.0.0.1:80", "remote": "192.168.127.2:80"})

        assert result == {}
        mock_session.request.assert_called_once_with(
            "POST",
            "http://forwarder.test/services/forwarder/expose",
            json={"local": "127.0.0.1:80", "remote": "192.168.127.2:80"},
            timeout=5.0,
        )

    def test_timeout_override(self, client, mock_session):
        """Should use the per-call timeout when given."""
        response = MagicMock()
        response.ok = True
        response.text = ""
        mock_session.request.return_value = response

        client.post("unexpose", json={"local": "127.0.0.1:80"}, timeout=1.5)

        assert mock_session.request.call_args.kwargs["timeout"] == 1.5

    def test_none_timeout_uses_default(self, client, mock_session):
        """An explicit None timeout falls back to the default."""
        response = MagicMock()
        response.ok = True
        response.text = ""
        mock_session.request.return_value = response

        client.post("unexpose", json={"local": "127.0.0.1:80"}, timeout=None)

        assert mock_session.request.call_args.kwargs["timeout"] == 5.0

    def test_json_success_body(self, client, mock_session):
        """Should return a JSON object body."""
        response = MagicMock()
        response.ok = True
        response.text = '{"status": "ok"}'
        response.json.return_value = {"status": "ok"}
        mock_session.request.return_value = response

        assert client.post("expose", json={}) == {"status": "ok"}

    def test_plain_text_success_body(self, client, mock_session):
        """Should treat a non-JSON success body as empty."""
        response = MagicMock()
        response.ok = True
        response.text = "OK"
        response.json.side_effect = ValueError("not json")
        mock_session.request.return_value = response

        assert client.post("expose", json={}) == {}

    def test_json_list_success_body(self, client, mock_session):
        """Should ignore JSON bodies that are not objects."""
        response = MagicMock()
        response.ok = True
        response.text = "[]"
        response.json.return_value = []
        mock_session.request.return_value = response

        assert client.post("expose", json={}) == {}


# =============================================================================
# Error Handling Tests
# =============================================================================


class TestForwarderErrorHandling:
    """Tests for error handling."""

    @pytest.fixture
    def mock_session(self):
        """Create a mock session."""
        with patch("porttracker.adapters.forwarder.client.requests.Session") as mock:
            session = MagicMock()
            mock.return_value = session
            yield session

    @pytest.fixture
    def client(self, mock_session):
        return ForwarderApiClient(base_url="http://forwarder.test")

    def test_non_2xx_raises_api_error(self, client, mock_session):
        """Should raise ApiError carrying status and body."""
        response = MagicMock()
        response.ok = False
        response.status_code = 408
        response.text = "Bad API error\n"
        mock_session.request.return_value = response

        with pytest.raises(ApiError) as exc_info:
            client.post("expose", json={})

        error = exc_info.value
        assert error.status_code == 408
        assert error.body == "Bad API error"
        assert str(error) == "remote API call failed: expose returned 408: Bad API error"

    def test_non_2xx_without_body(self, client, mock_session):
        response = MagicMock()
        response.ok = False
        response.status_code = 500
        response.text = ""
        mock_session.request.return_value = response

        with pytest.raises(ApiError) as exc_info:
            client.post("unexpose", json={})

        assert str(exc_info.value) == "remote API call failed: unexpose returned 500"

    def test_long_error_body_truncated(self, client, mock_session):
        response = MagicMock()
        response.ok = False
        response.status_code = 500
        response.text = "x" * 2000
        mock_session.request.return_value = response

        with pytest.raises(ApiError) as exc_info:
            client.post("expose", json={})

        assert len(exc_info.value.body) == ForwarderApiClient.MAX_ERROR_BODY

    def test_connection_error(self, client, mock_session):
        """Should map connection errors to ApiError."""
        mock_session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(ApiError) as exc_info:
            client.post("expose", json={})

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.cause, requests.exceptions.ConnectionError)
        assert mock_session.request.call_count == 1  # never retried

    def test_timeout(self, client, mock_session):
        """Should map timeouts to ApiError."""
        mock_session.request.side_effect = requests.exceptions.Timeout("slow")

        with pytest.raises(ApiError) as exc_info:
            client.post("expose", json={})

        assert "timed out" in str(exc_info.value)
        assert mock_session.request.call_count == 1


# =============================================================================
# Session Management Tests
# =============================================================================


class TestForwarderSession:
    """Tests for session lifecycle."""

    def test_close(self):
        with patch("porttracker.adapters.forwarder.client.requests.Session") as mock:
            session = MagicMock()
            mock.return_value = session
            client = ForwarderApiClient(base_url="http://forwarder.test")

        client.close()

        session.close.assert_called_once()

    def test_context_manager(self):
        with patch("porttracker.adapters.forwarder.client.requests.Session") as mock:
            session = MagicMock()
            mock.return_value = session
            with ForwarderApiClient(base_url="http://forwarder.test"):
                pass

        session.close.assert_called_once()
