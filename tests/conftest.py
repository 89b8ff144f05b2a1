"""
Shared pytest fixtures for the porttracker test suite.

Fixture Categories:
- Domain: sample bindings and port maps
- Services: fake Exposure Service, tracker wired to it
- Configuration: TrackerConfig
"""

from __future__ import annotations

import pytest

from fakes import HOST_IP, HOST_IP2, HOST_IP3, HOST_PORT, HOST_PORT2, FakeExposureService
from porttracker.application.tracker import APITracker
from porttracker.core.domain import PortBinding
from porttracker.core.ports.config_provider import TrackerConfig


# =============================================================================
# Domain
# =============================================================================


@pytest.fixture
def http_port_map():
    """Single binding on 80/tcp."""
    return {"80/tcp": [PortBinding(HOST_IP, HOST_PORT)]}


@pytest.fixture
def https_port_map():
    """Two host IPs bound to 443/tcp."""
    return {
        "443/tcp": [
            PortBinding(HOST_IP2, HOST_PORT2),
            PortBinding(HOST_IP3, HOST_PORT2),
        ]
    }


@pytest.fixture
def three_ip_port_map():
    """Three host IPs bound to 80/tcp."""
    return {
        "80/tcp": [
            PortBinding(HOST_IP, HOST_PORT),
            PortBinding(HOST_IP2, HOST_PORT),
            PortBinding(HOST_IP3, HOST_PORT),
        ]
    }


# =============================================================================
# Services
# =============================================================================


@pytest.fixture
def fake_service() -> FakeExposureService:
    """Exposure Service that accepts every call."""
    return FakeExposureService()


@pytest.fixture
def tracker(fake_service: FakeExposureService) -> APITracker:
    """Tracker wired to the accepting fake service."""
    return APITracker(fake_service)


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture
def tracker_config() -> TrackerConfig:
    return TrackerConfig(api_url="http://forwarder.test")
