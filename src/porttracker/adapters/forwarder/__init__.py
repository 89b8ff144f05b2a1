"""
Forwarder Adapter - Integration with the switch forwarder HTTP API.

This module provides the ForwarderAdapter and its low-level client for
exposing and unexposing host-side addresses.
"""

from porttracker.adapters.forwarder.adapter import ForwarderAdapter
from porttracker.adapters.forwarder.client import ForwarderApiClient


__all__ = ["ForwarderAdapter", "ForwarderApiClient"]
