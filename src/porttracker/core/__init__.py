"""
Core module - Domain logic with no external dependencies.

This module contains:
- domain/: PortBinding and PortMap helpers
- ports/: Abstract interfaces that adapters must implement
- exceptions: Centralized exception hierarchy
- services: Factories wiring config, adapters and the tracker
"""

from .domain import *
from .exceptions import *
from .ports import *
from .services import create_exposure_service, create_tracker, create_tracker_from_provider
