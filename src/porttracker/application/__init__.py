"""
Application layer - Trackers built on the core ports.
"""

from .tracker import APITracker


__all__ = ["APITracker"]
