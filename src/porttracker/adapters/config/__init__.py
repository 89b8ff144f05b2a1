"""
Configuration Adapters - Load tracker configuration.
"""

from .environment import ENV_PREFIX, EnvironmentConfigProvider


__all__ = ["ENV_PREFIX", "EnvironmentConfigProvider"]
