"""
Service Factories - Wire configuration, adapters and the tracker together.

Usage:
    provider = EnvironmentConfigProvider()
    tracker = create_tracker(provider.load())

Testing:
    tracker = create_tracker(config, exposure_service=fake_service)
"""

import logging

from .exceptions import ConfigError
from .ports.config_provider import ConfigProviderPort, TrackerConfig
from .ports.exposure_service import ExposureServicePort
from .ports.port_tracker import PortTrackerPort


logger = logging.getLogger("Services")


def create_exposure_service(config: TrackerConfig) -> ExposureServicePort:
    """
    Create the HTTP Exposure Service adapter for a configuration.

    Raises:
        ConfigError: If the configuration is invalid
    """
    errors = config.validate()
    if errors:
        raise ConfigError(f"Invalid tracker configuration: {'; '.join(errors)}")

    from porttracker.adapters.forwarder import ForwarderAdapter

    return ForwarderAdapter(config=config)


def create_tracker(
    config: TrackerConfig,
    exposure_service: ExposureServicePort | None = None,
) -> PortTrackerPort:
    """
    Create an APITracker.

    Args:
        config: Tracker configuration
        exposure_service: Service to use instead of the HTTP adapter

    Raises:
        ConfigError: If no service is given and the configuration is invalid
    """
    from porttracker.application.tracker import APITracker

    if exposure_service is None:
        exposure_service = create_exposure_service(config)

    logger.debug(f"Creating tracker with {exposure_service.name} -> {config.host_switch_ip}")
    return APITracker(exposure_service, host_switch_ip=config.host_switch_ip)


def create_tracker_from_provider(provider: ConfigProviderPort) -> PortTrackerPort:
    """
    Load configuration from a provider and create a tracker.

    Raises:
        ConfigError: If the loaded configuration is invalid
    """
    config = provider.load()
    logger.debug(f"Loaded configuration from {provider.name}")
    return create_tracker(config)
