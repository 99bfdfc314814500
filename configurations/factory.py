# configurations/factory.py
"""
Configuration factory for creating environment-specific configurations.
"""

import os
from typing import Optional

from exceptions import ConfigurationError

from .settings_base import EnvironmentVariables
from .settings_browser import BrowserConfig
from .settings_feed import FeedConfig
from .settings_listing import ListingConfig


class ConfigFactory:
    """
    Factory for creating environment-specific configurations
    """

    @staticmethod
    def development() -> BrowserConfig:
        """
        Development environment configuration
        """
        return BrowserConfig(
            feed=FeedConfig.from_environment(),
            listing=ListingConfig(),
            log_level="DEBUG",
            log_strategy="session",
            _environment="development",
        )

    @staticmethod
    def testing() -> BrowserConfig:
        """
        Testing environment configuration
        """
        return BrowserConfig(
            feed=FeedConfig(
                base_url="http://feed.test",
                timeout=2.0,
                list_all_timeout=2.0,
                max_retries=1,
            ),
            listing=ListingConfig(load_more_settle_delay=0.0, manual_refresh_reset_delay=0.0),
            log_level="ERROR",
            _environment="testing",
        )

    @staticmethod
    def production() -> BrowserConfig:
        """
        Production environment configuration
        """
        return BrowserConfig(
            feed=FeedConfig.from_environment(timeout=15.0, list_all_timeout=30.0),
            listing=ListingConfig(),
            log_level="INFO",
            log_file="logs/server_browser.log",
            log_strategy="daily",
            _environment="production",
        )

    @staticmethod
    def custom(
        environment: str = "development",
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        **kwargs,
    ) -> BrowserConfig:
        """
        Create a custom configuration with specified parameters
        """
        config = get_config(environment)

        if base_url:
            config.feed.base_url = base_url.rstrip("/")
        if timeout is not None:
            config.feed.timeout = timeout
        config._environment = f"custom-{environment}"

        # Apply any additional keyword arguments
        for key, value in kwargs.items():
            if hasattr(config, key):
                setattr(config, key, value)
            elif hasattr(config.feed, key.replace("feed_", "")):
                setattr(config.feed, key.replace("feed_", ""), value)
            elif hasattr(config.listing, key.replace("listing_", "")):
                setattr(config.listing, key.replace("listing_", ""), value)

        return config


def get_config(environment: Optional[str] = None) -> BrowserConfig:
    """
    Get configuration for specified environment
    """
    if environment is None:
        environment = os.getenv(
            EnvironmentVariables.environment_key, "development"
        )
    environment = environment.lower()

    if environment == "development":
        return ConfigFactory.development()
    elif environment == "testing":
        return ConfigFactory.testing()
    elif environment == "production":
        return ConfigFactory.production()
    else:
        raise ConfigurationError(f"Unknown environment: {environment}")
