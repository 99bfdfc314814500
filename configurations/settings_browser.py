# configurations/settings_browser.py
"""
Main configuration combining all components.
"""

from dataclasses import dataclass, field
from typing import Optional

from exceptions import ConfigurationError

from .settings_feed import FeedConfig
from .settings_listing import ListingConfig

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class BrowserConfig:
    """
    Combined configuration for feed transport and list-state engines.
    """

    feed: FeedConfig = field(default_factory=FeedConfig)
    listing: ListingConfig = field(default_factory=ListingConfig)

    # Logging settings
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_strategy: str = "daily"

    # Output settings
    output_directory: str = "data"

    # Environment tracking
    _environment: Optional[str] = None

    @property
    def environment(self) -> str:
        return self._environment or "development"

    def validate(self) -> bool:
        """
        Validate configuration settings
        """
        if self.feed.timeout <= 0:
            raise ConfigurationError("timeout must be greater than 0")

        if self.feed.server_batch_size <= 0:
            raise ConfigurationError("server_batch_size must be greater than 0")

        if self.feed.max_server_batches <= 0:
            raise ConfigurationError("max_server_batches must be greater than 0")

        if self.feed.max_retries < 1:
            raise ConfigurationError("max_retries must be at least 1")

        if self.listing.server_page_size <= 0:
            raise ConfigurationError("server_page_size must be greater than 0")

        if self.listing.player_page_size <= 0:
            raise ConfigurationError("player_page_size must be greater than 0")

        if self.listing.load_more_settle_delay < 0:
            raise ConfigurationError("load_more_settle_delay cannot be negative")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

        return True
