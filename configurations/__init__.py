# configurations/__init__.py
"""
configuration module
"""

from .factory import ConfigFactory, get_config
from .settings_base import EnvironmentVariables
from .settings_browser import BrowserConfig
from .settings_feed import FeedConfig
from .settings_listing import ListingConfig

__all__ = [
    "EnvironmentVariables",
    "FeedConfig",
    "ListingConfig",
    "BrowserConfig",
    "ConfigFactory",
    "get_config",
]
