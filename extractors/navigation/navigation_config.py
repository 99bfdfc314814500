# extractors/navigation/navigation_config.py
"""
Configuration settings for navigation operations.
Centralizes all pagination-related constants and settings.
"""

from dataclasses import dataclass


@dataclass
class NavigationConfig:
    """
    Configuration class for pagination detection.

    Contains anchor names and texts so they are not hardcoded
    throughout the application.
    """

    LINK_TAG: str = "a"
    NEXT_TEXT: str = "NEXT"
    PREVIOUS_TEXT: str = "PREVIOUS"

    @classmethod
    def from_constants(cls, html_constants):
        """
        Create configuration from existing constants classes.

        Args:
            html_constants: HTMLConstants class

        Returns:
            NavigationConfig instance with values from constants
        """
        config = cls()
        config.LINK_TAG = html_constants.LINK_SELECTOR
        config.NEXT_TEXT = html_constants.PAGINATION_NEXT_TEXT
        config.PREVIOUS_TEXT = html_constants.PAGINATION_PREVIOUS_TEXT
        return config
