# pylint: disable=unnecessary-pass
"""
Custom exceptions for configuration handling.
"""


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid
    """

    pass
