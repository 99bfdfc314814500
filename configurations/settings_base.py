# configurations/settings_base.py
"""
Base configuration classes and environment handling.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EnvironmentVariables:
    """
    This is for the environmental variables:
    """

    env_file_path: Optional[str] = ".env"
    environment_key: str = "ENVIRONMENT"
    base_url_key: str = "FEED_BASE_URL"
    timeout_key: str = "FEED_TIMEOUT"
