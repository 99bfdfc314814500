# configurations/settings_feed.py
"""
Feed endpoint configuration.
Single source of truth for where the server and player feeds live and how
they are requested.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from configurations.settings_base import EnvironmentVariables

# ***> Load environment variables from .env file <***
env_path = EnvironmentVariables.env_file_path
if env_path and Path(env_path).exists():
    load_dotenv(env_path)
    logging.info("Loaded environment from: %s", env_path)
else:
    logging.debug("Environment file not found: %s", env_path)

DEFAULT_BASE_URL = "https://rwrs.kreedzt.cn"


@dataclass
class FeedConfig:
    """
    Feed transport configuration.
    """

    base_url: str = DEFAULT_BASE_URL
    server_list_path: str = "/api/server_list"
    player_list_path: str = "/api/player_list"
    maps_path: str = "/api/maps"

    # ***> seconds <***
    timeout: float = 10.0
    list_all_timeout: float = 20.0

    # ***> batched server fetch <***
    server_batch_size: int = 100
    max_server_batches: int = 10

    max_retries: int = 3
    cache_bust_param: str = "_t"

    @classmethod
    def from_environment(cls, **overrides) -> "FeedConfig":
        """
        Build a feed configuration, letting environment variables override
        the defaults.

        Args:
            **overrides: Explicit values that win over the environment

        Returns:
            FeedConfig instance
        """
        env = EnvironmentVariables()
        values = {}

        base_url = os.getenv(env.base_url_key)
        if base_url:
            values["base_url"] = base_url.rstrip("/")

        timeout = os.getenv(env.timeout_key)
        if timeout:
            try:
                values["timeout"] = float(timeout)
            except ValueError:
                logging.warning("Ignoring invalid %s=%s", env.timeout_key, timeout)

        values.update(overrides)
        return cls(**values)

    def url_for(self, path: str) -> str:
        """
        Join the base URL with an endpoint path.
        """
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
