# services/request.py
"""
HTTP transport for the feed endpoints.

Wraps a requests session with timeouts, retries (backoff) and the
cache-busting parameter, and maps transport failures onto the
exceptions in ``exceptions.network``.
"""

import logging
import time
from typing import Any, Dict, Optional

import backoff
import requests

from configurations import FeedConfig
from exceptions import HTTPStatusError, NetworkFailureError, RequestTimeoutError

logger = logging.getLogger(__name__)

RESPONSE_TEXT = "text"
RESPONSE_JSON = "json"

RETRYABLE_ERRORS = (requests.ConnectionError, requests.Timeout)


class FeedClient:
    """
    Session-backed feed client.
    """

    def __init__(self, config: Optional[FeedConfig] = None, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: Feed configuration (base URL, timeout, retries)
            session: Optional pre-built session, mainly for tests
        """
        self.config = config or FeedConfig()
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "text/html,application/xml,application/json"})

    def cache_bust_params(self) -> Dict[str, str]:
        return {self.config.cache_bust_param: str(int(time.time() * 1000))}

    def request(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
        response_type: str = RESPONSE_TEXT,
        cache_bust: bool = True,
    ) -> Any:
        """
        GET a feed endpoint.

        Args:
            path: Endpoint path or absolute URL
            params: Query parameters, sent in insertion order
            timeout: Seconds before giving up; defaults to the config timeout
            response_type: "text" or "json"
            cache_bust: Append the timestamp parameter

        Returns:
            Response body as text or decoded JSON

        Raises:
            RequestTimeoutError: If the request timed out on every attempt
            HTTPStatusError: If the endpoint answered with a non-2xx status
            NetworkFailureError: For any other transport failure
        """
        url = self.config.url_for(path)
        query = dict(params or {})
        if cache_bust:
            query.update(self.cache_bust_params())
        effective_timeout = timeout if timeout is not None else self.config.timeout

        fetch = backoff.on_exception(
            backoff.expo,
            RETRYABLE_ERRORS,
            max_tries=max(1, self.config.max_retries),
            logger=logger,
        )(self._get)

        try:
            response = fetch(url, query, effective_timeout)
        except requests.Timeout as e:
            logger.error("Request to %s timed out after %ss", url, effective_timeout)
            raise RequestTimeoutError(effective_timeout, url) from e
        except requests.RequestException as e:
            logger.error("Network error for %s: %s", url, e)
            raise NetworkFailureError(f"Network error: {e}", url) from e

        if not response.ok:
            logger.error("HTTP error %s: %s for %s", response.status_code, response.reason, url)
            raise HTTPStatusError(response.status_code, response.reason or "", url)

        if response_type == RESPONSE_JSON:
            try:
                return response.json()
            except ValueError as e:
                raise NetworkFailureError(f"Invalid JSON from {url}: {e}", url) from e
        return response.text

    def _get(self, url: str, params: Dict[str, Any], timeout: float) -> requests.Response:
        return self.session.get(url, params=params, timeout=timeout)


def request(
    url: str,
    timeout: Optional[float] = None,
    response_type: str = RESPONSE_TEXT,
    config: Optional[FeedConfig] = None,
) -> Any:
    """
    One-off request through a fresh client.
    """
    return FeedClient(config).request(url, timeout=timeout, response_type=response_type)
