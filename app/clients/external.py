# app/clients/external.py
"""
Client for the downstream service called on every greeting.

The response is never used by the caller, so failures are logged and
reported as ``None`` instead of being raised.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class ExternalServiceClient:
    def __init__(self, url: str, timeout: float = 5.0, client: Optional[httpx.Client] = None):
        self.url = url
        self._client = client or httpx.Client(timeout=timeout)

    def fetch(self) -> Optional[str]:
        """
        GET the configured URL and return the body text, or None on any HTTP error.
        """
        logger.debug("GET %s", self.url)
        try:
            response = self._client.get(self.url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("External call to %s failed: %s", self.url, exc)
            return None

        return response.text

    def close(self) -> None:
        self._client.close()
