"""HTTP client for the bible-api.com verse service.

Provides VerseFetcher, which turns a free-text passage query into a
SingleVerse or VerseList.
"""

from typing import Optional
from urllib.parse import quote

import requests

from terminal_bible.errors import FetchError
from terminal_bible.logging_config import get_logger
from terminal_bible.models import Passage, parse_passage

logger = get_logger(__name__)


class VerseFetcher:
    """Client for the verse lookup service.

    Attributes:
        base_url: Base URL of the service
        timeout: Request timeout in seconds (None waits indefinitely)
    """

    def __init__(self, base_url: str, timeout: Optional[float] = None):
        """Initialize the fetcher.

        Args:
            base_url: Base URL of the service
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def build_url(self, query: str) -> str:
        """Build the lookup URL with the query fully percent-encoded."""
        return f"{self.base_url}/{quote(query, safe='')}"

    def fetch(self, query: str) -> Passage:
        """Look up a passage.

        Args:
            query: Free-text passage query (e.g., "john 3:16")

        Returns:
            SingleVerse or VerseList

        Raises:
            FetchError: On network failure, non-2xx status or malformed body
        """
        url = self.build_url(query)
        logger.info(f"Fetching passage: {url}")

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            message = self._api_error(e.response) or str(e)
            logger.warning(f"Lookup failed (HTTP {status}): {message}")
            raise FetchError(message, status_code=status) from e
        except requests.exceptions.JSONDecodeError as e:
            logger.warning(f"Malformed response body from {url}: {e}")
            raise FetchError(f"Malformed response from verse service: {e}") from e
        except requests.exceptions.RequestException as e:
            # Includes InvalidURL and MissingSchema, which are also ValueErrors
            logger.warning(f"Lookup failed: {e}")
            raise FetchError(str(e)) from e

        if not isinstance(data, dict):
            raise FetchError("Malformed response from verse service")
        if data.get("error"):
            raise FetchError(str(data["error"]))

        try:
            passage = parse_passage(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Unexpected response shape from {url}: {e!r}")
            raise FetchError(f"Malformed response from verse service: missing {e}") from e

        logger.info(f"Fetched {passage.reference} ({type(passage).__name__})")
        return passage

    @staticmethod
    def _api_error(response: Optional[requests.Response]) -> Optional[str]:
        """Extract the service's own error message from a failed response."""
        if response is None:
            return None
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return None
