"""Fetching YouTube result pages over HTTP with fixed-interval retries."""

import logging
from urllib.parse import quote

import httpx

from ..utils.config import SearchConfig
from ..utils.retry import (
    retry_with_delay,
    HttpStatusError,
    MarkerNotFoundError,
    NetworkError,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://youtube.com"
YT_INITIAL_DATA_MARKER = "ytInitialData"

# Characters left unescaped, matching JavaScript's encodeURIComponent
_QUERY_SAFE_CHARS = "-_.!~*'()"


def build_search_url(search_terms: str) -> str:
    """Return the URL to fetch for a query.

    Input that already starts with the base URL is used as-is, so result
    page links can be passed straight through.
    """
    if search_terms.startswith(BASE_URL):
        return search_terms
    return f"{BASE_URL}/results?search_query={quote(search_terms, safe=_QUERY_SAFE_CHARS)}"


class PageFetcher:
    """Fetches pages until they contain the ytInitialData blob."""

    def __init__(self, config: SearchConfig):
        self.config = config
        self.headers = {"User-Agent": config.user_agent}

    def fetch(self, url: str) -> str:
        """Fetch a page, retrying until it carries ytInitialData.

        Args:
            url: Absolute URL to fetch

        Returns:
            Full response text containing the marker

        Raises:
            NetworkError: Transport failure on the last attempt
            HttpStatusError: Non-success status on the last attempt
            MarkerNotFoundError: No attempt returned the marker
        """
        fetch_with_retry = retry_with_delay(
            max_attempts=self.config.retry_count,
            delay=self.config.retry_delay,
        )(self._fetch_once)

        try:
            return fetch_with_retry(url)
        except MarkerNotFoundError as e:
            raise MarkerNotFoundError(
                f"Could not get {YT_INITIAL_DATA_MARKER} from YouTube "
                f"after {self.config.retry_count} retries"
            ) from e

    def _fetch_once(self, url: str) -> str:
        logger.debug(f"GET {url}")
        try:
            response = httpx.get(
                url,
                headers=self.headers,
                timeout=self.config.timeout,
                follow_redirects=True,
            )
        except httpx.RequestError as e:
            raise NetworkError(f"Connection error: {e}") from e

        if not response.is_success:
            raise HttpStatusError(response.status_code, url)

        response_text = response.text
        if YT_INITIAL_DATA_MARKER not in response_text:
            raise MarkerNotFoundError(f"{YT_INITIAL_DATA_MARKER} not found in response from {url}")

        return response_text
