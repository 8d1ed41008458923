"""YouTube search service that scrapes the results page instead of the API."""

import logging
from typing import Dict, List, Optional

from ..models.search import SearchOutcome, SearchStatus
from ..models.video import VideoResult
from ..utils.config import SearchConfig
from ..utils.retry import NetworkError, HttpStatusError, MarkerNotFoundError
from .extractor import ParseError, locate_initial_data, parse_videos
from .fetcher import PageFetcher, build_search_url

logger = logging.getLogger(__name__)


class YoutubeSearch:
    """Searches YouTube for videos matching a query or a results-page URL."""

    def __init__(
        self,
        search_terms: str,
        max_results: Optional[int] = None,
        language: Optional[str] = None,
        region: Optional[str] = None,
        retry_delay: Optional[float] = None,
        retry_count: Optional[int] = None,
        config: Optional[Dict] = None,
    ):
        """Initialize a search.

        Args:
            search_terms: Query string, or a URL starting with https://youtube.com
            max_results: Maximum number of videos to return
            language: Language setting, stored but not sent to YouTube
            region: Region setting, stored but not sent to YouTube
            retry_delay: Seconds to wait between fetch attempts
            retry_count: Number of fetch attempts
            config: Base configuration dict, defaults to load_config()

        Raises:
            ConfigError: If the resulting settings are invalid
        """
        self.search_terms = search_terms
        self.config = SearchConfig.from_config(
            config,
            max_results=max_results,
            language=language,
            region=region,
            retry_delay=retry_delay,
            retry_count=retry_count,
        )
        self.fetcher = PageFetcher(self.config)
        self.videos: Optional[List[VideoResult]] = None

        if self.config.language or self.config.region:
            logger.debug(
                f"language={self.config.language!r} region={self.config.region!r} "
                "are not applied to the request"
            )

    def search(self) -> List[VideoResult]:
        """Search YouTube and return the videos found.

        Never raises; any failure is logged and yields an empty list.
        """
        outcome = self.run()
        if not outcome.succeeded:
            logger.error(f"Search failed: {outcome.error_message}")
        self.videos = outcome.videos
        return self.videos

    def run(self) -> SearchOutcome:
        """Search YouTube and classify how the search ended."""
        if not self.search_terms or not self.search_terms.strip():
            return SearchOutcome(status=SearchStatus.NO_RESULTS)

        url = build_search_url(self.search_terms)
        logger.info(f"Searching YouTube for: '{self.search_terms}'")

        try:
            html = self.fetcher.fetch(url)
            data = locate_initial_data(html)
        except NetworkError as e:
            return SearchOutcome.failed(SearchStatus.NETWORK_ERROR, url, e)
        except HttpStatusError as e:
            return SearchOutcome.failed(SearchStatus.HTTP_ERROR, url, e)
        except MarkerNotFoundError as e:
            return SearchOutcome.failed(SearchStatus.MARKER_NOT_FOUND, url, e)
        except ParseError as e:
            return SearchOutcome.failed(SearchStatus.PARSE_ERROR, url, e)
        except Exception as e:
            logger.exception(f"Unexpected error searching for '{self.search_terms}'")
            return SearchOutcome.failed(SearchStatus.UNEXPECTED_ERROR, url, e)

        videos = parse_videos(data)
        if self.config.max_results is not None:
            videos = videos[:self.config.max_results]

        logger.info(f"Found {len(videos)} videos for '{self.search_terms}'")
        status = SearchStatus.OK if videos else SearchStatus.NO_RESULTS
        return SearchOutcome(status=status, url=url, videos=videos)


def search_videos(search_terms: str, **options) -> List[VideoResult]:
    """Search YouTube with the given options and return the videos found."""
    return YoutubeSearch(search_terms, **options).search()
