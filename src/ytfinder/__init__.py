"""Scrape YouTube search results without the Data API."""

from .models.search import SearchOutcome, SearchStatus
from .models.video import VideoResult
from .services.youtube_service import YoutubeSearch, search_videos

__version__ = "0.1.0"

__all__ = [
    "SearchOutcome",
    "SearchStatus",
    "VideoResult",
    "YoutubeSearch",
    "search_videos",
]
