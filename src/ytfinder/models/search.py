"""Search outcome and status models for ytfinder."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .video import VideoResult


class SearchStatus(Enum):
    """Classification of how a search call ended."""
    OK = "ok"
    NO_RESULTS = "no_results"
    NETWORK_ERROR = "network_error"
    HTTP_ERROR = "http_error"
    MARKER_NOT_FOUND = "marker_not_found"
    PARSE_ERROR = "parse_error"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass
class SearchOutcome:
    """Result of one search call, including how it failed if it did."""

    status: SearchStatus
    url: Optional[str] = None
    videos: List[VideoResult] = field(default_factory=list)
    error_message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        """True when the page was fetched and parsed, even with zero videos."""
        return self.status in (SearchStatus.OK, SearchStatus.NO_RESULTS)

    def to_dict(self) -> dict:
        return {
            'status': self.status.value,
            'url': self.url,
            'videos': [video.to_dict() for video in self.videos],
            'error_message': self.error_message,
        }

    @classmethod
    def failed(cls, status: SearchStatus, url: Optional[str], error: Exception) -> 'SearchOutcome':
        """Create an outcome for a failed search."""
        return cls(status=status, url=url, error_message=str(error))
