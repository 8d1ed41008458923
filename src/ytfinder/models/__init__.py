"""Data models for ytfinder."""

from .search import SearchOutcome, SearchStatus
from .video import VideoResult

__all__ = ["SearchOutcome", "SearchStatus", "VideoResult"]
