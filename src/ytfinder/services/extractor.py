"""Extraction of video results from the ytInitialData blob of a results page."""

import json
import logging
from typing import Any, Dict, Iterator, List

from ..models.video import VideoResult
from ..utils.json_path import dig, dig_list, dig_text
from .fetcher import BASE_URL, YT_INITIAL_DATA_MARKER

logger = logging.getLogger(__name__)

JSON_END_MARKER = "};"
# Skips the marker plus the ' = ' of the assignment
JSON_START_OFFSET = len(YT_INITIAL_DATA_MARKER) + 3

SECTION_LIST_PATH = (
    "contents",
    "twoColumnSearchResultsRenderer",
    "primaryContents",
    "sectionListRenderer",
    "contents",
)


class ParseError(Exception):
    """Raised when the embedded JSON cannot be located or decoded."""
    pass


def locate_initial_data(html: str) -> Dict[str, Any]:
    """Cut the ytInitialData object out of a page and decode it.

    Raises:
        ParseError: If the marker or closing delimiter is missing, or the
            slice between them is not a JSON object
    """
    marker_index = html.find(YT_INITIAL_DATA_MARKER)
    if marker_index == -1:
        raise ParseError(f"{YT_INITIAL_DATA_MARKER} marker not found in page")

    start_index = marker_index + JSON_START_OFFSET
    end_index = html.find(JSON_END_MARKER, start_index)
    if end_index == -1:
        raise ParseError(f"No '{JSON_END_MARKER}' after {YT_INITIAL_DATA_MARKER}")

    json_str = html[start_index:end_index + 1]
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid {YT_INITIAL_DATA_MARKER} JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"{YT_INITIAL_DATA_MARKER} is not a JSON object")
    return data


def iter_video_renderers(data: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    """Yield every videoRenderer under the search results, in page order.

    Sections without items and items that are not videos (ads, shelves,
    channel cards) are skipped.
    """
    for section in dig_list(data, *SECTION_LIST_PATH):
        for item in dig_list(section, "itemSectionRenderer", "contents"):
            video_renderer = dig(item, "videoRenderer")
            if isinstance(video_renderer, dict):
                yield video_renderer


def parse_video_renderer(video_renderer: Dict[str, Any]) -> VideoResult:
    """Map one videoRenderer object to a VideoResult.

    Each field is read independently; a missing field becomes None.
    Thumbnail entries without a url are left out of ``thumbnails``.
    """
    url_suffix = dig_text(video_renderer, "navigationEndpoint", "commandMetadata", "webCommandMetadata", "url")
    thumbnails = tuple(
        url for url in (dig_text(thumb, "url") for thumb in dig_list(video_renderer, "thumbnail", "thumbnails"))
        if url
    )

    return VideoResult(
        video_id=dig_text(video_renderer, "videoId"),
        thumbnails=thumbnails,
        title=dig_text(video_renderer, "title", "runs", 0, "text"),
        long_description=dig_text(video_renderer, "descriptionSnippet", "runs", 0, "text"),
        channel_name=dig_text(video_renderer, "longBylineText", "runs", 0, "text"),
        duration=dig_text(video_renderer, "lengthText", "simpleText"),
        views_text=dig_text(video_renderer, "viewCountText", "simpleText"),
        publish_time_text=dig_text(video_renderer, "publishedTimeText", "simpleText"),
        url_suffix=url_suffix,
        watch_url=f"{BASE_URL}{url_suffix}" if url_suffix else None,
    )


def parse_videos(data: Dict[str, Any]) -> List[VideoResult]:
    """Parse all videos from decoded ytInitialData.

    A renderer that fails to map is logged and skipped.
    """
    results = []
    for video_renderer in iter_video_renderers(data):
        try:
            results.append(parse_video_renderer(video_renderer))
        except Exception as e:
            logger.warning(f"Failed to parse video entry: {e}")
    return results


def extract_videos(html: str) -> List[VideoResult]:
    """Extract video results from a results page. Never raises."""
    try:
        data = locate_initial_data(html)
    except ParseError as e:
        logger.error(f"Error parsing HTML: {e}")
        return []

    return parse_videos(data)
