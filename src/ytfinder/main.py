"""Command line entry point for ytfinder."""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .models.video import VideoResult
from .services.youtube_service import YoutubeSearch
from .utils.config import LOG_LEVELS, ConfigError, load_config, setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ytfinder",
        description="Search YouTube and list the videos on the first results page.",
    )
    parser.add_argument("query", help="Search terms, or a https://youtube.com URL")
    parser.add_argument("--max-results", type=int, help="Maximum number of videos to show")
    parser.add_argument("--retry-count", type=int, help="Number of fetch attempts")
    parser.add_argument("--retry-delay", type=float, help="Seconds between fetch attempts")
    parser.add_argument("--language", help="Language setting (not sent to YouTube)")
    parser.add_argument("--region", help="Region setting (not sent to YouTube)")
    parser.add_argument("--json", action="store_true", help="Print one JSON object per video")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Logging level")
    return parser


def render_table(videos: List[VideoResult], console: Console) -> None:
    table = Table(title=f"{len(videos)} videos")
    table.add_column("Title")
    table.add_column("Channel")
    table.add_column("Duration", justify="right")
    table.add_column("Views", justify="right")
    table.add_column("Published")
    table.add_column("URL")

    for video in videos:
        table.add_row(
            video.title or "",
            video.channel_name or "",
            video.duration or "",
            video.views_text or "",
            video.publish_time_text or "",
            video.watch_url or "",
        )

    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
        setup_logging(args.log_level or config['log_level'], config.get('log_file'))

        search = YoutubeSearch(
            args.query,
            max_results=args.max_results,
            language=args.language,
            region=args.region,
            retry_delay=args.retry_delay,
            retry_count=args.retry_count,
            config=config,
        )
    except ConfigError as e:
        logger.error(str(e))
        return 2

    videos = search.search()
    if not videos:
        logger.warning("No results found.")
        return 1

    if args.json:
        for video in videos:
            print(video.to_json())
    else:
        render_table(videos, Console())
    return 0


if __name__ == "__main__":
    sys.exit(main())
