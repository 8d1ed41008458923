"""Video-related data models."""

import json
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class VideoResult:
    """Represents a YouTube video search result."""

    video_id: Optional[str]
    thumbnails: Tuple[str, ...] = field(default_factory=tuple)
    title: Optional[str] = None
    long_description: Optional[str] = None
    channel_name: Optional[str] = None
    duration: Optional[str] = None  # as displayed, e.g. "12:34"
    views_text: Optional[str] = None
    publish_time_text: Optional[str] = None
    url_suffix: Optional[str] = None
    watch_url: Optional[str] = None

    def to_dict(self) -> Dict:
        """Convert result to a plain dictionary."""
        return {
            'id': self.video_id,
            'thumbnails': list(self.thumbnails),
            'title': self.title,
            'long_desc': self.long_description,
            'channel': self.channel_name,
            'duration': self.duration,
            'views': self.views_text,
            'publish_time': self.publish_time_text,
            'url_suffix': self.url_suffix,
            'yt_url': self.watch_url,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Dict) -> 'VideoResult':
        """Create result from a dictionary produced by to_dict."""
        return cls(
            video_id=data.get('id') or None,
            thumbnails=tuple(data.get('thumbnails') or ()),
            title=data.get('title') or None,
            long_description=data.get('long_desc') or None,
            channel_name=data.get('channel') or None,
            duration=data.get('duration') or None,
            views_text=data.get('views') or None,
            publish_time_text=data.get('publish_time') or None,
            url_suffix=data.get('url_suffix') or None,
            watch_url=data.get('yt_url') or None,
        )
