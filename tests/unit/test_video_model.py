"""Tests for the VideoResult model."""

import dataclasses
import json

import pytest

from ytfinder.models.video import VideoResult


@pytest.fixture
def video():
    return VideoResult(
        video_id="abc123",
        thumbnails=("https://i.ytimg.com/vi/abc123/hq720.jpg",),
        title="A title",
        long_description="A description",
        channel_name="A channel",
        duration="10:01",
        views_text="42 views",
        publish_time_text="2 years ago",
        url_suffix="/watch?v=abc123",
        watch_url="https://youtube.com/watch?v=abc123",
    )


@pytest.mark.unit
def test_to_dict_uses_fixed_keys(video):
    assert video.to_dict() == {
        "id": "abc123",
        "thumbnails": ["https://i.ytimg.com/vi/abc123/hq720.jpg"],
        "title": "A title",
        "long_desc": "A description",
        "channel": "A channel",
        "duration": "10:01",
        "views": "42 views",
        "publish_time": "2 years ago",
        "url_suffix": "/watch?v=abc123",
        "yt_url": "https://youtube.com/watch?v=abc123",
    }


@pytest.mark.unit
def test_to_json_reparses_to_same_values(video):
    assert json.loads(video.to_json()) == video.to_dict()
    assert VideoResult.from_dict(json.loads(video.to_json())) == video


@pytest.mark.unit
def test_from_dict_with_missing_fields():
    result = VideoResult.from_dict({"id": "xyz", "title": ""})

    assert result.video_id == "xyz"
    assert result.title is None
    assert result.thumbnails == ()
    assert result.watch_url is None


@pytest.mark.unit
def test_video_result_is_immutable(video):
    with pytest.raises(dataclasses.FrozenInstanceError):
        video.title = "changed"
