"""Shared pytest fixtures for ytfinder tests."""

from unittest.mock import patch

import pytest

from tests.fakes import make_page, make_section, make_video_renderer


@pytest.fixture
def base_config():
    """Configuration dict independent of the environment."""
    return {
        'retry_count': 3,
        'retry_delay': 0.5,
        'timeout': 5.0,
        'user_agent': 'ytfinder-tests',
        'max_results': None,
        'language': None,
        'region': None,
        'log_level': 'INFO',
        'log_file': None,
    }


@pytest.fixture
def no_sleep():
    """Skip the delay between retries and record requested sleeps."""
    with patch("ytfinder.utils.retry.time.sleep") as mock_sleep:
        yield mock_sleep


@pytest.fixture
def mock_get():
    with patch("ytfinder.services.fetcher.httpx.get") as mock:
        yield mock


@pytest.fixture
def sample_page():
    """Results page with three videos across two sections plus non-video items."""
    return make_page([
        make_section([
            {"adSlotRenderer": {"slotId": "ad-1"}},
            make_video_renderer("vid00000001", title="First video"),
            make_video_renderer("vid00000002", title="Second video"),
        ]),
        {"continuationItemRenderer": {"trigger": "CONTINUATION_TRIGGER_ON_ITEM_SHOWN"}},
        make_section([
            {"shelfRenderer": {"title": {"simpleText": "People also watched"}}},
            make_video_renderer("vid00000003", title="Third video"),
        ]),
    ])
