from datetime import datetime, timedelta, timezone

import pytest

from news_desk.core.formatting import (
    FALLBACK_IMAGES,
    category_from_source,
    fallback_image,
    format_time_ago,
    resolve_category,
)
from news_desk.models.news import Article, ArticleSource


NOW = datetime(2024, 1, 10, 12, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "Just now"),
        (30, "Just now"),
        (59, "Just now"),
        (60, "1 minutes ago"),
        (90, "1 minutes ago"),
        (3599, "59 minutes ago"),
        (3600, "1 hours ago"),
        (7200, "2 hours ago"),
        (86399, "23 hours ago"),
        (86400, "1 days ago"),
        (172800, "2 days ago"),
    ],
)
def test_format_time_ago_buckets(seconds: int, expected: str) -> None:
    assert format_time_ago(NOW - timedelta(seconds=seconds), now=NOW) == expected


def test_format_time_ago_missing_timestamp() -> None:
    assert format_time_ago(None, now=NOW) == "Just now"
    assert format_time_ago("", now=NOW) == "Just now"


def test_format_time_ago_parses_api_strings() -> None:
    assert format_time_ago("2024-01-10T09:30:00Z", now=NOW) == "2 hours ago"
    assert format_time_ago("not a date", now=NOW) == "Just now"


def test_format_time_ago_future_timestamp_is_just_now() -> None:
    assert format_time_ago(NOW + timedelta(hours=3), now=NOW) == "Just now"


def test_fallback_image_is_deterministic_and_wraps() -> None:
    assert fallback_image("technology", 0) == fallback_image("technology", 0)
    assert fallback_image("technology", 0) == FALLBACK_IMAGES["technology"][0]
    assert fallback_image("technology", 1) == FALLBACK_IMAGES["technology"][1]
    assert fallback_image("technology", 2) == fallback_image("technology", 0)
    assert fallback_image("sports", 5) == FALLBACK_IMAGES["sports"][1]


def test_fallback_image_unknown_category_uses_general_pool() -> None:
    assert fallback_image("news", 1) == FALLBACK_IMAGES["general"][1]
    assert fallback_image(None) == FALLBACK_IMAGES["general"][0]


@pytest.mark.parametrize(
    "source_name, expected",
    [
        ("TechCrunch Daily", "TECHNOLOGY"),
        ("ESPN Now", "SPORTS"),
        ("Random Gazette", "NEWS"),
        ("Bloomberg", "BUSINESS"),
        ("BBC Sport", "SPORTS"),
        ("Bloomberg Technology", "TECHNOLOGY"),
        (None, "NEWS"),
        ("", "NEWS"),
    ],
)
def test_category_from_source(source_name, expected: str) -> None:
    assert category_from_source(source_name) == expected


def test_resolve_category_prefers_article_category() -> None:
    assert resolve_category(Article(category="Business", source=ArticleSource(name="ESPN"))) == "BUSINESS"
    assert resolve_category(Article(source=ArticleSource(name="Wired"))) == "TECHNOLOGY"
    assert resolve_category(Article()) == "NEWS"
