import math
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..models.news import Article, parse_published_at


_UNSPLASH_PARAMS = "?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&q=80"

FALLBACK_IMAGES: Dict[str, List[str]] = {
    "technology": [
        "https://images.unsplash.com/photo-1581094794329-c8112a89af12" + _UNSPLASH_PARAMS,
        "https://images.unsplash.com/photo-1518709268805-4e9042af2176" + _UNSPLASH_PARAMS,
    ],
    "business": [
        "https://images.unsplash.com/photo-1589829545856-d10d557cf95f" + _UNSPLASH_PARAMS,
        "https://images.unsplash.com/photo-1551288049-bebda4e38f71" + _UNSPLASH_PARAMS,
    ],
    "sports": [
        "https://images.unsplash.com/photo-1517466787929-bc90951d0974" + _UNSPLASH_PARAMS,
        "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b" + _UNSPLASH_PARAMS,
    ],
    "health": [
        "https://images.unsplash.com/photo-1551601651-2a8555f1a136" + _UNSPLASH_PARAMS,
        "https://images.unsplash.com/photo-1559757148-5c350d0d3c56" + _UNSPLASH_PARAMS,
    ],
    "general": [
        "https://images.unsplash.com/photo-1588681664899-f142ff2dc9b1" + _UNSPLASH_PARAMS,
        "https://images.unsplash.com/photo-1504711434969-e33886168f5c" + _UNSPLASH_PARAMS,
    ],
}

# Checked in this order; the first keyword found in the source name wins.
SOURCE_KEYWORDS = [
    ("TECHNOLOGY", ["tech", "wired", "the verge", "techcrunch"]),
    ("BUSINESS", ["business", "bloomberg", "financial times", "economist"]),
    ("SPORTS", ["espn", "sports", "bbc sport"]),
]


def format_time_ago(published_at, now: Optional[datetime] = None) -> str:
    """Render a publish timestamp relative to ``now``.

    Buckets use the floored number of elapsed seconds and whole-unit integer
    division, so 90 seconds reads "1 minutes ago". Missing or unparsable
    timestamps, and timestamps in the future, read "Just now".
    """

    published = parse_published_at(published_at)
    if published is None:
        return "Just now"
    if published.tzinfo is None:
        published = published.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = math.floor((now - published).total_seconds())
    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        return f"{seconds // 60} minutes ago"
    if seconds < 86400:
        return f"{seconds // 3600} hours ago"
    return f"{seconds // 86400} days ago"


def fallback_image(category: Optional[str], index: int = 0) -> str:
    images = FALLBACK_IMAGES.get(category or "", FALLBACK_IMAGES["general"])
    return images[index % len(images)]


def category_from_source(source_name: Optional[str]) -> str:
    if not source_name:
        return "NEWS"
    lowered = source_name.lower()
    for label, keywords in SOURCE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return label
    return "NEWS"


def resolve_category(article: Article) -> str:
    """Upper-cased display category for a card, whatever the article's origin."""

    category = article.category or category_from_source(article.source_name)
    return category.upper()
