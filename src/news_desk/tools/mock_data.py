from datetime import datetime, timedelta, timezone
from typing import List

from ..core.formatting import fallback_image
from ..models.news import Article


DEFAULT_MOCK_KEY = "technology"


def _mock_news_data(now: datetime) -> dict:
    return {
        "technology": [
            {
                "title": "AI Breakthrough: New Algorithm Outperforms Humans in Creative Tasks",
                "description": "Researchers have developed an AI system that can generate original artwork and music compositions.",
                "urlToImage": fallback_image("technology", 0),
                "url": "#",
                "publishedAt": now,
                "source": {"name": "Tech News"},
                "author": "Jane Smith",
                "category": "Technology",
            },
            {
                "title": "Quantum Computing Milestone Achieved by Research Team",
                "description": "Scientists have successfully maintained quantum coherence for record-breaking duration.",
                "urlToImage": fallback_image("technology", 1),
                "url": "#",
                "publishedAt": now - timedelta(hours=1),
                "source": {"name": "Science Daily"},
                "author": "Dr. Robert Chen",
                "category": "Technology",
            },
        ],
        "business": [
            {
                "title": "Global Markets Surge as Economic Recovery Exceeds Expectations",
                "description": "Stock indices worldwide hit new highs following positive economic indicators.",
                "urlToImage": fallback_image("business", 0),
                "url": "#",
                "publishedAt": now - timedelta(hours=2),
                "source": {"name": "Financial Times"},
                "author": "Michael Johnson",
                "category": "Business",
            },
        ],
    }


def get_mock_news(key: str | None, now: datetime | None = None) -> List[Article]:
    """Built-in articles served when the news API cannot be reached.

    Publish times are relative to ``now`` so the demo always looks current.
    Unknown keys get the technology set.
    """

    data = _mock_news_data(now or datetime.now(timezone.utc))
    items = data.get(key or "", data[DEFAULT_MOCK_KEY])
    return [Article.model_validate(item) for item in items]
