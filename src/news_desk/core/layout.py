from datetime import datetime
from typing import List, Optional, Sequence

from ..models.layout import FeaturedStory, NewsCard, PageLayout, SidebarItem
from ..models.news import Article
from .formatting import fallback_image, format_time_ago, resolve_category


SIDEBAR_START = 1
SIDEBAR_END = 5
LATEST_LIMIT = 4

PLACEHOLDER_URL = "#"


def featured_story(article: Article) -> FeaturedStory:
    return FeaturedStory(
        image_url=article.url_to_image or fallback_image("technology"),
        image_alt=article.title or "Featured News",
        category_label=article.category or "TOP STORY",
        title=article.title or "Breaking News",
        description=article.description or "Click to read more about this story.",
        link_url=article.url or PLACEHOLDER_URL,
    )


def sidebar_item(article: Article, slot: int, now: Optional[datetime] = None) -> SidebarItem:
    source = article.source_name or "News Source"
    return SidebarItem(
        slot=slot,
        image_url=article.url_to_image or fallback_image("general", slot),
        image_alt=article.title or "News Image",
        title=article.title or "News Story",
        link_url=article.url or PLACEHOLDER_URL,
        meta=f"{source} • {format_time_ago(article.published_at, now)}",
    )


def news_card(article: Article, index: int, now: Optional[datetime] = None) -> NewsCard:
    category = resolve_category(article)
    return NewsCard(
        image_url=article.url_to_image or fallback_image(category.lower(), index),
        image_alt=article.title or "News Image",
        category=category,
        title=article.title or "News Story",
        link_url=article.url or PLACEHOLDER_URL,
        byline=article.author or article.source_name or "Unknown Author",
        time_ago=format_time_ago(article.published_at, now),
    )


def latest_cards(articles: Sequence[Article], now: Optional[datetime] = None) -> List[NewsCard]:
    return [news_card(article, index, now) for index, article in enumerate(articles[:LATEST_LIMIT])]


def build_layout(articles: Sequence[Article], now: Optional[datetime] = None) -> PageLayout:
    """Split an ordered article list into the three page regions.

    Index 0 is featured, indices 1-4 fill the sidebar slots in order and
    everything from index 5 feeds the latest list, capped at four cards.
    """

    if not articles:
        return PageLayout()

    sidebar = [
        sidebar_item(article, slot, now)
        for slot, article in enumerate(articles[SIDEBAR_START:SIDEBAR_END])
    ]
    return PageLayout(
        featured=featured_story(articles[0]),
        sidebar=sidebar,
        latest=latest_cards(articles[SIDEBAR_END:], now),
    )


def build_search_layout(articles: Sequence[Article], now: Optional[datetime] = None) -> PageLayout:
    """Search results skip the sidebar: first hit is featured, the rest are cards."""

    if not articles:
        return PageLayout(clear_sidebar=True)
    return PageLayout(
        featured=featured_story(articles[0]),
        latest=latest_cards(articles[1:], now),
        clear_sidebar=True,
    )
