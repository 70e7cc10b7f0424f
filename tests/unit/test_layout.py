from datetime import datetime, timedelta, timezone

from news_desk.core.formatting import fallback_image
from news_desk.core.layout import build_layout, build_search_layout, featured_story, news_card, sidebar_item
from news_desk.models.news import Article, ArticleSource


NOW = datetime(2024, 1, 10, 12, 0, 0, tzinfo=timezone.utc)


def _stories(count: int):
    return [
        Article(
            title=f"Story {i}",
            url=f"https://example.com/{i}",
            source=ArticleSource(name="Example Wire"),
            published_at=NOW - timedelta(minutes=5 * i),
        )
        for i in range(count)
    ]


def test_seven_articles_partition() -> None:
    layout = build_layout(_stories(7), now=NOW)

    assert layout.featured.title == "Story 0"
    assert [item.title for item in layout.sidebar] == ["Story 1", "Story 2", "Story 3", "Story 4"]
    assert [item.slot for item in layout.sidebar] == [0, 1, 2, 3]
    assert [card.title for card in layout.latest] == ["Story 5", "Story 6"]
    assert layout.clear_sidebar is False


def test_latest_list_is_capped_at_four() -> None:
    layout = build_layout(_stories(12), now=NOW)
    assert [card.title for card in layout.latest] == ["Story 5", "Story 6", "Story 7", "Story 8"]


def test_short_list_fills_only_available_slots() -> None:
    layout = build_layout(_stories(3), now=NOW)

    assert layout.featured.title == "Story 0"
    assert [item.slot for item in layout.sidebar] == [0, 1]
    assert layout.latest == []


def test_empty_list_touches_nothing() -> None:
    layout = build_layout([], now=NOW)
    assert layout.featured is None
    assert layout.sidebar == []
    assert layout.latest == []


def test_featured_fallbacks() -> None:
    story = featured_story(Article())

    assert story.title == "Breaking News"
    assert story.description == "Click to read more about this story."
    assert story.link_url == "#"
    assert story.category_label == "TOP STORY"
    assert story.image_alt == "Featured News"
    assert story.image_url == fallback_image("technology", 0)


def test_featured_keeps_article_fields() -> None:
    story = featured_story(
        Article(title="T", description="D", url="https://x", urlToImage="https://x/i.jpg", category="Business")
    )
    assert (story.title, story.description, story.link_url) == ("T", "D", "https://x")
    assert story.image_url == "https://x/i.jpg"
    assert story.category_label == "Business"


def test_sidebar_item_fallbacks() -> None:
    item = sidebar_item(Article(), slot=1, now=NOW)

    assert item.title == "News Story"
    assert item.link_url == "#"
    assert item.image_alt == "News Image"
    assert item.image_url == fallback_image("general", 1)
    assert item.meta == "News Source • Just now"


def test_sidebar_item_meta_uses_source_and_time() -> None:
    article = Article(source=ArticleSource(name="Reuters"), published_at=NOW - timedelta(hours=3))
    assert sidebar_item(article, slot=0, now=NOW).meta == "Reuters • 3 hours ago"


def test_news_card_resolves_category_from_source() -> None:
    article = Article(title="Match report", source=ArticleSource(name="ESPN Now"))
    card = news_card(article, index=3, now=NOW)

    assert card.category == "SPORTS"
    assert card.image_url == fallback_image("sports", 3)
    assert card.byline == "ESPN Now"


def test_news_card_fallbacks() -> None:
    card = news_card(Article(), index=0, now=NOW)

    assert card.title == "News Story"
    assert card.category == "NEWS"
    assert card.byline == "Unknown Author"
    assert card.link_url == "#"
    assert card.time_ago == "Just now"
    assert card.image_url == fallback_image("general", 0)


def test_news_card_prefers_author_and_article_category() -> None:
    article = Article(author="Jane Smith", category="Business", source=ArticleSource(name="Wired"))
    card = news_card(article, index=0, now=NOW)

    assert card.byline == "Jane Smith"
    assert card.category == "BUSINESS"


def test_search_layout_clears_sidebar() -> None:
    layout = build_search_layout(_stories(7), now=NOW)

    assert layout.featured.title == "Story 0"
    assert layout.sidebar == []
    assert layout.clear_sidebar is True
    assert [card.title for card in layout.latest] == ["Story 1", "Story 2", "Story 3", "Story 4"]
