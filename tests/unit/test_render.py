from news_desk.core.render import render_news_card, render_page
from news_desk.models.layout import FeaturedStory, NewsCard, SidebarItem
from news_desk.models.state import PageState


def _card(title: str = "Card") -> NewsCard:
    return NewsCard(
        image_url="https://example.com/i.jpg",
        image_alt=title,
        category="NEWS",
        title=title,
        link_url="https://example.com",
        byline="Unknown Author",
        time_ago="Just now",
    )


def test_news_card_escapes_text() -> None:
    html = render_news_card(_card('<script>alert("x")</script>'))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert 'class="news-card"' in html


def test_loading_page_fills_featured_and_latest() -> None:
    html = render_page(PageState(latest=[_card("Old")]))
    assert html.count("Loading latest news...") == 2
    assert "Old" not in html


def test_error_page_offers_retry() -> None:
    state = PageState(status="error", message="No results found for your search.", search_term="mars rover")
    html = render_page(state)

    assert "Something went wrong" in html
    assert "No results found for your search." in html
    assert 'href="/page?q=mars+rover"' in html


def test_content_page_renders_regions() -> None:
    state = PageState(
        status="content",
        active_category="sports",
        section_title='Search Results: "goal"',
        featured=FeaturedStory(
            image_url="https://example.com/f.jpg",
            image_alt="Lead",
            category_label="TOP STORY",
            title="Lead story",
            description="Desc",
            link_url="#",
        ),
        sidebar=[
            None,
            SidebarItem(
                slot=1,
                image_url="https://example.com/s.jpg",
                image_alt="Side",
                title="Side story",
                link_url="#",
                meta="Wire • Just now",
            ),
            None,
            None,
        ],
        latest=[_card("Latest one")],
    )
    html = render_page(state)

    assert "Lead story" in html
    assert "Side story" in html
    assert "Latest one" in html
    assert "Search Results: &quot;goal&quot;" in html
    assert '<li class="active"><a href="/page?category=sports">' in html


def test_error_page_encodes_category_in_retry_link() -> None:
    state = PageState(status="error", message="No news articles found for this category.", active_category="a&q=evil")
    html = render_page(state)

    assert 'href="/page?category=a%26q%3Devil"' in html
    assert "category=a&amp;q=evil" not in html
