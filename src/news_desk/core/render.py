from html import escape
from typing import Iterable, Optional
from urllib.parse import quote_plus

from ..models.layout import FeaturedStory, NewsCard, SidebarItem
from ..models.state import PageState
from .router import CATEGORIES


def _e(value: Optional[str]) -> str:
    return escape(value or "", quote=True)


def render_featured(story: FeaturedStory) -> str:
    return f"""
    <div class="featured-article">
        <img src="{_e(story.image_url)}" alt="{_e(story.image_alt)}">
        <div class="featured-content">
            <span class="category">{_e(story.category_label)}</span>
            <h2>{_e(story.title)}</h2>
            <p>{_e(story.description)}</p>
            <a href="{_e(story.link_url)}" class="read-more" target="_blank">Read More</a>
        </div>
    </div>
    """


def render_sidebar_item(item: SidebarItem) -> str:
    return f"""
    <div class="sidebar-item" data-slot="{item.slot}">
        <img src="{_e(item.image_url)}" alt="{_e(item.image_alt)}" class="sidebar-img">
        <div class="sidebar-content">
            <h4><a href="{_e(item.link_url)}" target="_blank">{_e(item.title)}</a></h4>
            <div class="sidebar-meta">{_e(item.meta)}</div>
        </div>
    </div>
    """


def render_news_card(card: NewsCard) -> str:
    return f"""
    <article class="news-card">
        <img src="{_e(card.image_url)}" alt="{_e(card.image_alt)}">
        <div class="news-content">
            <div class="news-category">{_e(card.category)}</div>
            <h3><a href="{_e(card.link_url)}" target="_blank">{_e(card.title)}</a></h3>
            <div class="news-meta">
                <span>{_e(card.byline)}</span>
                <span>{_e(card.time_ago)}</span>
            </div>
        </div>
    </article>
    """


def render_latest(cards: Iterable[NewsCard]) -> str:
    return "".join(render_news_card(card) for card in cards)


def render_loading() -> str:
    return """
    <div class="loading-state">
        <div class="spinner"></div>
        <p>Loading latest news...</p>
    </div>
    """


def render_error(message: str, retry_url: str = "") -> str:
    return f"""
    <div class="error-state">
        <h3>Something went wrong</h3>
        <p>{_e(message)}</p>
        <a href="{_e(retry_url)}" class="retry-button">Try Again</a>
    </div>
    """


def _render_nav(active: Optional[str]) -> str:
    links = []
    for category in CATEGORIES:
        css = ' class="active"' if category.id == active else ""
        links.append(
            f'<li{css}><a href="/page?category={quote_plus(category.id)}">'
            f'<i class="fas {category.icon}"></i> {_e(category.name)}</a></li>'
        )
    return '<ul class="nav-menu" id="nav-menu">' + "".join(links) + "</ul>"


def _retry_url(state: PageState) -> str:
    if state.search_term:
        return f"/page?q={quote_plus(state.search_term)}"
    if state.active_category:
        return f"/page?category={quote_plus(state.active_category)}"
    return "/"


def render_page(state: PageState) -> str:
    """Assemble the full front page for a page state.

    The loading state fills the featured and latest regions with the
    spinner; the error state replaces only the featured region.
    """

    if state.status == "loading":
        featured_html = render_loading()
    elif state.status == "error":
        featured_html = render_error(state.message or "", _retry_url(state))
    elif state.featured is not None:
        featured_html = render_featured(state.featured)
    else:
        featured_html = ""

    latest_html = render_loading() if state.status == "loading" else render_latest(state.latest)
    sidebar_html = "".join(render_sidebar_item(item) for item in state.sidebar if item is not None)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>Global News</title>
</head>
<body>
    <header>
        <nav>{_render_nav(state.active_category)}</nav>
        <form class="search-bar" action="/page" method="get">
            <input type="text" name="q" placeholder="Search news..." value="{_e(state.search_term)}">
            <button type="submit">Search</button>
        </form>
    </header>
    <main>
        <section class="hero">
            <div class="featured-region">{featured_html}</div>
            <aside class="sidebar-news"><h3>Trending Now</h3>{sidebar_html}</aside>
        </section>
        <section>
            <div class="section-title"><h2>{_e(state.section_title)}</h2>
                <a href="/page?category=general" class="view-all">View All</a></div>
            <div class="latest-news">{latest_html}</div>
        </section>
    </main>
</body>
</html>
"""
