import os

import httpx
import streamlit as st

from news_desk.config import settings
from news_desk.core.router import CATEGORIES
from news_desk.ui.components import render_featured_region, render_latest_news, render_sidebar


API_BASE_URL = os.getenv("NEWS_DESK_API_BASE_URL", "http://localhost:8000")


def fetch_page(category: str | None = None, term: str | None = None) -> dict:
    """Ask the backend for a page state; failures become an error state."""

    try:
        if term:
            response = httpx.get(f"{API_BASE_URL}/search", params={"q": term}, timeout=30.0)
        else:
            category = category or settings.default_category
            response = httpx.get(f"{API_BASE_URL}/news/{category}", timeout=30.0)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPError as exc:
        st.error(f"Error calling backend: {exc}")
        return {
            "status": "error",
            "message": "Failed to load news. Please try again later.",
            "section_title": "Latest News",
            "sidebar": [],
            "latest": [],
        }


def main() -> None:
    st.set_page_config(page_title="Global News", page_icon="📰", layout="wide")

    st.markdown(
        """
        <style>
        .featured-article img { width: 100%; border-radius: 0.5rem; }
        .featured-article .category, .news-category {
            color: #e63946; font-size: 0.75rem; font-weight: 700; letter-spacing: 0.08em;
        }
        .sidebar-item { display: flex; gap: 0.75rem; margin-bottom: 0.75rem; }
        .sidebar-img { width: 90px; height: 60px; object-fit: cover; border-radius: 0.3rem; }
        .sidebar-meta, .news-meta { font-size: 0.75rem; opacity: 0.7; display: flex; gap: 0.75rem; }
        .news-card img { width: 100%; height: 160px; object-fit: cover; border-radius: 0.4rem; }
        .error-state { text-align: center; padding: 40px; color: #e63946; }
        .loading-state { text-align: center; padding: 40px; }
        </style>
        """,
        unsafe_allow_html=True,
    )

    if "request" not in st.session_state:
        st.session_state["request"] = {"category": settings.default_category, "term": None}

    st.title("Global News")

    nav = st.columns(len(CATEGORIES) + 1)
    for idx, category in enumerate(CATEGORIES):
        with nav[idx]:
            if st.button(category.name, key=f"nav-{category.id}"):
                st.session_state["request"] = {"category": category.id, "term": None}
    with nav[-1]:
        if st.button("View all", key="view-all"):
            st.session_state["request"] = {"category": "general", "term": None}

    with st.form("search", clear_on_submit=True):
        term = st.text_input("Search news", placeholder="Search news...")
        if st.form_submit_button("Search") and term.strip():
            st.session_state["request"] = {"category": None, "term": term.strip()}

    request = st.session_state["request"]
    with st.spinner("Loading latest news..."):
        state = fetch_page(request["category"], request["term"])

    main_col, side_col = st.columns([2, 1])
    with main_col:
        render_featured_region(state)
    with side_col:
        render_sidebar(state.get("sidebar") or [])

    render_latest_news(state.get("section_title") or "Latest News", state.get("latest") or [])


if __name__ == "__main__":
    main()
