from typing import Any, Iterable, Mapping, Optional

import streamlit as st

from news_desk.core.render import (
    render_error,
    render_featured,
    render_latest,
    render_loading,
    render_sidebar_item,
)
from news_desk.models.layout import FeaturedStory, NewsCard, SidebarItem


def render_featured_region(state: Mapping[str, Any]) -> None:
    status = state.get("status")
    if status == "loading":
        st.markdown(render_loading(), unsafe_allow_html=True)
        return
    if status == "error":
        st.markdown(render_error(state.get("message") or ""), unsafe_allow_html=True)
        if st.button("Try Again", key="retry"):
            st.rerun()
        return

    featured: Optional[Mapping[str, Any]] = state.get("featured")
    if not featured:
        st.write("No featured story yet.")
        return
    st.markdown(render_featured(FeaturedStory.model_validate(featured)), unsafe_allow_html=True)


def render_sidebar(items: Iterable[Optional[Mapping[str, Any]]]) -> None:
    st.subheader("Trending Now")
    shown = 0
    for item in items:
        if not item:
            continue
        st.markdown(render_sidebar_item(SidebarItem.model_validate(item)), unsafe_allow_html=True)
        shown += 1
    if not shown:
        st.write("Nothing trending right now.")


def render_latest_news(title: str, cards: Iterable[Mapping[str, Any]]) -> None:
    st.subheader(title)
    news_cards = [NewsCard.model_validate(card) for card in cards]
    if not news_cards:
        st.write("No more stories.")
        return

    columns = st.columns(2)
    for idx, card in enumerate(news_cards):
        with columns[idx % 2]:
            st.markdown(render_latest([card]), unsafe_allow_html=True)
