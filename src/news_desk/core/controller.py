from datetime import datetime
from typing import Callable, Optional

import httpx

from ..config import settings
from ..errors import EmptyResult, NewsDeskError
from ..models.layout import PageLayout
from ..models.state import PageState
from ..tools.cache import NewsCache
from ..logging_config import get_logger
from .layout import build_layout, build_search_layout
from .retrieval import load_category_articles, require_articles, search_articles
from .router import DEFAULT_NAV_CATEGORY, category_id_for_label


logger = get_logger("core.controller")

NO_CATEGORY_ARTICLES = "No news articles found for this category."
NO_SEARCH_RESULTS = "No results found for your search."
LOAD_FAILED = "Failed to load news. Please try again later."
SEARCH_FAILED = "Failed to search news. Please try again."


class NewsController:
    """Drives the page through its loading, content and error states.

    Every load or search takes a fresh sequence number. When a request
    finishes after a newer one was issued its result is dropped, so the page
    always reflects the most recent user action.
    """

    def __init__(
        self,
        cache: Optional[NewsCache] = None,
        client: Optional[httpx.AsyncClient] = None,
        state: Optional[PageState] = None,
        now: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.cache = cache if cache is not None else NewsCache()
        self.client = client
        self.state = state if state is not None else PageState()
        self._now = now
        self._seq = self.state.request_seq

    async def load_category(self, category_id: Optional[str] = None) -> PageState:
        category_id = category_id or settings.default_category
        seq = self._begin(active_category=category_id, search_term=None)
        try:
            articles = await load_category_articles(category_id, cache=self.cache, client=self.client)
            require_articles(articles, NO_CATEGORY_ARTICLES)
        except EmptyResult as exc:
            return self._fail(seq, str(exc))
        except NewsDeskError as exc:
            logger.error("load_category_failed", category=category_id, error=str(exc))
            return self._fail(seq, LOAD_FAILED)

        layout = build_layout(articles, self._current_time())
        return self._show(seq, layout, section_title="Latest News")

    async def search(self, term: str) -> PageState:
        term = (term or "").strip()
        if not term:
            return self.state

        seq = self._begin(search_term=term)
        try:
            articles = await search_articles(term, cache=self.cache, client=self.client)
            require_articles(articles, NO_SEARCH_RESULTS)
        except EmptyResult as exc:
            return self._fail(seq, str(exc))
        except NewsDeskError as exc:
            logger.error("search_failed", term=term, error=str(exc))
            return self._fail(seq, SEARCH_FAILED)

        layout = build_search_layout(articles, self._current_time())
        return self._show(seq, layout, section_title=f'Search Results: "{term}"')

    async def select_category(self, label: str) -> PageState:
        return await self.load_category(category_id_for_label(label))

    async def view_all(self) -> PageState:
        return await self.load_category(DEFAULT_NAV_CATEGORY)

    def apply_layout(self, layout: PageLayout, **updates) -> PageState:
        """Write a layout into the page regions it touches."""

        sidebar = list(self.state.sidebar)
        if layout.clear_sidebar:
            sidebar = [None] * len(sidebar)
        for item in layout.sidebar:
            if item.slot < len(sidebar):
                sidebar[item.slot] = item

        changes = dict(updates, sidebar=sidebar)
        if layout.featured is not None:
            changes["featured"] = layout.featured
        if layout.latest:
            changes["latest"] = layout.latest
        self.state = self.state.model_copy(update=changes)
        return self.state

    def _begin(self, **updates) -> int:
        self._seq += 1
        self.state = self.state.model_copy(
            update=dict(updates, status="loading", message=None, request_seq=self._seq)
        )
        return self._seq

    def _is_current(self, seq: int) -> bool:
        if seq != self._seq:
            logger.info("stale_result_discarded", request_seq=seq, latest_seq=self._seq)
            return False
        return True

    def _show(self, seq: int, layout: PageLayout, **updates) -> PageState:
        if not self._is_current(seq):
            return self.state
        return self.apply_layout(layout, status="content", message=None, **updates)

    def _fail(self, seq: int, message: str) -> PageState:
        if not self._is_current(seq):
            return self.state
        logger.warning("page_error", request_seq=seq, message=message)
        self.state = self.state.model_copy(update={"status": "error", "message": message})
        return self.state

    def _current_time(self) -> Optional[datetime]:
        return self._now() if self._now is not None else None
