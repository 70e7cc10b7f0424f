from typing import Literal, Optional, List

from pydantic import BaseModel

from .layout import FeaturedStory, SidebarItem, NewsCard


SIDEBAR_SLOTS = 4


class PageState(BaseModel):
    status: Literal["loading", "content", "error"] = "loading"
    message: Optional[str] = None
    section_title: str = "Latest News"
    active_category: Optional[str] = None
    search_term: Optional[str] = None
    featured: Optional[FeaturedStory] = None
    sidebar: List[Optional[SidebarItem]] = [None] * SIDEBAR_SLOTS
    latest: List[NewsCard] = []
    request_seq: int = 0
