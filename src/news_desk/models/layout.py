from typing import List, Optional

from pydantic import BaseModel


class FeaturedStory(BaseModel):
    image_url: str
    image_alt: str
    category_label: str
    title: str
    description: str
    link_url: str


class SidebarItem(BaseModel):
    slot: int
    image_url: str
    image_alt: str
    title: str
    link_url: str
    meta: str


class NewsCard(BaseModel):
    image_url: str
    image_alt: str
    category: str
    title: str
    link_url: str
    byline: str
    time_ago: str


class PageLayout(BaseModel):
    """Placement instructions produced from one ordered article list.

    ``featured`` of ``None`` and an empty ``latest`` both mean "leave that
    region as it is". Sidebar items carry their slot index; slots without an
    item are left untouched unless ``clear_sidebar`` is set.
    """

    featured: Optional[FeaturedStory] = None
    sidebar: List[SidebarItem] = []
    latest: List[NewsCard] = []
    clear_sidebar: bool = False
