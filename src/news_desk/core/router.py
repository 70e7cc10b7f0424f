from typing import List

from pydantic import BaseModel


class Category(BaseModel):
    id: str
    name: str
    icon: str


CATEGORIES: List[Category] = [
    Category(id="general", name="General", icon="fa-home"),
    Category(id="world", name="World", icon="fa-globe"),
    Category(id="business", name="Business", icon="fa-chart-line"),
    Category(id="technology", name="Technology", icon="fa-laptop"),
    Category(id="health", name="Health", icon="fa-heartbeat"),
    Category(id="sports", name="Sports", icon="fa-futbol"),
    Category(id="entertainment", name="Entertainment", icon="fa-film"),
]

DEFAULT_NAV_CATEGORY = "general"


def category_id_for_label(label: str) -> str:
    """Map a navigation link label to a category id.

    Labels are matched case-insensitively against category names; anything
    unrecognised browses the general headlines.
    """
    lowered = label.strip().lower()
    for category in CATEGORIES:
        if category.name.lower() == lowered:
            return category.id
    return DEFAULT_NAV_CATEGORY
