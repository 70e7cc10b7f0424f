from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_published_at(value):
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


class ArticleSource(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None


class Article(BaseModel):
    """One news item, as returned by NewsAPI or taken from the fallback set.

    Field aliases follow the API's camelCase keys so a raw ``articles`` entry
    validates directly. ``category`` never comes from the real API.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    url_to_image: Optional[str] = Field(default=None, alias="urlToImage")
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    source: Optional[ArticleSource] = None
    author: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None

    @field_validator("published_at", mode="before")
    @classmethod
    def _lenient_published_at(cls, value):
        return parse_published_at(value)

    @property
    def source_name(self) -> Optional[str]:
        if self.source is None:
            return None
        return self.source.name
