from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List

from ..config import settings
from ..models.news import Article


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NewsCache:
    """Keyed store of fetched article lists with one shared fetch timestamp.

    Freshness is judged against ``last_fetch``, which every ``put`` resets for
    all keys at once. A stale entry is never evicted; it is ignored by ``get``
    and replaced by the next ``put`` for its key.
    """

    def __init__(
        self,
        ttl: timedelta | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.ttl = ttl if ttl is not None else timedelta(seconds=settings.cache_ttl_seconds)
        self._clock = clock
        self._entries: Dict[str, List[Article]] = {}
        self.last_fetch: datetime | None = None

    def get(self, key: str) -> List[Article] | None:
        articles = self._entries.get(key)
        if articles is None or self.last_fetch is None:
            return None
        if self._clock() - self.last_fetch >= self.ttl:
            return None
        return articles

    def put(self, key: str, articles: List[Article]) -> None:
        self._entries[key] = articles
        self.last_fetch = self._clock()

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
