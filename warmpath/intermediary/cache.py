"""
Similarity Cache.

In-memory cache for profile similarity calculations. Entries are keyed by the
sorted pair of profile identifiers and expire after a fixed TTL.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple

from warmpath.common.config import Config
from warmpath.similarity.types import SimilarityBreakdown


class SimilarityCache:
    """
    Time-expiring cache of SimilarityBreakdown results.

    Example:
        cache = SimilarityCache()
        cache.set("alice", "bob", breakdown)
        cache.get("bob", "alice")  # same entry
    """

    def __init__(self, ttl: Optional[timedelta] = None):
        self.ttl = ttl or timedelta(days=Config.SIMILARITY_CACHE_TTL_DAYS)
        self._entries: Dict[Tuple[str, str], Tuple[SimilarityBreakdown, datetime]] = {}

    @staticmethod
    def _key(id1: str, id2: str) -> Tuple[str, str]:
        first, second = sorted((id1, id2))
        return first, second

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def get(self, id1: str, id2: str) -> Optional[SimilarityBreakdown]:
        """Cached similarity for the pair, or None if missing or expired."""
        key = self._key(id1, id2)
        entry = self._entries.get(key)
        if entry is None:
            return None

        similarity, expires_at = entry
        if self._now() > expires_at:
            del self._entries[key]
            return None
        return similarity

    def set(self, id1: str, id2: str, similarity: SimilarityBreakdown) -> None:
        self._entries[self._key(id1, id2)] = (similarity, self._now() + self.ttl)

    def clear_expired(self) -> int:
        """Drop expired entries. Returns the number removed."""
        now = self._now()
        expired = [key for key, (_, expires_at) in self._entries.items() if now > expires_at]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
