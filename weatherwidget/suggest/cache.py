"""Time-boxed in-memory cache for autocomplete results."""

from dataclasses import dataclass

from weatherwidget.models.weather import SuggestionRecord

SUGGEST_TTL_MS = 120_000  # 2 minutes


def normalize_query(raw: str) -> str:
    return raw.lower().strip()


@dataclass(frozen=True)
class CacheEntry:
    ts: float  # ms
    data: list[SuggestionRecord]


class SuggestionCache:
    """Maps normalized query text to the suggestions fetched for it.

    Entries are never pruned proactively; an expired entry is dropped when
    it is next read.
    """

    def __init__(self, ttl_ms: float = SUGGEST_TTL_MS):
        self.ttl_ms = ttl_ms
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str, now_ms: float) -> list[SuggestionRecord] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if now_ms - entry.ts < self.ttl_ms:
            return entry.data
        self._entries.pop(key, None)
        return None

    def put(self, key: str, data: list[SuggestionRecord], now_ms: float) -> None:
        self._entries[key] = CacheEntry(ts=now_ms, data=data)
