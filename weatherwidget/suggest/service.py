"""Autocomplete lookup with normalization, minimum length and TTL cache."""

import logging
from collections.abc import Callable

from weatherwidget.models.common import Clock, now_ms
from weatherwidget.models.weather import SuggestionRecord
from weatherwidget.suggest.cache import SUGGEST_TTL_MS, SuggestionCache, normalize_query

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2

LookupFn = Callable[[str], list[SuggestionRecord]]


class SuggestionService:
    """One instance per search input.

    ``lookup_fn`` is the network call (raw query in, suggestions out).
    Failures are swallowed: the caller gets an empty list and nothing is
    cached.
    """

    def __init__(
        self,
        lookup_fn: LookupFn,
        ttl_ms: float = SUGGEST_TTL_MS,
        min_query_length: int = MIN_QUERY_LENGTH,
        clock: Clock = now_ms,
    ):
        self.lookup_fn = lookup_fn
        self.cache = SuggestionCache(ttl_ms)
        self.min_query_length = min_query_length
        self.clock = clock

    def lookup(self, query: str) -> list[SuggestionRecord]:
        key = normalize_query(query)
        if len(key) < self.min_query_length:
            return []

        now = self.clock()
        cached = self.cache.get(key, now)
        if cached is not None:
            logger.debug("Suggestion cache hit for %r", key)
            return cached

        try:
            data = self.lookup_fn(query)
        except Exception as e:
            logger.warning("Suggestion lookup failed for %r: %s", key, e)
            return []

        self.cache.put(key, data, now)
        return data
