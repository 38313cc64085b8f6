"""City name suggestions for search-as-you-type."""

from __future__ import annotations

import logging

from glasscast.exceptions import GlasscastError
from glasscast.models.city import CitySearchCandidate
from glasscast.source import WeatherSource

_logger = logging.getLogger(__name__)


class SuggestionFetcher:
    """Turn free text into city candidates.

    Best effort: failures yield no suggestions rather than an error.  No
    debouncing, caching, or deduplication; every call hits the source.
    """

    def __init__(self, source: WeatherSource) -> None:
        self._source = source
        self.suggestions: list[CitySearchCandidate] = []

    async def fetch_suggestions(self, query: str) -> list[CitySearchCandidate]:
        if not query:
            self.suggestions = []
            return []
        try:
            candidates = await self._source.search_cities(query)
        except GlasscastError:
            _logger.debug("Suggestion lookup for %r failed", query, exc_info=True)
            candidates = []
        self.suggestions = list(candidates)
        return self.suggestions
