# backend/services/search_service.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

from utils.errors import DataNotReady, EmptyQuery
from utils.models import Category, Country, Dataset, PlaceItem, SearchResult
from utils.normalizer import Normalizer

logger = logging.getLogger(__name__)

Item = Union[Country, PlaceItem]
# (collect matching items from the dataset for a lowercased needle, category)
FallbackRule = Tuple[Callable[[Dataset, str], Sequence[Item]], Category]

CATEGORY_NAMES = {c.value: c for c in (Category.COUNTRIES, Category.BEACHES, Category.TEMPLES)}


# ---------- fallback predicates ----------

def _countries_by_name(data: Dataset, needle: str) -> List[Country]:
    return [c for c in data.countries if needle in c.name.lower()]


def _countries_by_city(data: Dataset, needle: str) -> List[Country]:
    # the owning country is returned, not the matching city
    return [c for c in data.countries if any(needle in city.name.lower() for city in c.cities)]


def _beaches_by_name(data: Dataset, needle: str) -> List[PlaceItem]:
    return [b for b in data.beaches if needle in b.name.lower()]


def _temples_by_name(data: Dataset, needle: str) -> List[PlaceItem]:
    return [t for t in data.temples if needle in t.name.lower()]


# Evaluated in order; the first rule with any match wins.
FALLBACK_RULES: Tuple[FallbackRule, ...] = (
    (_countries_by_name, Category.COUNTRIES),
    (_countries_by_city, Category.COUNTRIES),
    (_beaches_by_name, Category.BEACHES),
    (_temples_by_name, Category.TEMPLES),
)


class SearchService:
    """
    Keyword search over a loaded Dataset:
      - exact category keyword (after alias normalization) -> whole category
      - otherwise substring match on names, first non-empty rule wins
    Holds no per-call state.
    """

    def __init__(
        self,
        normalizer: Optional[Normalizer] = None,
        rules: Sequence[FallbackRule] = FALLBACK_RULES,
    ) -> None:
        self.normalizer = normalizer or Normalizer()
        self.rules = tuple(rules)

    # ---------- public API ----------

    def normalize(self, raw: str) -> str:
        return self.normalizer.resolve(raw)

    def search(self, raw_query: str, data: Optional[Dataset]) -> SearchResult:
        """
        Raises EmptyQuery for a blank query and DataNotReady when no dataset
        has been loaded. An empty result is not an error.
        """
        if not raw_query or not raw_query.strip():
            raise EmptyQuery()
        if data is None:
            logger.error("Travel data not loaded")
            raise DataNotReady()

        normalized = self.normalize(raw_query)
        logger.info("Searching for: %s", normalized)

        category = CATEGORY_NAMES.get(normalized)
        if category is not None:
            result = SearchResult(items=tuple(data.items_for(category)), category=category)
        else:
            result = self._fallback(raw_query.lower(), data)

        logger.info("Results found: %d (%s)", len(result.items), result.category.value)
        return result

    # ---------- internals ----------

    def _fallback(self, needle: str, data: Dataset) -> SearchResult:
        for collect, category in self.rules:
            matches = collect(data, needle)
            if matches:
                return SearchResult(items=tuple(matches), category=category)
        return SearchResult(items=(), category=Category.NONE)


_default = SearchService()


def search(raw_query: str, data: Optional[Dataset]) -> SearchResult:
    return _default.search(raw_query, data)
