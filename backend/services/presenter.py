# backend/services/presenter.py
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from utils.models import Category, Country, PlaceItem, SearchResult
from services.timezone_service import country_local_time, country_timezone

EMPTY_STATE_MESSAGE = "No recommendations found. Please try another keyword."

_CARD_TYPES = {
    Category.COUNTRIES: "country",
    Category.BEACHES: "beach",
    Category.TEMPLES: "temple",
}


class Presenter(ABC):
    """What the search core hands its results to."""

    @abstractmethod
    def render(self, result: SearchResult) -> Any: ...

    @abstractmethod
    def render_empty_state(self) -> Any: ...

    @abstractmethod
    def clear(self) -> Any: ...


class CardPresenter(Presenter):
    """
    Builds JSON-ready cards:
      - country: name, timezone, local_time (None if unavailable), city cards
      - beach / temple: name, description, imageUrl
    `clock` is injectable so tests can pin the local-time annotation.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.clock = clock

    def render(self, result: SearchResult) -> Dict[str, Any]:
        if result.is_empty:
            return self.render_empty_state()

        now = self.clock() if self.clock else None
        cards: List[Dict[str, Any]] = []
        for item in result.items:
            if isinstance(item, Country):
                cards.append(self._country_card(item, now))
            else:
                cards.append(self._place_card(item, _CARD_TYPES.get(result.category, "place")))

        return {
            "visible": True,
            "category": result.category.value,
            "count": len(cards),
            "cards": cards,
            "message": None,
        }

    def render_empty_state(self) -> Dict[str, Any]:
        return {
            "visible": True,
            "category": Category.NONE.value,
            "count": 0,
            "cards": [],
            "message": EMPTY_STATE_MESSAGE,
        }

    def clear(self) -> Dict[str, Any]:
        return {"visible": False, "category": Category.NONE.value, "count": 0, "cards": [], "message": None}

    # ---------- card builders ----------

    @staticmethod
    def _place_card(item: PlaceItem, card_type: str) -> Dict[str, Any]:
        return {"type": card_type, **item.to_dict()}

    def _country_card(self, country: Country, now: Optional[datetime]) -> Dict[str, Any]:
        return {
            "type": "country",
            "name": country.name,
            "timezone": country_timezone(country.name),
            "local_time": country_local_time(country.name, now=now),
            "cities": [self._place_card(c, "city") for c in country.cities],
        }
