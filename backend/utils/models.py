# backend/utils/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple, Union


class Category(str, Enum):
    COUNTRIES = "countries"
    BEACHES = "beaches"
    TEMPLES = "temples"
    NONE = "none"


@dataclass(frozen=True)
class PlaceItem:
    """A city, beach or temple card entry."""

    name: str
    description: str = ""
    image_url: str = ""

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "PlaceItem":
        return cls(
            name=str(row.get("name") or ""),
            description=str(row.get("description") or ""),
            image_url=str(row.get("imageUrl") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description, "imageUrl": self.image_url}


# Cities share the card shape of beaches and temples
City = PlaceItem


@dataclass(frozen=True)
class Country:
    name: str
    cities: Tuple[City, ...] = ()

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "Country":
        return cls(
            name=str(row.get("name") or ""),
            cities=tuple(City.from_dict(c) for c in (row.get("cities") or [])),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "cities": [c.to_dict() for c in self.cities]}


@dataclass(frozen=True)
class Dataset:
    """
    The whole travel document. Built once by the loader and never mutated;
    lists are stored as tuples so a shared snapshot stays read-only.
    """

    countries: Tuple[Country, ...] = ()
    beaches: Tuple[PlaceItem, ...] = ()
    temples: Tuple[PlaceItem, ...] = ()

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Dataset":
        return cls(
            countries=tuple(Country.from_dict(r) for r in (payload.get("countries") or [])),
            beaches=tuple(PlaceItem.from_dict(r) for r in (payload.get("beaches") or [])),
            temples=tuple(PlaceItem.from_dict(r) for r in (payload.get("temples") or [])),
        )

    def items_for(self, category: Category) -> Tuple[Union[Country, PlaceItem], ...]:
        if category is Category.COUNTRIES:
            return self.countries
        if category is Category.BEACHES:
            return self.beaches
        if category is Category.TEMPLES:
            return self.temples
        return ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "countries": [c.to_dict() for c in self.countries],
            "beaches": [b.to_dict() for b in self.beaches],
            "temples": [t.to_dict() for t in self.temples],
        }


@dataclass(frozen=True)
class SearchResult:
    items: Tuple[Union[Country, PlaceItem], ...] = field(default_factory=tuple)
    category: Category = Category.NONE

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0
