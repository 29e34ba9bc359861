from __future__ import annotations

from typing import Any, Dict, List

CATEGORY_KEYS = ("countries", "beaches", "temples")


def validate_place_structure(item: Any, where: str) -> List[str]:
    """
    Validate a single city/beach/temple entry.
    Only `name` is required; description and imageUrl are optional strings.
    """
    errs: List[str] = []
    if not isinstance(item, dict):
        return [f"{where} must be an object"]

    name = item.get("name")
    if not isinstance(name, str) or not name.strip():
        errs.append(f"{where} missing 'name'")

    for key in ("description", "imageUrl"):
        val = item.get(key)
        if val is not None and not isinstance(val, str):
            errs.append(f"{where}.{key} must be a string")
    return errs


def validate_country_structure(country: Any, where: str) -> List[str]:
    if not isinstance(country, dict):
        return [f"{where} must be an object"]

    errs: List[str] = []
    name = country.get("name")
    if not isinstance(name, str) or not name.strip():
        errs.append(f"{where} missing 'name'")

    cities = country.get("cities")
    if cities is None:
        return errs
    if not isinstance(cities, list):
        errs.append(f"{where}.cities must be a list")
        return errs
    for i, city in enumerate(cities):
        errs.extend(validate_place_structure(city, f"{where}.cities[{i}]"))
    return errs


def validate_dataset(payload: Any) -> List[str]:
    """
    Validate the raw travel document.
    Returns a list of human-readable error strings (empty if valid).

    A missing category key is allowed (treated as an empty list); a present
    key must hold a list of well-formed entries.
    """
    if not isinstance(payload, dict):
        return ["document must be a JSON object"]

    errs: List[str] = []
    for key in CATEGORY_KEYS:
        rows = payload.get(key)
        if rows is None:
            continue
        if not isinstance(rows, list):
            errs.append(f"{key} must be a list")
            continue
        for i, row in enumerate(rows):
            where = f"{key}[{i}]"
            if key == "countries":
                errs.extend(validate_country_structure(row, where))
            else:
                errs.extend(validate_place_structure(row, where))
    return errs


def summarize(payload: Dict[str, Any]) -> Dict[str, int]:
    """Entry counts per category, for the health endpoint and smoke checks."""
    return {key: len(payload.get(key) or []) for key in CATEGORY_KEYS}
