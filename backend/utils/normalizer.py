# backend/utils/normalizer.py
from __future__ import annotations

from typing import Dict, Mapping, Optional

# English/Spanish, singular/plural, with and without accents
KEYWORD_ALIASES: Dict[str, str] = {
    "beach": "beaches",
    "beaches": "beaches",
    "playa": "beaches",
    "playas": "beaches",
    "temple": "temples",
    "temples": "temples",
    "templo": "temples",
    "templos": "temples",
    "country": "countries",
    "countries": "countries",
    "pais": "countries",
    "paises": "countries",
    "país": "countries",
    "países": "countries",
}


class Normalizer:
    """
    Resolves a free-text keyword into a canonical category name using the
    alias table. Unknown keywords come back trimmed and lowercased.
    """

    def __init__(self, aliases: Optional[Mapping[str, str]] = None):
        self.aliases: Mapping[str, str] = aliases if aliases is not None else KEYWORD_ALIASES

    def resolve(self, raw: str) -> str:
        term = (raw or "").strip().lower()
        return self.aliases.get(term, term)


_default = Normalizer()


def normalize(raw: str) -> str:
    return _default.resolve(raw)
