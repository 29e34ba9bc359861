"""
Utilities package for the Travel Recommendation Finder.

This package exposes:
- models: immutable Dataset / Country / PlaceItem / SearchResult types
- errors: EmptyQuery, DataNotReady, InvalidTimezone, DataLoadError
- data_loader: fetches the travel JSON document and holds it in a DataStore
- normalizer: resolves English/Spanish keyword aliases -> category names
- validators: structural checks of the travel document
"""

from . import data_loader, errors, models, normalizer, validators  # noqa: F401
