"""
Services for the Travel Recommendation Finder.

- search_service: keyword normalization + category routing + fallback search
- timezone_service: country -> IANA zone and local time annotation
- presenter: turns a SearchResult into JSON-ready cards
"""
