# backend/app.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_cors import CORS

# Load backend/.env (optional) before anything reads settings
load_dotenv(Path(__file__).resolve().parent / ".env")

from settings import settings  # noqa: E402

# utils
from utils.data_loader import DataStore, check_source  # noqa: E402
from utils.errors import DataLoadError, DataNotReady, EmptyQuery, TravelSearchError  # noqa: E402
from utils.normalizer import Normalizer  # noqa: E402

# services
from services.presenter import CardPresenter, Presenter  # noqa: E402
from services.search_service import CATEGORY_NAMES, SearchService  # noqa: E402
from services.timezone_service import country_local_time, country_timezone  # noqa: E402

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def _error(exc: TravelSearchError, status: int):
    return jsonify({"error": exc.code, "message": exc.message}), status


def _query_from_request() -> str:
    """
    Accept the query as ?q= / ?query= on GET, or {"q": ...} / {"query": ...}
    in a JSON body on POST. Missing query -> empty string.
    """
    if request.method == "POST":
        data = request.get_json(force=True, silent=True) or {}
        raw = data.get("q", data.get("query"))
    else:
        raw = request.args.get("q", request.args.get("query"))
    return raw if isinstance(raw, str) else ""


# -----------------------------------------------------------------------------
# App factory
# -----------------------------------------------------------------------------
def create_app(
    store: Optional[DataStore] = None,
    presenter: Optional[Presenter] = None,
    load_async: Optional[bool] = None,
) -> Flask:
    """
    Build the Flask app. The DataStore starts loading at creation time
    (in the background unless load_async is False); searches made before
    it completes get a 503 "still loading".
    """
    app = Flask(__name__)
    # Open CORS for dev (tighten in prod if needed)
    CORS(app)

    store = store or DataStore()
    presenter = presenter or CardPresenter()
    searcher = SearchService(normalizer=Normalizer())

    if load_async if load_async is not None else settings.TRAVEL_LOAD_ASYNC:
        logger.info("App created, fetching travel data in the background...")
        store.load_async()
    elif not store.ready:
        try:
            store.load()
        except DataLoadError:
            # not-ready is reported per request
            pass

    # -------------------------------------------------------------------------
    # JSON API Routes
    # -------------------------------------------------------------------------
    @app.get("/health")
    def health():
        return jsonify(
            {
                "ok": True,
                "name": "Travel Recommendation Finder API",
                "data": store.status(),
                "endpoints": [
                    "GET  /health",
                    "GET  /search?q=<keyword>",
                    "POST /search",
                    "POST /clear",
                    "GET  /normalize?q=<keyword>",
                    "GET  /categories/<category>",
                    "GET  /timezone/<country>",
                    "GET  /validate",
                    "POST /reload",
                ],
            }
        )

    @app.route("/search", methods=["GET", "POST"])
    def search():
        """
        Keyword search. 400 for a blank query, 503 while data is not loaded.
        An empty match is a 200 carrying the empty-state message.
        """
        raw = _query_from_request()
        try:
            result = searcher.search(raw, store.dataset)
        except TravelSearchError as e:
            status = 400 if isinstance(e, EmptyQuery) else 503
            return _error(e, status)

        rendered: Dict[str, Any] = presenter.render(result)
        payload = {
            "query": raw,
            "normalized": searcher.normalize(raw),
            **rendered,
            "category": result.category.value,
        }
        return jsonify(payload), 200

    @app.post("/clear")
    def clear():
        return jsonify(presenter.clear()), 200

    @app.get("/normalize")
    def normalize():
        raw = _query_from_request()
        return jsonify({"query": raw, "normalized": searcher.normalize(raw)})

    @app.get("/categories/<name>")
    def category_items(name: str):
        """Whole category by name or alias (e.g. /categories/playa)."""
        category = CATEGORY_NAMES.get(searcher.normalize(name))
        if category is None:
            return jsonify({"error": "unknown_category", "message": f"Unknown category: {name}"}), 404
        data = store.dataset
        if data is None:
            return _error(DataNotReady(), 503)
        items = [item.to_dict() for item in data.items_for(category)]
        return jsonify({"category": category.value, "count": len(items), "items": items})

    @app.get("/timezone/<path:country>")
    def timezone(country: str):
        return jsonify(
            {
                "country": country,
                "timezone": country_timezone(country),
                "local_time": country_local_time(country),
            }
        )

    @app.get("/validate")
    def validate():
        """Structural validation of the configured document."""
        issues = check_source(store.source)
        return jsonify({"ok": len(issues) == 0, "issues": issues})

    @app.post("/reload")
    def reload():
        """Re-read the data source; the previous snapshot survives a failure."""
        try:
            store.load()
        except DataLoadError as e:
            return jsonify({"ok": False, "message": e.message, "data": store.status()}), 503
        return jsonify({"ok": True, "message": "Reloaded travel data", "data": store.status()}), 200

    return app


# -----------------------------------------------------------------------------
# Entrypoint
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    configure_logging()
    # Respect PORT env var if present; default 5001 (to avoid 5000 collisions)
    create_app().run(host="127.0.0.1", port=settings.PORT, debug=True)
