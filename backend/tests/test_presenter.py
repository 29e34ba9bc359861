from datetime import datetime, timezone

from services.presenter import EMPTY_STATE_MESSAGE, CardPresenter
from services.search_service import search
from utils.models import Category, SearchResult

FIXED = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


def _presenter():
    return CardPresenter(clock=lambda: FIXED)


def test_country_cards_carry_local_time_and_cities(dataset):
    out = _presenter().render(search("japan", dataset))
    assert out["category"] == "countries"
    assert out["count"] == 1
    card = out["cards"][0]
    assert card["type"] == "country"
    assert card["timezone"] == "Asia/Tokyo"
    assert card["local_time"] == "Mon, Oct 19, 2026, 9:00:00 PM"
    assert [c["name"] for c in card["cities"]] == ["Tokyo, Japan", "Kyoto temple town"]
    assert card["cities"][0]["imageUrl"] == "tokyo.jpg"


def test_place_cards_have_no_time(dataset):
    out = _presenter().render(search("temple", dataset))
    assert out["category"] == "temples"
    assert {c["type"] for c in out["cards"]} == {"temple"}
    assert all("local_time" not in c for c in out["cards"])
    assert out["message"] is None


def test_empty_result_renders_empty_state():
    out = _presenter().render(SearchResult(items=(), category=Category.NONE))
    assert out["cards"] == []
    assert out["message"] == EMPTY_STATE_MESSAGE
    assert out["visible"] is True


def test_clear_hides_results():
    out = _presenter().clear()
    assert out["visible"] is False
    assert out["cards"] == []
