import json

import pytest

from app import create_app
from utils.data_loader import DataStore


@pytest.fixture
def data_file(tmp_path, sample_document):
    path = tmp_path / "travel.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.fixture
def client(data_file):
    app = create_app(store=DataStore(str(data_file)), load_async=False)
    return app.test_client()


@pytest.fixture
def not_ready_client(tmp_path):
    app = create_app(store=DataStore(str(tmp_path / "missing.json")), load_async=False)
    return app.test_client()


def test_health_reports_data_status(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["ok"] is True
    assert data["data"]["ready"] is True


def test_search_by_alias(client):
    resp = client.get("/search", query_string={"q": "Playa"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["normalized"] == "beaches"
    assert data["category"] == "beaches"
    assert data["count"] == 2
    assert [c["name"] for c in data["cards"]] == [
        "Bora Bora, French Polynesia",
        "Copacabana Beach, Brazil",
    ]


def test_search_post_city_fallback(client):
    resp = client.post("/search", json={"q": "kyoto"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["category"] == "countries"
    assert [c["name"] for c in data["cards"]] == ["Japan"]
    assert data["cards"][0]["timezone"] == "Asia/Tokyo"
    assert data["cards"][0]["local_time"]


def test_search_no_match_has_empty_state(client):
    data = client.get("/search?q=bali").get_json()
    assert data["category"] == "none"
    assert data["cards"] == []
    assert data["message"] == "No recommendations found. Please try another keyword."


@pytest.mark.parametrize("q", ["", "   "])
def test_search_blank_query_is_400(client, q):
    resp = client.get("/search", query_string={"q": q})
    assert resp.status_code == 400
    assert resp.get_json() == {
        "error": "empty_query",
        "message": "Please enter a valid search query.",
    }


def test_search_before_data_is_503(not_ready_client):
    resp = not_ready_client.get("/search?q=beaches")
    assert resp.status_code == 503
    assert resp.get_json()["error"] == "data_not_ready"


def test_normalize_endpoint(client):
    assert client.get("/normalize", query_string={"q": "PAÍSES"}).get_json()["normalized"] == "countries"


def test_categories_endpoint(client):
    data = client.get("/categories/templo").get_json()
    assert data["category"] == "temples"
    assert data["count"] == 3
    assert client.get("/categories/volcanoes").status_code == 404


def test_timezone_endpoint(client):
    data = client.get("/timezone/French%20Polynesia").get_json()
    assert data["timezone"] == "Pacific/Tahiti"
    assert data["local_time"]
    assert client.get("/timezone/Atlantis").get_json()["timezone"] == "UTC"


def test_clear_endpoint(client):
    assert client.post("/clear").get_json()["visible"] is False


def test_validate_endpoint(client):
    assert client.get("/validate").get_json() == {"ok": True, "issues": []}


def test_reload_recovers_after_failed_load(tmp_path, sample_document):
    path = tmp_path / "late.json"
    app = create_app(store=DataStore(str(path)), load_async=False)
    c = app.test_client()
    assert c.get("/search?q=beaches").status_code == 503
    assert c.post("/reload").status_code == 503

    path.write_text(json.dumps(sample_document), encoding="utf-8")
    assert c.post("/reload").status_code == 200
    assert c.get("/search?q=beaches").get_json()["count"] == 2


def test_reload_of_undecodable_file_is_503(data_file):
    app = create_app(store=DataStore(str(data_file)), load_async=False)
    c = app.test_client()
    data_file.write_bytes(b"\xff\xfe\x00")
    resp = c.post("/reload")
    assert resp.status_code == 503
    body = resp.get_json()
    assert body["ok"] is False
    assert "Invalid JSON" in body["data"]["error"]
    # previous snapshot still serves searches
    assert c.get("/search?q=beaches").get_json()["count"] == 2
