# tests/test_smoke.py
import pytest
from smartcareer import create_app

@pytest.fixture
def client():
    app = create_app("test")
    with app.test_client() as c:
        yield c

def test_app_boots(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.get_json()["ok"] is True
    assert r.get_json()["quiz"] == "ready"

def test_unknown_route_is_json(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.is_json
    assert r.get_json().get("error") == "not_found"

def test_quiz_rejects_bad_answers(client):
    r = client.post("/quiz-next", json={"answers": "not a list"})
    assert r.status_code == 400
    assert r.is_json
    data = r.get_json()
    assert data.get("error") == "bad_request"

def test_quiz_is_post_only(client):
    r = client.get("/quiz-next")
    assert r.status_code == 405
    assert r.get_json().get("error") == "method_not_allowed"

def test_missing_key_reports_config_error(monkeypatch):
    from smartcareer.config import TestConfig
    monkeypatch.setattr(TestConfig, "OPENROUTER_API_KEY", "")
    app = create_app("test")
    assert app.config["QUIZ"] is None
    c = app.test_client()
    assert c.get("/healthz").get_json()["quiz"] == "unconfigured"
    r = c.post("/quiz-next", json={"answers": []})
    assert r.status_code == 500
    assert r.get_json()["error"] == "config_error"
    assert "OPENROUTER_API_KEY" in r.get_json()["message"]
