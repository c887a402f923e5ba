"""Contract tests for the /health endpoint."""

from pymongo.errors import ServerSelectionTimeoutError

from conftest import FakeDb


def test_health_ok(make_client):
    resp = make_client().get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert isinstance(body["ts_ms"], int)


def test_health_reports_store_down(make_client):
    resp = make_client(db=FakeDb(ping_exc=ServerSelectionTimeoutError("down"))).get("/health")
    assert resp.status_code == 503
    assert resp.json()["error"]["type"] == "StoreUnavailableError"
