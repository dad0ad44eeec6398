"""
Demonstration-data fallback tests.

The database is made to fail by patching the loaders; the read endpoints
must then serve the built-in dataset, or propagate when the fallback is off.
"""

import pytest
from sqlalchemy.exc import OperationalError

from prodreg.services import snapshot_service


def _broken(*args, **kwargs):
    raise OperationalError("SELECT 1", {}, Exception("database is locked"))


@pytest.fixture
def broken_database(monkeypatch):
    monkeypatch.setattr(snapshot_service, "load_reference_store", _broken)


class TestDemoFallback:

    def test_history_served_from_demo_data(self, client, db_session, broken_database):
        body = client.get("/api/registrations?user=Tom%20Peckstadt").get_json()
        assert body["source"] == "demo"
        assert body["count"] == 6
        assert body["items"][0]["timestamp"] == "2025-06-16T20:32:00Z"

    def test_statistics_served_from_demo_data(self, client, db_session, broken_database):
        body = client.get("/api/reports/statistics").get_json()
        assert body["source"] == "demo"
        assert body["total_registrations"] == 13
        assert body["top_products"][0] == {"name": "Interflon Metal Clean spray 500ml", "count": 4}

    def test_products_served_from_demo_data(self, client, db_session, broken_database):
        body = client.get("/api/products?search=IFGR").get_json()
        assert body["source"] == "demo"
        assert [p["name"] for p in body["items"]] == ["Interflon Food Lube spray 500ml"]

    def test_fallback_disabled_propagates(self, app, db_session, broken_database, monkeypatch):
        monkeypatch.setitem(app.config, "DEMO_FALLBACK_ENABLED", False)
        with pytest.raises(OperationalError):
            snapshot_service.load_snapshot()

    @pytest.mark.parametrize("url", [
        "/api/registrations",
        "/api/reports/statistics",
        "/api/reports/top/user",
        "/api/products",
        "/api/products/lookup?qr_code=IFD003",
    ])
    def test_fallback_disabled_returns_json_error(self, app, client, db_session, broken_database, monkeypatch, url):
        monkeypatch.setitem(app.config, "DEMO_FALLBACK_ENABLED", False)
        resp = client.get(url)
        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Database unavailable"}


class TestHealth:

    def test_healthy(self, client, db_session):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["status"] == "healthy"
        assert body["data_source"] == "database"

    def test_degraded(self, client, db_session, monkeypatch):
        monkeypatch.setattr(snapshot_service, "database_available", lambda: False)
        resp = client.get("/api/health")
        assert resp.status_code == 503
        assert resp.get_json()["data_source"] == "demo"
