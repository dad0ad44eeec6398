"""
Statistics and ranking report tests.
"""

import pytest


class TestStatistics:

    def test_statistics_on_demo_data(self, client, demo_data):
        resp = client.get("/api/reports/statistics")
        assert resp.status_code == 200
        body = resp.get_json()

        assert body["total_registrations"] == 13
        assert body["source"] == "database"
        assert body["top_users"][0] == {"name": "Tom Peckstadt", "count": 6}
        assert len(body["top_users"]) == 5
        assert body["top_locations"][0] == {"name": "Warehouse Dematic groot boven", "count": 5}

        top_counts = [row["count"] for row in body["top_products"]]
        assert top_counts == [4, 4, 2, 2, 1]

        chart = body["product_chart"]
        assert len(chart) == 5
        assert chart[0]["start_angle"] == 0
        assert sum(segment["sweep_angle"] for segment in chart) == pytest.approx(360.0)

        recent = body["recent_activity"]
        assert len(recent) == 10
        assert recent[0]["timestamp"] == "2025-06-16T21:07:00.000Z"

    def test_statistics_limit(self, client, demo_data):
        body = client.get("/api/reports/statistics?limit=2").get_json()
        assert len(body["top_users"]) == 2
        assert len(body["top_locations"]) == 2
        # the chart always covers the top five products
        assert len(body["product_chart"]) == 5

    def test_statistics_on_empty_history(self, client, db_session):
        body = client.get("/api/reports/statistics").get_json()
        assert body["total_registrations"] == 0
        assert body["top_users"] == []
        assert body["product_chart"] == []
        assert body["recent_activity"] == []

    @pytest.mark.parametrize("limit", ["0", "101"])
    def test_statistics_limit_out_of_range(self, client, db_session, limit):
        resp = client.get(f"/api/reports/statistics?limit={limit}")
        assert resp.status_code == 400


class TestTopReport:

    def test_top_locations(self, client, demo_data):
        body = client.get("/api/reports/top/location?limit=3").get_json()
        assert body["dimension"] == "location"
        assert body["limit"] == 3
        assert [row["count"] for row in body["rows"]] == [5, 3, 3]

    def test_top_users_default_limit(self, client, demo_data):
        body = client.get("/api/reports/top/user").get_json()
        assert len(body["rows"]) == 5

    def test_unknown_dimension(self, client, db_session):
        resp = client.get("/api/reports/top/purpose")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "dimension must be one of: user, product, location"
