"""Tests for the landing page, health check and helpers."""

from datetime import date, datetime

import pytest

from models.database import resolve_db_name
from utils.dates import format_date, parse_date
from utils.helpers import parse_limit


class TestAppRoutes:

    def test_index_route(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]

    def test_static_files(self, client):
        response = client.get("/public/style.css")
        assert response.status_code == 200

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestDates:

    @pytest.mark.parametrize("value", [
        "2023-01-15",
        "2023-01-15T10:30:00",
        "2023-01-15T10:30:00Z",
        "Sun Jan 15 2023",
        date(2023, 1, 15),
        datetime(2023, 1, 15, 18, 0),
    ])
    def test_parse_date(self, value):
        assert parse_date(value) == date(2023, 1, 15)

    @pytest.mark.parametrize("value", [None, "", "not a date", "2023-13-40", 42])
    def test_parse_date_rejects(self, value):
        assert parse_date(value) is None

    def test_format_date(self):
        assert format_date(date(2023, 1, 5)) == "Thu Jan 05 2023"
        assert format_date(datetime(2023, 1, 5, 23, 59)) == "Thu Jan 05 2023"
        assert format_date(None) is None


class TestHelpers:

    @pytest.mark.parametrize("value, expected", [
        ("3", 3),
        (" 10 ", 10),
        ("0", None),
        ("-1", None),
        ("1.5", None),
        (str(2 ** 63 - 1), 2 ** 63 - 1),
        (str(2 ** 63), None),
        ("many", None),
        (None, None),
    ])
    def test_parse_limit(self, value, expected):
        assert parse_limit(value) == expected

    def test_resolve_db_name(self):
        assert resolve_db_name("mongodb://localhost:27017/fitness") == "fitness"
        assert resolve_db_name("mongodb://localhost:27017") == "exercise_tracker"
