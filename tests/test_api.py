from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from api.app import create_app
from api.routes import prayertimes


@pytest.fixture
def client(config):
    return TestClient(create_app(config))


@pytest.fixture
def frozen_now(monkeypatch):
    monkeypatch.setattr(prayertimes, "local_now", lambda tz=None: datetime(2026, 2, 18, 20, 0))


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_prayer_times_returns_raw_rows_for_city_and_window(client):
    response = client.get("/api/prayertimes")
    assert response.status_code == 200
    rows = response.json()
    assert [row["date"] for row in rows] == ["02-18", "03-01", "03-19"]
    assert rows[0] == {"bayani": "05:11", "xorhalatn": "06:34", "niwaro": "12:10",
                       "asr": "15:19", "eywara": "17:46", "esha": "19:03", "date": "02-18"}


def test_today_view_rolls_to_next_dawn(client, frozen_now):
    body = client.get("/api/prayertimes/today", params={"lang": "en"}).json()
    assert body["today"]["date"] == "02-18"
    # 03-01 is malformed and skipped, so the entry after 02-18 is 03-19
    assert body["countdown"]["slot"] == "bayani"
    assert body["countdown"]["target"] == "2026-02-19T04:38:00"
    assert body["countdown"]["remaining"] == "8h 38m 0s"


def test_month_view(client, frozen_now):
    body = client.get("/api/prayertimes/month/3", params={"lang": "ku"}).json()
    assert body["dir"] == "rtl"
    assert [row["date"] for row in body["rows"]] == ["٠٣-١٩"]


def test_month_view_rejects_bad_month(client):
    assert client.get("/api/prayertimes/month/13").status_code == 422


def test_ramadan_view(client, frozen_now):
    body = client.get("/api/prayertimes/ramadan", params={"lang": "en"}).json()
    assert body["title"] == "Ramadan"
    assert [row["is_today"] for row in body["rows"]] == [True, False]


def test_database_error_returns_500(client, monkeypatch):
    def broken(**kwargs):
        raise OperationalError("SELECT", {}, Exception("no such table"))

    monkeypatch.setattr(prayertimes, "fetch_rows", broken)
    response = client.get("/api/prayertimes")
    assert response.status_code == 500
    assert response.json() == {"error": "Database error"}


def test_views_default_to_configured_language(client, frozen_now):
    today = client.get("/api/prayertimes/today").json()
    assert today["lang"] == "ku"
    assert today["dir"] == "rtl"
    assert today["today"]["date"] == "٠٢-١٨"

    ramadan = client.get("/api/prayertimes/ramadan").json()
    assert ramadan["title"] == "ڕەمەزان"


def test_explicit_language_overrides_configured_default(client, frozen_now):
    body = client.get("/api/prayertimes/month/2", params={"lang": "en"}).json()
    assert body["title"] == "Month 02"
    assert body["rows"][0]["times"][0] == "5:11 AM"
