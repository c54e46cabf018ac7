from __future__ import annotations

import pytest

from rotaplan.web import create_app


@pytest.fixture()
def client():
    app = create_app({"TESTING": True})
    with app.test_client() as client:
        yield client


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.data == b"OK"


def test_schedule_json(client):
    response = client.get("/api/schedule?year=2024&month=3&months=2")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["ok"] is True
    assert [m["month"] for m in payload["months"]] == ["2024-03", "2024-04"]
    march = payload["months"][0]
    assert march["work_days"] == 9
    assert march["days"][0] == {"day": 1, "date": "2024-03-01", "is_work_day": True, "weekday": 5, "is_weekend": False}
    assert payload["months"][1]["end_state"] == {"on_duty": False, "rest_streak": 1}
    assert payload["totals"]["days"] == 61


def test_schedule_legacy_switch(client):
    threaded = client.get("/api/schedule?year=2024&month=4&months=2").get_json()
    legacy = client.get("/api/schedule?year=2024&month=4&months=2&legacy=1").get_json()
    assert threaded["months"][1]["days"][1]["is_work_day"] is True
    assert legacy["months"][1]["days"][1]["is_work_day"] is True
    assert legacy["months"][0]["end_state"] == {"on_duty": False, "rest_streak": 1}


def test_rotation_config_from_app_config():
    app = create_app({"TESTING": True, "ROTAPLAN": {"rotation": {"rest_days": 3}}})
    with app.test_client() as client:
        payload = client.get("/api/schedule?year=2024&month=3").get_json()
    work = [d["day"] for d in payload["months"][0]["days"] if d["is_work_day"]]
    assert work[:2] == [1, 5]


@pytest.mark.parametrize(
    "query",
    ["year=2024&month=13", "year=2024&month=abc", "year=2024&month=3&months=0", "year=2024&month=3&months=10000000"],
)
def test_bad_requests(client, query):
    response = client.get(f"/api/schedule?{query}")
    assert response.status_code == 400
    assert response.get_json()["ok"] is False


def test_csv_export(client):
    response = client.get("/api/schedule.csv?year=2024&month=3")
    assert response.status_code == 200
    assert response.headers["Content-Type"].startswith("text/csv")
    assert "schedule_2024-03.csv" in response.headers["Content-Disposition"]
    assert response.data.decode("utf-8").splitlines()[1].startswith("2024-03,2024-03-01,1,5")


def test_xlsx_export(client):
    response = client.get("/api/export/xlsx?year=2024&month=3&months=2")
    assert response.status_code == 200
    assert "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet" in response.headers["Content-Type"]
    assert "schedule_2024-03_2024-04.xlsx" in response.headers["Content-Disposition"]


def test_month_count_limit(client):
    assert client.get("/api/schedule?year=2024&month=1&months=120").status_code == 200
    response = client.get("/api/schedule?year=2024&month=1&months=121")
    assert response.status_code == 400
    assert "120" in response.get_json()["error"]
