from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from bells import app as app_module
from bells.settings import BellsSettings
from bells.version import PROJECT_VERSION


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    monkeypatch.setattr(
        app_module, "settings", BellsSettings(source="preset:legacy")
    )
    with TestClient(app_module.app) as client:
        yield client


def test_status(client: TestClient) -> None:
    res = client.get("/status")
    assert res.status_code == 200
    data = res.json()
    assert data["source"] == "preset:legacy"
    assert data["days"] == 6
    assert data["bell"] == 5000
    assert data["version"] == PROJECT_VERSION == "v1.2.0"


def test_now(client: TestClient) -> None:
    res = client.get("/now")
    assert res.status_code == 200
    data = res.json()
    assert data["status"] in {"no_lessons", "not_started", "ended", "in_period"}
    assert len(data["now"]) == 8


def test_week(client: TestClient) -> None:
    data = client.get("/timetable").json()
    assert [d["name"] for d in data["days"]][0] == "понедельник"
    assert len(data["days"]) == 6


def test_day(client: TestClient) -> None:
    data = client.get("/timetable/понедельник").json()
    assert data["start"] == "09:30"
    assert data["periods"][1] == {
        "kind": "break",
        "index": 1,
        "start": "10:15",
        "end": "10:25",
        "duration": 10,
        "label": "Перемена (10 минут)",
    }


def test_day_off(client: TestClient) -> None:
    data = client.get("/timetable/вс").json()
    assert data["periods"] == []


def test_unknown_day(client: TestClient) -> None:
    assert client.get("/timetable/праздник").status_code == 404
