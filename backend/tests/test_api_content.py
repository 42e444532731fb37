"""
Tests for events, figures, sites and event types over HTTP.
"""
import pytest

from lichsu.models import Event


# =============================================================================
# Create
# =============================================================================

def test_create_event_appends_to_period_group(client, db, world):
    response = client.post(
        "/api/events",
        json={
            "periodId": world.bac_thuoc.id,
            "title": "Khởi nghĩa Lý Bí",
            "year": "542",
            "eventTypeIds": [world.battle.id],
        },
    )

    assert response.status_code == 201
    event = response.json()
    assert event["sortOrder"] == 2
    assert event["slug"] == "khoi-nghia-ly-bi"

    db.expire_all()
    assert [t.id for t in db.get(Event, event["id"]).event_types] == [world.battle.id]


def test_create_event_without_period(client, world):
    response = client.post("/api/events", json={"title": "Truyền thuyết Thánh Gióng"})

    assert response.status_code == 201
    assert response.json()["periodId"] is None
    assert response.json()["sortOrder"] == 0


@pytest.mark.parametrize("path, body", [
    ("/api/events", {"periodId": 4040, "title": "Sự kiện"}),
    ("/api/historical-figures", {"periodId": 4040, "name": "Nhân vật"}),
    ("/api/historical-sites", {"periodId": 4040, "name": "Di tích"}),
])
def test_create_with_unknown_period(client, world, path, body):
    response = client.post(path, json=body)

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_create_event_with_unknown_event_type(client, world):
    response = client.post("/api/events", json={"title": "Sự kiện", "eventTypeIds": [4040]})

    assert response.status_code == 400


def test_create_figure_copies_period_name(client, world):
    response = client.post(
        "/api/historical-figures",
        json={"periodId": world.tran.id, "name": "Trần Hưng Đạo", "lifespan": "1228 - 1300"},
    )

    assert response.status_code == 201
    figure = response.json()
    assert figure["periodText"] == "Nhà Trần"
    assert figure["sortOrder"] == 0


def test_create_site(client, world):
    response = client.post(
        "/api/historical-sites",
        json={"periodId": world.tran.id, "name": "Đền Kiếp Bạc", "location": "Hải Dương"},
    )

    assert response.status_code == 201
    assert response.json()["sortOrder"] == 1


def test_create_event_type(client, world):
    response = client.post("/api/event-types", json={"name": "Khởi nghĩa", "color": "#1565C0"})

    assert response.status_code == 201
    assert response.json()["slug"] == "khoi-nghia"
    assert response.json()["sortOrder"] == 2


def test_create_event_type_with_taken_slug(client, world):
    response = client.post("/api/event-types", json={"name": "Chiến tranh"})

    assert response.status_code == 400


# =============================================================================
# List filters
# =============================================================================

def test_list_figures_by_period(client, world):
    response = client.get("/api/historical-figures", params={"periodId": world.ly.id})

    assert [f["name"] for f in response.json()] == ["Lý Thái Tổ", "Lý Thường Kiệt"]


def test_list_unclassified_figures(client, world):
    response = client.get("/api/historical-figures", params={"unclassified": True})

    assert [f["id"] for f in response.json()] == [world.unknown_poet.id]


def test_list_all_events_grouped(client, world):
    response = client.get("/api/events")

    assert [e["id"] for e in response.json()] == [
        world.trung_sisters.id,
        world.ba_trieu.id,
        world.capital_move.id,
        world.bach_dang.id,
    ]


# =============================================================================
# Reorder
# =============================================================================

def test_reorder_events_within_period(client, world):
    response = client.post(
        "/api/events/reorder",
        json={"periodId": world.bac_thuoc.id, "orderedIds": [world.ba_trieu.id, world.trung_sisters.id]},
    )

    assert response.status_code == 200
    listed = client.get("/api/events", params={"periodId": world.bac_thuoc.id}).json()
    assert [(e["id"], e["sortOrder"]) for e in listed] == [(world.ba_trieu.id, 0), (world.trung_sisters.id, 1)]


def test_reorder_events_with_wrong_group(client, world):
    response = client.post(
        "/api/events/reorder",
        json={"periodId": world.ly.id, "orderedIds": [world.ba_trieu.id, world.trung_sisters.id]},
    )

    assert response.status_code == 400
    listed = client.get("/api/events", params={"periodId": world.bac_thuoc.id}).json()
    assert [e["sortOrder"] for e in listed] == [0, 1]


def test_reorder_figures(client, world):
    response = client.post(
        "/api/historical-figures/reorder",
        json={"periodId": world.ly.id, "orderedIds": [world.ly_thuong_kiet.id, world.ly_thai_to.id]},
    )

    assert response.status_code == 200
    names = [f["name"] for f in client.get("/api/historical-figures", params={"periodId": world.ly.id}).json()]
    assert names == ["Lý Thường Kiệt", "Lý Thái Tổ"]


def test_reorder_unclassified_sites(client, world):
    response = client.post("/api/historical-sites/reorder", json={"periodId": None, "orderedIds": []})

    assert response.status_code == 200


def test_reorder_event_types(client, world):
    response = client.post("/api/event-types/reorder", json={"orderedIds": [world.reform.id, world.battle.id]})

    assert response.status_code == 200
    assert [t["id"] for t in client.get("/api/event-types").json()] == [world.reform.id, world.battle.id]


def test_reorder_requires_ordered_ids(client, world):
    response = client.post("/api/event-types/reorder", json={"periodId": None})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"


def test_reorder_group_of_unknown_period(client, world):
    response = client.post("/api/events/reorder", json={"periodId": 4040, "orderedIds": []})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Period 4040 does not exist"}
