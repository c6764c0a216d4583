def event_payload(**overrides):
    payload = {
        "title": "House Meeting",
        "event_type": "CampusActivity",
        "category": "House",
        "start_time": "2026-10-20T19:00:00",
        "end_time": "2026-10-20T20:30:00",
        "house_id": "AV",
        "created_by": "admin",
    }
    payload.update(overrides)
    return payload


def create(client, **overrides):
    response = client.post("/api/events", json=event_payload(**overrides))
    assert response.status_code == 201
    return response.json()


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_houses(client):
    houses = client.get("/api/houses").json()
    assert [h["id"] for h in houses] == ["AV", "SP", "NL", "LC", "WH", "HH", "BP"]

    assert client.get("/api/houses/AV").json()["name"] == "Ashford Village"
    assert client.get("/api/houses/ZZ").status_code == 404


def test_create_and_get_event(client):
    created = create(client)
    assert created["conflicts"] == []

    response = client.get(f"/api/events/{created['id']}")
    assert response.status_code == 200
    event = response.json()
    assert event["title"] == "House Meeting"
    assert event["house_name"] == "Ashford Village"
    assert event["display_time"] == "19:00 - 20:30"


def test_create_reports_conflicts(client):
    first = create(client)
    second = create(client, title="Community Dinner", house_id=None,
                    start_time="2026-10-20T19:30:00", end_time="2026-10-20T21:00:00")
    assert [c["id"] for c in second["conflicts"]] == [first["id"]]


def test_create_rejects_invalid_events(client):
    response = client.post("/api/events", json=event_payload(end_time="2026-10-20T18:00:00"))
    assert response.status_code == 400
    assert response.json()["detail"]["errors"] == ["End time cannot be before start time"]

    assert client.post("/api/events", json=event_payload(house_id="ZZ")).status_code == 400
    assert client.post("/api/events", json=event_payload(event_type="Party")).status_code == 400
    assert client.post("/api/events", json=event_payload(color="red")).status_code == 400
    assert client.post("/api/events", json=event_payload(start_time="tomorrow")).status_code == 400


def test_missing_event_is_404(client):
    assert client.get("/api/events/999").status_code == 404
    assert client.put("/api/events/999", json=event_payload()).status_code == 404
    assert client.delete("/api/events/999").status_code == 404
    response = client.post("/api/events/999/cancel", json={"reason": "Rain", "cancelled_by": "admin"})
    assert response.status_code == 404


def test_list_events_by_range_and_house(client):
    create(client, title="AV")
    create(client, title="SP", house_id="SP", start_time="2026-10-21T09:00:00", end_time=None)
    create(client, title="Community", house_id=None, start_time="2026-10-22T09:00:00", end_time=None)

    all_titles = [e["title"] for e in client.get("/api/events").json()]
    assert all_titles == ["AV", "SP", "Community"]

    response = client.get("/api/events", params={
        "start": "2026-10-21T00:00:00", "end": "2026-10-22T00:00:00",
    })
    assert [e["title"] for e in response.json()] == ["SP"]

    response = client.get("/api/events", params={"house": "AV"})
    assert [e["title"] for e in response.json()] == ["AV", "Community"]

    assert client.get("/api/events", params={"start": "2026-10-21T00:00:00"}).status_code == 400


def test_update_event(client):
    created = create(client)
    response = client.put(f"/api/events/{created['id']}",
                          json=event_payload(title="Moved Meeting", start_time="2026-10-21T19:00:00",
                                             end_time="2026-10-21T20:00:00", modified_by="admin"))
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]

    event = client.get(f"/api/events/{created['id']}").json()
    assert event["title"] == "Moved Meeting"
    assert event["start_time"] == "2026-10-21T19:00:00"
    assert event["modified_at"] is not None


def test_cancel_event(client):
    created = create(client)
    response = client.post(f"/api/events/{created['id']}/cancel",
                           json={"reason": "Staff shortage", "cancelled_by": "admin"})
    assert response.status_code == 200

    listed = client.get("/api/events", params={
        "start": "2026-10-20T00:00:00", "end": "2026-10-21T00:00:00",
    }).json()
    assert listed == []

    event = client.get(f"/api/events/{created['id']}").json()
    assert event["is_cancelled"] is True
    assert event["cancel_reason"] == "Staff shortage"


def test_cancel_requires_reason_and_user(client):
    created = create(client)
    url = f"/api/events/{created['id']}/cancel"
    assert client.post(url, json={"reason": "", "cancelled_by": "admin"}).status_code == 400
    assert client.post(url, json={"reason": "Rain"}).status_code == 400


def test_delete_event(client):
    created = create(client)
    assert client.delete(f"/api/events/{created['id']}").status_code == 200
    assert client.get(f"/api/events/{created['id']}").status_code == 404


def test_conflict_dry_run_does_not_store(client):
    first = create(client)
    response = client.post("/api/events/conflicts", json=event_payload(
        title="Touching", start_time="2026-10-20T20:30:00", end_time="2026-10-20T21:00:00",
    ))
    assert response.json() == []

    response = client.post("/api/events/conflicts", json=event_payload(
        title="Overlapping", start_time="2026-10-20T20:00:00", end_time="2026-10-20T21:00:00",
    ))
    assert [c["id"] for c in response.json()] == [first["id"]]
    assert len(client.get("/api/events").json()) == 1


def test_month_view(client):
    for hour in range(8, 13):
        create(client, title=f"Event {hour}", start_time=f"2026-10-20T{hour:02d}:00:00", end_time=None)
    create(client, title="Elsewhere", house_id="SP", start_time="2026-10-21T09:00:00", end_time=None)

    response = client.get("/api/calendar/2026/10")
    assert response.status_code == 200
    grid = response.json()
    assert grid["title"] == "October 2026"
    assert grid["day_headers"][0] == "Sun"
    assert len(grid["weeks"]) == 5
    assert grid["weeks"][0][:4] == [None, None, None, None]
    assert grid["event_count"] == 6

    tuesday = grid["weeks"][3][2]
    assert tuesday["date"] == "2026-10-20"
    assert tuesday["event_count"] == 5
    assert len(tuesday["events"]) == 3
    assert tuesday["more_label"] == "+ 2 more..."

    av_grid = client.get("/api/calendar/2026/10", params={"house": "AV"}).json()
    assert av_grid["event_count"] == 5


def test_month_view_rejects_bad_input(client):
    assert client.get("/api/calendar/2026/13").status_code == 400
    assert client.get("/api/calendar/2026/10", params={"house": "ZZ"}).status_code == 400


def test_day_view(client):
    for hour in range(8, 13):
        create(client, title=f"Event {hour}", start_time=f"2026-10-20T{hour:02d}:00:00", end_time=None)

    response = client.get("/api/calendar/day/2026-10-20")
    assert response.status_code == 200
    assert [e["title"] for e in response.json()] == [f"Event {hour}" for hour in range(8, 13)]
    assert client.get("/api/calendar/day/2026-10-21").json() == []


def test_wrongly_typed_fields_are_client_errors(client):
    for overrides in (
        {"title": 5},
        {"is_recurring": "yes"},
        {"house_id": 1},
        {"created_by": ["admin"]},
        {"parent_event_id": "7"},
        {"parent_event_id": True},
    ):
        response = client.post("/api/events", json=event_payload(**overrides))
        assert response.status_code == 400, overrides

    response = client.post("/api/events/conflicts", json=event_payload(id="abc"))
    assert response.status_code == 400
    assert client.get("/api/events").json() == []


def test_update_without_creator_keeps_original_creator(client):
    created = create(client)
    payload = event_payload(title="Renamed")
    del payload["created_by"]

    response = client.put(f"/api/events/{created['id']}", json=payload)
    assert response.status_code == 200

    event = client.get(f"/api/events/{created['id']}").json()
    assert event["title"] == "Renamed"
    assert event["created_by"] == "admin"


def test_range_rejects_utc_offsets(client):
    response = client.get("/api/events", params={
        "start": "2026-10-20T00:00:00+02:00", "end": "2026-10-21T00:00:00",
    })
    assert response.status_code == 400
