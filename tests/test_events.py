import pytest

from academix.domain.models.notification import Notification


@pytest.fixture
def club_with_events(client, coordinator, create_club):
    _, headers = coordinator
    club = create_club(headers)
    for i, title in enumerate(["First", "Second", "Third"]):
        response = client.post(
            f"/api/clubs/{club['id']}/events",
            json={"title": title, "date": f"2026-05-0{i + 1}T10:00:00", "location": "Hall A"},
            headers=headers,
        )
        assert response.status_code == 200
    return club, headers


def _titles(response):
    return [e["title"] for e in response.json()["events"]]


def test_add_event_appends_in_order(client, club_with_events):
    club, headers = club_with_events

    response = client.get(f"/api/clubs/{club['id']}", headers=headers)

    assert _titles(response) == ["First", "Second", "Third"]
    event = response.json()["events"][0]
    assert event["location"] == "Hall A"
    assert event["description"] == ""
    assert event["date"].startswith("2026-05-01T10:00:00")


def test_add_event_rejects_invalid_date(client, coordinator, create_club):
    _, headers = coordinator
    club = create_club(headers)

    response = client.post(
        f"/api/clubs/{club['id']}/events",
        json={"title": "Intro", "date": "next tuesday"},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Valid date is required"
    assert response.json()["errors"][0]["field"] == "date"


def test_add_event_requires_title(client, coordinator, create_club):
    _, headers = coordinator
    club = create_club(headers)

    response = client.post(
        f"/api/clubs/{club['id']}/events",
        json={"title": "  ", "date": "2026-05-01"},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Event title is required"


def test_add_event_to_missing_club(client, coordinator):
    response = client.post(
        "/api/clubs/9999/events",
        json={"title": "Intro", "date": "2026-05-01"},
        headers=coordinator[1],
    )

    assert response.status_code == 404


def test_delete_event_shifts_following_events(client, club_with_events):
    club, headers = club_with_events

    response = client.delete(f"/api/clubs/{club['id']}/events/1", headers=headers)

    assert response.status_code == 200
    assert _titles(response) == ["First", "Third"]

    response = client.delete(f"/api/clubs/{club['id']}/events/1", headers=headers)
    assert _titles(response) == ["First"]


@pytest.mark.parametrize("index", [3, 10, -1])
def test_delete_event_out_of_range(client, club_with_events, index):
    club, headers = club_with_events

    response = client.delete(f"/api/clubs/{club['id']}/events/{index}", headers=headers)

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid event index"}
    assert _titles(client.get(f"/api/clubs/{club['id']}", headers=headers)) == ["First", "Second", "Third"]


def test_delete_event_non_numeric_index(client, club_with_events):
    club, headers = club_with_events

    response = client.delete(f"/api/clubs/{club['id']}/events/abc", headers=headers)

    assert response.status_code == 400
    assert _titles(client.get(f"/api/clubs/{club['id']}", headers=headers)) == ["First", "Second", "Third"]


def test_delete_event_by_stable_id(client, club_with_events):
    club, headers = club_with_events
    events = client.get(f"/api/clubs/{club['id']}", headers=headers).json()["events"]
    second_id = events[1]["id"]

    response = client.delete(f"/api/clubs/{club['id']}/events/by-id/{second_id}", headers=headers)
    again = client.delete(f"/api/clubs/{club['id']}/events/by-id/{second_id}", headers=headers)

    assert response.status_code == 200
    assert _titles(response) == ["First", "Third"]
    assert [e["id"] for e in response.json()["events"]] == [events[0]["id"], events[2]["id"]]
    assert again.status_code == 404
    assert again.json()["message"] == "Event not found"


def test_event_ids_are_scoped_to_their_club(client, coordinator, create_club, club_with_events):
    club, headers = club_with_events
    other = create_club(headers, name="Go Club")
    event_id = client.get(f"/api/clubs/{club['id']}", headers=headers).json()["events"][0]["id"]

    response = client.delete(f"/api/clubs/{other['id']}/events/by-id/{event_id}", headers=headers)

    assert response.status_code == 404
    assert len(client.get(f"/api/clubs/{club['id']}", headers=headers).json()["events"]) == 3


def test_event_date_with_offset_is_stored_as_utc(client, coordinator, student, create_club, db_session):
    _, headers = coordinator
    club = create_club(headers)
    client.post(f"/api/clubs/{club['id']}/enroll", headers=student[1])

    response = client.post(
        f"/api/clubs/{club['id']}/events",
        json={"title": "Intro", "date": "2026-03-15T18:00:00+05:00"},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["events"][0]["date"].startswith("2026-03-15T13:00:00")
    note = db_session.query(Notification).filter(Notification.type == "new_event").one()
    assert note.message == "Intro – 15/03/2026 13:00"
