import pytest

from academix.domain.models.notification import Notification


def test_club_lifecycle_scenario(client, coordinator, student, create_club):
    coord_body, coord_headers = coordinator
    student_body, student_headers = student

    club = create_club(coord_headers, name="Chess Club")
    assert club["members"] == []
    assert club["events"] == []
    assert club["coordinator"]["id"] == coord_body["id"]
    assert club["coordinator"]["coordinatorId"] == coord_body["coordinatorId"]

    enrolled = client.post(f"/api/clubs/{club['id']}/enroll", headers=student_headers)
    assert enrolled.status_code == 200
    assert [m["id"] for m in enrolled.json()["members"]] == [student_body["id"]]
    assert enrolled.json()["members"][0]["studentId"] == "S100"

    with_event = client.post(
        f"/api/clubs/{club['id']}/events",
        json={"title": "Intro", "date": "2026-03-15T18:00:00Z"},
        headers=coord_headers,
    )
    assert with_event.status_code == 200
    events = with_event.json()["events"]
    assert [e["title"] for e in events] == ["Intro"]
    assert events[0]["attendees"] == []

    inbox = client.get("/api/notifications", headers=student_headers).json()
    event_notes = [n for n in inbox if n["type"] == "new_event"]
    assert len(event_notes) == 1
    assert event_notes[0]["userId"] == student_body["id"]

    emptied = client.delete(f"/api/clubs/{club['id']}/events/0", headers=coord_headers)
    assert emptied.status_code == 200
    assert emptied.json()["events"] == []


def test_list_clubs_newest_first(client, coordinator, student, create_club):
    _, headers = coordinator
    for name in ("Alpha", "Beta", "Gamma"):
        create_club(headers, name=name)

    response = client.get("/api/clubs", headers=student[1])

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Gamma", "Beta", "Alpha"]


def test_get_club(client, coordinator, student, create_club):
    club = create_club(coordinator[1])

    found = client.get(f"/api/clubs/{club['id']}", headers=student[1])
    missing = client.get("/api/clubs/9999", headers=student[1])

    assert found.status_code == 200
    assert found.json()["name"] == "Chess Club"
    assert missing.status_code == 404
    assert missing.json() == {"message": "Club not found"}


def test_create_club_trims_and_requires_name(client, coordinator):
    _, headers = coordinator

    blank = client.post("/api/clubs", json={"name": "   "}, headers=headers)
    trimmed = client.post("/api/clubs", json={"name": "  Drama  "}, headers=headers)

    assert blank.status_code == 400
    assert blank.json()["message"] == "Club name is required"
    assert trimmed.status_code == 201
    assert trimmed.json()["name"] == "Drama"
    assert trimmed.json()["description"] == ""


def test_create_club_duplicate_name(client, coordinator, register_user, create_club):
    create_club(coordinator[1], name="Chess Club")
    _, other_headers = register_user("Club Coordinator")

    response = client.post("/api/clubs", json={"name": "Chess Club"}, headers=other_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Club with this name already exists"


@pytest.mark.parametrize(
    "method, path, payload",
    [
        ("put", "/api/clubs/{id}", {"name": "Hijacked"}),
        ("delete", "/api/clubs/{id}", None),
        ("post", "/api/clubs/{id}/members", {"studentId": "S100"}),
        ("delete", "/api/clubs/{id}/members/1", None),
        ("post", "/api/clubs/{id}/events", {"title": "Rogue", "date": "2026-01-01"}),
        ("delete", "/api/clubs/{id}/events/0", None),
    ],
)
def test_only_the_coordinator_can_mutate(client, coordinator, register_user, student, create_club, method, path, payload):
    club = create_club(coordinator[1])
    _, intruder_headers = register_user("Club Coordinator")

    kwargs = {"headers": intruder_headers}
    if payload is not None:
        kwargs["json"] = payload
    response = client.request(method.upper(), path.format(id=club["id"]), **kwargs)

    assert response.status_code == 403
    assert response.json()["message"].startswith("Not authorized to")
    assert client.get(f"/api/clubs/{club['id']}", headers=coordinator[1]).json()["name"] == "Chess Club"


def test_student_cannot_update_club(client, coordinator, student, create_club):
    club = create_club(coordinator[1])

    response = client.put(f"/api/clubs/{club['id']}", json={"name": "Mine"}, headers=student[1])

    assert response.status_code == 403


def test_update_missing_club(client, coordinator):
    response = client.put("/api/clubs/404", json={"name": "Nope"}, headers=coordinator[1])

    assert response.status_code == 404


def test_update_patches_only_given_fields(client, coordinator, create_club):
    _, headers = coordinator
    club = create_club(headers, name="Chess Club", description="Weekly games")

    renamed = client.put(f"/api/clubs/{club['id']}", json={"name": "Chess Society"}, headers=headers)
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Chess Society"
    assert renamed.json()["description"] == "Weekly games"

    described = client.put(f"/api/clubs/{club['id']}", json={"description": ""}, headers=headers)
    assert described.json()["name"] == "Chess Society"
    assert described.json()["description"] == ""


def test_update_rejects_taken_name(client, coordinator, create_club):
    _, headers = coordinator
    create_club(headers, name="Alpha")
    beta = create_club(headers, name="Beta")

    response = client.put(f"/api/clubs/{beta['id']}", json={"name": "Alpha"}, headers=headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Club with this name already exists"


def test_delete_club_keeps_notifications(client, coordinator, student, create_club, db_session):
    _, headers = coordinator
    club = create_club(headers)

    response = client.delete(f"/api/clubs/{club['id']}", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Club deleted successfully"}
    assert client.get(f"/api/clubs/{club['id']}", headers=headers).status_code == 404
    remaining = db_session.query(Notification).filter(Notification.club_id == club["id"]).count()
    assert remaining == 1


def test_add_member_by_student_id(client, coordinator, student, create_club):
    _, headers = coordinator
    club = create_club(headers)

    response = client.post(f"/api/clubs/{club['id']}/members", json={"studentId": "S100"}, headers=headers)

    assert response.status_code == 200
    assert [m["studentId"] for m in response.json()["members"]] == ["S100"]


def test_add_member_unknown_student(client, coordinator, create_club):
    _, headers = coordinator
    club = create_club(headers)

    response = client.post(f"/api/clubs/{club['id']}/members", json={"studentId": "S404"}, headers=headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Student not found"


def test_add_member_requires_student_id(client, coordinator, create_club):
    _, headers = coordinator
    club = create_club(headers)

    response = client.post(f"/api/clubs/{club['id']}/members", json={"studentId": " "}, headers=headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Student ID is required"


def test_add_member_twice_is_conflict(client, coordinator, student, create_club):
    _, headers = coordinator
    club = create_club(headers)
    url = f"/api/clubs/{club['id']}/members"

    client.post(url, json={"studentId": "S100"}, headers=headers)
    response = client.post(url, json={"studentId": "S100"}, headers=headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Student is already a member of this club"
    members = client.get(f"/api/clubs/{club['id']}", headers=headers).json()["members"]
    assert len(members) == 1


def test_members_keep_enrollment_order(client, coordinator, register_user, create_club):
    _, headers = coordinator
    club = create_club(headers)
    ids = []
    for _ in range(3):
        body, student_headers = register_user("Student")
        client.post(f"/api/clubs/{club['id']}/enroll", headers=student_headers)
        ids.append(body["id"])

    members = client.get(f"/api/clubs/{club['id']}", headers=headers).json()["members"]

    assert [m["id"] for m in members] == ids


def test_remove_member_is_idempotent(client, coordinator, student, create_club):
    _, headers = coordinator
    student_body, student_headers = student
    club = create_club(headers)
    client.post(f"/api/clubs/{club['id']}/enroll", headers=student_headers)
    url = f"/api/clubs/{club['id']}/members/{student_body['id']}"

    first = client.delete(url, headers=headers)
    second = client.delete(url, headers=headers)

    assert first.status_code == 200
    assert first.json()["members"] == []
    assert second.status_code == 200
    assert second.json()["members"] == []


def test_remove_member_with_non_numeric_id_is_a_no_op(client, coordinator, student, create_club):
    _, headers = coordinator
    student_body, student_headers = student
    club = create_club(headers)
    client.post(f"/api/clubs/{club['id']}/enroll", headers=student_headers)

    response = client.delete(f"/api/clubs/{club['id']}/members/abc", headers=headers)

    assert response.status_code == 200
    assert [m["id"] for m in response.json()["members"]] == [student_body["id"]]


def test_remove_member_with_non_numeric_id_still_checks_ownership(
    client, coordinator, register_user, create_club
):
    club = create_club(coordinator[1])
    _, other_headers = register_user("Club Coordinator")

    response = client.delete(f"/api/clubs/{club['id']}/members/abc", headers=other_headers)

    assert response.status_code == 403


def test_self_enroll_twice_is_conflict(client, coordinator, student, create_club):
    club = create_club(coordinator[1])
    url = f"/api/clubs/{club['id']}/enroll"

    assert client.post(url, headers=student[1]).status_code == 200
    second = client.post(url, headers=student[1])
    third = client.post(url, headers=student[1])

    assert second.status_code == 400
    assert second.json()["message"] == "You are already a member of this club"
    assert third.json() == second.json()
    assert len(client.get(f"/api/clubs/{club['id']}", headers=student[1]).json()["members"]) == 1


def test_self_enroll_missing_club(client, student):
    response = client.post("/api/clubs/9999/enroll", headers=student[1])

    assert response.status_code == 404
