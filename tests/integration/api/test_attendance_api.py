import pytest
from httpx import AsyncClient

EVENT_DATE = "2099-07-04"


@pytest.fixture
def open_event(client: AsyncClient, create_organization, create_user):
    """Published event plus an active member; returns (event_id, admin headers, member_id, member headers)"""

    async def _open():
        organization_id, _, admin_headers = await create_organization(require_approval=False)
        member_id, member_headers = await create_user("attendee@example.com")

        joined = await client.post(
            "/members/join", json={"organization_id": organization_id}, headers=member_headers
        )
        assert joined.json()["status"] == "active"

        created = await client.post(
            "/events",
            json={
                "organization_id": organization_id,
                "title": "Meteor Watch",
                "event_date": EVENT_DATE,
                "start_time": "21:00",
                "end_time": "23:30",
            },
            headers=admin_headers,
        )
        event_id = created.json()["id"]
        published = await client.patch(
            f"/events/{event_id}/status", json={"status": "published"}, headers=admin_headers
        )
        assert published.status_code == 200
        return event_id, admin_headers, member_id, member_headers

    return _open


@pytest.mark.asyncio
async def test_check_in_and_out(client: AsyncClient, open_event):
    event_id, admin_headers, member_id, member_headers = await open_event()

    checked_in = await client.post(
        "/attendance/check-in", json={"event_id": event_id}, headers=member_headers
    )
    assert checked_in.status_code == 201
    data = checked_in.json()
    assert data["user_id"] == str(member_id)
    assert data["status"] == "present"
    assert data["check_in_method"] == "qr_code"
    assert data["check_out_time"] is None

    again = await client.post(
        "/attendance/check-in", json={"event_id": event_id}, headers=member_headers
    )
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "ALREADY_CHECKED_IN"

    checked_out = await client.post(
        "/attendance/check-out",
        json={"event_id": event_id, "notes": "Left early"},
        headers=member_headers,
    )
    assert checked_out.status_code == 200
    assert checked_out.json()["check_out_time"] is not None
    assert checked_out.json()["notes"] == "Left early"

    twice = await client.post(
        "/attendance/check-out", json={"event_id": event_id}, headers=member_headers
    )
    assert twice.status_code == 409
    assert twice.json()["error"]["code"] == "ALREADY_CHECKED_OUT"

    mine = await client.get("/attendance/mine", headers=member_headers)
    assert mine.status_code == 200
    assert [a["event_id"] for a in mine.json()["attendance"]] == [event_id]

    listed = await client.get(f"/events/{event_id}/attendance", headers=admin_headers)
    assert listed.status_code == 200
    assert listed.json()["pagination"]["total"] == 1


@pytest.mark.asyncio
async def test_member_cannot_view_event_attendance(client: AsyncClient, open_event):
    event_id, _, _, member_headers = await open_event()

    response = await client.get(f"/events/{event_id}/attendance", headers=member_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_check_out_without_check_in(client: AsyncClient, open_event):
    event_id, _, _, member_headers = await open_event()

    response = await client.post(
        "/attendance/check-out", json={"event_id": event_id}, headers=member_headers
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "NOT_CHECKED_IN"


@pytest.mark.asyncio
async def test_outsider_cannot_check_in(client: AsyncClient, open_event, create_user):
    event_id, _, _, _ = await open_event()
    _, outsider_headers = await create_user("outsider@example.com")

    response = await client.post(
        "/attendance/check-in", json={"event_id": event_id}, headers=outsider_headers
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "PERMISSION_DENIED"


@pytest.mark.asyncio
async def test_manual_check_in_by_org_admin(client: AsyncClient, open_event):
    event_id, admin_headers, member_id, member_headers = await open_event()

    response = await client.post(
        "/attendance/check-in",
        json={"event_id": event_id, "user_id": str(member_id), "notes": "Forgot phone"},
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert response.json()["check_in_method"] == "manual"
    assert response.json()["user_id"] == str(member_id)


@pytest.mark.asyncio
async def test_member_cannot_check_in_someone_else(client: AsyncClient, open_event, create_user):
    event_id, _, _, member_headers = await open_event()
    other_id, _ = await create_user("other@example.com")

    response = await client.post(
        "/attendance/check-in",
        json={"event_id": event_id, "user_id": str(other_id)},
        headers=member_headers,
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_draft_event_is_not_open(client: AsyncClient, create_organization):
    organization_id, _, headers = await create_organization()
    created = await client.post(
        "/events",
        json={
            "organization_id": organization_id,
            "title": "Planning Meeting",
            "event_date": EVENT_DATE,
            "start_time": "18:00",
            "end_time": "19:00",
        },
        headers=headers,
    )

    response = await client.post(
        "/attendance/check-in", json={"event_id": created.json()["id"]}, headers=headers
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "EVENT_NOT_OPEN"
