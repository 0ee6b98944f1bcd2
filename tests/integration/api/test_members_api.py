import pytest
from httpx import AsyncClient

from acetrack.domain.entities import User, UserRole


@pytest.mark.asyncio
async def test_join_request_approval_flow(client: AsyncClient, create_organization, create_user):
    """A join request stays pending until an administrator approves it"""
    organization_id, _, admin_headers = await create_organization()
    _, headers = await create_user("joiner@example.com")

    requested = await client.post(
        "/members/join",
        json={"organization_id": organization_id, "message": "I own a telescope"},
        headers=headers,
    )
    assert requested.status_code == 201
    assert requested.json()["status"] == "pending"
    member_id = requested.json()["id"]

    again = await client.post("/members/join", json={"organization_id": organization_id}, headers=headers)
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "JOIN_REQUEST_PENDING"

    approved = await client.post(
        f"/members/{member_id}/decision",
        json={"action": "approve", "role": "officer"},
        headers=admin_headers,
    )
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"
    assert approved.json()["member"]["status"] == "active"
    assert approved.json()["member"]["role"] == "officer"

    mine = await client.get("/members/mine", headers=headers)
    assert [m["organization_id"] for m in mine.json()] == [organization_id]


@pytest.mark.asyncio
async def test_rejected_request_is_deleted(client: AsyncClient, create_organization, create_user):
    organization_id, _, admin_headers = await create_organization()
    _, headers = await create_user("joiner@example.com")
    requested = await client.post("/members/join", json={"organization_id": organization_id}, headers=headers)
    member_id = requested.json()["id"]

    rejected = await client.post(
        f"/members/{member_id}/decision", json={"action": "reject"}, headers=admin_headers
    )

    assert rejected.status_code == 200
    assert rejected.json() == {"status": "rejected", "member": None}

    retry = await client.post("/members/join", json={"organization_id": organization_id}, headers=headers)
    assert retry.status_code == 201


@pytest.mark.asyncio
async def test_public_join_disabled(client: AsyncClient, create_organization, create_user):
    organization_id, _, _ = await create_organization(allow_public_join=False)
    _, headers = await create_user("joiner@example.com")

    response = await client.post("/members/join", json={"organization_id": organization_id}, headers=headers)

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "PUBLIC_JOIN_DISABLED"


@pytest.mark.asyncio
async def test_add_member_respects_capacity(client: AsyncClient, create_organization, create_user):
    organization_id, _, admin_headers = await create_organization(max_members=2)
    first_id, _ = await create_user("first@example.com")
    second_id, _ = await create_user("second@example.com")

    added = await client.post(
        "/members",
        json={"organization_id": organization_id, "user_id": str(first_id)},
        headers=admin_headers,
    )
    assert added.status_code == 201
    assert added.json()["status"] == "active"

    duplicate = await client.post(
        "/members",
        json={"organization_id": organization_id, "user_id": str(first_id)},
        headers=admin_headers,
    )
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "ALREADY_MEMBER"

    full = await client.post(
        "/members",
        json={"organization_id": organization_id, "user_id": str(second_id)},
        headers=admin_headers,
    )
    assert full.status_code == 409
    assert full.json()["error"]["code"] == "ORGANIZATION_FULL"


@pytest.mark.asyncio
async def test_member_list_scoping(client: AsyncClient, create_organization, create_user):
    first_id, _, first_headers = await create_organization()
    second_id, _, _ = await create_organization(name="Botany Club", founder_email="botanist@example.com")
    _, member_headers = await create_user("member@example.com")

    scoped = await client.get("/members", params={"organization_id": second_id}, headers=first_headers)
    assert scoped.status_code == 200
    assert {m["organization_id"] for m in scoped.json()["members"]} == {first_id}

    denied = await client.get("/members", headers=member_headers)
    assert denied.status_code == 403


@pytest.mark.asyncio
async def test_promoted_co_admin_reverts_on_removal(
    client: AsyncClient, db_session, create_organization, create_user
):
    organization_id, founder_id, admin_headers = await create_organization()
    helper_id, _ = await create_user("helper@example.com")

    added = await client.post(
        "/members",
        json={"organization_id": organization_id, "user_id": str(helper_id), "role": "org_admin"},
        headers=admin_headers,
    )
    member_id = added.json()["id"]
    helper = await db_session.get(User, helper_id, populate_existing=True)
    assert helper.role == UserRole.org_admin

    removed = await client.delete(f"/members/{member_id}", headers=admin_headers)
    assert removed.status_code == 200

    helper = await db_session.get(User, helper_id, populate_existing=True)
    assert helper.role == UserRole.member


@pytest.mark.asyncio
async def test_cannot_remove_designated_admin(client: AsyncClient, create_organization):
    organization_id, founder_id, admin_headers = await create_organization()
    listed = await client.get("/members", headers=admin_headers)
    founder_record = next(m for m in listed.json()["members"] if m["user_id"] == str(founder_id))

    response = await client.delete(f"/members/{founder_record['id']}", headers=admin_headers)

    assert response.status_code == 403
    assert response.json()["error"]["message"] == "Cannot remove the organization administrator"
