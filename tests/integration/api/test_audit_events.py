"""
Integration tests for the tenant audit log.
"""

from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from docvault.domain.entities import MembershipRole
from tests.fixtures.api_helpers import add_member, auth_headers, create_folder, create_tenant


@pytest.mark.asyncio
async def test_structural_changes_are_logged(client: AsyncClient):
    owner_id = uuid4()
    tenant = await create_tenant(client, owner_id)
    docs = await create_folder(client, owner_id, tenant["id"], tenant["root_folder_id"], "Docs")
    await client.patch(
        f"/tenants/{tenant['id']}/folders/{docs['id']}",
        json={"name": "Papers"},
        headers=auth_headers(owner_id),
    )
    await client.delete(
        f"/tenants/{tenant['id']}/folders/{docs['id']}", headers=auth_headers(owner_id)
    )

    response = await client.get(
        f"/tenants/{tenant['id']}/audit-events", headers=auth_headers(owner_id)
    )

    assert response.status_code == 200
    body = response.json()
    assert sorted(event["action"] for event in body["events"]) == [
        "folder_created",
        "folder_renamed",
        "folder_subtree_deleted",
        "tenant_created",
    ]
    assert all(event["user_id"] == str(owner_id) for event in body["events"])
    assert body["next_cursor"] is None


@pytest.mark.asyncio
async def test_pagination(client: AsyncClient):
    owner_id = uuid4()
    tenant = await create_tenant(client, owner_id)
    for index in range(4):
        await create_folder(
            client, owner_id, tenant["id"], tenant["root_folder_id"], f"Folder {index}"
        )

    seen = []
    cursor = None
    while True:
        params = {"limit": 2}
        if cursor:
            params["cursor"] = cursor
        response = await client.get(
            f"/tenants/{tenant['id']}/audit-events",
            params=params,
            headers=auth_headers(owner_id),
        )
        assert response.status_code == 200
        body = response.json()
        assert len(body["events"]) <= 2
        seen.extend(body["events"])
        cursor = body["next_cursor"]
        if cursor is None:
            break

    assert sorted(event["action"] for event in seen) == ["folder_created"] * 4 + ["tenant_created"]
    # Newest first, no event repeated across pages
    assert seen[-1]["action"] == "tenant_created"
    names = [event["metadata"]["name"] for event in seen[:-1]]
    assert sorted(names) == [f"Folder {index}" for index in range(4)]


@pytest.mark.asyncio
async def test_invalid_cursor(client: AsyncClient):
    owner_id = uuid4()
    tenant = await create_tenant(client, owner_id)

    response = await client.get(
        f"/tenants/{tenant['id']}/audit-events",
        params={"cursor": "%%%not-a-cursor"},
        headers=auth_headers(owner_id),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_member_cannot_read_audit(client: AsyncClient, db_session: AsyncSession):
    owner_id = uuid4()
    member_id = uuid4()
    tenant = await create_tenant(client, owner_id)
    await add_member(db_session, tenant["id"], member_id, MembershipRole.member)

    response = await client.get(
        f"/tenants/{tenant['id']}/audit-events", headers=auth_headers(member_id)
    )

    assert response.status_code == 403
