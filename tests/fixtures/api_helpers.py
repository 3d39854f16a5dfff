"""
Helpers for API tests: tokens, tenant/folder creation through the API and
direct inserts for data the API does not write (extra members, files).

Everything returned is a plain value (ids as str, json dicts); ORM objects
would be expired by the request's rollback.
"""

from uuid import UUID

from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from docvault.adapter.repositories.file_repository import FileRepository
from docvault.api.utils.jwt import generate_jwt
from docvault.domain.entities import MembershipRole
from tests.fixtures.factories import make_file, make_membership


def auth_headers(user_id: UUID) -> dict:
    return {"Authorization": f"Bearer {generate_jwt(user_id)}"}


async def create_tenant(client: AsyncClient, owner_id: UUID, name: str = "Acme Corp") -> dict:
    response = await client.post("/tenants", json={"name": name}, headers=auth_headers(owner_id))
    assert response.status_code == 201, response.text
    return response.json()


async def create_folder(
    client: AsyncClient, user_id: UUID, tenant_id: str, parent_id: str, name: str
) -> dict:
    response = await client.post(
        f"/tenants/{tenant_id}/folders",
        json={"name": name, "parent_id": parent_id},
        headers=auth_headers(user_id),
    )
    assert response.status_code == 201, response.text
    return response.json()


async def add_member(
    db_session: AsyncSession, tenant_id: str, user_id: UUID, role: MembershipRole
) -> None:
    db_session.add(make_membership(user_id, UUID(tenant_id), role))
    await db_session.commit()


async def add_file(
    db_session: AsyncSession, tenant_id: str, folder_id: str, name: str, size: int = 128
) -> str:
    file, version = make_file(UUID(folder_id), UUID(tenant_id), name, size=size)
    file_id = str(file.id)
    files = FileRepository(db_session)
    await files.create(file)
    await files.create_version(version)
    await db_session.commit()
    return file_id
