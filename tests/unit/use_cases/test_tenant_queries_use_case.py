from uuid import uuid4

import pytest

from docvault.app.use_cases.tenants import (
    GetTenantUseCase,
    ListTenantsUseCase,
    RenameTenantUseCase,
)
from docvault.domain.entities import MembershipRole
from tests.fixtures.factories import make_root, make_tenant


@pytest.fixture
def tenant_with_root():
    tenant = make_tenant("Acme Corp")
    root = make_root(tenant)
    tenant.root_folder_id = root.id
    return tenant, root


@pytest.mark.asyncio
async def test_get_tenant_with_counts(mock_uow, mock_access_guard, tenant_with_root):
    tenant, root = tenant_with_root
    mock_uow.tenants.get_by_id.return_value = tenant
    mock_uow.folders.get_by_id.return_value = root
    mock_uow.folders.count_by_tenant.return_value = 4
    mock_uow.files.count_by_tenant.return_value = 7

    use_case = GetTenantUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(uuid4(), tenant.id)

    assert result.is_ok()
    assert result.value.name == "Acme Corp"
    assert result.value.root_folder.id == str(root.id)
    assert result.value.folder_count == 4
    assert result.value.file_count == 7


@pytest.mark.asyncio
async def test_get_tenant_not_found(mock_uow, mock_access_guard):
    use_case = GetTenantUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "TENANT_NOT_FOUND"


@pytest.mark.asyncio
async def test_get_tenant_requires_membership(mock_uow, denying_access_guard):
    use_case = GetTenantUseCase(mock_uow, denying_access_guard)
    result = await use_case.execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "PERMISSION_DENIED"
    mock_uow.tenants.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_tenants(mock_uow, tenant_with_root):
    tenant, _ = tenant_with_root
    other = make_tenant("Globex")
    mock_uow.tenants.list_for_user.return_value = [
        (tenant, MembershipRole.owner),
        (other, MembershipRole.viewer),
    ]

    use_case = ListTenantsUseCase(mock_uow)
    result = await use_case.execute(uuid4())

    assert result.is_ok()
    assert [(t.name, t.role) for t in result.value] == [
        ("Acme Corp", "owner"),
        ("Globex", "viewer"),
    ]
    assert result.value[0].root_folder_id == str(tenant.root_folder_id)
    assert result.value[1].root_folder_id is None


@pytest.mark.asyncio
async def test_rename_tenant(mock_uow, mock_access_guard, tenant_with_root):
    tenant, root = tenant_with_root
    actor_id = uuid4()
    mock_uow.tenants.get_by_id.return_value = tenant
    mock_uow.folders.get_by_id.return_value = root

    use_case = RenameTenantUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(actor_id, tenant.id, "Acme Inc")

    assert result.is_ok()
    assert result.value.name == "Acme Inc"
    mock_access_guard.check_tenant_access.assert_awaited_once_with(
        actor_id, tenant.id, MembershipRole.admin
    )
    event = mock_uow.audit_events.create.call_args[0][0]
    assert event.event_metadata == {"old_name": "Acme Corp", "new_name": "Acme Inc"}


@pytest.mark.asyncio
async def test_rename_tenant_to_taken_name(mock_uow, mock_access_guard, tenant_with_root):
    tenant, _ = tenant_with_root
    mock_uow.tenants.get_by_id.return_value = tenant
    mock_uow.tenants.get_by_name.return_value = make_tenant("Globex")

    use_case = RenameTenantUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(uuid4(), tenant.id, "Globex")

    assert result.is_err()
    assert result.error.code == "DUPLICATE_NAME"
    mock_uow.tenants.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_rename_tenant_to_own_name(mock_uow, mock_access_guard, tenant_with_root):
    tenant, _ = tenant_with_root
    mock_uow.tenants.get_by_id.return_value = tenant
    mock_uow.tenants.get_by_name.return_value = tenant

    use_case = RenameTenantUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(uuid4(), tenant.id, "Acme Corp")

    assert result.is_ok()
