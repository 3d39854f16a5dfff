from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from docvault.app.use_cases.folders import CreateSubfolderUseCase
from docvault.domain.entities import MembershipRole
from docvault.domain.path_codec import depth, encode_segment
from tests.fixtures.factories import make_folder, make_root, make_tenant


@pytest.fixture
def tree():
    tenant = make_tenant()
    root = make_root(tenant)
    docs = make_folder(root, "Documents")
    return tenant, root, docs


@pytest.mark.asyncio
async def test_create_under_root(mock_uow, mock_access_guard, tree):
    tenant, root, _ = tree
    actor_id = uuid4()
    mock_uow.folders.get_by_id.return_value = root

    use_case = CreateSubfolderUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(tenant.id, root.id, "Documents", actor_id)

    assert result.is_ok()
    folder = result.value
    assert folder.name == "Documents"
    assert folder.parent_id == str(root.id)
    assert folder.tenant_id == str(tenant.id)
    assert folder.path == f"{root.path}.{encode_segment(folder.id)}"
    assert folder.depth == 1

    mock_access_guard.check_tenant_access.assert_awaited_once_with(
        actor_id, tenant.id, MembershipRole.member
    )
    mock_uow.folders.create.assert_awaited_once()
    mock_uow.audit_events.create.assert_awaited_once()
    event = mock_uow.audit_events.create.call_args[0][0]
    assert event.action == "folder_created"
    assert event.event_metadata["parent_id"] == str(root.id)
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_nested_path_extends_parent(mock_uow, mock_access_guard, tree):
    tenant, root, docs = tree
    mock_uow.folders.get_by_id.return_value = docs

    use_case = CreateSubfolderUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(tenant.id, docs.id, "Invoices", uuid4())

    assert result.is_ok()
    assert result.value.path.startswith(docs.path + ".")
    assert depth(result.value.path) == depth(docs.path) + 1
    assert result.value.depth == 2


@pytest.mark.asyncio
async def test_name_is_trimmed(mock_uow, mock_access_guard, tree):
    tenant, root, _ = tree
    mock_uow.folders.get_by_id.return_value = root

    use_case = CreateSubfolderUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(tenant.id, root.id, "  Reports  ", uuid4())

    assert result.is_ok()
    assert result.value.name == "Reports"
    mock_uow.folders.exists_sibling.assert_awaited_once_with(root.id, tenant.id, "Reports")


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
async def test_blank_name_is_rejected(mock_uow, mock_access_guard, tree, name):
    tenant, root, _ = tree

    use_case = CreateSubfolderUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(tenant.id, root.id, name, uuid4())

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"
    mock_uow.folders.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_parent(mock_uow, mock_access_guard, tree):
    tenant, _, _ = tree
    mock_uow.folders.get_by_id.return_value = None

    use_case = CreateSubfolderUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(tenant.id, uuid4(), "Documents", uuid4())

    assert result.is_err()
    assert result.error.code == "PARENT_NOT_FOUND"
    mock_uow.folders.create.assert_not_awaited()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_duplicate_sibling_name(mock_uow, mock_access_guard, tree):
    tenant, root, _ = tree
    mock_uow.folders.get_by_id.return_value = root
    mock_uow.folders.exists_sibling.return_value = True

    use_case = CreateSubfolderUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(tenant.id, root.id, "Documents", uuid4())

    assert result.is_err()
    assert result.error.code == "DUPLICATE_NAME"
    assert "Documents" in result.error.message
    mock_uow.folders.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_lost_race_maps_constraint_violation_to_duplicate(mock_uow, mock_access_guard, tree):
    tenant, root, _ = tree
    mock_uow.folders.get_by_id.return_value = root
    mock_uow.folders.create.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE"))

    use_case = CreateSubfolderUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(tenant.id, root.id, "Documents", uuid4())

    assert result.is_err()
    assert result.error.code == "DUPLICATE_NAME"
    mock_uow.rollback.assert_awaited_once()
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_storage_failure(mock_uow, mock_access_guard, tree):
    tenant, root, _ = tree
    mock_uow.folders.get_by_id.return_value = root
    mock_uow.commit.side_effect = OperationalError("COMMIT", {}, Exception("disk I/O error"))

    use_case = CreateSubfolderUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(tenant.id, root.id, "Documents", uuid4())

    assert result.is_err()
    assert result.error.code == "STORAGE_FAILURE"
    assert "OperationalError" in result.error.reason
    mock_uow.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_permission_denied(mock_uow, denying_access_guard, tree):
    tenant, root, _ = tree
    mock_uow.folders.get_by_id.return_value = root

    use_case = CreateSubfolderUseCase(mock_uow, denying_access_guard)
    result = await use_case.execute(tenant.id, root.id, "Documents", uuid4())

    assert result.is_err()
    assert result.error.code == "PERMISSION_DENIED"
    mock_uow.folders.get_by_id.assert_not_awaited()
    mock_uow.folders.create.assert_not_awaited()
