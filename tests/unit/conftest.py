import pytest
from unittest.mock import AsyncMock, MagicMock


def _identity(entity):
    return entity


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.tenants = MagicMock()
    uow.tenants.get_by_id = AsyncMock(return_value=None)
    uow.tenants.get_by_name = AsyncMock(return_value=None)
    uow.tenants.list_for_user = AsyncMock(return_value=[])
    uow.tenants.create = AsyncMock(side_effect=_identity)
    uow.tenants.update = AsyncMock(side_effect=_identity)
    uow.tenants.delete = AsyncMock()

    uow.folders = MagicMock()
    uow.folders.get_by_id = AsyncMock(return_value=None)
    uow.folders.get_path = AsyncMock(return_value=None)
    uow.folders.get_root = AsyncMock(return_value=None)
    uow.folders.list_children = AsyncMock(return_value=[])
    uow.folders.list_descendants = AsyncMock(return_value=[])
    uow.folders.list_ancestors = AsyncMock(return_value=[])
    uow.folders.list_subtree_ids = AsyncMock(return_value=[])
    uow.folders.exists_sibling = AsyncMock(return_value=False)
    uow.folders.create = AsyncMock(side_effect=_identity)
    uow.folders.update = AsyncMock(side_effect=_identity)
    uow.folders.delete_by_path_prefix = AsyncMock(return_value=0)
    uow.folders.delete_by_tenant = AsyncMock(return_value=0)
    uow.folders.count_by_tenant = AsyncMock(return_value=0)

    uow.files = MagicMock()
    uow.files.list_by_folder = AsyncMock(return_value=[])
    uow.files.delete_by_folder_ids = AsyncMock(return_value=0)
    uow.files.delete_by_tenant = AsyncMock(return_value=0)
    uow.files.count_by_tenant = AsyncMock(return_value=0)

    uow.memberships = MagicMock()
    uow.memberships.get_by_user_and_tenant = AsyncMock(return_value=None)
    uow.memberships.create = AsyncMock(side_effect=_identity)
    uow.memberships.delete_by_tenant = AsyncMock(return_value=0)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock(side_effect=_identity)
    uow.audit_events.get_by_tenant_paginated = AsyncMock(return_value=([], None))

    return uow


@pytest.fixture
def mock_access_guard():
    """Access guard that lets every actor through"""
    guard = MagicMock()
    guard.check_tenant_access = AsyncMock(return_value=True)
    return guard


@pytest.fixture
def denying_access_guard():
    guard = MagicMock()
    guard.check_tenant_access = AsyncMock(return_value=False)
    return guard
