"""
Folder tree read use cases: children, descendants (subtree) and ancestors
(breadcrumb).

Reads are tenant-scoped; a folder belonging to another tenant is reported
exactly like a missing one.
"""

from typing import List, Optional
from uuid import UUID

from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.common import folder_not_found_error, permission_denied_error
from docvault.domain.entities import MembershipRole
from docvault.libs.result import Result, Return

from .dtos import FolderChildResponse, FolderNodeResponse


class _FolderQueryUseCase:
    def __init__(self, uow: UnitOfWork, access_guard: IAccessGuard):
        self.uow = uow
        self.access_guard = access_guard

    async def _can_read(self, tenant_id: UUID, actor_id: Optional[UUID]) -> bool:
        # Internal callers pass no actor and skip the membership check
        if actor_id is None:
            return True
        return await self.access_guard.check_tenant_access(
            actor_id, tenant_id, MembershipRole.viewer
        )


class ListChildrenUseCase(_FolderQueryUseCase):
    """Immediate subfolders of a folder, ordered by name"""

    async def execute(
        self, tenant_id: UUID, folder_id: UUID, actor_id: Optional[UUID] = None
    ) -> Result[List[FolderChildResponse]]:
        async with self.uow:
            if not await self._can_read(tenant_id, actor_id):
                return Return.err(permission_denied_error())

            folder = await self.uow.folders.get_by_id(folder_id, tenant_id)
            if folder is None:
                return Return.err(folder_not_found_error())

            children = await self.uow.folders.list_children(folder_id, tenant_id)
            return Return.ok([FolderChildResponse.from_entity(child) for child in children])


class ListDescendantsUseCase(_FolderQueryUseCase):
    """
    Entire subtree below a folder (the folder itself excluded), in path
    order, so every folder is listed after its parent. depth is relative:
    direct children have depth 1.
    """

    async def execute(
        self, tenant_id: UUID, folder_id: UUID, actor_id: Optional[UUID] = None
    ) -> Result[List[FolderNodeResponse]]:
        async with self.uow:
            if not await self._can_read(tenant_id, actor_id):
                return Return.err(permission_denied_error())

            path = await self.uow.folders.get_path(folder_id, tenant_id)
            if path is None:
                return Return.err(folder_not_found_error())

            nodes = await self.uow.folders.list_descendants(path, tenant_id, exclude_id=folder_id)
            return Return.ok([FolderNodeResponse.from_node(node) for node in nodes])


class ListAncestorsUseCase(_FolderQueryUseCase):
    """
    Breadcrumb from the tenant root down to the folder itself. depth is
    absolute: the root has depth 1 and the folder is last.
    """

    async def execute(
        self, tenant_id: UUID, folder_id: UUID, actor_id: Optional[UUID] = None
    ) -> Result[List[FolderNodeResponse]]:
        async with self.uow:
            if not await self._can_read(tenant_id, actor_id):
                return Return.err(permission_denied_error())

            path = await self.uow.folders.get_path(folder_id, tenant_id)
            if path is None:
                return Return.err(folder_not_found_error())

            nodes = await self.uow.folders.list_ancestors(path, tenant_id)
            return Return.ok([FolderNodeResponse.from_node(node) for node in nodes])
