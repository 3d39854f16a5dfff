"""
Use Case: Get Folder

Folder details for a browsing view: the folder, a reference to its parent,
its subfolders and its files.
"""

from typing import Optional
from uuid import UUID

from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.common import folder_not_found_error, permission_denied_error
from docvault.domain.entities import MembershipRole
from docvault.libs.result import Result, Return

from .dtos import (
    FileEntryResponse,
    FolderChildResponse,
    FolderDetailsResponse,
    FolderRef,
    FolderResponse,
)


class GetFolderUseCase:
    """Read a folder with its immediate contents (viewer or above)"""

    def __init__(self, uow: UnitOfWork, access_guard: IAccessGuard):
        self.uow = uow
        self.access_guard = access_guard

    async def execute(
        self, tenant_id: UUID, folder_id: UUID, actor_id: Optional[UUID] = None
    ) -> Result[FolderDetailsResponse]:
        async with self.uow:
            if actor_id is not None and not await self.access_guard.check_tenant_access(
                actor_id, tenant_id, MembershipRole.viewer
            ):
                return Return.err(permission_denied_error())

            folder = await self.uow.folders.get_by_id(folder_id, tenant_id)
            if folder is None:
                return Return.err(folder_not_found_error())

            parent_ref = None
            if folder.parent_id is not None:
                parent = await self.uow.folders.get_by_id(folder.parent_id, tenant_id)
                if parent is not None:
                    parent_ref = FolderRef(id=str(parent.id), name=parent.name)

            children = await self.uow.folders.list_children(folder_id, tenant_id)
            files = await self.uow.files.list_by_folder(folder_id, tenant_id)

            return Return.ok(
                FolderDetailsResponse(
                    folder=FolderResponse.from_entity(folder),
                    parent=parent_ref,
                    children=[FolderChildResponse.from_entity(child) for child in children],
                    files=[FileEntryResponse.from_entity(f, version) for f, version in files],
                )
            )
