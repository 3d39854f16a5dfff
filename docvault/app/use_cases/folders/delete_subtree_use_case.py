"""
Use Case: Delete Folder Subtree

Removes a folder, every descendant and every file they hold in a single
transaction. The tenant root cannot be removed this way; it goes away only
with the tenant.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.common import (
    folder_not_found_error,
    permission_denied_error,
    storage_failure_error,
)
from docvault.domain.entities import AuditEvent, MembershipRole
from docvault.libs.result import Error, Result, Return

from .dtos import DeleteSubtreeResponse

logger = logging.getLogger(__name__)


class DeleteSubtreeUseCase:
    """
    Hard-delete a folder subtree (admin only).

    Business Logic:
    1. Actor needs admin role
    2. Folder must exist in the tenant and must not be the root
    3. Collect ids of the folder and all descendants
    4. Delete their files (and file versions)
    5. Delete the folders by path prefix
    6. Audit event, commit; any failure rolls everything back
    """

    def __init__(self, uow: UnitOfWork, access_guard: IAccessGuard):
        self.uow = uow
        self.access_guard = access_guard

    async def execute(
        self,
        tenant_id: UUID,
        folder_id: UUID,
        actor_id: UUID,
    ) -> Result[DeleteSubtreeResponse]:
        """
        Execute delete subtree use case.

        Returns:
            Result[DeleteSubtreeResponse] with number of folders removed

        Errors:
            - PERMISSION_DENIED: Actor is not a tenant admin
            - FOLDER_NOT_FOUND: Folder missing in this tenant (or already deleted)
            - CANNOT_DELETE_ROOT: Folder is the tenant root
            - STORAGE_FAILURE: Database error, nothing deleted
        """
        async with self.uow:
            if not await self.access_guard.check_tenant_access(
                actor_id, tenant_id, MembershipRole.admin
            ):
                return Return.err(permission_denied_error())

            folder = await self.uow.folders.get_by_id(folder_id, tenant_id)
            if folder is None:
                return Return.err(folder_not_found_error())

            if folder.is_root:
                return Return.err(
                    Error(
                        "CANNOT_DELETE_ROOT",
                        "Cannot delete the root folder; delete the tenant instead",
                    )
                )

            path = folder.path
            folder_name = folder.name

            try:
                subtree_ids = await self.uow.folders.list_subtree_ids(path, tenant_id)
                files_deleted = await self.uow.files.delete_by_folder_ids(
                    subtree_ids, tenant_id
                )
                deleted_count = await self.uow.folders.delete_by_path_prefix(path, tenant_id)
                await self.uow.audit_events.create(
                    AuditEvent(
                        tenant_id=tenant_id,
                        user_id=actor_id,
                        action="folder_subtree_deleted",
                        event_metadata={
                            "folder_id": str(folder_id),
                            "name": folder_name,
                            "folders_deleted": deleted_count,
                            "files_deleted": files_deleted,
                        },
                    )
                )
                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                logger.error("Subtree delete of folder %s rolled back: %s", folder_id, exc)
                return Return.err(storage_failure_error(exc))

            logger.info(
                "Deleted %d folder(s) and %d file(s) under %s in tenant %s",
                deleted_count,
                files_deleted,
                folder_id,
                tenant_id,
            )
            return Return.ok(
                DeleteSubtreeResponse(deleted_count=deleted_count, files_deleted=files_deleted)
            )
