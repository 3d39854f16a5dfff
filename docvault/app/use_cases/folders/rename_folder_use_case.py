"""
Use Case: Rename Folder

Changes a folder's name in place. The materialized path is built from
identifiers, so neither this folder nor any descendant is rewritten.
"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.common import (
    duplicate_folder_error,
    folder_not_found_error,
    invalid_name_error,
    normalize_name,
    permission_denied_error,
    storage_failure_error,
)
from docvault.domain.entities import AuditEvent, MembershipRole
from docvault.libs.result import Result, Return

from .dtos import FolderResponse

logger = logging.getLogger(__name__)


class RenameFolderUseCase:
    """
    Rename a folder.

    Business Rules:
    - Actor needs at least member role
    - Siblings (same parent) may not share the new name; the folder itself
      is excluded, so renaming to the current name succeeds
    - The root has no siblings and may be renamed freely
    - Only name and updated_at change
    """

    def __init__(self, uow: UnitOfWork, access_guard: IAccessGuard):
        self.uow = uow
        self.access_guard = access_guard

    async def execute(
        self,
        tenant_id: UUID,
        folder_id: UUID,
        new_name: str,
        actor_id: UUID,
    ) -> Result[FolderResponse]:
        """
        Execute rename folder use case.

        Errors:
            - PERMISSION_DENIED, INVALID_INPUT, FOLDER_NOT_FOUND,
              DUPLICATE_NAME, STORAGE_FAILURE
        """
        async with self.uow:
            if not await self.access_guard.check_tenant_access(
                actor_id, tenant_id, MembershipRole.member
            ):
                return Return.err(permission_denied_error())

            trimmed_name = normalize_name(new_name)
            if trimmed_name is None:
                return Return.err(invalid_name_error("Folder"))

            folder = await self.uow.folders.get_by_id(folder_id, tenant_id)
            if folder is None:
                return Return.err(folder_not_found_error())

            if not folder.is_root and await self.uow.folders.exists_sibling(
                folder.parent_id, tenant_id, trimmed_name, exclude_id=folder_id
            ):
                return Return.err(duplicate_folder_error(trimmed_name))

            old_name = folder.name
            folder.name = trimmed_name
            folder.updated_at = datetime.utcnow()

            try:
                folder = await self.uow.folders.update(folder)
                await self.uow.audit_events.create(
                    AuditEvent(
                        tenant_id=tenant_id,
                        user_id=actor_id,
                        action="folder_renamed",
                        event_metadata={
                            "folder_id": str(folder_id),
                            "old_name": old_name,
                            "new_name": trimmed_name,
                        },
                    )
                )
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(duplicate_folder_error(trimmed_name))
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                logger.error("Failed to rename folder %s: %s", folder_id, exc)
                return Return.err(storage_failure_error(exc))

            logger.info("Folder %s renamed in tenant %s", folder_id, tenant_id)
            return Return.ok(FolderResponse.from_entity(folder))
