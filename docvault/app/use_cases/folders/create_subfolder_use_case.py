"""
Use Case: Create Subfolder

Adds a folder under an existing parent of the same tenant and derives its
materialized path from the parent's.
"""

import logging
from uuid import UUID, uuid4

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.common import (
    duplicate_folder_error,
    invalid_name_error,
    normalize_name,
    permission_denied_error,
    storage_failure_error,
)
from docvault.domain.entities import AuditEvent, Folder, MembershipRole
from docvault.domain.path_codec import compose_path, encode_segment
from docvault.libs.result import Error, Result, Return

from .dtos import FolderResponse

logger = logging.getLogger(__name__)


class CreateSubfolderUseCase:
    """
    Create a folder below parent_id.

    Business Logic:
    1. Actor needs at least member role in the tenant
    2. Name must be non-empty after trimming
    3. Parent must exist in the same tenant
    4. No sibling may already carry the name
    5. path = parent.path + encoded new id
    6. Insert; the (parent_id, name, tenant_id) unique index settles races
    7. Audit event, commit
    """

    def __init__(self, uow: UnitOfWork, access_guard: IAccessGuard):
        self.uow = uow
        self.access_guard = access_guard

    async def execute(
        self,
        tenant_id: UUID,
        parent_id: UUID,
        name: str,
        actor_id: UUID,
    ) -> Result[FolderResponse]:
        """
        Execute create subfolder use case.

        Returns:
            Result[FolderResponse] with the created folder

        Errors:
            - PERMISSION_DENIED: Actor cannot write to the tenant
            - INVALID_INPUT: Empty or whitespace name
            - PARENT_NOT_FOUND: Parent missing in this tenant
            - DUPLICATE_NAME: A sibling already has the name
            - STORAGE_FAILURE: Database error, nothing written
        """
        async with self.uow:
            if not await self.access_guard.check_tenant_access(
                actor_id, tenant_id, MembershipRole.member
            ):
                return Return.err(permission_denied_error())

            trimmed_name = normalize_name(name)
            if trimmed_name is None:
                return Return.err(invalid_name_error("Folder"))

            parent = await self.uow.folders.get_by_id(parent_id, tenant_id)
            if parent is None:
                return Return.err(
                    Error("PARENT_NOT_FOUND", "Parent folder not found in this tenant")
                )

            if await self.uow.folders.exists_sibling(parent_id, tenant_id, trimmed_name):
                return Return.err(duplicate_folder_error(trimmed_name))

            folder_id = uuid4()
            folder = Folder(
                id=folder_id,
                name=trimmed_name,
                parent_id=parent.id,
                tenant_id=tenant_id,
                path=compose_path(parent.path, encode_segment(folder_id)),
            )

            try:
                folder = await self.uow.folders.create(folder)
                await self.uow.audit_events.create(
                    AuditEvent(
                        tenant_id=tenant_id,
                        user_id=actor_id,
                        action="folder_created",
                        event_metadata={
                            "folder_id": str(folder_id),
                            "parent_id": str(parent_id),
                            "name": trimmed_name,
                        },
                    )
                )
                await self.uow.commit()
            except IntegrityError:
                # Lost the race against a concurrent create of the same name
                await self.uow.rollback()
                logger.info(
                    "Duplicate folder %r under %s rejected by constraint", trimmed_name, parent_id
                )
                return Return.err(duplicate_folder_error(trimmed_name))
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                logger.error("Failed to create folder under %s: %s", parent_id, exc)
                return Return.err(storage_failure_error(exc))

            logger.info("Folder %s created under %s in tenant %s", folder_id, parent_id, tenant_id)
            return Return.ok(FolderResponse.from_entity(folder))
