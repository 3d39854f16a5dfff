"""
Use Case: Delete Tenant

The only way a root folder is ever removed. Files, folders, memberships
and the tenant row are deleted in one transaction; audit events are kept.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.common import permission_denied_error, storage_failure_error
from docvault.domain.entities import AuditEvent, MembershipRole
from docvault.libs.result import Error, Result, Return

from .dtos import DeleteTenantResponse

logger = logging.getLogger(__name__)


class DeleteTenantUseCase:
    """
    Hard-delete a tenant and everything it owns (admin only).

    Business Logic:
    1. Actor needs admin role
    2. Detach the root folder reference
    3. Delete files (and versions), then folders, then memberships
    4. Record the audit event, delete the tenant row, commit
    """

    def __init__(self, uow: UnitOfWork, access_guard: IAccessGuard):
        self.uow = uow
        self.access_guard = access_guard

    async def execute(self, actor_id: UUID, tenant_id: UUID) -> Result[DeleteTenantResponse]:
        """
        Errors:
            - PERMISSION_DENIED: Actor is not a tenant admin
            - TENANT_NOT_FOUND
            - STORAGE_FAILURE: Database error, nothing deleted
        """
        async with self.uow:
            if not await self.access_guard.check_tenant_access(
                actor_id, tenant_id, MembershipRole.admin
            ):
                return Return.err(permission_denied_error())

            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            tenant_name = tenant.name

            try:
                tenant.root_folder_id = None
                await self.uow.tenants.update(tenant)

                files_deleted = await self.uow.files.delete_by_tenant(tenant_id)
                folders_deleted = await self.uow.folders.delete_by_tenant(tenant_id)
                memberships_deleted = await self.uow.memberships.delete_by_tenant(tenant_id)

                await self.uow.audit_events.create(
                    AuditEvent(
                        tenant_id=tenant_id,
                        user_id=actor_id,
                        action="tenant_deleted",
                        event_metadata={
                            "tenant_name": tenant_name,
                            "folders_deleted": folders_deleted,
                            "files_deleted": files_deleted,
                            "memberships_deleted": memberships_deleted,
                        },
                    )
                )
                await self.uow.tenants.delete(tenant)
                await self.uow.commit()
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                logger.error("Tenant %s deletion rolled back: %s", tenant_id, exc)
                return Return.err(storage_failure_error(exc))

            logger.info("Tenant %s deleted (%d folders)", tenant_id, folders_deleted)
            return Return.ok(
                DeleteTenantResponse(
                    status="deleted",
                    folders_deleted=folders_deleted,
                    files_deleted=files_deleted,
                    memberships_deleted=memberships_deleted,
                )
            )
