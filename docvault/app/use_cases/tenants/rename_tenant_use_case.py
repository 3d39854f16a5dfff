"""
Use Case: Rename Tenant

Admins may rename their tenant; names stay unique across tenants.
"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.common import (
    duplicate_tenant_error,
    invalid_name_error,
    normalize_name,
    permission_denied_error,
    storage_failure_error,
)
from docvault.domain.entities import AuditEvent, MembershipRole
from docvault.libs.result import Error, Result, Return

from .dtos import TenantResponse

logger = logging.getLogger(__name__)


class RenameTenantUseCase:
    def __init__(self, uow: UnitOfWork, access_guard: IAccessGuard):
        self.uow = uow
        self.access_guard = access_guard

    async def execute(
        self, actor_id: UUID, tenant_id: UUID, name: str
    ) -> Result[TenantResponse]:
        """
        Errors:
            - PERMISSION_DENIED: Actor is not a tenant admin
            - INVALID_INPUT: Empty or whitespace name
            - TENANT_NOT_FOUND
            - DUPLICATE_NAME: Another tenant uses the name
            - STORAGE_FAILURE
        """
        async with self.uow:
            if not await self.access_guard.check_tenant_access(
                actor_id, tenant_id, MembershipRole.admin
            ):
                return Return.err(permission_denied_error())

            trimmed_name = normalize_name(name)
            if trimmed_name is None:
                return Return.err(invalid_name_error("Tenant"))

            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            existing = await self.uow.tenants.get_by_name(trimmed_name)
            if existing is not None and existing.id != tenant_id:
                return Return.err(duplicate_tenant_error(trimmed_name))

            old_name = tenant.name
            tenant.name = trimmed_name
            tenant.updated_at = datetime.utcnow()

            try:
                tenant = await self.uow.tenants.update(tenant)
                await self.uow.audit_events.create(
                    AuditEvent(
                        tenant_id=tenant_id,
                        user_id=actor_id,
                        action="tenant_renamed",
                        event_metadata={"old_name": old_name, "new_name": trimmed_name},
                    )
                )
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(duplicate_tenant_error(trimmed_name))
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                logger.error("Failed to rename tenant %s: %s", tenant_id, exc)
                return Return.err(storage_failure_error(exc))

            root = None
            if tenant.root_folder_id is not None:
                root = await self.uow.folders.get_by_id(tenant.root_folder_id, tenant_id)
            return Return.ok(TenantResponse.from_entity(tenant, root))
