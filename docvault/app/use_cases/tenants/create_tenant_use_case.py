"""
Use Case: Create Tenant

Creates a tenant together with its root folder and makes the caller its
owner. Tenant, root folder, back-reference and membership are written in
one transaction, so a tenant without a root (or a dangling root) is never
visible.
"""

import logging
from uuid import UUID, uuid4

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.common import (
    duplicate_tenant_error,
    invalid_name_error,
    normalize_name,
    storage_failure_error,
)
from docvault.domain.entities import (
    AuditEvent,
    Folder,
    Membership,
    MembershipRole,
    MembershipStatus,
    Tenant,
)
from docvault.domain.path_codec import compose_path, encode_segment
from docvault.libs.result import Result, Return

from .dtos import TenantResponse

logger = logging.getLogger(__name__)


class CreateTenantUseCase:
    """
    Create a tenant and provision its root folder.

    Business Logic:
    1. Name must be non-empty after trimming and unused
    2. Insert the tenant
    3. Insert the root folder: parent_id NULL, path seeded by the tenant id
    4. Point tenant.root_folder_id at the root
    5. Make the caller owner
    6. Audit event, commit
    """

    def __init__(self, uow: UnitOfWork, root_folder_name: str = "root"):
        self.uow = uow
        self.root_folder_name = root_folder_name

    async def execute(self, actor_id: UUID, name: str) -> Result[TenantResponse]:
        """
        Execute create tenant use case.

        Errors:
            - INVALID_INPUT: Empty or whitespace name
            - DUPLICATE_NAME: Another tenant already uses the name
            - STORAGE_FAILURE: Database error, nothing written
        """
        async with self.uow:
            trimmed_name = normalize_name(name)
            if trimmed_name is None:
                return Return.err(invalid_name_error("Tenant"))

            if await self.uow.tenants.get_by_name(trimmed_name) is not None:
                return Return.err(duplicate_tenant_error(trimmed_name))

            try:
                tenant = await self.uow.tenants.create(Tenant(id=uuid4(), name=trimmed_name))

                # The tenant id seeds the root path: no folder id exists before the insert
                root = await self.uow.folders.create(
                    Folder(
                        id=uuid4(),
                        name=self.root_folder_name,
                        parent_id=None,
                        tenant_id=tenant.id,
                        path=compose_path(None, encode_segment(tenant.id)),
                    )
                )

                tenant.root_folder_id = root.id
                tenant = await self.uow.tenants.update(tenant)

                await self.uow.memberships.create(
                    Membership(
                        user_id=actor_id,
                        tenant_id=tenant.id,
                        role=MembershipRole.owner,
                        status=MembershipStatus.active,
                    )
                )
                await self.uow.audit_events.create(
                    AuditEvent(
                        tenant_id=tenant.id,
                        user_id=actor_id,
                        action="tenant_created",
                        event_metadata={
                            "tenant_name": trimmed_name,
                            "root_folder_id": str(root.id),
                        },
                    )
                )
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                return Return.err(duplicate_tenant_error(trimmed_name))
            except SQLAlchemyError as exc:
                await self.uow.rollback()
                logger.error("Failed to create tenant %r: %s", trimmed_name, exc)
                return Return.err(storage_failure_error(exc))

            logger.info("Tenant %s created with root folder %s", tenant.id, root.id)
            return Return.ok(TenantResponse.from_entity(tenant, root))
