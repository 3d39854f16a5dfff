"""
Use Case: Get Tenant

Tenant details for any member: root folder reference and usage counts.
"""

from uuid import UUID

from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.common import permission_denied_error
from docvault.domain.entities import MembershipRole
from docvault.libs.result import Error, Result, Return

from .dtos import TenantDetailsResponse, TenantResponse


class GetTenantUseCase:
    def __init__(self, uow: UnitOfWork, access_guard: IAccessGuard):
        self.uow = uow
        self.access_guard = access_guard

    async def execute(self, actor_id: UUID, tenant_id: UUID) -> Result[TenantDetailsResponse]:
        async with self.uow:
            if not await self.access_guard.check_tenant_access(
                actor_id, tenant_id, MembershipRole.viewer
            ):
                return Return.err(permission_denied_error())

            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            root = None
            if tenant.root_folder_id is not None:
                root = await self.uow.folders.get_by_id(tenant.root_folder_id, tenant_id)

            folder_count = await self.uow.folders.count_by_tenant(tenant_id)
            file_count = await self.uow.files.count_by_tenant(tenant_id)

            base = TenantResponse.from_entity(tenant, root)
            return Return.ok(
                TenantDetailsResponse(
                    **base.model_dump(), folder_count=folder_count, file_count=file_count
                )
            )
