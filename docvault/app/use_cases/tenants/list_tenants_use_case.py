"""
Use Case: List Tenants

Tenants the caller holds an active membership in, with the caller's role.
"""

from typing import List
from uuid import UUID

from docvault.app.services.unit_of_work import UnitOfWork
from docvault.libs.result import Result, Return

from .dtos import TenantMembershipResponse


class ListTenantsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor_id: UUID) -> Result[List[TenantMembershipResponse]]:
        async with self.uow:
            rows = await self.uow.tenants.list_for_user(actor_id)
            return Return.ok(
                [
                    TenantMembershipResponse(
                        id=str(tenant.id),
                        name=tenant.name,
                        root_folder_id=(
                            str(tenant.root_folder_id) if tenant.root_folder_id else None
                        ),
                        role=role.value,
                    )
                    for tenant, role in rows
                ]
            )
