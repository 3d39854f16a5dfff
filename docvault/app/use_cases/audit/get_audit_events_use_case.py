"""
Get Audit Events Use Case

Retrieves the structural change log of a tenant with pagination.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.common import permission_denied_error
from docvault.domain.entities import MembershipRole
from docvault.libs.result import Error, Result, Return


class GetAuditEventsUseCase:
    """
    Use case for retrieving audit events for a tenant.

    Business Rules:
    - Caller must be admin or owner of the tenant
    - Results are tenant-scoped and ordered newest first
    - Supports cursor-based pagination
    """

    def __init__(self, uow: UnitOfWork, access_guard: IAccessGuard):
        self.uow = uow
        self.access_guard = access_guard

    async def execute(
        self,
        actor_id: UUID,
        tenant_id: UUID,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[Dict[str, Any]]:
        """
        Execute get audit events use case.

        Returns:
            Result with events list and next_cursor, or Error
        """
        async with self.uow:
            if not await self.access_guard.check_tenant_access(
                actor_id, tenant_id, MembershipRole.admin
            ):
                return Return.err(permission_denied_error())

            try:
                events, next_cursor = await self.uow.audit_events.get_by_tenant_paginated(
                    tenant_id, limit=limit, cursor=cursor
                )
            except ValueError as exc:
                return Return.err(Error("INVALID_INPUT", "Invalid pagination cursor", reason=str(exc)))

            events_list = [
                {
                    "action": event.action,
                    "user_id": str(event.user_id) if event.user_id else None,
                    "timestamp": event.created_at.isoformat() + "Z",
                    "metadata": event.event_metadata or {},
                }
                for event in events
            ]
            return Return.ok({"events": events_list, "next_cursor": next_cursor})
