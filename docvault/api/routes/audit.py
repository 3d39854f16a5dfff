"""
Audit API Routes

Handles audit event retrieval endpoints.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from config import ApplicationConfig
from docvault.api.error import raise_for_error
from docvault.api.utils.ids import parse_uuid
from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.audit import GetAuditEventsUseCase
from docvault.depends import get_access_guard, get_current_user, get_unit_of_work

router = APIRouter(prefix="/tenants", tags=["Audit"])


class AuditEventResponse(BaseModel):
    """Single audit event in response"""

    action: str
    user_id: Optional[str]
    timestamp: str
    metadata: Dict[str, Any]


class AuditEventsResponse(BaseModel):
    """GET /tenants/{tenant_id}/audit-events response payload"""

    events: List[AuditEventResponse]
    next_cursor: Optional[str]


@router.get(
    "/{tenant_id}/audit-events",
    status_code=status.HTTP_200_OK,
    response_model=AuditEventsResponse,
)
async def get_audit_events(
    tenant_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    access_guard: IAccessGuard = Depends(get_access_guard),
    limit: int = Query(
        ApplicationConfig.AUDIT_PAGE_LIMIT,
        ge=1,
        le=100,
        description="Maximum number of events to return",
    ),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
):
    """
    Get Tenant Audit Events

    Structural changes (tenant and folder lifecycle) newest first.
    Only accessible by admin and owner roles.

    Raises:
        - 400 Bad Request: INVALID_INPUT (malformed tenant id or cursor)
        - 403 Forbidden: PERMISSION_DENIED
    """
    user_id = UUID(current_user["user_id"])
    tenant_uuid = parse_uuid(tenant_id, "tenant ID")

    use_case = GetAuditEventsUseCase(uow, access_guard)
    result = await use_case.execute(
        actor_id=user_id,
        tenant_id=tenant_uuid,
        limit=limit,
        cursor=cursor,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
