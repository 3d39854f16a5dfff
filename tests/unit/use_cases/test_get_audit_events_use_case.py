from datetime import datetime
from uuid import uuid4

import pytest

from docvault.app.use_cases.audit import GetAuditEventsUseCase
from docvault.domain.entities import AuditEvent, MembershipRole


@pytest.mark.asyncio
async def test_returns_events_and_cursor(mock_uow, mock_access_guard):
    tenant_id = uuid4()
    actor_id = uuid4()
    event = AuditEvent(
        tenant_id=tenant_id,
        user_id=actor_id,
        action="folder_created",
        event_metadata={"name": "Documents"},
        created_at=datetime(2026, 1, 2, 3, 4, 5),
    )
    mock_uow.audit_events.get_by_tenant_paginated.return_value = ([event], "next")

    use_case = GetAuditEventsUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(actor_id, tenant_id, limit=1)

    assert result.is_ok()
    assert result.value["next_cursor"] == "next"
    assert result.value["events"] == [
        {
            "action": "folder_created",
            "user_id": str(actor_id),
            "timestamp": "2026-01-02T03:04:05Z",
            "metadata": {"name": "Documents"},
        }
    ]
    mock_access_guard.check_tenant_access.assert_awaited_once_with(
        actor_id, tenant_id, MembershipRole.admin
    )
    mock_uow.audit_events.get_by_tenant_paginated.assert_awaited_once_with(
        tenant_id, limit=1, cursor=None
    )


@pytest.mark.asyncio
async def test_bad_cursor_is_invalid_input(mock_uow, mock_access_guard):
    mock_uow.audit_events.get_by_tenant_paginated.side_effect = ValueError("Invalid pagination cursor")

    use_case = GetAuditEventsUseCase(mock_uow, mock_access_guard)
    result = await use_case.execute(uuid4(), uuid4(), cursor="garbage")

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_non_admin_cannot_read_audit(mock_uow, denying_access_guard):
    use_case = GetAuditEventsUseCase(mock_uow, denying_access_guard)
    result = await use_case.execute(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "PERMISSION_DENIED"
    mock_uow.audit_events.get_by_tenant_paginated.assert_not_awaited()
