from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from docvault.adapter.repositories.audit_event_repository import (
    AuditEventRepository,
    decode_cursor,
    encode_cursor,
)
from docvault.domain.entities import AuditEvent


@pytest.mark.asyncio
async def test_pages_newest_first(db_session: AsyncSession):
    tenant_id = uuid4()
    start = datetime(2026, 1, 1, 12, 0, 0)
    repo = AuditEventRepository(db_session)
    for minute in range(5):
        await repo.create(
            AuditEvent(
                tenant_id=tenant_id,
                action=f"event_{minute}",
                created_at=start + timedelta(minutes=minute),
            )
        )
    await repo.create(AuditEvent(tenant_id=uuid4(), action="other_tenant"))

    first, cursor = await repo.get_by_tenant_paginated(tenant_id, limit=2)
    second, cursor_2 = await repo.get_by_tenant_paginated(tenant_id, limit=2, cursor=cursor)
    third, cursor_3 = await repo.get_by_tenant_paginated(tenant_id, limit=2, cursor=cursor_2)

    assert [e.action for e in first] == ["event_4", "event_3"]
    assert [e.action for e in second] == ["event_2", "event_1"]
    assert [e.action for e in third] == ["event_0"]
    assert cursor_3 is None


@pytest.mark.asyncio
async def test_cursor_round_trip():
    event = AuditEvent(id=uuid4(), action="x", created_at=datetime(2026, 5, 6, 7, 8, 9, 123))

    assert decode_cursor(encode_cursor(event)) == (event.created_at, event.id)


@pytest.mark.parametrize("cursor", ["", "garbage!", "bm8tc2VwYXJhdG9y"])
def test_malformed_cursor(cursor):
    with pytest.raises(ValueError):
        decode_cursor(cursor)
