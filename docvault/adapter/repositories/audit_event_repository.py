import base64
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from docvault.app.repositories.audit_event_repository import IAuditEventRepository
from docvault.domain.entities import AuditEvent


def encode_cursor(event: AuditEvent) -> str:
    raw = f"{event.created_at.isoformat()}|{event.id}"
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("utf-8")


def decode_cursor(cursor: str) -> Tuple[datetime, UUID]:
    """
    Raises:
        ValueError: cursor was not produced by encode_cursor
    """
    try:
        raw = base64.urlsafe_b64decode(cursor.encode("utf-8")).decode("utf-8")
        timestamp, event_id = raw.split("|", 1)
        return datetime.fromisoformat(timestamp), UUID(event_id)
    except (ValueError, TypeError, UnicodeDecodeError) as exc:
        raise ValueError(f"Invalid pagination cursor: {cursor!r}") from exc


class AuditEventRepository(IAuditEventRepository):
    """AuditEvent repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Create a new audit event (immutable)"""
        self.session.add(audit_event)
        await self.session.flush()
        await self.session.refresh(audit_event)
        return audit_event

    async def get_by_tenant_paginated(
        self, tenant_id: UUID, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[AuditEvent], Optional[str]]:
        """
        Get audit events for a tenant, newest first.

        Cursor format: base64 of "<created_at ISO>|<id>" of the last event
        returned; the id breaks ties between events sharing a timestamp.
        """
        stmt = select(AuditEvent).where(AuditEvent.tenant_id == tenant_id)

        if cursor:
            cursor_timestamp, cursor_id = decode_cursor(cursor)
            stmt = stmt.where(
                or_(
                    col(AuditEvent.created_at) < cursor_timestamp,
                    and_(
                        col(AuditEvent.created_at) == cursor_timestamp,
                        col(AuditEvent.id) < cursor_id,
                    ),
                )
            )

        # One extra row tells us whether another page exists
        stmt = stmt.order_by(
            col(AuditEvent.created_at).desc(), col(AuditEvent.id).desc()
        ).limit(limit + 1)

        result = await self.session.execute(stmt)
        events = list(result.scalars().all())

        has_more = len(events) > limit
        if has_more:
            events = events[:limit]

        next_cursor = encode_cursor(events[-1]) if has_more and events else None
        return events, next_cursor
