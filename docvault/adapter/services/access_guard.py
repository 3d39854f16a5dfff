import logging
from typing import Optional
from uuid import UUID

from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.domain.entities import MembershipRole, MembershipStatus

logger = logging.getLogger(__name__)


class MembershipAccessGuard(IAccessGuard):
    """
    AccessGuard backed by tenant memberships.

    Reads through the caller's unit of work, so it must be used inside an
    entered ``async with uow`` block.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def check_tenant_access(
        self,
        actor_id: UUID,
        tenant_id: UUID,
        minimum_role: Optional[MembershipRole] = None,
    ) -> bool:
        membership = await self.uow.memberships.get_by_user_and_tenant(actor_id, tenant_id)
        if membership is None or membership.status != MembershipStatus.active:
            logger.debug("No active membership for user %s in tenant %s", actor_id, tenant_id)
            return False

        role = MembershipRole(membership.role)
        if minimum_role is not None and role.rank < minimum_role.rank:
            logger.debug(
                "User %s has role %s in tenant %s, %s required",
                actor_id,
                role.value,
                tenant_id,
                minimum_role.value,
            )
            return False

        return True
