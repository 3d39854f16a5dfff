from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from docvault.domain.entities import MembershipRole


class IAccessGuard(ABC):
    """Tenant authorization collaborator consulted before folder and tenant operations"""

    @abstractmethod
    async def check_tenant_access(
        self,
        actor_id: UUID,
        tenant_id: UUID,
        minimum_role: Optional[MembershipRole] = None,
    ) -> bool:
        """
        Check that actor may act within tenant.

        Args:
            actor_id: User performing the operation
            tenant_id: Tenant being accessed
            minimum_role: Lowest role that satisfies the check; any member when None

        Returns:
            True when access is granted
        """
        pass
