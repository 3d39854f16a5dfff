from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from docvault.domain.entities import Membership


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_tenant(
        self, user_id: UUID, tenant_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and tenant"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def delete_by_tenant(self, tenant_id: UUID) -> int:
        """Delete all memberships of a tenant. Returns count."""
        pass
