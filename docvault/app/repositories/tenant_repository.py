from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from docvault.domain.entities import MembershipRole, Tenant


class ITenantRepository(ABC):
    """Tenant repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Tenant]:
        """Get tenant by unique name"""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> List[Tuple[Tenant, MembershipRole]]:
        """Get tenants the user is an active member of, newest membership first"""
        pass

    @abstractmethod
    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant"""
        pass

    @abstractmethod
    async def update(self, tenant: Tenant) -> Tenant:
        """Update existing tenant"""
        pass

    @abstractmethod
    async def delete(self, tenant: Tenant) -> None:
        """Delete tenant row (dependents must already be gone)"""
        pass
