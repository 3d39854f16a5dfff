from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from docvault.domain.entities import Folder, FolderNode


class IFolderRepository(ABC):
    """Folder repository interface - every query is scoped to one tenant"""

    @abstractmethod
    async def get_by_id(self, folder_id: UUID, tenant_id: UUID) -> Optional[Folder]:
        """Get folder by ID within a tenant"""
        pass

    @abstractmethod
    async def get_path(self, folder_id: UUID, tenant_id: UUID) -> Optional[str]:
        """Get the materialized path of a folder"""
        pass

    @abstractmethod
    async def get_root(self, tenant_id: UUID) -> Optional[Folder]:
        """Get the tenant's root folder (parent_id IS NULL)"""
        pass

    @abstractmethod
    async def list_children(self, parent_id: UUID, tenant_id: UUID) -> List[Folder]:
        """Get immediate subfolders ordered by name"""
        pass

    @abstractmethod
    async def list_descendants(
        self, pivot_path: str, tenant_id: UUID, exclude_id: Optional[UUID] = None
    ) -> List[FolderNode]:
        """
        Get the subtree rooted at pivot_path ordered by path.

        depth is relative to the pivot (pivot itself = 0).
        """
        pass

    @abstractmethod
    async def list_ancestors(self, pivot_path: str, tenant_id: UUID) -> List[FolderNode]:
        """
        Get every folder whose path is a segment prefix of pivot_path.

        Ordered root first; depth is the absolute segment count (root = 1).
        """
        pass

    @abstractmethod
    async def list_subtree_ids(self, pivot_path: str, tenant_id: UUID) -> List[UUID]:
        """Get ids of the pivot folder and all of its descendants"""
        pass

    @abstractmethod
    async def exists_sibling(
        self,
        parent_id: UUID,
        tenant_id: UUID,
        name: str,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        """Check whether parent_id already has a child called name"""
        pass

    @abstractmethod
    async def create(self, folder: Folder) -> Folder:
        """Create a new folder"""
        pass

    @abstractmethod
    async def update(self, folder: Folder) -> Folder:
        """Update existing folder"""
        pass

    @abstractmethod
    async def delete_by_path_prefix(self, pivot_path: str, tenant_id: UUID) -> int:
        """Delete the pivot folder and every descendant. Returns count."""
        pass

    @abstractmethod
    async def delete_by_tenant(self, tenant_id: UUID) -> int:
        """Delete every folder of a tenant. Returns count."""
        pass

    @abstractmethod
    async def count_by_tenant(self, tenant_id: UUID) -> int:
        """Count folders of a tenant"""
        pass
