from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from docvault.domain.entities import File, FileVersion


class IFileRepository(ABC):
    """File repository interface - application layer"""

    @abstractmethod
    async def create(self, file: File) -> File:
        """Create a new file"""
        pass

    @abstractmethod
    async def create_version(self, version: FileVersion) -> FileVersion:
        """Create a new file version"""
        pass

    @abstractmethod
    async def list_by_folder(
        self, folder_id: UUID, tenant_id: UUID
    ) -> List[Tuple[File, Optional[FileVersion]]]:
        """Get files of a folder with their current version, ordered by name"""
        pass

    @abstractmethod
    async def delete_by_folder_ids(
        self, folder_ids: Sequence[UUID], tenant_id: UUID
    ) -> int:
        """Delete every file (and its versions) held by the given folders. Returns file count."""
        pass

    @abstractmethod
    async def delete_by_tenant(self, tenant_id: UUID) -> int:
        """Delete every file (and its versions) of a tenant. Returns file count."""
        pass

    @abstractmethod
    async def count_by_tenant(self, tenant_id: UUID) -> int:
        """Count files of a tenant"""
        pass
