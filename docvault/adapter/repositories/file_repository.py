from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from docvault.app.repositories.file_repository import IFileRepository
from docvault.domain.entities import File, FileVersion


class FileRepository(IFileRepository):
    """File repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, file: File) -> File:
        """Create a new file"""
        self.session.add(file)
        await self.session.flush()
        await self.session.refresh(file)
        return file

    async def create_version(self, version: FileVersion) -> FileVersion:
        """Create a new file version"""
        self.session.add(version)
        await self.session.flush()
        await self.session.refresh(version)
        return version

    async def list_by_folder(
        self, folder_id: UUID, tenant_id: UUID
    ) -> List[Tuple[File, Optional[FileVersion]]]:
        """Get files of a folder with their current version, ordered by name"""
        stmt = (
            select(File, FileVersion)
            .join(FileVersion, FileVersion.id == File.current_version_id, isouter=True)
            .where(File.folder_id == folder_id, File.tenant_id == tenant_id)
            .order_by(col(File.name).asc())
        )
        result = await self.session.execute(stmt)
        return [(file, version) for file, version in result.all()]

    async def _delete_where(self, *criteria) -> int:
        # Versions first so no version outlives its file
        file_ids = select(File.id).where(*criteria)
        await self.session.execute(
            delete(FileVersion)
            .where(col(FileVersion.file_id).in_(file_ids))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(
            delete(File).where(*criteria).execution_options(synchronize_session=False)
        )
        return result.rowcount

    async def delete_by_folder_ids(
        self, folder_ids: Sequence[UUID], tenant_id: UUID
    ) -> int:
        """Delete every file (and its versions) held by the given folders. Returns file count."""
        if not folder_ids:
            return 0
        return await self._delete_where(
            File.tenant_id == tenant_id, col(File.folder_id).in_(list(folder_ids))
        )

    async def delete_by_tenant(self, tenant_id: UUID) -> int:
        """Delete every file (and its versions) of a tenant. Returns file count."""
        return await self._delete_where(File.tenant_id == tenant_id)

    async def count_by_tenant(self, tenant_id: UUID) -> int:
        """Count files of a tenant"""
        stmt = select(func.count()).select_from(File).where(File.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()
