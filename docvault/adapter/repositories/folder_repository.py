from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from docvault.app.repositories.folder_repository import IFolderRepository
from docvault.domain.entities import Folder, FolderNode
from docvault.domain.path_codec import SEPARATOR, ancestor_paths, depth


def _subtree_predicate(pivot_path: str):
    """pivot itself, or any path that extends it by at least one segment"""
    return or_(
        col(Folder.path) == pivot_path,
        col(Folder.path).startswith(pivot_path + SEPARATOR, autoescape=True),
    )


class FolderRepository(IFolderRepository):
    """Folder repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, folder_id: UUID, tenant_id: UUID) -> Optional[Folder]:
        """Get folder by ID within a tenant"""
        stmt = select(Folder).where(Folder.id == folder_id, Folder.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_path(self, folder_id: UUID, tenant_id: UUID) -> Optional[str]:
        """Get the materialized path of a folder"""
        stmt = select(Folder.path).where(Folder.id == folder_id, Folder.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_root(self, tenant_id: UUID) -> Optional[Folder]:
        """Get the tenant's root folder"""
        stmt = select(Folder).where(
            Folder.tenant_id == tenant_id, col(Folder.parent_id).is_(None)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_children(self, parent_id: UUID, tenant_id: UUID) -> List[Folder]:
        """Get immediate subfolders ordered by name"""
        stmt = (
            select(Folder)
            .where(Folder.parent_id == parent_id, Folder.tenant_id == tenant_id)
            .order_by(col(Folder.name).asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_descendants(
        self, pivot_path: str, tenant_id: UUID, exclude_id: Optional[UUID] = None
    ) -> List[FolderNode]:
        """Get the subtree rooted at pivot_path, depth relative to the pivot"""
        stmt = select(Folder.id, Folder.name, Folder.path).where(
            Folder.tenant_id == tenant_id, _subtree_predicate(pivot_path)
        )
        if exclude_id is not None:
            stmt = stmt.where(Folder.id != exclude_id)
        stmt = stmt.order_by(col(Folder.path).asc())

        result = await self.session.execute(stmt)
        pivot_depth = depth(pivot_path)
        return [
            FolderNode(id=row.id, name=row.name, path=row.path, depth=depth(row.path) - pivot_depth)
            for row in result.all()
        ]

    async def list_ancestors(self, pivot_path: str, tenant_id: UUID) -> List[FolderNode]:
        """Get root-to-pivot chain, depth absolute (root = 1)"""
        # Every ancestor path is derivable from the pivot, so this is an
        # equality lookup on the (tenant_id, path) index.
        stmt = select(Folder.id, Folder.name, Folder.path).where(
            Folder.tenant_id == tenant_id, col(Folder.path).in_(ancestor_paths(pivot_path))
        )
        result = await self.session.execute(stmt)
        nodes = [
            FolderNode(id=row.id, name=row.name, path=row.path, depth=depth(row.path))
            for row in result.all()
        ]
        return sorted(nodes, key=lambda node: node.depth)

    async def list_subtree_ids(self, pivot_path: str, tenant_id: UUID) -> List[UUID]:
        """Get ids of the pivot folder and all of its descendants"""
        stmt = select(Folder.id).where(
            Folder.tenant_id == tenant_id, _subtree_predicate(pivot_path)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def exists_sibling(
        self,
        parent_id: UUID,
        tenant_id: UUID,
        name: str,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        """Check whether parent_id already has a child called name"""
        stmt = select(Folder.id).where(
            Folder.parent_id == parent_id,
            Folder.tenant_id == tenant_id,
            Folder.name == name,
        )
        if exclude_id is not None:
            stmt = stmt.where(Folder.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def create(self, folder: Folder) -> Folder:
        """Create a new folder"""
        self.session.add(folder)
        await self.session.flush()
        await self.session.refresh(folder)
        return folder

    async def update(self, folder: Folder) -> Folder:
        """Update existing folder"""
        self.session.add(folder)
        await self.session.flush()
        await self.session.refresh(folder)
        return folder

    async def delete_by_path_prefix(self, pivot_path: str, tenant_id: UUID) -> int:
        """Delete the pivot folder and every descendant. Returns count."""
        stmt = (
            delete(Folder)
            .where(Folder.tenant_id == tenant_id, _subtree_predicate(pivot_path))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_by_tenant(self, tenant_id: UUID) -> int:
        """Delete every folder of a tenant. Returns count."""
        stmt = (
            delete(Folder)
            .where(Folder.tenant_id == tenant_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def count_by_tenant(self, tenant_id: UUID) -> int:
        """Count folders of a tenant"""
        stmt = select(func.count()).select_from(Folder).where(Folder.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()
