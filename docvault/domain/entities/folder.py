"""
Folder Entity

One node of a tenant's folder tree, addressed by a materialized path.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel
from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Folder(SQLModel, table=True):
    """
    Folder entity - a node in the tenant folder tree.

    Business Rules:
    - path = parent.path + "." + encoded own id; the root path is one segment
    - (parent_id, name, tenant_id) is unique
    - Exactly one folder per tenant has parent_id = NULL (the root)
    - Renames never touch path; path encodes identifiers, not names
    """

    __tablename__ = "folders"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    parent_id: Optional[UUID] = Field(default=None, foreign_key="folders.id", index=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)

    path: str = Field(nullable=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("uq_folder_parent_name_tenant", "parent_id", "name", "tenant_id", unique=True),
        Index(
            "uq_folder_tenant_root",
            "tenant_id",
            unique=True,
            sqlite_where=text("parent_id IS NULL"),
            postgresql_where=text("parent_id IS NULL"),
        ),
        Index("idx_folder_tenant_path", "tenant_id", "path"),
    )

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


class FolderNode(BaseModel):
    """Projection returned by ancestor/descendant path queries"""

    id: UUID
    name: str
    path: str
    depth: int
