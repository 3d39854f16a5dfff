"""
File and FileVersion Entities

Files live in exactly one folder; content is held by the object store and
referenced by the versions' storage keys.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class File(SQLModel, table=True):
    """
    File entity - a named document inside a folder.

    Business Rules:
    - (folder_id, name) is unique
    - Deleted together with its versions when its folder subtree is deleted
    """

    __tablename__ = "files"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)

    folder_id: UUID = Field(foreign_key="folders.id", nullable=False, index=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)

    mime_type: Optional[str] = Field(default=None, max_length=255)
    current_version_id: Optional[UUID] = Field(default=None, unique=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("uq_file_folder_name", "folder_id", "name", unique=True),
    )


class FileVersion(SQLModel, table=True):
    """Immutable stored revision of a file"""

    __tablename__ = "file_versions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    file_id: UUID = Field(foreign_key="files.id", nullable=False, index=True)

    storage_bucket: str = Field(max_length=255)
    storage_key: str = Field(max_length=1024)
    size: int = Field(default=0)
    version_number: int = Field(default=1)

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("uq_file_version_number", "file_id", "version_number", unique=True),
    )
