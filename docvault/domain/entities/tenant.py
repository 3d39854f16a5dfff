"""
Tenant Entity

Isolation boundary owning one folder tree.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Tenant(SQLModel, table=True):
    """
    Tenant entity - owns a folder tree, its files and memberships.

    Business Rules:
    - name is unique across tenants
    - root_folder_id is set in the same transaction that creates the tenant
    - Hard delete only: files, folders and memberships go first
    """

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255, unique=True)

    root_folder_id: Optional[UUID] = Field(default=None, unique=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
