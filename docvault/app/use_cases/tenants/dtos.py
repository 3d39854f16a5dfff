"""
Tenant Use Case DTOs (Data Transfer Objects)

Response classes for tenant lifecycle use cases.
"""

from typing import Optional

from pydantic import BaseModel

from docvault.app.use_cases.folders.dtos import FolderRef
from docvault.domain.entities import Folder, Tenant


# ============================================================================
# Response DTOs
# ============================================================================


class TenantResponse(BaseModel):
    """Tenant record with its root folder reference"""

    id: str
    name: str
    root_folder_id: Optional[str]
    root_folder: Optional[FolderRef]
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(
        cls, tenant: Tenant, root_folder: Optional[Folder] = None
    ) -> "TenantResponse":
        return cls(
            id=str(tenant.id),
            name=tenant.name,
            root_folder_id=str(tenant.root_folder_id) if tenant.root_folder_id else None,
            root_folder=(
                FolderRef(id=str(root_folder.id), name=root_folder.name)
                if root_folder is not None
                else None
            ),
            created_at=tenant.created_at.isoformat(),
            updated_at=tenant.updated_at.isoformat(),
        )


class TenantDetailsResponse(TenantResponse):
    """Tenant with usage counts"""

    folder_count: int
    file_count: int


class TenantMembershipResponse(BaseModel):
    """Tenant entry in the caller's tenant list"""

    id: str
    name: str
    root_folder_id: Optional[str]
    role: str


class DeleteTenantResponse(BaseModel):
    """Outcome of a tenant deletion"""

    status: str
    folders_deleted: int
    files_deleted: int
    memberships_deleted: int
