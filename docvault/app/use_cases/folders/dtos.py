"""
Folder Use Case DTOs (Data Transfer Objects)

Response classes for the folder tree operations.
"""

from typing import List, Optional

from pydantic import BaseModel

from docvault.domain.entities import File, FileVersion, Folder, FolderNode
from docvault.domain.path_codec import depth


# ============================================================================
# Response DTOs
# ============================================================================


class FolderResponse(BaseModel):
    """Full folder record returned by create/rename/get"""

    id: str
    name: str
    parent_id: Optional[str]
    tenant_id: str
    path: str
    depth: int
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, folder: Folder) -> "FolderResponse":
        return cls(
            id=str(folder.id),
            name=folder.name,
            parent_id=str(folder.parent_id) if folder.parent_id else None,
            tenant_id=str(folder.tenant_id),
            path=folder.path,
            depth=depth(folder.path) - 1,
            created_at=folder.created_at.isoformat(),
            updated_at=folder.updated_at.isoformat(),
        )


class FolderRef(BaseModel):
    """Minimal folder reference (parent, tenant root)"""

    id: str
    name: str


class FolderChildResponse(BaseModel):
    """Immediate child entry in a folder listing"""

    id: str
    name: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, folder: Folder) -> "FolderChildResponse":
        return cls(
            id=str(folder.id),
            name=folder.name,
            created_at=folder.created_at.isoformat(),
            updated_at=folder.updated_at.isoformat(),
        )


class FolderNodeResponse(BaseModel):
    """Entry of a descendant or ancestor listing"""

    id: str
    name: str
    path: str
    depth: int

    @classmethod
    def from_node(cls, node: FolderNode) -> "FolderNodeResponse":
        return cls(id=str(node.id), name=node.name, path=node.path, depth=node.depth)


class FileEntryResponse(BaseModel):
    """File entry in a folder listing, with current version details"""

    id: str
    name: str
    mime_type: Optional[str]
    size: Optional[int]
    version_number: Optional[int]
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(
        cls, file: File, version: Optional[FileVersion]
    ) -> "FileEntryResponse":
        return cls(
            id=str(file.id),
            name=file.name,
            mime_type=file.mime_type,
            size=version.size if version else None,
            version_number=version.version_number if version else None,
            created_at=file.created_at.isoformat(),
            updated_at=file.updated_at.isoformat(),
        )


class FolderDetailsResponse(BaseModel):
    """Folder with its parent, subfolders and files"""

    folder: FolderResponse
    parent: Optional[FolderRef]
    children: List[FolderChildResponse]
    files: List[FileEntryResponse]


class DeleteSubtreeResponse(BaseModel):
    """Outcome of a subtree deletion"""

    deleted_count: int
    files_deleted: int
