"""
Folder Tree Use Cases

All structural operations on a tenant's folder tree.
"""

from .create_subfolder_use_case import CreateSubfolderUseCase
from .delete_subtree_use_case import DeleteSubtreeUseCase
from .dtos import (
    DeleteSubtreeResponse,
    FileEntryResponse,
    FolderChildResponse,
    FolderDetailsResponse,
    FolderNodeResponse,
    FolderRef,
    FolderResponse,
)
from .get_folder_use_case import GetFolderUseCase
from .list_folders_use_case import (
    ListAncestorsUseCase,
    ListChildrenUseCase,
    ListDescendantsUseCase,
)
from .rename_folder_use_case import RenameFolderUseCase

__all__ = [
    "CreateSubfolderUseCase",
    "RenameFolderUseCase",
    "DeleteSubtreeUseCase",
    "GetFolderUseCase",
    "ListChildrenUseCase",
    "ListDescendantsUseCase",
    "ListAncestorsUseCase",
    "DeleteSubtreeResponse",
    "FileEntryResponse",
    "FolderChildResponse",
    "FolderDetailsResponse",
    "FolderNodeResponse",
    "FolderRef",
    "FolderResponse",
]
