"""
Use Cases

Organized into domain folders:
- folders/: Folder tree operations
- tenants/: Tenant lifecycle and root provisioning
- audit/: Audit logs
"""

from .folders import (
    CreateSubfolderUseCase,
    DeleteSubtreeUseCase,
    GetFolderUseCase,
    ListAncestorsUseCase,
    ListChildrenUseCase,
    ListDescendantsUseCase,
    RenameFolderUseCase,
)
from .tenants import (
    CreateTenantUseCase,
    DeleteTenantUseCase,
    GetTenantUseCase,
    ListTenantsUseCase,
    RenameTenantUseCase,
)
from .audit import (
    GetAuditEventsUseCase,
)

__all__ = [
    # Folders
    "CreateSubfolderUseCase",
    "RenameFolderUseCase",
    "DeleteSubtreeUseCase",
    "GetFolderUseCase",
    "ListChildrenUseCase",
    "ListDescendantsUseCase",
    "ListAncestorsUseCase",
    # Tenants
    "CreateTenantUseCase",
    "GetTenantUseCase",
    "ListTenantsUseCase",
    "RenameTenantUseCase",
    "DeleteTenantUseCase",
    # Audit
    "GetAuditEventsUseCase",
]
