"""
Domain Entities

All domain entities organized by model.
"""

# Export all enums
from .enums import (
    ROLE_HIERARCHY,
    MembershipRole,
    MembershipStatus,
)

# Export all entities
from .tenant import Tenant
from .folder import Folder, FolderNode
from .file import File, FileVersion
from .membership import Membership
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "ROLE_HIERARCHY",
    "MembershipRole",
    "MembershipStatus",
    # Entities
    "Tenant",
    "Folder",
    "FolderNode",
    "File",
    "FileVersion",
    "Membership",
    "AuditEvent",
]
