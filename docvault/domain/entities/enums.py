"""
Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MembershipRole(str, Enum):
    """User role within a tenant"""

    owner = "owner"
    admin = "admin"
    member = "member"
    viewer = "viewer"

    @property
    def rank(self) -> int:
        return ROLE_HIERARCHY[self]


class MembershipStatus(str, Enum):
    """Membership status"""

    active = "active"
    revoked = "revoked"


# Higher rank satisfies any lower minimum role
ROLE_HIERARCHY = {
    MembershipRole.viewer: 1,
    MembershipRole.member: 2,
    MembershipRole.admin: 3,
    MembershipRole.owner: 4,
}
