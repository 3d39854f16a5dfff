"""
Tenant Management Use Cases

Tenant lifecycle, including root folder provisioning.
"""

from .create_tenant_use_case import CreateTenantUseCase
from .delete_tenant_use_case import DeleteTenantUseCase
from .dtos import (
    DeleteTenantResponse,
    TenantDetailsResponse,
    TenantMembershipResponse,
    TenantResponse,
)
from .get_tenant_use_case import GetTenantUseCase
from .list_tenants_use_case import ListTenantsUseCase
from .rename_tenant_use_case import RenameTenantUseCase

__all__ = [
    "CreateTenantUseCase",
    "GetTenantUseCase",
    "ListTenantsUseCase",
    "RenameTenantUseCase",
    "DeleteTenantUseCase",
    "DeleteTenantResponse",
    "TenantDetailsResponse",
    "TenantMembershipResponse",
    "TenantResponse",
]
