from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from docvault.api.error import raise_for_error
from docvault.api.utils.ids import parse_uuid
from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.tenants import (
    CreateTenantUseCase,
    DeleteTenantResponse,
    DeleteTenantUseCase,
    GetTenantUseCase,
    ListTenantsUseCase,
    RenameTenantUseCase,
    TenantDetailsResponse,
    TenantMembershipResponse,
    TenantResponse,
)
from docvault.depends import get_access_guard, get_current_user, get_unit_of_work

router = APIRouter(prefix="/tenants", tags=["Tenant"])


class TenantNameRequest(BaseModel):
    """
    Create / rename tenant HTTP request payload

    Emptiness is checked by the use case so that whitespace-only names
    get the INVALID_INPUT code.
    """

    name: str = Field(..., description="Tenant name (unique)")


@router.get(
    "", status_code=status.HTTP_200_OK, response_model=List[TenantMembershipResponse]
)
async def list_tenants(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Tenants

    Returns every tenant the caller is an active member of, with the role
    held in each.
    """
    user_id = UUID(current_user["user_id"])

    use_case = ListTenantsUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TenantResponse)
async def create_tenant(
    request: TenantNameRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Tenant

    Creates the tenant and its root folder atomically; the caller becomes
    the owner.

    Raises:
        - 400 Bad Request: INVALID_INPUT
        - 401 Unauthorized: Invalid or expired JWT
        - 409 Conflict: DUPLICATE_NAME
        - 500 Internal Server Error: STORAGE_FAILURE
    """
    user_id = UUID(current_user["user_id"])

    use_case = CreateTenantUseCase(uow, root_folder_name=ApplicationConfig.ROOT_FOLDER_NAME)
    result = await use_case.execute(user_id, request.name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{tenant_id}", status_code=status.HTTP_200_OK, response_model=TenantDetailsResponse
)
async def get_tenant(
    tenant_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    access_guard: IAccessGuard = Depends(get_access_guard),
):
    """
    Get Tenant

    Raises:
        - 400 Bad Request: Invalid tenant_id format
        - 403 Forbidden: PERMISSION_DENIED (not a member)
        - 404 Not Found: TENANT_NOT_FOUND
    """
    user_id = UUID(current_user["user_id"])
    tenant_uuid = parse_uuid(tenant_id, "tenant ID")

    use_case = GetTenantUseCase(uow, access_guard)
    result = await use_case.execute(user_id, tenant_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/{tenant_id}", status_code=status.HTTP_200_OK, response_model=TenantResponse)
async def rename_tenant(
    tenant_id: str,
    request: TenantNameRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    access_guard: IAccessGuard = Depends(get_access_guard),
):
    """
    Rename Tenant (admin)

    Raises:
        - 400 Bad Request: INVALID_INPUT
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: TENANT_NOT_FOUND
        - 409 Conflict: DUPLICATE_NAME
    """
    user_id = UUID(current_user["user_id"])
    tenant_uuid = parse_uuid(tenant_id, "tenant ID")

    use_case = RenameTenantUseCase(uow, access_guard)
    result = await use_case.execute(user_id, tenant_uuid, request.name)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{tenant_id}", status_code=status.HTTP_200_OK, response_model=DeleteTenantResponse
)
async def delete_tenant(
    tenant_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    access_guard: IAccessGuard = Depends(get_access_guard),
):
    """
    Delete Tenant (admin)

    Removes all files, folders (root included), memberships and the tenant
    in one transaction.

    Raises:
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: TENANT_NOT_FOUND
        - 500 Internal Server Error: STORAGE_FAILURE
    """
    user_id = UUID(current_user["user_id"])
    tenant_uuid = parse_uuid(tenant_id, "tenant ID")

    use_case = DeleteTenantUseCase(uow, access_guard)
    result = await use_case.execute(user_id, tenant_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
