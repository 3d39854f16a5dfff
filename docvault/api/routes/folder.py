from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from docvault.api.error import raise_for_error
from docvault.api.utils.ids import parse_uuid
from docvault.app.services.access_guard import IAccessGuard
from docvault.app.services.unit_of_work import UnitOfWork
from docvault.app.use_cases.folders import (
    CreateSubfolderUseCase,
    DeleteSubtreeResponse,
    DeleteSubtreeUseCase,
    FolderChildResponse,
    FolderDetailsResponse,
    FolderNodeResponse,
    FolderResponse,
    GetFolderUseCase,
    ListAncestorsUseCase,
    ListChildrenUseCase,
    ListDescendantsUseCase,
    RenameFolderUseCase,
)
from docvault.depends import get_access_guard, get_current_user, get_unit_of_work

router = APIRouter(prefix="/tenants/{tenant_id}/folders", tags=["Folder"])


class CreateFolderRequest(BaseModel):
    """Create subfolder HTTP request payload"""

    name: str = Field(..., description="Folder name, unique among its siblings")
    parent_id: str = Field(..., description="Parent folder ID")


class RenameFolderRequest(BaseModel):
    """Rename folder HTTP request payload"""

    name: str = Field(..., description="New folder name")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=FolderResponse)
async def create_folder(
    tenant_id: str,
    request: CreateFolderRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    access_guard: IAccessGuard = Depends(get_access_guard),
):
    """
    Create Subfolder

    Raises:
        - 400 Bad Request: INVALID_INPUT (name or ids)
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: PARENT_NOT_FOUND
        - 409 Conflict: DUPLICATE_NAME
    """
    user_id = UUID(current_user["user_id"])
    tenant_uuid = parse_uuid(tenant_id, "tenant ID")
    parent_uuid = parse_uuid(request.parent_id, "parent folder ID")

    use_case = CreateSubfolderUseCase(uow, access_guard)
    result = await use_case.execute(tenant_uuid, parent_uuid, request.name, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{folder_id}", status_code=status.HTTP_200_OK, response_model=FolderDetailsResponse
)
async def get_folder(
    tenant_id: str,
    folder_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    access_guard: IAccessGuard = Depends(get_access_guard),
):
    """
    Get Folder

    Folder details with parent reference, subfolders and files.
    """
    user_id = UUID(current_user["user_id"])
    tenant_uuid = parse_uuid(tenant_id, "tenant ID")
    folder_uuid = parse_uuid(folder_id, "folder ID")

    use_case = GetFolderUseCase(uow, access_guard)
    result = await use_case.execute(tenant_uuid, folder_uuid, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{folder_id}/children",
    status_code=status.HTTP_200_OK,
    response_model=List[FolderChildResponse],
)
async def list_children(
    tenant_id: str,
    folder_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    access_guard: IAccessGuard = Depends(get_access_guard),
):
    """Immediate subfolders, ordered by name"""
    user_id = UUID(current_user["user_id"])
    tenant_uuid = parse_uuid(tenant_id, "tenant ID")
    folder_uuid = parse_uuid(folder_id, "folder ID")

    use_case = ListChildrenUseCase(uow, access_guard)
    result = await use_case.execute(tenant_uuid, folder_uuid, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{folder_id}/descendants",
    status_code=status.HTTP_200_OK,
    response_model=List[FolderNodeResponse],
)
async def list_descendants(
    tenant_id: str,
    folder_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    access_guard: IAccessGuard = Depends(get_access_guard),
):
    """Entire subtree in path order, depth relative to the folder"""
    user_id = UUID(current_user["user_id"])
    tenant_uuid = parse_uuid(tenant_id, "tenant ID")
    folder_uuid = parse_uuid(folder_id, "folder ID")

    use_case = ListDescendantsUseCase(uow, access_guard)
    result = await use_case.execute(tenant_uuid, folder_uuid, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{folder_id}/ancestors",
    status_code=status.HTTP_200_OK,
    response_model=List[FolderNodeResponse],
)
async def list_ancestors(
    tenant_id: str,
    folder_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    access_guard: IAccessGuard = Depends(get_access_guard),
):
    """Breadcrumb: root first, the folder itself last"""
    user_id = UUID(current_user["user_id"])
    tenant_uuid = parse_uuid(tenant_id, "tenant ID")
    folder_uuid = parse_uuid(folder_id, "folder ID")

    use_case = ListAncestorsUseCase(uow, access_guard)
    result = await use_case.execute(tenant_uuid, folder_uuid, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{folder_id}", status_code=status.HTTP_200_OK, response_model=FolderResponse
)
async def rename_folder(
    tenant_id: str,
    folder_id: str,
    request: RenameFolderRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    access_guard: IAccessGuard = Depends(get_access_guard),
):
    """
    Rename Folder

    Raises:
        - 400 Bad Request: INVALID_INPUT
        - 403 Forbidden: PERMISSION_DENIED
        - 404 Not Found: FOLDER_NOT_FOUND
        - 409 Conflict: DUPLICATE_NAME
    """
    user_id = UUID(current_user["user_id"])
    tenant_uuid = parse_uuid(tenant_id, "tenant ID")
    folder_uuid = parse_uuid(folder_id, "folder ID")

    use_case = RenameFolderUseCase(uow, access_guard)
    result = await use_case.execute(tenant_uuid, folder_uuid, request.name, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{folder_id}", status_code=status.HTTP_200_OK, response_model=DeleteSubtreeResponse
)
async def delete_folder(
    tenant_id: str,
    folder_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    access_guard: IAccessGuard = Depends(get_access_guard),
):
    """
    Delete Folder Subtree (admin)

    Deletes the folder, all descendants and their files atomically.

    Raises:
        - 403 Forbidden: PERMISSION_DENIED, CANNOT_DELETE_ROOT
        - 404 Not Found: FOLDER_NOT_FOUND
        - 500 Internal Server Error: STORAGE_FAILURE (nothing deleted)
    """
    user_id = UUID(current_user["user_id"])
    tenant_uuid = parse_uuid(tenant_id, "tenant ID")
    folder_uuid = parse_uuid(folder_id, "folder ID")

    use_case = DeleteSubtreeUseCase(uow, access_guard)
    result = await use_case.execute(tenant_uuid, folder_uuid, user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
