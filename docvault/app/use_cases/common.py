"""
Errors and input normalization shared by folder and tenant use cases.
"""

from typing import Any, Optional

from docvault.libs.result import Error


def normalize_name(name: Any) -> Optional[str]:
    """Trimmed name, or None when nothing usable is left"""
    if not isinstance(name, str):
        return None
    return name.strip() or None


def invalid_name_error(subject: str) -> Error:
    return Error(
        "INVALID_INPUT",
        f"{subject} name is required and must be a non-empty string",
    )


def permission_denied_error() -> Error:
    return Error("PERMISSION_DENIED", "You do not have permission to perform this action")


def folder_not_found_error() -> Error:
    return Error("FOLDER_NOT_FOUND", "Folder not found")


def duplicate_folder_error(name: str) -> Error:
    return Error(
        "DUPLICATE_NAME",
        f'A folder named "{name}" already exists in this location',
    )


def duplicate_tenant_error(name: str) -> Error:
    return Error("DUPLICATE_NAME", f'Tenant with name "{name}" already exists')


def storage_failure_error(exc: Exception) -> Error:
    return Error(
        "STORAGE_FAILURE",
        "The operation could not be completed",
        reason=f"{type(exc).__name__}: {exc}",
    )
