from fastapi import status
from docvault.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Use case error codes that are the caller's fault
CLIENT_ERROR_STATUS = {
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "PERMISSION_DENIED": status.HTTP_403_FORBIDDEN,
    "CANNOT_DELETE_ROOT": status.HTTP_403_FORBIDDEN,
    "FOLDER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PARENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "TENANT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DUPLICATE_NAME": status.HTTP_409_CONFLICT,
}


def raise_for_error(error: Error):
    """Translate a use case error into the matching API exception"""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is not None:
        raise ClientError(error, status_code=status_code)
    raise ServerError(error)
