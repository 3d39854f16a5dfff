from uuid import UUID

from fastapi import status

from docvault.api.error import ClientError
from docvault.libs.result import Error


def parse_uuid(value: str, field: str) -> UUID:
    """Parse a path/body identifier, 400 INVALID_INPUT when malformed"""
    try:
        return UUID(value)
    except (ValueError, TypeError):
        raise ClientError(
            Error("INVALID_INPUT", f"Invalid {field} format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
