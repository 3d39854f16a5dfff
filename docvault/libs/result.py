"""
Result type shared by all use cases.

A use case never raises for an expected business failure; it returns
``Return.err(Error(code, message))`` and the API layer maps the code to
an HTTP status.
"""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Error:
    """Stable machine-readable code plus a human-readable message"""

    def __init__(self, code: str, message: str, reason: Optional[str] = None):
        self.code = code
        self.message = message
        self.reason = reason

    def __repr__(self) -> str:
        return f"Error(code={self.code!r}, message={self.message!r})"


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None


class Return:
    @staticmethod
    def ok(value: Optional[T] = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
