# util/errors.py
from typing import Any, Optional
from fastapi import HTTPException, status
from util.enums import ErrorMessage


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & message.
    def __init__(
        self,
        message: str,
        http_status: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(status_code=http_status, detail=message)
        self.message = message
        self.details = details

    @classmethod
    def of(cls, error: ErrorMessage, details: Optional[Any] = None) -> "AppError":
        return cls(error.value.message, error.value.http_status, details)


class StorageError(Exception):
    """Every storage tier refused a write; __cause__ holds the last failure."""
