from enum import Enum
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar('T')


class ErrorKind(str, Enum):
    """Failure categories reported by the repository integration."""
    UNPARSABLE_REFERENCE = "unparsable_reference"
    ENCRYPTION_FAILURE = "encryption_failure"
    REMOTE_CALL_FAILURE = "remote_call_failure"
    STORE_FAILURE = "store_failure"


class OperationResult(BaseModel, Generic[T]):
    """Value or error kind. Falsy when the operation failed."""
    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: Optional[str] = None) -> "OperationResult[T]":
        return cls(error=error, message=message)
