# catalog/services/results.py

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

class ErrorKind(str, Enum):
    VALIDATION = "validation_error"
    NOT_FOUND = "not_found"
    CONSTRAINT_VIOLATION = "constraint_violation"

@dataclass(frozen=True)
class CatalogError:
    kind: ErrorKind
    message: str

@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service call: a value, or the first error found"""
    value: Optional[T] = None
    error: Optional[CatalogError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=CatalogError(kind=kind, message=message))

    @classmethod
    def validation_error(cls, message: str) -> "Result[T]":
        return cls.failure(ErrorKind.VALIDATION, message)

    @classmethod
    def not_found(cls, message: str) -> "Result[T]":
        return cls.failure(ErrorKind.NOT_FOUND, message)

    @classmethod
    def constraint_violation(cls, message: str) -> "Result[T]":
        return cls.failure(ErrorKind.CONSTRAINT_VIOLATION, message)
