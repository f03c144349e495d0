from pydantic import BaseModel
from typing import Optional, Generic, TypeVar

T = TypeVar('T')

class GenericResponse(BaseModel, Generic[T]):
    success: bool
    results: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, results: T) -> "GenericResponse[T]":
        return cls(success=True, results=results)

    @classmethod
    def fail(cls, error: str) -> "GenericResponse[T]":
        return cls(success=False, error=error)
