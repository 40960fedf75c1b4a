"""Data models for the store module."""

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

__all__ = ["Student", "StoreResult"]

T = TypeVar("T")


@dataclass(frozen=True)
class Student:
    """
    Immutable snapshot of one row of the ``students`` table.

    Fields
    ──────
    id      — SQLite row id assigned on insert
    name    — student's full name (required by the editor, not by the store)
    email   — contact address (required by the editor, not by the store)
    course  — course code, may be empty
    """
    id:     int
    name:   str
    email:  str
    course: str = ""

    def __str__(self) -> str:
        return f"Student(id={self.id}, name={self.name!r}, course={self.course!r})"


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """
    Outcome of a single StudentStore call.

    The store never raises on a persistence failure; it returns a faulted
    result and lets the caller decide whether to surface or ignore it.

    Fields
    ──────
    ok     — False iff the underlying statement failed
    value  — operation payload (new id, record list, rows affected);
             on fault, the neutral value for the operation
    error  — human-readable fault description, None on success
    """
    ok:    bool
    value: Optional[T]   = None
    error: Optional[str] = field(default=None)

    @classmethod
    def success(cls, value: Any = None) -> "StoreResult":
        return cls(ok=True, value=value)

    @classmethod
    def fault(cls, error: str, value: Any = None) -> "StoreResult":
        return cls(ok=False, value=value, error=error)
