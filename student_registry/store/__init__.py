"""
store — SQLite-backed persistence layer for student records.

Public API
──────────
Student       — frozen dataclass representing one row
StoreResult   — success / fault outcome of every store call
StudentStore  — CRUD interface (create, list, get, update, delete)
"""

from student_registry.store.models import Student, StoreResult
from student_registry.store.db import StudentStore

__all__ = ["Student", "StoreResult", "StudentStore"]
