"""
StudentStore — SQLite-backed persistence for the ``students`` table.

Usage::

    store = StudentStore(db_path="~/.student-registry/students.db")

    result = store.create("Ann", "ann@x.com", "CS101")
    if result.ok:
        new_id = result.value

    students = store.list().value        # [] if the read failed
    store.update(Student(id=new_id, name="Ann", email="ann@x.com", course="CS102"))
    store.delete(new_id)

Every public method returns a StoreResult.  SQLite errors are logged and
reported as a faulted result; they are never raised to the caller.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Optional

from student_registry.exceptions import StoreError
from student_registry.store.models import Student, StoreResult

__all__ = ["StudentStore"]

logger = logging.getLogger(__name__)

# Path to the SQL schema file bundled with this package
_SCHEMA_PATH = Path(__file__).parent / "migrations" / "schema.sql"

_INSERT_SQL = "INSERT INTO students (name, email, course) VALUES (?, ?, ?)"
_SELECT_ALL_SQL = "SELECT id, name, email, course FROM students"
_SELECT_ONE_SQL = "SELECT id, name, email, course FROM students WHERE id=?"
_UPDATE_SQL = "UPDATE students SET name=?, email=?, course=? WHERE id=?"
_DELETE_SQL = "DELETE FROM students WHERE id=?"


class StudentStore:
    """
    CRUD interface for the local SQLite student table.

    The database file and schema are created automatically on first open.
    Each operation opens its own connection and closes it on exit, whether
    the statement succeeded or not; nothing is held between calls.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = Path(db_path).expanduser()
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"Cannot initialise database {self._db_path}: {exc}") from exc
        self._ensure_schema()

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ── Internal helpers ──────────────────────────────────────────────────

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        """Create the students table if it doesn't already exist."""
        sql = _SCHEMA_PATH.read_text(encoding="utf-8")
        try:
            with closing(self._connect()) as conn:
                conn.executescript(sql)
        except sqlite3.Error as exc:
            raise StoreError(f"Cannot initialise database {self._db_path}: {exc}") from exc

    @staticmethod
    def _row_to_student(row: sqlite3.Row) -> Student:
        return Student(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            course=row["course"] if row["course"] is not None else "",
        )

    @staticmethod
    def _fault(operation: str, exc: sqlite3.Error, value=None) -> StoreResult:
        logger.exception("StudentStore.%s() failed", operation)
        return StoreResult.fault(f"{operation} failed: {exc}", value)

    # ── Public API ────────────────────────────────────────────────────────

    def create(self, name: str, email: str, course: str) -> StoreResult[int]:
        """
        Insert a new student row.  No validation is performed here.

        Returns:
            StoreResult whose value is the id assigned by SQLite.
        """
        try:
            with closing(self._connect()) as conn:
                cur = conn.execute(_INSERT_SQL, (name, email, course))
                conn.commit()
                new_id = cur.lastrowid
        except sqlite3.Error as exc:
            return self._fault("create", exc)
        logger.debug("Inserted student id=%s", new_id)
        return StoreResult.success(new_id)

    def list(self) -> StoreResult[list[Student]]:
        """
        Read every student in whatever order SQLite returns them.

        Returns:
            StoreResult whose value is a list of Student; an empty list
            when the read failed (check ``ok`` to tell the cases apart).
        """
        try:
            with closing(self._connect()) as conn:
                rows = conn.execute(_SELECT_ALL_SQL).fetchall()
        except sqlite3.Error as exc:
            return self._fault("list", exc, [])
        return StoreResult.success([self._row_to_student(r) for r in rows])

    def get(self, student_id: int) -> StoreResult[Optional[Student]]:
        """Look up one student; value is None when the id does not exist."""
        try:
            with closing(self._connect()) as conn:
                row = conn.execute(_SELECT_ONE_SQL, (student_id,)).fetchone()
        except sqlite3.Error as exc:
            return self._fault("get", exc)
        return StoreResult.success(self._row_to_student(row) if row else None)

    def update(self, student: Student) -> StoreResult[int]:
        """
        Overwrite name, email and course for ``student.id``.

        An unknown id is not an error: the result is ok with 0 rows affected.
        """
        try:
            with closing(self._connect()) as conn:
                cur = conn.execute(
                    _UPDATE_SQL,
                    (student.name, student.email, student.course, student.id),
                )
                conn.commit()
                affected = cur.rowcount
        except sqlite3.Error as exc:
            return self._fault("update", exc, 0)
        if not affected:
            logger.debug("update: no student with id=%s", student.id)
        return StoreResult.success(affected)

    def delete(self, student_id: int) -> StoreResult[int]:
        """Delete a student by id; an unknown id affects 0 rows."""
        try:
            with closing(self._connect()) as conn:
                cur = conn.execute(_DELETE_SQL, (student_id,))
                conn.commit()
                affected = cur.rowcount
        except sqlite3.Error as exc:
            return self._fault("delete", exc, 0)
        return StoreResult.success(affected)

    def __repr__(self) -> str:
        return f"StudentStore(db_path={str(self._db_path)!r})"

