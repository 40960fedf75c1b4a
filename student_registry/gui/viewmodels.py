"""
GUI ViewModels — pure-Python state containers for the student editor.

No Qt imports here; every class is testable without a display.
Qt widgets read ``state`` after each handler call and re-render themselves.

Public API
──────────
STUDENT_COLUMNS          — (header, extractor) pairs for the record table
EditorState              — transient form text + selection + displayed list
StudentEditorViewModel   — mediates add / update / delete / clear / select
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from student_registry.exceptions import (
    PersistenceFault,
    SelectionRequiredError,
    ValidationError,
)
from student_registry.store.db import StudentStore
from student_registry.store.models import Student, StoreResult

__all__ = [
    "STUDENT_COLUMNS",
    "EditorState",
    "StudentEditorViewModel",
]

logger = logging.getLogger(__name__)


# Table columns in display order; the widget never looks attributes up by name
STUDENT_COLUMNS: tuple[tuple[str, Callable[[Student], str]], ...] = (
    ("ID",     lambda s: str(s.id)),
    ("Name",   lambda s: s.name),
    ("Email",  lambda s: s.email),
    ("Course", lambda s: s.course),
)


@dataclass
class EditorState:
    """
    Everything the editor page shows.

    Attributes
    ──────────
    name, email, course — transient text not yet committed to the store
    selected_id         — id of the record chosen for editing, or None
    records             — displayed list, replaced wholesale on every reload
    last_fault          — description of the last swallowed store fault
    """
    name:        str                = ""
    email:       str                = ""
    course:      str                = ""
    selected_id: Optional[int]      = None
    records:     list[Student]      = field(default_factory=list)
    last_fault:  Optional[str]      = None

    def clear_form(self) -> None:
        """Discard transient text and selection (records are left alone)."""
        self.name = ""
        self.email = ""
        self.course = ""
        self.selected_id = None


class StudentEditorViewModel:
    """
    Sequences user intents into StudentStore calls.

    Every successful mutation is followed by a full reload and a form reset,
    so ``state.records`` always mirrors the store after a handler returns.

    Store faults are handled according to *surface_faults*:
      • False — log, remember in ``state.last_fault``, continue as if the call
                had returned normally
      • True  — raise PersistenceFault; form text and records are kept
    """

    def __init__(self, store: StudentStore, surface_faults: bool = False) -> None:
        self._store = store
        self.surface_faults = surface_faults
        self.state = EditorState()

    # ── Derived state ──────────────────────────────────────────────────────

    @property
    def has_selection(self) -> bool:
        return self.state.selected_id is not None

    @property
    def selected(self) -> Optional[Student]:
        """The displayed record matching ``selected_id``, or None."""
        sid = self.state.selected_id
        if sid is None:
            return None
        return next((s for s in self.state.records if s.id == sid), None)

    # ── Internal helpers ───────────────────────────────────────────────────

    def _validate(self) -> None:
        # Whitespace-only values count as filled in.
        if not self.state.name or not self.state.email:
            raise ValidationError("Name and Email are required!")

    def _require_selection(self) -> int:
        if self.state.selected_id is None:
            raise SelectionRequiredError("Please select a student first.")
        return self.state.selected_id

    def _check(self, result: StoreResult) -> None:
        if result.ok:
            return
        logger.warning("Store fault: %s", result.error)
        self.state.last_fault = result.error
        if self.surface_faults:
            raise PersistenceFault(result.error)

    def _commit(self, result: StoreResult) -> None:
        """Shared tail of add / update / delete: check, reload, reset form."""
        self._check(result)
        self.reload()
        self.state.clear_form()

    # ── Handlers ───────────────────────────────────────────────────────────

    def reload(self) -> None:
        """Replace the displayed list from the store; form state is untouched."""
        result = self._store.list()
        self._check(result)
        self.state.records = list(result.value or [])
        logger.debug("Reloaded %d students", len(self.state.records))

    def on_add(self) -> None:
        """Validate the form, insert a new student, reload, reset."""
        self._validate()
        s = self.state
        s.last_fault = None
        self._commit(self._store.create(s.name, s.email, s.course))

    def on_update(self) -> None:
        """Write the form text over the selected student, reload, reset."""
        sid = self._require_selection()
        self._validate()
        candidate = Student(
            id=sid,
            name=self.state.name,
            email=self.state.email,
            course=self.state.course,
        )
        self.state.last_fault = None
        self._commit(self._store.update(candidate))

    def on_delete(self) -> None:
        """Delete the selected student, reload, reset."""
        sid = self._require_selection()
        self.state.last_fault = None
        self._commit(self._store.delete(sid))

    def on_clear(self) -> None:
        """Discard form text and selection without touching the store."""
        self.state.clear_form()

    def on_row_selected(self, student: Student) -> None:
        """Select *student* and copy its fields into the form for editing."""
        self.state.selected_id = student.id
        self.state.name = student.name
        self.state.email = student.email
        self.state.course = student.course

    def set_form(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        course: Optional[str] = None,
    ) -> None:
        """Copy text typed by the user into the transient state."""
        if name is not None:
            self.state.name = name
        if email is not None:
            self.state.email = email
        if course is not None:
            self.state.course = course
