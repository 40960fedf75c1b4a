"""
StudentPage — the student editor form and record table.

Typing in the fields updates the view model's transient text; picking a row
loads that student into the fields.  Each button forwards to one view-model
handler, then the widgets are re-synced from ``vm.state``.

Layout
──────
  ┌─────────────────────────────────────────┐
  │ Name:   [______________________________]│
  │ Email:  [______________________________]│
  │ Course: [______________________________]│
  │        [Add] [Update] [Delete] [Clear]  │
  │ ┌──────────────────────────────────────┐│
  │ │ ID │ Name │ Email        │ Course    ││
  │ │  1 │ Ann  │ ann@x.com    │ CS101     ││
  │ │  … │ …    │ …            │ …         ││
  │ └──────────────────────────────────────┘│
  └─────────────────────────────────────────┘
"""

import logging
from typing import Callable

from PyQt6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from student_registry.exceptions import (
    EditorError,
    PersistenceFault,
    SelectionRequiredError,
)
from student_registry.gui.viewmodels import STUDENT_COLUMNS, StudentEditorViewModel

__all__ = ["StudentPage"]

logger = logging.getLogger(__name__)

_HEADERS = [header for header, _ in STUDENT_COLUMNS]


class StudentPage(QWidget):
    """Form + table bound to a StudentEditorViewModel."""

    def __init__(self, vm: StudentEditorViewModel, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = vm
        # Set while widgets are being rewritten from state, so selection
        # signals fired by the rewrite are not mistaken for user picks.
        self._syncing = False
        self._build_ui()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        # Title
        layout.addWidget(QLabel("<b>Students</b>"))

        # Input fields
        form = QFormLayout()
        self._name_edit   = QLineEdit()
        self._email_edit  = QLineEdit()
        self._course_edit = QLineEdit()
        self._name_edit.setPlaceholderText("Full name")
        self._email_edit.setPlaceholderText("name@example.com")
        self._course_edit.setPlaceholderText("e.g. CS101 (optional)")
        # textEdited fires for user input only, not for setText()
        self._name_edit.textEdited.connect(lambda t: self._vm.set_form(name=t))
        self._email_edit.textEdited.connect(lambda t: self._vm.set_form(email=t))
        self._course_edit.textEdited.connect(lambda t: self._vm.set_form(course=t))
        form.addRow("Name:",   self._name_edit)
        form.addRow("Email:",  self._email_edit)
        form.addRow("Course:", self._course_edit)
        layout.addLayout(form)

        # Action buttons
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._add_btn    = QPushButton("Add")
        self._update_btn = QPushButton("Update")
        self._delete_btn = QPushButton("Delete")
        self._clear_btn  = QPushButton("Clear")
        self._add_btn.clicked.connect(lambda: self._run(self._vm.on_add))
        self._update_btn.clicked.connect(lambda: self._run(self._vm.on_update))
        self._delete_btn.clicked.connect(lambda: self._run(self._vm.on_delete))
        self._clear_btn.clicked.connect(lambda: self._run(self._vm.on_clear))
        for btn in (self._add_btn, self._update_btn, self._delete_btn, self._clear_btn):
            btn_row.addWidget(btn)
        layout.addLayout(btn_row)

        # Record table
        self._table = QTableWidget(0, len(_HEADERS))
        self._table.setHorizontalHeaderLabels(_HEADERS)
        self._table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self._table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self._table.setSelectionMode(QTableWidget.SelectionMode.SingleSelection)
        self._table.verticalHeader().setVisible(False)
        self._table.horizontalHeader().setStretchLastSection(True)
        self._table.itemSelectionChanged.connect(self._on_selection_changed)
        layout.addWidget(self._table)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_selection_changed(self) -> None:
        if self._syncing:
            return
        rows = self._table.selectionModel().selectedRows()
        records = self._vm.state.records
        if not rows or not 0 <= rows[0].row() < len(records):
            return
        self._vm.on_row_selected(records[rows[0].row()])
        self._sync_fields()

    def _run(self, handler: Callable[[], None]) -> None:
        """Call *handler*; editor and store failures become a warning box."""
        try:
            handler()
        except SelectionRequiredError as exc:
            QMessageBox.warning(self, "No Selection", str(exc))
        except EditorError as exc:
            QMessageBox.warning(self, "Invalid Input", str(exc))
        except PersistenceFault as exc:
            logger.error("Store operation failed: %s", exc)
            QMessageBox.warning(self, "Database Error", str(exc))
        self.refresh()

    # ── Internal helpers ───────────────────────────────────────────────────

    def _sync_fields(self) -> None:
        state = self._vm.state
        self._name_edit.setText(state.name)
        self._email_edit.setText(state.email)
        self._course_edit.setText(state.course)

    def _refresh_table(self) -> None:
        records = self._vm.state.records
        self._table.clearSelection()
        self._table.setRowCount(len(records))
        selected_row = -1
        for row, student in enumerate(records):
            for col, (_, extract) in enumerate(STUDENT_COLUMNS):
                self._table.setItem(row, col, QTableWidgetItem(extract(student)))
            if student.id == self._vm.state.selected_id:
                selected_row = row
        if selected_row >= 0:
            self._table.selectRow(selected_row)

    # ── Public API ─────────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Re-render fields and table from the view model's state."""
        self._syncing = True
        try:
            self._sync_fields()
            self._refresh_table()
        finally:
            self._syncing = False

    def reload(self) -> None:
        """Fetch the list from the store and re-render (form state is kept)."""
        self._run(self._vm.reload)
