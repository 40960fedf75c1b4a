"""
MainWindow — top-level application window for the student registry GUI.

Builds the StudentStore from AppConfig, wires it to a
StudentEditorViewModel and hosts a single StudentPage.  The record list is
loaded once at startup; afterwards every mutation reloads it.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget

from student_registry.config import AppConfig
from student_registry.gui.student_page import StudentPage
from student_registry.gui.viewmodels import StudentEditorViewModel
from student_registry.store.db import StudentStore

__all__ = ["MainWindow"]

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Root window: owns the store and view model, shows the editor page."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        parent: QWidget = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Student Registry")
        self.resize(640, 480)

        self._config = config or AppConfig.from_env()
        self._store = StudentStore(self._config.db_path)
        self._vm = StudentEditorViewModel(
            self._store, surface_faults=self._config.surface_faults
        )
        logger.info("Using database %s", self._store.db_path)

        self._page = StudentPage(self._vm)
        self.setCentralWidget(self._page)
        self._page.reload()
