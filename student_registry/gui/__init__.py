"""
gui — PyQt6 front-end for the student registry.

Modules
───────
main_window   — MainWindow, the top-level application window
student_page  — StudentPage, form + table editor widget
viewmodels    — pure-Python editor state and handlers

Only ``viewmodels`` is imported here so the view-model layer stays usable
(and testable) on machines without a working Qt platform plugin.
"""

from student_registry.gui import viewmodels

__all__ = ["viewmodels"]
