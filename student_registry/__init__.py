"""
student_registry — desktop editor for a single ``students`` table.

Packages
────────
store   — SQLite persistence (StudentStore, Student, StoreResult)
gui     — PyQt6 window, editor page and pure-Python view model
cli     — argparse entry point (launches the GUI or runs one store command)
"""

__version__ = "0.1.0"
