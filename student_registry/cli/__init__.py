"""
cli — command-line interface for student-registry.

Entry points
────────────
  python -m student_registry   (via student_registry/__main__.py)
  student-registry             (via pyproject.toml [project.scripts])

Subcommands: gui | list | show | add | update | delete
"""

from student_registry.cli.main import (
    build_parser,
    cmd_add,
    cmd_delete,
    cmd_gui,
    cmd_list,
    cmd_show,
    cmd_update,
    main,
)

__all__ = [
    "build_parser",
    "cmd_list",
    "cmd_show",
    "cmd_add",
    "cmd_update",
    "cmd_delete",
    "cmd_gui",
    "main",
]
