"""
CLI entry point for student-registry.

Usage
─────
  # Open the editor window (default when no subcommand is given)
  student-registry
  student-registry --db ./students.db gui

  # Scriptable access to the same table
  student-registry list
  student-registry show --id 1
  student-registry add --name "Ann" --email ann@x.com --course CS101
  student-registry update --id 1 --name "Ann" --email ann@x.com --course CS102
  student-registry delete --id 1

Subcommands are implemented as standalone functions (cmd_list, cmd_show,
cmd_add, cmd_update, cmd_delete, cmd_gui) so they can be unit-tested without
invoking argparse.
"""

import argparse
import logging
import sys
from typing import Optional

from student_registry.config import AppConfig
from student_registry.exceptions import (
    ConfigError,
    PersistenceFault,
    RegistryBaseError,
    ValidationError,
)
from student_registry.store.db import StudentStore
from student_registry.store.models import Student, StoreResult

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

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: gui | list | show | add | update | delete
    """
    parser = argparse.ArgumentParser(
        prog="student-registry",
        description="Desktop editor for the students table",
    )
    parser.add_argument(
        "--db",
        default=None,
        metavar="PATH",
        help="SQLite database path (default: $STUDENT_REGISTRY_DB or "
             "~/.student-registry/students.db)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Report database faults to the user instead of only logging them "
             "(--no-strict overrides $STUDENT_REGISTRY_STRICT)",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── gui ───────────────────────────────────────────────────────────────
    sub.add_parser("gui", help="Open the student editor window")

    # ── list ──────────────────────────────────────────────────────────────
    sub.add_parser("list", help="Print every student record")

    # ── show ──────────────────────────────────────────────────────────────
    show = sub.add_parser("show", help="Print one student by id")
    show.add_argument("--id", required=True, type=int, metavar="ID",
                      help="Student id to show")

    # ── add ───────────────────────────────────────────────────────────────
    add = sub.add_parser("add", help="Insert a new student")
    _add_field_args(add)

    # ── update ────────────────────────────────────────────────────────────
    upd = sub.add_parser("update", help="Overwrite an existing student by id")
    upd.add_argument("--id", required=True, type=int, metavar="ID",
                     help="Student id to update")
    _add_field_args(upd)

    # ── delete ────────────────────────────────────────────────────────────
    dele = sub.add_parser("delete", help="Delete a student by id")
    dele.add_argument("--id", required=True, type=int, metavar="ID",
                      help="Student id to delete")

    return parser


def _add_field_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--name", required=True, metavar="NAME", help="Student name")
    p.add_argument("--email", required=True, metavar="EMAIL", help="Student email")
    p.add_argument("--course", default="", metavar="COURSE",
                   help="Course code (optional)")


# ── Helpers ───────────────────────────────────────────────────────────────────


def _validate(name: str, email: str) -> None:
    """Same rule as the editor form: name and email must be non-empty."""
    if not name or not email:
        raise ValidationError("Name and Email are required!")


def _unwrap(result: StoreResult):
    """Return the result value, raising PersistenceFault on a faulted result."""
    if not result.ok:
        raise PersistenceFault(result.error)
    return result.value


# ── Command implementations ───────────────────────────────────────────────────


def cmd_list(store: StudentStore) -> None:
    """Print every student to stdout."""
    students = _unwrap(store.list())
    if not students:
        print("0 students found.")
        return
    for s in students:
        print(f"[{s.id:>4}]  {s.name:<25} {s.email:<30} {s.course}")


def cmd_show(store: StudentStore, student_id: int) -> Optional[Student]:
    """Print one student; returns it, or None when the id does not exist."""
    student = _unwrap(store.get(student_id))
    if student is None:
        print(f"No student with id={student_id}")
        return None
    print(f"id:     {student.id}")
    print(f"name:   {student.name}")
    print(f"email:  {student.email}")
    print(f"course: {student.course}")
    return student


def cmd_add(store: StudentStore, name: str, email: str, course: str = "") -> int:
    """Validate and insert a student; returns the new id."""
    _validate(name, email)
    new_id = _unwrap(store.create(name, email, course))
    logger.info("Added student %s", new_id)
    print(f"Added student {new_id}")
    return new_id


def cmd_update(
    store: StudentStore,
    student_id: int,
    name: str,
    email: str,
    course: str = "",
) -> int:
    """Validate and overwrite a student; returns rows affected (0 if unknown id)."""
    _validate(name, email)
    affected = _unwrap(store.update(
        Student(id=student_id, name=name, email=email, course=course)
    ))
    if affected:
        print(f"Updated student {student_id}")
    else:
        print(f"No student with id={student_id}")
    return affected


def cmd_delete(store: StudentStore, student_id: int) -> int:
    """Delete a student; returns rows affected (0 if unknown id)."""
    affected = _unwrap(store.delete(student_id))
    if affected:
        print(f"Deleted student {student_id}")
    else:
        print(f"No student with id={student_id}")
    return affected


def cmd_gui(config: AppConfig, argv: Optional[list[str]] = None) -> int:
    """Start the Qt event loop with the editor window; returns its exit code."""
    from PyQt6.QtWidgets import QApplication
    from student_registry.gui.main_window import MainWindow

    app = QApplication.instance() or QApplication(argv or sys.argv[:1])
    win = MainWindow(config)
    win.show()
    return app.exec()


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    try:
        config = AppConfig.from_env().with_overrides(
            db_path=ns.db, surface_faults=ns.strict
        )
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        if ns.subcommand in (None, "gui"):
            return cmd_gui(config)

        store = StudentStore(db_path=config.db_path)

        if ns.subcommand == "list":
            cmd_list(store)
        elif ns.subcommand == "show":
            cmd_show(store, ns.id)
        elif ns.subcommand == "add":
            cmd_add(store, ns.name, ns.email, ns.course)
        elif ns.subcommand == "update":
            cmd_update(store, ns.id, ns.name, ns.email, ns.course)
        elif ns.subcommand == "delete":
            cmd_delete(store, ns.id)
        else:
            parser.print_help()
    except RegistryBaseError as exc:
        logger.debug("%s failed", ns.subcommand, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
