"""
Unit tests for student_registry/cli/

Coverage plan
─────────────
arg parsing   → 6 tests  (global flags, --no-strict, add / update / delete / default)
commands      → 8 tests  (list empty/populated, show, add, add invalid, update, delete, faults)
main()        → 8 tests  (exit codes, env config, --no-strict, bad db path, gui dispatch)
"""

import sqlite3
from contextlib import closing
from unittest.mock import patch

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _parse(args: list[str]):
    """Call the CLI argument parser and return the parsed namespace."""
    from student_registry.cli.main import build_parser
    return build_parser().parse_args(args)


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "cli_test.db")


@pytest.fixture
def store(db_path):
    """Fresh StudentStore for CLI command tests."""
    from student_registry.store.db import StudentStore
    return StudentStore(db_path=db_path)


# ─────────────────────────────────────────────────────────────────────────────
# 1. Argument parsing
# ─────────────────────────────────────────────────────────────────────────────

class TestArgParsing:

    def test_no_subcommand_defaults(self):
        ns = _parse([])
        assert ns.subcommand is None
        assert ns.db is None
        assert ns.strict is None
        assert ns.debug is False

    def test_global_flags(self):
        ns = _parse(["--db", "/tmp/s.db", "--strict", "--debug", "list"])
        assert ns.db == "/tmp/s.db"
        assert ns.strict is True
        assert ns.debug is True

    def test_no_strict_flag_parses_false(self):
        assert _parse(["--no-strict", "list"]).strict is False

    def test_add_course_defaults_to_empty(self):
        ns = _parse(["add", "--name", "Ann", "--email", "ann@x.com"])
        assert ns.subcommand == "add"
        assert ns.course == ""

    def test_update_requires_id(self):
        with pytest.raises(SystemExit):
            _parse(["update", "--name", "Ann", "--email", "ann@x.com"])

    def test_delete_parses_int_id(self):
        ns = _parse(["delete", "--id", "7"])
        assert ns.id == 7


# ─────────────────────────────────────────────────────────────────────────────
# 2. Command implementations
# ─────────────────────────────────────────────────────────────────────────────

class TestCommands:

    def test_list_empty_store(self, store, capsys):
        from student_registry.cli.main import cmd_list
        cmd_list(store)
        assert "0 students found" in capsys.readouterr().out

    def test_list_populated_store(self, store, capsys):
        from student_registry.cli.main import cmd_list
        store.create("Ann", "ann@x.com", "CS101")
        cmd_list(store)
        out = capsys.readouterr().out
        assert "Ann" in out
        assert "CS101" in out

    def test_show_prints_record_or_reports_missing(self, store, capsys):
        from student_registry.cli.main import cmd_show
        new_id = store.create("Ann", "ann@x.com", "CS101").value
        student = cmd_show(store, new_id)
        assert student.course == "CS101"
        assert cmd_show(store, new_id + 1) is None
        out = capsys.readouterr().out
        assert "ann@x.com" in out
        assert f"No student with id={new_id + 1}" in out

    def test_add_returns_new_id(self, store):
        from student_registry.cli.main import cmd_add
        new_id = cmd_add(store, "Ann", "ann@x.com", "CS101")
        assert store.get(new_id).value.name == "Ann"

    def test_add_rejects_empty_name(self, store):
        from student_registry.cli.main import cmd_add
        from student_registry.exceptions import ValidationError
        with pytest.raises(ValidationError):
            cmd_add(store, "", "ann@x.com")
        assert store.list().value == []

    def test_update_and_delete(self, store, capsys):
        from student_registry.cli.main import cmd_delete, cmd_update
        new_id = store.create("Ann", "ann@x.com", "CS101").value
        assert cmd_update(store, new_id, "Ann", "ann@x.com", "CS102") == 1
        assert store.get(new_id).value.course == "CS102"
        assert cmd_delete(store, new_id) == 1
        assert cmd_delete(store, new_id) == 0
        assert "No student" in capsys.readouterr().out

    def test_update_unknown_id_reports_no_match(self, store, capsys):
        from student_registry.cli.main import cmd_update
        assert cmd_update(store, 99, "A", "a@x.com") == 0
        assert "No student with id=99" in capsys.readouterr().out

    def test_list_fault_raises_persistence_fault(self, store, db_path):
        from student_registry.cli.main import cmd_list
        from student_registry.exceptions import PersistenceFault
        with closing(sqlite3.connect(db_path)) as conn:
            conn.execute("DROP TABLE students")
            conn.commit()
        with pytest.raises(PersistenceFault):
            cmd_list(store)


# ─────────────────────────────────────────────────────────────────────────────
# 3. main()
# ─────────────────────────────────────────────────────────────────────────────

class TestMain:

    def test_add_then_list_exit_zero(self, db_path, capsys):
        from student_registry.cli.main import main
        assert main(["--db", db_path, "add", "--name", "Ann", "--email", "ann@x.com"]) == 0
        assert main(["--db", db_path, "list"]) == 0
        assert "ann@x.com" in capsys.readouterr().out

    def test_invalid_add_exits_one(self, db_path, capsys):
        from student_registry.cli.main import main
        code = main(["--db", db_path, "add", "--name", "", "--email", "ann@x.com"])
        assert code == 1
        assert "required" in capsys.readouterr().err

    def test_db_path_from_environment(self, tmp_path, monkeypatch):
        from student_registry.cli.main import main
        from student_registry.store.db import StudentStore
        env_db = str(tmp_path / "env.db")
        monkeypatch.setenv("STUDENT_REGISTRY_DB", env_db)
        assert main(["add", "--name", "Ann", "--email", "ann@x.com"]) == 0
        assert len(StudentStore(env_db).list().value) == 1

    def test_no_subcommand_launches_gui(self, db_path, monkeypatch):
        from student_registry.cli.main import main
        monkeypatch.delenv("STUDENT_REGISTRY_STRICT", raising=False)
        with patch("student_registry.cli.main.cmd_gui", return_value=0) as gui:
            assert main(["--db", db_path]) == 0
        config = gui.call_args.args[0]
        assert config.db_path == db_path
        assert config.surface_faults is False

    def test_bad_strict_env_exits_two(self, monkeypatch, capsys):
        from student_registry.cli.main import main
        monkeypatch.setenv("STUDENT_REGISTRY_STRICT", "maybe")
        assert main(["list"]) == 2
        assert "STUDENT_REGISTRY_STRICT" in capsys.readouterr().err

    def test_no_strict_flag_overrides_environment(self, db_path, monkeypatch):
        from student_registry.cli.main import main
        monkeypatch.setenv("STUDENT_REGISTRY_STRICT", "1")
        with patch("student_registry.cli.main.cmd_gui", return_value=0) as gui:
            assert main(["--db", db_path, "--no-strict"]) == 0
        assert gui.call_args.args[0].surface_faults is False

    def test_db_path_under_a_file_exits_one(self, tmp_path, capsys):
        from student_registry.cli.main import main
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        assert main(["--db", str(blocker / "s.db"), "list"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_show_exit_zero(self, db_path, capsys):
        from student_registry.cli.main import main
        assert main(["--db", db_path, "add", "--name", "Ann", "--email", "ann@x.com"]) == 0
        assert main(["--db", db_path, "show", "--id", "1"]) == 0
        assert "name:   Ann" in capsys.readouterr().out
