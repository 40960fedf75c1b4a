"""Allow ``python -m student_registry``."""

from student_registry.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
