"""
Runtime configuration for student-registry.

Values come from the environment and can be overridden by CLI flags:

  STUDENT_REGISTRY_DB      — SQLite database path
                             (default: ~/.student-registry/students.db)
  STUDENT_REGISTRY_STRICT  — "1" / "true" / "yes" to surface persistence
                             faults to the user instead of only logging them
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from student_registry.exceptions import ConfigError

__all__ = ["AppConfig", "DEFAULT_DB_PATH", "ENV_DB", "ENV_STRICT"]

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "~/.student-registry/students.db"
ENV_DB     = "STUDENT_REGISTRY_DB"
ENV_STRICT = "STUDENT_REGISTRY_STRICT"

_TRUE  = {"1", "true", "yes", "on"}
_FALSE = {"", "0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class AppConfig:
    """Resolved application settings."""
    db_path:        str  = DEFAULT_DB_PATH
    surface_faults: bool = False          # False = log store faults and carry on

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build a config from *environ* (defaults to os.environ)."""
        env = os.environ if environ is None else environ
        db_path = env.get(ENV_DB, "").strip() or DEFAULT_DB_PATH
        strict = _parse_bool(ENV_STRICT, env.get(ENV_STRICT, ""))
        logger.debug("Config from env: db=%s strict=%s", db_path, strict)
        return cls(db_path=db_path, surface_faults=strict)

    def with_overrides(
        self,
        db_path: Optional[str] = None,
        surface_faults: Optional[bool] = None,
    ) -> "AppConfig":
        """Return a copy with any non-None argument applied (CLI flags win)."""
        changes = {}
        if db_path:
            changes["db_path"] = db_path
        if surface_faults is not None:
            changes["surface_faults"] = surface_faults
        return replace(self, **changes)
