"""
Project-wide custom exception hierarchy.
All modules raise subclasses of RegistryBaseError — never bare Exception.
"""

__all__ = [
    "RegistryBaseError",
    "ConfigError",
    "EditorError",
    "ValidationError",
    "SelectionRequiredError",
    "StoreError",
    "PersistenceFault",
]


class RegistryBaseError(Exception):
    """Root exception for all student-registry errors."""


# ── Config ────────────────────────────────────────────────────────────────────

class ConfigError(RegistryBaseError):
    """Raised when a configuration value cannot be used."""


# ── Editor ────────────────────────────────────────────────────────────────────

class EditorError(RegistryBaseError):
    """Base class for user-facing editor failures."""


class ValidationError(EditorError):
    """Raised when a required form field (name or email) is empty."""


class SelectionRequiredError(EditorError):
    """Raised when update/delete is attempted with no record selected."""


# ── Store ─────────────────────────────────────────────────────────────────────

class StoreError(RegistryBaseError):
    """Raised on SQLite / store I/O errors that cannot be deferred (schema setup)."""


class PersistenceFault(StoreError):
    """Raised when a caller chooses to surface a faulted StoreResult."""
