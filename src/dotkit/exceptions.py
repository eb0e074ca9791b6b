"""Custom exception hierarchy for dotkit.

The core helpers never raise for missing data; they return sentinels.
These exceptions exist for the command-line layer, which turns a
sentinel into a user-visible error.  Every such error inherits from
:class:`DotkitError` so the CLI error boundary can render it cleanly.

Hierarchy
---------
DotkitError
├── InvalidDocumentError
├── UsageError
├── PathNotFoundError
└── ItemNotFoundError
"""

from __future__ import annotations


class DotkitError(Exception):
    """Base exception for all dotkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InvalidDocumentError(DotkitError):
    """Raised when an argument that must be JSON does not decode."""


class UsageError(DotkitError):
    """Raised when a JSON argument has the wrong shape (e.g. not an array)."""


# --- Lookup ----------------------------------------------------------------

class PathNotFoundError(DotkitError):
    """Raised when a dotted path resolves to ``ABSENT``."""


class ItemNotFoundError(DotkitError):
    """Raised when an identity search reports ``NOT_FOUND``."""
