"""Smoke tests — verify package wiring.

These tests prove that:
* The public API is importable from the package root.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

import dotkit
from dotkit import __version__
from dotkit.cli.exit_codes import ExitCode
from dotkit.exceptions import (
    DotkitError,
    InvalidDocumentError,
    ItemNotFoundError,
    PathNotFoundError,
    UsageError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class TestPublicAPI:
    @pytest.mark.parametrize("name", dotkit.__all__)
    def test_exported_names_resolve(self, name: str) -> None:
        assert getattr(dotkit, name) is not None

    def test_root_and_core_share_objects(self) -> None:
        from dotkit import core

        assert dotkit.object_index is core.object_index
        assert dotkit.ABSENT is core.ABSENT


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidDocumentError,
            ItemNotFoundError,
            PathNotFoundError,
            UsageError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[DotkitError]
    ) -> None:
        assert issubclass(exc_class, DotkitError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(DotkitError, Exception)

    def test_hint_is_stored(self) -> None:
        err = DotkitError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = DotkitError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    @pytest.mark.parametrize(
        ("member", "value"),
        [
            (ExitCode.SUCCESS, 0),
            (ExitCode.GENERAL_ERROR, 1),
            (ExitCode.UNEXPECTED_ERROR, 2),
            (ExitCode.KEYBOARD_INTERRUPT, 130),
        ],
    )
    def test_values(self, member: ExitCode, value: int) -> None:
        assert member == value

    def test_members_are_ints(self) -> None:
        assert all(isinstance(member, int) for member in ExitCode)
