"""Shared pytest fixtures and configuration for the dotkit test suite.

Guidelines
----------
* Core tests must be pure — no I/O, no mocking.
* Mutating helpers get a fresh list from a fixture per test.
* CLI tests go through ``main(argv)`` and read output via ``capsys``.
"""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture()
def people() -> list[dict[str, Any]]:
    """Three records keyed by ``id`` with a nested ``meta.code`` field."""
    return [
        {"id": 1, "name": "Ada", "meta": {"code": "a"}},
        {"id": 2, "name": "Bob", "meta": {"code": "b"}},
        {"id": 3, "name": "Cy", "meta": {"code": "c"}},
    ]
