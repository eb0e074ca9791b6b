"""Capability interfaces consumed by the core helpers.

Custom types opt in to generic helpers by implementing one of these
protocols.  Satisfaction is structural: no explicit inheritance is
required, but the method signature must match.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IntConvertible(Protocol):
    """Contract for values that know how to coerce themselves to ``int``.

    :func:`~dotkit.core.numbers.to_int` always defers to
    :meth:`to_int` when a value implements it, instead of falling back
    to generic leading-digit parsing.
    """

    def to_int(self) -> int:
        """Return the integer form of this value."""
        ...  # pragma: no cover


@runtime_checkable
class SupportsContains(Protocol):
    """Contract for values that support a substring-containment check.

    Used by :func:`~dotkit.core.arrays.filter_containing` to decide
    which elements take part in the filter.  Plain ``str`` values are
    accepted as well without implementing this protocol.
    """

    def contains(self, query: str, case_sensitive: bool = False) -> bool:
        """Return whether *query* occurs anywhere in this value."""
        ...  # pragma: no cover
