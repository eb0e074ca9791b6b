"""Sentinel values returned instead of raising.

Lookups in dotkit never raise for a missing key or an unmatched item.
They return one of the sentinels below, which callers are expected to
check explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


# ---------------------------------------------------------------------------
# Absent path result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class _Absent:
    """Marker type for a dotted path that does not resolve.

    Distinct from ``None`` because ``None`` is a legitimate stored value.
    Falsy so that ``if result:`` reads naturally, but compare with
    ``is ABSENT`` when the stored value itself may be falsy.
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()
"""Returned by :func:`~dotkit.core.paths.object_index` for missing paths."""


# ---------------------------------------------------------------------------
# Not-found index
# ---------------------------------------------------------------------------

NOT_FOUND: Final[int] = -1
"""Returned by :func:`~dotkit.core.arrays.find_index` when nothing matches.

Negative, so it can never be confused with index ``0``.
"""
