"""Integer coercion.

:func:`truncate` handles numbers, :func:`~dotkit.core.strings.parse_int`
handles text, and :func:`to_int` dispatches between them, deferring to
a value's own :meth:`~dotkit.core.protocols.IntConvertible.to_int`
when it has one.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Any

from dotkit.core.protocols import IntConvertible
from dotkit.core.strings import parse_int


def truncate(number: numbers.Real | Decimal) -> int:
    """Truncate *number* toward zero.

    ``NaN`` and infinities have no integer form and yield ``0``.
    Integers and fractions are always finite and never go through
    ``float``, so arbitrarily large values are exact.
    """
    if isinstance(number, numbers.Integral):
        return int(number)
    if isinstance(number, numbers.Rational):
        return math.trunc(number)
    if isinstance(number, Decimal):
        if not number.is_finite():
            return 0
    elif not math.isfinite(number):
        return 0
    return math.trunc(number)


def to_int(value: Any) -> int:
    """Coerce any *value* to ``int``.

    Dispatch order:

    1. :class:`~dotkit.core.protocols.IntConvertible` values — their own
       ``to_int()`` result, unconditionally.
    2. Numbers (``numbers.Real`` or ``Decimal``) — :func:`truncate`.
    3. Anything else — ``str(value)`` through
       :func:`~dotkit.core.strings.parse_int`.
    """
    if isinstance(value, IntConvertible):
        return value.to_int()
    if isinstance(value, (numbers.Real, Decimal)):
        return truncate(value)
    return parse_int(str(value))
