"""Tests for integer coercion (core/numbers.py)."""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from dotkit.core.numbers import to_int, truncate
from dotkit.core.strings import Text


class _Custom:
    """Opts in to coercion with its own ``to_int``."""

    def __init__(self, result: int) -> None:
        self.result = result
        self.calls = 0

    def to_int(self) -> int:
        self.calls += 1
        return self.result

    def __str__(self) -> str:
        return "999"


class _Opaque:
    def __str__(self) -> str:
        return "41 things"


# ---------------------------------------------------------------------------
# truncate
# ---------------------------------------------------------------------------

class TestTruncate:
    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            (3.7, 3),
            (-3.7, -3),
            (5, 5),
            (-0.5, 0),
            (Decimal("9.99"), 9),
            (Fraction(-7, 2), -3),
        ],
    )
    def test_toward_zero(self, number: object, expected: int) -> None:
        assert truncate(number) == expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("number", [10**400, -(10**400)])
    def test_huge_integers_are_exact(self, number: int) -> None:
        assert truncate(number) == number

    def test_huge_fraction(self) -> None:
        assert truncate(Fraction(10**400 + 1, 10)) == 10**399

    @pytest.mark.parametrize(
        "number",
        [math.nan, math.inf, -math.inf, Decimal("NaN"), Decimal("Infinity")],
    )
    def test_non_finite_is_zero(self, number: object) -> None:
        assert truncate(number) == 0  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# to_int dispatcher
# ---------------------------------------------------------------------------

class TestToInt:
    def test_text_with_leading_digits(self) -> None:
        assert to_int("3xx") == 3

    def test_text_without_digits(self) -> None:
        assert to_int("xx") == 0

    def test_float(self) -> None:
        assert to_int(-2.9) == -2

    def test_int(self) -> None:
        assert to_int(17) == 17

    def test_bool(self) -> None:
        assert to_int(True) == 1

    def test_defers_to_own_method(self) -> None:
        custom = _Custom(result=5)
        assert to_int(custom) == 5
        assert custom.calls == 1

    def test_own_method_beats_string_form(self) -> None:
        # str(_Custom) would parse as 999
        assert to_int(_Custom(result=-1)) == -1

    def test_text_subclass_uses_its_method(self) -> None:
        assert to_int(Text("8 bits")) == 8

    def test_fallback_parses_str_form(self) -> None:
        assert to_int(_Opaque()) == 41

    def test_none_is_zero(self) -> None:
        assert to_int(None) == 0

    def test_huge_integer(self) -> None:
        assert to_int(10**400) == 10**400
