"""Unit tests for steadywatch._units: time units and conversion.

Test Techniques Used:
    - Specification-based Testing: Exact conversion examples and the
      fixed ordinal order of TimeUnit
    - Property-based Reasoning: Adjacent-unit ratios over a spread of
      durations
    - Boundary Value Analysis: Zero, negative, and out-of-range unit
      selectors
    - Error Condition Testing: Unsupported duration types
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from steadywatch._units import (
    DAYS_PER_YEAR,
    TimeUnit,
    breakdown,
    convert,
    to_nanoseconds,
)

DURATIONS = [
    0,
    1,
    999,
    1_000_000,
    123_456_789_012,
    86_400_000_000_000,
    10**18,
]


class TestTimeUnit:
    """Tests for the TimeUnit enumeration.

    Technique: Specification-based Testing: ordinal order is part of
    the contract.
    """

    def test_ordinal_order(self) -> None:
        """Members are ordered nanoseconds through years."""
        assert [u.name for u in TimeUnit] == [
            "NANOSECONDS",
            "MICROSECONDS",
            "MILLISECONDS",
            "SECONDS",
            "MINUTES",
            "HOURS",
            "DAYS",
            "WEEKS",
            "MONTHS",
            "YEARS",
        ]
        assert [int(u) for u in TimeUnit] == list(range(10))

    def test_symbols(self) -> None:
        """Each unit has a short display symbol."""
        assert TimeUnit.NANOSECONDS.symbol == "ns"
        assert TimeUnit.MILLISECONDS.symbol == "ms"
        assert TimeUnit.MINUTES.symbol == "min"
        assert TimeUnit.YEARS.symbol == "yr"


class TestConvertExamples:
    """Exact conversions of round durations.

    Technique: Specification-based Testing.
    """

    def test_one_minute(self) -> None:
        assert convert(60_000_000_000, TimeUnit.MINUTES) == 1.0

    def test_one_hour(self) -> None:
        assert convert(3_600_000_000_000, TimeUnit.HOURS) == 1.0

    def test_one_day(self) -> None:
        assert convert(86_400_000_000_000, TimeUnit.DAYS) == 1.0

    def test_one_second_in_milliseconds(self) -> None:
        assert convert(1_000_000_000, TimeUnit.MILLISECONDS) == 1000.0

    def test_default_unit_is_nanoseconds(self) -> None:
        """Without a unit the raw count is returned as float."""
        result = convert(42)
        assert result == 42.0
        assert isinstance(result, float)

    def test_negative_duration(self) -> None:
        """Signed durations convert with their sign."""
        assert convert(-60_000_000_000, TimeUnit.MINUTES) == -1.0

    @pytest.mark.parametrize("unit", list(TimeUnit))
    def test_zero_is_zero_in_every_unit(self, unit: TimeUnit) -> None:
        assert convert(0, unit) == 0


class TestConvertRatios:
    """Adjacent units differ by the fixed ratios.

    Technique: Property-based Reasoning: each ratio checked over a
    spread of durations.
    """

    @pytest.mark.parametrize("nanos", DURATIONS)
    @pytest.mark.parametrize(
        ("finer", "coarser", "ratio"),
        [
            (TimeUnit.NANOSECONDS, TimeUnit.MICROSECONDS, 1000),
            (TimeUnit.MICROSECONDS, TimeUnit.MILLISECONDS, 1000),
            (TimeUnit.MILLISECONDS, TimeUnit.SECONDS, 1000),
            (TimeUnit.SECONDS, TimeUnit.MINUTES, 60),
            (TimeUnit.MINUTES, TimeUnit.HOURS, 60),
            (TimeUnit.HOURS, TimeUnit.DAYS, 24),
            (TimeUnit.DAYS, TimeUnit.WEEKS, 7),
            (TimeUnit.DAYS, TimeUnit.YEARS, DAYS_PER_YEAR),
            (TimeUnit.YEARS, TimeUnit.MONTHS, 12),
        ],
    )
    def test_ratio(
        self, nanos: int, finer: TimeUnit, coarser: TimeUnit, ratio: float
    ) -> None:
        assert convert(nanos, coarser) == pytest.approx(convert(nanos, finer) / ratio)

    def test_months_are_derived_from_years_not_days(self) -> None:
        """A month is 1/12 of a 365.24-day year."""
        one_year = int(365.24 * 86_400_000_000_000)
        assert convert(one_year, TimeUnit.YEARS) == pytest.approx(1.0)
        assert convert(one_year, TimeUnit.MONTHS) == pytest.approx(1 / 12)


class TestConvertReturnType:
    """Caller-selected return types.

    Technique: Specification-based Testing.
    """

    def test_int_truncates(self) -> None:
        """Integral return types truncate toward zero."""
        assert convert(1_500_000, TimeUnit.MILLISECONDS, int) == 1

    def test_int_nanoseconds_exact(self) -> None:
        """Large nanosecond counts survive an int return type unchanged."""
        big = 2**62 + 1
        assert convert(big, TimeUnit.NANOSECONDS, int) == big

    def test_arbitrary_callable(self) -> None:
        assert convert(2_000_000_000, TimeUnit.SECONDS, str) == "2.0"


class TestConvertUnitSelector:
    """Dense integer selectors and the fallback for unknown ones.

    Technique: Boundary Value Analysis.
    """

    def test_plain_int_selects_by_ordinal(self) -> None:
        assert convert(3_000_000_000, 3) == 3.0

    @pytest.mark.parametrize("unit", [10, -1, 255])
    def test_out_of_range_falls_back_to_nanoseconds(self, unit: int) -> None:
        assert convert(1234, unit) == 1234.0

    def test_unrecognised_selector_falls_back_to_nanoseconds(self) -> None:
        assert convert(1234, "fortnights", int) == 1234  # type: ignore[arg-type]


class TestToNanoseconds:
    """Duration normalisation.

    Technique: Specification-based Testing and Error Condition Testing.
    """

    def test_int_passes_through(self) -> None:
        assert to_nanoseconds(17) == 17

    def test_timedelta_is_exact(self) -> None:
        assert to_nanoseconds(timedelta(seconds=1, microseconds=5)) == 1_000_005_000

    def test_negative_timedelta(self) -> None:
        assert to_nanoseconds(timedelta(microseconds=-1)) == -1000

    def test_timedelta_days(self) -> None:
        assert to_nanoseconds(timedelta(days=2)) == 172_800_000_000_000

    def test_convert_accepts_timedelta(self) -> None:
        assert convert(timedelta(hours=1), TimeUnit.HOURS) == 1.0

    @pytest.mark.parametrize("value", [1.5, "10", None, True])
    def test_unsupported_types_raise(self, value: object) -> None:
        with pytest.raises(TypeError, match="duration must be"):
            to_nanoseconds(value)  # type: ignore[arg-type]


class TestBreakdown:
    """Conversion table over every unit.

    Technique: Specification-based Testing.
    """

    def test_keys_in_ordinal_order(self) -> None:
        assert list(breakdown(1)) == list(TimeUnit)

    def test_values_match_convert(self) -> None:
        nanos = 123_456_789_012
        table = breakdown(nanos)
        for unit, value in table.items():
            assert value == convert(nanos, unit)

    def test_one_day(self) -> None:
        table = breakdown(timedelta(days=1))
        assert table[TimeUnit.DAYS] == 1.0
        assert table[TimeUnit.HOURS] == 24.0
        assert table[TimeUnit.WEEKS] == pytest.approx(1 / 7)

    def test_return_type_applied(self) -> None:
        table = breakdown(90_000_000_000, int)
        assert table[TimeUnit.SECONDS] == 90
        assert table[TimeUnit.MINUTES] == 1
        assert table[TimeUnit.HOURS] == 0
