"""Tests for mask format layouts."""

from __future__ import annotations

import pytest

from datemask.formats import DAY, HOUR, MINUTE, MONTH, YEAR, Format, FormatError, Overflow, tokenize


class TestFormatLayout:
    """Tests for the data each format carries."""

    @pytest.mark.parametrize(
        "fmt, widths, max_digits",
        [
            (Format.MONTH_YEAR, [2, 4], 6),
            (Format.DAY_MONTH_YEAR, [2, 2, 4], 8),
            (Format.MONTH_DAY_YEAR, [2, 2, 4], 8),
            (Format.HOUR_MINUTE, [2, 2], 4),
        ],
    )
    def test_width_plan(self, fmt, widths, max_digits):
        """Each layout has the expected widths and capacity."""
        assert fmt.widths == widths
        assert fmt.max_digits == max_digits

    def test_field_order_follows_template(self):
        """Fields come back in template order."""
        assert Format.MONTH_DAY_YEAR.fields == (MONTH, DAY, YEAR)
        assert Format.HOUR_MINUTE.fields == (HOUR, MINUTE)

    def test_only_hour_minute_is_time(self):
        """HOUR_MINUTE is the only time layout."""
        assert [f for f in Format if f.is_time] == [Format.HOUR_MINUTE]

    def test_describe(self):
        """describe upper-cases placeholders and inserts the separator."""
        assert Format.DAY_MONTH_YEAR.describe("/") == "DD/MM/YYYY"
        assert Format.HOUR_MINUTE.describe(":") == "HH:MM"

    def test_describe_empty_separator(self):
        """describe with no separator joins the placeholders."""
        assert Format.MONTH_YEAR.describe("") == "MMYYYY"


class TestFieldPolicies:
    """Tests for per-field overflow policies."""

    def test_day_and_month_keep_last_digit(self):
        """Day and month keep the last digit on overflow."""
        assert DAY.overflow is Overflow.KEEP_LAST_DIGIT
        assert MONTH.overflow is Overflow.KEEP_LAST_DIGIT

    def test_hour_clamps(self):
        """Hour clamps to 23."""
        assert HOUR.overflow is Overflow.CLAMP
        assert HOUR.cap == 23

    def test_year_and_minute_are_verbatim(self):
        """Year and minute are not range-checked."""
        assert not YEAR.validated
        assert not MINUTE.validated


class TestFromName:
    """Tests for Format.from_name."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("day_month_year", Format.DAY_MONTH_YEAR),
            ("DAY_MONTH_YEAR", Format.DAY_MONTH_YEAR),
            ("month-day-year", Format.MONTH_DAY_YEAR),
            ("monthYear", Format.MONTH_YEAR),
            ("hourMinute", Format.HOUR_MINUTE),
            ("  month_year ", Format.MONTH_YEAR),
        ],
    )
    def test_accepted_names(self, name, expected):
        """Snake, kebab, upper and camelCase names resolve."""
        assert Format.from_name(name) is expected

    def test_unknown_name_raises(self):
        """An unknown name raises FormatError."""
        with pytest.raises(FormatError, match="Unknown format"):
            Format.from_name("year_month_day")

    def test_format_error_is_value_error(self):
        """FormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Format.from_name("")

    def test_config_name(self):
        """config_name is the lower-case member name."""
        assert Format.DAY_MONTH_YEAR.config_name == "day_month_year"


class TestTokenize:
    """Tests for template tokenization."""

    def test_markers_and_fields(self):
        """Quoted markers and placeholders alternate in order."""
        tokens = tokenize("dd'*'MM'$'yyyy")
        assert [t.field.name if t.field else t.marker for t in tokens] == [
            "day",
            "*",
            "month",
            "$",
            "year",
        ]

    def test_rejects_unknown_text(self):
        """Unquoted separators are refused."""
        with pytest.raises(FormatError):
            tokenize("dd/MM")
