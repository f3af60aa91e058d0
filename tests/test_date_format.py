"""Tests for date pattern tokenizing and date formatting.

Tests cover:
- Tokenizer: field runs, single-letter tokens, quoting and literals
- Field rendering for every token
- Presets for en-us and other built-in locales
- ISO and epoch input through the formatter
"""

from __future__ import annotations

from datetime import datetime

import pytest

from localefmt.date_format import DateFormatter, Token, TokenKind, tokenize
from localefmt.date_parser import parse_date
from localefmt.errors import InvalidDateError
from localefmt.locales import get_locale


@pytest.fixture
def formatter() -> DateFormatter:
    return DateFormatter(get_locale("en-us"))


# =============================================================================
# Tokenizer
# =============================================================================


class TestTokenize:
    """Tests for tokenize()."""

    def test_fields_and_literal(self):
        """Test field runs and literal text are separated."""
        assert tokenize("yy/xxx") == (
            Token(TokenKind.YEAR_SHORT, "yy"),
            Token(TokenKind.LITERAL, "/xxx"),
        )

    def test_longest_run(self):
        """Test a run of the same letter is one token."""
        kinds = [token.kind for token in tokenize("MMMM MMM MM M")]
        assert kinds == [
            TokenKind.MONTH_WIDE,
            TokenKind.LITERAL,
            TokenKind.MONTH_ABBREVIATED,
            TokenKind.LITERAL,
            TokenKind.MONTH_PADDED,
            TokenKind.LITERAL,
            TokenKind.MONTH,
        ]

    def test_single_letter_tokens(self):
        """Test a and Z are tokens on their own."""
        kinds = [token.kind for token in tokenize("saZ")]
        assert kinds == [TokenKind.SECOND, TokenKind.AMPM, TokenKind.ZONE]

    def test_unknown_run_is_literal(self):
        """Test runs missing from the token table are copied."""
        assert tokenize("yyy") == (Token(TokenKind.LITERAL, "yyy"),)
        assert tokenize("EE") == (Token(TokenKind.LITERAL, "EE"),)

    def test_quoted_text(self):
        """Test quoted text is literal."""
        assert tokenize("'yyyy'") == (Token(TokenKind.LITERAL, "yyyy"),)

    def test_escaped_quote(self):
        """Test '' is a single quote inside and outside quotes."""
        assert tokenize("''") == (Token(TokenKind.LITERAL, "'"),)
        assert tokenize("'a''b'") == (Token(TokenKind.LITERAL, "a'b"),)

    def test_unterminated_quote(self):
        """Test an unterminated quote runs to the end."""
        assert tokenize("yyyy 'at HH") == (
            Token(TokenKind.YEAR_FULL, "yyyy"),
            Token(TokenKind.LITERAL, " at HH"),
        )

    def test_empty_pattern(self):
        """Test an empty pattern has no tokens."""
        assert tokenize("") == ()

    def test_cached(self):
        """Test repeated patterns reuse the token tuple."""
        assert tokenize("yyyy-MM-dd") is tokenize("yyyy-MM-dd")


# =============================================================================
# Field Rendering
# =============================================================================


class TestFieldRendering:
    """Tests for individual tokens."""

    def test_padded_fields(self, formatter, morning):
        """Test two-digit fields."""
        assert formatter.format(morning, "yy-MM-dd HH:mm:ss") == "10-09-03 07:05:08"

    def test_unpadded_fields(self, formatter, midnight):
        """Test unpadded fields, 12-hour clock, marker and zone."""
        assert formatter.format(midnight, "yyyy-M-d h=H:m:saZ") == "2010-9-3 12=0:5:8AM-0500"

    def test_abbreviated_names(self, formatter, noon):
        """Test abbreviated weekday and month names."""
        assert formatter.format(noon, "EEE, MMM d, yyyy") == "Fri, Sep 3, 2010"

    def test_wide_names(self, formatter, noon):
        """Test wide weekday and month names."""
        assert formatter.format(noon, "EEEE, MMMM dd, yyyy") == "Friday, September 03, 2010"

    def test_early_year(self, formatter, early_date):
        """Test y is unpadded and yyyy is padded."""
        assert formatter.format(early_date, "MMMM dd, y") == "September 03, 1"
        assert formatter.format(early_date, "yyyy") == "0001"
        assert formatter.format(early_date, "yy") == "01"

    def test_hour12_padded(self, formatter, morning):
        """Test hh pads the 12-hour clock."""
        assert formatter.format(morning, "hh:mm a") == "07:05 AM"

    def test_milliseconds(self, formatter):
        """Test sss renders milliseconds."""
        assert formatter.format("2003-09-10T13:02:03.045Z", "ss.sss") == "03.045"

    def test_zone_half_hour(self, formatter, noon):
        """Test Z renders the offset east of UTC."""
        assert formatter.format(noon.with_offset(330), "HH:mm Z") == "22:35 +0530"
        assert formatter.format(noon.with_offset(0), "Z") == "+0000"

    def test_offset_changes_calendar_day(self, formatter, noon):
        """Test fields are read in the value's offset."""
        assert formatter.format(noon.with_offset(720), "yyyy-MM-dd HH:mm") == "2010-09-04 05:05"


class TestQuoting:
    """Tests for literal text in patterns."""

    def test_quoted_field_letters(self, formatter, midnight):
        """Test quoted letters are not treated as fields."""
        result = formatter.format(midnight, "yyyy'de' 'a'x'dd' 'adZ' h=H:m:saZ")
        assert result == "2010de axdd adZ 12=0:5:8AM-0500"

    def test_escaped_quote_inside_quotes(self, formatter, midnight):
        """Test '' inside a quoted run emits a quote."""
        result = formatter.format(midnight, "yyyy'de' 'a''dd' 'adZ' h=H:m:saZ")
        assert result == "2010de a'dd adZ 12=0:5:8AM-0500"

    def test_escaped_quote_outside_quotes(self, formatter, noon):
        """Test '' between fields emits a quote."""
        assert formatter.format(noon, "h''mm") == "12'05"

    def test_unknown_letters(self, formatter, noon):
        """Test unknown letters pass through."""
        assert formatter.format(noon, "yy/xxx") == "10/xxx"


# =============================================================================
# Presets
# =============================================================================


class TestPresets:
    """Tests for named presets."""

    @pytest.mark.parametrize(
        "preset,expected",
        [
            ("medium", "Sep 3, 2010 12:05:08 PM"),
            ("short", "9/3/10 12:05 PM"),
            ("fullDate", "Friday, September 3, 2010"),
            ("longDate", "September 3, 2010"),
            ("mediumDate", "Sep 3, 2010"),
            ("shortDate", "9/3/10"),
            ("mediumTime", "12:05:08 PM"),
            ("shortTime", "12:05 PM"),
        ],
    )
    def test_en_us(self, formatter, noon, preset, expected):
        """Test every en-us preset."""
        assert formatter.format(noon, preset) == expected

    def test_default_is_medium_date(self, formatter, noon):
        """Test an omitted or empty pattern means mediumDate."""
        assert formatter.format(noon) == "Sep 3, 2010"
        assert formatter.format(noon, "") == "Sep 3, 2010"

    def test_resolve_pattern(self, formatter):
        """Test preset names resolve and other patterns pass through."""
        assert formatter.resolve_pattern("shortDate") == "M/d/yy"
        assert formatter.resolve_pattern("yyyy") == "yyyy"
        assert formatter.resolve_pattern(None) == "MMM d, y"

    def test_german(self, noon):
        """Test de-de names and presets."""
        formatter = DateFormatter(get_locale("de-de"))
        assert formatter.format(noon, "fullDate") == "Freitag, 3. September 2010"
        assert formatter.format(noon, "medium") == "03.09.2010 12:05:08"
        assert formatter.format(noon, "h a") == "12 nachm."

    def test_spanish_quoted_preset(self, noon):
        """Test presets with quoted words."""
        formatter = DateFormatter(get_locale("es-es"))
        assert formatter.format(noon, "longDate") == "3 de septiembre de 2010"

    def test_japanese(self, noon):
        """Test ja-jp presets."""
        formatter = DateFormatter(get_locale("ja-jp"))
        assert formatter.format(noon, "fullDate") == "2010年9月3日金曜日"

    def test_korean(self, morning):
        """Test ko-kr markers."""
        formatter = DateFormatter(get_locale("ko-kr"))
        assert formatter.format(morning, "shortTime") == "오전 7:05"


# =============================================================================
# Inputs
# =============================================================================


class TestInputs:
    """Tests for the values accepted by DateFormatter.format()."""

    def test_none_and_empty(self, formatter):
        """Test None and "" are returned unchanged."""
        assert formatter.format(None) is None
        assert formatter.format("") == ""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2003-09-10T13:02:03.000Z", "2003-09-10 03"),
            ("2003-09-10T13:02:03Z", "2003-09-10 03"),
            ("2003-09-10T13:02:03.000+00:00", "2003-09-10 03"),
            ("20030910T033203-0930", "2003-09-10 03"),
            ("2003-09-10T13Z", "2003-09-10 00"),
            ("2003-09-10Z", "2003-09-10 00"),
        ],
    )
    def test_iso_with_zone(self, formatter, text, expected):
        """Test ISO strings with a timezone are shown in that timezone."""
        assert formatter.format(text, "yyyy-MM-dd ss") == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2003-09-10T03:02:04", "2003-09-10 03-02-04"),
            ("20030910T030204", "2003-09-10 03-02-04"),
            ("2003-09-10", "2003-09-10 00-00-00"),
        ],
    )
    def test_iso_without_zone(self, formatter, text, expected):
        """Test wall-clock strings keep their fields."""
        assert formatter.format(text, "yyyy-MM-dd HH-mm-ss") == expected

    def test_epoch(self, formatter):
        """Test epoch milliseconds as number and string."""
        assert formatter.format(0, "yyyy-MM-dd HH:mm") == "1970-01-01 00:00"
        assert formatter.format("1283533508000", "yyyy-MM-dd HH:mm:ss") == "2010-09-03 17:05:08"

    def test_datetime(self, formatter):
        """Test datetime objects."""
        assert formatter.format(datetime(2010, 9, 3, 12, 5, 8), "h:mm a") == "12:05 PM"

    def test_iso_round_trip(self, formatter, noon):
        """Test an ISO pattern parses back to the same value."""
        text = formatter.format(noon, "yyyy-MM-dd'T'HH:mm:ss.sssZ")
        assert text == "2010-09-03T12:05:08.000-0500"
        assert parse_date(text) == noon

    def test_invalid(self, formatter):
        """Test unparseable input raises."""
        with pytest.raises(InvalidDateError):
            formatter.format("not a date", "yyyy")
