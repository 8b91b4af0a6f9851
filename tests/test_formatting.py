import pytest

from billed.formatting import FormattedDate, date_sort_key, format_date, format_status, safe_format_date


class TestFormatDate:
    def test_april(self):
        assert format_date("2004-04-04") == "4 Avr. 04"

    def test_january(self):
        assert format_date("2001-01-01") == "1 Jan. 01"

    def test_two_digit_day_and_accented_month(self):
        assert format_date("2022-12-25") == "25 Déc. 22"

    def test_datetime_string(self):
        assert format_date("2021-08-15T10:30:00") == "15 Aoû. 21"

    def test_invalid_raises(self):
        with pytest.raises(ValueError):
            format_date("not a date")


class TestSafeFormatDate:
    def test_valid(self):
        assert safe_format_date("2003-03-03") == FormattedDate("3 Mar. 03")

    def test_invalid_falls_back_to_raw(self):
        result = safe_format_date("2003-13-45")
        assert result.value == "2003-13-45"
        assert result.fallback is True
        assert result.error

    def test_none(self):
        result = safe_format_date(None)
        assert result.value == ""
        assert result.fallback is True


class TestFormatStatus:
    def test_known_statuses(self):
        assert format_status("pending") == "En attente"
        assert format_status("accepted") == "Accepté"
        assert format_status("refused") == "Refused"

    def test_unknown_passes_through(self):
        assert format_status("archived") == "archived"

    def test_none(self):
        assert format_status(None) is None


class TestDateSortKey:
    def test_iso_date(self):
        assert date_sort_key("2004-04-04") == "2004-04-04T00:00:00"

    def test_aware_datetime_drops_offset(self):
        assert date_sort_key("2004-04-04T10:00:00+02:00") == "2004-04-04T10:00:00"

    def test_unparsable_keeps_raw(self):
        assert date_sort_key("garbage") == "garbage"

    def test_none(self):
        assert date_sort_key(None) == ""


class TestFormatDateShortYears:
    def test_year_below_1000_keeps_two_digits(self):
        assert format_date("0999-01-01") == "1 Jan. 99"

    def test_year_2000(self):
        assert format_date("2000-06-05") == "5 Jui. 00"
