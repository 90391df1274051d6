"""Tests for wxr.dates — WXR timestamp formatting."""

from datetime import date, datetime, timedelta, timezone

from wxr.dates import format_date


class TestFormatDate:
    """format_date — datetimes formatted, everything else passed through."""

    def test_datetime(self) -> None:
        assert format_date(datetime(2019, 7, 4, 9, 8, 7)) == "2019-07-04 09:08:07"

    def test_24_hour_clock(self) -> None:
        assert format_date(datetime(2019, 7, 4, 21, 0, 0)) == "2019-07-04 21:00:00"

    def test_no_timezone_conversion(self) -> None:
        aware = datetime(2019, 7, 4, 21, 0, 0, tzinfo=timezone(timedelta(hours=5)))
        assert format_date(aware) == "2019-07-04 21:00:00"

    def test_date(self) -> None:
        assert format_date(date(2020, 2, 29)) == "2020-02-29 00:00:00"

    def test_microseconds_dropped(self) -> None:
        assert format_date(datetime(2020, 1, 1, 0, 0, 0, 999_999)) == "2020-01-01 00:00:00"

    def test_string_passthrough(self) -> None:
        assert format_date("2018-01-01 12:00:00") == "2018-01-01 12:00:00"

    def test_other_values_passthrough(self) -> None:
        assert format_date(1546300800) == 1546300800
        assert format_date(None) is None
