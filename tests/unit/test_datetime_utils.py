"""
Unit tests for refinery_eye.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from refinery_eye.utils.datetime_utils import ensure_utc, parse_iso, to_iso, to_local, utc_now


class TestEnsureUtc:
    def test_none_returns_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0)
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_aware_converted_to_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 6
        assert result.minute == 30


class TestParseIso:
    def test_none_empty_returns_none(self):
        assert parse_iso(None) is None
        assert parse_iso("") is None

    def test_parse_utc_z_suffix(self):
        dt = parse_iso("2025-01-15T12:00:00.250Z")
        assert dt == datetime(2025, 1, 15, 12, 0, 0, 250000, tzinfo=timezone.utc)

    def test_parse_with_offset(self):
        dt = parse_iso("2025-01-15T12:00:00+05:30")
        assert dt.tzinfo == timezone.utc
        assert dt.hour == 6

    def test_invalid_returns_none(self):
        assert parse_iso("not-a-date") is None
        assert parse_iso("2025-13-45T99:99:99") is None


class TestToIso:
    def test_none_returns_none(self):
        assert to_iso(None) is None

    def test_utc_datetime_has_milliseconds_and_z(self):
        dt = datetime(2025, 1, 15, 12, 0, 0, 123456, tzinfo=timezone.utc)
        assert to_iso(dt) == "2025-01-15T12:00:00.123Z"

    def test_to_iso_parse_iso_preserves_order(self):
        first = utc_now()
        second = first + timedelta(milliseconds=5)
        assert parse_iso(to_iso(first)) < parse_iso(to_iso(second))


class TestToLocal:
    def test_utc_passthrough(self):
        dt = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
        assert to_local(dt, "UTC") == dt

    def test_named_timezone(self):
        dt = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
        local = to_local(dt, "Asia/Kolkata")
        assert (local.hour, local.minute) == (17, 30)

    def test_unknown_timezone_falls_back_to_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
        assert to_local(dt, "Not/AZone") == dt
