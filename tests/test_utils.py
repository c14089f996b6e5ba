import re
from datetime import date, datetime, timedelta, timezone

import pytest

from lexflow.utils import (
    format_brl,
    format_date_br,
    get_initials,
    new_id,
    new_os_number,
    parse_timestamp,
    to_timestamp,
)


class TestTimestamps:
    def test_date_only(self):
        assert parse_timestamp("2024-10-01") == datetime(2024, 10, 1)

    def test_zulu_suffix(self):
        assert parse_timestamp("2024-10-01T12:30:00.000Z") == datetime(2024, 10, 1, 12, 30)

    def test_offset_is_converted_to_utc(self):
        assert parse_timestamp("2024-10-01T09:00:00-03:00") == datetime(2024, 10, 1, 12, 0)

    def test_aware_datetime(self):
        dt = datetime(2024, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        assert parse_timestamp(dt) == datetime(2023, 12, 31, 23, 0)

    @pytest.mark.parametrize("value", [None, "", "ontem", "2024-13-45"])
    def test_unparseable(self, value):
        assert parse_timestamp(value) is None

    def test_round_trip(self):
        dt = datetime(2025, 6, 1, 8, 15, 30, 123000)
        assert to_timestamp(dt) == "2025-06-01T08:15:30.123Z"
        assert parse_timestamp(to_timestamp(dt)) == dt

    def test_format_date_br(self):
        assert format_date_br("2024-10-01T12:00:00.000Z") == "01/10/2024"
        assert format_date_br(date(2024, 2, 3)) == "03/02/2024"
        assert format_date_br("sem data") == "sem data"


def test_format_brl():
    assert format_brl(15000) == "R$ 15.000,00"
    assert format_brl(1234567.891) == "R$ 1.234.567,89"
    assert format_brl(None) == "R$ 0,00"


@pytest.mark.parametrize("name,initials", [
    ("Dra. Ana Beatriz Castellucci", "DC"),
    ("Rodrigo", "RO"),
    ("  ", "U"),
    ("", "U"),
])
def test_get_initials(name, initials):
    assert get_initials(name) == initials


def test_identifiers():
    assert re.fullmatch(r"\d{13}-[0-9a-z]{9}", new_id())
    assert re.fullmatch(r"OS-2026-[1-9]\d{3}", new_os_number(2026))


def test_id_suffix_comes_from_secrets(monkeypatch):
    monkeypatch.setattr("lexflow.utils.secrets.choice", lambda alphabet: "q")

    assert new_id().endswith("-qqqqqqqqq")
