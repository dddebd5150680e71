from datetime import time

import pytest

from salon_agenda.scheduling.periods import (
    DURATION_CODES,
    minutes_for_duration_code,
    minutes_to_hhmm,
    parse_hhmm,
)


class TestParseHHMM:
    @pytest.mark.parametrize(
        "value,expected",
        [("09:30", 570), ("9:05", 545), ("09:30:00", 570), ("00:00", 0), ("23:59", 1439)],
    )
    def test_valid(self, value, expected):
        assert parse_hhmm(value) == expected

    @pytest.mark.parametrize("value", ["24:00", "12:60", "abc", "", "9h30", None])
    def test_invalid_returns_none(self, value):
        assert parse_hhmm(value) is None

    def test_time_object(self):
        assert parse_hhmm(time(7, 15)) == 435


class TestDurationCodes:
    def test_vocabulary(self):
        assert [d["value"] for d in DURATION_CODES] == ["30min", "1h", "1h30", "2h"]

    @pytest.mark.parametrize(
        "code,expected",
        [("30min", 30), ("1h", 60), ("1h30", 90), ("2h", 120), ("3h15", 195), ("4h", 240)],
    )
    def test_known_and_free_form(self, code, expected):
        assert minutes_for_duration_code(code) == expected

    @pytest.mark.parametrize("code", [None, "", "weird", "45min"])
    def test_fallback_is_one_hour(self, code):
        assert minutes_for_duration_code(code) == 60


def test_minutes_to_hhmm():
    assert minutes_to_hhmm(545) == "09:05"
    assert minutes_to_hhmm(0) == "00:00"
    assert minutes_to_hhmm(1150) == "19:10"
