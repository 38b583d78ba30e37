from datetime import datetime, timezone

import pytest

from promptkit.clock import (
    InvalidOffsetError,
    create_offset_time_string,
    current_time_string,
    format_time,
)

FMT_12 = "%r"
FMT_24 = "%T"


@pytest.mark.parametrize(
    ("hms", "fmt", "expected"),
    [
        ((0, 0, 0), FMT_12, "12:00:00 AM"),
        ((0, 0, 0), FMT_24, "00:00:00"),
        ((12, 0, 0), FMT_12, "12:00:00 PM"),
        ((12, 0, 0), FMT_24, "12:00:00"),
        ((15, 36, 47), FMT_12, "03:36:47 PM"),
        ((15, 36, 47), FMT_24, "15:36:47"),
        ((15, 36, 47), "[%T]", "[15:36:47]"),
    ],
)
def test_format_local_time(hms, fmt, expected):
    moment = datetime(2014, 7, 8, *hms)
    assert format_time(fmt, moment) == expected


@pytest.mark.parametrize(
    ("hms", "fmt", "expected"),
    [
        ((0, 0, 0), FMT_12, "12:00:00 AM"),
        ((0, 0, 0), FMT_24, "00:00:00"),
        ((12, 0, 0), FMT_12, "12:00:00 PM"),
        ((12, 0, 0), FMT_24, "12:00:00"),
        ((15, 36, 47), FMT_12, "03:36:47 PM"),
        ((15, 36, 47), FMT_24, "15:36:47"),
        ((15, 36, 47), "[%T]", "[15:36:47]"),
    ],
)
def test_format_fixed_offset_time(hms, fmt, expected):
    moment = datetime(2014, 7, 8, *hms, tzinfo=timezone.utc)
    assert format_time(fmt, moment) == expected


def test_literal_percent_is_kept():
    moment = datetime(2014, 7, 8, 15, 36, 47)
    assert format_time("%%T %T", moment) == "%T 15:36:47"


UTC_TIME = datetime(2014, 7, 8, 15, 36, 47, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        ("-3", "12:36:47 PM"),
        ("+5", "08:36:47 PM"),
        ("+9.5", "01:06:47 AM"),
        ("+5.75", "09:21:47 PM"),
    ],
)
def test_create_offset_time_string(offset, expected):
    assert create_offset_time_string(UTC_TIME, offset, FMT_12) == expected


@pytest.mark.parametrize(
    "offset", ["+24", "-24", "+9001", "-4242", "completely wrong config"]
)
def test_create_offset_time_string_invalid(offset):
    with pytest.raises(InvalidOffsetError):
        create_offset_time_string(UTC_TIME, offset, FMT_12)


def test_naive_time_is_treated_as_utc():
    naive = datetime(2014, 7, 8, 15, 36, 47)
    assert create_offset_time_string(naive, "+5", FMT_24) == "20:36:47"


def test_current_time_string_with_zero_offset_matches_utc_now():
    before = datetime.now(timezone.utc).strftime("%H:%M:%S")
    result = current_time_string("%T", "+0")
    after = datetime.now(timezone.utc).strftime("%H:%M:%S")
    assert result in {before, after}


def test_current_time_string_invalid_offset_falls_back_to_local():
    before = datetime.now().strftime("%H:%M:%S")
    result = current_time_string("%T", "nonsense")
    after = datetime.now().strftime("%H:%M:%S")
    assert result in {before, after}