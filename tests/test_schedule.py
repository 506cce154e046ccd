"""Tests for display format parsing and formatting."""

from datetime import datetime

import pytest

from src.exceptions import InvalidFormat
from src.services.schedule import format_display, parse_display


@pytest.mark.parametrize(
    "value",
    ["15/03/2025 14:30", "01/01/2000 00:00", "29/02/2024 23:59", "31/12/1999 12:05"],
)
def test_round_trip(value):
    assert format_display(parse_display(value)) == value


def test_parse_stores_naive_utc():
    assert parse_display("15/03/2025 14:30") == datetime(2025, 3, 15, 14, 30)


def test_display_timezone_applies_both_ways():
    stored = parse_display("15/03/2025 14:30", tz="America/Sao_Paulo")

    assert stored == datetime(2025, 3, 15, 17, 30)
    assert format_display(stored, tz="America/Sao_Paulo") == "15/03/2025 14:30"


@pytest.mark.parametrize(
    "value",
    [
        "2025-03-15 14:30",
        "15/03/2025",
        "15/3/2025 14:30",
        "15/03/2025 14:30:00",
        "31/02/2025 10:00",
        "15/13/2025 10:00",
        "15/03/2025 24:00",
        "",
    ],
)
def test_parse_rejects_invalid(value):
    with pytest.raises(InvalidFormat):
        parse_display(value)
