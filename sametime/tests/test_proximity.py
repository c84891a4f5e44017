from __future__ import annotations

import pytest

from sametime.view.models import ProximityCategory, TimeOfDay
from sametime.view.proximity import (
    classify,
    day_badge,
    format_local_time,
    format_timezone_name,
    time_of_day,
)


@pytest.mark.parametrize("offset", [-720, -300, 0, 330, 345, 840])
def test_same_offset_is_same_time(offset):
    assert classify(offset, offset, False) == ProximityCategory.same_time
    assert classify(offset, offset, True) == ProximityCategory.same_time


@pytest.mark.parametrize("a,b", [(720, 0), (0, 720), (-300, 420), (-720, 0)])
def test_twelve_hours_apart_is_reverse_time_regardless_of_flag(a, b):
    assert classify(a, b, False) == ProximityCategory.reverse_time
    assert classify(a, b, True) == ProximityCategory.reverse_time


def test_reference_examples():
    assert classify(720, 0, False) == ProximityCategory.reverse_time
    assert classify(150, 0, False) == ProximityCategory.close_time


def test_close_time_boundary_is_inclusive():
    assert classify(180, 0, False) == ProximityCategory.close_time
    assert classify(-180, 0, False) == ProximityCategory.close_time
    assert classify(181, 0, False) == ProximityCategory.different_time


def test_similarity_flag_promotes_to_close_time():
    assert classify(300, 0, True) == ProximityCategory.close_time
    assert classify(300, 0, False) == ProximityCategory.different_time


def test_half_hour_zones_near_reverse_are_different_time():
    assert classify(690, 0, False) == ProximityCategory.different_time
    assert classify(750, 0, False) == ProximityCategory.different_time


def test_day_badge_uses_signed_difference():
    assert day_badge(720, 0) == "Tomorrow"
    assert day_badge(-720, 0) == "Yesterday"
    assert day_badge(0, 720) == "Yesterday"
    assert day_badge(60, 0) is None
    assert day_badge(750, 0) is None


@pytest.mark.parametrize(
    "hour,expected",
    [
        (0, TimeOfDay.late_night),
        (3, TimeOfDay.late_night),
        (4, TimeOfDay.early_morning),
        (7, TimeOfDay.early_morning),
        (8, TimeOfDay.morning),
        (12, TimeOfDay.afternoon),
        (16, TimeOfDay.evening),
        (19, TimeOfDay.evening),
        (20, TimeOfDay.night),
        (23, TimeOfDay.night),
    ],
)
def test_time_of_day_buckets(hour, expected):
    assert time_of_day(hour) == expected


def test_format_local_time(now):
    assert format_local_time(330, now) == "5:30 PM"
    assert format_local_time(-720, now) == "12:00 AM"
    assert format_local_time(0, now) == "12:00 PM"
    assert format_local_time(-300, now) == "7:00 AM"


def test_format_timezone_name():
    assert format_timezone_name("America/New_York") == "New York"
    assert format_timezone_name("America/Argentina/Buenos_Aires") == "Buenos Aires"
    assert format_timezone_name("UTC") == "UTC"
