from __future__ import annotations

from datetime import datetime, timedelta, timezone

from ..catalog.models import CanonicalLocation
from ..config import DEFAULT_CONFIG
from .models import ProximityCategory, TimeOfDay

REVERSE_TIME_HOURS = 12

# Chronological order, used for facets
TIME_OF_DAY_ORDER: tuple[TimeOfDay, ...] = (
    TimeOfDay.early_morning,
    TimeOfDay.morning,
    TimeOfDay.afternoon,
    TimeOfDay.evening,
    TimeOfDay.night,
    TimeOfDay.late_night,
)


def hour_difference(offset_minutes: int, reference_offset_minutes: int) -> float:
    return abs(offset_minutes - reference_offset_minutes) / 60


def classify(
    offset_minutes: int,
    reference_offset_minutes: int,
    is_similar_time: bool,
    close_time_hours: float = DEFAULT_CONFIG.close_time_hours,
) -> ProximityCategory:
    """
    Classify the relationship between two offsets.

    The checks run in order and the first match wins: an exact 12 hour gap
    is ReverseTime even when the similarity flag is set.
    """
    diff = hour_difference(offset_minutes, reference_offset_minutes)
    if diff == 0:
        return ProximityCategory.same_time
    if diff == REVERSE_TIME_HOURS:
        return ProximityCategory.reverse_time
    if diff <= close_time_hours or is_similar_time:
        return ProximityCategory.close_time
    return ProximityCategory.different_time


def classify_location(
    location: CanonicalLocation,
    reference: CanonicalLocation,
    close_time_hours: float = DEFAULT_CONFIG.close_time_hours,
) -> ProximityCategory:
    return classify(
        location.current_offset_minutes,
        reference.current_offset_minutes,
        location.is_similar_time,
        close_time_hours,
    )


def day_badge(offset_minutes: int, reference_offset_minutes: int) -> str | None:
    """Return "Tomorrow" or "Yesterday" for a signed 12 hour gap, else None."""
    signed = (offset_minutes - reference_offset_minutes) / 60
    if signed == REVERSE_TIME_HOURS:
        return "Tomorrow"
    if signed == -REVERSE_TIME_HOURS:
        return "Yesterday"
    return None


def time_of_day(hour: int) -> TimeOfDay:
    if 4 <= hour < 8:
        return TimeOfDay.early_morning
    if 8 <= hour < 12:
        return TimeOfDay.morning
    if 12 <= hour < 16:
        return TimeOfDay.afternoon
    if 16 <= hour < 20:
        return TimeOfDay.evening
    if 20 <= hour < 24:
        return TimeOfDay.night
    return TimeOfDay.late_night


def format_local_time(offset_minutes: int, now: datetime | None = None) -> str:
    """Format the wall clock at *offset_minutes* as e.g. "9:05 PM"."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(timezone.utc) + timedelta(minutes=offset_minutes)
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {suffix}"


def format_timezone_name(timezone_name: str) -> str:
    """Strip the region prefix: "America/New_York" -> "New York"."""
    last = timezone_name.split("/")[-1] or timezone_name
    return last.replace("_", " ")
