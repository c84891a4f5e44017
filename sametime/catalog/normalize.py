"""
Normalizer: raw timezone catalog -> canonical location records.

Every value here is relative to one primary reference and one instant, so
callers rebuild the whole set whenever either changes.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable

from ..config import DEFAULT_CONFIG, SameTimeConfig
from ..errors import InvalidCatalogError
from .languages import LanguageCatalog, country_flag, resolve_languages
from .models import CanonicalLocation, RawTimezoneRecord

logger = logging.getLogger(__name__)


def coerce_records(raw_catalog: Iterable[RawTimezoneRecord | dict[str, Any]]) -> list[RawTimezoneRecord]:
    return [
        r if isinstance(r, RawTimezoneRecord) else RawTimezoneRecord.model_validate(r)
        for r in raw_catalog
    ]


def local_clock(now: datetime, offset_minutes: int) -> tuple[int, int]:
    """Return the (hour, minute) wall clock at *offset_minutes* from UTC."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(timezone.utc) + timedelta(minutes=offset_minutes)
    return local.hour, local.minute


def is_similar_offset(
    offset_minutes: int,
    reference_offset_minutes: int | None,
    window_hours: float = DEFAULT_CONFIG.similar_time_hours,
) -> bool:
    if reference_offset_minutes is None:
        return False
    return abs(offset_minutes - reference_offset_minutes) / 60 <= window_hours


def normalize_record(
    record: RawTimezoneRecord,
    catalog: LanguageCatalog,
    now: datetime,
    reference_offset_minutes: int | None = None,
    config: SameTimeConfig = DEFAULT_CONFIG,
) -> CanonicalLocation | None:
    """Build one canonical record, or None when the entry has no usable offset."""
    offset = record.current_offset_minutes
    if offset is None:
        return None

    hour, minute = local_clock(now, offset)
    return CanonicalLocation(
        name=record.name,
        alternative_name=record.alternative_name or record.name,
        country_name=record.country_name,
        country_code=record.country_code,
        main_cities=list(dict.fromkeys(record.main_cities)),
        current_offset_minutes=offset,
        languages=resolve_languages(record.country_code, catalog, config),
        local_hour=hour,
        local_minute=minute,
        is_similar_time=is_similar_offset(
            offset, reference_offset_minutes, config.similar_time_hours
        ),
        emoji=country_flag(record.country_code),
    )


def merge_locations(locations: Iterable[CanonicalLocation]) -> list[CanonicalLocation]:
    """Collapse records sharing (country, offset), unioning their city lists."""
    merged: dict[tuple[str, int], CanonicalLocation] = {}
    for location in locations:
        existing = merged.get(location.key)
        if existing is None:
            merged[location.key] = location.model_copy(
                update={"main_cities": list(dict.fromkeys(location.main_cities))}
            )
            continue
        cities = list(dict.fromkeys([*existing.main_cities, *location.main_cities]))
        merged[location.key] = existing.model_copy(update={"main_cities": cities})
    return list(merged.values())


def normalize_catalog(
    raw_catalog: Iterable[RawTimezoneRecord | dict[str, Any]],
    catalog: LanguageCatalog,
    now: datetime,
    reference: RawTimezoneRecord | None = None,
    config: SameTimeConfig = DEFAULT_CONFIG,
) -> list[CanonicalLocation]:
    """
    Normalize and merge a raw catalog against an optional primary reference.

    Entries without a valid numeric offset are dropped without raising.
    """
    records = coerce_records(raw_catalog)
    reference_offset = reference.current_offset_minutes if reference else None

    locations: list[CanonicalLocation] = []
    dropped = 0
    for record in records:
        location = normalize_record(record, catalog, now, reference_offset, config)
        if location is None:
            dropped += 1
            continue
        locations.append(location)

    if dropped:
        logger.debug("Dropped %d catalog entries without a numeric offset", dropped)

    return merge_locations(locations)


def resolve_reference(
    raw_catalog: Iterable[RawTimezoneRecord | dict[str, Any]],
    timezone_name: str,
) -> RawTimezoneRecord:
    """
    Find the primary reference entry by timezone name.

    Falls back to the first zero-offset entry, then to the first entry with
    a valid offset. Raises InvalidCatalogError when neither exists.
    """
    records = [r for r in coerce_records(raw_catalog) if r.current_offset_minutes is not None]
    name = timezone_name.strip()
    for record in records:
        if record.name == name:
            return record

    fallback = next((r for r in records if r.current_offset_minutes == 0), None)
    if fallback is None and records:
        fallback = records[0]
    if fallback is None:
        raise InvalidCatalogError(
            f"Timezone {name!r} not found and the catalog has no usable fallback entry"
        )

    logger.warning("Timezone %r not found in catalog, falling back to %r", name, fallback.name)
    return fallback
