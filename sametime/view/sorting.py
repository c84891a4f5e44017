from __future__ import annotations

import unicodedata
from typing import Iterable, Sequence

from ..catalog.models import CanonicalLocation
from .models import ProximityCategory, SortDirection, SortField
from .proximity import classify_location, hour_difference

UNCLASSIFIED_TIER = 9

_TIERS: dict[ProximityCategory, tuple[int, int]] = {
    # category -> (tier with a shared language, tier without)
    ProximityCategory.same_time: (1, 2),
    ProximityCategory.close_time: (3, 4),
    ProximityCategory.reverse_time: (5, 6),
    ProximityCategory.different_time: (7, 8),
}


def collation_key(text: str) -> str:
    """Accent- and case-insensitive key for ordering display names."""
    folded = "".join(
        ch for ch in unicodedata.normalize("NFKD", text) if not unicodedata.combining(ch)
    )
    return " ".join(folded.casefold().split())


def has_matching_language(
    location: CanonicalLocation,
    reference: CanonicalLocation | None,
) -> bool:
    if reference is None:
        return False
    reference_codes = set(reference.language_codes)
    return any(code in reference_codes for code in location.language_codes)


def proximity_tier(category: ProximityCategory | None, matching_language: bool) -> int:
    if category not in _TIERS:
        return UNCLASSIFIED_TIER
    with_match, without_match = _TIERS[category]
    return with_match if matching_language else without_match


def location_tier(location: CanonicalLocation, reference: CanonicalLocation | None) -> int:
    category = classify_location(location, reference) if reference is not None else None
    return proximity_tier(category, has_matching_language(location, reference))


def sort_locations(
    locations: Iterable[CanonicalLocation],
    reference: CanonicalLocation | None,
    field: SortField = SortField.proximity,
    direction: SortDirection = SortDirection.asc,
) -> list[CanonicalLocation]:
    """
    Order locations by proximity tier (default) or by country name.

    Tier order follows *direction*; ties on tier always break on the
    smallest hour difference first. Both orderings are stable.
    """
    descending = direction == SortDirection.desc

    if field == SortField.country:
        return sorted(
            locations,
            key=lambda loc: (collation_key(loc.country_name), loc.country_name),
            reverse=descending,
        )

    reference_offset = reference.current_offset_minutes if reference is not None else None

    def _key(location: CanonicalLocation) -> tuple[int, float]:
        tier = location_tier(location, reference)
        diff = (
            hour_difference(location.current_offset_minutes, reference_offset)
            if reference_offset is not None
            else 0.0
        )
        return (-tier if descending else tier, diff)

    return sorted(locations, key=_key)


def pin_locations(
    locations: Sequence[CanonicalLocation],
    primary_reference: CanonicalLocation | None = None,
    selected_locations: Sequence[CanonicalLocation] = (),
    tail_country_code: str | None = None,
) -> list[CanonicalLocation]:
    """
    Move references to the front and the tail country to the end.

    The leading block holds the selected locations in selection order, then
    the primary reference; each appears once and only if it is present.
    Applying this twice gives the same result as applying it once.
    """
    present = {loc.key for loc in locations}
    pin_order: list[tuple[str, int]] = []
    for ref in [*selected_locations, primary_reference]:
        if ref is None or ref.key not in present or ref.key in pin_order:
            continue
        pin_order.append(ref.key)

    pinned_keys = set(pin_order)
    head = [loc for key in pin_order for loc in locations if loc.key == key]
    rest = [loc for loc in locations if loc.key not in pinned_keys]
    ordered = head + rest

    if not tail_country_code:
        return ordered
    tail = tail_country_code.upper()
    return [loc for loc in ordered if loc.country_code.upper() != tail] + [
        loc for loc in ordered if loc.country_code.upper() == tail
    ]
