"""
View engine: the full pipeline from raw catalog to ordered locations.

Steps:
- Resolve the primary reference, falling back when the name is unknown.
- Normalize and merge the raw catalog relative to that reference.
- Filter by the request criteria against the primary and selected references.
- Sort by the requested key, then pin references and the tail country.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Sequence

from ..catalog.languages import LanguageCatalog
from ..catalog.models import CanonicalLocation, RawTimezoneRecord
from ..catalog.normalize import coerce_records, normalize_catalog, resolve_reference
from ..config import DEFAULT_CONFIG, SameTimeConfig
from .filters import filter_locations
from .models import ViewRequest, ViewResult
from .sorting import pin_locations, sort_locations

logger = logging.getLogger(__name__)


def select_reference(
    selected: Sequence[CanonicalLocation],
    location: CanonicalLocation,
    limit: int = DEFAULT_CONFIG.max_selected_locations,
) -> list[CanonicalLocation]:
    """Put *location* first in the selection, keeping at most *limit* entries."""
    others = [loc for loc in selected if loc.key != location.key]
    return [location, *others][:limit]


def deselect_reference(
    selected: Sequence[CanonicalLocation],
    location: CanonicalLocation,
) -> list[CanonicalLocation]:
    return [loc for loc in selected if loc.key != location.key]


def compute_view(
    raw_catalog: Iterable[RawTimezoneRecord | dict[str, Any]],
    request: ViewRequest,
    catalog: LanguageCatalog,
    config: SameTimeConfig = DEFAULT_CONFIG,
) -> ViewResult:
    """
    Build the ordered location list for one request.

    Everything is recomputed from the inputs; nothing is cached here.
    """
    records = coerce_records(raw_catalog)
    reference_record = resolve_reference(records, request.timezone)
    now = request.now or datetime.now(timezone.utc)

    locations = normalize_catalog(records, catalog, now, reference=reference_record, config=config)
    by_key = {loc.key: loc for loc in locations}
    primary = by_key[(reference_record.country_code, reference_record.current_offset_minutes)]

    if len(request.selected_locations) > config.max_selected_locations:
        logger.debug(
            "Ignoring %d selected locations beyond the limit of %d",
            len(request.selected_locations) - config.max_selected_locations,
            config.max_selected_locations,
        )
    # Selections may come from an earlier instant; use the fresh records
    selected = [
        by_key.get(loc.key, loc)
        for loc in request.selected_locations[: config.max_selected_locations]
    ]

    filtered = filter_locations(locations, request.criteria, primary, selected, config)
    ordered = sort_locations(filtered, primary, request.sort_field, request.sort_direction)
    ordered = pin_locations(ordered, primary, selected, config.tail_country_code)

    return ViewResult(primary_reference=primary, ordered_locations=ordered)


if __name__ == "__main__":
    import sys

    from ..catalog.config import DEFAULT_CATALOG_CONFIG
    from ..catalog.loader import load_raw_catalog
    from .pagination import page_items, paginate
    from .proximity import classify_location, format_local_time

    tz_name = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CATALOG_CONFIG.default_timezone
    result = compute_view(
        load_raw_catalog(),
        ViewRequest(timezone=tz_name),
        LanguageCatalog.from_babel(DEFAULT_CATALOG_CONFIG.display_locale),
    )
    plan = paginate(len(result.ordered_locations))
    primary = result.primary_reference
    print(f"{primary.emoji} {primary.country_name} ({primary.name}) - {plan.total_pages} pages")
    for loc in page_items(result.ordered_locations, 1, plan):
        category = classify_location(loc, primary).value
        print(f"{loc.emoji} {loc.country_name:<30} {format_local_time(loc.current_offset_minutes):>8}  {category}")
