from __future__ import annotations

from typing import Sequence

import pandas as pd

from ..catalog.models import CanonicalLocation, LanguageInfo
from ..config import DEFAULT_CONFIG, SameTimeConfig
from .models import FilterCriteria, TimeOfDay
from .proximity import TIME_OF_DAY_ORDER, classify, time_of_day
from .sorting import collation_key


def _frame(locations: Sequence[CanonicalLocation]) -> pd.DataFrame:
    return pd.DataFrame({
        "country_name": [loc.country_name for loc in locations],
        "offset": [loc.current_offset_minutes for loc in locations],
        "is_similar_time": [loc.is_similar_time for loc in locations],
        "local_hour": [loc.local_hour for loc in locations],
        "language_codes": [[c.lower() for c in loc.language_codes] for loc in locations],
    })


def _proximity_mask(
    frame: pd.DataFrame,
    criteria: FilterCriteria,
    references: Sequence[CanonicalLocation],
    config: SameTimeConfig,
) -> pd.Series:
    mask = pd.Series(False, index=frame.index)
    for ref in references:
        categories = [
            classify(int(offset), ref.current_offset_minutes, bool(similar), config.close_time_hours)
            for offset, similar in zip(frame["offset"], frame["is_similar_time"])
        ]
        mask = mask | pd.Series(categories, index=frame.index).isin(criteria.proximities)
    return mask


def _location_mask(
    frame: pd.DataFrame,
    criteria: FilterCriteria,
    references: Sequence[CanonicalLocation],
    config: SameTimeConfig,
    *,
    with_languages: bool = True,
) -> pd.Series:
    mask = pd.Series(True, index=frame.index)

    if with_languages and criteria.languages:
        wanted = criteria.languages
        mask = mask & frame["language_codes"].apply(
            lambda codes: any(code in wanted for code in codes)
        ).astype(bool)

    if criteria.proximities:
        mask = mask & _proximity_mask(frame, criteria, references, config)

    if criteria.times_of_day:
        buckets = frame["local_hour"].map(lambda hour: time_of_day(int(hour)))
        mask = mask & buckets.isin(criteria.times_of_day)

    if not criteria.show_all_countries:
        mask = mask & frame["country_name"].isin(config.priority_countries)

    return mask


def _references(
    primary_reference: CanonicalLocation | None,
    additional_references: Sequence[CanonicalLocation],
) -> list[CanonicalLocation]:
    return [ref for ref in [primary_reference, *additional_references] if ref is not None]


def filter_locations(
    locations: Sequence[CanonicalLocation],
    criteria: FilterCriteria,
    primary_reference: CanonicalLocation | None,
    additional_references: Sequence[CanonicalLocation] = (),
    config: SameTimeConfig = DEFAULT_CONFIG,
) -> list[CanonicalLocation]:
    """
    Keep the locations that satisfy every selected dimension.

    Selections within one dimension are OR-ed, dimensions are AND-ed. A
    location matches the proximity dimension when its category against the
    primary reference, or against any additional reference, is selected.
    Input order is preserved.
    """
    if not locations:
        return []

    frame = _frame(locations)
    mask = _location_mask(
        frame, criteria, _references(primary_reference, additional_references), config
    )
    kept = frame.loc[mask]
    return [locations[i] for i in kept.index]


def available_languages(
    locations: Sequence[CanonicalLocation],
    criteria: FilterCriteria,
    primary_reference: CanonicalLocation | None,
    additional_references: Sequence[CanonicalLocation] = (),
    config: SameTimeConfig = DEFAULT_CONFIG,
) -> list[LanguageInfo]:
    """Languages offered by the locations that pass every non-language filter."""
    if not locations:
        return []

    frame = _frame(locations)
    mask = _location_mask(
        frame,
        criteria,
        _references(primary_reference, additional_references),
        config,
        with_languages=False,
    )

    seen: dict[str, LanguageInfo] = {}
    for i in frame.loc[mask].index:
        for lang in locations[i].languages:
            seen.setdefault(lang.code, lang)
    return sorted(seen.values(), key=lambda lang: (collation_key(lang.name), lang.code))


def available_times_of_day(locations: Sequence[CanonicalLocation]) -> list[TimeOfDay]:
    present = {time_of_day(loc.local_hour) for loc in locations}
    return [bucket for bucket in TIME_OF_DAY_ORDER if bucket in present]
