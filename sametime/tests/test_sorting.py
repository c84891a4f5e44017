from __future__ import annotations

from sametime.catalog.languages import country_flag
from sametime.catalog.models import CanonicalLocation, LanguageInfo
from sametime.view.models import ProximityCategory, SortDirection, SortField
from sametime.view.sorting import (
    UNCLASSIFIED_TIER,
    pin_locations,
    proximity_tier,
    sort_locations,
)


def _location(code, country, offset, languages=("en",), similar=False):
    return CanonicalLocation(
        name=f"{code}/{offset}",
        alternative_name=f"{country} Time",
        country_name=country,
        country_code=code,
        main_cities=[],
        current_offset_minutes=offset,
        languages=[LanguageInfo(code=c, name=c) for c in languages],
        local_hour=0,
        local_minute=0,
        is_similar_time=similar,
        emoji=country_flag(code),
    )


REFERENCE = _location("GB", "United Kingdom", 0)
FRANCE = _location("FR", "France", 0, ("fr",))
IRELAND = _location("IE", "Ireland", 0)
SPAIN = _location("ES", "Spain", 120, ("es",), similar=True)
BRAZIL = _location("BR", "Brazil", -180)
GREENLAND = _location("GL", "Greenland", -60)
NEW_ZEALAND = _location("NZ", "New Zealand", 720)
JAPAN = _location("JP", "Japan", 540, ("ja",))
AUSTRALIA = _location("AU", "Australia", 600)
ANTARCTICA = _location("AQ", "Antarctica", 720)

CANDIDATES = [FRANCE, IRELAND, SPAIN, BRAZIL, GREENLAND, NEW_ZEALAND, JAPAN, AUSTRALIA]


def _codes(locations):
    return [loc.country_code for loc in locations]


def test_tier_table():
    assert proximity_tier(ProximityCategory.same_time, True) == 1
    assert proximity_tier(ProximityCategory.same_time, False) == 2
    assert proximity_tier(ProximityCategory.close_time, True) == 3
    assert proximity_tier(ProximityCategory.close_time, False) == 4
    assert proximity_tier(ProximityCategory.reverse_time, True) == 5
    assert proximity_tier(ProximityCategory.reverse_time, False) == 6
    assert proximity_tier(ProximityCategory.different_time, True) == 7
    assert proximity_tier(ProximityCategory.different_time, False) == 8
    assert proximity_tier(None, True) == UNCLASSIFIED_TIER


def test_sort_by_tier_ascending():
    result = sort_locations(CANDIDATES, REFERENCE)
    assert _codes(result) == ["IE", "FR", "GL", "BR", "ES", "NZ", "AU", "JP"]


def test_descending_keeps_hour_difference_ascending():
    result = sort_locations(CANDIDATES, REFERENCE, direction=SortDirection.desc)
    assert _codes(result) == ["JP", "AU", "NZ", "ES", "GL", "BR", "FR", "IE"]


def test_sort_is_stable_and_repeatable():
    twin = _location("IM", "Isle of Man", 0)
    once = sort_locations([twin, *CANDIDATES], REFERENCE)
    assert _codes(once)[:2] == ["IM", "IE"]
    assert sort_locations(once, REFERENCE) == once


def test_without_reference_order_is_unchanged():
    assert sort_locations(CANDIDATES, None) == CANDIDATES


def test_sort_by_country_name_ignores_accents_and_case():
    aland = _location("AX", "Åland Islands", 120)
    albania = _location("AL", "albania", 60)
    zambia = _location("ZM", "Zambia", 120)
    result = sort_locations([zambia, albania, aland], REFERENCE, field=SortField.country)
    assert _codes(result) == ["AX", "AL", "ZM"]

    reverse = sort_locations([zambia, albania, aland], REFERENCE, SortField.country, SortDirection.desc)
    assert _codes(reverse) == ["ZM", "AL", "AX"]


def test_pinning_moves_selected_then_primary_to_front():
    ordered = sort_locations([*CANDIDATES, REFERENCE], REFERENCE)
    pinned = pin_locations(ordered, REFERENCE, [NEW_ZEALAND, SPAIN])
    assert _codes(pinned)[:3] == ["NZ", "ES", "GB"]
    assert sorted(_codes(pinned)) == sorted(_codes(ordered))


def test_pinning_skips_absent_and_duplicate_references():
    pinned = pin_locations(CANDIDATES, REFERENCE, [JAPAN, JAPAN])
    assert _codes(pinned) == ["JP", "FR", "IE", "ES", "BR", "GL", "NZ", "AU"]


def test_tail_country_moves_to_end_in_relative_order():
    second_base = _location("AQ", "Antarctica", 420)
    locations = [ANTARCTICA, FRANCE, second_base, IRELAND]
    pinned = pin_locations(locations, tail_country_code="aq")
    assert pinned == [FRANCE, IRELAND, ANTARCTICA, second_base]


def test_pinning_is_idempotent():
    ordered = sort_locations([ANTARCTICA, *CANDIDATES, REFERENCE], REFERENCE)
    once = pin_locations(ordered, REFERENCE, [AUSTRALIA, ANTARCTICA], "AQ")
    twice = pin_locations(once, REFERENCE, [AUSTRALIA, ANTARCTICA], "AQ")
    assert once == twice
    assert _codes(once)[0] == "AU"
    assert _codes(once)[-1] == "AQ"
