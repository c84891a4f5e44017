from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Countries whose ISO language data misstates the languages actually spoken.
COUNTRY_LANGUAGE_OVERRIDES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "AQ": ("en", "es", "ru"),
    "AW": ("nl", "pap"),
    "CW": ("nl", "pap", "en"),
    "BQ": ("nl", "pap"),
    "SX": ("nl", "en"),
    "BL": ("fr",),
    "MF": ("fr",),
    "IN": (
        "as", "bn", "brx", "doi", "gu", "hi", "kn", "ks", "kok", "mai", "ml",
        "mni", "mr", "ne", "or", "pj", "sa", "sat", "sd", "ta", "te", "ur", "en",
    ),
    "PK": ("ur", "en", "pj"),
})

# Names for codes the ISO language list lacks or spells inconsistently.
LANGUAGE_NAME_STANDARDS: Mapping[str, str] = MappingProxyType({
    "pj": "Punjabi",
    "brx": "Bodo",
    "doi": "Dogri",
    "mai": "Maithili",
    "mni": "Manipuri",
    "sat": "Santali",
})

PRIORITY_COUNTRIES: tuple[str, ...] = (
    "Albania", "Argentina", "Armenia", "Australia", "Austria", "Belarus", "Belgium",
    "Bosnia and Herzegovina", "Brazil", "Bulgaria", "Canada", "Chile", "China",
    "Colombia", "Croatia", "Czechia", "Denmark", "Finland", "France", "Germany",
    "Greece", "Hungary", "India", "Indonesia", "Ireland", "Israel", "Italy",
    "Japan", "Kazakhstan", "Korea", "Latvia", "Lithuania", "Luxembourg",
    "Malaysia", "Mexico", "Moldova", "Netherlands", "New Zealand", "North Macedonia",
    "Norway", "Peru", "Philippines", "Poland", "Portugal", "Romania", "Russia",
    "Serbia", "Slovakia", "Slovenia", "South Africa", "Spain", "Sweden",
    "Switzerland", "Taiwan", "Thailand", "Turkey", "Ukraine", "United Kingdom",
    "United States", "Venezuela",
)


@dataclass(frozen=True)
class SameTimeConfig:
    """
    Immutable tables and limits shared by the normalizer and the view engine.

    Pass a customised instance to swap tables in tests instead of patching
    module state.
    """

    language_overrides: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: COUNTRY_LANGUAGE_OVERRIDES
    )
    language_names: Mapping[str, str] = field(
        default_factory=lambda: LANGUAGE_NAME_STANDARDS
    )
    priority_countries: tuple[str, ...] = PRIORITY_COUNTRIES
    tail_country_code: str | None = "AQ"
    similar_time_hours: float = 2.0
    close_time_hours: float = 3.0
    max_selected_locations: int = 3
    max_selected_languages: int = 6


@dataclass(frozen=True)
class PaginationConfig:
    max_per_page: int = 11
    min_last_page: int = 4
    single_page_ceiling: int = 14


DEFAULT_CONFIG = SameTimeConfig()
DEFAULT_PAGINATION_CONFIG = PaginationConfig()
