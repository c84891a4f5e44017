from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from babel import Locale
from babel.core import UnknownLocaleError
from babel.languages import get_official_languages

from ..config import DEFAULT_CONFIG, SameTimeConfig
from .models import LanguageInfo

logger = logging.getLogger(__name__)

PLACEHOLDER_FLAG = "\U0001F3F3\uFE0F"
_REGIONAL_INDICATOR_OFFSET = 127397


@dataclass(frozen=True)
class CountryInfo:
    language_codes: tuple[str, ...] = ()
    display_name: str = ""
    native_name: str = ""


@dataclass(frozen=True)
class LanguageCatalog:
    """
    Fallback country and language data used when no override applies.

    ``countries`` maps an upper-case ISO country code to its official
    languages; ``language_names`` maps a lower-case language code to its
    display name.
    """

    countries: Mapping[str, CountryInfo] = field(default_factory=dict)
    language_names: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_babel(cls, locale: str = "en") -> "LanguageCatalog":
        """Build a catalog from the CLDR data shipped with Babel."""
        display = Locale.parse(locale)
        language_names = {
            code.lower(): name
            for code, name in display.languages.items()
            if "_" not in code
        }

        countries: dict[str, CountryInfo] = {}
        for territory, display_name in display.territories.items():
            if len(territory) != 2 or not territory.isalpha():
                continue
            codes: list[str] = []
            for code in get_official_languages(territory, de_facto=True):
                # "zh_Hant" and friends collapse to the base language
                base = code.split("_")[0].lower()
                if base not in codes:
                    codes.append(base)
            countries[territory] = CountryInfo(
                language_codes=tuple(codes),
                display_name=display_name,
                native_name=_native_territory_name(territory, codes, display_name),
            )

        return cls(
            countries=MappingProxyType(countries),
            language_names=MappingProxyType(language_names),
        )

    def country(self, country_code: str) -> CountryInfo | None:
        return self.countries.get(country_code.upper())


def _native_territory_name(territory: str, codes: list[str], fallback: str) -> str:
    if not codes:
        return fallback
    try:
        native = Locale.parse(codes[0])
    except (UnknownLocaleError, ValueError):
        return fallback
    return native.territories.get(territory, fallback)


def language_info(
    code: str,
    catalog: LanguageCatalog,
    config: SameTimeConfig = DEFAULT_CONFIG,
) -> LanguageInfo:
    """Resolve a language code to a LanguageInfo, degrading to the raw code."""
    normalized = code.strip().lower()
    name = config.language_names.get(normalized) or catalog.language_names.get(normalized)
    if not name:
        logger.debug("Unknown language code %r, using it as its own name", normalized)
        name = normalized
    return LanguageInfo(code=normalized, name=name)


def resolve_languages(
    country_code: str,
    catalog: LanguageCatalog,
    config: SameTimeConfig = DEFAULT_CONFIG,
) -> list[LanguageInfo]:
    """Return the languages spoken in *country_code*, deduplicated by code."""
    code = country_code.upper()
    if code in config.language_overrides:
        codes: tuple[str, ...] = config.language_overrides[code]
    else:
        country = catalog.country(code)
        codes = country.language_codes if country else ()

    languages: list[LanguageInfo] = []
    for raw in codes:
        if not raw.strip():
            continue
        info = language_info(raw, catalog, config)
        if info not in languages:
            languages.append(info)
    return languages


def country_flag(country_code: str) -> str:
    """Return the regional-indicator flag for a two-letter country code."""
    code = country_code.strip().upper()
    if len(code) != 2 or not all("A" <= ch <= "Z" for ch in code):
        return PLACEHOLDER_FLAG
    return "".join(chr(_REGIONAL_INDICATOR_OFFSET + ord(ch)) for ch in code)
