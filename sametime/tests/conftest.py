from __future__ import annotations

from datetime import datetime, timezone

import pytest

from sametime.catalog.languages import CountryInfo, LanguageCatalog

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def language_catalog() -> LanguageCatalog:
    return LanguageCatalog(
        countries={
            "GB": CountryInfo(("en",), "United Kingdom", "United Kingdom"),
            "US": CountryInfo(("en",), "United States", "United States"),
            "FR": CountryInfo(("fr",), "France", "France"),
            "JP": CountryInfo(("ja",), "Japan", "日本"),
            "NZ": CountryInfo(("en", "mi"), "New Zealand", "New Zealand"),
        },
        language_names={
            "en": "English",
            "fr": "French",
            "ja": "Japanese",
            "mi": "Māori",
            "es": "Spanish",
            "ru": "Russian",
            "ur": "Urdu",
            "hi": "Hindi",
        },
    )


@pytest.fixture
def raw_catalog() -> list[dict]:
    return [
        {"name": "Europe/London", "alternativeName": "British Time", "countryCode": "GB",
         "countryName": "United Kingdom", "mainCities": ["London"], "currentTimeOffsetInMinutes": 0},
        {"name": "Europe/Paris", "alternativeName": "Central European Time", "countryCode": "FR",
         "countryName": "France", "mainCities": ["Paris"], "currentTimeOffsetInMinutes": 60},
        {"name": "America/New_York", "alternativeName": "Eastern Time", "countryCode": "US",
         "countryName": "United States", "mainCities": ["New York"], "currentTimeOffsetInMinutes": -300},
        {"name": "America/Detroit", "alternativeName": "Eastern Time", "countryCode": "US",
         "countryName": "United States", "mainCities": ["Detroit"], "currentTimeOffsetInMinutes": -300},
        {"name": "America/Chicago", "alternativeName": "Central Time", "countryCode": "US",
         "countryName": "United States", "mainCities": ["Chicago"], "currentTimeOffsetInMinutes": -360},
        {"name": "Asia/Tokyo", "alternativeName": "Japan Time", "countryCode": "JP",
         "countryName": "Japan", "mainCities": ["Tokyo"], "currentTimeOffsetInMinutes": 540},
        {"name": "Pacific/Auckland", "alternativeName": "New Zealand Time", "countryCode": "NZ",
         "countryName": "New Zealand", "mainCities": ["Auckland"], "currentTimeOffsetInMinutes": 720},
        {"name": "Antarctica/McMurdo", "alternativeName": "New Zealand Time", "countryCode": "AQ",
         "countryName": "Antarctica", "mainCities": ["McMurdo"], "currentTimeOffsetInMinutes": 720},
        {"name": "Asia/Kolkata", "alternativeName": "India Time", "countryCode": "IN",
         "countryName": "India", "mainCities": ["Mumbai"], "currentTimeOffsetInMinutes": 330},
        {"name": "Africa/Abidjan", "alternativeName": "Greenwich Mean Time", "countryCode": "CI",
         "countryName": "Côte d'Ivoire", "mainCities": ["Abidjan"], "currentTimeOffsetInMinutes": 0},
        {"name": "Broken/Zone", "alternativeName": "Nowhere", "countryCode": "XX",
         "countryName": "Nowhere", "mainCities": ["Nowhere"]},
    ]
