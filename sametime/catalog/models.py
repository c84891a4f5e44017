from __future__ import annotations

import math
import numbers
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)


def parse_offset(value: Any) -> int | None:
    """Return *value* as whole minutes, or None when it is not a valid offset."""
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        number = float(value)
        if math.isfinite(number) and number.is_integer():
            return int(number)
    return None


class RawTimezoneRecord(BaseModel):
    """One entry of the raw world-timezone catalog, as supplied by the caller."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    alternative_name: str | None = Field(default=None, alias="alternativeName")
    country_code: str = Field(default="", alias="countryCode")
    country_name: str = Field(default="", alias="countryName")
    main_cities: list[str] = Field(default_factory=list, alias="mainCities")
    current_offset_minutes: int | None = Field(
        default=None, alias="currentTimeOffsetInMinutes"
    )

    @field_validator("name", "country_code", "country_name", mode="before")
    @classmethod
    def _text_or_blank(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("alternative_name", mode="before")
    @classmethod
    def _text_or_none(cls, value: Any) -> str | None:
        return value if isinstance(value, str) and value else None

    @field_validator("main_cities", mode="before")
    @classmethod
    def _city_list(cls, value: Any) -> list[str]:
        if not isinstance(value, (list, tuple)):
            return []
        return [c for c in value if isinstance(c, str)]

    @field_validator("current_offset_minutes", mode="before")
    @classmethod
    def _offset(cls, value: Any) -> int | None:
        return parse_offset(value)

    @model_validator(mode="after")
    def _default_alternative_name(self) -> "RawTimezoneRecord":
        if self.alternative_name is None:
            self.alternative_name = self.name
        return self


class LanguageInfo(BaseModel):
    """A spoken language. Two LanguageInfo values are equal when their codes are."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=1)
    name: str

    @field_validator("code", mode="before")
    @classmethod
    def _canonical_code(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @computed_field
    @property
    def display(self) -> str:
        return f"{self.name} ({self.code})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LanguageInfo):
            return self.code == other.code
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.code)


class CanonicalLocation(BaseModel):
    """A deduplicated (country, offset) timezone record, relative to one reference."""

    name: str
    alternative_name: str
    country_name: str
    country_code: str
    main_cities: list[str] = Field(default_factory=list)
    current_offset_minutes: int
    languages: list[LanguageInfo] = Field(default_factory=list)
    local_hour: int = Field(..., ge=0, le=23)
    local_minute: int = Field(..., ge=0, le=59)
    is_similar_time: bool = False
    emoji: str

    @property
    def key(self) -> tuple[str, int]:
        return (self.country_code, self.current_offset_minutes)

    @property
    def language_codes(self) -> list[str]:
        return [lang.code for lang in self.languages]
