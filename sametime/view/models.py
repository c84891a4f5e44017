from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..catalog.models import CanonicalLocation
from ..config import DEFAULT_CONFIG


class ProximityCategory(str, Enum):
    same_time = "SameTime"
    close_time = "CloseTime"
    reverse_time = "ReverseTime"
    different_time = "DifferentTime"


class TimeOfDay(str, Enum):
    early_morning = "EarlyMorning"
    morning = "Morning"
    afternoon = "Afternoon"
    evening = "Evening"
    night = "Night"
    late_night = "LateNight"


class SortField(str, Enum):
    proximity = "type"
    country = "country"


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"


class FilterCriteria(BaseModel):
    """Selections per dimension. An empty selection does not filter."""

    model_config = ConfigDict(frozen=True)

    languages: frozenset[str] = Field(default_factory=frozenset)
    proximities: frozenset[ProximityCategory] = Field(default_factory=frozenset)
    times_of_day: frozenset[TimeOfDay] = Field(default_factory=frozenset)
    show_all_countries: bool = True

    @field_validator("languages", mode="before")
    @classmethod
    def _lowercase_codes(cls, value):
        if isinstance(value, str):
            value = [value]
        return frozenset(code.strip().lower() for code in value if code.strip())

    def toggle_language(
        self, code: str, limit: int = DEFAULT_CONFIG.max_selected_languages
    ) -> "FilterCriteria":
        """Add or remove a language code; additions past *limit* are ignored."""
        normalized = code.strip().lower()
        if normalized in self.languages:
            return self.model_copy(update={"languages": self.languages - {normalized}})
        if len(self.languages) >= limit:
            return self
        return self.model_copy(update={"languages": self.languages | {normalized}})


class ViewRequest(BaseModel):
    timezone: str = Field(default="UTC", description="Primary reference timezone name")
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    selected_locations: list[CanonicalLocation] = Field(
        default_factory=list,
        description="Additional reference locations, in selection order",
    )
    sort_field: SortField = SortField.proximity
    sort_direction: SortDirection = SortDirection.asc
    now: datetime | None = None

    @field_validator("timezone", mode="before")
    @classmethod
    def _default_timezone(cls, value):
        if not isinstance(value, str) or not value.strip():
            return "UTC"
        return value.strip()


class ViewResult(BaseModel):
    primary_reference: CanonicalLocation
    ordered_locations: list[CanonicalLocation]


class PagePlan(BaseModel):
    items_per_page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
