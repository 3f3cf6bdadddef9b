"""Pydantic v2 data models — the data contracts flowing through the system.

Input records are frozen and accept either snake_case field names or the
camelCase keys used by the marketplace API (``reviewCount``, ``isTopRated``).
Range checks run when a record is built; the scoring code trusts them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

Weekday = Literal[
    "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
]

VerificationLevel = Literal["none", "basic", "skill", "approved"]

Urgency = Literal["asap", "this-week", "flexible"]

RequestStatus = Literal["open", "in-progress", "completed", "cancelled"]


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ---------------------------------------------------------------------------
# Shared value objects
# ---------------------------------------------------------------------------

class Location(_Record):
    governorate: str = ""
    city: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.governorate and not self.city


class PriceRange(_Record):
    min: float = Field(default=0.0, ge=0.0)
    max: float = Field(default=10000.0, ge=0.0)

    @model_validator(mode="after")
    def _check_bounds(self) -> PriceRange:
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


# ---------------------------------------------------------------------------
# Provider
# ---------------------------------------------------------------------------

class PersonName(_Record):
    first: str = ""
    last: str = ""

    @property
    def full(self) -> str:
        return f"{self.first} {self.last}".strip()


class Skill(_Record):
    category: str
    subcategory: str
    verified: bool = False
    years_of_experience: float = Field(default=0.0, ge=0.0)


class AvailableHours(_Record):
    start: str = "09:00"
    end: str = "17:00"


class Availability(_Record):
    is_available: bool = False
    available_days: frozenset[Weekday] = frozenset()
    available_hours: AvailableHours = Field(default_factory=AvailableHours)

    @field_validator("available_days", mode="before")
    @classmethod
    def _lowercase_days(cls, value):
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(str(day).strip().lower() for day in value)
        return value


class Provider(_Record):
    id: str = Field(default="", alias="_id")
    name: PersonName = Field(default_factory=PersonName)
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    completed_jobs: int = Field(default=0, ge=0)
    is_verified: bool = False
    is_top_rated: bool = False
    average_response_time_minutes: int | None = Field(default=None, ge=0)
    skills: tuple[Skill, ...] = ()
    location: Location = Field(default_factory=Location)
    pricing_range: PriceRange = Field(default_factory=PriceRange)
    availability: Availability = Field(default_factory=Availability)
    verification_level: VerificationLevel = "none"
    completion_rate: float = Field(default=0.0, ge=0.0, le=100.0)

    @property
    def total_experience(self) -> float:
        return sum(s.years_of_experience for s in self.skills)


# ---------------------------------------------------------------------------
# Service request
# ---------------------------------------------------------------------------

class ServiceRequest(_Record):
    id: str = Field(default="", alias="_id")
    title: str = ""
    description: str = ""
    category: str = ""
    subcategory: str = ""
    urgency: Urgency = "flexible"
    location: Location = Field(default_factory=Location)
    budget: PriceRange | None = None
    status: RequestStatus = "open"
    created_at: datetime | None = None
    offer_count: int = Field(default=0, ge=0)


# ---------------------------------------------------------------------------
# Scoring / output types
# ---------------------------------------------------------------------------

class DimensionScores(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: float = 0.0
    skills: float = 0.0
    rating: float = 0.0
    availability: float = 0.0
    response_time: float = 0.0
    verification: float = 0.0
    completion_rate: float = 0.0


class MatchResult(BaseModel):
    provider: Provider
    total_score: float = 0.0
    scores: DimensionScores = Field(default_factory=DimensionScores)
    match_reasons: list[str] = Field(default_factory=list)


class RequestMatch(BaseModel):
    request: ServiceRequest
    score: float = 0.0
    match_reasons: list[str] = Field(default_factory=list)
