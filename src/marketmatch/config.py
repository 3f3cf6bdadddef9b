"""Configuration — weights, thresholds, result limits."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings

# Fixed acceptance floor for a provider's weighted total.
MIN_ACCEPTANCE_SCORE = 0.3


class MatchingCriteria(BaseModel):
    """Per-dimension weights. The defaults sum to 1.0; overrides need not."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    location_weight: float = Field(default=0.25, ge=0.0, le=1.0)
    skills_weight: float = Field(default=0.20, ge=0.0, le=1.0)
    rating_weight: float = Field(default=0.15, ge=0.0, le=1.0)
    availability_weight: float = Field(default=0.15, ge=0.0, le=1.0)
    response_time_weight: float = Field(default=0.10, ge=0.0, le=1.0)
    verification_weight: float = Field(default=0.10, ge=0.0, le=1.0)
    completion_rate_weight: float = Field(default=0.05, ge=0.0, le=1.0)


DEFAULT_CRITERIA = MatchingCriteria()


class Settings(BaseSettings):
    criteria: MatchingCriteria = DEFAULT_CRITERIA
    max_results: int = Field(default=10, ge=1)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "MARKETMATCH_",
        "env_nested_delimiter": "__",
        "frozen": True,
    }


settings = Settings()
