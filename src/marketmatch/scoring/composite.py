"""Composite ranker — per-dimension scoring and the weighted sum."""

from __future__ import annotations

import logging

from src.marketmatch.config import MatchingCriteria
from src.marketmatch.models import DimensionScores, Provider, ServiceRequest
from src.marketmatch.scoring import (
    availability,
    completion,
    location,
    rating,
    responsiveness,
    skills,
    verification,
)

logger = logging.getLogger(__name__)


def score_pair(provider: Provider, request: ServiceRequest) -> DimensionScores:
    """Compute all seven sub-scores for one (provider, request) pair."""
    scores = DimensionScores(
        location=location.score(provider.location, request.location),
        skills=skills.score(provider.skills, request.category, request.subcategory),
        rating=rating.score(provider.rating, provider.review_count),
        availability=availability.score(provider.availability, request.urgency),
        response_time=responsiveness.score(provider.average_response_time_minutes),
        verification=verification.score(
            provider.verification_level, provider.is_top_rated,
        ),
        completion_rate=completion.score(provider.completion_rate),
    )
    logger.debug(
        "Scored %s: loc=%.2f skills=%.2f rating=%.2f avail=%.2f "
        "resp=%.2f verif=%.2f compl=%.2f",
        provider.id or provider.name.full, scores.location, scores.skills,
        scores.rating, scores.availability, scores.response_time,
        scores.verification, scores.completion_rate,
    )
    return scores


def weighted_total(scores: DimensionScores, criteria: MatchingCriteria) -> float:
    return (
        scores.location * criteria.location_weight
        + scores.skills * criteria.skills_weight
        + scores.rating * criteria.rating_weight
        + scores.availability * criteria.availability_weight
        + scores.response_time * criteria.response_time_weight
        + scores.verification * criteria.verification_weight
        + scores.completion_rate * criteria.completion_rate_weight
    )
