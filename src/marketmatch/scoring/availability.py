"""Availability sub-score.

Unavailable providers get nothing. Available ones start at 0.5, gain 0.3
when the request is urgent and 0.2 when they work most of the week.
"""

from __future__ import annotations

from src.marketmatch.models import Availability, Urgency

BASE_SCORE = 0.5
URGENT_BONUS = 0.3
FLEXIBLE_DAYS_BONUS = 0.2
FLEXIBLE_DAYS_MIN = 5


def score(availability: Availability, urgency: Urgency) -> float:
    if not availability.is_available:
        return 0.0

    result = BASE_SCORE
    if urgency == "asap":
        result += URGENT_BONUS
    if len(availability.available_days) >= FLEXIBLE_DAYS_MIN:
        result += FLEXIBLE_DAYS_BONUS
    return min(result, 1.0)
