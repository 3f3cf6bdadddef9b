"""Rating sub-score: normalized star rating plus a review-volume trust bonus."""

from __future__ import annotations

MAX_RATING = 5.0
TRUST_REVIEW_COUNT = 50
TRUST_BONUS = 0.1


def score(rating: float, review_count: int) -> float:
    bonus = min(review_count / TRUST_REVIEW_COUNT, 1.0) * TRUST_BONUS
    return min(rating / MAX_RATING + bonus, 1.0)
