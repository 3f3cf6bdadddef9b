"""Verification sub-score: vetting level plus a top-rated bonus."""

from __future__ import annotations

LEVEL_SCORES: dict[str, float] = {
    "approved": 1.0,
    "skill": 0.7,
    "basic": 0.4,
}
UNVERIFIED_SCORE = 0.2
TOP_RATED_BONUS = 0.1


def score(verification_level: str, is_top_rated: bool) -> float:
    result = LEVEL_SCORES.get(verification_level, UNVERIFIED_SCORE)
    if is_top_rated:
        result += TOP_RATED_BONUS
    return min(result, 1.0)
