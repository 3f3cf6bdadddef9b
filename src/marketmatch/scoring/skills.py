"""Skills sub-score.

Only skills matching both the request's category and subcategory count:
  - base for holding the skill                         0.5
  - any matching skill verified                       +0.3
  - experience across matching skills, saturating at
    10 years                                          +0.2
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.marketmatch.models import Skill

logger = logging.getLogger(__name__)

BASE_SCORE = 0.5
VERIFIED_BONUS = 0.3
EXPERIENCE_BONUS = 0.2
EXPERIENCE_SATURATION_YEARS = 10.0


def matching_skills(
    skills: Sequence[Skill], category: str, subcategory: str,
) -> list[Skill]:
    if not category or not subcategory:
        return []
    return [
        s for s in skills
        if s.category == category and s.subcategory == subcategory
    ]


def score(skills: Sequence[Skill], category: str, subcategory: str) -> float:
    """Score a provider's skills against a request category.  [0.0, 1.0]."""
    matches = matching_skills(skills, category, subcategory)
    if not matches:
        return 0.0

    result = BASE_SCORE
    if any(s.verified for s in matches):
        result += VERIFIED_BONUS

    years = sum(s.years_of_experience for s in matches)
    result += min(years / EXPERIENCE_SATURATION_YEARS, 1.0) * EXPERIENCE_BONUS

    logger.debug(
        "Skills %s/%s: %d matching, %.1f years -> %.3f",
        category, subcategory, len(matches), years, result,
    )
    return min(result, 1.0)
