"""Location sub-score — coarse three-tier proximity.

Same city beats same governorate beats anywhere else. There is no distance
interpolation between tiers. Blank fields never count as a match, and a
side with no location at all scores 0.
"""

from __future__ import annotations

from src.marketmatch.models import Location

SAME_CITY_SCORE = 1.0
SAME_REGION_SCORE = 0.8
OTHER_REGION_SCORE = 0.3
MISSING_LOCATION_SCORE = 0.0


def _same(a: str, b: str) -> bool:
    return bool(a) and a == b


def score(provider: Location, request: Location) -> float:
    if provider.is_empty or request.is_empty:
        return MISSING_LOCATION_SCORE
    if _same(provider.city, request.city):
        return SAME_CITY_SCORE
    if _same(provider.governorate, request.governorate):
        return SAME_REGION_SCORE
    return OTHER_REGION_SCORE
