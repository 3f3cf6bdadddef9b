"""Provider-side fit — how well an open request suits a given provider.

Used when a provider browses requests. Four binary signals, each adding a
fixed share and a reason label:
  - skill match on category and subcategory     0.4
  - same governorate                            0.3
  - budget overlaps the provider's price range  0.2
  - urgent request and provider available       0.1
"""

from __future__ import annotations

import logging

from src.marketmatch.models import PriceRange, Provider, ServiceRequest
from src.marketmatch.scoring.skills import matching_skills

logger = logging.getLogger(__name__)

SKILL_WEIGHT = 0.4
REGION_WEIGHT = 0.3
BUDGET_WEIGHT = 0.2
URGENCY_WEIGHT = 0.1

# Requests must score strictly above this to count as matched.
MATCHED_THRESHOLD = 0.3

SKILL_REASON = "Matches your skills"
REGION_REASON = "In your area"
BUDGET_REASON = "Fits your budget"
URGENCY_REASON = "Available for urgent work"


def budget_overlap(pricing: PriceRange, budget: PriceRange) -> float:
    return min(pricing.max, budget.max) - max(pricing.min, budget.min)


def score(provider: Provider, request: ServiceRequest) -> tuple[float, list[str]]:
    """Score a request for a provider.  Returns (score, reasons)."""
    result = 0.0
    reasons: list[str] = []

    if matching_skills(provider.skills, request.category, request.subcategory):
        result += SKILL_WEIGHT
        reasons.append(SKILL_REASON)

    governorate = provider.location.governorate
    if governorate and governorate == request.location.governorate:
        result += REGION_WEIGHT
        reasons.append(REGION_REASON)

    if request.budget is not None:
        if budget_overlap(provider.pricing_range, request.budget) > 0:
            result += BUDGET_WEIGHT
            reasons.append(BUDGET_REASON)

    if request.urgency == "asap" and provider.availability.is_available:
        result += URGENCY_WEIGHT
        reasons.append(URGENCY_REASON)

    logger.debug(
        "Request fit %s for %s: %.2f (%s)",
        request.id or request.title, provider.id or provider.name.full,
        result, ", ".join(reasons) or "no signals",
    )
    return result, reasons
