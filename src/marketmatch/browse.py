"""Listing filters, sort orders and search suggestions.

Backs the two browse views of the marketplace: seekers browsing providers
and providers browsing open requests. Filtering and sorting are pure; input
order is preserved wherever a sort key does not distinguish two records.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.marketmatch.engine import score_requests
from src.marketmatch.models import (
    PriceRange,
    Provider,
    RequestMatch,
    ServiceRequest,
    Urgency,
    VerificationLevel,
)

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5

ProviderSort = Literal[
    "rating", "reviews", "response", "experience",
    "price_low", "price_high", "distance", "completion",
]
RequestSort = Literal[
    "match", "recent", "urgent", "budget_high", "budget_low", "location", "offers",
]

# response-time filter key -> max hours
RESPONSE_TIME_LIMITS: dict[str, float] = {"1h": 1.0, "4h": 4.0, "24h": 24.0}

URGENCY_RANK: dict[str, int] = {"asap": 3, "this-week": 2, "flexible": 1}


class _Filters(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------

class ProviderFilters(_Filters):
    search_query: str = ""
    category: str = ""
    subcategory: str = ""
    governorate: str = ""
    min_rating: float = Field(default=0.0, ge=0.0, le=5.0)
    price_range: PriceRange = Field(default_factory=PriceRange)
    verification_level: VerificationLevel | Literal["all"] = "all"
    availability: Literal["all", "available"] = "all"
    response_time: Literal["all", "1h", "4h", "24h"] = "all"
    sort_by: ProviderSort = "rating"


def _provider_matches_query(provider: Provider, query: str) -> bool:
    needle = query.lower()
    if needle in provider.name.full.lower():
        return True
    return any(
        needle in s.category.lower() or needle in s.subcategory.lower()
        for s in provider.skills
    )


def _provider_passes(provider: Provider, f: ProviderFilters) -> bool:
    if f.search_query and not _provider_matches_query(provider, f.search_query):
        return False
    if f.category and not any(s.category == f.category for s in provider.skills):
        return False
    if f.subcategory and not any(s.subcategory == f.subcategory for s in provider.skills):
        return False
    if f.governorate and provider.location.governorate != f.governorate:
        return False
    if f.min_rating > 0 and provider.rating < f.min_rating:
        return False
    pricing = provider.pricing_range
    if pricing.min > f.price_range.max or pricing.max < f.price_range.min:
        return False
    if f.verification_level != "all" and provider.verification_level != f.verification_level:
        return False
    if f.availability == "available" and not provider.availability.is_available:
        return False
    if f.response_time != "all":
        minutes = provider.average_response_time_minutes
        if minutes is None or minutes / 60 > RESPONSE_TIME_LIMITS[f.response_time]:
            return False
    return True


def filter_providers(
    providers: Iterable[Provider], filters: ProviderFilters,
) -> list[Provider]:
    return [p for p in providers if _provider_passes(p, filters)]


def _response_minutes(p: Provider) -> float:
    # unknown response time sorts last
    minutes = p.average_response_time_minutes
    return float("inf") if minutes is None else minutes


_PROVIDER_SORT_KEYS: dict[str, tuple[Callable[[Provider], float], bool]] = {
    "rating": (lambda p: p.rating, True),
    "reviews": (lambda p: p.review_count, True),
    "response": (_response_minutes, False),
    "experience": (lambda p: p.total_experience, True),
    "price_low": (lambda p: p.pricing_range.min, False),
    "price_high": (lambda p: p.pricing_range.max, True),
    "completion": (lambda p: p.completion_rate, True),
}


def sort_providers(providers: Sequence[Provider], sort_by: str) -> list[Provider]:
    """Order providers for display.  ``distance`` keeps the input order."""
    if sort_by == "distance":
        return list(providers)
    try:
        key, descending = _PROVIDER_SORT_KEYS[sort_by]
    except KeyError:
        raise ValueError(f"Unknown provider sort key: {sort_by!r}") from None
    return sorted(providers, key=key, reverse=descending)


def browse_providers(
    providers: Iterable[Provider], filters: ProviderFilters | None = None,
) -> list[Provider]:
    filters = filters or ProviderFilters()
    filtered = filter_providers(providers, filters)
    logger.debug("Provider browse: %d passed filters", len(filtered))
    return sort_providers(filtered, filters.sort_by)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class RequestFilters(_Filters):
    search_query: str = ""
    category: str = ""
    subcategory: str = ""
    governorate: str = ""
    urgency: Urgency | Literal["all"] = "all"
    budget_range: PriceRange = Field(default_factory=PriceRange)
    sort_by: RequestSort = "match"
    show_matched_only: bool = True


def _request_matches_query(request: ServiceRequest, query: str) -> bool:
    needle = query.lower()
    return any(
        needle in field.lower()
        for field in (
            request.title, request.description,
            request.category, request.subcategory,
        )
    )


def _request_passes(request: ServiceRequest, f: RequestFilters) -> bool:
    if request.status != "open":
        return False
    if f.search_query and not _request_matches_query(request, f.search_query):
        return False
    if f.category and request.category != f.category:
        return False
    if f.subcategory and request.subcategory != f.subcategory:
        return False
    if f.governorate and request.location.governorate != f.governorate:
        return False
    if f.urgency != "all" and request.urgency != f.urgency:
        return False
    budget = request.budget
    if budget is not None:
        if budget.min > f.budget_range.max or budget.max < f.budget_range.min:
            return False
    return True


def filter_requests(
    requests: Iterable[ServiceRequest], filters: RequestFilters,
) -> list[ServiceRequest]:
    return [r for r in requests if _request_passes(r, filters)]


def _created_ts(m: RequestMatch) -> float:
    created = m.request.created_at
    return created.timestamp() if created else 0.0


_REQUEST_SORT_KEYS: dict[str, tuple[Callable[[RequestMatch], float], bool]] = {
    "match": (lambda m: m.score, True),
    "recent": (_created_ts, True),
    "urgent": (lambda m: URGENCY_RANK[m.request.urgency], True),
    "budget_high": (lambda m: m.request.budget.max if m.request.budget else 0.0, True),
    "budget_low": (lambda m: m.request.budget.min if m.request.budget else 0.0, False),
    "offers": (lambda m: m.request.offer_count, False),
}


def sort_requests(matches: Sequence[RequestMatch], sort_by: str) -> list[RequestMatch]:
    """Order scored requests for display.  ``location`` keeps the input order."""
    if sort_by == "location":
        return list(matches)
    try:
        key, descending = _REQUEST_SORT_KEYS[sort_by]
    except KeyError:
        raise ValueError(f"Unknown request sort key: {sort_by!r}") from None
    return sorted(matches, key=key, reverse=descending)


def browse_requests(
    requests: Iterable[ServiceRequest],
    filters: RequestFilters | None = None,
    provider: Provider | None = None,
) -> list[RequestMatch]:
    """Filter open requests, score them for ``provider`` and sort.

    Without a provider profile every request scores 0, so the matched-only
    filter leaves nothing.
    """
    filters = filters or RequestFilters()
    filtered = filter_requests(requests, filters)
    if provider is None:
        scored = (
            [] if filters.show_matched_only
            else [RequestMatch(request=r) for r in filtered]
        )
    else:
        scored = score_requests(
            provider, filtered, matched_only=filters.show_matched_only,
        )
    logger.debug("Request browse: %d of %d kept", len(scored), len(filtered))
    return sort_requests(scored, filters.sort_by)


# ---------------------------------------------------------------------------
# Search suggestions
# ---------------------------------------------------------------------------

def _collect(candidates: Iterable[str], query: str, limit: int) -> list[str]:
    needle = query.lower()
    seen: dict[str, None] = {}
    for text in candidates:
        if text and needle in text.lower():
            seen.setdefault(text, None)
    return list(seen)[:limit]


def provider_suggestions(
    providers: Iterable[Provider], query: str, limit: int = MAX_SUGGESTIONS,
) -> list[str]:
    if not query:
        return []

    def candidates():
        for p in providers:
            yield p.name.first
            yield p.name.last
            for s in p.skills:
                yield s.category
                yield s.subcategory

    return _collect(candidates(), query, limit)


def request_suggestions(
    requests: Iterable[ServiceRequest], query: str, limit: int = MAX_SUGGESTIONS,
) -> list[str]:
    if not query:
        return []

    def candidates():
        for r in requests:
            yield r.title
            yield r.category
            yield r.subcategory

    return _collect(candidates(), query, limit)
