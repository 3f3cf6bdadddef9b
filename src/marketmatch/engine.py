"""Top-level orchestrator — ranks providers for a request and vice versa.

Pipeline (``match``):
  1. Resolve effective criteria (settings defaults + caller overrides)
  2. Score every provider across seven dimensions      (deterministic)
  3. Weighted total per provider
  4. Drop totals below MIN_ACCEPTANCE_SCORE
  5. Stable sort, highest first; equal totals keep input order
  6. Truncate to max_results
  7. Attach match reasons

No I/O, no shared state: the same inputs always produce the same ranking.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from src.marketmatch.config import MIN_ACCEPTANCE_SCORE, MatchingCriteria, settings
from src.marketmatch.explanation.reasons import generate_reasons
from src.marketmatch.models import MatchResult, Provider, RequestMatch, ServiceRequest
from src.marketmatch.scoring import request_fit
from src.marketmatch.scoring.composite import score_pair, weighted_total

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"


def load_providers_from_json(data: list[dict]) -> list[Provider]:
    return [Provider.model_validate(p) for p in data]


def load_requests_from_json(data: list[dict]) -> list[ServiceRequest]:
    return [ServiceRequest.model_validate(r) for r in data]


def load_sample_providers() -> list[Provider]:
    path = DATA_DIR / "sample_providers.json"
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return load_providers_from_json(raw)


def load_sample_requests() -> list[ServiceRequest]:
    path = DATA_DIR / "sample_requests.json"
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return load_requests_from_json(raw)


def resolve_criteria(
    criteria: MatchingCriteria | Mapping[str, float] | None = None,
    base: MatchingCriteria | None = None,
) -> MatchingCriteria:
    """Overlay caller weights on the defaults, field by field.

    A full ``MatchingCriteria`` replaces the defaults outright; a mapping
    (snake_case or camelCase keys) overrides only the weights it names.
    """
    base = base or settings.criteria
    if criteria is None:
        return base
    if isinstance(criteria, MatchingCriteria):
        return criteria
    overrides = MatchingCriteria.model_validate(dict(criteria))
    return base.model_copy(update=overrides.model_dump(exclude_unset=True))


def match(
    request: ServiceRequest,
    providers: Iterable[Provider],
    criteria: MatchingCriteria | Mapping[str, float] | None = None,
    max_results: int | None = None,
    base: MatchingCriteria | None = None,
) -> list[MatchResult]:
    """Rank providers for a service request, best first.

    ``base`` supplies the default weights that ``criteria`` overrides; it
    falls back to ``settings.criteria``.
    """
    limit = settings.max_results if max_results is None else max_results
    if limit < 1:
        raise ValueError(f"max_results must be a positive integer, got {limit}")

    effective = resolve_criteria(criteria, base=base)

    scored = 0
    accepted: list[MatchResult] = []
    for provider in providers:
        scored += 1
        dim_scores = score_pair(provider, request)
        total = weighted_total(dim_scores, effective)
        if total < MIN_ACCEPTANCE_SCORE:
            logger.debug(
                "Rejected %s: total %.3f below %.2f",
                provider.id or provider.name.full, total, MIN_ACCEPTANCE_SCORE,
            )
            continue
        accepted.append(MatchResult(
            provider=provider,
            total_score=total,
            scores=dim_scores,
        ))

    ranked = sorted(accepted, key=lambda r: r.total_score, reverse=True)[:limit]
    for result in ranked:
        result.match_reasons = generate_reasons(result.scores)

    logger.info(
        "Matching complete for %s/%s: %d scored, %d accepted, %d returned",
        request.category or "-", request.subcategory or "-",
        scored, len(accepted), len(ranked),
    )
    return ranked


def score_requests(
    provider: Provider,
    requests: Iterable[ServiceRequest],
    matched_only: bool = False,
) -> list[RequestMatch]:
    """Score service requests for a provider, keeping input order."""
    results: list[RequestMatch] = []
    for request in requests:
        fit, reasons = request_fit.score(provider, request)
        if matched_only and fit <= request_fit.MATCHED_THRESHOLD:
            continue
        results.append(RequestMatch(request=request, score=fit, match_reasons=reasons))
    return results


def match_requests(
    provider: Provider,
    requests: Iterable[ServiceRequest],
    matched_only: bool = False,
) -> list[RequestMatch]:
    """Rank service requests for a provider, best first."""
    results = score_requests(provider, requests, matched_only=matched_only)
    results.sort(key=lambda r: r.score, reverse=True)
    logger.info(
        "Request ranking for %s: %d requests ranked (matched_only=%s)",
        provider.id or provider.name.full, len(results), matched_only,
    )
    return results
