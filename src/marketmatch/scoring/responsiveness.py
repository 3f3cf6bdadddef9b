"""Responsiveness sub-score — step function over average response time."""

from __future__ import annotations

# (upper bound in hours, score); checked in order, inclusive.
RESPONSE_BANDS: tuple[tuple[float, float], ...] = (
    (1.0, 1.0),
    (4.0, 0.8),
    (24.0, 0.6),
)
SLOW_RESPONSE_SCORE = 0.3
UNKNOWN_RESPONSE_SCORE = 0.0


def score(average_response_time_minutes: int | None) -> float:
    if average_response_time_minutes is None:
        return UNKNOWN_RESPONSE_SCORE
    hours = average_response_time_minutes / 60
    for limit, band_score in RESPONSE_BANDS:
        if hours <= limit:
            return band_score
    return SLOW_RESPONSE_SCORE
