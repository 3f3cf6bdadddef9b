"""Match reasons — short labels explaining why a provider ranked well.

Each dimension contributes its label when its sub-score meets the
dimension's threshold. Dimensions are checked in a fixed priority order and
only the first ``MAX_REASONS`` hits are kept, regardless of which sub-score
is largest.
"""

from __future__ import annotations

from src.marketmatch.models import DimensionScores

MAX_REASONS = 3

# (dimension, threshold, label) in priority order.
# NOTE: completion uses 0.9 while every other dimension uses 0.8.
REASON_RULES: tuple[tuple[str, float, str], ...] = (
    ("location", 0.8, "Close to your location"),
    ("skills", 0.8, "Specialist in this service"),
    ("rating", 0.8, "Highly rated"),
    ("availability", 0.8, "Available now"),
    ("response_time", 0.8, "Fast response"),
    ("verification", 0.8, "Verified and approved"),
    ("completion_rate", 0.9, "High completion rate"),
)

REASON_THRESHOLDS: dict[str, float] = {dim: t for dim, t, _ in REASON_RULES}
REASON_LABELS: dict[str, str] = {dim: label for dim, _, label in REASON_RULES}


def generate_reasons(scores: DimensionScores) -> list[str]:
    reasons = [
        label for dim, threshold, label in REASON_RULES
        if getattr(scores, dim) >= threshold
    ]
    return reasons[:MAX_REASONS]
