"""Completion-rate sub-score — linear in the percentage of jobs finished."""

from __future__ import annotations


def score(completion_rate: float) -> float:
    return completion_rate / 100
