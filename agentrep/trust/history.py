"""
AgentRep — History & Trend Generator

Builds a synthetic 30-day score series for an agent. The walk starts a
few points below the live score, moves by a seeded daily delta plus a
constant per-agent drift, and over the final third is pulled part of
the way toward the live score each day. The last point converges on the
live score but is never set to it.
"""
from typing import NamedTuple, Sequence, Tuple

from agentrep.entities.model import Trend
from agentrep.trust.deterministic import clamp, seeded
from agentrep.trust.tuning import DEFAULT_SCORING, ScoringConfig


class ScoreHistory(NamedTuple):
    history: Tuple[int, ...]
    trend: Trend


def classify_trend(
    history: Sequence[float],
    window: int = DEFAULT_SCORING.trend_window,
    threshold: float = DEFAULT_SCORING.trend_threshold,
) -> Trend:
    """Mean of the last `window` points vs the `window` points before them."""
    if len(history) < 2 * window:
        return Trend.STABLE
    recent = sum(history[-window:]) / window
    older = sum(history[-2 * window:-window]) / window
    delta = recent - older
    if delta > threshold:
        return Trend.UP
    if delta < -threshold:
        return Trend.DOWN
    return Trend.STABLE


def generate_history(
    overall: int,
    seed_base: int,
    config: ScoringConfig = DEFAULT_SCORING,
) -> ScoreHistory:
    low, high = config.history_range
    days = config.history_days
    pull_start = days - config.history_convergence_days
    drift = config.history_drift if seeded(seed_base + 50) > 0.5 else -config.history_drift

    score = float(overall - config.history_start_offset)
    history = []
    for day in range(days):
        delta = seeded(seed_base * 100 + day) * 2 * config.history_daily_delta - config.history_daily_delta
        score += delta + drift

        step = day - pull_start + 1
        if step > 0:
            pull = config.history_convergence_strength * step / config.history_convergence_days
            score += (overall - score) * pull

        score = max(float(low), min(float(high), score))
        history.append(clamp(score, low, high))

    trend = classify_trend(history, config.trend_window, config.trend_threshold)
    return ScoreHistory(tuple(history), trend)
