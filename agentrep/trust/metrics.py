"""
AgentRep — Performance Metric Synthesizer

Nine behavioral metrics derived from one shared "quality" scalar plus
independent seeded noise. They are placeholders for real telemetry and
must stay reproducible: same agent, same inputs, same metrics.

    quality = 0.30 * protocol quality     (base / max base)
            + 0.25 * tx factor            min(1, log1p(tx) / K_tx)
            + 0.15 * balance factor       min(1, log1p(balance) / K_bal)
            + 0.20 * age factor           min(1, months / 24)
            + 0.10 * success rate / 100

Each metric maps quality linearly into its own band, adds +/-10 noise and
clamps to 0-100. Latency is inverted (higher quality, lower latency) and
kept in 0.05-0.95.
"""
import math
from datetime import datetime, timezone
from typing import Dict, Optional

from agentrep.entities.model import KnownAgent, PerformanceMetrics, months_between
from agentrep.trust.deterministic import seeded
from agentrep.trust.engine import protocol_base_score
from agentrep.trust.tuning import DEFAULT_SCORING, ScoringConfig


def saturating_log(value: float, k: float) -> float:
    """min(1, log1p(value) / k). Zero and negative inputs give 0."""
    if k <= 0:
        raise ValueError("saturation constant must be strictly positive")
    if value <= 0:
        return 0.0
    return min(1.0, math.log1p(value) / k)


def quality_factor(
    agent: KnownAgent,
    total_tx: int,
    balance: float,
    success_rate: float,
    now: Optional[datetime] = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> float:
    """The single 0-1 scalar every metric is derived from."""
    now = now or datetime.now(timezone.utc)
    w_protocol, w_tx, w_balance, w_age, w_success = config.quality_weights

    protocol_quality = protocol_base_score(agent, config) / config.max_protocol_score
    tx_factor = saturating_log(total_tx, config.k_tx)
    balance_factor = saturating_log(balance, config.k_balance)
    age_factor = min(1.0, months_between(agent.created_at, now) / config.age_saturation_months)
    success = max(0.0, min(100.0, success_rate)) / 100

    return (
        w_protocol * protocol_quality
        + w_tx * tx_factor
        + w_balance * balance_factor
        + w_age * age_factor
        + w_success * success
    )


def synthesize(
    agent: KnownAgent,
    total_tx: int,
    balance: float,
    success_rate: float,
    seed_base: int,
    now: Optional[datetime] = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> PerformanceMetrics:
    quality = quality_factor(agent, total_tx, balance, success_rate, now=now, config=config)

    values: Dict[str, float] = {}
    for name, band in config.metric_bands.items():
        jitter = seeded(seed_base + band.seed_offset) * 2 - 1
        if name == "normalized_latency":
            low, high = config.latency_bounds
            raw = band.ceiling - quality * (band.ceiling - band.floor)
            values[name] = round(max(low, min(high, raw + jitter * config.latency_noise)), 3)
        else:
            raw = band.floor + quality * (band.ceiling - band.floor)
            values[name] = round(max(0.0, min(100.0, raw + jitter * config.metric_noise)), 1)

    # No on-chain presence means nothing to verify execution against.
    if agent.is_walletless or agent.is_user_submitted:
        values["verifiable_execution"] = 0.0

    return PerformanceMetrics(**values)
