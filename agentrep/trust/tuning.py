"""
AgentRep — Scoring Tuning Constants

Every number the scoring engine uses lives here so the model can be
re-tuned without touching the formulas in engine.py / metrics.py /
history.py. None of these values has a formal derivation; they were
tuned by eye against the known-agent catalog.

Protocol base scores (maturity, ecosystem size, audits):
    Tier 1       autonolas 31, fetch-ai 29, erc-8004 29
    Tier 2       virtuals 28, morpheus 26
    Tier 3       openclaw 25, spectral 25, wayfinder 24, ai-arena 23
    Default      unknown protocol 21
    Unverified   user-submitted 19
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class MetricBand:
    """Linear band a metric's quality maps into, plus its noise seed offset."""
    floor: float
    ceiling: float
    seed_offset: int


def _default_protocol_scores() -> Dict[str, int]:
    return {
        "autonolas": 31,
        "fetch-ai": 29,
        "erc-8004": 29,
        "virtuals": 28,
        "morpheus": 26,
        "openclaw": 25,
        "spectral": 25,
        "wayfinder": 24,
        "ai-arena": 23,
    }


def _default_metric_bands() -> Dict[str, MetricBand]:
    # latency is inverted: floor/ceiling are the multiplier at quality 1 / 0
    return {
        "task_success_rate": MetricBand(60.0, 98.0, 11),
        "robustness": MetricBand(50.0, 95.0, 12),
        "delivery_rate": MetricBand(65.0, 99.0, 13),
        "normalized_latency": MetricBand(0.05, 0.95, 14),
        "efficiency": MetricBand(45.0, 95.0, 15),
        "safety": MetricBand(55.0, 98.0, 16),
        "transparency": MetricBand(40.0, 95.0, 17),
        "user_feedback": MetricBand(50.0, 96.0, 18),
        "verifiable_execution": MetricBand(30.0, 95.0, 19),
    }


@dataclass(frozen=True)
class ScoringConfig:
    # ── Protocol base ─────────────────────────────
    protocol_scores: Mapping[str, int] = field(default_factory=_default_protocol_scores)
    default_protocol_score: int = 21
    user_submitted_protocol_score: int = 19

    # ── Structural bonuses ────────────────────────
    age_bonus_per_month: float = 0.8
    age_bonus_cap: int = 20
    chain_bonus_per_chain: float = 4.0
    chain_bonus_cap: int = 15
    skill_bonus_per_skill: float = 2.5
    skill_bonus_cap: int = 10

    # ── On-chain bonus ────────────────────────────
    activity_log_scale: float = 2.0
    activity_cap: int = 15
    balance_log_scale: float = 3.0
    balance_cap: int = 10
    active_chain_points: float = 2.0
    active_chain_cap: int = 5

    # ── Metric synthesis ──────────────────────────
    k_tx: float = 12.0
    k_balance: float = 8.0
    age_saturation_months: float = 24.0
    quality_weights: Tuple[float, float, float, float, float] = (0.30, 0.25, 0.15, 0.20, 0.10)
    metric_noise: float = 10.0
    latency_noise: float = 0.10
    latency_bounds: Tuple[float, float] = (0.05, 0.95)
    metric_bands: Mapping[str, MetricBand] = field(default_factory=_default_metric_bands)

    # ── Composition ───────────────────────────────
    reliability_offset: int = -5
    accuracy_offset: int = -3
    speed_offset: int = -5
    sub_score_noise: float = 3.0
    overall_noise: float = 4.0
    overall_weights: Tuple[float, float, float, float] = (0.30, 0.25, 0.20, 0.25)
    on_chain_weight_submitted: float = 0.5
    on_chain_weight_catalog: float = 0.3
    sub_score_range: Tuple[int, int] = (25, 99)
    overall_range: Tuple[int, int] = (20, 99)

    # ── History & trend ───────────────────────────
    history_days: int = 30
    history_start_offset: int = 3
    history_daily_delta: float = 2.0
    history_drift: float = 0.1
    history_convergence_days: int = 10
    history_convergence_strength: float = 0.35
    history_range: Tuple[int, int] = (20, 99)
    trend_window: int = 7
    trend_threshold: float = 1.5

    # ── Status ────────────────────────────────────
    recent_activity_days: int = 7
    established_protocol_score: int = 26
    established_age_months: float = 3.0
    active_probability_cutoff: float = 0.3

    def __post_init__(self):
        # read-only views
        object.__setattr__(self, "protocol_scores", MappingProxyType(dict(self.protocol_scores)))
        object.__setattr__(self, "metric_bands", MappingProxyType(dict(self.metric_bands)))

        if self.k_tx <= 0 or self.k_balance <= 0:
            raise ValueError("k_tx and k_balance must be strictly positive")
        if self.age_saturation_months <= 0:
            raise ValueError("age_saturation_months must be strictly positive")
        for name, (low, high) in (
            ("sub_score_range", self.sub_score_range),
            ("overall_range", self.overall_range),
            ("history_range", self.history_range),
            ("latency_bounds", self.latency_bounds),
        ):
            if high < low:
                raise ValueError(f"{name} is inverted: {low} > {high}")
        if abs(sum(self.quality_weights) - 1.0) > 1e-9:
            raise ValueError("quality_weights must sum to 1.0")
        if self.history_convergence_days > self.history_days:
            raise ValueError("history_convergence_days cannot exceed history_days")
        if 2 * self.trend_window > self.history_days:
            raise ValueError("history is too short for two trend windows")

    @property
    def max_protocol_score(self) -> int:
        return max(
            [self.default_protocol_score, self.user_submitted_protocol_score]
            + list(self.protocol_scores.values())
        )


DEFAULT_SCORING = ScoringConfig()
