"""
AgentRep — Reputation Composer

Turns an agent's metadata, its on-chain signals and its synthesized
performance metrics into four sub-scores and one overall score.

    Protocol base        catalog maturity score (19-31)
    Structural bonuses   age, chain count, skill count (metadata only)
    On-chain bonus       tx activity, balance, active chains (0 without data)

    reliability = base + age + chains - 5 + noise + activity
                  + robustness/10 + delivery/10                    [25, 99]
    accuracy    = base + skills - 3 + noise
                  + task_success/10 + verifiable/10                [25, 99]
    speed       = base - 5 + chains + noise
                  + (1 - latency)*10 + efficiency/10               [25, 99]
    trust       = base + age + noise + balance
                  + safety/10 + transparency/10 + feedback/10      [25, 99]

    overall     = 0.30 r + 0.25 a + 0.20 s + 0.25 t
                  + on_chain_bonus * (0.5 submitted | 0.3 catalog)
                  + noise(+/-4)                                    [20, 99]

The on-chain bonus shows up inside the sub-scores and again in the
overall formula, so verified activity widens the gap to unverified
agents. Missing data never raises; it only zeroes terms.

Everything in this module is pure and synchronous.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from agentrep.entities.model import (
    AgentStatus,
    KnownAgent,
    OnChainSignals,
    PerformanceMetrics,
    ReputationScore,
    months_between,
)
from agentrep.trust.deterministic import clamp, hash_string, noise, round_half_up, seeded
from agentrep.trust.history import generate_history
from agentrep.trust.tuning import DEFAULT_SCORING, ScoringConfig


# ── Protocol base ─────────────────────────────────

def protocol_base_score(agent: KnownAgent, config: ScoringConfig = DEFAULT_SCORING) -> int:
    """User submissions are unverified until proven, whatever protocol they claim."""
    if agent.is_user_submitted:
        return config.user_submitted_protocol_score
    return config.protocol_scores.get(agent.protocol, config.default_protocol_score)


# ── Bonuses ───────────────────────────────────────

@dataclass(frozen=True)
class StructuralBonus:
    age: int
    multi_chain: int
    skills: float


@dataclass(frozen=True)
class OnChainBonus:
    activity: int
    balance: int
    chain_activity: int

    @property
    def total(self) -> int:
        return self.activity + self.balance + self.chain_activity


NO_ON_CHAIN_BONUS = OnChainBonus(activity=0, balance=0, chain_activity=0)


def structural_bonus(
    agent: KnownAgent,
    now: datetime,
    config: ScoringConfig = DEFAULT_SCORING,
) -> StructuralBonus:
    months = months_between(agent.created_at, now)
    return StructuralBonus(
        age=min(config.age_bonus_cap, round_half_up(months * config.age_bonus_per_month)),
        multi_chain=min(config.chain_bonus_cap, round_half_up(len(agent.chains) * config.chain_bonus_per_chain)),
        skills=min(float(config.skill_bonus_cap), len(agent.skills) * config.skill_bonus_per_skill),
    )


def on_chain_bonus(
    agent: KnownAgent,
    signals: OnChainSignals,
    config: ScoringConfig = DEFAULT_SCORING,
) -> OnChainBonus:
    if agent.is_walletless or not signals.has_data:
        return NO_ON_CHAIN_BONUS
    return OnChainBonus(
        activity=min(config.activity_cap, round_half_up(math.log1p(signals.total_tx) * config.activity_log_scale)),
        balance=min(config.balance_cap, round_half_up(math.log1p(signals.balance) * config.balance_log_scale)),
        chain_activity=min(
            config.active_chain_cap,
            round_half_up(signals.active_chain_count * config.active_chain_points),
        ),
    )


# ── Composition ───────────────────────────────────

def compose(
    agent: KnownAgent,
    signals: OnChainSignals,
    metrics: PerformanceMetrics,
    now: Optional[datetime] = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> ReputationScore:
    now = now or datetime.now(timezone.utc)
    h = hash_string(agent.id)
    base = protocol_base_score(agent, config)
    structural = structural_bonus(agent, now, config)
    chain = on_chain_bonus(agent, signals, config)
    sub_low, sub_high = config.sub_score_range
    jitter = config.sub_score_noise

    reliability = clamp(
        base + structural.age + structural.multi_chain + config.reliability_offset
        + noise(h + 1, jitter) + chain.activity
        + metrics.robustness / 10 + metrics.delivery_rate / 10,
        sub_low, sub_high,
    )
    accuracy = clamp(
        base + structural.skills + config.accuracy_offset
        + noise(h + 2, jitter)
        + metrics.task_success_rate / 10 + metrics.verifiable_execution / 10,
        sub_low, sub_high,
    )
    speed = clamp(
        base + config.speed_offset + structural.multi_chain
        + noise(h + 3, jitter)
        + (1 - metrics.normalized_latency) * 10 + metrics.efficiency / 10,
        sub_low, sub_high,
    )
    trust = clamp(
        base + structural.age + noise(h + 4, jitter) + chain.balance
        + metrics.safety / 10 + metrics.transparency / 10 + metrics.user_feedback / 10,
        sub_low, sub_high,
    )

    w_rel, w_acc, w_speed, w_trust = config.overall_weights
    chain_weight = (
        config.on_chain_weight_submitted if agent.is_user_submitted else config.on_chain_weight_catalog
    )
    raw_overall = (
        round_half_up(reliability * w_rel + accuracy * w_acc + speed * w_speed + trust * w_trust)
        + round_half_up(chain.total * chain_weight)
        + noise(h + 5, config.overall_noise)
    )
    overall = clamp(raw_overall, *config.overall_range)

    history = generate_history(overall, h, config)

    return ReputationScore(
        overall=overall,
        reliability=reliability,
        accuracy=accuracy,
        speed=speed,
        trust=trust,
        trend=history.trend,
        history_last_30_days=history.history,
        protocol_base=base,
        on_chain_bonus=chain.total,
    )


# ── Status ────────────────────────────────────────

def derive_status(
    agent: KnownAgent,
    signals: OnChainSignals,
    now: Optional[datetime] = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> AgentStatus:
    """
    Observed activity wins when there is any. Otherwise the agent's
    status is estimated from protocol maturity and age. Walletless agents
    stay under review until they show something verifiable.
    """
    now = now or datetime.now(timezone.utc)

    if not agent.is_walletless and signals.has_data:
        cutoff = now - timedelta(days=config.recent_activity_days)
        if any(tx.timestamp >= cutoff for tx in signals.transfers):
            return AgentStatus.ACTIVE
        return AgentStatus.INACTIVE

    if agent.is_walletless:
        return AgentStatus.UNDER_REVIEW

    base = protocol_base_score(agent, config)
    if base >= config.established_protocol_score and months_between(agent.created_at, now) > config.established_age_months:
        return AgentStatus.ACTIVE
    if base >= config.default_protocol_score:
        if seeded(hash_string(agent.id) + 100) > config.active_probability_cutoff:
            return AgentStatus.ACTIVE
        return AgentStatus.INACTIVE
    return AgentStatus.UNDER_REVIEW
