"""
AgentRep — Ecosystem Stats
Read-only aggregate over the full scored registry for the dashboard.
"""
import math
from collections import Counter
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence

from agentrep.entities.model import (
    AgentStatus,
    Chain,
    EcosystemStats,
    ScoredAgent,
    Skill,
    format_usd_value,
)
from agentrep.trust.deterministic import round_half_up

# (label, lower exclusive, upper inclusive)
DISTRIBUTION_BUCKETS = [
    ("0-20", None, 20),
    ("21-40", 20, 40),
    ("41-60", 40, 60),
    ("61-80", 60, 80),
    ("81-100", 80, None),
]

DAILY_SERIES_DAYS = 30


def reputation_distribution(agents: Sequence[ScoredAgent]) -> List[Dict[str, object]]:
    buckets = []
    for label, low, high in DISTRIBUTION_BUCKETS:
        count = 0
        for a in agents:
            score = a.reputation.overall
            if (low is None or score > low) and (high is None or score <= high):
                count += 1
        buckets.append({"range": label, "count": count})
    return buckets


def daily_transactions(total_tx: int, today: datetime) -> List[Dict[str, object]]:
    """30 synthetic daily points around the mean, oldest first."""
    avg_daily = max(1, round_half_up(total_tx / DAILY_SERIES_DAYS))
    series = []
    for i in range(DAILY_SERIES_DAYS - 1, -1, -1):
        day = today - timedelta(days=i)
        series.append({
            "date": day.date().isoformat(),
            "count": round_half_up(avg_daily + math.sin(i * 0.3) * avg_daily * 0.3),
        })
    return series


def compute_ecosystem_stats(
    agents: Sequence[ScoredAgent],
    today: Optional[datetime] = None,
) -> EcosystemStats:
    today = today or datetime.now(timezone.utc)

    by_chain: Dict[Chain, int] = {c: 0 for c in Chain}
    skill_counts: Counter = Counter()
    for a in agents:
        for c in a.chains:
            by_chain[c] += 1
        skill_counts.update(a.skills)
    by_skill: Dict[Skill, int] = {s: skill_counts[s] for s in Skill if skill_counts[s]}

    total_tx = sum(a.stats.total_transactions for a in agents)
    total_value = sum(a.stats.total_value_processed for a in agents)
    avg_rep = round_half_up(sum(a.reputation.overall for a in agents) / len(agents)) if agents else 0

    top_chain = None
    if agents:
        # first-declared chain wins ties
        top_chain = max(by_chain, key=lambda c: by_chain[c])

    return EcosystemStats(
        total_agents=len(agents),
        active_agents=len([a for a in agents if a.status == AgentStatus.ACTIVE]),
        total_transactions=total_tx,
        total_value_processed=f"${format_usd_value(total_value)}",
        average_reputation=avg_rep,
        top_chain=top_chain,
        agents_by_chain=by_chain,
        agents_by_skill=by_skill,
        reputation_distribution=reputation_distribution(agents),
        daily_transactions=daily_transactions(total_tx, today),
    )
