"""Tests for ecosystem-wide aggregates."""
from datetime import date

from agentrep.compute.pipeline import score_agent
from agentrep.compute.stats import compute_ecosystem_stats, daily_transactions, reputation_distribution
from agentrep.entities.model import AgentSource, AgentStatus, Chain, OnChainSignals, Skill

from conftest import NOW, make_agent, make_signals, make_transfer


def scored_registry():
    agents = [
        make_agent(agent_id="a1", chains=(Chain.ETHEREUM, Chain.BASE), skills=(Skill.DEFI, Skill.TRADING)),
        make_agent(agent_id="a2", chains=(Chain.BASE,), skills=(Skill.DEFI,), months_old=30),
        make_agent(agent_id="a3", chains=(Chain.SOLANA,), skills=(Skill.SOCIAL,), wallet=None,
                   source=AgentSource.USER_SUBMITTED, months_old=0.1),
    ]
    signals = {
        "a1": make_signals({Chain.ETHEREUM: 400}, balance_eth=3, transfers=[make_transfer(days_ago=1)]),
        "a2": OnChainSignals(),
        "a3": OnChainSignals(),
    }
    return [score_agent(a, signals[a.id], now=NOW) for a in agents]


def test_totals():
    agents = scored_registry()
    stats = compute_ecosystem_stats(agents, today=NOW)

    assert stats.total_agents == 3
    assert stats.active_agents == len([a for a in agents if a.status == AgentStatus.ACTIVE])
    assert stats.total_transactions == sum(a.stats.total_transactions for a in agents)
    assert stats.total_value_processed.startswith("$")
    expected_avg = sum(a.reputation.overall for a in agents) / 3
    assert abs(stats.average_reputation - expected_avg) <= 0.5


def test_chain_counts_zero_filled():
    stats = compute_ecosystem_stats(scored_registry(), today=NOW)
    assert set(stats.agents_by_chain) == set(Chain)
    assert stats.agents_by_chain[Chain.BASE] == 2
    assert stats.agents_by_chain[Chain.AVALANCHE] == 0
    assert stats.top_chain == Chain.BASE
    assert stats.agents_by_skill[Skill.DEFI] == 2
    assert Skill.NFT not in stats.agents_by_skill


def test_distribution_covers_every_agent():
    agents = scored_registry()
    buckets = reputation_distribution(agents)
    assert [b["range"] for b in buckets] == ["0-20", "21-40", "41-60", "61-80", "81-100"]
    assert sum(b["count"] for b in buckets) == len(agents)


def test_daily_series_oldest_first():
    series = daily_transactions(3000, NOW)
    assert len(series) == 30
    assert series[0]["date"] == "2026-01-17"
    assert series[-1]["date"] == date(2026, 2, 15).isoformat()
    # i = 0 on the last day: sin(0) = 0
    assert series[-1]["count"] == 100


def test_empty_registry():
    stats = compute_ecosystem_stats([], today=NOW)
    assert stats.total_agents == 0
    assert stats.average_reputation == 0
    assert stats.top_chain is None
    assert all(n == 0 for n in stats.agents_by_chain.values())
    assert len(stats.daily_transactions) == 30
    assert stats.to_dict()["top_chain"] is None
