"""
Tests for the reputation composer and status derivation.

Covers determinism, clamp bounds, monotonicity in on-chain activity and
protocol maturity, the walletless penalty, and the two reference
scenarios (established protocol agent, fresh walletless submission).
"""
import inspect

from agentrep.entities.model import AgentSource, AgentStatus, Chain, OnChainSignals, Skill, Trend
from agentrep.trust.deterministic import hash_string
from agentrep.trust.engine import (
    NO_ON_CHAIN_BONUS,
    compose,
    derive_status,
    on_chain_bonus,
    protocol_base_score,
    structural_bonus,
)
from agentrep.trust.metrics import synthesize

from conftest import NOW, make_agent, make_signals, make_transfer


def score(agent, signals=None, rate=92):
    signals = signals if signals is not None else OnChainSignals()
    metrics = synthesize(
        agent, signals.total_tx, signals.balance, rate,
        seed_base=hash_string(agent.id) + 2000, now=NOW,
    )
    return compose(agent, signals, metrics, now=NOW)


class TestProtocolBase:
    def test_catalog_protocols(self):
        assert protocol_base_score(make_agent(protocol="autonolas")) == 31
        assert protocol_base_score(make_agent(protocol="virtuals")) == 28
        assert protocol_base_score(make_agent(protocol="ai-arena")) == 23

    def test_unknown_protocol_gets_default(self):
        assert protocol_base_score(make_agent(protocol="mystery-dao")) == 21

    def test_user_submitted_ignores_claimed_protocol(self):
        agent = make_agent(protocol="autonolas", source=AgentSource.USER_SUBMITTED)
        assert protocol_base_score(agent) == 19


class TestBonuses:
    def test_structural_caps(self):
        agent = make_agent(
            months_old=60,
            chains=tuple(Chain),
            skills=tuple(Skill),
        )
        bonus = structural_bonus(agent, NOW)
        assert bonus.age == 20
        assert bonus.multi_chain == 15
        assert bonus.skills == 10

    def test_structural_scaling(self):
        agent = make_agent(months_old=10, chains=(Chain.ETHEREUM, Chain.BASE), skills=(Skill.DEFI,))
        bonus = structural_bonus(agent, NOW)
        assert bonus.age == 8
        assert bonus.multi_chain == 8
        assert bonus.skills == 2.5

    def test_no_data_means_no_on_chain_bonus(self):
        assert on_chain_bonus(make_agent(), OnChainSignals()) == NO_ON_CHAIN_BONUS

    def test_walletless_means_no_on_chain_bonus(self):
        signals = make_signals({Chain.ETHEREUM: 1000}, balance_eth=5)
        assert on_chain_bonus(make_agent(wallet=None), signals).total == 0

    def test_on_chain_bonus_values(self):
        signals = make_signals({Chain.ETHEREUM: 1000, Chain.BASE: 0}, balance_eth=50)
        bonus = on_chain_bonus(make_agent(), signals)
        assert bonus.activity == 14          # round(log1p(1000) * 2)
        assert bonus.balance == 10           # capped
        assert bonus.chain_activity == 2     # one active chain
        assert bonus.total == 26


class TestCompose:
    def test_deterministic(self):
        agent = make_agent(agent_id="olas-mechs-ai")
        signals = make_signals({Chain.ETHEREUM: 300}, balance_eth=2)
        assert score(agent, signals) == score(agent, signals)

    def test_compose_is_synchronous(self):
        assert not inspect.iscoroutinefunction(compose)
        assert not inspect.iscoroutinefunction(derive_status)

    def test_bounds_hold_across_inputs(self):
        for i in range(30):
            agent = make_agent(
                agent_id=f"bounds-{i}",
                protocol=["autonolas", "ai-arena", "unknown"][i % 3],
                months_old=i * 3,
                chains=tuple(Chain)[: 1 + i % 8],
                skills=tuple(Skill)[: 1 + i % 15],
                wallet=None if i % 4 == 0 else "0xabc0000000000000000000000000000000000001",
            )
            signals = make_signals({Chain.ETHEREUM: i * i * 50}, balance_eth=i * 3)
            r = score(agent, signals)
            for sub in (r.reliability, r.accuracy, r.speed, r.trust):
                assert 25 <= sub <= 99
            assert 20 <= r.overall <= 99
            assert len(r.history_last_30_days) == 30
            assert all(20 <= v <= 99 for v in r.history_last_30_days)
            assert r.trend in (Trend.UP, Trend.DOWN, Trend.STABLE)

    def test_monotone_in_transaction_count(self):
        agent = make_agent(agent_id="monotone-agent", protocol="virtuals", months_old=8)
        scores = [
            score(agent, make_signals({Chain.ETHEREUM: tx}, balance_eth=1))
            for tx in (0, 10, 100, 1000, 10000)
        ]
        overalls = [r.overall for r in scores]
        reliability = [r.reliability for r in scores]
        assert overalls == sorted(overalls)
        assert reliability == sorted(reliability)
        assert reliability[-1] > reliability[0]
        assert overalls[-1] > overalls[0]

    def test_monotone_in_protocol_base(self):
        mature = score(make_agent(agent_id="same-id", protocol="autonolas", months_old=6))
        young = score(make_agent(agent_id="same-id", protocol="ai-arena", months_old=6))
        assert mature.overall > young.overall
        assert mature.protocol_base == 31
        assert young.protocol_base == 23

    def test_walletless_penalty(self):
        kwargs = dict(
            agent_id="penalty-agent",
            protocol="independent",
            chains=(Chain.ETHEREUM, Chain.BASE),
            skills=(Skill.DEFI, Skill.TRADING, Skill.ANALYTICS),
            months_old=24,
            source=AgentSource.USER_SUBMITTED,
        )
        walletless = score(make_agent(wallet=None, **kwargs))
        signals = make_signals(
            {Chain.ETHEREUM: 250, Chain.BASE: 250},
            balance_eth=5,
            transfers=[make_transfer(days_ago=d, index=d) for d in range(1, 6)],
        )
        with_wallet = score(make_agent(**kwargs), signals, rate=100)
        assert with_wallet.overall - walletless.overall >= 15
        assert walletless.on_chain_bonus == 0
        assert with_wallet.on_chain_bonus > 0

    def test_established_protocol_agent_scores_high(self):
        agent = make_agent(
            agent_id="olas-keeper-agent",
            protocol="autonolas",
            months_old=36,
            chains=(Chain.ETHEREUM, Chain.ARBITRUM, Chain.POLYGON),
            skills=(Skill.LENDING, Skill.DEFI, Skill.SECURITY, Skill.ORACLE, Skill.ANALYTICS),
        )
        signals = make_signals(
            {Chain.ETHEREUM: 600, Chain.ARBITRUM: 300, Chain.POLYGON: 100},
            balance_eth=50,
        )
        r = score(agent, signals, rate=95)
        assert r.overall >= 70
        assert r.reliability >= 62
        assert r.trust >= 62
        assert r.protocol_base == 31

    def test_fresh_walletless_submission_scores_low(self):
        agent = make_agent(
            agent_id="brand-new-bot",
            protocol="independent",
            months_old=1 / 30,
            chains=(Chain.BASE,),
            skills=(Skill.SOCIAL,),
            wallet=None,
            source=AgentSource.USER_SUBMITTED,
        )
        r = score(agent)
        assert 20 <= r.overall <= 45
        assert r.on_chain_bonus == 0
        assert derive_status(agent, OnChainSignals(), now=NOW) == AgentStatus.UNDER_REVIEW


class TestDeriveStatus:
    def test_recent_transfer_is_active(self):
        signals = make_signals({Chain.ETHEREUM: 5}, transfers=[make_transfer(days_ago=2)])
        assert derive_status(make_agent(), signals, now=NOW) == AgentStatus.ACTIVE

    def test_stale_on_chain_activity_is_inactive(self):
        signals = make_signals({Chain.ETHEREUM: 5}, transfers=[make_transfer(days_ago=30)])
        assert derive_status(make_agent(), signals, now=NOW) == AgentStatus.INACTIVE

    def test_walletless_is_under_review(self):
        assert derive_status(make_agent(wallet=None, months_old=40), OnChainSignals(), now=NOW) == AgentStatus.UNDER_REVIEW

    def test_established_protocol_without_data_is_active(self):
        agent = make_agent(protocol="autonolas", months_old=12)
        assert derive_status(agent, OnChainSignals(), now=NOW) == AgentStatus.ACTIVE

    def test_unverified_submission_without_data_is_under_review(self):
        agent = make_agent(source=AgentSource.USER_SUBMITTED)
        assert derive_status(agent, OnChainSignals(), now=NOW) == AgentStatus.UNDER_REVIEW

    def test_mid_tier_protocol_is_seeded(self):
        agent = make_agent(agent_id="spectral-x", protocol="spectral", months_old=1)
        status = derive_status(agent, OnChainSignals(), now=NOW)
        assert status in (AgentStatus.ACTIVE, AgentStatus.INACTIVE)
        assert status == derive_status(agent, OnChainSignals(), now=NOW)
