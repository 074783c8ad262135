"""Tests for performance metric synthesis."""
import dataclasses

import pytest

from agentrep.entities.model import AgentSource, Chain
from agentrep.trust.deterministic import hash_string
from agentrep.trust.metrics import quality_factor, saturating_log, synthesize
from agentrep.trust.tuning import DEFAULT_SCORING

from conftest import NOW, make_agent

PERCENT_METRICS = [
    "task_success_rate", "robustness", "delivery_rate", "efficiency",
    "safety", "transparency", "user_feedback", "verifiable_execution",
]


def _synth(agent, tx=0, balance=0.0, rate=92):
    return synthesize(agent, tx, balance, rate, seed_base=hash_string(agent.id) + 2000, now=NOW)


class TestSaturatingLog:
    def test_zero_and_negative_give_zero(self):
        assert saturating_log(0, 12) == 0.0
        assert saturating_log(-5, 12) == 0.0

    def test_saturates_at_one(self):
        assert saturating_log(10 ** 12, 12) == 1.0

    def test_non_positive_constant_rejected(self):
        with pytest.raises(ValueError):
            saturating_log(10, 0)


class TestQualityFactor:
    def test_bounded(self):
        low = quality_factor(make_agent(protocol="unknown", months_old=0), 0, 0, 0, now=NOW)
        high = quality_factor(make_agent(months_old=48), 10 ** 9, 10 ** 6, 100, now=NOW)
        assert 0.0 <= low < high <= 1.0
        assert high == pytest.approx(1.0)

    def test_monotone_in_transactions(self):
        agent = make_agent()
        values = [quality_factor(agent, tx, 1.0, 90, now=NOW) for tx in (0, 10, 100, 1000, 10000)]
        assert values == sorted(values)
        assert values[0] < values[-1]

    def test_monotone_in_protocol_maturity(self):
        arena = quality_factor(make_agent(protocol="ai-arena"), 100, 1.0, 90, now=NOW)
        olas = quality_factor(make_agent(protocol="autonolas"), 100, 1.0, 90, now=NOW)
        assert olas > arena


class TestSynthesize:
    def test_bounds_hold(self):
        for i in range(40):
            agent = make_agent(agent_id=f"agent-{i}", months_old=i)
            m = _synth(agent, tx=i * 97, balance=i * 0.7, rate=85 + i % 15)
            for name in PERCENT_METRICS:
                assert 0.0 <= getattr(m, name) <= 100.0, name
            assert 0.05 <= m.normalized_latency <= 0.95

    def test_deterministic(self):
        agent = make_agent(agent_id="olas-mechs-ai")
        assert _synth(agent, 500, 2.0) == _synth(agent, 500, 2.0)

    def test_walletless_has_no_verifiable_execution(self):
        agent = make_agent(wallet=None)
        assert _synth(agent).verifiable_execution == 0.0

    def test_user_submitted_has_no_verifiable_execution(self):
        agent = make_agent(source=AgentSource.USER_SUBMITTED)
        assert _synth(agent, 500, 2.0).verifiable_execution == 0.0

    def test_catalog_agent_keeps_verifiable_execution(self):
        agent = make_agent(months_old=36, chains=(Chain.ETHEREUM, Chain.BASE))
        assert _synth(agent, 1000, 10.0, 98).verifiable_execution > 0.0

    def test_better_signals_lift_metrics(self):
        agent = make_agent(agent_id="steady-agent", months_old=24)
        weak = _synth(agent, 0, 0.0, 85)
        strong = _synth(agent, 50_000, 500.0, 99)
        for name in PERCENT_METRICS:
            assert getattr(strong, name) >= getattr(weak, name), name
        assert strong.normalized_latency <= weak.normalized_latency

    def test_custom_bands_are_honoured(self):
        bands = dict(DEFAULT_SCORING.metric_bands)
        bands["safety"] = dataclasses.replace(bands["safety"], floor=100.0, ceiling=100.0)
        config = dataclasses.replace(DEFAULT_SCORING, metric_bands=bands, metric_noise=0.0)
        agent = make_agent()
        m = synthesize(agent, 10, 1.0, 90, seed_base=1, now=NOW, config=config)
        assert m.safety == 100.0
