"""
AgentRep — Agent Activity & Stats

Dashboard stats for a scored agent. Observed on-chain data is used when
there is any; otherwise every figure is estimated from protocol maturity
and the agent's deterministic seed, so the same agent always shows the
same estimates.
"""
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from agentrep.entities.model import (
    AgentStats,
    AgentStatus,
    Chain,
    KnownAgent,
    OnChainSignals,
    Transaction,
    TransactionStatus,
    TransactionType,
    truncate_address,
    truncate_hash,
)
from agentrep.trust.deterministic import clamp, pick, rand_int, round_half_up, seeded
from agentrep.trust.engine import protocol_base_score
from agentrep.trust.tuning import DEFAULT_SCORING, ScoringConfig

# Native value of one ETH-equivalent, for display only
NATIVE_USD_PRICE = 2500

HEX_CHARS = "0123456789abcdef"

TOKENS: Dict[Chain, List[str]] = {
    Chain.ETHEREUM: ["ETH", "USDC", "USDT", "DAI", "WBTC", "LINK"],
    Chain.BASE: ["ETH", "USDC", "VIRTUAL", "DEGEN"],
    Chain.SOLANA: ["SOL", "USDC", "BONK"],
    Chain.ARBITRUM: ["ETH", "ARB", "USDC", "GMX"],
    Chain.POLYGON: ["MATIC", "USDC", "AAVE"],
    Chain.OPTIMISM: ["ETH", "OP", "USDC"],
    Chain.AVALANCHE: ["AVAX", "USDC", "JOE"],
    Chain.BNB_CHAIN: ["BNB", "USDT", "CAKE"],
}

TX_TYPES: List[TransactionType] = list(TransactionType)


def _seeded_hex(seed: int, length: int) -> str:
    return "0x" + "".join(pick(HEX_CHARS, seed + j) for j in range(length))


def generate_estimated_transactions(agent: KnownAgent, h: int, now: datetime) -> List[Transaction]:
    """8-15 plausible transactions for agents with no observed transfers, newest first."""
    count = rand_int(8, 15, h + 1000)
    txs = []
    for i in range(count):
        s = h * 100 + i
        chain = pick(agent.chains, s)
        status_roll = seeded(s + 4)
        if status_roll > 0.08:
            status = TransactionStatus.SUCCESS
        elif status_roll > 0.03:
            status = TransactionStatus.PENDING
        else:
            status = TransactionStatus.FAILED

        timestamp = now - timedelta(days=rand_int(1, 30, s + 5), hours=rand_int(0, 23, s + 6))
        counterparty = None
        if seeded(s + 100) > 0.25:
            counterparty = truncate_address(_seeded_hex(s + 80, 40))

        txs.append(Transaction(
            id=f"tx-{agent.id}-{i}",
            type=pick(TX_TYPES, s + 2),
            chain=chain,
            amount=f"${rand_int(10, 50_000, s + 3):,}",
            token=pick(TOKENS.get(chain, ["ETH", "USDC"]), s + 1),
            status=status,
            timestamp=timestamp,
            tx_hash=truncate_hash(_seeded_hex(s + 7, 64)),
            counterparty=counterparty,
        ))

    txs.sort(key=lambda t: t.timestamp, reverse=True)
    return txs


def observed_success_rate(transfers: List[Transaction]) -> Optional[int]:
    if not transfers:
        return None
    ok = len([t for t in transfers if t.status == TransactionStatus.SUCCESS])
    return round_half_up(ok / len(transfers) * 100)


def success_rate(signals: OnChainSignals, h: int) -> int:
    """Observed transfer success, else a seeded estimate in 85-99."""
    observed = observed_success_rate(signals.transfers)
    if observed is not None:
        return observed
    return clamp(85 + seeded(h + 300) * 14, 85, 99)


def estimate_total_transactions(
    agent: KnownAgent,
    signals: OnChainSignals,
    h: int,
    config: ScoringConfig = DEFAULT_SCORING,
) -> int:
    if signals.total_tx > 0:
        return signals.total_tx
    multiplier = round_half_up(50 + seeded(h + 200) * 450)
    maturity = protocol_base_score(agent, config) / config.max_protocol_score
    return round_half_up(multiplier * maturity * len(agent.chains))


def _uptime(status: AgentStatus, h: int, probe_up: Optional[bool]) -> int:
    if probe_up is True or (probe_up is None and status == AgentStatus.ACTIVE):
        return clamp(95 + seeded(h + 600) * 4.5, 95, 100)
    if probe_up is None and status == AgentStatus.INACTIVE:
        return clamp(70 + seeded(h + 700) * 20, 70, 95)
    return clamp(40 + seeded(h + 800) * 30, 40, 75)


def build_stats(
    agent: KnownAgent,
    signals: OnChainSignals,
    status: AgentStatus,
    h: int,
    rate: int,
    probe_up: Optional[bool] = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> AgentStats:
    total_tx = estimate_total_transactions(agent, signals, h, config)
    if signals.balance > 0:
        value = signals.balance * NATIVE_USD_PRICE
    else:
        value = total_tx * (20 + seeded(h + 400) * 180)

    if signals.has_data:
        active_chains = signals.active_chain_count or len(agent.chains)
    else:
        active_chains = len(agent.chains)

    return AgentStats(
        total_transactions=total_tx,
        success_rate=rate,
        total_value_processed=value,
        avg_response_time=f"{0.3 + seeded(h + 500) * 2.5:.1f}s",
        uptime=_uptime(status, h, probe_up),
        active_chains=active_chains,
    )


def last_active_at(transactions: List[Transaction], observed: bool, h: int, now: datetime) -> datetime:
    if observed and transactions:
        return transactions[0].timestamp
    return now - timedelta(seconds=round_half_up(seeded(h + 900) * 7 * 86400))
