"""Shared fixtures and fakes for the AgentRep test suite."""
import asyncio
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence

import pytest

from agentrep.compute.rpc import RpcError
from agentrep.config import Settings
from agentrep.entities.model import (
    AgentSource,
    Chain,
    ChainBalance,
    KnownAgent,
    OnChainSignals,
    Skill,
    Transaction,
    TransactionStatus,
    TransactionType,
    WEI_PER_NATIVE,
)

NOW = datetime(2026, 2, 15, 12, 0, tzinfo=timezone.utc)
WALLET = "0x89c5cc945dd550BcFfb72Fe42BfF002429F46Fec"


def make_agent(
    agent_id: str = "test-agent",
    protocol: str = "autonolas",
    chains: Sequence[Chain] = (Chain.ETHEREUM,),
    skills: Sequence[Skill] = (Skill.DEFI,),
    months_old: float = 12,
    wallet: Optional[str] = WALLET,
    source: AgentSource = AgentSource.CATALOG,
    website: Optional[str] = None,
) -> KnownAgent:
    """Create a test agent aged relative to NOW."""
    return KnownAgent(
        id=agent_id,
        name=agent_id.replace("-", " ").title(),
        protocol=protocol,
        chains=tuple(chains),
        skills=tuple(skills),
        created_at=NOW - timedelta(days=30 * months_old),
        wallet_address=wallet,
        description="test agent",
        website=website,
        source=source,
    )


def make_transfer(
    days_ago: float = 1,
    chain: Chain = Chain.ETHEREUM,
    status: TransactionStatus = TransactionStatus.SUCCESS,
    index: int = 0,
) -> Transaction:
    return Transaction(
        id=f"tx-{index}",
        type=TransactionType.TRANSFER,
        chain=chain,
        amount="$100.00",
        token="USDC",
        status=status,
        timestamp=NOW - timedelta(days=days_ago),
        tx_hash="0xabc...def",
        counterparty="0x1234...5678",
    )


def make_signals(
    tx_counts: Optional[Dict[Chain, int]] = None,
    balance_eth: float = 0,
    transfers: Optional[List[Transaction]] = None,
) -> OnChainSignals:
    """On-chain signals; balance is placed on ethereum."""
    balances = []
    if balance_eth:
        balances.append(ChainBalance(Chain.ETHEREUM, int(balance_eth * WEI_PER_NATIVE)))
    return OnChainSignals(
        tx_counts=dict(tx_counts or {}),
        balances=balances,
        transfers=list(transfers or []),
    )


class FakeRpc:
    """
    In-process stand-in for AnkrRpcClient.

    `balances` / `nonces` map chain -> wei / count. A chain listed in
    `failing` raises RpcError; one in `slow` sleeps past any test timeout.
    """

    def __init__(
        self,
        balances: Optional[Dict[Chain, int]] = None,
        nonces: Optional[Dict[Chain, int]] = None,
        transfers: Optional[List[Transaction]] = None,
        failing: Sequence[Chain] = (),
        slow: Sequence[Chain] = (),
        transfers_fail: bool = False,
    ):
        self.balances = balances or {}
        self.nonces = nonces or {}
        self.transfers = transfers or []
        self.failing = set(failing)
        self.slow = set(slow)
        self.transfers_fail = transfers_fail
        self.calls: List[tuple] = []

    async def _maybe_fail(self, method: str, chain: Chain) -> None:
        if chain in self.failing:
            raise RpcError(method, "upstream error", chain)
        if chain in self.slow:
            await asyncio.sleep(5)

    async def get_balance(self, chain: Chain, address: str) -> int:
        self.calls.append(("balance", chain, address))
        await self._maybe_fail("eth_getBalance", chain)
        return self.balances.get(chain, 0)

    async def get_transaction_count(self, chain: Chain, address: str) -> int:
        self.calls.append(("tx_count", chain, address))
        await self._maybe_fail("eth_getTransactionCount", chain)
        return self.nonces.get(chain, 0)

    async def get_recent_transfers(self, address: str, chains: Sequence[Chain]) -> List[Transaction]:
        self.calls.append(("transfers", tuple(chains), address))
        if self.transfers_fail:
            raise RpcError("ankr_getTokenTransfers", "upstream error")
        return list(self.transfers)


class FakeStore:
    """Submission store returning a fixed list, or raising."""

    def __init__(self, agents: Optional[List[KnownAgent]] = None, error: Optional[Exception] = None):
        self.agents = agents or []
        self.error = error
        self.calls = 0

    async def list_submitted_agents(self) -> List[KnownAgent]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.agents)


@pytest.fixture
def settings() -> Settings:
    s = Settings()
    s.ANKR_RPC_URL = "https://rpc.test"
    s.ANKR_MULTICHAIN_URL = "https://rpc.test/multichain"
    s.SUPABASE_URL = ""
    s.SUPABASE_ANON_KEY = ""
    s.CACHE_TTL_SECONDS = 300
    s.BUILD_BATCH_SIZE = 5
    s.RPC_TIMEOUT_SECONDS = 8
    s.TRANSFER_PAGE_SIZE = 15
    s.UPTIME_CHECKS_ENABLED = False
    s.REVALIDATION_SECRET = ""
    return s
