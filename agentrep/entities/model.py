"""
AgentRep — Agent Model

The KnownAgent is the core primitive: an identity to be scored. It comes
either from the curated protocol catalog or from a user submission.
Everything else in this module is derived from it on each rebuild and
never mutated in place.

    KnownAgent ──(on-chain signals)──> OnChainSignals
               ──(synthesis)─────────> PerformanceMetrics
               ──(composition)───────> ReputationScore
               ──(assembly)──────────> ScoredAgent
"""
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, List, Dict, Any, Tuple


# ── Enums ─────────────────────────────────────────

class Chain(str, Enum):
    ETHEREUM  = "ethereum"
    BASE      = "base"
    SOLANA    = "solana"
    ARBITRUM  = "arbitrum"
    POLYGON   = "polygon"
    OPTIMISM  = "optimism"
    AVALANCHE = "avalanche"
    BNB_CHAIN = "bnb-chain"

    @property
    def is_evm(self) -> bool:
        return self is not Chain.SOLANA


class Skill(str, Enum):
    DEFI       = "DeFi"
    RESEARCH   = "Research"
    CONTENT    = "Content"
    SECURITY   = "Security"
    TRADING    = "Trading"
    ANALYTICS  = "Analytics"
    GOVERNANCE = "Governance"
    NFT        = "NFT"
    BRIDGE     = "Bridge"
    ORACLE     = "Oracle"
    MEV        = "MEV"
    YIELD      = "Yield"
    LENDING    = "Lending"
    INSURANCE  = "Insurance"
    SOCIAL     = "Social"


class AgentSource(str, Enum):
    CATALOG        = "catalog"
    USER_SUBMITTED = "user-submitted"


class AgentStatus(str, Enum):
    ACTIVE       = "active"
    INACTIVE     = "inactive"
    UNDER_REVIEW = "under-review"


class Trend(str, Enum):
    UP     = "up"
    DOWN   = "down"
    STABLE = "stable"


class TransactionType(str, Enum):
    SWAP       = "swap"
    TRANSFER   = "transfer"
    STAKE      = "stake"
    BRIDGE     = "bridge"
    GOVERNANCE = "governance"
    MINT       = "mint"
    LEND       = "lend"
    BORROW     = "borrow"


class TransactionStatus(str, Enum):
    SUCCESS = "success"
    PENDING = "pending"
    FAILED  = "failed"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp (trailing Z allowed) into an aware datetime."""
    dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def months_between(start: datetime, end: datetime) -> float:
    """Age in 30-day months. Never negative."""
    return max(0.0, (end - start).total_seconds() / (86400 * 30))


def format_usd_value(value: float) -> str:
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return f"{value:.2f}"


def truncate_address(addr: Optional[str]) -> str:
    if not addr or len(addr) < 10:
        return addr or "Unknown"
    return f"{addr[:6]}...{addr[-4:]}"


def truncate_hash(tx_hash: Optional[str]) -> str:
    if not tx_hash or len(tx_hash) < 14:
        return tx_hash or ""
    return f"{tx_hash[:10]}...{tx_hash[-6:]}"


# ── Identity ──────────────────────────────────────

@dataclass(frozen=True)
class KnownAgent:
    id: str
    name: str
    protocol: str
    chains: Tuple[Chain, ...]
    skills: Tuple[Skill, ...]
    created_at: datetime
    wallet_address: Optional[str] = None
    description: str = ""
    website: Optional[str] = None
    twitter: Optional[str] = None
    source: AgentSource = AgentSource.CATALOG

    @property
    def is_walletless(self) -> bool:
        return not self.wallet_address

    @property
    def is_user_submitted(self) -> bool:
        return self.source == AgentSource.USER_SUBMITTED

    @property
    def evm_chains(self) -> List[Chain]:
        return [c for c in self.chains if c.is_evm]


@dataclass(frozen=True)
class ProtocolInfo:
    id: str
    name: str
    description: str
    website: str
    chains: Tuple[Chain, ...]
    token_symbol: str
    twitter: Optional[str] = None


@dataclass(frozen=True)
class ChainInfo:
    id: Chain
    name: str
    color: str


# ── On-chain signals ──────────────────────────────

@dataclass(frozen=True)
class Transaction:
    id: str
    type: TransactionType
    chain: Chain
    amount: str
    token: str
    status: TransactionStatus
    timestamp: datetime
    tx_hash: str
    counterparty: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "chain": self.chain.value,
            "amount": self.amount,
            "token": self.token,
            "status": self.status.value,
            "timestamp": self.timestamp.isoformat(),
            "tx_hash": self.tx_hash,
            "counterparty": self.counterparty,
        }


@dataclass(frozen=True)
class ChainBalance:
    chain: Chain
    amount: int  # base units (wei)


WEI_PER_NATIVE = 10 ** 18


@dataclass
class OnChainSignals:
    """
    Raw facts fetched for one agent in one cache cycle. No scoring here.
    A chain that failed to answer contributes zero and is listed in
    `failures`.
    """
    tx_counts: Dict[Chain, int] = field(default_factory=dict)
    balances: List[ChainBalance] = field(default_factory=list)
    transfers: List[Transaction] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)

    @property
    def total_tx(self) -> int:
        return sum(self.tx_counts.values())

    @property
    def total_balance_wei(self) -> int:
        return sum(b.amount for b in self.balances)

    @property
    def balance(self) -> float:
        """Aggregate native balance in display units (ETH-equivalent)."""
        return self.total_balance_wei / WEI_PER_NATIVE

    @property
    def active_chain_count(self) -> int:
        return len([c for c in self.tx_counts.values() if c > 0])

    @property
    def has_data(self) -> bool:
        return self.total_tx > 0 or self.total_balance_wei > 0


# ── Scores ────────────────────────────────────────

@dataclass(frozen=True)
class PerformanceMetrics:
    """
    Nine synthetic behavioral indicators. All are 0-100 except
    normalized_latency, a 0.05-0.95 multiplier where lower is better.
    """
    task_success_rate: float
    robustness: float
    delivery_rate: float
    normalized_latency: float
    efficiency: float
    safety: float
    transparency: float
    user_feedback: float
    verifiable_execution: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ReputationScore:
    overall: int
    reliability: int
    accuracy: int
    speed: int
    trust: int
    trend: Trend
    history_last_30_days: Tuple[int, ...]
    protocol_base: int = 0
    on_chain_bonus: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall": self.overall,
            "reliability": self.reliability,
            "accuracy": self.accuracy,
            "speed": self.speed,
            "trust": self.trust,
            "trend": self.trend.value,
            "history_last_30_days": list(self.history_last_30_days),
            "protocol_base": self.protocol_base,
            "on_chain_bonus": self.on_chain_bonus,
        }


@dataclass(frozen=True)
class AgentStats:
    total_transactions: int
    success_rate: int
    total_value_processed: float
    avg_response_time: str
    uptime: int
    active_chains: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_transactions": self.total_transactions,
            "success_rate": self.success_rate,
            "total_value_processed": f"${format_usd_value(self.total_value_processed)}",
            "avg_response_time": self.avg_response_time,
            "uptime": self.uptime,
            "active_chains": self.active_chains,
        }


@dataclass(frozen=True)
class DataProvenance:
    on_chain: bool
    protocol: bool
    performance_metrics: bool = True
    uptime_monitoring: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)


@dataclass(frozen=True)
class ScoredAgent:
    id: str
    name: str
    description: str
    avatar: str
    status: AgentStatus
    chains: Tuple[Chain, ...]
    skills: Tuple[Skill, ...]
    reputation: ReputationScore
    metrics: PerformanceMetrics
    stats: AgentStats
    transactions: Tuple[Transaction, ...]
    provenance: DataProvenance
    created_at: datetime
    last_active_at: datetime
    wallet_address: Optional[str]
    source: AgentSource
    protocol: str
    website: Optional[str] = None
    twitter: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "avatar": self.avatar,
            "status": self.status.value,
            "protocol": self.protocol,
            "source": self.source.value,
            "chains": [c.value for c in self.chains],
            "skills": [s.value for s in self.skills],
            "reputation": self.reputation.to_dict(),
            "metrics": self.metrics.to_dict(),
            "stats": self.stats.to_dict(),
            "transactions": [t.to_dict() for t in self.transactions],
            "provenance": self.provenance.to_dict(),
            "created_at": self.created_at.isoformat(),
            "last_active_at": self.last_active_at.isoformat(),
            "wallet_address": self.wallet_address,
            "website": self.website,
            "twitter": self.twitter,
        }


@dataclass(frozen=True)
class EcosystemStats:
    total_agents: int
    active_agents: int
    total_transactions: int
    total_value_processed: str
    average_reputation: int
    top_chain: Optional[Chain]
    agents_by_chain: Dict[Chain, int]
    agents_by_skill: Dict[Skill, int]
    reputation_distribution: List[Dict[str, Any]]
    daily_transactions: List[Dict[str, Any]]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_agents": self.total_agents,
            "active_agents": self.active_agents,
            "total_transactions": self.total_transactions,
            "total_value_processed": self.total_value_processed,
            "average_reputation": self.average_reputation,
            "top_chain": self.top_chain.value if self.top_chain else None,
            "agents_by_chain": {c.value: n for c, n in self.agents_by_chain.items()},
            "agents_by_skill": {s.value: n for s, n in self.agents_by_skill.items()},
            "reputation_distribution": self.reputation_distribution,
            "daily_transactions": self.daily_transactions,
        }
