"""
AgentRep — Scoring Pipeline

Every agent on the dashboard flows through here:

    Resolve registry → [Fetch on-chain signals] → Synthesize metrics
        → Compose reputation → Status / stats → Cache → Response

    - Cache-first: a fresh snapshot is served as-is (TTL 5 min)
    - Agents are built in batches of 5, each batch fully concurrent
    - Inside an agent, every chain call is settled independently
    - An agent whose build throws is dropped, not the batch
    - Sorting by overall score happens only after all batches resolve

Only the fetch step suspends. score_agent() is pure and synchronous: same
agent + same signals + same clock = same ScoredAgent.
"""
import asyncio
import time
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

import structlog

from agentrep.compute.activity import (
    build_stats,
    generate_estimated_transactions,
    last_active_at,
    success_rate,
)
from agentrep.compute.cache import RegistryCache
from agentrep.compute.collectors import DEFAULT_TIMEOUT, fetch_on_chain_signals
from agentrep.compute.rpc import AnkrRpcClient
from agentrep.compute.stats import compute_ecosystem_stats
from agentrep.compute.uptime import UptimeMonitor, UptimeResult
from agentrep.config import Settings, get_settings
from agentrep.entities.model import (
    DataProvenance,
    EcosystemStats,
    KnownAgent,
    OnChainSignals,
    ScoredAgent,
    truncate_address,
)
from agentrep.registry.protocols import PROTOCOL_MAP
from agentrep.registry.resolver import RegistryResolver
from agentrep.registry.submissions import SupabaseSubmissionStore
from agentrep.trust.deterministic import hash_string
from agentrep.trust.engine import compose, derive_status
from agentrep.trust.metrics import synthesize
from agentrep.trust.tuning import DEFAULT_SCORING, ScoringConfig

logger = structlog.get_logger()

AVATAR_URL = "https://api.dicebear.com/7.x/bottts-neutral/svg?seed={id}"
METRIC_SEED_OFFSET = 2000


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================
# PURE SCORING
# =============================================

def score_agent(
    known: KnownAgent,
    signals: OnChainSignals,
    now: Optional[datetime] = None,
    uptime: Optional[UptimeResult] = None,
    config: ScoringConfig = DEFAULT_SCORING,
) -> ScoredAgent:
    now = now or _utcnow()
    h = hash_string(known.id)

    rate = success_rate(signals, h)
    metrics = synthesize(
        known,
        total_tx=signals.total_tx,
        balance=signals.balance,
        success_rate=rate,
        seed_base=h + METRIC_SEED_OFFSET,
        now=now,
        config=config,
    )
    reputation = compose(known, signals, metrics, now=now, config=config)
    status = derive_status(known, signals, now=now, config=config)
    stats = build_stats(known, signals, status, h, rate, probe_up=uptime.is_up if uptime else None, config=config)

    observed = bool(signals.transfers)
    transactions = signals.transfers if observed else generate_estimated_transactions(known, h, now)

    return ScoredAgent(
        id=known.id,
        name=known.name,
        description=known.description,
        avatar=AVATAR_URL.format(id=known.id),
        status=status,
        chains=known.chains,
        skills=known.skills,
        reputation=reputation,
        metrics=metrics,
        stats=stats,
        transactions=tuple(transactions),
        provenance=DataProvenance(
            on_chain=signals.has_data,
            protocol=known.protocol in PROTOCOL_MAP,
            performance_metrics=True,
            uptime_monitoring=uptime is not None,
        ),
        created_at=known.created_at,
        last_active_at=last_active_at(transactions, observed, h, now),
        wallet_address=truncate_address(known.wallet_address) if known.wallet_address else None,
        source=known.source,
        protocol=known.protocol,
        website=known.website,
        twitter=known.twitter,
    )


async def build_agent(
    known: KnownAgent,
    rpc,
    now: Optional[datetime] = None,
    uptime: Optional[UptimeResult] = None,
    timeout: float = DEFAULT_TIMEOUT,
    config: ScoringConfig = DEFAULT_SCORING,
) -> ScoredAgent:
    """Fetch (skipped for walletless agents), then score."""
    if known.is_walletless:
        signals = OnChainSignals()
    else:
        signals = await fetch_on_chain_signals(rpc, known.wallet_address, known.chains, timeout=timeout)
    return score_agent(known, signals, now=now, uptime=uptime, config=config)


# =============================================
# SERVICE
# =============================================

class AgentService:
    """
    Owns the registry cache and the rebuild. One instance per process.

    Usage:
        service = AgentService.from_settings()
        agents = await service.get_all_agents()
    """

    def __init__(
        self,
        resolver: RegistryResolver,
        rpc,
        cache: Optional[RegistryCache] = None,
        uptime: Optional[UptimeMonitor] = None,
        settings: Optional[Settings] = None,
        config: ScoringConfig = DEFAULT_SCORING,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._settings = settings or get_settings()
        self.resolver = resolver
        self.rpc = rpc
        self.cache = cache if cache is not None else RegistryCache(ttl=self._settings.CACHE_TTL_SECONDS)
        self.uptime = uptime
        self.config = config
        self._clock = clock
        self._rebuild_lock = asyncio.Lock()
        self.last_build: Dict[str, object] = {}

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AgentService":
        settings = settings or get_settings()
        uptime = None
        if settings.UPTIME_CHECKS_ENABLED:
            uptime = UptimeMonitor(
                timeout=settings.UPTIME_TIMEOUT_SECONDS,
                cache_ttl=settings.CACHE_TTL_SECONDS,
                concurrency=settings.UPTIME_CONCURRENCY,
            )
        return cls(
            resolver=RegistryResolver(store=SupabaseSubmissionStore(settings=settings)),
            rpc=AnkrRpcClient(settings=settings),
            uptime=uptime,
            settings=settings,
        )

    async def aclose(self) -> None:
        for resource in (self.rpc, self.uptime, self.resolver.store):
            close = getattr(resource, "aclose", None)
            if close is not None:
                await close()

    # ── Build ────────────────────────────────────

    async def _probe_uptime(self, agents: List[KnownAgent]) -> Dict[str, UptimeResult]:
        if self.uptime is None:
            return {}
        try:
            return await self.uptime.batch_check_uptime(agents)
        except Exception as e:
            logger.warning("uptime_batch_failed", error=str(e) or e.__class__.__name__)
            return {}

    async def _build_one(self, known: KnownAgent, now: datetime, uptime: Dict[str, UptimeResult]) -> ScoredAgent:
        return await build_agent(
            known,
            self.rpc,
            now=now,
            uptime=uptime.get(known.id),
            timeout=self._settings.RPC_TIMEOUT_SECONDS,
            config=self.config,
        )

    async def _rebuild(self) -> List[ScoredAgent]:
        start = time.time()
        now = self._clock()
        registry = await self.resolver.resolve()
        uptime = await self._probe_uptime(registry)

        batch_size = self._settings.BUILD_BATCH_SIZE
        agents: List[ScoredAgent] = []
        dropped = 0
        for i in range(0, len(registry), batch_size):
            batch = registry[i:i + batch_size]
            results = await asyncio.gather(
                *(self._build_one(k, now, uptime) for k in batch),
                return_exceptions=True,
            )
            for known, result in zip(batch, results):
                if isinstance(result, BaseException):
                    dropped += 1
                    logger.warning("agent_build_failed", agent_id=known.id, error=str(result) or result.__class__.__name__)
                    continue
                agents.append(result)

        agents.sort(key=lambda a: a.reputation.overall, reverse=True)

        self.last_build = {
            "built_at": now.isoformat(),
            "agents": len(agents),
            "dropped": dropped,
            "elapsed_ms": round((time.time() - start) * 1000, 2),
        }
        logger.info("registry_rebuilt", **self.last_build)
        return agents

    # ── Public API ───────────────────────────────

    async def get_all_agents(self) -> List[ScoredAgent]:
        """Every scored agent, highest overall score first."""
        cached = self.cache.get()
        if cached is not None:
            return list(cached)

        async with self._rebuild_lock:
            # another caller may have rebuilt while we waited
            cached = self.cache.get()
            if cached is not None:
                return list(cached)
            agents = await self._rebuild()
            return list(self.cache.set(agents))

    async def get_agent_by_id(self, agent_id: str) -> Optional[ScoredAgent]:
        cached = self.cache.get()
        if cached is not None:
            return next((a for a in cached if a.id == agent_id), None)

        known = await self.resolver.find(agent_id)
        if known is None:
            return None
        uptime = await self._probe_uptime([known])
        try:
            return await self._build_one(known, self._clock(), uptime)
        except Exception as e:
            logger.warning("agent_build_failed", agent_id=agent_id, error=str(e) or e.__class__.__name__)
            return None

    async def get_top_agents(self, count: int = 6) -> List[ScoredAgent]:
        agents = await self.get_all_agents()
        return agents[:max(0, count)]

    async def get_ecosystem_stats(self) -> EcosystemStats:
        agents = await self.get_all_agents()
        return compute_ecosystem_stats(agents, today=self._clock())

    def invalidate_cache(self) -> bool:
        return self.cache.invalidate()
