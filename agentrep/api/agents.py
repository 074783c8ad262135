"""
AgentRep - Registry API Endpoints

Public endpoints:
    GET  /v1/agents             - All scored agents, best first (?limit=)
    GET  /v1/agents/top         - Top N agents (?count=6)
    GET  /v1/agents/{id}        - One scored agent
    GET  /v1/ecosystem/stats    - Dashboard aggregates
    GET  /v1/chains             - Supported chains
    GET  /v1/health             - Service + cache status

Maintenance:
    POST /v1/revalidate         - Drop the registry cache (?secret=)
"""
import hmac
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel

import structlog

from agentrep import __version__
from agentrep.compute.pipeline import AgentService
from agentrep.config import Settings, get_settings
from agentrep.registry.protocols import CHAINS, reputation_label

logger = structlog.get_logger()


# =============================================
# RESPONSE MODELS
# =============================================

class ReputationResponse(BaseModel):
    overall: int
    reliability: int
    accuracy: int
    speed: int
    trust: int
    trend: str
    history_last_30_days: List[int]
    protocol_base: int
    on_chain_bonus: int
    label: str


class TransactionResponse(BaseModel):
    id: str
    type: str
    chain: str
    amount: str
    token: str
    status: str
    timestamp: str
    tx_hash: str
    counterparty: Optional[str] = None


class AgentResponse(BaseModel):
    id: str
    name: str
    description: str
    avatar: str
    status: str
    protocol: str
    source: str
    chains: List[str]
    skills: List[str]
    reputation: ReputationResponse
    metrics: Dict[str, float]
    stats: Dict[str, Any]
    transactions: List[TransactionResponse]
    provenance: Dict[str, bool]
    created_at: str
    last_active_at: str
    wallet_address: Optional[str] = None
    website: Optional[str] = None
    twitter: Optional[str] = None


class EcosystemStatsResponse(BaseModel):
    total_agents: int
    active_agents: int
    total_transactions: int
    total_value_processed: str
    average_reputation: int
    top_chain: Optional[str]
    agents_by_chain: Dict[str, int]
    agents_by_skill: Dict[str, int]
    reputation_distribution: List[Dict[str, Any]]
    daily_transactions: List[Dict[str, Any]]


class ChainResponse(BaseModel):
    id: str
    name: str
    color: str
    evm: bool


class RevalidateResponse(BaseModel):
    revalidated: bool
    had_cache: bool
    timestamp: str


# =============================================
# DEPENDENCIES
# =============================================

def get_service(request: Request) -> AgentService:
    service = getattr(request.app.state, "agent_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Agent service not initialized")
    return service


def _to_response(agent) -> AgentResponse:
    data = agent.to_dict()
    data["reputation"]["label"] = reputation_label(agent.reputation.overall)
    return AgentResponse(**data)


# =============================================
# PUBLIC ENDPOINTS
# =============================================

router = APIRouter(prefix="/v1", tags=["agents"])


@router.get("/agents", response_model=List[AgentResponse])
async def list_agents(
    limit: Optional[int] = Query(None, ge=1, le=500),
    service: AgentService = Depends(get_service),
):
    agents = await service.get_all_agents()
    if limit is not None:
        agents = agents[:limit]
    return [_to_response(a) for a in agents]


@router.get("/agents/top", response_model=List[AgentResponse])
async def top_agents(
    count: int = Query(6, ge=1, le=100),
    service: AgentService = Depends(get_service),
):
    return [_to_response(a) for a in await service.get_top_agents(count)]


@router.get("/agents/{agent_id}", response_model=AgentResponse)
async def get_agent(agent_id: str, service: AgentService = Depends(get_service)):
    agent = await service.get_agent_by_id(agent_id)
    if agent is None:
        raise HTTPException(status_code=404, detail=f"Agent '{agent_id}' not found")
    return _to_response(agent)


@router.get("/ecosystem/stats", response_model=EcosystemStatsResponse)
async def ecosystem_stats(service: AgentService = Depends(get_service)):
    stats = await service.get_ecosystem_stats()
    return EcosystemStatsResponse(**stats.to_dict())


@router.get("/chains", response_model=List[ChainResponse])
async def list_chains():
    return [
        ChainResponse(id=c.id.value, name=c.name, color=c.color, evm=c.id.is_evm)
        for c in CHAINS
    ]


@router.get("/health")
async def health(service: AgentService = Depends(get_service)):
    return {
        "status": "healthy",
        "service": "agentrep",
        "version": __version__,
        "cache": service.cache.stats(),
        "last_build": service.last_build or None,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# =============================================
# MAINTENANCE
# =============================================

@router.post("/revalidate", response_model=RevalidateResponse)
async def revalidate(
    secret: Optional[str] = Query(None),
    service: AgentService = Depends(get_service),
    settings: Settings = Depends(get_settings),
):
    """
    Force the next read to rebuild the registry.
    When REVALIDATION_SECRET is set, the caller must pass it as ?secret=.
    """
    expected = settings.REVALIDATION_SECRET
    if expected and not hmac.compare_digest(secret or "", expected):
        logger.warning("revalidate_rejected")
        raise HTTPException(status_code=401, detail="Invalid secret")

    had_cache = service.invalidate_cache()
    return RevalidateResponse(
        revalidated=True,
        had_cache=had_cache,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
