"""
AgentRep — Registry Resolver
Curated catalog + user submissions = the list of agents to score.

The submission store is allowed to fail. When it does, the catalog is
scored on its own rather than aborting the rebuild.
"""
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

import structlog

from agentrep.entities.model import AgentSource, KnownAgent
from agentrep.registry.protocols import KNOWN_AGENTS

logger = structlog.get_logger()


class RegistryResolver:
    """
    `store` is anything with an async list_submitted_agents(); None means
    catalog only.
    """

    def __init__(self, store=None, catalog: Optional[Sequence[KnownAgent]] = None):
        self._store = store
        self._catalog = list(KNOWN_AGENTS if catalog is None else catalog)

    @property
    def store(self):
        return self._store

    async def _submitted(self) -> List[KnownAgent]:
        if self._store is None:
            return []
        try:
            return list(await self._store.list_submitted_agents())
        except Exception as e:
            logger.warning("submission_store_unavailable", error=str(e) or e.__class__.__name__)
            return []

    async def resolve(self) -> List[KnownAgent]:
        merged: Dict[str, KnownAgent] = {}
        for agent in self._catalog:
            merged.setdefault(agent.id, agent)

        submitted = await self._submitted()
        for agent in submitted:
            if agent.source != AgentSource.USER_SUBMITTED:
                agent = _as_submitted(agent)
            if agent.id in merged:
                logger.debug("registry_duplicate_skipped", agent_id=agent.id)
                continue
            merged[agent.id] = agent

        logger.info("registry_resolved", catalog=len(self._catalog), submitted=len(submitted), total=len(merged))
        return list(merged.values())

    async def find(self, agent_id: str) -> Optional[KnownAgent]:
        for agent in self._catalog:
            if agent.id == agent_id:
                return agent
        for agent in await self._submitted():
            if agent.id == agent_id:
                return agent if agent.source == AgentSource.USER_SUBMITTED else _as_submitted(agent)
        return None


def _as_submitted(agent: KnownAgent) -> KnownAgent:
    return replace(agent, source=AgentSource.USER_SUBMITTED)
