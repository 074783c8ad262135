"""
AgentRep — Submission Store
User-submitted agents, read from the Supabase `submitted_agents` table
through its PostgREST interface. Read-only from the scoring side;
registration and validation live elsewhere.

Rows go through the same scoring pipeline as the curated catalog, tagged
source=user-submitted.
"""
from typing import Any, Dict, List, Optional

import httpx
import structlog

from agentrep.config import Settings, get_settings
from agentrep.entities.model import AgentSource, Chain, KnownAgent, Skill, parse_timestamp

logger = structlog.get_logger()

TABLE = "submitted_agents"


class SubmissionStoreError(Exception):
    """The submission store could not be read."""


def row_to_agent(row: Dict[str, Any]) -> Optional[KnownAgent]:
    """Map a submitted_agents row. Rows without a usable chain or skill are skipped."""
    chains = []
    for value in row.get("chains") or []:
        try:
            chains.append(Chain(value))
        except ValueError:
            logger.debug("submission_unknown_chain", slug=row.get("slug"), chain=value)
    skills = []
    for value in row.get("skills") or []:
        try:
            skills.append(Skill(value))
        except ValueError:
            logger.debug("submission_unknown_skill", slug=row.get("slug"), skill=value)

    slug = row.get("slug")
    if not slug or not chains or not skills or not row.get("created_at"):
        logger.warning("submission_row_skipped", slug=slug)
        return None
    try:
        created_at = parse_timestamp(row["created_at"])
    except (AttributeError, ValueError):
        logger.warning("submission_row_skipped", slug=slug, created_at=row["created_at"])
        return None

    return KnownAgent(
        id=slug,
        name=row.get("name") or slug,
        description=row.get("description") or "",
        protocol=row.get("protocol") or "independent",
        wallet_address=row.get("wallet_address") or None,
        chains=tuple(chains),
        skills=tuple(skills),
        website=row.get("website") or None,
        twitter=row.get("twitter") or None,
        created_at=created_at,
        source=AgentSource.USER_SUBMITTED,
    )


class SupabaseSubmissionStore:
    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(self._settings.RPC_TIMEOUT_SECONDS))

    @property
    def configured(self) -> bool:
        return self._settings.submissions_enabled

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def list_submitted_agents(self) -> List[KnownAgent]:
        """Newest first. An unconfigured store has no submissions."""
        if not self.configured:
            return []

        key = self._settings.SUPABASE_ANON_KEY
        try:
            resp = await self._client.get(
                f"{self._settings.SUPABASE_URL}/rest/v1/{TABLE}",
                params={"select": "*", "order": "created_at.desc"},
                headers={"apikey": key, "Authorization": f"Bearer {key}"},
            )
        except httpx.HTTPError as e:
            raise SubmissionStoreError(f"request failed: {str(e) or e.__class__.__name__}") from e

        if resp.status_code != 200:
            raise SubmissionStoreError(f"HTTP {resp.status_code}")
        try:
            rows = resp.json()
        except ValueError as e:
            raise SubmissionStoreError("invalid JSON response") from e
        if not isinstance(rows, list):
            raise SubmissionStoreError("expected a list of rows")

        agents = [a for a in (row_to_agent(r) for r in rows) if a is not None]
        logger.info("submissions_loaded", rows=len(rows), agents=len(agents))
        return agents
