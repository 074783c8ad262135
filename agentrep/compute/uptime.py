"""
AgentRep — Uptime Monitor
Lightweight HTTP health checks against agent websites.

HEAD first (no body transfer), GET if the server answers 405. Anything
from 200 to 499 counts as up: the host is there and answering. Results
are cached for 5 minutes per URL so page loads don't hammer endpoints.

Uptime feeds agent stats and provenance only. It never touches the
reputation score, which must stay reproducible.
"""
import asyncio
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, Optional, Tuple

import httpx
import structlog

from agentrep.entities.model import KnownAgent

logger = structlog.get_logger()

USER_AGENT = "AgentRep-UptimeMonitor/1.0"


@dataclass(frozen=True)
class UptimeResult:
    is_up: bool
    status_code: int          # 0 when unreachable
    response_time_ms: float
    checked_at: datetime
    url: str


class UptimeMonitor:
    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 8.0,
        cache_ttl: float = 300.0,
        concurrency: int = 10,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
            timeout=httpx.Timeout(timeout),
        )
        self.cache_ttl = cache_ttl
        self.concurrency = max(1, concurrency)
        self._clock = clock
        self._cache: Dict[str, Tuple[UptimeResult, float]] = {}

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def check_endpoint_health(self, url: Optional[str]) -> Optional[UptimeResult]:
        """None when the URL isn't http(s)."""
        if not url or not url.startswith(("http://", "https://")):
            return None

        cached = self._cache.get(url)
        if cached and self._clock() - cached[1] < self.cache_ttl:
            return cached[0]

        start = time.perf_counter()
        try:
            resp = await self._client.head(url)
            if resp.status_code == 405:
                resp = await self._client.get(url)
            status = resp.status_code
            is_up = 200 <= status < 500
        except httpx.HTTPError as e:
            logger.debug("uptime_check_failed", url=url, error=str(e) or e.__class__.__name__)
            status = 0
            is_up = False

        result = UptimeResult(
            is_up=is_up,
            status_code=status,
            response_time_ms=round((time.perf_counter() - start) * 1000, 2),
            checked_at=datetime.now(timezone.utc),
            url=url,
        )
        self._cache[url] = (result, self._clock())
        return result

    async def batch_check_uptime(self, agents: Iterable[KnownAgent]) -> Dict[str, UptimeResult]:
        """agent id -> result, for agents that have a website."""
        with_sites = [a for a in agents if a.website]
        results: Dict[str, UptimeResult] = {}

        for i in range(0, len(with_sites), self.concurrency):
            batch = with_sites[i:i + self.concurrency]
            checks = await asyncio.gather(*(self.check_endpoint_health(a.website) for a in batch))
            for agent, result in zip(batch, checks):
                if result is not None:
                    results[agent.id] = result

        logger.info("uptime_batch_checked", agents=len(with_sites), up=sum(r.is_up for r in results.values()))
        return results
