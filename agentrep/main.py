"""
AgentRep — On-chain AI Agent Reputation Registry

Scores every known on-chain AI agent from protocol maturity, wallet
activity and deterministic behavioral metrics.

Start with:
    uvicorn agentrep.main:app --host 0.0.0.0 --port 8000
"""
import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from agentrep import __version__
from agentrep.api.agents import router as agents_router
from agentrep.compute.pipeline import AgentService
from agentrep.config import get_settings

settings = get_settings()

structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.LOG_LEVEL)
    ),
)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("agentrep_starting",
                version=__version__,
                environment=settings.ENVIRONMENT,
                submissions_enabled=settings.submissions_enabled,
                uptime_checks=settings.UPTIME_CHECKS_ENABLED)

    if getattr(app.state, "agent_service", None) is None:
        app.state.agent_service = AgentService.from_settings(settings)

    yield

    await app.state.agent_service.aclose()
    logger.info("agentrep_stopped")


app = FastAPI(
    title="AgentRep — On-chain AI Agent Reputation",
    description="Reputation scores, metrics and activity for on-chain AI agents.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    expose_headers=["X-Request-Id", "X-Response-Time"],
)


QUIET_PATHS = frozenset({"/v1/health", "/docs", "/redoc", "/openapi.json"})


@app.middleware("http")
async def request_middleware(request: Request, call_next):
    request_id = uuid.uuid4().hex[:12]
    request.state.request_id = request_id
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
    response.headers["X-Request-Id"] = request_id
    response.headers["X-Response-Time"] = f"{elapsed_ms}ms"
    if request.url.path not in QUIET_PATHS:
        cached = getattr(request.app.state, "agent_service", None)
        logger.info("http_request",
                    method=request.method,
                    path=request.url.path,
                    query=str(request.query_params) or None,
                    status=response.status_code,
                    elapsed_ms=elapsed_ms,
                    registry_cached=bool(cached and cached.cache.peek()))
    return response


@app.exception_handler(Exception)
async def registry_error_handler(request: Request, exc: Exception):
    request_id = getattr(request.state, "request_id", None)
    logger.exception("registry_request_failed",
                     path=request.url.path,
                     request_id=request_id,
                     error_type=type(exc).__name__)
    return JSONResponse(
        status_code=500,
        content={
            "error": "registry_unavailable",
            "detail": "Agent scores could not be computed, retry shortly.",
            "request_id": request_id,
        },
        headers={"X-Request-Id": request_id} if request_id else None,
    )


app.include_router(agents_router)


@app.get("/")
async def root():
    return {
        "name": "AgentRep",
        "tagline": "Reputation for on-chain AI agents",
        "version": __version__,
        "endpoints": {
            "agents": "GET /v1/agents?limit={n}",
            "top": "GET /v1/agents/top?count=6",
            "agent": "GET /v1/agents/{id}",
            "ecosystem": "GET /v1/ecosystem/stats",
            "chains": "GET /v1/chains",
            "health": "GET /v1/health",
            "revalidate": "POST /v1/revalidate?secret={secret}",
            "docs": "GET /docs",
        },
    }
