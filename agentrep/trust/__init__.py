"""
AgentRep — Trust Package
Re-exports the pure scoring core.
"""
from agentrep.trust.deterministic import clamp, hash_string, pick, rand_int, seeded
from agentrep.trust.engine import compose, derive_status, protocol_base_score
from agentrep.trust.history import classify_trend, generate_history
from agentrep.trust.metrics import synthesize
from agentrep.trust.tuning import DEFAULT_SCORING, ScoringConfig
