"""
AgentRep — Configuration

All settings load from environment variables with safe defaults for
development. A .env file in the working directory is honoured.
Scoring constants are not here; see agentrep.trust.tuning.
"""
import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self):
        self.ENVIRONMENT = os.getenv("AGENTREP_ENV", "development")

        # === Chain RPC (Ankr public endpoints, no key required) ===
        self.ANKR_RPC_URL = os.getenv("ANKR_RPC_URL", "https://rpc.ankr.com").rstrip("/")
        self.ANKR_MULTICHAIN_URL = os.getenv("ANKR_MULTICHAIN_URL", "https://rpc.ankr.com/multichain")
        self.RPC_TIMEOUT_SECONDS = float(os.getenv("RPC_TIMEOUT_SECONDS", "8"))
        self.TRANSFER_PAGE_SIZE = int(os.getenv("TRANSFER_PAGE_SIZE", "15"))

        # === Submission store (Supabase PostgREST) ===
        self.SUPABASE_URL = os.getenv("SUPABASE_URL", "").rstrip("/")
        self.SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")

        # === Registry build ===
        self.CACHE_TTL_SECONDS = float(os.getenv("CACHE_TTL_SECONDS", "300"))
        self.BUILD_BATCH_SIZE = int(os.getenv("BUILD_BATCH_SIZE", "5"))

        # === Uptime monitoring ===
        self.UPTIME_CHECKS_ENABLED = _env_bool("UPTIME_CHECKS_ENABLED", True)
        self.UPTIME_TIMEOUT_SECONDS = float(os.getenv("UPTIME_TIMEOUT_SECONDS", "8"))
        self.UPTIME_CONCURRENCY = int(os.getenv("UPTIME_CONCURRENCY", "10"))

        # === API ===
        self.REVALIDATION_SECRET = os.getenv("REVALIDATION_SECRET", "")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        if self.BUILD_BATCH_SIZE < 1:
            raise RuntimeError("BUILD_BATCH_SIZE must be at least 1")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def submissions_enabled(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_ANON_KEY)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
