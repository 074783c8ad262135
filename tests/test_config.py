"""Tests for environment-driven settings."""
import pytest

from agentrep.config import Settings


def test_defaults(monkeypatch):
    for name in ("CACHE_TTL_SECONDS", "BUILD_BATCH_SIZE", "RPC_TIMEOUT_SECONDS", "SUPABASE_URL", "SUPABASE_ANON_KEY"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.CACHE_TTL_SECONDS == 300
    assert s.BUILD_BATCH_SIZE == 5
    assert s.RPC_TIMEOUT_SECONDS == 8
    assert s.TRANSFER_PAGE_SIZE == 15
    assert not s.submissions_enabled


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("AGENTREP_ENV", "production")
    monkeypatch.setenv("SUPABASE_URL", "https://db.example.supabase.co/")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
    monkeypatch.setenv("UPTIME_CHECKS_ENABLED", "false")
    s = Settings()
    assert s.is_production
    assert s.SUPABASE_URL == "https://db.example.supabase.co"
    assert s.submissions_enabled
    assert not s.UPTIME_CHECKS_ENABLED


def test_invalid_batch_size(monkeypatch):
    monkeypatch.setenv("BUILD_BATCH_SIZE", "0")
    with pytest.raises(RuntimeError):
        Settings()
