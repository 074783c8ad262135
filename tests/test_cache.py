"""Tests for the registry snapshot cache."""
import pytest

from agentrep.compute.cache import RegistryCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_miss_then_hit():
    clock = FakeClock()
    cache = RegistryCache(ttl=300, clock=clock)
    assert cache.get() is None

    snapshot = cache.set(["a", "b"])
    assert snapshot == ("a", "b")
    assert cache.get() == ("a", "b")
    assert cache.stats()["hits"] == 1
    assert cache.stats()["misses"] == 1


def test_expires_after_ttl():
    clock = FakeClock()
    cache = RegistryCache(ttl=300, clock=clock)
    cache.set([1])

    clock.now = 299.9
    assert cache.get() == (1,)
    clock.now = 300
    assert cache.get() is None
    assert cache.is_stale()
    assert cache.peek() == (1,)


def test_snapshot_is_immutable_copy():
    source = [1, 2]
    cache = RegistryCache(clock=FakeClock())
    cache.set(source)
    source.append(3)
    assert cache.get() == (1, 2)


def test_invalidate():
    cache = RegistryCache(clock=FakeClock())
    assert cache.invalidate() is False
    cache.set([1])
    assert cache.invalidate() is True
    assert cache.get() is None
    assert cache.stats()["cached_agents"] == 0


def test_negative_ttl_rejected():
    with pytest.raises(ValueError):
        RegistryCache(ttl=-1)
