"""Tests for the website uptime monitor."""
import httpx
import pytest

from agentrep.compute.uptime import UptimeMonitor

from conftest import make_agent


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def make_monitor(handler, clock=None, concurrency=10) -> UptimeMonitor:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return UptimeMonitor(client=http, cache_ttl=300, concurrency=concurrency, clock=clock or FakeClock())


@pytest.mark.asyncio
async def test_head_success_is_up():
    methods = []

    def handler(request):
        methods.append(request.method)
        return httpx.Response(204)

    result = await make_monitor(handler).check_endpoint_health("https://olas.network")
    assert result.is_up
    assert result.status_code == 204
    assert result.response_time_ms >= 0
    assert methods == ["HEAD"]


@pytest.mark.asyncio
async def test_falls_back_to_get_on_405():
    methods = []

    def handler(request):
        methods.append(request.method)
        return httpx.Response(405 if request.method == "HEAD" else 200)

    result = await make_monitor(handler).check_endpoint_health("https://virtuals.io")
    assert result.is_up
    assert methods == ["HEAD", "GET"]


@pytest.mark.asyncio
async def test_client_errors_still_count_as_up():
    result = await make_monitor(lambda r: httpx.Response(404)).check_endpoint_health("https://example.org")
    assert result.is_up


@pytest.mark.asyncio
async def test_server_error_is_down():
    result = await make_monitor(lambda r: httpx.Response(503)).check_endpoint_health("https://example.org")
    assert not result.is_up
    assert result.status_code == 503


@pytest.mark.asyncio
async def test_unreachable_is_down():
    def handler(request):
        raise httpx.ConnectError("no route", request=request)

    result = await make_monitor(handler).check_endpoint_health("https://down.example")
    assert not result.is_up
    assert result.status_code == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("url", [None, "", "ftp://files.example", "olas.network"])
async def test_invalid_urls_return_none(url):
    monitor = make_monitor(lambda r: httpx.Response(200))
    assert await monitor.check_endpoint_health(url) is None


@pytest.mark.asyncio
async def test_results_cached_until_ttl():
    calls = []
    clock = FakeClock()

    def handler(request):
        calls.append(request.url)
        return httpx.Response(200)

    monitor = make_monitor(handler, clock=clock)
    await monitor.check_endpoint_health("https://olas.network")
    await monitor.check_endpoint_health("https://olas.network")
    assert len(calls) == 1

    clock.now += 301
    await monitor.check_endpoint_health("https://olas.network")
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_batch_only_checks_agents_with_websites():
    def handler(request):
        return httpx.Response(200 if request.url.host == "up.example" else 500)

    agents = [
        make_agent(agent_id="a", website="https://up.example"),
        make_agent(agent_id="b", website="https://broken.example"),
        make_agent(agent_id="c", website=None),
    ]
    results = await make_monitor(handler, concurrency=1).batch_check_uptime(agents)

    assert set(results) == {"a", "b"}
    assert results["a"].is_up
    assert not results["b"].is_up
