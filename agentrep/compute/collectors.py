"""
AgentRep — On-Chain Signal Collectors
The only impure layer in scoring: everything here is network I/O.

Per agent:
    - balance and nonce for every EVM chain, all in parallel
    - one batched transfer lookup across those chains (max 15, newest first)

Each call is settled on its own. A chain that errors or times out
contributes zero and is recorded in `failures`; it never takes the other
chains down with it. Non-EVM chains (solana) are not queried.
"""
import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, List, Optional, Sequence

import structlog

from agentrep.entities.model import Chain, ChainBalance, OnChainSignals

logger = structlog.get_logger()

DEFAULT_TIMEOUT = 8.0
MAX_TRANSFERS = 15


@dataclass(frozen=True)
class FetchResult:
    kind: str
    chain: Optional[Chain]
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def _settle(kind: str, chain: Optional[Chain], coro: Awaitable, timeout: float) -> FetchResult:
    """Run one fetch; turn any failure into a FetchResult instead of raising."""
    t0 = time.time()
    try:
        value = await asyncio.wait_for(coro, timeout=timeout)
        return FetchResult(kind, chain, value=value)
    except asyncio.TimeoutError:
        error = f"timed out after {timeout}s"
    except Exception as e:
        error = str(e) or e.__class__.__name__
    logger.debug(
        "chain_fetch_failed",
        kind=kind,
        chain=chain.value if chain else "multichain",
        error=error,
        elapsed_ms=round((time.time() - t0) * 1000, 2),
    )
    return FetchResult(kind, chain, error=error)


def fold_results(results: Sequence[FetchResult]) -> OnChainSignals:
    """Fold settled fetches into one signal bundle. Failures count as zero."""
    signals = OnChainSignals()
    for r in results:
        if not r.ok:
            where = r.chain.value if r.chain else "multichain"
            signals.failures.append(f"{r.kind}:{where}: {r.error}")
            if r.kind == "balance":
                signals.balances.append(ChainBalance(r.chain, 0))
            elif r.kind == "tx_count":
                signals.tx_counts[r.chain] = 0
            continue

        if r.kind == "balance":
            signals.balances.append(ChainBalance(r.chain, int(r.value or 0)))
        elif r.kind == "tx_count":
            signals.tx_counts[r.chain] = int(r.value or 0)
        elif r.kind == "transfers":
            signals.transfers.extend(r.value or [])
    return signals


async def fetch_on_chain_signals(
    rpc,
    address: Optional[str],
    chains: Sequence[Chain],
    timeout: float = DEFAULT_TIMEOUT,
) -> OnChainSignals:
    """
    Query balances, nonces and recent transfers for one wallet.

    `rpc` is anything with async get_balance(chain, address),
    get_transaction_count(chain, address) and
    get_recent_transfers(address, chains); see AnkrRpcClient.
    """
    if not address:
        return OnChainSignals()

    evm_chains: List[Chain] = [c for c in chains if c.is_evm]
    if not evm_chains:
        return OnChainSignals()

    tasks = []
    for chain in evm_chains:
        tasks.append(_settle("balance", chain, rpc.get_balance(chain, address), timeout))
        tasks.append(_settle("tx_count", chain, rpc.get_transaction_count(chain, address), timeout))
    tasks.append(_settle("transfers", None, rpc.get_recent_transfers(address, evm_chains), timeout))

    results = await asyncio.gather(*tasks)
    signals = fold_results(results)
    signals.transfers.sort(key=lambda t: t.timestamp, reverse=True)
    del signals.transfers[MAX_TRANSFERS:]

    if signals.failures:
        logger.warning(
            "on_chain_partial_data",
            address=address[:10],
            failed=len(signals.failures),
            queried=len(results),
        )
    return signals
