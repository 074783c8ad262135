"""
AgentRep — Chain RPC Client
Ankr public JSON-RPC endpoints (per chain) plus the Ankr Advanced
multichain API for indexed token transfers. No API key required.

Every call either returns a real value or raises RpcError. A zero
balance and a failed balance lookup are never the same thing here;
collapsing failures to zero is the collector's job, not the client's.

No retries. A call that exceeds the timeout is a failure and the next
cache cycle recomputes.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

import httpx
import structlog

from agentrep.config import Settings, get_settings
from agentrep.entities.model import (
    Chain,
    Transaction,
    TransactionStatus,
    TransactionType,
    format_usd_value,
    truncate_address,
    truncate_hash,
)

logger = structlog.get_logger()

# Ankr chain names, used both as RPC path and Advanced API blockchain id
ANKR_CHAIN_NAMES: Dict[Chain, str] = {
    Chain.ETHEREUM: "eth",
    Chain.BASE: "base",
    Chain.SOLANA: "solana",
    Chain.ARBITRUM: "arbitrum",
    Chain.POLYGON: "polygon",
    Chain.OPTIMISM: "optimism",
    Chain.AVALANCHE: "avalanche",
    Chain.BNB_CHAIN: "bsc",
}

_CHAIN_BY_ANKR_NAME: Dict[str, Chain] = {v: k for k, v in ANKR_CHAIN_NAMES.items()}


class RpcError(Exception):
    """A chain query failed (transport, HTTP status, JSON-RPC error or timeout)."""

    def __init__(self, method: str, message: str, chain: Optional[Chain] = None):
        self.method = method
        self.chain = chain
        where = f" on {chain.value}" if chain else ""
        super().__init__(f"{method}{where}: {message}")


def infer_transaction_type(token_symbol: str) -> TransactionType:
    symbol = (token_symbol or "").upper()
    if "LP" in symbol or "UNI-V" in symbol:
        return TransactionType.SWAP
    if "ATOKEN" in symbol or "CTOKEN" in symbol:
        return TransactionType.LEND
    if "STETH" in symbol or "STKETH" in symbol:
        return TransactionType.STAKE
    return TransactionType.TRANSFER


def parse_transfer(raw: Dict[str, Any], address: str, index: int) -> Transaction:
    """Map one ankr_getTokenTransfers entry to a Transaction."""
    tx_hash = raw.get("transactionHash") or ""
    try:
        value = float(raw.get("value") or 0)
    except (TypeError, ValueError):
        value = 0.0
    try:
        timestamp = datetime.fromtimestamp(int(raw.get("timestamp")), tz=timezone.utc)
    except (TypeError, ValueError):
        timestamp = datetime.now(timezone.utc)

    sender = raw.get("fromAddress") or ""
    if sender.lower() == address.lower():
        counterparty = truncate_address(raw.get("toAddress"))
    else:
        counterparty = truncate_address(sender)

    return Transaction(
        id=f"tx-{tx_hash}-{index}",
        type=infer_transaction_type(raw.get("tokenSymbol") or ""),
        chain=_CHAIN_BY_ANKR_NAME.get(raw.get("blockchain", ""), Chain.ETHEREUM),
        amount=f"${format_usd_value(value)}" if value > 0 else "$0",
        token=raw.get("tokenSymbol") or "ETH",
        status=TransactionStatus.SUCCESS,
        timestamp=timestamp,
        tx_hash=truncate_hash(tx_hash),
        counterparty=counterparty,
    )


class AnkrRpcClient:
    """
    Async client for balance, nonce and transfer lookups.

    Usage:
        async with AnkrRpcClient() as rpc:
            wei = await rpc.get_balance(Chain.BASE, "0x...")
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers={"Content-Type": "application/json", "User-Agent": "AgentRep/2.0"},
            timeout=httpx.Timeout(self._settings.RPC_TIMEOUT_SECONDS),
        )

    async def __aenter__(self) -> "AnkrRpcClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _chain_url(self, chain: Chain) -> str:
        return f"{self._settings.ANKR_RPC_URL}/{ANKR_CHAIN_NAMES[chain]}"

    async def _call(self, url: str, method: str, params: Any, chain: Optional[Chain] = None) -> Any:
        payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
        try:
            resp = await self._client.post(url, json=payload)
        except httpx.TimeoutException as e:
            raise RpcError(method, f"timed out ({e.__class__.__name__})", chain) from e
        except httpx.HTTPError as e:
            raise RpcError(method, str(e) or e.__class__.__name__, chain) from e

        if resp.status_code != 200:
            raise RpcError(method, f"HTTP {resp.status_code}", chain)
        try:
            body = resp.json()
        except ValueError as e:
            raise RpcError(method, "invalid JSON response", chain) from e
        if body.get("error"):
            message = body["error"].get("message", "unknown error") if isinstance(body["error"], dict) else str(body["error"])
            raise RpcError(method, message, chain)
        if "result" not in body:
            raise RpcError(method, "response has no result", chain)
        return body["result"]

    async def _evm_quantity(self, chain: Chain, method: str, address: str) -> int:
        if not chain.is_evm:
            raise RpcError(method, "not an EVM chain", chain)
        result = await self._call(self._chain_url(chain), method, [address, "latest"], chain)
        try:
            return int(result, 16)
        except (TypeError, ValueError) as e:
            raise RpcError(method, f"unparseable quantity {result!r}", chain) from e

    async def get_balance(self, chain: Chain, address: str) -> int:
        """Native balance in base units (wei)."""
        return await self._evm_quantity(chain, "eth_getBalance", address)

    async def get_transaction_count(self, chain: Chain, address: str) -> int:
        """Account nonce, used as a proxy for the number of transactions sent."""
        return await self._evm_quantity(chain, "eth_getTransactionCount", address)

    async def get_recent_transfers(self, address: str, chains: Sequence[Chain]) -> List[Transaction]:
        """Newest-first token transfers across all EVM chains in one call."""
        names = [ANKR_CHAIN_NAMES[c] for c in chains if c.is_evm]
        if not names:
            return []
        result = await self._call(
            self._settings.ANKR_MULTICHAIN_URL,
            "ankr_getTokenTransfers",
            {
                "address": address,
                "blockchain": names,
                "descOrder": True,
                "pageSize": self._settings.TRANSFER_PAGE_SIZE,
            },
        )
        transfers = (result or {}).get("transfers") or []
        page = transfers[: self._settings.TRANSFER_PAGE_SIZE]
        return [parse_transfer(raw, address, i) for i, raw in enumerate(page)]
