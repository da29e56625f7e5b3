"""Archway LCD client with fallback support."""
import asyncio
import base64
import json
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from ...config import ChainConfig
from ...errors import QueryError
from ...models import Coin

logger = logging.getLogger(__name__)


def encode_query(msg: dict[str, Any]) -> str:
    """Encode a smart-query message for the LCD URL path."""
    raw = json.dumps(msg, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).decode()


class ArchwayClient:
    """Archway REST (LCD) client with automatic endpoint fallback."""

    def __init__(self, config: ChainConfig) -> None:
        self.endpoints = list(config.lcd_endpoints)
        self.timeout = config.rpc_timeout
        self.current_lcd_index = 0

    async def lcd_get(
        self, path: str, params: dict[str, str] | None = None
    ) -> dict[str, Any]:
        """GET an LCD path with fallback to alternative endpoints.

        Transport failures and unparseable bodies move on to the next
        endpoint. A JSON error body (``code``/``message``) is a node's
        answer to the request and is raised straight away as
        :class:`QueryError`, as is a body that is not a JSON object.
        """
        ssl_context = ssl.create_default_context(cafile=certifi.where())

        last_error: Exception | None = None
        for attempt in range(len(self.endpoints)):
            lcd_index = (self.current_lcd_index + attempt) % len(self.endpoints)
            lcd_url = self.endpoints[lcd_index].rstrip("/")

            try:
                connector = aiohttp.TCPConnector(ssl=ssl_context)
                async with aiohttp.ClientSession(connector=connector) as session:
                    async with session.get(
                        f"{lcd_url}{path}",
                        params=params,
                        timeout=aiohttp.ClientTimeout(total=self.timeout),
                    ) as response:
                        status = response.status
                        result = await response.json()
            except (aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError) as e:
                last_error = e
                logger.warning("LCD endpoint %s failed: %s", lcd_url, e)
                if attempt < len(self.endpoints) - 1:
                    logger.info("Trying next endpoint...")
                continue

            if lcd_index != self.current_lcd_index:
                logger.info("Switched to LCD endpoint: %s", lcd_url)
                self.current_lcd_index = lcd_index

            if not isinstance(result, dict):
                raise QueryError(
                    f"Query Error: unexpected response from {lcd_url}: {result!r}"
                )

            if status != 200 or result.get("code"):
                message = result.get("message") or f"HTTP {status}"
                raise QueryError(f"Query Error: {message}")

            return result

        raise QueryError(f"All LCD endpoints failed. Last error: {last_error}")

    async def query_smart(self, contract: str, msg: dict[str, Any]) -> Any:
        """Run a CosmWasm smart query and return its ``data`` payload."""
        logger.debug("Smart query %s: %s", contract, msg)
        result = await self.lcd_get(
            f"/cosmwasm/wasm/v1/contract/{contract}/smart/{encode_query(msg)}"
        )
        return result.get("data")

    async def get_balance(self, address: str, denom: str) -> Coin:
        """Native bank balance of ``address`` in ``denom``."""
        result = await self.lcd_get(
            f"/cosmos/bank/v1beta1/balances/{address}/by_denom",
            params={"denom": denom},
        )
        balance = result.get("balance") or {}
        return Coin(denom=balance.get("denom", denom), amount=balance.get("amount", "0"))
