"""Whitelist minting contract client.

Whitelist enforcement, mint pricing and the randomized reveal all run inside
the contract; this client only shapes the messages.
"""
from __future__ import annotations

from typing import Any, Sequence

from ..models import Coin, TxResult
from .base import ContractClient


class MinterContract(ContractClient):
    async def config(self) -> Any:
        """Mint price, supply, whitelist phase and the collection address."""
        return await self._query({"config": {}})

    async def whitelist(self, address: str) -> Any:
        """Whitelist status of ``address`` and the mints it has left."""
        return await self._query({"whitelist": {"address": address}})

    async def mint_count(self, address: str) -> Any:
        return await self._query({"mint_count": {"address": address}})

    async def mint(
        self, price: Coin | None = None, token_uri: str | None = None
    ) -> TxResult:
        """Mint one token, attaching ``price`` as funds when the mint is paid."""
        body: dict[str, Any] = {}
        if token_uri:
            body["token_uri"] = token_uri
        funds = [price] if price is not None and int(price.amount) > 0 else []
        return await self._execute({"mint": body}, memo="Mint", funds=funds)

    async def reveal(self, token_id: str) -> TxResult:
        """Swap the placeholder metadata of ``token_id`` for its final metadata."""
        return await self._execute(
            {"reveal": {"token_id": token_id}}, memo=f"Reveal {token_id}"
        )

    async def add_whitelist(self, addresses: Sequence[str]) -> TxResult:
        if not addresses:
            raise ValueError("At least one address is required")
        return await self._execute(
            {"add_whitelist": {"addresses": list(addresses)}}, memo="Add to whitelist"
        )

    async def remove_whitelist(self, addresses: Sequence[str]) -> TxResult:
        if not addresses:
            raise ValueError("At least one address is required")
        return await self._execute(
            {"remove_whitelist": {"addresses": list(addresses)}},
            memo="Remove from whitelist",
        )
