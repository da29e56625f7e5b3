"""Shared plumbing for contract clients: query / execute with error pass-through."""
from __future__ import annotations

import logging
from typing import Any, Sequence

from ..errors import ChainError
from ..interfaces.chain import ChainClient
from ..interfaces.signer import Signer
from ..models import Coin, TxResult

logger = logging.getLogger(__name__)


def _entrypoint(msg: dict[str, Any]) -> str:
    return next(iter(msg), "?")


class ContractClient:
    """Binds a contract address to a chain client and an optional signer.

    Chain failures are not raised to callers: queries hand back
    ``{"error": ...}`` and executes a :class:`TxResult` with ``error`` set.
    """

    def __init__(
        self,
        chain_client: ChainClient,
        address: str,
        signer: Signer | None = None,
    ) -> None:
        if not address:
            raise ValueError(f"{type(self).__name__} needs a contract address")
        self._client = chain_client
        self._signer = signer
        self.address = address

    async def _query(self, msg: dict[str, Any]) -> Any:
        try:
            return await self._client.query_smart(self.address, msg)
        except ChainError as e:
            logger.error("Query '%s' on %s failed: %s", _entrypoint(msg), self.address, e)
            return {"error": str(e)}

    async def _execute(
        self,
        msg: dict[str, Any],
        memo: str = "",
        funds: Sequence[Coin] = (),
    ) -> TxResult:
        if self._signer is None:
            raise RuntimeError(
                f"Executing '{_entrypoint(msg)}' requires a signer; none configured"
            )
        try:
            return await self._signer.execute(self.address, msg, memo=memo, funds=funds)
        except ChainError as e:
            logger.error(
                "Execute '%s' on %s failed: %s", _entrypoint(msg), self.address, e
            )
            return TxResult(memo=memo, error=str(e))
