"""cw721 collection client: ownership, metadata and approvals."""
from __future__ import annotations

from typing import Any

from ...models import Expiration, TxResult
from ..base import ContractClient
from . import messages


class Cw721Contract(ContractClient):
    """Standard cw721 queries and transactions for one NFT collection."""

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def owner_of(self, token_id: str, include_expired: bool = False) -> Any:
        return await self._query(messages.owner_of_query(token_id, include_expired))

    async def approval(
        self, token_id: str, spender: str, include_expired: bool = False
    ) -> Any:
        return await self._query(
            messages.approval_query(token_id, spender, include_expired)
        )

    async def approvals(self, token_id: str, include_expired: bool = False) -> Any:
        return await self._query(messages.approvals_query(token_id, include_expired))

    async def num_tokens(self) -> Any:
        return await self._query(messages.num_tokens_query())

    async def contract_info(self) -> Any:
        return await self._query(messages.contract_info_query())

    async def nft_info(self, token_id: str) -> Any:
        return await self._query(messages.nft_info_query(token_id))

    async def all_nft_info(self, token_id: str, include_expired: bool = False) -> Any:
        """Owner, approvals and metadata of ``token_id`` in one query."""
        return await self._query(messages.all_nft_info_query(token_id, include_expired))

    async def tokens(
        self, owner: str, start_after: str | None = None, limit: int | None = None
    ) -> Any:
        """Token ids held by ``owner``, e.g. ``{"tokens": ["1", "7"]}``."""
        return await self._query(messages.tokens_query(owner, start_after, limit))

    async def all_tokens(
        self, start_after: str | None = None, limit: int | None = None
    ) -> Any:
        return await self._query(messages.all_tokens_query(start_after, limit))

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    async def transfer_nft(self, recipient: str, token_id: str) -> TxResult:
        return await self._execute(
            messages.transfer_nft_msg(recipient, token_id),
            memo=f"Transfer {token_id}",
        )

    async def send_nft(
        self, contract: str, token_id: str, hook: dict[str, Any]
    ) -> TxResult:
        """Send ``token_id`` to a contract, which receives ``hook`` as its message."""
        return await self._execute(
            messages.send_nft_msg(contract, token_id, hook),
            memo=f"Send {token_id}",
        )

    async def approve(
        self, spender: str, token_id: str, expires: Expiration | None = None
    ) -> TxResult:
        """Let ``spender`` move ``token_id``; the marketplace needs this before a Sale."""
        return await self._execute(
            messages.approve_msg(spender, token_id, expires),
            memo=f"Approve {token_id}",
        )

    async def revoke(self, spender: str, token_id: str) -> TxResult:
        return await self._execute(
            messages.revoke_msg(spender, token_id), memo=f"Revoke {token_id}"
        )

    async def approve_all(
        self, operator: str, expires: Expiration | None = None
    ) -> TxResult:
        return await self._execute(
            messages.approve_all_msg(operator, expires), memo="Approve all"
        )

    async def revoke_all(self, operator: str) -> TxResult:
        return await self._execute(messages.revoke_all_msg(operator), memo="Revoke all")

    async def burn(self, token_id: str) -> TxResult:
        return await self._execute(messages.burn_msg(token_id), memo=f"Burn {token_id}")
