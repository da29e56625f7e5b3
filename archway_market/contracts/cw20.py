"""cw20 payment-token client — balances and marketplace allowances."""
from __future__ import annotations

from typing import Any

from ..models import Expiration, TxResult
from .base import ContractClient


def _positive(amount: int | str) -> str:
    if int(amount) <= 0:
        raise ValueError(f"Amount must be positive: {amount}")
    return str(int(amount))


class Cw20Contract(ContractClient):
    """Standard cw20 queries and transactions used to pay for swaps.

    Offers and cw20 settlements are paid out of an allowance, so the buyer
    raises the marketplace's allowance before finishing a swap.
    """

    async def balance(self, address: str) -> Any:
        """``{"balance": "<amount>"}`` for ``address``."""
        return await self._query({"balance": {"address": address}})

    async def token_info(self) -> Any:
        return await self._query({"token_info": {}})

    async def allowance(self, owner: str, spender: str) -> Any:
        return await self._query({"allowance": {"owner": owner, "spender": spender}})

    async def transfer(self, recipient: str, amount: int | str) -> TxResult:
        return await self._execute(
            {"transfer": {"recipient": recipient, "amount": _positive(amount)}},
            memo="Transfer",
        )

    async def increase_allowance(
        self,
        spender: str,
        amount: int | str,
        expires: Expiration | None = None,
    ) -> TxResult:
        body: dict[str, Any] = {"spender": spender, "amount": _positive(amount)}
        if expires is not None and not expires.never:
            body["expires"] = expires.to_msg()
        return await self._execute({"increase_allowance": body}, memo="Increase allowance")

    async def decrease_allowance(
        self,
        spender: str,
        amount: int | str,
        expires: Expiration | None = None,
    ) -> TxResult:
        body: dict[str, Any] = {"spender": spender, "amount": _positive(amount)}
        if expires is not None and not expires.never:
            body["expires"] = expires.to_msg()
        return await self._execute({"decrease_allowance": body}, memo="Decrease allowance")
