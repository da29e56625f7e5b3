"""Signer protocol. Signing and broadcasting are delegated to a wallet library."""
from typing import Any, Protocol, Sequence

from ..models import Coin, TxResult


class Signer(Protocol):
    """Abstract interface for executing contract messages as a wallet."""

    @property
    def address(self) -> str: ...

    async def execute(
        self,
        contract: str,
        msg: dict[str, Any],
        memo: str = "",
        funds: Sequence[Coin] = (),
    ) -> TxResult: ...
