"""Wires the LCD client, signer and contract clients from config."""
from __future__ import annotations

import logging
from typing import Any, Sequence

from ..chains.archway import ArchwayClient
from ..config import AppConfig
from ..contracts import Cw20Contract, Cw721Contract, MarketplaceContract, MinterContract
from ..interfaces.signer import Signer
from ..models import Coin, TxResult

logger = logging.getLogger(__name__)


class LazySigner:
    """Builds the cosmpy signer on first use so read-only sessions need no mnemonic."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self._signer: Signer | None = None

    def _get(self) -> Signer:
        if self._signer is None:
            from ..wallet.cosmpy_signer import CosmpySigner

            self._signer = CosmpySigner(self.config.chain, self.config.wallet)
            logger.info("Signer ready for %s", self._signer.address)
        return self._signer

    @property
    def address(self) -> str:
        return self._get().address

    async def execute(
        self,
        contract: str,
        msg: dict[str, Any],
        memo: str = "",
        funds: Sequence[Coin] = (),
    ) -> TxResult:
        return await self._get().execute(contract, msg, memo=memo, funds=funds)


class Session:
    """Entry point bundling every contract client for one chain and wallet."""

    def __init__(self, config: AppConfig, signer: Signer | None = None) -> None:
        self.config = config
        self.chain = ArchwayClient(config.chain)
        self.signer: Signer = signer if signer is not None else LazySigner(config)

        self.marketplace = MarketplaceContract(
            self.chain, config.contracts.marketplace, self.signer, config.chain
        )

        self.cw721: Cw721Contract | None = None
        if config.contracts.cw721:
            self.cw721 = Cw721Contract(self.chain, config.contracts.cw721, self.signer)

        self.minter: MinterContract | None = None
        if config.contracts.minter:
            self.minter = MinterContract(self.chain, config.contracts.minter, self.signer)

        self._cw20: dict[str, Cw20Contract] = {}

    def collection(self, address: str) -> Cw721Contract:
        """Client for any cw721 collection, not only the configured one."""
        return Cw721Contract(self.chain, address, self.signer)

    def cw20(self, token: str) -> Cw20Contract:
        """Client for a cw20 by configured symbol or by contract address."""
        address = self.config.contracts.cw20.get(token, token)
        if address not in self._cw20:
            self._cw20[address] = Cw20Contract(self.chain, address, self.signer)
        return self._cw20[address]

    async def balance(self, address: str | None = None) -> Coin:
        """Native balance of ``address``, defaulting to the signer's wallet."""
        return await self.chain.get_balance(
            address or self.signer.address, self.config.chain.denom
        )
