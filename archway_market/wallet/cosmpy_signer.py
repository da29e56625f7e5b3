"""Signer backed by cosmpy."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Sequence

from cosmpy.aerial.client import LedgerClient, NetworkConfig
from cosmpy.aerial.client.utils import prepare_and_broadcast_basic_transaction
from cosmpy.aerial.contract.cosmwasm import create_cosmwasm_execute_msg
from cosmpy.aerial.tx import Transaction
from cosmpy.aerial.wallet import LocalWallet
from cosmpy.crypto.address import Address

from ..config import ChainConfig, WalletConfig
from ..errors import BroadcastError
from ..models import Coin, TxResult

logger = logging.getLogger(__name__)


def network_config(config: ChainConfig) -> NetworkConfig:
    """cosmpy network settings for the configured chain."""
    return NetworkConfig(
        chain_id=config.chain_id,
        url=config.grpc_url,
        fee_minimum_gas_price=config.gas_price,
        fee_denomination=config.denom,
        staking_denomination=config.denom,
    )


def funds_string(funds: Sequence[Coin]) -> str | None:
    """cosmpy coin-string form of ``funds``, e.g. ``"1000aarch"``."""
    if not funds:
        return None
    return ",".join(f"{c.amount}{c.denom}" for c in funds)


class CosmpySigner:
    """Execute contract messages from a mnemonic wallet via cosmpy."""

    def __init__(self, chain: ChainConfig, wallet: WalletConfig) -> None:
        if not wallet.mnemonic:
            raise ValueError("A wallet mnemonic is required to sign transactions")
        self._wallet = LocalWallet.from_mnemonic(
            wallet.mnemonic, prefix=chain.bech32_prefix
        )
        self._gas_limit = wallet.gas_limit
        self._ledger = LedgerClient(network_config(chain))

    @property
    def address(self) -> str:
        return str(self._wallet.address())

    def _broadcast(
        self, contract: str, msg: dict[str, Any], memo: str, funds: str | None
    ) -> TxResult:
        tx = Transaction()
        tx.add_message(
            create_cosmwasm_execute_msg(
                self._wallet.address(), Address(contract), msg, funds=funds
            )
        )
        submitted = prepare_and_broadcast_basic_transaction(
            self._ledger,
            tx,
            self._wallet,
            gas_limit=self._gas_limit,
            memo=memo,
        )
        response = submitted.wait_to_complete()
        return TxResult(
            tx_hash=response.hash,
            height=response.height,
            gas_wanted=response.gas_wanted,
            gas_used=response.gas_used,
            memo=memo,
        )

    async def execute(
        self,
        contract: str,
        msg: dict[str, Any],
        memo: str = "",
        funds: Sequence[Coin] = (),
    ) -> TxResult:
        """Sign and broadcast ``msg`` to ``contract``; waits for inclusion."""
        logger.info("Broadcasting to %s from %s: %s", contract, self.address, memo)
        try:
            result = await asyncio.to_thread(
                self._broadcast, contract, msg, memo, funds_string(funds)
            )
        except Exception as e:
            raise BroadcastError(f"Broadcast failed: {e}") from e

        logger.info("Tx %s included at height %d", result.tx_hash, result.height)
        return result
