"""Marketplace contract client — swap queries and swap transactions."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, AsyncIterator

from ...config import ChainConfig
from ...denom import coin, format_amount
from ...interfaces.chain import ChainClient
from ...interfaces.signer import Signer
from ...models import MarketplaceConfig, Swap, SwapPage, SwapType, TxResult
from ..base import ContractClient
from . import messages

logger = logging.getLogger(__name__)


class MarketplaceContract(ContractClient):
    """Query and trade swaps (Sale listings and Offer bids) on the marketplace."""

    def __init__(
        self,
        chain_client: ChainClient,
        address: str,
        signer: Signer | None = None,
        chain: ChainConfig | None = None,
    ) -> None:
        super().__init__(chain_client, address, signer)
        self._chain = chain or ChainConfig()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def config(self) -> dict[str, Any]:
        """Marketplace admin, native denom, curated cw721 list and fee rate.

        Returns ``{}`` when the query fails.
        """
        result = await self._query(messages.config_query())
        if isinstance(result, dict) and "error" in result:
            return {}
        return result

    async def list(self, start: str | None = None, limit: int | None = None) -> Any:
        """Paginated swap ids, e.g. ``{"swaps": ["swap1", ...]}``.

        Returns ``{}`` when the query fails.
        """
        result = await self._query(messages.list_query(start, limit))
        if isinstance(result, dict) and "error" in result:
            return {}
        return result

    async def details(self, swap_id: str) -> Any:
        return await self._query(messages.details_query(swap_id))

    async def swaps_of(
        self,
        address: str,
        swap_type: SwapType | str = SwapType.SALE,
        page: int = 0,
        limit: int = 10,
    ) -> Any:
        """Swaps created by ``address``. Requesting a missing page is an error."""
        return await self._query(
            messages.swaps_of_query(address, swap_type, page, limit)
        )

    async def get_total(self, swap_type: SwapType | str = SwapType.SALE) -> Any:
        """Number of swaps of ``swap_type``."""
        return await self._query(messages.get_total_query(swap_type))

    async def get_offers(self, page: int = 0, limit: int = 10) -> Any:
        return await self._query(messages.get_offers_query(page, limit))

    async def get_listings(self, page: int = 0, limit: int = 10) -> Any:
        return await self._query(messages.get_listings_query(page, limit))

    async def listings_of_token(
        self,
        token_id: str,
        cw721: str,
        swap_type: SwapType | str | None = None,
        page: int = 0,
        limit: int = 10,
    ) -> Any:
        """Swaps for one token of collection ``cw721``, optionally filtered by type."""
        return await self._query(
            messages.listings_of_token_query(token_id, cw721, swap_type, page, limit)
        )

    async def swaps_by_price(
        self,
        min_price: int | None = None,
        max_price: int | None = None,
        swap_type: SwapType | str = SwapType.SALE,
        page: int = 0,
        limit: int = 10,
    ) -> Any:
        return await self._query(
            messages.swaps_by_price_query(min_price, max_price, swap_type, page, limit)
        )

    async def swaps_by_denom(
        self,
        payment_token: str | None = None,
        swap_type: SwapType | str = SwapType.SALE,
        page: int = 0,
        limit: int = 10,
    ) -> Any:
        """Swaps paid in cw20 ``payment_token``, or in native ARCH when None."""
        return await self._query(
            messages.swaps_by_denom_query(payment_token, swap_type, page, limit)
        )

    async def swaps_by_payment_type(
        self,
        cw20: bool = False,
        swap_type: SwapType | str = SwapType.SALE,
        page: int = 0,
        limit: int = 10,
    ) -> Any:
        return await self._query(
            messages.swaps_by_payment_type_query(cw20, swap_type, page, limit)
        )

    async def parsed_config(self) -> MarketplaceConfig | None:
        raw = await self.config()
        return MarketplaceConfig.from_dict(raw) if raw else None

    async def _iter_pages(self, fetch, limit: int) -> AsyncIterator[Swap]:
        page = 0
        seen = 0
        while True:
            raw = await fetch(page=page, limit=limit)
            if not isinstance(raw, dict) or "error" in raw:
                logger.warning("Stopping pagination at page %d: %s", page, raw)
                return

            result = SwapPage.from_dict(raw)
            for swap in result.swaps:
                yield swap
            seen += len(result.swaps)

            if not result.swaps or seen >= result.total:
                return
            page += 1

    def iter_listings(self, limit: int = 30) -> AsyncIterator[Swap]:
        """Yield every Sale swap, walking pages until ``total`` is reached."""
        return self._iter_pages(self.get_listings, limit)

    def iter_offers(self, limit: int = 30) -> AsyncIterator[Swap]:
        """Yield every Offer swap, walking pages until ``total`` is reached."""
        return self._iter_pages(self.get_offers, limit)

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def _native_label(self, amount: int | str) -> str:
        return f"{format_amount(amount, self._chain.decimals)} {self._chain.display_denom}"

    async def _load_swap(self, swap_id: str) -> Swap | str:
        """Swap terms from ``details``, or the error message when unavailable."""
        raw = await self.details(swap_id)
        if not isinstance(raw, dict) or "error" in raw:
            error = raw.get("error") if isinstance(raw, dict) else raw
            return f"Could not load swap {swap_id}: {error}"
        return Swap.from_dict(raw)

    async def create_native(
        self,
        swap_id: str,
        token_id: str,
        expiration: int | str,
        price: int | str,
        swap_type: SwapType | str = SwapType.SALE,
    ) -> TxResult:
        """Create a swap paid in native ARCH.

        Args:
            swap_id: Caller-chosen id used to refer to this swap.
            token_id: Token being swapped.
            expiration: Nanosecond timestamp after which the swap is invalid.
            price: Price in ``aarch``.
            swap_type: ``Sale`` or ``Offer``.
        """
        cost = coin(price, self._chain.denom)
        msg = messages.create_msg(swap_id, token_id, expiration, cost.amount, swap_type)
        return await self._execute(
            msg, memo=f"List {token_id} for {self._native_label(cost.amount)}"
        )

    async def finish_native(self, swap_id: str, swap: Swap | None = None) -> TxResult:
        """Settle a native ARCH swap; a Sale is paid by attaching ``price`` as funds.

        ``swap`` is loaded with :meth:`details` when not given.
        """
        if swap is None:
            loaded = await self._load_swap(swap_id)
            if isinstance(loaded, str):
                return TxResult(error=loaded)
            swap = loaded

        native = replace(swap, payment_token=None)
        funds = (
            [coin(swap.price, self._chain.denom)]
            if swap.swap_type is SwapType.SALE
            else []
        )
        return await self._execute(
            messages.finish_msg(swap_id, native),
            memo=f"Swap {swap.token_id} for {self._native_label(swap.price)}",
            funds=funds,
        )

    async def create_cw20(
        self,
        swap_id: str,
        cw20_contract: str,
        token_id: str,
        expiration: int | str,
        price: int | str,
        denom: str = "",
        swap_type: SwapType | str = SwapType.SALE,
        decimals: int | None = None,
    ) -> TxResult:
        """Create a swap paid in the cw20 at ``cw20_contract``.

        ``denom`` and ``decimals`` only label the memo.
        """
        msg = messages.create_msg(
            swap_id, token_id, expiration, price, swap_type, payment_token=cw20_contract
        )
        places = decimals if decimals is not None else self._chain.decimals
        label = f"{format_amount(price, places)} {denom}".strip()
        return await self._execute(msg, memo=f"List {token_id} for {label}")

    async def finish_cw20(
        self, swap_id: str, swap: Swap | None = None, denom: str = ""
    ) -> TxResult:
        """Settle a cw20 swap; the marketplace pulls payment from the allowance."""
        if swap is None:
            loaded = await self._load_swap(swap_id)
            if isinstance(loaded, str):
                return TxResult(error=loaded)
            swap = loaded

        label = f"{swap.price} {denom}".strip()
        return await self._execute(
            messages.finish_msg(swap_id, swap),
            memo=f"Swap {swap.token_id} for {label}",
        )

    async def cancel(self, swap_id: str) -> TxResult:
        """Cancel a swap; only its creator may do so."""
        return await self._execute(messages.cancel_msg(swap_id), memo="Cancel swap")

    async def update(
        self, swap_id: str, expiration: int | str, price: int | str
    ) -> TxResult:
        """Change price and/or expiry; the payment denom stays as created."""
        cost = coin(price, self._chain.denom)
        return await self._execute(
            messages.update_msg(swap_id, expiration, cost.amount), memo="Update swap"
        )

    # Admin only

    async def update_config(self, config: MarketplaceConfig | dict[str, Any]) -> TxResult:
        return await self._execute(
            messages.update_config_msg(config), memo="Update marketplace config"
        )

    async def add_nft(self, contract: str) -> TxResult:
        """Add a cw721 collection to the curated list allowed to trade."""
        return await self._execute(messages.add_nft_msg(contract), memo="Add NFT collection")

    async def remove_nft(self, contract: str) -> TxResult:
        return await self._execute(
            messages.remove_nft_msg(contract), memo="Remove NFT collection"
        )

    async def withdraw(
        self, amount: int | str, denom: str, payment_token: str | None = None
    ) -> TxResult:
        """Withdraw accrued fees, native by default or cw20 ``payment_token``."""
        return await self._execute(
            messages.withdraw_msg(amount, denom, payment_token), memo="Withdraw fees"
        )
