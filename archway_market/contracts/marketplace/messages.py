"""Pure message builders for the marketplace contract, no I/O.

Optional arguments are left out of the message when they are falsy, so the
contract applies its own defaults.
"""
from __future__ import annotations

from typing import Any

from ...models import Expiration, MarketplaceConfig, Swap, SwapType

# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def config_query() -> dict[str, Any]:
    return {"config": {}}


def list_query(start: str | None = None, limit: int | None = None) -> dict[str, Any]:
    """``list`` walks swap ids; default page size 10, contract maximum 30."""
    body: dict[str, Any] = {}
    if start:
        body["start_after"] = start
    if limit:
        body["limit"] = limit
    return {"list": body}


def details_query(swap_id: str) -> dict[str, Any]:
    return {"details": {"id": swap_id}}


def swaps_of_query(
    address: str,
    swap_type: SwapType | str = SwapType.SALE,
    page: int = 0,
    limit: int = 10,
) -> dict[str, Any]:
    return {
        "swaps_of": {
            "address": address,
            "swap_type": SwapType.parse(swap_type).value,
            "page": page,
            "limit": limit,
        }
    }


def get_total_query(swap_type: SwapType | str = SwapType.SALE) -> dict[str, Any]:
    return {"get_total": {"swap_type": SwapType.parse(swap_type).value}}


def get_offers_query(page: int = 0, limit: int = 10) -> dict[str, Any]:
    return {"get_offers": {"page": page, "limit": limit}}


def get_listings_query(page: int = 0, limit: int = 10) -> dict[str, Any]:
    return {"get_listings": {"page": page, "limit": limit}}


def listings_of_token_query(
    token_id: str,
    cw721: str,
    swap_type: SwapType | str | None = None,
    page: int = 0,
    limit: int = 10,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "token_id": token_id,
        "cw721": cw721,
        "page": page,
        "limit": limit,
    }
    if swap_type:
        body["swap_type"] = SwapType.parse(swap_type).value
    return {"listings_of_token": body}


def swaps_by_price_query(
    min_price: int | None = None,
    max_price: int | None = None,
    swap_type: SwapType | str = SwapType.SALE,
    page: int = 0,
    limit: int = 10,
) -> dict[str, Any]:
    """Prices are Uint128 strings; a missing ``min`` means 0, a missing ``max`` no cap."""
    body: dict[str, Any] = {
        "swap_type": SwapType.parse(swap_type).value,
        "page": page,
        "limit": limit,
    }
    if min_price:
        if int(min_price) < 0:
            raise ValueError(f"Minimum price cannot be negative: {min_price}")
        body["min"] = str(min_price)
    if max_price:
        body["max"] = str(max_price)
    return {"swaps_by_price": body}


def swaps_by_denom_query(
    payment_token: str | None = None,
    swap_type: SwapType | str = SwapType.SALE,
    page: int = 0,
    limit: int = 10,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "swap_type": SwapType.parse(swap_type).value,
        "page": page,
        "limit": limit,
    }
    if payment_token:
        body["payment_token"] = payment_token
    return {"swaps_by_denom": body}


def swaps_by_payment_type_query(
    cw20: bool = False,
    swap_type: SwapType | str = SwapType.SALE,
    page: int = 0,
    limit: int = 10,
) -> dict[str, Any]:
    return {
        "swaps_by_payment_type": {
            "cw20": bool(cw20),
            "swap_type": SwapType.parse(swap_type).value,
            "page": page,
            "limit": limit,
        }
    }


# ---------------------------------------------------------------------------
# Executes
# ---------------------------------------------------------------------------


def create_msg(
    swap_id: str,
    token_id: str,
    expiration: int | str,
    price: int | str,
    swap_type: SwapType | str = SwapType.SALE,
    payment_token: str | None = None,
) -> dict[str, Any]:
    """``create``; ``payment_token`` None means native ARCH, otherwise a cw20."""
    if int(price) < 0:
        raise ValueError(f"Price cannot be negative: {price}")
    return {
        "create": {
            "id": swap_id,
            "payment_token": payment_token,
            "token_id": token_id,
            "expires": Expiration(at_time=int(expiration)).to_msg(),
            "price": str(int(price)),
            "swap_type": SwapType.parse(swap_type).value,
        }
    }


def finish_msg(swap_id: str, swap: Swap) -> dict[str, Any]:
    """``finish`` echoes the stored swap terms back to the contract."""
    return {
        "finish": {
            "id": swap_id,
            "payment_token": swap.payment_token,
            "token_id": swap.token_id,
            "expires": swap.expires.to_msg(),
            "price": str(swap.price),
            "swap_type": swap.swap_type.value,
        }
    }


def cancel_msg(swap_id: str) -> dict[str, Any]:
    return {"cancel": {"id": swap_id}}


def update_msg(swap_id: str, expiration: int | str, price: int | str) -> dict[str, Any]:
    """``update``; the payment denom of a swap cannot be changed."""
    if int(price) < 0:
        raise ValueError(f"Price cannot be negative: {price}")
    return {
        "update": {
            "id": swap_id,
            "expires": Expiration(at_time=int(expiration)).to_msg(),
            "price": str(int(price)),
        }
    }


def update_config_msg(config: MarketplaceConfig | dict[str, Any]) -> dict[str, Any]:
    if isinstance(config, MarketplaceConfig):
        config = config.to_msg()
    return {"update_config": {"config": config}}


def add_nft_msg(contract: str) -> dict[str, Any]:
    return {"add_nft": {"contract": contract}}


def remove_nft_msg(contract: str) -> dict[str, Any]:
    return {"remove_nft": {"contract": contract}}


def withdraw_msg(
    amount: int | str, denom: str, payment_token: str | None = None
) -> dict[str, Any]:
    if int(amount) <= 0:
        raise ValueError(f"Withdraw amount must be positive: {amount}")
    return {
        "withdraw": {
            "amount": str(int(amount)),
            "denom": denom,
            "payment_token": payment_token,
        }
    }
