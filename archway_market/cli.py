"""Command-line interface for the Archway NFT marketplace client."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
import time
from typing import Any

from .config import load_config
from .denom import to_atto
from .errors import ChainError
from .logging_setup import configure_logging
from .models import NANOS_PER_SECOND, Swap, SwapType, TxResult
from .services import Session

_SWAP_TYPES = [t.value for t in SwapType]


def _add_type(parser: argparse.ArgumentParser, default: str | None = "Sale") -> None:
    parser.add_argument(
        "--type",
        dest="swap_type",
        default=default,
        type=lambda v: SwapType.parse(v).value,
        help=f"Swap type, one of {_SWAP_TYPES}",
    )


def _add_paging(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--page", type=int, default=0, help="0-indexed page")
    parser.add_argument("--limit", type=int, default=10, help="Results per page")


def _add_expiry(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--days", type=float, default=7.0, help="Expire this many days from now"
    )
    group.add_argument(
        "--expires", type=int, default=None, help="Expiration as a nanosecond timestamp"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="archway-market",
        description="Query and trade swaps on the Archway NFT marketplace",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("config", help="Marketplace configuration")

    p = sub.add_parser("list", help="Swap ids, paginated by id")
    p.add_argument("--start", default=None, help="Start after this swap id")
    p.add_argument("--limit", type=int, default=None, help="Ids per page (max 30)")

    p = sub.add_parser("details", help="Details of one swap")
    p.add_argument("id")

    p = sub.add_parser("swaps-of", help="Swaps created by an address")
    p.add_argument("address")
    _add_type(p)
    _add_paging(p)

    p = sub.add_parser("total", help="Count swaps of a type")
    _add_type(p)

    for name, help_text in (("listings", "Sale swaps"), ("offers", "Offer swaps")):
        p = sub.add_parser(name, help=help_text)
        _add_paging(p)
        p.add_argument("--all", action="store_true", help="Walk every page")

    p = sub.add_parser("token-swaps", help="Swaps for one token")
    p.add_argument("token_id")
    p.add_argument("cw721", help="Collection contract address")
    _add_type(p, default=None)
    _add_paging(p)

    p = sub.add_parser("by-price", help="Swaps within a price range (base units)")
    p.add_argument("--min", dest="min_price", type=int, default=None)
    p.add_argument("--max", dest="max_price", type=int, default=None)
    _add_type(p)
    _add_paging(p)

    p = sub.add_parser("by-denom", help="Swaps paid in a cw20, or native ARCH")
    p.add_argument("--payment-token", default=None, help="cw20 contract address")
    _add_type(p)
    _add_paging(p)

    p = sub.add_parser("by-payment-type", help="Swaps paid in cw20 or native ARCH")
    p.add_argument("--cw20", action="store_true", help="cw20 payments instead of ARCH")
    _add_type(p)
    _add_paging(p)

    p = sub.add_parser("balance", help="Native balance of an address or the wallet")
    p.add_argument("address", nargs="?", default=None)

    p = sub.add_parser("create", help="Create a swap")
    p.add_argument("id", help="New swap id")
    p.add_argument("token_id")
    p.add_argument("price", help="Price in display units, e.g. 1.5")
    p.add_argument("--cw20", default=None, help="cw20 symbol or address to be paid in")
    p.add_argument(
        "--decimals", type=int, default=None, help="Decimals of the payment denom"
    )
    _add_type(p)
    _add_expiry(p)

    p = sub.add_parser("finish", help="Settle a swap")
    p.add_argument("id")

    p = sub.add_parser("cancel", help="Cancel one of your swaps")
    p.add_argument("id")

    p = sub.add_parser("update", help="Change price and expiry of a swap")
    p.add_argument("id")
    p.add_argument("price", help="New price in display units")
    p.add_argument("--decimals", type=int, default=None)
    _add_expiry(p)

    return parser


def _expiration(args: argparse.Namespace) -> int:
    if args.expires is not None:
        return args.expires
    return int((time.time() + args.days * 86400) * NANOS_PER_SECOND)


async def _iter_all(session: Session, command: str) -> list[dict[str, Any]]:
    market = session.marketplace
    swaps = market.iter_listings() if command == "listings" else market.iter_offers()
    return [s.to_dict() async for s in swaps]


async def _finish(session: Session, swap_id: str) -> Any:
    market = session.marketplace
    raw = await market.details(swap_id)
    if not isinstance(raw, dict) or "error" in raw:
        return raw
    swap = Swap.from_dict(raw)
    if swap.is_native:
        return await market.finish_native(swap_id, swap)
    return await market.finish_cw20(swap_id, swap)


async def _dispatch(session: Session, args: argparse.Namespace) -> Any:
    market = session.marketplace
    decimals = session.config.chain.decimals
    command = args.command

    if command == "config":
        return await market.config() or {"error": "Marketplace config query failed"}
    if command == "list":
        swaps = await market.list(args.start, args.limit)
        return swaps or {"error": "Swap list query failed"}
    if command == "details":
        return await market.details(args.id)
    if command == "swaps-of":
        return await market.swaps_of(args.address, args.swap_type, args.page, args.limit)
    if command == "total":
        return await market.get_total(args.swap_type)
    if command in ("listings", "offers"):
        if args.all:
            return await _iter_all(session, command)
        fetch = market.get_listings if command == "listings" else market.get_offers
        return await fetch(args.page, args.limit)
    if command == "token-swaps":
        return await market.listings_of_token(
            args.token_id, args.cw721, args.swap_type, args.page, args.limit
        )
    if command == "by-price":
        return await market.swaps_by_price(
            args.min_price, args.max_price, args.swap_type, args.page, args.limit
        )
    if command == "by-denom":
        return await market.swaps_by_denom(
            args.payment_token, args.swap_type, args.page, args.limit
        )
    if command == "by-payment-type":
        return await market.swaps_by_payment_type(
            args.cw20, args.swap_type, args.page, args.limit
        )
    if command == "balance":
        try:
            coin = await session.balance(args.address)
        except (ChainError, ValueError) as e:
            return {"error": str(e)}
        return coin.to_msg()
    if command == "create":
        places = args.decimals if args.decimals is not None else decimals
        price = to_atto(args.price, places)
        if args.cw20:
            token = session.cw20(args.cw20)
            denom = args.cw20 if args.cw20 != token.address else ""
            return await market.create_cw20(
                args.id, token.address, args.token_id, _expiration(args),
                price, denom, args.swap_type, places,
            )
        return await market.create_native(
            args.id, args.token_id, _expiration(args), price, args.swap_type
        )
    if command == "finish":
        return await _finish(session, args.id)
    if command == "cancel":
        return await market.cancel(args.id)
    if command == "update":
        price = to_atto(args.price, args.decimals if args.decimals is not None else decimals)
        return await market.update(args.id, _expiration(args), price)

    raise ValueError(f"Unknown command: {command}")


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command; returns the process exit code."""
    configure_logging(args.log_level)
    config = load_config(args.config)
    session = Session(config)

    result = await _dispatch(session, args)
    if isinstance(result, TxResult):
        result = result.to_dict()

    print(json.dumps(result, indent=2, default=str))
    if isinstance(result, dict) and "error" in result:
        return 1
    return 0


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))
