"""Data models (all frozen)."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

NANOS_PER_SECOND = 1_000_000_000


class SwapType(str, Enum):
    """Marketplace swap kind: a listing (Sale) or a bid (Offer)."""

    SALE = "Sale"
    OFFER = "Offer"

    @classmethod
    def parse(cls, value: SwapType | str) -> SwapType:
        if isinstance(value, SwapType):
            return value
        for member in cls:
            if member.value.lower() == str(value).lower():
                return member
        raise ValueError(f"Swap type must be 'Sale' or 'Offer', got {value!r}")


@dataclass(frozen=True)
class Coin:
    denom: str
    amount: str

    def to_msg(self) -> dict[str, str]:
        return {"denom": self.denom, "amount": self.amount}


@dataclass(frozen=True)
class Expiration:
    """cw-utils ``Expiration``: at a time (nanoseconds), at a height, or never."""

    at_time: int | None = None
    at_height: int | None = None

    @property
    def never(self) -> bool:
        return self.at_time is None and self.at_height is None

    @classmethod
    def from_datetime(cls, when: datetime) -> Expiration:
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        seconds = int(when.timestamp())
        return cls(at_time=seconds * NANOS_PER_SECOND + when.microsecond * 1000)

    @classmethod
    def from_msg(cls, raw: dict[str, Any] | None) -> Expiration:
        if not raw:
            return cls()
        if "at_time" in raw:
            return cls(at_time=int(raw["at_time"]))
        if "at_height" in raw:
            return cls(at_height=int(raw["at_height"]))
        return cls()

    def to_msg(self) -> dict[str, Any]:
        # Timestamps are Uint64 strings on the wire, heights are plain integers.
        if self.at_time is not None:
            return {"at_time": str(self.at_time)}
        if self.at_height is not None:
            return {"at_height": self.at_height}
        return {"never": {}}

    def to_datetime(self) -> datetime | None:
        if self.at_time is None:
            return None
        return datetime.fromtimestamp(self.at_time / NANOS_PER_SECOND, tz=timezone.utc)


@dataclass(frozen=True)
class Swap:
    """A marketplace swap record as returned by ``details`` and paged queries."""

    creator: str
    nft_contract: str
    token_id: str
    price: int
    swap_type: SwapType
    expires: Expiration = field(default_factory=Expiration)
    payment_token: str | None = None

    @property
    def is_native(self) -> bool:
        return self.payment_token is None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Swap:
        # ``details`` returns the collection under "contract", paged queries
        # under "nft_contract".
        return cls(
            creator=raw.get("creator", ""),
            nft_contract=raw.get("nft_contract") or raw.get("contract", ""),
            token_id=str(raw.get("token_id", "")),
            price=int(raw.get("price", 0)),
            swap_type=SwapType.parse(raw.get("swap_type", SwapType.SALE)),
            expires=Expiration.from_msg(raw.get("expires")),
            payment_token=raw.get("payment_token") or None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "creator": self.creator,
            "nft_contract": self.nft_contract,
            "payment_token": self.payment_token,
            "token_id": self.token_id,
            "expires": self.expires.to_msg(),
            "price": str(self.price),
            "swap_type": self.swap_type.value,
        }


@dataclass(frozen=True)
class SwapPage:
    """One page of swaps; pages are 0-indexed, ``total`` counts all pages."""

    swaps: tuple[Swap, ...] = ()
    page: int = 0
    total: int = 0

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> SwapPage:
        return cls(
            swaps=tuple(Swap.from_dict(s) for s in raw.get("swaps", [])),
            page=int(raw.get("page", 0)),
            total=int(raw.get("total", 0)),
        )


@dataclass(frozen=True)
class MarketplaceConfig:
    admin: str
    denom: str
    cw721: tuple[str, ...] = ()
    fees: float = 0.0

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> MarketplaceConfig:
        return cls(
            admin=raw.get("admin", ""),
            denom=raw.get("denom", ""),
            cw721=tuple(raw.get("cw721", [])),
            fees=float(raw.get("fees", 0.0)),
        )

    def to_msg(self) -> dict[str, Any]:
        return {
            "admin": self.admin,
            "denom": self.denom,
            "cw721": list(self.cw721),
            "fees": self.fees,
        }


@dataclass(frozen=True)
class TxResult:
    """Outcome of an execute call; ``error`` is set when it did not land."""

    tx_hash: str = ""
    height: int = 0
    gas_wanted: int = 0
    gas_used: int = 0
    memo: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"error": self.error}
        return {
            "tx_hash": self.tx_hash,
            "height": self.height,
            "gas_wanted": self.gas_wanted,
            "gas_used": self.gas_used,
            "memo": self.memo,
        }
