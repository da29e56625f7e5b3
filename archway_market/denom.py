"""Conversions between atto-unit integers and display amounts."""
from __future__ import annotations

from decimal import Decimal

from .models import Coin

ARCH_DECIMALS = 18


def from_atto(amount: int | str, decimals: int = ARCH_DECIMALS) -> Decimal:
    """Convert an on-chain integer amount to its display value.

    Examples:
        from_atto("1000000000000000000") → Decimal("1")
        from_atto(25, decimals=1) → Decimal("2.5")
    """
    return Decimal(int(amount)).scaleb(-decimals)


def to_atto(amount: int | str | Decimal, decimals: int = ARCH_DECIMALS) -> int:
    """Convert a display amount to the on-chain integer amount."""
    value = Decimal(str(amount))
    if value < 0:
        raise ValueError(f"Amount cannot be negative: {amount}")

    scaled = value.scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise ValueError(
            f"Amount {amount} has more than {decimals} decimal places"
        )
    return int(scaled)


def format_amount(amount: int | str, decimals: int = ARCH_DECIMALS) -> str:
    """Human-readable display amount with trailing zeros stripped."""
    value = from_atto(amount, decimals)
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def coin(amount: int | str, denom: str) -> Coin:
    """Build a Coin, rejecting negative amounts."""
    value = int(amount)
    if value < 0:
        raise ValueError(f"Coin amount cannot be negative: {amount}")
    return Coin(denom=denom, amount=str(value))
