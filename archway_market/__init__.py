"""Async client for the Archway NFT marketplace, cw721 and minter contracts."""
from .config import AppConfig, load_config
from .errors import BroadcastError, ChainError, QueryError
from .models import Expiration, Swap, SwapPage, SwapType, TxResult
from .services import Session

__all__ = [
    "AppConfig",
    "BroadcastError",
    "ChainError",
    "Expiration",
    "QueryError",
    "Session",
    "Swap",
    "SwapPage",
    "SwapType",
    "TxResult",
    "load_config",
]
