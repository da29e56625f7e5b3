"""Marketplace contract client and message builders."""
from .contract import MarketplaceContract

__all__ = ["MarketplaceContract"]
