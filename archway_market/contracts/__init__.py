"""Contract clients for the marketplace, its collections and payment tokens."""
from .cw20 import Cw20Contract
from .cw721 import Cw721Contract
from .marketplace import MarketplaceContract
from .minter import MinterContract

__all__ = ["Cw20Contract", "Cw721Contract", "MarketplaceContract", "MinterContract"]
