"""Protocol interfaces for the marketplace client."""
from .chain import ChainClient
from .signer import Signer

__all__ = ["ChainClient", "Signer"]
