"""cw721 collection client and message builders."""
from .contract import Cw721Contract

__all__ = ["Cw721Contract"]
