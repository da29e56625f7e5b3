"""Archway chain client."""
from .client import ArchwayClient

__all__ = ["ArchwayClient"]
