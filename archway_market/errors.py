"""Exceptions raised by the chain and signing layers."""


class ChainError(RuntimeError):
    """Base class for failures talking to the chain."""


class QueryError(ChainError):
    """A smart query failed or every LCD endpoint was unreachable."""


class BroadcastError(ChainError):
    """Signing or broadcasting a transaction failed, or the tx was rejected."""
