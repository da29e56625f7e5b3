"""Chain client protocol — smart-query abstraction."""
from typing import Any, Protocol


class ChainClient(Protocol):
    """Abstract interface for read-only contract queries."""

    async def query_smart(self, contract: str, msg: dict[str, Any]) -> Any: ...
