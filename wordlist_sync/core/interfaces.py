"""Interface definitions for core components"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

# Produces the current bearer token, or None when signed out
TokenGetter = Callable[[], str | None]


class GatewayInterface(ABC):
    """Interface for authenticated calls to the word-list service"""

    @abstractmethod
    async def call(
        self,
        token_getter: TokenGetter,
        endpoint: str,
        method: str = "GET",
        body: Any | None = None,
    ) -> Any:
        """Perform an authenticated request and return the parsed JSON body"""
        pass

    def close(self) -> None:
        """Release any held connections"""
        return None
