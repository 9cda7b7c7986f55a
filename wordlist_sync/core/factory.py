"""Factory functions for creating configured instances"""

from .gateway import AuthenticatedGateway
from .interfaces import GatewayInterface, TokenGetter
from .session import WordListSession
from .sync_store import WordListStore


class WordListStoreFactory:
    """Factory for creating isolated WordListStore instances"""

    @staticmethod
    def create_default(
        base_url: str | None = None, timeout: float | None = None
    ) -> WordListStore:
        """Create a store talking to the configured service"""
        return WordListStore(AuthenticatedGateway(base_url=base_url, timeout=timeout))

    @staticmethod
    def create_custom(gateway: GatewayInterface) -> WordListStore:
        """Create a store with a caller-supplied gateway"""
        return WordListStore(gateway)


def create_word_list_session(
    token_getter: TokenGetter,
    base_url: str | None = None,
    gateway: GatewayInterface | None = None,
) -> WordListSession:
    """Convenience function to create a store bound to ``token_getter``"""

    if gateway:
        store = WordListStoreFactory.create_custom(gateway)
    else:
        store = WordListStoreFactory.create_default(base_url=base_url)
    return WordListSession(store, token_getter)
