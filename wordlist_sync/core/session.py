"""Word-list store bound to one token source"""

from collections.abc import Callable

from ..models.payloads import VocabularyRef
from ..models.word_lists import SyncSnapshot
from .interfaces import TokenGetter
from .sync_store import Listener, WordListStore


class WordListSession:
    """Convenience facade so consumers do not pass the token getter around"""

    def __init__(self, store: WordListStore, token_getter: TokenGetter):
        self.store = store
        self.token_getter = token_getter

    @property
    def starred(self) -> list[str]:
        return self.store.starred

    @property
    def graveyard(self) -> list[str]:
        return self.store.graveyard

    @property
    def wrong_answers(self) -> list[str]:
        return self.store.wrong_answers

    @property
    def vocabularies(self) -> list[VocabularyRef]:
        return self.store.vocabularies

    @property
    def is_loading(self) -> bool:
        return self.store.is_loading

    @property
    def has_loaded(self) -> bool:
        return self.store.has_loaded

    def snapshot(self) -> SyncSnapshot:
        return self.store.snapshot()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.store.subscribe(listener)

    async def load(self) -> bool:
        return await self.store.load_all(self.token_getter)

    async def toggle_starred(self, word_id: str) -> bool:
        return await self.store.toggle_starred(self.token_getter, word_id)

    async def move_to_graveyard(self, word_id: str) -> bool:
        return await self.store.move_to_graveyard(self.token_getter, word_id)

    async def delete_permanently(self, word_id: str) -> bool:
        return await self.store.delete_permanently(self.token_getter, word_id)

    async def add_wrong_answer(self, word_id: str) -> bool:
        return await self.store.add_wrong_answer(self.token_getter, word_id)

    async def refresh_vocabularies(self) -> bool:
        return await self.store.refresh_vocabularies(self.token_getter)

    def reset(self) -> None:
        self.store.reset()
