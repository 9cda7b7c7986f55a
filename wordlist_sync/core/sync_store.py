"""Optimistic synchronization store for the user's word lists"""

import asyncio
from collections.abc import Callable
from typing import Any, cast

from pydantic import ValidationError

from ..exceptions import MalformedResponseError
from ..logging_config import get_logger
from ..models.payloads import VocabularyListPayload, VocabularyRef, WordListPayload
from ..models.word_lists import MembershipSet, SyncSnapshot, SyncState
from ..utils.error_handler import ErrorCollector, handle_errors_async, safe_execute
from .constants import Endpoints
from .interfaces import GatewayInterface, TokenGetter
from .optimistic import OptimisticUpdate

logger = get_logger(__name__)

Listener = Callable[[SyncSnapshot], None]
Mutation = Callable[[SyncState], object]


class WordListStore:
    """Holds the starred, graveyard and wrong-answer sets plus the user's
    vocabularies, and keeps them in sync with the word-list service.

    Every mutation is applied locally first and then confirmed remotely; a
    failed confirmation is compensated so the change appears to revert.
    Failures never propagate to the caller. Each operation returns True only
    when the service confirmed it.

    ``reset()`` bumps a generation counter; work started before the reset
    may not write state afterwards.
    """

    def __init__(self, gateway: GatewayInterface):
        self.gateway = gateway
        self._state = SyncState()
        self._generation = 0
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def starred(self) -> list[str]:
        return self._state.starred.to_list()

    @property
    def graveyard(self) -> list[str]:
        return self._state.graveyard.to_list()

    @property
    def wrong_answers(self) -> list[str]:
        return self._state.wrong_answers.to_list()

    @property
    def vocabularies(self) -> list[VocabularyRef]:
        return list(self._state.vocabularies)

    @property
    def is_loading(self) -> bool:
        return self._state.loading

    @property
    def has_loaded(self) -> bool:
        return self._state.loaded

    def is_starred(self, word_id: str) -> bool:
        return word_id in self._state.starred

    def is_in_graveyard(self, word_id: str) -> bool:
        return word_id in self._state.graveyard

    def is_wrong_answer(self, word_id: str) -> bool:
        return word_id in self._state.wrong_answers

    def snapshot(self) -> SyncSnapshot:
        return self._state.snapshot()

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with a snapshot after every state change.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self._state.snapshot()
        for listener in list(self._listeners):
            safe_execute(listener, None, snapshot)

    def _mutate(self, mutation: Mutation) -> None:
        mutation(self._state)
        self._notify()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _has_token(token_getter: TokenGetter, action: str) -> bool:
        token = token_getter() if token_getter else None
        if not token:
            logger.warning(f"Cannot {action} without auth token")
            return False
        return True

    def _is_generation(self, generation: int) -> Callable[[], bool]:
        return lambda: generation == self._generation

    async def _run_optimistic(
        self,
        description: str,
        forward: Mutation,
        inverse: Mutation,
        token_getter: TokenGetter,
        endpoint: str,
        method: str,
    ) -> bool:
        update = OptimisticUpdate(
            description=description,
            apply=lambda: self._mutate(forward),
            revert=lambda: self._mutate(inverse),
            confirm=lambda: self.gateway.call(token_getter, endpoint, method),
        )
        await update.run(self._is_generation(self._generation))
        return True

    @staticmethod
    def _parse_word_ids(endpoint: str, payload: Any) -> list[str]:
        if payload is None:
            return []
        try:
            return WordListPayload.model_validate(payload).word_ids()
        except ValidationError as e:
            raise MalformedResponseError(endpoint, str(payload), str(e)) from e

    @staticmethod
    def _parse_vocabularies(payload: Any) -> list[VocabularyRef]:
        if payload is None:
            return []
        try:
            return VocabularyListPayload.model_validate(payload).vocabularies
        except ValidationError as e:
            raise MalformedResponseError(
                Endpoints.MY_VOCABULARIES, str(payload), str(e)
            ) from e

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    @handle_errors_async(default_return=False, operation_name="load_all")
    async def load_all(self, token_getter: TokenGetter) -> bool:
        """Fetch all three word lists and the vocabularies in one batch.

        Runs at most once until ``reset()``; a call while a load is in flight
        is ignored. The four requests are joined all-or-nothing: if any fails
        nothing is committed.
        """
        token = token_getter() if token_getter else None
        if not token:
            logger.debug("Skipping word lists load - no auth token")
            return False
        if self._state.loading or self._state.loaded:
            return False

        generation = self._generation
        self._state.loading = True
        self._notify()
        try:
            results = await asyncio.gather(
                *(
                    self.gateway.call(token_getter, endpoint)
                    for endpoint in Endpoints.INITIAL_LOAD
                ),
                return_exceptions=True,
            )
            collector = ErrorCollector()
            for result in results:
                if isinstance(result, Exception):
                    collector.add_error(result)
                elif isinstance(result, BaseException):
                    raise result
            if collector.has_errors():
                logger.error(f"Failed to load word lists: {collector.get_summary()}")
                return False

            if generation != self._generation:
                logger.debug("Discarding word lists loaded before reset")
                return False

            starred_data, graveyard_data, wrong_data, vocab_data = results
            starred = self._parse_word_ids(Endpoints.STARRED, starred_data)
            graveyard = self._parse_word_ids(Endpoints.GRAVEYARD, graveyard_data)
            wrong_answers = self._parse_word_ids(Endpoints.WRONG_ANSWERS, wrong_data)
            vocabularies = self._parse_vocabularies(vocab_data)

            self._state.starred = MembershipSet(starred)
            self._state.graveyard = MembershipSet(graveyard)
            self._state.wrong_answers = MembershipSet(wrong_answers)
            self._state.vocabularies = vocabularies
            self._state.loaded = True
            logger.info(
                f"Loaded {len(starred)} starred, {len(graveyard)} graveyard, "
                f"{len(wrong_answers)} wrong-answer words and "
                f"{len(vocabularies)} vocabularies"
            )
            return True
        finally:
            if generation == self._generation:
                self._state.loading = False
                self._notify()

    @handle_errors_async(default_return=False, operation_name="toggle_starred")
    async def toggle_starred(self, token_getter: TokenGetter, word_id: str) -> bool:
        """Star ``word_id`` if it is not starred, unstar it otherwise"""
        if not self._has_token(token_getter, "toggle starred"):
            return False

        position = self._state.starred.index(word_id)
        was_starred = position is not None

        def forward(state: SyncState) -> None:
            if was_starred:
                state.starred.discard(word_id)
            else:
                state.starred.add(word_id)

        def inverse(state: SyncState) -> None:
            if was_starred:
                state.starred.insert(cast(int, position), word_id)
            else:
                state.starred.discard(word_id)

        return await self._run_optimistic(
            f"{'unstar' if was_starred else 'star'} of {word_id}",
            forward,
            inverse,
            token_getter,
            Endpoints.member(Endpoints.STARRED, word_id),
            "DELETE" if was_starred else "POST",
        )

    @handle_errors_async(default_return=False, operation_name="move_to_graveyard")
    async def move_to_graveyard(self, token_getter: TokenGetter, word_id: str) -> bool:
        """Bury ``word_id``: add it to the graveyard and drop it from starred
        and wrong answers in one local update."""
        if not self._has_token(token_getter, "move to graveyard"):
            return False

        before = self._state.snapshot()

        def forward(state: SyncState) -> None:
            state.graveyard.add(word_id)
            state.starred.discard(word_id)
            state.wrong_answers.discard(word_id)

        return await self._run_optimistic(
            f"move of {word_id} to graveyard",
            forward,
            lambda state: state.restore_membership(word_id, before),
            token_getter,
            Endpoints.member(Endpoints.GRAVEYARD, word_id),
            "POST",
        )

    @handle_errors_async(default_return=False, operation_name="delete_permanently")
    async def delete_permanently(self, token_getter: TokenGetter, word_id: str) -> bool:
        """Remove ``word_id`` from every list and delete it remotely"""
        if not self._has_token(token_getter, "delete from graveyard"):
            return False

        before = self._state.snapshot()

        def forward(state: SyncState) -> None:
            state.graveyard.discard(word_id)
            state.starred.discard(word_id)
            state.wrong_answers.discard(word_id)

        return await self._run_optimistic(
            f"permanent delete of {word_id}",
            forward,
            lambda state: state.restore_membership(word_id, before),
            token_getter,
            Endpoints.member(Endpoints.GRAVEYARD, word_id),
            "DELETE",
        )

    @handle_errors_async(default_return=False, operation_name="add_wrong_answer")
    async def add_wrong_answer(self, token_getter: TokenGetter, word_id: str) -> bool:
        """Record a wrong answer; already-recorded words cause no request"""
        if not self._has_token(token_getter, "track wrong answer"):
            return False
        if word_id in self._state.wrong_answers:
            return False

        return await self._run_optimistic(
            f"wrong answer for {word_id}",
            lambda state: state.wrong_answers.add(word_id),
            lambda state: state.wrong_answers.discard(word_id),
            token_getter,
            Endpoints.member(Endpoints.WRONG_ANSWERS, word_id),
            "POST",
        )

    @handle_errors_async(default_return=False, operation_name="refresh_vocabularies")
    async def refresh_vocabularies(self, token_getter: TokenGetter) -> bool:
        """Replace the vocabulary list with a fresh copy from the service"""
        if not self._has_token(token_getter, "refresh vocabularies"):
            return False

        generation = self._generation
        data = await self.gateway.call(token_getter, Endpoints.MY_VOCABULARIES)
        vocabularies = self._parse_vocabularies(data)
        if generation != self._generation:
            logger.debug("Discarding vocabularies fetched before reset")
            return False

        self._state.vocabularies = vocabularies
        self._notify()
        return True

    def reset(self) -> None:
        """Drop all lists and lifecycle flags, e.g. on sign-out"""
        self._generation += 1
        self._state = SyncState()
        self._notify()
