"""In-memory stand-in for the word-list service gateway"""

import asyncio
from typing import Any

from wordlist_sync.core.interfaces import GatewayInterface, TokenGetter
from wordlist_sync.exceptions import AuthenticationError, RemoteError


class FakeGateway(GatewayInterface):
    """Records every call; responses, failures and pauses are set per endpoint"""

    def __init__(self, responses: dict[str, Any] | None = None):
        self.calls: list[tuple[str, str]] = []
        self.responses: dict[str, Any] = responses or {}
        self.failures: dict[str, Exception] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.closed = False

    def fail(self, endpoint: str, message: str = "Internal error") -> None:
        self.failures[endpoint] = RemoteError("ANY", endpoint, message, 500)

    def hold(self, endpoint: str) -> asyncio.Event:
        """Make calls to ``endpoint`` wait until the returned event is set"""
        gate = asyncio.Event()
        self.gates[endpoint] = gate
        return gate

    async def call(
        self,
        token_getter: TokenGetter,
        endpoint: str,
        method: str = "GET",
        body: Any | None = None,
    ) -> Any:
        if not token_getter():
            raise AuthenticationError(endpoint)
        self.calls.append((method, endpoint))
        gate = self.gates.get(endpoint)
        if gate is not None:
            await gate.wait()
        else:
            await asyncio.sleep(0)
        failure = self.failures.get(endpoint)
        if failure is not None:
            raise failure
        return self.responses.get(endpoint)

    def close(self) -> None:
        self.closed = True


async def settle(rounds: int = 5) -> None:
    """Let pending tasks run until they block on a held endpoint"""
    for _ in range(rounds):
        await asyncio.sleep(0)


def word_list(*word_ids: str) -> dict[str, Any]:
    """Build a list response body the way the service shapes it"""
    return {
        "words": [{"id": word_id, "term": f"term-{word_id}"} for word_id in word_ids]
    }


def initial_responses(
    starred: tuple[str, ...] = (),
    graveyard: tuple[str, ...] = (),
    wrong_answers: tuple[str, ...] = (),
    vocabularies: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    return {
        "/starred": word_list(*starred),
        "/graveyard": word_list(*graveyard),
        "/wrong-answers": word_list(*wrong_answers),
        "/my-vocabularies": {"vocabularies": vocabularies or []},
    }
