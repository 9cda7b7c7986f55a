"""Shared fixtures"""

import pytest
from fakes import FakeGateway

from wordlist_sync.core.session import WordListSession
from wordlist_sync.core.sync_store import WordListStore


@pytest.fixture
def token_getter():
    return lambda: "test-token"


@pytest.fixture
def no_token():
    return lambda: None


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def store(gateway):
    return WordListStore(gateway)


@pytest.fixture
def session(store, token_getter):
    return WordListSession(store, token_getter)
