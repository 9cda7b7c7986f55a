"""Data models for the word-list sync engine"""

from .payloads import VocabularyListPayload, VocabularyRef, WordListPayload, WordRecord
from .word_lists import MembershipSet, SyncSnapshot, SyncState

__all__ = [
    "MembershipSet",
    "SyncSnapshot",
    "SyncState",
    "VocabularyRef",
    "VocabularyListPayload",
    "WordListPayload",
    "WordRecord",
]
