"""In-memory word-list state"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .payloads import VocabularyRef


class MembershipSet:
    """Ordered collection of word ids with set semantics.

    Insertion order is kept for display only; adding an id that is already
    present is a no-op.
    """

    def __init__(self, word_ids: Iterable[str] | None = None):
        self._ids: list[str] = []
        for word_id in word_ids or ():
            self.add(word_id)

    def __contains__(self, word_id: object) -> bool:
        return word_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MembershipSet):
            return self._ids == other._ids
        return NotImplemented

    def __repr__(self) -> str:
        return f"MembershipSet({self._ids!r})"

    def add(self, word_id: str) -> bool:
        """Append ``word_id``; return False if it was already a member"""
        if word_id in self._ids:
            return False
        self._ids.append(word_id)
        return True

    def insert(self, index: int, word_id: str) -> bool:
        """Insert ``word_id`` at ``index`` (clamped); no-op if already a member"""
        if word_id in self._ids:
            return False
        self._ids.insert(min(max(index, 0), len(self._ids)), word_id)
        return True

    def discard(self, word_id: str) -> int | None:
        """Remove ``word_id``; return its former position, or None if absent"""
        try:
            index = self._ids.index(word_id)
        except ValueError:
            return None
        del self._ids[index]
        return index

    def index(self, word_id: str) -> int | None:
        try:
            return self._ids.index(word_id)
        except ValueError:
            return None

    def to_list(self) -> list[str]:
        return list(self._ids)


@dataclass(frozen=True)
class SyncSnapshot:
    """Immutable view of the sync state at one instant"""

    starred: tuple[str, ...] = ()
    graveyard: tuple[str, ...] = ()
    wrong_answers: tuple[str, ...] = ()
    vocabularies: tuple[VocabularyRef, ...] = ()
    loading: bool = False
    loaded: bool = False


# Names of the three membership sets, in the order they are loaded
MEMBERSHIP_SETS = ("starred", "graveyard", "wrong_answers")


@dataclass
class SyncState:
    """Mutable aggregate of the three membership sets and the vocabulary list"""

    starred: MembershipSet = field(default_factory=MembershipSet)
    graveyard: MembershipSet = field(default_factory=MembershipSet)
    wrong_answers: MembershipSet = field(default_factory=MembershipSet)
    vocabularies: list[VocabularyRef] = field(default_factory=list)
    loading: bool = False
    loaded: bool = False

    def snapshot(self) -> SyncSnapshot:
        return SyncSnapshot(
            starred=tuple(self.starred),
            graveyard=tuple(self.graveyard),
            wrong_answers=tuple(self.wrong_answers),
            vocabularies=tuple(self.vocabularies),
            loading=self.loading,
            loaded=self.loaded,
        )

    def membership_set(self, name: str) -> MembershipSet:
        if name not in MEMBERSHIP_SETS:
            raise KeyError(name)
        result: MembershipSet = getattr(self, name)
        return result

    def restore_membership(self, word_id: str, snapshot: SyncSnapshot) -> None:
        """Put ``word_id`` back where ``snapshot`` had it in each membership set.

        Only ``word_id`` is touched, so changes other operations made to
        different ids in the meantime survive.
        """
        for name in MEMBERSHIP_SETS:
            members = self.membership_set(name)
            previous: tuple[str, ...] = getattr(snapshot, name)
            if word_id in previous:
                members.insert(previous.index(word_id), word_id)
            else:
                members.discard(word_id)
