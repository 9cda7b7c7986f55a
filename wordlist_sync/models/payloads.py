"""Pydantic models for word-list service payloads"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..logging_config import get_logger

logger = get_logger(__name__)


class VocabularyRef(BaseModel):
    """A user-owned vocabulary collection.

    The sync engine never interprets its fields; the whole record is stored
    and replaced as fetched. Every key is kept verbatim as an extra field.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    def get(self, key: str, default: Any = None) -> Any:
        """Raw value of ``key`` in the fetched record"""
        return (self.model_extra or {}).get(key, default)


class WordRecord(BaseModel):
    """One word entry of a list response; only the id is used"""

    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Word identifier")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        """Accept numeric ids from the service"""
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Word id cannot be empty")
        return str(v)


def _usable_word(entry: Any) -> bool:
    if not isinstance(entry, Mapping):
        return False
    word_id = entry.get("id")
    if word_id is None:
        return False
    return not (isinstance(word_id, str) and not word_id.strip())


class WordListPayload(BaseModel):
    """Body of ``GET /starred``, ``/graveyard`` and ``/wrong-answers``.

    Entries without a usable id are skipped with a warning so that one bad
    record does not fail the whole list.
    """

    model_config = ConfigDict(extra="allow")

    words: list[WordRecord] = Field(default_factory=list)

    @field_validator("words", mode="before")
    @classmethod
    def drop_unusable_words(cls, v: Any) -> Any:
        if v is None:
            return []
        if not isinstance(v, list):
            return v
        usable = [entry for entry in v if _usable_word(entry)]
        if len(usable) != len(v):
            logger.warning(f"Skipping {len(v) - len(usable)} word(s) without an id")
        return usable

    def word_ids(self) -> list[str]:
        return [word.id for word in self.words]


class VocabularyListPayload(BaseModel):
    """Body of ``GET /my-vocabularies``"""

    model_config = ConfigDict(extra="allow")

    vocabularies: list[VocabularyRef] = Field(default_factory=list)

    @field_validator("vocabularies", mode="before")
    @classmethod
    def drop_non_records(cls, v: Any) -> Any:
        if v is None:
            return []
        if not isinstance(v, list):
            return v
        records = [entry for entry in v if isinstance(entry, Mapping)]
        if len(records) != len(v):
            logger.warning(
                f"Skipping {len(v) - len(records)} vocabulary entry(ies) "
                "that are not records"
            )
        return records
