"""Data models for shortlink storage."""

import enum
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ShortLink:
    """Represents a stored URL <-> short code mapping."""

    original_url: str
    short_code: str


class InsertStatus(enum.Enum):
    """Outcome of an insert-if-absent call."""

    INSERTED = "inserted"
    URL_EXISTS = "url_exists"
    CODE_TAKEN = "code_taken"


@dataclass(frozen=True)
class InsertResult:
    """Result of ``LinkStore.insert_if_absent``.

    ``short_code`` is the code now mapped to the URL: the requested one when
    INSERTED, the previously stored one when URL_EXISTS, and None when
    CODE_TAKEN.
    """

    status: InsertStatus
    short_code: Optional[str] = None

    @classmethod
    def inserted(cls, short_code: str) -> "InsertResult":
        return cls(InsertStatus.INSERTED, short_code)

    @classmethod
    def url_exists(cls, short_code: str) -> "InsertResult":
        return cls(InsertStatus.URL_EXISTS, short_code)

    @classmethod
    def code_taken(cls) -> "InsertResult":
        return cls(InsertStatus.CODE_TAKEN)
