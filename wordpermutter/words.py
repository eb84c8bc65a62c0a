from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

# Trailing markers on an input line
FIRST_MARK = "#"
SECOND_MARK = "*"
# Lines starting with this are ignored
COMMENT_MARK = "//"


class WordType(Enum):
    """
    Where a word may sit inside a two-word combination.
    """

    ANY_ORDER = "any"
    FIRST = "first"
    SECOND = "second"

    @property
    def can_lead(self) -> bool:
        return self is not WordType.SECOND

    @property
    def can_follow(self) -> bool:
        return self is not WordType.FIRST


@total_ordering
@dataclass(frozen=True, eq=False)
class Word:
    """
    One token from the word list.

    Two words are the same word when their text matches, whatever their type.
    Ordering is plain string ordering of the text.
    """

    content: str
    type: WordType = WordType.ANY_ORDER

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Word):
            return NotImplemented
        return self.content == other.content

    def __lt__(self, other: Word) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.content < other.content

    def __hash__(self) -> int:
        return hash(self.content)

    def __str__(self) -> str:
        return self.content
