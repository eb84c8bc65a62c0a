"""
Two-word combination generator.

Rules for a combination `first + second`:
  - a word never combines with itself
  - FIRST words only lead, SECOND words only follow
  - the pair must not alliterate (see is_alliteration)
  - the joined text fits within the inclusive character limit

The result is a list of text lines meant to be written to disk as is:
a header per leading word, its combinations, and a footer with the total.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

from .words import Word

SEPARATOR = "-" * 36
HEADER_PREFIX = "Permutations starting with "
FOOTER_TEMPLATE = "A total of {count} valid permutations were discovered"


def _fold(ch: str) -> str:
    up = ch.upper()
    # keep single-char mapping only (e.g. 'ß' would expand to 'SS')
    return up if len(up) == 1 else ch


def is_alliteration(first: str, second: str) -> bool:
    """
    True when the pair alliterates: both start with the same letter, or the
    first ends with the letter the second starts with. Case-insensitive.
    Empty words have no letters to compare and count as alliterative, so
    they never end up in a combination.
    """
    if not first or not second:
        return True
    lead = _fold(second[0])
    return _fold(first[0]) == lead or _fold(first[-1]) == lead


def combinations_for(word: Word, words: Sequence[Word], limit: int) -> List[str]:
    """
    All valid `word + other` strings, in the order of `words`.
    """
    out: List[str] = []
    for other in words:
        if other == word:
            continue
        if not other.type.can_follow:
            continue
        if is_alliteration(word.content, other.content):
            continue
        joined = word.content + other.content
        if len(joined) <= limit:
            out.append(joined)
    return out


def build_sections(words: Sequence[Word], limit: int) -> List[Tuple[Word, List[str]]]:
    """
    (leading word, combinations) for every word that leads at least one.
    """
    sections: List[Tuple[Word, List[str]]] = []
    for word in (w for w in words if w.type.can_lead):
        combos = combinations_for(word, words, limit)
        if combos:
            sections.append((word, combos))
    return sections


def format_sections(sections: Sequence[Tuple[Word, List[str]]]) -> List[str]:
    lines: List[str] = []
    total = 0
    for word, combos in sections:
        lines.append(HEADER_PREFIX + word.content)
        lines.append(SEPARATOR)
        lines.extend(combos)
        lines.append("")
        total += len(combos)

    lines.append(SEPARATOR)
    lines.append(FOOTER_TEMPLATE.format(count=total))
    return lines


def generate_permutations(words: Sequence[Word], limit: int) -> List[str]:
    return format_sections(build_sections(words, limit))
