from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from .words import COMMENT_MARK, FIRST_MARK, SECOND_MARK, Word, WordType

log = logging.getLogger(__name__)

REPLACEMENT_CHAR = "\ufffd"


def is_valid_line(line: str) -> bool:
    """
    A stripped line is parseable when it is not blank and not a comment.
    """
    return bool(line) and not line.startswith(COMMENT_MARK)


def parse_word(line: str) -> Word:
    """
    Build a Word from a stripped, valid line.
      dog#   -> Word("dog", FIRST)
      fish*  -> Word("fish", SECOND)
      cat    -> Word("cat", ANY_ORDER)
    A lone marker gives a Word with empty content.
    """
    if line.endswith(FIRST_MARK):
        return Word(line[:-1], WordType.FIRST)
    if line.endswith(SECOND_MARK):
        return Word(line[:-1], WordType.SECOND)
    return Word(line, WordType.ANY_ORDER)


def parse_lines(lines: Iterable[str]) -> List[Word]:
    words: List[Word] = []
    for raw in lines:
        line = raw.strip()
        if not is_valid_line(line):
            continue
        words.append(parse_word(line))
    # sorted() is stable: repeated lines keep their input order
    return sorted(words)


def load_words(fp: Path) -> List[Word]:
    """
    Read and parse a word list file.
    Any read failure is logged and yields an empty list, never a partial one.
    Invalid UTF-8 is kept as U+FFFD so damaged words stay visible.
    """
    try:
        with Path(fp).open("r", encoding="utf-8", errors="replace") as f:
            lines = f.readlines()
    except OSError as e:
        log.error("could not read word list %s: %s", fp, e)
        return []

    bad = sum(1 for line in lines if REPLACEMENT_CHAR in line)
    if bad:
        log.warning("%d line(s) in %s are not valid UTF-8", bad, fp)

    words = parse_lines(lines)
    log.debug("loaded %d words from %s", len(words), fp)
    return words
