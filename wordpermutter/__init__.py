from .loader import load_words, parse_lines
from .permutator import generate_permutations, is_alliteration
from .words import Word, WordType

__all__ = [
    "Word",
    "WordType",
    "generate_permutations",
    "is_alliteration",
    "load_words",
    "parse_lines",
]
