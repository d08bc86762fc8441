from __future__ import annotations

import re
from typing import AbstractSet

# \W+ splitting over ASCII word characters; digits and "_" stay inside tokens
_WORD_RE = re.compile(r"\w+", re.ASCII)


def tokenize(text: str) -> list[str]:
    """Maximal runs of word characters, lower-cased."""
    if not text:
        return []
    return [w.lower() for w in _WORD_RE.findall(text)]


def count_words(text: str, dictionary: AbstractSet[str]) -> int:
    """
    Number of tokens in text that appear in the dictionary.
    Every occurrence counts; there is no weighting by word length.
    """
    if not text or not dictionary:
        return 0
    return sum(1 for w in tokenize(text) if w in dictionary)
