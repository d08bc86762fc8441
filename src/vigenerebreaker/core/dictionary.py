from __future__ import annotations

import logging
from importlib import resources
from os import PathLike
from typing import Iterable, Optional, Union

from .utils import read_text_file

logger = logging.getLogger(__name__)

DEFAULT_WORD_LIST = "english_words.txt"

_DEFAULT_DICTIONARY: Optional[frozenset[str]] = None


def parse_word_list(lines: Iterable[str]) -> frozenset[str]:
    """One word per line; blank lines are skipped and case is folded."""
    words = set()
    for line in lines:
        w = line.strip().lower()
        if w:
            words.add(w)
    return frozenset(words)


def load_word_list(path: Union[str, PathLike]) -> frozenset[str]:
    """Load a newline-delimited word list from disk. OSError propagates."""
    words = parse_word_list(read_text_file(path).split("\n"))
    if not words:
        logger.warning("Word list %s is empty.", path)
    logger.debug("Loaded %d words from %s.", len(words), path)
    return words


def get_default_dictionary() -> frozenset[str]:
    """Load (and cache) vigenerebreaker/data/english_words.txt."""
    global _DEFAULT_DICTIONARY
    if _DEFAULT_DICTIONARY is not None:
        return _DEFAULT_DICTIONARY

    raw = (
        resources.files("vigenerebreaker")
        .joinpath("data")
        .joinpath(DEFAULT_WORD_LIST)
        .read_text(encoding="utf-8")
    )
    _DEFAULT_DICTIONARY = parse_word_list(raw.splitlines())
    logger.debug("Loaded %d words from packaged %s.", len(_DEFAULT_DICTIONARY), DEFAULT_WORD_LIST)
    return _DEFAULT_DICTIONARY
