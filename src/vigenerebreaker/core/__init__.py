from .results import BreakResult, KeyFound, KeyLengthTrial, KeyNotFound
from .scoring import count_words, tokenize
from .breaker import break_for_language, scan_key_lengths

__all__ = [
    "BreakResult",
    "KeyFound",
    "KeyNotFound",
    "KeyLengthTrial",
    "count_words",
    "tokenize",
    "break_for_language",
    "scan_key_lengths",
]
