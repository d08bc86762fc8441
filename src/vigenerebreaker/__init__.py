"""Break repeating-key Caesar (Vigenere-family) ciphers with frequency analysis and a word list."""

from .classical import CaesarCipher, CaesarCracker, VigenereCipher, try_key_length
from .core import BreakResult, KeyFound, KeyNotFound, break_for_language, count_words

__version__ = "0.1.0"

__all__ = [
    "CaesarCipher",
    "CaesarCracker",
    "VigenereCipher",
    "try_key_length",
    "BreakResult",
    "KeyFound",
    "KeyNotFound",
    "break_for_language",
    "count_words",
]
