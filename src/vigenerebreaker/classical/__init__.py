from __future__ import annotations

from .monoalphabetic.caesar import CaesarCipher, CaesarCracker
from .polyalphabetic.vigenere import VigenereCipher, slice_string, try_key_length

__all__ = [
    "CaesarCipher",
    "CaesarCracker",
    "VigenereCipher",
    "slice_string",
    "try_key_length",
]
