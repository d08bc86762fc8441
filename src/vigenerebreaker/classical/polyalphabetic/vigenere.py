from __future__ import annotations

import logging
from typing import Iterable, Optional

from vigenerebreaker.classical.common import format_key, norm_shift
from vigenerebreaker.classical.monoalphabetic.caesar import (
    DEFAULT_MOST_COMMON,
    CaesarCipher,
    CaesarCracker,
)

logger = logging.getLogger(__name__)


class VigenereCipher:
    """
    Vigenere cipher with raw-position key progression: the key index moves on
    every character (letters, spaces, punctuation, newlines), not only on
    letters. Only letters are shifted.
    """

    def __init__(self, key: Optional[Iterable[int]]) -> None:
        raw = list(key) if key is not None else []
        if not raw:
            logger.warning("VigenereCipher created with an empty key; transforms return the input unchanged.")
        for shift in raw:
            if not 0 <= shift <= 25:
                logger.warning("VigenereCipher key contains an out-of-range shift %d; using %d.", shift, norm_shift(shift))

        self.key: tuple[int, ...] = tuple(norm_shift(s) for s in raw)
        # one Caesar table per key position
        self._ciphers = [CaesarCipher(s) for s in self.key]

    def encrypt(self, text: str) -> str:
        return self.transform(text, encrypt=True)

    def decrypt(self, text: str) -> str:
        return self.transform(text, encrypt=False)

    def transform(self, text: str, encrypt: bool) -> str:
        if not self._ciphers:
            return text

        n = len(self._ciphers)
        out = []
        for i, ch in enumerate(text):
            cc = self._ciphers[i % n]
            out.append(cc.encrypt_char(ch) if encrypt else cc.decrypt_char(ch))
        return "".join(out)

    def __len__(self) -> int:
        return len(self.key)

    def __str__(self) -> str:
        return f"Vigenere Key: {format_key(self.key)}"

    def __repr__(self) -> str:
        return f"VigenereCipher(key={list(self.key)!r})"


def slice_string(message: str, which_slice: int, total_slices: int) -> str:
    """Characters at positions which_slice, which_slice + total_slices, ..."""
    if total_slices <= 0:
        logger.error("total_slices must be positive, got %d.", total_slices)
        return ""
    if which_slice < 0:
        return ""
    return message[which_slice::total_slices]


def try_key_length(
    encrypted: Optional[str],
    key_length: int,
    most_common: str = DEFAULT_MOST_COMMON,
) -> Optional[list[int]]:
    """
    Guess a key of the given length by cracking each raw-position slice as an
    independent Caesar cipher.

    Returns None when key_length is not positive or the message is empty.
    Slices that come out empty (key_length longer than the message) get
    shift 0.
    """
    if key_length <= 0:
        logger.error("Key length must be positive, got %d.", key_length)
        return None
    if not encrypted:
        logger.error("Encrypted message is None or empty.")
        return None

    if key_length > len(encrypted):
        logger.debug(
            "Key length %d exceeds message length %d; %d slice(s) empty, using shift 0.",
            key_length,
            len(encrypted),
            key_length - len(encrypted),
        )

    cracker = CaesarCracker(most_common)
    key: list[int] = []
    for i in range(key_length):
        part = slice_string(encrypted, i, key_length)
        key.append(cracker.get_key(part) if part else 0)
    return key
