from __future__ import annotations

import logging
from typing import AbstractSet, Iterator, Optional

from vigenerebreaker.classical.monoalphabetic.caesar import DEFAULT_MOST_COMMON
from vigenerebreaker.classical.polyalphabetic.vigenere import VigenereCipher, try_key_length

from .results import BreakResult, KeyFound, KeyLengthTrial, KeyNotFound
from .scoring import count_words

logger = logging.getLogger(__name__)

DEFAULT_MAX_KEY_LENGTH = 100


def scan_key_lengths(
    ciphertext: str,
    dictionary: AbstractSet[str],
    *,
    max_key_length: int = DEFAULT_MAX_KEY_LENGTH,
    most_common: str = DEFAULT_MOST_COMMON,
) -> Iterator[KeyLengthTrial]:
    """
    For every key length 1..max_key_length: guess the key by frequency
    analysis, decrypt the whole message and count dictionary words.
    """
    if not ciphertext:
        return

    for klen in range(1, max_key_length + 1):
        key = try_key_length(ciphertext, klen, most_common)
        if key is None:
            continue
        plaintext = VigenereCipher(key).decrypt(ciphertext)
        words = count_words(plaintext, dictionary)
        logger.debug("key length %d: key=%s valid_words=%d", klen, key, words)
        yield KeyLengthTrial(
            key_length=klen,
            key=tuple(key),
            decrypted_text=plaintext,
            valid_word_count=words,
        )


def break_for_language(
    ciphertext: Optional[str],
    dictionary: AbstractSet[str],
    *,
    max_key_length: int = DEFAULT_MAX_KEY_LENGTH,
    most_common: str = DEFAULT_MOST_COMMON,
) -> BreakResult:
    """
    Try every key length up to max_key_length and keep the decryption with the
    most dictionary words.

    Only a strictly higher word count replaces the current best, so among
    equal scores the shortest key length tried wins. If no length produces a
    single dictionary word the result is KeyNotFound carrying the original
    ciphertext.
    """
    if not ciphertext:
        logger.error("Cannot break an empty message.")
        return KeyNotFound(decrypted_text=ciphertext or "")
    if not dictionary:
        logger.warning("Dictionary is empty; no key length can score above zero.")

    best: Optional[KeyLengthTrial] = None
    for trial in scan_key_lengths(
        ciphertext,
        dictionary,
        max_key_length=max_key_length,
        most_common=most_common,
    ):
        if best is None or trial.valid_word_count > best.valid_word_count:
            best = trial

    if best is None or best.valid_word_count <= 0:
        logger.info("No key length in 1..%d produced a dictionary word.", max_key_length)
        return KeyNotFound(decrypted_text=ciphertext)

    logger.info(
        "Best key length %d with %d valid words: %s",
        best.key_length,
        best.valid_word_count,
        list(best.key),
    )
    return KeyFound(
        decrypted_text=best.decrypted_text,
        best_key=best.key,
        best_key_length=best.key_length,
        valid_word_count=best.valid_word_count,
    )
