from __future__ import annotations

from collections import Counter

from vigenerebreaker.classical.common import (
    ALPHABET,
    LOWER_ALPHABET,
    is_az,
    norm_shift,
    shifted_alphabet,
)

DEFAULT_MOST_COMMON = "e"


class CaesarCipher:
    """
    Caesar shift over A-Z and a-z; case is preserved and every other
    character passes through unchanged.
    """

    def __init__(self, shift: int) -> None:
        self.shift = norm_shift(shift)
        plain = ALPHABET + LOWER_ALPHABET
        shifted = shifted_alphabet(ALPHABET, self.shift) + shifted_alphabet(LOWER_ALPHABET, self.shift)
        self._enc = str.maketrans(plain, shifted)
        self._dec = str.maketrans(shifted, plain)

    def encrypt_char(self, ch: str) -> str:
        return ch.translate(self._enc)

    def decrypt_char(self, ch: str) -> str:
        return ch.translate(self._dec)

    def encrypt(self, text: str) -> str:
        return text.translate(self._enc)

    def decrypt(self, text: str) -> str:
        return text.translate(self._dec)

    @staticmethod
    def decode(text: str, shift: int) -> str:
        return CaesarCipher(shift).decrypt(text)

    def __repr__(self) -> str:
        return f"CaesarCipher(shift={self.shift})"


class CaesarCracker:
    """Recover a Caesar shift by assuming one letter dominates the plaintext."""

    def __init__(self, most_common: str = DEFAULT_MOST_COMMON) -> None:
        self.most_common = most_common.lower()

    def get_key(self, encrypted: str) -> int:
        """
        Return the shift in 0..25 whose decryption holds the most copies of
        the target letter. Shifts are scanned in order and the first maximum
        wins; text without letters gives 0.
        """
        if len(self.most_common) != 1 or not is_az(self.most_common):
            return 0

        counts = Counter(ch.lower() for ch in encrypted if is_az(ch))
        target = LOWER_ALPHABET.index(self.most_common)

        # decrypting with shift s turns letter target+s into the target letter
        best_shift = 0
        best_count = -1
        for shift in range(26):
            count = counts.get(LOWER_ALPHABET[(target + shift) % 26], 0)
            if count > best_count:
                best_count = count
                best_shift = shift
        return best_shift
