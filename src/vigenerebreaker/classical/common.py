from __future__ import annotations

import re
from typing import Iterable

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER_ALPHABET = "abcdefghijklmnopqrstuvwxyz"
A_ORD = ord("A")

_KEY_SPLIT_RE = re.compile(r"[\s,;:]+")


def is_az(ch: str) -> bool:
    """True for A-Z and a-z only."""
    return ch.isascii() and ch.isalpha()


def norm_shift(shift: int) -> int:
    """Bring any integer shift into 0..25."""
    return shift % 26


def shifted_alphabet(alphabet: str, shift: int) -> str:
    s = norm_shift(shift)
    return alphabet[s:] + alphabet[:s]


def parse_key(key: str) -> list[int]:
    """
    Parse keys like: "3,1,4" or "3 1 4" or "[3, 1, 4]"
    Letters are accepted too ("DBE" -> [3, 1, 4]).
    Shifts are returned as given; the cipher normalizes them.
    """
    raw = key.strip().strip("[]()")
    if not raw:
        raise ValueError("Empty key.")

    if raw.isalpha():
        if not all(is_az(ch) for ch in raw):
            raise ValueError(f"Letter key '{key}' must contain only A-Z.")
        return [ord(ch) - A_ORD for ch in raw.upper()]

    parts = [p for p in _KEY_SPLIT_RE.split(raw) if p]
    try:
        return [int(p) for p in parts]
    except ValueError as e:
        raise ValueError(f"Bad key '{key}'. Expected shifts like '3,1,4' or letters like 'DBE'.") from e


def format_key(key: Iterable[int]) -> str:
    return "[" + ", ".join(str(k) for k in key) + "]"
