from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

# best_key_length reported when no key was found
NO_KEY_LENGTH = -1


@dataclass(frozen=True)
class KeyFound:
    decrypted_text: str
    best_key: tuple[int, ...]
    best_key_length: int
    valid_word_count: int

    found = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "found": True,
            "decrypted_text": self.decrypted_text,
            "best_key": list(self.best_key),
            "best_key_length": self.best_key_length,
            "valid_word_count": self.valid_word_count,
        }


@dataclass(frozen=True)
class KeyNotFound:
    # Holds the original ciphertext so callers can fall back to showing it
    decrypted_text: str

    found = False
    best_key: Optional[tuple[int, ...]] = field(default=None, init=False)
    best_key_length: int = field(default=NO_KEY_LENGTH, init=False)
    valid_word_count: int = field(default=0, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "found": False,
            "decrypted_text": self.decrypted_text,
            "best_key": None,
            "best_key_length": NO_KEY_LENGTH,
            "valid_word_count": 0,
        }


BreakResult = Union[KeyFound, KeyNotFound]


@dataclass(frozen=True)
class KeyLengthTrial:
    key_length: int
    key: tuple[int, ...]
    decrypted_text: str
    valid_word_count: int
