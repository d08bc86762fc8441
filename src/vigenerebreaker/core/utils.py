from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Union


def normalize_newlines(text: str) -> str:
    """Collapse CRLF and lone CR to LF so every line break is one character."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def read_text_file(path: Union[str, PathLike]) -> str:
    """
    Read a whole text file with line breaks normalized.
    OSError / UnicodeDecodeError propagate to the caller.
    """
    # newline="" keeps CR and CRLF intact so normalization is explicit
    with open(Path(path), encoding="utf-8", newline="") as fh:
        return normalize_newlines(fh.read())
