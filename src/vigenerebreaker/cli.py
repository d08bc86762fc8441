from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from vigenerebreaker.classical.common import format_key, parse_key
from vigenerebreaker.classical.monoalphabetic.caesar import DEFAULT_MOST_COMMON
from vigenerebreaker.classical.polyalphabetic.vigenere import VigenereCipher, try_key_length
from vigenerebreaker.core.breaker import DEFAULT_MAX_KEY_LENGTH, break_for_language, scan_key_lengths
from vigenerebreaker.core.dictionary import get_default_dictionary, load_word_list
from vigenerebreaker.core.scoring import count_words
from vigenerebreaker.core.utils import normalize_newlines, read_text_file

app = typer.Typer(help="Vigenere breaker: recover repeating Caesar keys with frequency analysis and a word list.")


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-key-length diagnostics to stderr."),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_message(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None:
        try:
            return read_text_file(file)
        except (OSError, UnicodeDecodeError) as e:
            raise typer.BadParameter(f"Could not read {file}: {e}")
    if text is None:
        raise typer.BadParameter("Provide the message as an argument or with --file.")
    return normalize_newlines(text)


def _load_dictionary(path: Optional[Path]) -> frozenset[str]:
    if path is None:
        words = get_default_dictionary()
    else:
        try:
            words = load_word_list(path)
        except (OSError, UnicodeDecodeError) as e:
            raise typer.BadParameter(f"Could not read dictionary {path}: {e}")
    if not words:
        raise typer.BadParameter("Dictionary is empty.")
    return words


def _parse_key(key: str) -> list[int]:
    try:
        return parse_key(key)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def _check_common(common: str) -> str:
    if len(common) != 1 or not (common.isascii() and common.isalpha()):
        raise typer.BadParameter("--common must be a single letter A-Z.")
    return common.lower()


@app.command()
def encrypt(
    key: str = typer.Option(..., "--key", "-k", help="Shifts like '3,1,4' or letters like 'DBE'."),
    text: Optional[str] = typer.Argument(None, help="Message text. Omit when using --file."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the message from this file instead."),
):
    """Encrypt with a known key (key advances on every character)."""
    message = _read_message(text, file)
    typer.echo(VigenereCipher(_parse_key(key)).encrypt(message))


@app.command()
def decrypt(
    key: str = typer.Option(..., "--key", "-k", help="Shifts like '3,1,4' or letters like 'DBE'."),
    text: Optional[str] = typer.Argument(None, help="Message text. Omit when using --file."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the message from this file instead."),
):
    """Decrypt with a known key."""
    message = _read_message(text, file)
    typer.echo(VigenereCipher(_parse_key(key)).decrypt(message))


@app.command("try-length")
def try_length(
    length: int = typer.Option(..., "--length", "-l", min=1, help="Key length to try."),
    text: Optional[str] = typer.Argument(None, help="Message text. Omit when using --file."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the message from this file instead."),
    common: str = typer.Option(DEFAULT_MOST_COMMON, "--common", help="Letter assumed most frequent in the plaintext."),
):
    """Guess the key for one key length and show the decryption."""
    message = _read_message(text, file)
    key = try_key_length(message, length, _check_common(common))
    if key is None:
        typer.echo(f"Error calculating key for length {length}.")
        raise typer.Exit(code=1)

    typer.echo(f"Calculated Key: {format_key(key)}")
    typer.echo(VigenereCipher(key).decrypt(message))


@app.command("check-words")
def check_words(
    text: Optional[str] = typer.Argument(None, help="Message text. Omit when using --file."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the message from this file instead."),
    dictionary: Optional[Path] = typer.Option(
        None, "--dict", "-d", help="Newline-delimited word list (default: packaged English list)."
    ),
):
    """Count the dictionary words in a text."""
    message = _read_message(text, file)
    if not message.strip():
        typer.echo("No text to check.")
        raise typer.Exit(code=0)

    words = _load_dictionary(dictionary)
    typer.echo(f"Found {count_words(message, words)} valid word(s).")


@app.command("break")
def break_cmd(
    text: Optional[str] = typer.Argument(None, help="Message text. Omit when using --file."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the message from this file instead."),
    dictionary: Optional[Path] = typer.Option(
        None, "--dict", "-d", help="Newline-delimited word list (default: packaged English list)."
    ),
    max_length: int = typer.Option(DEFAULT_MAX_KEY_LENGTH, "--max-length", "-m", min=1, help="Largest key length tried."),
    common: str = typer.Option(DEFAULT_MOST_COMMON, "--common", help="Letter assumed most frequent in the plaintext."),
    trials: int = typer.Option(0, "--trials", "-t", min=0, help="If >0, also list the N best-scoring key lengths."),
):
    """Find the key length, key and plaintext automatically."""
    message = _read_message(text, file)
    if not message:
        raise typer.BadParameter("The message is empty.")

    words = _load_dictionary(dictionary)
    common = _check_common(common)

    if trials > 0:
        ranked = sorted(
            scan_key_lengths(message, words, max_key_length=max_length, most_common=common),
            key=lambda t: (-t.valid_word_count, t.key_length),
        )
        typer.echo("Top key lengths:")
        for t in ranked[:trials]:
            typer.echo(f"  k={t.key_length:3d}  words={t.valid_word_count:4d}  key={format_key(t.key)}")
        typer.echo("")

    result = break_for_language(message, words, max_key_length=max_length, most_common=common)

    if not result.found:
        typer.echo(f"Auto break failed. No suitable key found (1-{max_length}).")
        typer.echo("Original message shown:")
        typer.echo("")
        typer.echo(result.decrypted_text)
        raise typer.Exit(code=1)

    typer.echo(f"Found Key: {format_key(result.best_key)}")
    typer.echo(
        f"Auto break complete. Found {result.valid_word_count} valid words "
        f"with key length {result.best_key_length}."
    )
    typer.echo("-" * 60)
    typer.echo(result.decrypted_text)


def main():
    app()


if __name__ == "__main__":
    main()
