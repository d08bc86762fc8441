from vigenerebreaker.core.dictionary import get_default_dictionary, load_word_list, parse_word_list
from vigenerebreaker.core.utils import normalize_newlines, read_text_file


def test_parse_word_list_folds_case_and_skips_blanks():
    words = parse_word_list(["The", "", "  cat  ", "CAT", "\t"])
    assert words == frozenset({"the", "cat"})


def test_load_word_list_handles_crlf(tmp_path):
    path = tmp_path / "English"
    path.write_bytes(b"Attack\r\nat\r\n\r\nDAWN\r\n")
    assert load_word_list(path) == frozenset({"attack", "at", "dawn"})


def test_load_empty_word_list(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("\n\n", encoding="utf-8")
    assert load_word_list(path) == frozenset()


def test_default_dictionary_is_cached():
    words = get_default_dictionary()
    assert {"the", "every", "green"} <= words
    assert all(w == w.lower() and w for w in words)
    assert get_default_dictionary() is words


def test_normalize_newlines():
    assert normalize_newlines("a\r\nb\rc\nd") == "a\nb\nc\nd"
    assert normalize_newlines("a\r\n\r\nb") == "a\n\nb"


def test_read_text_file_normalizes_line_breaks(tmp_path):
    path = tmp_path / "secret.txt"
    path.write_bytes(b"Line one\r\nLine two\rLine three\n")
    assert read_text_file(path) == "Line one\nLine two\nLine three\n"
