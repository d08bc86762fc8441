import logging

import pytest

from vigenerebreaker.classical.monoalphabetic.caesar import CaesarCracker
from vigenerebreaker.classical.polyalphabetic.vigenere import VigenereCipher, slice_string, try_key_length

TEXT = "Attack at dawn!\nMeet me at the old mill, 9 PM.\n\nBring the key."


@pytest.mark.parametrize("key", [[0], [3, 1, 4], [25, 0, 13, 7], [30, -2], list(range(26))])
def test_decrypt_inverts_encrypt(key):
    vc = VigenereCipher(key)
    assert vc.decrypt(vc.encrypt(TEXT)) == TEXT


def test_known_encryption():
    assert VigenereCipher([3, 1, 4]).encrypt("Attack at dawn") == "Duxddo bx eezo"
    assert VigenereCipher([3, 1, 4]).decrypt("Duxddo bx eezo") == "Attack at dawn"


def test_key_advances_on_every_character():
    # textbook Vigenere would give "b c"; here the space consumes shift 2
    assert VigenereCipher([1, 2]).encrypt("a a") == "b b"
    assert VigenereCipher([1, 2]).encrypt("a\na") == "b\nb"
    assert VigenereCipher([1, 2]).encrypt("aa") == "bc"


def test_case_preserved_and_non_letters_copied():
    out = VigenereCipher([1, 2, 3]).encrypt("AbC, 9!")
    assert out == "BdF, 9!"


def test_empty_key_is_noop(caplog):
    with caplog.at_level(logging.WARNING):
        vc = VigenereCipher([])
    assert "empty key" in caplog.text
    assert vc.encrypt(TEXT) == TEXT
    assert vc.decrypt(TEXT) == TEXT
    assert len(vc) == 0


def test_none_key_is_empty():
    assert VigenereCipher(None).key == ()


def test_out_of_range_shifts_normalized(caplog):
    with caplog.at_level(logging.WARNING):
        vc = VigenereCipher([29, -1])
    assert vc.key == (3, 25)
    assert "out-of-range" in caplog.text
    assert vc.encrypt("aa") == VigenereCipher([3, 25]).encrypt("aa") == "dz"


def test_str():
    assert str(VigenereCipher([3, 1, 4])) == "Vigenere Key: [3, 1, 4]"


def test_slice_string():
    assert slice_string("abcdefg", 0, 3) == "adg"
    assert slice_string("abcdefg", 1, 3) == "be"
    assert slice_string("abcdefg", 7, 3) == ""
    assert slice_string("a b\nc", 1, 2) == " \n"


def test_slice_string_rejects_non_positive_total(caplog):
    with caplog.at_level(logging.ERROR):
        assert slice_string("abc", 0, 0) == ""
    assert "positive" in caplog.text


def test_length_one_is_plain_caesar_crack():
    text = "Wkh txlfn eurzq ira mxpsv ryhu wkh odcb grj; wkhvh wuhhv duh juhhq."
    assert try_key_length(text, 1) == [CaesarCracker().get_key(text)]


def test_recovers_key_at_correct_length(ciphertext):
    assert try_key_length(ciphertext, 3) == [3, 1, 4]
    assert try_key_length(ciphertext, 6) == [3, 1, 4, 3, 1, 4]


def test_target_letter_is_used():
    assert try_key_length("ddd", 1, "a") == [3]
    assert try_key_length("ddd", 1, "e") == [25]


@pytest.mark.parametrize("length", [0, -3])
def test_non_positive_length_is_usage_error(length, caplog):
    with caplog.at_level(logging.ERROR):
        assert try_key_length("abc", length) is None
    assert "positive" in caplog.text


@pytest.mark.parametrize("text", ["", None])
def test_empty_message_is_usage_error(text):
    assert try_key_length(text, 3) is None


def test_length_beyond_message_pads_with_zero():
    assert try_key_length("lll", 5) == [7, 7, 7, 0, 0]
