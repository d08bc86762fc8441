import pytest

from vigenerebreaker.classical.polyalphabetic.vigenere import VigenereCipher

PLAINTEXT = "Meet me here at seven. The deer see the green trees every evening."
KEY = [3, 1, 4]
WORDS = frozenset(
    "meet me here at seven the deer see green trees every evening".split()
)


@pytest.fixture
def plaintext() -> str:
    return PLAINTEXT


@pytest.fixture
def ciphertext() -> str:
    return VigenereCipher(KEY).encrypt(PLAINTEXT)


@pytest.fixture
def words() -> frozenset:
    return WORDS
