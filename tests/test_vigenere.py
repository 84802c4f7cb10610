"""
Unit tests for the Vigenère cipher.

Tests:
- Known ciphertext for the LEMON keyword
- Key normalization (case, non-letters)
- Key index advancing only on letters
- Legacy invalid-key message
"""

import pytest

from cryptex.algorithms import VigenereCipher
from cryptex.algorithms.vigenere import INVALID_KEY_MESSAGE
from cryptex.core.errors import InvalidKey, MissingKey


class TestVigenere:
    """Tests for the Vigenère cipher."""

    def test_known_vector(self):
        """ATTACKATDAWN with LEMON gives LXFOPVEFRNHR."""
        assert VigenereCipher().encrypt("ATTACKATDAWN", "LEMON") == "LXFOPVEFRNHR"

    def test_case_and_spacing_preserved(self):
        assert VigenereCipher().encrypt("Attack at dawn", "LEMON") == "Lxfopv ef rnhr"

    def test_decrypt(self):
        assert VigenereCipher().decrypt("Lxfopv ef rnhr", "LEMON") == "Attack at dawn"

    def test_key_is_normalized(self):
        """Lower case and non-letters in the key do not matter."""
        cipher = VigenereCipher()
        expected = cipher.encrypt("Attack at dawn", "LEMON")
        assert cipher.encrypt("Attack at dawn", "le-mon 42") == expected

    def test_key_advances_on_letters_only(self):
        """Punctuation neither changes nor consumes key letters."""
        cipher = VigenereCipher()
        assert cipher.encrypt("a,b", "BC") == "b,d"

    def test_key_a_is_identity(self):
        assert VigenereCipher().encrypt("Hello, World!", "aaaa") == "Hello, World!"

    @pytest.mark.parametrize(
        "text",
        ["Attack at dawn", "", "1234 !?", "Mixed CASE with ünïcode and digits 99"],
    )
    def test_round_trip(self, text):
        cipher = VigenereCipher()
        assert cipher.decrypt(cipher.encrypt(text, "Cryptex"), "Cryptex") == text

    @pytest.mark.parametrize("key", ["123", "!!!", "   "])
    def test_key_without_letters_rejected(self, key):
        with pytest.raises(InvalidKey) as excinfo:
            VigenereCipher().encrypt("hello", key)
        assert excinfo.value.message == INVALID_KEY_MESSAGE
        assert str(excinfo.value) == "Invalid key (must contain at least one letter)"

    @pytest.mark.parametrize("key", [None, ""])
    def test_missing_key(self, key):
        with pytest.raises(MissingKey):
            VigenereCipher().decrypt("hello", key)

    def test_empty_text_still_validates_key(self):
        with pytest.raises(InvalidKey):
            VigenereCipher().encrypt("", "123")
