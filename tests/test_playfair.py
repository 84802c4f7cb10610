"""
Unit tests for the Playfair cipher.

Tests:
- Key square construction (MONARCHY, J folded into I)
- Digraph preparation with filler letters
- Known ciphertext and decryption
- The lossy filler heuristic on decrypt
"""

import pytest

from cryptex.algorithms import PlayfairCipher, PlayfairMatrix
from cryptex.algorithms.playfair import digraphs, normalize, strip_fillers
from cryptex.core.errors import MissingKey


class TestPlayfairMatrix:
    """Tests for the 5x5 key square."""

    def test_monarchy_rows(self):
        matrix = PlayfairMatrix.from_key("MONARCHY")
        assert matrix.rows == ["MONAR", "CHYBD", "EFGIK", "LPQST", "UVWXZ"]

    def test_positions(self):
        matrix = PlayfairMatrix.from_key("MONARCHY")
        assert matrix.position("Y") == (1, 2)
        assert matrix.position("Z") == (4, 4)

    def test_j_shares_i_cell(self):
        matrix = PlayfairMatrix.from_key("MONARCHY")
        assert matrix.position("J") == matrix.position("I")

    def test_at_wraps(self):
        matrix = PlayfairMatrix.from_key("MONARCHY")
        assert matrix.at(0, 5) == "M"
        assert matrix.at(-1, 0) == "U"

    def test_key_letters_deduplicated(self):
        matrix = PlayfairMatrix.from_key("balloon")
        assert matrix.rows[0] == "BALON"

    def test_j_in_key_folds_to_i(self):
        assert PlayfairMatrix.from_key("JAM").rows[0] == "IAMBC"

    def test_key_without_letters_gives_alphabet(self):
        matrix = PlayfairMatrix.from_key("1234")
        assert "".join(matrix.rows) == "ABCDEFGHIKLMNOPQRSTUVWXYZ"

    def test_twenty_five_distinct_letters(self):
        letters = "".join(PlayfairMatrix.from_key("Playfair Example").rows)
        assert len(letters) == 25
        assert len(set(letters)) == 25
        assert "J" not in letters

    def test_rejects_bad_square(self):
        with pytest.raises(ValueError):
            PlayfairMatrix("ABC")

    def test_str(self):
        matrix = PlayfairMatrix.from_key("MONARCHY")
        assert str(matrix).splitlines()[0] == "M O N A R"


class TestDigraphs:
    """Tests for plaintext preparation."""

    def test_normalize(self):
        assert normalize("Jump, jive!") == "IUMPIIVE"

    def test_doubled_letter_gets_filler(self):
        assert digraphs("balloon") == ["BA", "LX", "LO", "ON"]

    def test_odd_length_padded(self):
        assert digraphs("INSTRUMENTS") == ["IN", "ST", "RU", "ME", "NT", "SX"]

    def test_empty(self):
        assert digraphs("") == []

    def test_strip_fillers(self):
        assert strip_fillers("BALXLOON") == "BALLOON"
        assert strip_fillers("INSTRUMENTSX") == "INSTRUMENTS"


class TestPlayfairCipher:
    """Tests for Playfair encryption and decryption."""

    def test_known_vector(self):
        assert PlayfairCipher().encrypt("INSTRUMENTS", "MONARCHY") == "GATLMZCLRQXA"

    def test_decrypt_known_vector(self):
        assert PlayfairCipher().decrypt("GATLMZCLRQXA", "MONARCHY") == "INSTRUMENTS"

    def test_encrypt_normalizes_input(self):
        cipher = PlayfairCipher()
        assert cipher.encrypt("instruments!", "monarchy") == "GATLMZCLRQXA"

    def test_output_has_even_length(self):
        assert len(PlayfairCipher().encrypt("hello world", "KEYWORD")) % 2 == 0

    @pytest.mark.parametrize(
        "text", ["Hide the gold in the tree stump", "balloon", "meet me"]
    )
    def test_round_trip_up_to_normalization(self, text):
        cipher = PlayfairCipher()
        decrypted = cipher.decrypt(cipher.encrypt(text, "PLAYFAIR"), "PLAYFAIR")
        assert decrypted == normalize(text)

    def test_genuine_x_between_equal_letters_is_lost(self):
        """A real X between two equal letters is taken for a filler."""
        cipher = PlayfairCipher()
        decrypted = cipher.decrypt(cipher.encrypt("TAXATION", "MONARCHY"), "MONARCHY")
        assert decrypted == "TAATION"

    def test_empty_text(self):
        assert PlayfairCipher().encrypt("", "KEY") == ""
        assert PlayfairCipher().decrypt("", "KEY") == ""

    @pytest.mark.parametrize("key", [None, ""])
    def test_missing_key(self, key):
        with pytest.raises(MissingKey):
            PlayfairCipher().encrypt("hello", key)

    def test_matrix_helper(self):
        assert PlayfairCipher().matrix("MONARCHY").rows[1] == "CHYBD"
