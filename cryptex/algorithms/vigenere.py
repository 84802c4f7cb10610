"""
Vigenère Cipher
================

Polyalphabetic substitution driven by a keyword. The keyword is
normalized to its upper-case Latin letters; each plaintext letter is
shifted by the alphabet position of the next keyword letter:

    encrypt:  c_i = (p_i + k_{j mod m}) mod 26
    decrypt:  p_i = (c_i - k_{j mod m} + 26) mod 26

The keyword index ``j`` advances only on letters, so spaces and
punctuation neither change nor consume key material.

Reference:
    Bellaso, G. B. (1553). La cifra del Sig. Giovan Battista Bellaso.
"""

from __future__ import annotations

from cryptex.algorithms.base import (
    UPPER,
    CipherAlgorithm,
    Key,
    is_latin_letter,
    letters_only,
    shift_letter,
)
from cryptex.core.errors import InvalidKey
from cryptex.core.models import CipherDescriptor, KeyType

# Existing callers match on this exact text.
INVALID_KEY_MESSAGE = "Invalid key (must contain at least one letter)"


class VigenereCipher(CipherAlgorithm):
    """Vigenère cipher with case-preserving pass-through of non-letters."""

    descriptor = CipherDescriptor(
        id="vigenere",
        name="Vigenère Cipher",
        description=(
            "Polyalphabetic substitution where a keyword sets a varying "
            "shift for each letter"
        ),
        details=(
            "The Vigenère cipher cycles through a keyword, using each of its "
            "letters as the shift for the next plaintext letter. In table "
            "form this is the tabula recta: 26 Caesar alphabets, each rotated "
            "one place further than the last. It resisted casual attack for "
            "three centuries, earning the name le chiffre indéchiffrable, "
            "until Kasiski and Babbage showed how to recover the key length."
        ),
        has_key=True,
        key_type=KeyType.TEXTUAL,
        security_level=2,
    )

    def encrypt(self, text: str, key: Key = None) -> str:
        return self._transform(text, self._shifts(key), direction=1)

    def decrypt(self, text: str, key: Key = None) -> str:
        return self._transform(text, self._shifts(key), direction=-1)

    def _shifts(self, key: Key) -> list[int]:
        """Normalize the keyword into a list of shift amounts."""
        clean = letters_only(str(self._require_key(key)))
        if not clean:
            raise InvalidKey(INVALID_KEY_MESSAGE, cipher_id=self.id)
        return [UPPER.index(ch) for ch in clean]

    @staticmethod
    def _transform(text: str, shifts: list[int], direction: int) -> str:
        out: list[str] = []
        j = 0
        for ch in text:
            if is_latin_letter(ch):
                out.append(shift_letter(ch, direction * shifts[j % len(shifts)]))
                j += 1
            else:
                out.append(ch)
        return "".join(out)
