"""
Shift Ciphers
==============

Monoalphabetic ciphers that move each Latin letter independently:

    - Caesar: shift by a numeric key, ``c = (p + k) mod 26``.
    - ROT13:  Caesar with the fixed key 13, its own inverse.
    - Atbash: reflect the alphabet, ``c = 25 - p``, its own inverse.

Non-letters (digits, punctuation, whitespace, non-ASCII) pass through
unchanged, and each letter keeps its case.

References:
    - Suetonius, *De Vita Caesarum*, Divus Julius 56.
    - Kahn, D. (1996). The Codebreakers, ch. 2. Scribner.
"""

from __future__ import annotations

from cryptex.algorithms.base import (
    LOWER,
    UPPER,
    CipherAlgorithm,
    Key,
    shift_letter,
)
from cryptex.core.models import CipherDescriptor, KeyType


def _shift_text(text: str, shift: int) -> str:
    return "".join(shift_letter(ch, shift) for ch in text)


class CaesarCipher(CipherAlgorithm):
    """Caesar shift cipher.

    The key is an integer of any sign or magnitude; it is reduced
    modulo 26 before use, so shift 26 is the identity and shift -1
    equals shift 25.
    """

    descriptor = CipherDescriptor(
        id="caesar",
        name="Caesar Cipher",
        description=(
            "Shifts every letter a fixed number of positions along "
            "the alphabet"
        ),
        details=(
            "Named after Julius Caesar, who reportedly used a shift of "
            "three for private letters. Each letter is replaced by the one "
            "a fixed number of places further down the alphabet, wrapping "
            "from Z back to A. With only 25 useful keys it falls to a "
            "brute-force search in moments, but it remains the classic "
            "introduction to substitution ciphers."
        ),
        has_key=True,
        key_type=KeyType.NUMERIC,
        security_level=1,
    )

    def encrypt(self, text: str, key: Key = None) -> str:
        return _shift_text(text, self._int_key(key) % 26)

    def decrypt(self, text: str, key: Key = None) -> str:
        return _shift_text(text, -(self._int_key(key) % 26))


class Rot13Cipher(CipherAlgorithm):
    """ROT13, the Caesar shift by 13. Any supplied key is ignored."""

    descriptor = CipherDescriptor(
        id="rot13",
        name="ROT13 Cipher",
        description=(
            "Replaces each letter with the one 13 positions after it"
        ),
        details=(
            "ROT13 is the Caesar cipher with a shift of 13. Because 13 is "
            "half of 26, applying it twice returns the original text, which "
            "made it the customary way to hide spoilers and puzzle answers "
            "on Usenet. It obscures text from a casual glance and offers no "
            "security at all."
        ),
        has_key=False,
        key_type=KeyType.NONE,
        security_level=1,
    )

    SHIFT = 13

    def encrypt(self, text: str, key: Key = None) -> str:
        return _shift_text(text, self.SHIFT)

    def decrypt(self, text: str, key: Key = None) -> str:
        return self.encrypt(text)


_ATBASH_TABLE = str.maketrans(UPPER + LOWER, UPPER[::-1] + LOWER[::-1])


class AtbashCipher(CipherAlgorithm):
    """Atbash mirror cipher (A<->Z, B<->Y, ...). Any supplied key is ignored."""

    descriptor = CipherDescriptor(
        id="atbash",
        name="Atbash Cipher",
        description=(
            "Maps each letter to its mirror position in the alphabet"
        ),
        details=(
            "Atbash was first used with the Hebrew alphabet and appears in "
            "the Book of Jeremiah. The first letter swaps with the last, the "
            "second with the second-to-last and so on. It has no key, so "
            "anyone who knows the scheme can read the message."
        ),
        has_key=False,
        key_type=KeyType.NONE,
        security_level=1,
    )

    def encrypt(self, text: str, key: Key = None) -> str:
        return text.translate(_ATBASH_TABLE)

    def decrypt(self, text: str, key: Key = None) -> str:
        return self.encrypt(text)
