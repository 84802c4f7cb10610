"""
Playfair Cipher
================

Digraph substitution over a 5x5 key square (I and J share a cell).

Square construction:
    1. Take the key's letters in order, folding J into I, keeping only
       the first occurrence of each.
    2. Append the unused letters A-Z (J skipped) alphabetically.
    3. Lay the 25 letters out row-major.

Encryption rules for a digraph ``(a, b)``:
    - same row:    each letter moves one column right (wrapping)
    - same column: each letter moves one row down (wrapping)
    - rectangle:   each letter takes its own row and the other's column

Decryption applies the rules in reverse (left / up). The text is
normalized first (letters only, J->I, upper case), and filler ``X``
letters are inserted between doubled letters and at an odd end. The
decrypt path strips fillers heuristically: an ``X`` between two equal
letters and a single trailing ``X`` are removed. A genuine ``X`` in
those positions is lost as well, so the round trip is lossy.

Reference:
    Wheatstone, C. (1854); popularised by Lord Lyon Playfair.
"""

from __future__ import annotations

from typing import Iterator

from cryptex.algorithms.base import UPPER, CipherAlgorithm, Key, letters_only
from cryptex.core.models import CipherDescriptor, KeyType

SIZE = 5
FILLER = "X"
_SQUARE_ALPHABET = UPPER.replace("J", "")


def normalize(text: str) -> str:
    """Letters only, upper case, J folded into I."""
    return letters_only(text).replace("J", "I")


class PlayfairMatrix:
    """A 5x5 Playfair key square, built fresh for every call.

    Usage::

        matrix = PlayfairMatrix.from_key("MONARCHY")
        matrix.position("Y")   # (1, 2)
        matrix.at(4, 4)        # 'Z'
    """

    __slots__ = ("_letters", "_index")

    def __init__(self, letters: str) -> None:
        if len(letters) != SIZE * SIZE or len(set(letters)) != SIZE * SIZE:
            raise ValueError("A Playfair square needs 25 distinct letters")
        self._letters = letters
        self._index = {ch: divmod(i, SIZE) for i, ch in enumerate(letters)}

    @classmethod
    def from_key(cls, key: str) -> PlayfairMatrix:
        seen: list[str] = []
        for ch in normalize(key) + _SQUARE_ALPHABET:
            if ch not in seen:
                seen.append(ch)
        return cls("".join(seen))

    def position(self, letter: str) -> tuple[int, int]:
        """``(row, col)`` of *letter*; J resolves to the I cell."""
        return self._index["I" if letter == "J" else letter]

    def at(self, row: int, col: int) -> str:
        return self._letters[(row % SIZE) * SIZE + (col % SIZE)]

    @property
    def rows(self) -> list[str]:
        return [self._letters[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.rows)

    def __repr__(self) -> str:
        return f"PlayfairMatrix({self._letters!r})"


def digraphs(text: str) -> list[str]:
    """Split normalized plaintext into encryptable digraphs.

    A doubled letter gets a filler after its first occurrence (the
    scan then advances by one), and a lone final letter is padded.
    """
    prepared = normalize(text)
    pairs: list[str] = []
    i = 0
    while i < len(prepared):
        first = prepared[i]
        if i == len(prepared) - 1:
            pairs.append(first + FILLER)
            break
        second = prepared[i + 1]
        if first == second:
            pairs.append(first + FILLER)
            i += 1
        else:
            pairs.append(first + second)
            i += 2
    return pairs


def _pairs(text: str) -> Iterator[str]:
    for i in range(0, len(text), 2):
        yield text[i:i + 2]


def strip_fillers(text: str) -> str:
    """Remove ``X`` between equal letters and one trailing ``X``."""
    out: list[str] = []
    idx = 0
    while idx < len(text):
        out.append(text[idx])
        if (
            idx + 2 < len(text)
            and text[idx] == text[idx + 2]
            and text[idx + 1] == FILLER
        ):
            idx += 2
        else:
            idx += 1
    if out and out[-1] == FILLER:
        out.pop()
    return "".join(out)


class PlayfairCipher(CipherAlgorithm):
    """Playfair digraph cipher with a textual key."""

    descriptor = CipherDescriptor(
        id="playfair",
        name="Playfair Cipher",
        description=(
            "Digraph substitution cipher that encrypts pairs of letters "
            "with a 5x5 key square"
        ),
        details=(
            "Invented by Charles Wheatstone in 1854 and promoted by Lord "
            "Playfair, it was the first practical digraph cipher and saw "
            "field use in the Boer War and both World Wars. Encrypting "
            "letter pairs flattens single-letter frequencies, so simple "
            "frequency analysis fails; digraph statistics still break it."
        ),
        has_key=True,
        key_type=KeyType.TEXTUAL,
        security_level=2,
        lossy=True,
    )

    def matrix(self, key: Key) -> PlayfairMatrix:
        return PlayfairMatrix.from_key(str(self._require_key(key)))

    def encrypt(self, text: str, key: Key = None) -> str:
        square = self.matrix(key)
        return "".join(
            _encode_pair(square, pair, step=1) for pair in digraphs(text)
        )

    def decrypt(self, text: str, key: Key = None) -> str:
        square = self.matrix(key)
        prepared = normalize(text)
        if len(prepared) % 2:
            prepared += FILLER
        decoded = "".join(
            _encode_pair(square, pair, step=-1) for pair in _pairs(prepared)
        )
        return strip_fillers(decoded)


def _encode_pair(square: PlayfairMatrix, pair: str, step: int) -> str:
    """Apply the Playfair rules to one digraph; *step* is +1 or -1."""
    r1, c1 = square.position(pair[0])
    r2, c2 = square.position(pair[1])
    if r1 == r2:
        return square.at(r1, c1 + step) + square.at(r2, c2 + step)
    if c1 == c2:
        return square.at(r1 + step, c1) + square.at(r2 + step, c2)
    return square.at(r1, c2) + square.at(r2, c1)
