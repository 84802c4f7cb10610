"""
Rail Fence Cipher
==================

Zigzag transposition. The normalized message (letters only, upper
case) is written diagonally down and up across R rails, then read off
rail by rail::

    W . . . E . . . C . . . R . . . L . . . T . . . E
    . E . R . D . S . O . E . E . F . E . A . O . C .
    . . A . . . I . . . V . . . D . . . E . . . N . .

    -> WECRLTEERDSOEEFEAOCAIVDEN

A rail count of one or less leaves the input untouched, without
normalization.
"""

from __future__ import annotations

from typing import Iterator, Optional

from cryptex.algorithms.base import CipherAlgorithm, Key, letters_only
from cryptex.core.models import CipherDescriptor, KeyType


def zigzag(length: int, rails: int) -> Iterator[int]:
    """Yield the rail index for each of *length* positions.

    The index bounces 0 -> rails-1 -> 0, reversing direction on the
    outer rails.
    """
    row = 0
    down = False
    for _ in range(length):
        yield row
        if row == 0 or row == rails - 1:
            down = not down
        row += 1 if down else -1


def fence_grid(text: str, rails: int) -> list[list[Optional[str]]]:
    """Place *text* on a rails x len(text) grid along the zigzag.

    Rails below the deepest one the zigzag reaches are left out, so the
    grid never has more rows than *text* has characters.
    """
    rails = min(rails, len(text))
    grid: list[list[Optional[str]]] = [[None] * len(text) for _ in range(rails)]
    for col, row in enumerate(zigzag(len(text), rails)):
        grid[row][col] = text[col]
    return grid


class RailFenceCipher(CipherAlgorithm):
    """Rail Fence transposition keyed by a rail count."""

    descriptor = CipherDescriptor(
        id="rail-fence",
        name="Rail Fence Cipher",
        description=(
            "Transposition cipher that writes letters in a zigzag across "
            "several rails and reads them off row by row"
        ),
        details=(
            "Also called the zigzag cipher. The message is written "
            "diagonally downwards over a number of imaginary rails, turning "
            "upwards at the bottom rail and downwards again at the top, and "
            "the ciphertext is read off one rail at a time. The letters "
            "themselves never change, only their order, so letter "
            "frequencies betray it as a transposition cipher."
        ),
        has_key=True,
        key_type=KeyType.NUMERIC,
        security_level=1,
        lossy=True,
    )

    def encrypt(self, text: str, key: Key = None) -> str:
        rails = self._int_key(key)
        if rails <= 1:
            return text

        prepared = letters_only(text)
        rails = min(rails, len(prepared))
        buffers: list[list[str]] = [[] for _ in range(rails)]
        for ch, row in zip(prepared, zigzag(len(prepared), rails)):
            buffers[row].append(ch)
        return "".join("".join(buf) for buf in buffers)

    def decrypt(self, text: str, key: Key = None) -> str:
        rails = self._int_key(key)
        if rails <= 1:
            return text

        prepared = letters_only(text)
        length = len(prepared)
        if not length:
            return ""
        rails = min(rails, length)

        # Count how many letters each rail holds along the zigzag.
        path = list(zigzag(length, rails))
        sizes = [0] * rails
        for row in path:
            sizes[row] += 1

        # Cut the ciphertext into rails, then walk the zigzag again.
        segments = []
        start = 0
        for size in sizes:
            segments.append(iter(prepared[start:start + size]))
            start += size
        return "".join(next(segments[row]) for row in path)
