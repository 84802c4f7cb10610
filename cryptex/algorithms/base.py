"""
Cipher Algorithm Base
======================

Abstract interface shared by every classical cipher, plus the small
helpers the variants use to validate keys and walk the Latin alphabet.

Algorithms are stateless: a single instance may serve any number of
concurrent calls.
"""

from __future__ import annotations

import abc
import string
from typing import ClassVar, Optional, Union

from cryptex.core.errors import InvalidKey, MissingKey
from cryptex.core.models import CipherDescriptor

Key = Union[str, int, None]

UPPER: str = string.ascii_uppercase
LOWER: str = string.ascii_lowercase


class CipherAlgorithm(abc.ABC):
    """A symmetric encrypt/decrypt pair over text.

    Subclasses set :attr:`descriptor` and implement :meth:`encrypt` and
    :meth:`decrypt`. Both raise :class:`~cryptex.core.errors.CryptexError`
    subclasses instead of embedding messages in the output.
    """

    descriptor: ClassVar[CipherDescriptor]

    @property
    def id(self) -> str:
        return self.descriptor.id

    @abc.abstractmethod
    def encrypt(self, text: str, key: Key = None) -> str:
        """Transform plaintext into ciphertext."""

    @abc.abstractmethod
    def decrypt(self, text: str, key: Key = None) -> str:
        """Transform ciphertext back into plaintext."""

    # ------------------------------------------------------------------ #
    #  Key helpers
    # ------------------------------------------------------------------ #

    def _require_key(self, key: Key) -> Union[str, int]:
        """Return *key* or raise :class:`MissingKey` when it is absent."""
        if key is None or (isinstance(key, str) and key == ""):
            raise MissingKey(self.id)
        return key

    def _int_key(self, key: Key) -> int:
        """Parse a numeric key given as ``int`` or base-10 string."""
        key = self._require_key(key)
        if isinstance(key, bool):
            raise InvalidKey("Key must be an integer", cipher_id=self.id)
        if isinstance(key, int):
            return key
        try:
            return int(key.strip())
        except ValueError:
            raise InvalidKey(
                f"Key must be an integer, got {key!r}", cipher_id=self.id
            ) from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


# ===================================================================== #
#  Alphabet helpers
# ===================================================================== #


def is_latin_letter(char: str) -> bool:
    """``True`` for ASCII A-Z / a-z only."""
    return char in UPPER or char in LOWER


def shift_letter(char: str, shift: int) -> str:
    """Shift a Latin letter by *shift* places, keeping its case.

    Any other character is returned unchanged.
    """
    if char in UPPER:
        return UPPER[(UPPER.index(char) + shift) % 26]
    if char in LOWER:
        return LOWER[(LOWER.index(char) + shift) % 26]
    return char


def letters_only(text: str) -> str:
    """Strip everything but Latin letters and upper-case the rest."""
    return "".join(ch for ch in text if is_latin_letter(ch)).upper()
