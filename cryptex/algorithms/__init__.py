"""
Cryptex Algorithms
===================

The classical cipher variants. Each class is a stateless encrypt/decrypt
pair carrying its own :class:`~cryptex.core.models.CipherDescriptor`.
"""

from cryptex.algorithms.base import CipherAlgorithm
from cryptex.algorithms.shift import AtbashCipher, CaesarCipher, Rot13Cipher
from cryptex.algorithms.vigenere import VigenereCipher
from cryptex.algorithms.playfair import PlayfairCipher, PlayfairMatrix
from cryptex.algorithms.rail_fence import RailFenceCipher

# Registration order is the listing order.
ALGORITHMS: tuple[type[CipherAlgorithm], ...] = (
    CaesarCipher,
    Rot13Cipher,
    AtbashCipher,
    VigenereCipher,
    PlayfairCipher,
    RailFenceCipher,
)

__all__ = [
    "ALGORITHMS",
    "AtbashCipher",
    "CaesarCipher",
    "CipherAlgorithm",
    "PlayfairCipher",
    "PlayfairMatrix",
    "RailFenceCipher",
    "Rot13Cipher",
    "VigenereCipher",
]
