"""
Cryptex -- Classical Cipher Library
====================================

Caesar, ROT13, Atbash, Vigenère, Playfair and Rail Fence behind one
encrypt/decrypt interface. These are historical ciphers for teaching
and puzzles; none of them offers any real security.

Modules:
    - cryptex.core.engine: Registry and request validation
    - cryptex.core.models: Pydantic data models
    - cryptex.core.errors: Error taxonomy
    - cryptex.algorithms: The cipher variants
    - cryptex.analyzers: Letter frequency profile
    - cryptex.output: Console and report output
    - cryptex.cli: Click-based command-line interface

Usage::

    import cryptex

    cryptex.encrypt("caesar", "Hello, World!", 3)     # 'Khoor, Zruog!'
    cryptex.decrypt("vigenere", "Lxfopv ef rnhr", "LEMON")
"""

from __future__ import annotations

from shared.config import get_config

from cryptex.core.engine import CryptexEngine
from cryptex.algorithms.base import CipherAlgorithm, Key
from cryptex.core.errors import (
    CryptexError,
    InvalidKey,
    MalformedInput,
    MissingKey,
    UnknownCipher,
)
from cryptex.core.models import CipherDescriptor

__version__ = "1.0.0"
__tool_name__ = "cryptex"


def default_engine() -> CryptexEngine:
    """Shared engine built from :func:`shared.config.get_config`, created once."""
    if not hasattr(default_engine, "_cached"):
        default_engine._cached = CryptexEngine(get_config())  # type: ignore[attr-defined]
    return default_engine._cached  # type: ignore[attr-defined]


def list_ciphers() -> list[CipherDescriptor]:
    return default_engine().list_ciphers()


def get_cipher(cipher_id: str) -> CipherAlgorithm:
    return default_engine().get_cipher(cipher_id)


def encrypt(cipher_id: str, text: str, key: Key = None) -> str:
    return default_engine().encrypt(cipher_id, text, key)


def decrypt(cipher_id: str, text: str, key: Key = None) -> str:
    return default_engine().decrypt(cipher_id, text, key)


__all__ = [
    "CipherDescriptor",
    "CryptexEngine",
    "CryptexError",
    "InvalidKey",
    "MalformedInput",
    "MissingKey",
    "UnknownCipher",
    "decrypt",
    "default_engine",
    "encrypt",
    "get_cipher",
    "list_ciphers",
]
