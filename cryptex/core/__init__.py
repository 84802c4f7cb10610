"""
Cryptex Core Module
====================

Contains the central engine, data models and error types for the
Cryptex classical cipher library.
"""

from cryptex.core.engine import CryptexEngine
from cryptex.core.errors import (
    CryptexError,
    InvalidKey,
    MalformedInput,
    MissingKey,
    UnknownCipher,
)
from cryptex.core.models import (
    CipherDescriptor,
    CipherResult,
    FrequencyResult,
    KeyType,
    Operation,
    TextClass,
)

__all__ = [
    "CipherDescriptor",
    "CipherResult",
    "CryptexEngine",
    "CryptexError",
    "FrequencyResult",
    "InvalidKey",
    "KeyType",
    "MalformedInput",
    "MissingKey",
    "Operation",
    "TextClass",
    "UnknownCipher",
]
