"""
Cryptex Errors
===============

Typed exceptions raised by the cipher library. Every error is
recoverable by the caller (re-prompt for a valid cipher or key); no
partial output accompanies an error.
"""

from __future__ import annotations

from typing import Any, Optional


class CryptexError(Exception):
    """Base class for all cipher library errors."""

    code: str = "cryptex_error"

    def __init__(self, message: str, *, cipher_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cipher_id = cipher_id

    def to_dict(self) -> dict[str, Any]:
        """Machine-readable form used by the JSON output path."""
        return {
            "error": self.code,
            "message": self.message,
            "cipher_id": self.cipher_id,
        }


class UnknownCipher(CryptexError):
    """No cipher is registered under the requested id."""

    code = "unknown_cipher"

    def __init__(self, cipher_id: str) -> None:
        super().__init__(f"Unknown cipher: {cipher_id!r}", cipher_id=cipher_id)


class MissingKey(CryptexError):
    """The cipher requires a key and none was supplied."""

    code = "missing_key"

    def __init__(self, cipher_id: str) -> None:
        super().__init__(
            f"Cipher {cipher_id!r} requires a key", cipher_id=cipher_id
        )


class InvalidKey(CryptexError):
    """The supplied key failed the cipher's validation."""

    code = "invalid_key"


class MalformedInput(CryptexError):
    """The input text cannot be processed at all.

    Algorithms never raise this: they filter arbitrary text. The engine
    raises it for non-string input or input over the configured size.
    """

    code = "malformed_input"
