"""
Cryptex Engine
===============

Central orchestrator for the Cryptex classical cipher library. The
:class:`CryptexEngine` owns the registry of cipher variants, validates
each request at the library boundary (unknown cipher, missing key,
malformed input), logs the operation and returns typed results.

The engine is a facade over the stateless algorithm classes in
:mod:`cryptex.algorithms`; it holds no per-request state and can be
shared across threads.
"""

from __future__ import annotations

from typing import Optional, Union

from shared.config import AppConfig
from shared.logger import CryptexLogger

from cryptex.algorithms import ALGORITHMS, CipherAlgorithm, PlayfairMatrix
from cryptex.algorithms.base import Key
from cryptex.analyzers.frequency import FrequencyAnalyzer
from cryptex.core.errors import (
    CryptexError,
    MalformedInput,
    MissingKey,
    UnknownCipher,
)
from cryptex.core.models import (
    CipherDescriptor,
    CipherResult,
    FrequencyResult,
    Operation,
)


class CryptexEngine:
    """Dispatches encrypt/decrypt requests to the registered ciphers.

    Usage::

        engine = CryptexEngine()
        engine.list_ciphers()
        engine.encrypt("vigenere", "Attack at dawn", "LEMON")
        result = engine.run("rail-fence", "encrypt", "WE ARE DISCOVERED", 3)

    Attributes:
        config: Application configuration instance.
        logger: Logger for the engine.
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()
        settings = self.config.global_settings
        self.logger = CryptexLogger(
            "engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

        self._registry: dict[str, CipherAlgorithm] = {
            cls.descriptor.id: cls() for cls in ALGORITHMS
        }
        self._frequency_analyzer = FrequencyAnalyzer()

    # ------------------------------------------------------------------ #
    #  Registry
    # ------------------------------------------------------------------ #

    def list_ciphers(self) -> list[CipherDescriptor]:
        """Descriptors of every registered cipher, in registration order."""
        return [algo.descriptor for algo in self._registry.values()]

    def get_cipher(self, cipher_id: str) -> CipherAlgorithm:
        """Look up a cipher by id.

        Raises:
            UnknownCipher: If no cipher is registered under *cipher_id*.
        """
        try:
            return self._registry[cipher_id]
        except KeyError:
            raise UnknownCipher(cipher_id) from None

    def describe(self, cipher_id: str) -> CipherDescriptor:
        return self.get_cipher(cipher_id).descriptor

    # ------------------------------------------------------------------ #
    #  Operations
    # ------------------------------------------------------------------ #

    def encrypt(self, cipher_id: str, text: str, key: Key = None) -> str:
        """Encrypt *text* with the named cipher and return the ciphertext."""
        return self.run(cipher_id, Operation.ENCRYPT, text, key).output_text

    def decrypt(self, cipher_id: str, text: str, key: Key = None) -> str:
        """Decrypt *text* with the named cipher and return the plaintext."""
        return self.run(cipher_id, Operation.DECRYPT, text, key).output_text

    def run(
        self,
        cipher_id: str,
        operation: Union[Operation, str],
        text: str,
        key: Key = None,
    ) -> CipherResult:
        """Validate a request, run the cipher and wrap the outcome.

        Args:
            cipher_id: Registry id of the cipher.
            operation: ``"encrypt"`` or ``"decrypt"``.
            text: Input text.
            key: Key for keyed ciphers; ignored by keyless ones.

        Returns:
            CipherResult with the full output text.

        Raises:
            UnknownCipher: Unknown *cipher_id*.
            MissingKey: Keyed cipher called without a key.
            InvalidKey: Key rejected by the cipher.
            MalformedInput: *text* is not a string or is too long.
        """
        operation = Operation(operation)
        with self.logger.operation(operation.value, cipher_id=cipher_id):
            try:
                algorithm = self.get_cipher(cipher_id)
                self._validate(algorithm, text, key)

                with self.logger.timed(f"{cipher_id} {operation.value}") as timer:
                    if operation is Operation.ENCRYPT:
                        output = algorithm.encrypt(text, key)
                    else:
                        output = algorithm.decrypt(text, key)
                elapsed_ms = timer.elapsed * 1000.0
            except CryptexError as exc:
                self.logger.info("Rejected request: %s", exc.code)
                raise

            self.logger.debug(
                "Transformed %d -> %d characters in %.3f ms",
                len(text),
                len(output),
                elapsed_ms,
            )

        return CipherResult(
            cipher_id=cipher_id,
            operation=operation,
            input_text=text,
            output_text=output,
            key=str(key) if algorithm.descriptor.has_key else None,
            normalized=algorithm.descriptor.lossy,
            elapsed_ms=elapsed_ms,
        )

    def analyze(self, text: str) -> FrequencyResult:
        """Letter frequency profile of *text*."""
        if not isinstance(text, str):
            raise MalformedInput(
                f"Expected text, got {type(text).__name__}"
            )
        return self._frequency_analyzer.analyze(text)

    def playfair_matrix(self, key: str) -> PlayfairMatrix:
        """The Playfair key square for *key*."""
        return self.get_cipher("playfair").matrix(key)  # type: ignore[attr-defined]

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def _validate(self, algorithm: CipherAlgorithm, text: object, key: Key) -> None:
        descriptor = algorithm.descriptor
        if not isinstance(text, str):
            raise MalformedInput(
                f"Expected text, got {type(text).__name__}",
                cipher_id=descriptor.id,
            )
        limit = self.config.cryptex.max_input_length
        if len(text) > limit:
            raise MalformedInput(
                f"Input of {len(text)} characters exceeds the limit of {limit}",
                cipher_id=descriptor.id,
            )
        if descriptor.has_key:
            if key is None or key == "":
                raise MissingKey(descriptor.id)
        elif key is not None:
            self.logger.debug("Ignoring key for keyless cipher")
