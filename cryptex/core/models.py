"""
Cryptex Core Data Models
=========================

Pydantic models for the Cryptex classical cipher library: static cipher
descriptors, the result of a single encrypt/decrypt run and the letter
frequency profile produced by the analyzer.

All models are serialisable to JSON and are consumed by both the console
output layer and the JSON/HTML report generator.

References:
    - Kahn, D. (1996). The Codebreakers. Scribner.
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis. Riverbank Publication No. 22.
"""

from __future__ import annotations

import datetime as _dt
import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class KeyType(str, enum.Enum):
    """Kind of key a cipher expects."""

    NONE = "none"
    NUMERIC = "numeric"
    TEXTUAL = "textual"


class Operation(str, enum.Enum):
    """Direction of a cipher run."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class TextClass(str, enum.Enum):
    """Likely origin of a text, judged from its letter statistics."""

    PLAINTEXT = "plaintext"
    MONOALPHABETIC = "monoalphabetic"
    TRANSPOSITION = "transposition"
    POLYALPHABETIC = "polyalphabetic"
    INSUFFICIENT = "insufficient"


# ===================================================================== #
#  Cipher Descriptor
# ===================================================================== #


class CipherDescriptor(BaseModel):
    """Immutable metadata describing one cipher.

    Attributes:
        id: Registry key (e.g. ``"caesar"``, ``"rail-fence"``).
        name: Display name.
        description: One-line summary.
        details: Longer historical note.
        has_key: Whether encrypt/decrypt require a key.
        key_type: Kind of key expected.
        security_level: Informational rating from 1 (trivial) to 5.
        lossy: Whether the cipher discards case and non-letters.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str
    details: str = ""
    has_key: bool = False
    key_type: KeyType = KeyType.NONE
    security_level: int = Field(default=1, ge=1, le=5)
    lossy: bool = False


# ===================================================================== #
#  Run Result
# ===================================================================== #


class CipherResult(BaseModel):
    """Outcome of a single encrypt or decrypt run.

    Attributes:
        cipher_id: Id of the cipher that produced the output.
        operation: Encrypt or decrypt.
        input_text: Text handed to the cipher.
        output_text: Transformed text.
        key: Key as supplied by the caller (``None`` for keyless ciphers).
        normalized: ``True`` when the cipher stripped case/non-letters.
        elapsed_ms: Wall-clock time spent inside the algorithm.
        timestamp: UTC time the run finished.
    """

    cipher_id: str
    operation: Operation
    input_text: str
    output_text: str
    key: Optional[str] = None
    normalized: bool = False
    elapsed_ms: float = 0.0
    timestamp: _dt.datetime = Field(
        default_factory=lambda: _dt.datetime.now(_dt.timezone.utc)
    )

    @property
    def summary(self) -> str:
        """One-line human-readable description of the run."""
        verb = "Encrypted" if self.operation is Operation.ENCRYPT else "Decrypted"
        return (
            f"{verb} {len(self.input_text)} characters with {self.cipher_id} "
            f"-> {len(self.output_text)} characters"
        )


# ===================================================================== #
#  Frequency Profile
# ===================================================================== #


class FrequencyResult(BaseModel):
    """Letter frequency profile of a text.

    Attributes:
        letter_count: Number of A-Z letters analysed (case-folded).
        counts: Occurrences per letter, keyed ``"A"``..``"Z"``.
        distribution: Relative frequency per letter.
        ic: Index of Coincidence over letters.
        chi_squared: Chi-squared statistic against English frequencies.
        chi_squared_p_value: P-value of that test.
        likely_class: Classified origin of the text.
        most_common: Top five ``(letter, frequency)`` pairs.
    """

    letter_count: int = 0
    counts: dict[str, int] = Field(default_factory=dict)
    distribution: dict[str, float] = Field(default_factory=dict)
    ic: float = 0.0
    chi_squared: float = 0.0
    chi_squared_p_value: float = 1.0
    likely_class: TextClass = TextClass.INSUFFICIENT
    most_common: list[tuple[str, float]] = Field(default_factory=list)
