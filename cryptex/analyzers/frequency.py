"""
Frequency Analyzer
===================

Letter-level frequency profile of a text, used to show what a classical
cipher does (and does not) hide.

The pipeline:
1. Count A-Z (case-folded, everything else ignored)
2. Index of Coincidence
3. Chi-squared test against English letter frequencies
4. Share of common English bigrams among adjacent letters
5. Classification

Classification:
    - IC ~ 0.0667 and English-shaped distribution with English bigrams
      : plaintext
    - IC ~ 0.0667 and English-shaped distribution, bigrams scrambled
      : transposition (Rail Fence)
    - IC ~ 0.0667 but distribution shifted or permuted
      : monoalphabetic substitution (Caesar, ROT13, Atbash)
    - IC towards 0.0385 (1/26)
      : polyalphabetic substitution (Vigenère) or digraphic (Playfair)

References:
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis. Riverbank Publication No. 22.
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America.
"""

from __future__ import annotations

from shared.math_utils import (
    ALPHABET,
    english_chi_squared,
    index_of_coincidence,
    letter_histogram,
)
from cryptex.core.models import FrequencyResult, TextClass

# Twenty most frequent English bigrams (Lewand, 2000).
_COMMON_BIGRAMS = frozenset(
    {
        "TH", "HE", "IN", "ER", "AN", "RE", "ON", "AT", "EN", "ND",
        "TI", "ES", "OR", "TE", "OF", "ED", "IS", "IT", "AL", "AR",
    }
)


class FrequencyAnalyzer:
    """Builds a :class:`FrequencyResult` for a text.

    Usage::

        analyzer = FrequencyAnalyzer()
        result = analyzer.analyze(ciphertext)
        print(f"IC: {result.ic:.4f} -> {result.likely_class.value}")
    """

    IC_ENGLISH: float = 0.0667
    IC_RANDOM_26: float = 1.0 / 26.0

    # Below this many letters the statistics are noise.
    MIN_LETTERS: int = 20

    IC_THRESHOLD: float = 0.055
    CHI2_PER_LETTER_THRESHOLD: float = 0.5
    BIGRAM_THRESHOLD: float = 0.2

    def analyze(self, text: str) -> FrequencyResult:
        counts = letter_histogram(text)
        total = int(counts.sum())
        if total == 0:
            return FrequencyResult()

        ic = index_of_coincidence(counts)
        chi2, p_value = english_chi_squared(counts)

        distribution = {
            letter: float(counts[i] / total) for i, letter in enumerate(ALPHABET)
        }
        most_common = sorted(
            ((letter, freq) for letter, freq in distribution.items() if freq > 0),
            key=lambda item: (-item[1], item[0]),
        )[:5]

        return FrequencyResult(
            letter_count=total,
            counts={letter: int(counts[i]) for i, letter in enumerate(ALPHABET)},
            distribution=distribution,
            ic=ic,
            chi_squared=chi2,
            chi_squared_p_value=p_value,
            likely_class=self._classify(text, total, ic, chi2),
            most_common=most_common,
        )

    def _classify(self, text: str, total: int, ic: float, chi2: float) -> TextClass:
        if total < self.MIN_LETTERS:
            return TextClass.INSUFFICIENT
        if ic < self.IC_THRESHOLD:
            return TextClass.POLYALPHABETIC
        if chi2 / total > self.CHI2_PER_LETTER_THRESHOLD:
            return TextClass.MONOALPHABETIC
        if self.bigram_rate(text) >= self.BIGRAM_THRESHOLD:
            return TextClass.PLAINTEXT
        return TextClass.TRANSPOSITION

    @staticmethod
    def bigram_rate(text: str) -> float:
        """Share of adjacent letter pairs that are common English bigrams.

        Adjacency is measured after stripping non-letters, so word
        boundaries do not break pairs.
        """
        letters = "".join(ch for ch in text.upper() if ch in ALPHABET)
        if len(letters) < 2:
            return 0.0
        hits = sum(
            1 for i in range(len(letters) - 1) if letters[i:i + 2] in _COMMON_BIGRAMS
        )
        return hits / (len(letters) - 1)
