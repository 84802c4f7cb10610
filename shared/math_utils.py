"""
Cryptex Mathematical Utilities
===============================

Letter statistics used by the frequency analyzer: a 26-bin letter
histogram, the Index of Coincidence and Pearson's chi-squared test with
a p-value computed from the regularised incomplete gamma function.

References:
    [1] Friedman, W. F. (1922). The Index of Coincidence and Its
        Applications in Cryptanalysis. Riverbank Publication No. 22.
    [2] Pearson, K. (1900). On the Criterion that a Given System of
        Deviations ... Philosophical Magazine, 50(302), 157-175.
    [3] Lewand, R. E. (2000). Cryptological Mathematics. MAA.
"""

from __future__ import annotations

import math
import string

import numpy as np
from numpy.typing import NDArray

FloatArray = NDArray[np.floating]

ALPHABET: str = string.ascii_uppercase

# Relative letter frequencies of English text, A..Z (Lewand, 2000).
ENGLISH_LETTER_FREQUENCIES: FloatArray = np.array(
    [
        0.08167, 0.01492, 0.02782, 0.04253, 0.12702, 0.02228, 0.02015,
        0.06094, 0.06966, 0.00153, 0.00772, 0.04025, 0.02406, 0.06749,
        0.07507, 0.01929, 0.00095, 0.05987, 0.06327, 0.09056, 0.02758,
        0.00978, 0.02360, 0.00150, 0.01974, 0.00074,
    ],
    dtype=np.float64,
)


# ========================== Letter Statistics ==============================


def letter_histogram(text: str) -> FloatArray:
    """Count occurrences of each ASCII letter A..Z, case-folded.

    Non-letters (including non-ASCII letters) are ignored.

    Returns:
        1-D float64 array of length 26 containing occurrence counts.
    """
    hist = np.zeros(26, dtype=np.float64)
    codes = [ord(ch) - 65 for ch in text.upper() if ch in ALPHABET]
    if not codes:
        return hist
    hist[:] = np.bincount(np.asarray(codes, dtype=np.int64), minlength=26)
    return hist


def index_of_coincidence(counts: FloatArray) -> float:
    """Probability that two letters drawn without replacement are equal.

    .. math::

        IC = \\frac{\\sum_i f_i (f_i - 1)}{N (N - 1)}

    English text scores about 0.0667, uniformly random letters about
    0.0385 (1/26).
    """
    counts = np.asarray(counts, dtype=np.float64)
    n = float(counts.sum())
    if n < 2:
        return 0.0
    return float(np.sum(counts * (counts - 1.0)) / (n * (n - 1.0)))


# ======================== Statistical Tests ================================


def chi_squared_test(
    observed: FloatArray, expected: FloatArray
) -> tuple[float, float]:
    """Perform Pearson's chi-squared goodness-of-fit test.

    The test statistic is:

    .. math::

        \\chi^2 = \\sum_i \\frac{(O_i - E_i)^2}{E_i}

    The p-value is the regularised upper incomplete gamma function
    ``Q(dof/2, chi2/2)``, matching ``scipy.stats.chi2.sf``.

    Args:
        observed: Observed frequency counts (1-D array of length *k*).
        expected: Expected frequency counts (1-D array of length *k*).

    Returns:
        Tuple of ``(chi2_statistic, p_value)``.

    Raises:
        ValueError: If arrays differ in length or expected contains zeros.
    """
    observed = np.asarray(observed, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)

    if observed.shape != expected.shape:
        raise ValueError("Array shapes must match")
    if np.any(expected <= 0):
        raise ValueError("Expected values must be > 0")

    chi2 = float(np.sum((observed - expected) ** 2 / expected))
    dof = len(observed) - 1

    if dof <= 0:
        return chi2, 1.0

    return chi2, _upper_inc_gamma_reg(dof / 2.0, chi2 / 2.0)


def english_chi_squared(counts: FloatArray) -> tuple[float, float]:
    """Chi-squared test of letter *counts* against English frequencies."""
    counts = np.asarray(counts, dtype=np.float64)
    total = float(counts.sum())
    if total == 0:
        return 0.0, 1.0
    return chi_squared_test(counts, ENGLISH_LETTER_FREQUENCIES * total)


# --------------- Incomplete gamma helpers (Numerical Recipes, Ch. 6) ------


def _upper_inc_gamma_reg(a: float, x: float) -> float:
    """Regularised upper incomplete gamma Q(a, x) = 1 - P(a, x).

    Series expansion for small *x*, Lentz continued fraction otherwise.
    """
    if x <= 0.0 or a <= 0.0:
        return 1.0
    if x < a + 1.0:
        return 1.0 - _gamma_p_series(a, x)
    return _gamma_q_cf(a, x)


def _gamma_p_series(a: float, x: float) -> float:
    ap = a
    delta = 1.0 / a
    total = delta
    for _ in range(300):
        ap += 1.0
        delta *= x / ap
        total += delta
        if abs(delta) < abs(total) * 1e-15:
            break
    return total * math.exp(-x + a * math.log(x) - math.lgamma(a))


def _gamma_q_cf(a: float, x: float) -> float:
    tiny = 1e-30
    b = x + 1.0 - a
    c = 1.0 / tiny
    d = 1.0 / b
    f = d
    for i in range(1, 300):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < tiny:
            d = tiny
        c = b + an / c
        if abs(c) < tiny:
            c = tiny
        d = 1.0 / d
        delta = d * c
        f *= delta
        if abs(delta - 1.0) < 1e-15:
            break
    return f * math.exp(-x + a * math.log(x) - math.lgamma(a))
