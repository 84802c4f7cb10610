"""
Cryptex Analyzers
==================

Statistical views of plaintext and ciphertext.
"""

from cryptex.analyzers.frequency import FrequencyAnalyzer

__all__ = ["FrequencyAnalyzer"]
