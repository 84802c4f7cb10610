"""
Cryptex Output Module
======================

Console display and report generation for Cryptex results.
"""

from cryptex.output.console import CryptexConsoleOutput
from cryptex.output.report import CryptexReportGenerator

__all__ = [
    "CryptexConsoleOutput",
    "CryptexReportGenerator",
]
