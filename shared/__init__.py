"""
Cryptex Shared Module
=====================

Configuration, structured logging, console presentation and letter
statistics shared by the Cryptex packages.
"""

from shared.config import AppConfig, get_config

__all__ = ["AppConfig", "get_config"]
