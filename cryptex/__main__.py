"""
Cryptex Module Entry Point
===========================

Allows running the Cryptex CLI via: python -m cryptex
"""

from cryptex.cli import main

if __name__ == "__main__":
    main()
