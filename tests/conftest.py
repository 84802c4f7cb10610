"""Shared fixtures for the Cryptex test suite."""

import pytest

from shared.config import AppConfig
from cryptex.core.engine import CryptexEngine


ENGLISH_SAMPLE = (
    "The history of secret writing is as old as writing itself. Soldiers, "
    "merchants and lovers have always wanted to send messages that only the "
    "intended reader could understand. In the ancient world a general might "
    "shave the head of a slave, write on his scalp and wait for the hair to "
    "grow back before sending him across enemy lines. Later the Romans used "
    "simple letter shifts, and for many centuries these methods were thought "
    "to be good enough, because most people who might intercept a letter "
    "could not read at all."
)


@pytest.fixture
def engine():
    """Engine with default settings."""
    return CryptexEngine(AppConfig())


@pytest.fixture
def english_sample():
    """A paragraph of ordinary English prose (417 letters)."""
    return ENGLISH_SAMPLE
