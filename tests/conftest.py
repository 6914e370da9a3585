"""Shared fixtures for the sshare test-suite."""
from __future__ import annotations

import hashlib

import pytest

from sshare.entropy import SecureRandom


@pytest.fixture
def seeded_rng():
    """Factory for reproducible generators; production code never passes a seed."""

    def _make(label: str = "sshare-tests") -> SecureRandom:
        return SecureRandom(hashlib.sha256(label.encode()).digest())

    return _make
