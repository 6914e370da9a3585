"""Deterministic field-modulus selection.

Both sides of the scheme derive the prime from a byte length alone: the dealer
from the secret length ``L``, the combiner from the share value width
``L + 1``. Nothing about the field ever travels with the shares.
"""
from __future__ import annotations

from functools import lru_cache

from .field import next_prime
from .utils.logging import get_logger

log = get_logger("primes")


@lru_cache(maxsize=64)
def select_modulus(byte_length: int) -> int:
    """Return the smallest prime strictly greater than ``2 ** (8 * byte_length)``."""

    if byte_length < 0:
        raise ValueError("byte length must be non-negative")
    log.info("searching for a %d-bit field modulus", 8 * byte_length + 1)
    return next_prime(1 << (8 * byte_length))


__all__ = ["select_modulus"]
