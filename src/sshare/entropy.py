"""Cryptographically secure randomness for polynomial coefficients.

Every :class:`SecureRandom` instance is seeded with 256 bits read from the
operating system and expands them with a ChaCha20 keystream. A new instance is
created for each sharing operation, so no two polynomials share a seed.
"""
from __future__ import annotations

import os
from typing import Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from .errors import EntropyUnavailable

SEED_BYTES = 32
_NONCE = bytes(16)


def read_os_entropy(size: int) -> bytes:
    """Read *size* bytes from the OS CSPRNG or raise :class:`EntropyUnavailable`."""

    try:
        data = os.urandom(size)
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable(f"cannot read {size} bytes of OS entropy: {exc}") from exc
    if len(data) != size:
        raise EntropyUnavailable(f"short read from OS entropy source ({len(data)}/{size})")
    return data


class SecureRandom:
    """ChaCha20-based generator of uniform field elements."""

    def __init__(self, seed: Optional[bytes] = None) -> None:
        if seed is None:
            seed = read_os_entropy(SEED_BYTES)
        if len(seed) != SEED_BYTES:
            raise EntropyUnavailable(f"seed must be {SEED_BYTES} bytes, got {len(seed)}")
        # one key per instance; the nonce stays constant
        cipher = Cipher(algorithms.ChaCha20(seed, _NONCE), mode=None)
        self._stream = cipher.encryptor()

    def token_bytes(self, size: int) -> bytes:
        return self._stream.update(bytes(size))

    def randbelow(self, upper: int) -> int:
        """Return a uniform integer in ``[0, upper)`` by rejection sampling."""

        if upper < 1:
            raise ValueError("upper bound must be positive")
        bits = upper.bit_length()
        size = (bits + 7) // 8
        mask = (1 << bits) - 1
        while True:
            candidate = int.from_bytes(self.token_bytes(size), "little") & mask
            if candidate < upper:
                return candidate

    def randrange_nonzero(self, upper: int) -> int:
        """Return a uniform integer in ``[1, upper)``."""

        if upper < 2:
            raise ValueError("no non-zero value below upper bound")
        return self.randbelow(upper - 1) + 1


__all__ = ["SEED_BYTES", "SecureRandom", "read_os_entropy"]
