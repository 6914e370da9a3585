"""Split a secret into ``n`` shares with reconstruction threshold ``t``."""
from __future__ import annotations

from typing import List, Optional

from .codec import MAX_INDEX, Share
from .entropy import SecureRandom
from .errors import InvalidShareCount, InvalidThreshold
from .polynomial import evaluate, random_polynomial
from .primes import select_modulus
from .utils.logging import get_logger

log = get_logger("distribute")


def validate_parameters(n: int, t: int) -> None:
    if n < 1:
        raise InvalidThreshold(f"number of shares must be at least 1, got {n}")
    if t < 1:
        raise InvalidThreshold(f"threshold must be at least 1, got {t}")
    if t > n:
        raise InvalidThreshold(
            f"number of shares (n={n}) must be >= threshold (t={t})"
        )
    if n > MAX_INDEX:
        raise InvalidShareCount(f"at most {MAX_INDEX} shares fit the share index")


def distribute(
    secret: bytes,
    n: int,
    t: int,
    *,
    rng: Optional[SecureRandom] = None,
) -> List[Share]:
    """Return ``n`` shares of *secret*, any ``t`` of which reconstruct it.

    With ``t == 1`` every share carries the secret itself. An empty secret is
    shared over GF(2) and carries no information at all; its shares only exist
    so that the file layout stays uniform.
    """

    validate_parameters(n, t)
    length = len(secret)
    modulus = select_modulus(length)
    if length and n >= modulus:
        raise InvalidShareCount(
            f"{n} shares need distinct indices modulo {modulus}; use at most {modulus - 1}"
        )

    polynomial = random_polynomial(
        t, int.from_bytes(secret, "little"), modulus, rng=rng
    )
    width = length + 1
    shares = [
        Share(index=x, value=evaluate(polynomial, x, modulus), width=width)
        for x in range(1, n + 1)
    ]
    log.info("split %d-byte secret into %d shares (threshold %d)", length, n, t)
    return shares


def split(secret: bytes, n: int, t: int) -> List[bytes]:
    """Like :func:`distribute`, but return the encoded share records."""

    return [share.to_bytes() for share in distribute(secret, n, t)]


__all__ = ["validate_parameters", "distribute", "split"]
