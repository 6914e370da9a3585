"""Recover the secret from shares by Lagrange interpolation at zero.

Every supplied point takes part in the interpolation. The combiner has no
record of the original threshold, so handing it fewer shares than were
required yields a well-formed but wrong secret rather than an error.
"""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .codec import Share, decode_share
from .errors import DuplicateShareIndex, InconsistentShareWidth, InsufficientPoints
from .field import FieldContext
from .primes import select_modulus
from .utils.logging import get_logger

log = get_logger("reconstruct")

Point = Tuple[int, int]


def _check_distinct(points: Sequence[Point], field: FieldContext) -> None:
    seen = set()
    for x, _ in points:
        key = field.element(x)
        if key in seen:
            raise DuplicateShareIndex(f"share index {x} collides with another share")
        seen.add(key)


def reconstruct(points: Sequence[Point], modulus: int) -> int:
    """Return ``f(0)`` for the polynomial through *points* over GF(*modulus*).

    f(0) = sum_i y_i * prod_{j != i} (-x_j) / (x_i - x_j)   (mod p)
    """

    if not points:
        raise InsufficientPoints("need at least one share to reconstruct")
    field = FieldContext(modulus)
    _check_distinct(points, field)

    secret = 0
    for i, (xi, yi) in enumerate(points):
        numerator = 1
        denominator = 1
        for j, (xj, _) in enumerate(points):
            if i == j:
                continue
            numerator = field.mul(numerator, field.neg(xj))
            denominator = field.mul(denominator, field.sub(xi, xj))
        basis = field.mul(numerator, field.inverse(denominator))
        secret = field.add(secret, field.mul(yi, basis))
    return secret


def _common_width(shares: Iterable[Share]) -> int:
    width = None
    for share in shares:
        if width is None:
            width = share.width
        elif share.width != width:
            raise InconsistentShareWidth(
                f"share {share.index} has a {share.width}-byte value, expected {width}"
            )
    if width is None:
        raise InsufficientPoints("need at least one share to reconstruct")
    return width


def combine_shares(shares: Sequence[Share]) -> bytes:
    """Reconstruct the secret bytes from decoded shares of one sharing."""

    width = _common_width(shares)
    indices = [share.index for share in shares]
    if len(set(indices)) != len(indices):
        raise DuplicateShareIndex("the same share was supplied more than once")

    length = width - 1
    if length == 0:
        return b""

    modulus = select_modulus(length)
    log.debug("combining %d shares over a %d-bit field", len(shares), modulus.bit_length())
    secret = reconstruct([(share.index, share.value) for share in shares], modulus)
    if secret >> (8 * length):
        log.warning(
            "reconstructed value exceeds %d bytes; shares may be corrupt or too few",
            length,
        )
        secret &= (1 << (8 * length)) - 1
    return secret.to_bytes(length, "little")


def combine(records: Sequence[bytes]) -> bytes:
    """Decode raw share records and reconstruct the secret they encode."""

    shares: List[Share] = [decode_share(record) for record in records]
    return combine_shares(shares)


__all__ = ["Point", "reconstruct", "combine", "combine_shares"]
