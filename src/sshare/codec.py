"""Fixed-width binary representation of a single share.

Record layout::

    bytes[0:4]   uint32 share index, little-endian
    bytes[4:]    field value, little-endian, zero-extended to the value width

The value width is ``L + 1`` for an ``L``-byte secret and is the only hint the
combiner gets about the field; see :func:`sshare.primes.select_modulus`.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass

from .errors import MalformedShare

_INDEX = struct.Struct("<I")
INDEX_SIZE = _INDEX.size
MAX_INDEX = 0xFFFFFFFF


@dataclass(frozen=True)
class Share:
    index: int
    value: int
    width: int

    @property
    def secret_length(self) -> int:
        return self.width - 1

    def to_bytes(self) -> bytes:
        return encode_share(self.index, self.value, self.width)


def encode_share(x: int, y: int, value_width: int) -> bytes:
    if not 0 <= x <= MAX_INDEX:
        raise ValueError(f"share index {x} does not fit in 32 bits")
    if value_width < 1:
        raise ValueError("value width must be at least one byte")
    if y < 0:
        raise ValueError("share value must be non-negative")
    try:
        value = y.to_bytes(value_width, "little")
    except OverflowError as exc:
        raise ValueError(f"share value does not fit in {value_width} bytes") from exc
    return _INDEX.pack(x) + value


def decode_share(record: bytes) -> Share:
    if len(record) < INDEX_SIZE + 1:
        raise MalformedShare(
            f"share record is {len(record)} bytes, need at least {INDEX_SIZE + 1}"
        )
    (x,) = _INDEX.unpack_from(record)
    value = record[INDEX_SIZE:]
    return Share(index=x, value=int.from_bytes(value, "little"), width=len(value))


__all__ = ["INDEX_SIZE", "MAX_INDEX", "Share", "encode_share", "decode_share"]
