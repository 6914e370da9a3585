"""Threshold secret sharing over prime fields.

``split`` turns a secret into ``n`` share records of which any ``t`` recover
it with ``combine``; the field is derived from the secret length alone.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import Share, decode_share, encode_share
from .distribute import distribute, split
from .errors import (
    DuplicateShareIndex,
    EntropyUnavailable,
    InconsistentShareWidth,
    InsufficientPoints,
    InvalidShareCount,
    InvalidThreshold,
    MalformedShare,
    SecretSharingError,
    SecretTooLarge,
)
from .primes import select_modulus
from .reconstruct import combine, combine_shares, reconstruct

__all__ = [
    "__version__",
    "Share",
    "encode_share",
    "decode_share",
    "distribute",
    "split",
    "select_modulus",
    "reconstruct",
    "combine",
    "combine_shares",
    "SecretSharingError",
    "InvalidThreshold",
    "InvalidShareCount",
    "EntropyUnavailable",
    "MalformedShare",
    "InconsistentShareWidth",
    "InsufficientPoints",
    "DuplicateShareIndex",
    "SecretTooLarge",
]
