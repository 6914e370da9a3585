"""Typed failures raised by the sharing core and its I/O helpers."""
from __future__ import annotations


class SecretSharingError(RuntimeError):
    """Base class for every failure surfaced by :mod:`sshare`."""


class InvalidThreshold(SecretSharingError):
    """Raised when the threshold or share count cannot form a valid scheme."""


class InvalidShareCount(SecretSharingError):
    """Raised when ``n`` shares cannot get distinct indices in the field."""


class EntropyUnavailable(SecretSharingError):
    """Raised when the operating system refuses to hand out random bytes."""


class MalformedShare(SecretSharingError):
    """Raised when a share record is truncated or otherwise unparsable."""


class InconsistentShareWidth(SecretSharingError):
    """Raised when shares from different field sizes are mixed."""


class InsufficientPoints(SecretSharingError):
    """Raised when interpolation is requested without any points."""


class DuplicateShareIndex(SecretSharingError):
    """Raised when two shares evaluate the polynomial at the same point."""


class SecretTooLarge(SecretSharingError):
    """Raised when the secret input exceeds the configured size limit."""


__all__ = [
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
