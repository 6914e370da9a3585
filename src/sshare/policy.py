"""Centralised runtime configuration.

Defaults mirror the classic ``sshare`` tool (2-of-3 sharing, shares written
to a private ``shares-*`` temp directory). Every value can be overridden by an
environment variable; malformed overrides fall back to the default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_str(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class SharingPolicy:
    """Holds tunables for the CLI and the file layer."""

    default_shares: int = 3
    default_threshold: int = 2
    max_secret_bytes: int = 256
    outdir_prefix: str = "shares-"
    log_level: str = "WARNING"


def load_policy() -> SharingPolicy:
    """Load the policy considering environment overrides."""

    return SharingPolicy(
        default_shares=_load_int("SSHARE_DEFAULT_SHARES", 3),
        default_threshold=_load_int("SSHARE_DEFAULT_THRESHOLD", 2),
        max_secret_bytes=_load_int("SSHARE_MAX_SECRET_BYTES", 256),
        outdir_prefix=_load_str("SSHARE_OUTDIR_PREFIX", "shares-"),
        log_level=_load_str("SSHARE_LOG_LEVEL", "WARNING").upper(),
    )


policy = load_policy()


__all__ = ["SharingPolicy", "policy", "load_policy"]
