"""Reading secrets and moving share records to and from disk."""
from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, Sequence, Union

from .codec import Share
from .errors import SecretTooLarge
from .policy import policy
from .utils.logging import get_logger

log = get_logger("storage")

PathLike = Union[str, "os.PathLike[str]"]
SHARE_FILE_MODE = 0o600
_CHUNK = 65536


def _read_limited(handle: BinaryIO, limit: int) -> bytes:
    buffer = bytearray()
    while True:
        chunk = handle.read(_CHUNK)
        if not chunk:
            break
        buffer.extend(chunk)
        if len(buffer) > limit:
            raise SecretTooLarge(f"secret exceeds the {limit}-byte limit")
    return bytes(buffer)


def read_secret(
    source: Union[PathLike, BinaryIO, None] = None,
    *,
    max_bytes: Optional[int] = None,
) -> bytes:
    """Read the whole secret from a path, a binary stream, or stdin."""

    limit = policy.max_secret_bytes if max_bytes is None else max_bytes
    if source is None:
        return _read_limited(sys.stdin.buffer, limit)
    if hasattr(source, "read"):
        return _read_limited(source, limit)  # type: ignore[arg-type]
    with open(source, "rb") as handle:
        data = _read_limited(handle, limit)
    log.debug("read %d-byte secret from %s", len(data), source)
    return data


def make_output_dir(outdir: Optional[PathLike] = None) -> Path:
    """Return *outdir* (created if needed) or a fresh private temp directory."""

    if outdir is None:
        return Path(tempfile.mkdtemp(prefix=policy.outdir_prefix))
    path = Path(outdir).expanduser()
    path.mkdir(mode=0o700, parents=True, exist_ok=True)
    return path


def share_path(directory: PathLike, index: int) -> Path:
    return Path(directory) / str(index)


def write_shares(directory: PathLike, shares: Sequence[Share]) -> List[Path]:
    """Write each share to ``<directory>/<index>`` with owner-only permissions.

    Shares are staged under hidden temporary names and moved into place only
    once every record is on disk. On failure nothing is left behind.
    """

    records = [(share_path(directory, share.index), share.to_bytes()) for share in shares]
    staged: List[Path] = []
    placed: List[Path] = []
    try:
        for path, record in records:
            temp = path.with_name(f".{path.name}.tmp")
            fd = os.open(temp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, SHARE_FILE_MODE)
            staged.append(temp)
            with os.fdopen(fd, "wb") as handle:
                handle.write(record)
        for temp, (path, _) in zip(staged, records):
            os.replace(temp, path)
            placed.append(path)
    except OSError:
        for leftover in staged + placed:
            try:
                leftover.unlink()
            except FileNotFoundError:
                pass
        log.error("failed writing shares to %s; removed partial output", directory)
        raise
    log.info("wrote %d shares to %s", len(placed), directory)
    return placed


def read_shares(paths: Iterable[PathLike]) -> List[bytes]:
    records = []
    for path in paths:
        with open(path, "rb") as handle:
            records.append(handle.read())
    return records


__all__ = [
    "SHARE_FILE_MODE",
    "read_secret",
    "make_output_dir",
    "share_path",
    "write_shares",
    "read_shares",
]
