"""Command line interface for sshare.

Usage mirrors the classic tool: with no file (stdin) or a single file the
input is split into shares; with several files, or ``--combine``, the files
are treated as shares and the secret is written to stdout.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import click

from . import __version__
from .distribute import distribute, validate_parameters
from .errors import SecretSharingError
from .policy import policy
from .reconstruct import combine
from .storage import make_output_dir, read_secret, read_shares, write_shares
from .utils.logging import configure_logging, get_logger

log = get_logger("cli")


def _split(
    source: Optional[str],
    nshares: int,
    thresh: int,
    outdir: Optional[str],
) -> Path:
    validate_parameters(nshares, thresh)
    secret = read_secret(source if source is not None else click.get_binary_stream("stdin"))
    shares = distribute(secret, nshares, thresh)
    directory = make_output_dir(outdir)
    write_shares(directory, shares)
    return directory


def _combine(files: Tuple[str, ...], output: Optional[str]) -> None:
    secret = combine(read_shares(files))
    if output is None:
        stream = click.get_binary_stream("stdout")
        stream.write(secret)
        stream.flush()
    else:
        Path(output).write_bytes(secret)
    log.info("reconstructed %d-byte secret from %d shares", len(secret), len(files))


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog="Reconstruction takes place whenever multiple files are given.",
)
@click.option("-n", "--nshares", type=int, default=None, help="Generate NUM shares.", metavar="NUM")
@click.option("-t", "--thresh", type=int, default=None, help="Require NUM shares to reconstruct.", metavar="NUM")
@click.option("-o", "--outdir", type=click.Path(file_okay=False), default=None, help="Write shares in DIR.", metavar="DIR")
@click.option("-c", "--combine", "force_combine", is_flag=True, help="Treat a single FILE as a share.")
@click.option("--output", type=click.Path(dir_okay=False), default=None, help="Write the secret to FILE instead of stdout.", metavar="FILE")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
@click.version_option(__version__, prog_name="sshare")
@click.argument("files", nargs=-1, type=click.Path(exists=True, dir_okay=False))
def main(
    nshares: Optional[int],
    thresh: Optional[int],
    outdir: Optional[str],
    force_combine: bool,
    output: Optional[str],
    verbose: bool,
    files: Tuple[str, ...],
) -> None:
    """Secret sharing scheme."""

    configure_logging("INFO" if verbose else policy.log_level)
    nshares = policy.default_shares if nshares is None else nshares
    thresh = policy.default_threshold if thresh is None else thresh

    try:
        if force_combine or len(files) > 1:
            if not files:
                raise click.UsageError("--combine needs at least one share file")
            _combine(files, output)
        else:
            directory = _split(files[0] if files else None, nshares, thresh, outdir)
            click.echo(str(directory))
    except SecretSharingError as exc:
        raise click.ClickException(str(exc)) from exc
    except OSError as exc:
        raise click.ClickException(f"{exc.filename or 'I/O'}: {exc.strerror or exc}") from exc


if __name__ == "__main__":
    main()
