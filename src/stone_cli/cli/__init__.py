"""stone CLI - hash Cairo programs and verify proofs.

Commands:
    hash    - Print the bootloader program hash of a program or PIE
    verify  - Verify a proof with cpu_air_verifier
"""
from __future__ import annotations

from typing import Optional

import click

from .. import __version__
from ..config import Settings
from .console import configure_logging
from .hash_cmd import hash_command
from .verify_cmd import verify_command


@click.group()
@click.version_option(version=__version__, prog_name="stone")
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
@click.option("--log-level", default=None, help="Log level (default: $STONE_LOG_LEVEL or WARNING)")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_level: Optional[str]) -> None:
    """stone - Cairo program hashing and proof verification.

    \b
    Quick start:
      stone hash program.json     Print the program hash
      stone hash pie.zip          Same, from a Cairo PIE
      stone verify proof.json     Run cpu_air_verifier on a proof
    """
    settings = Settings.from_env()
    if log_level:
        settings.log_level = log_level.upper()
    elif verbose:
        settings.log_level = "INFO"
    configure_logging(settings.log_level)
    ctx.obj = settings


cli.add_command(hash_command, name="hash")
cli.add_command(verify_command, name="verify")


def main() -> None:
    """Entry point for the stone command."""
    cli()


__all__ = ["cli", "main"]
