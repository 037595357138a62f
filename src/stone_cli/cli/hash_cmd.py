"""stone hash - print the bootloader program hash of a program or PIE.

Usage:
    stone hash <program.json | pie.zip>

Only the hash is written to stdout so the command can be used in scripts.
"""
from __future__ import annotations

from pathlib import Path

import click

from ..hash_chain import HashChainError
from ..loader import ProgramLoadError, load_stripped_program
from ..program_hash import ProgramHashError, compute_program_hash
from .console import fail
from .exit_codes import EXIT_ENCODING, EXIT_INTERNAL, EXIT_MALFORMED

# Discriminator for programs hashed outside of a bootloader.
BOOTLOADER_VERSION = 0


@click.command("hash")
@click.argument("program", type=click.Path(dir_okay=False, path_type=Path))
def hash_command(program: Path) -> None:
    """Compute the program hash of PROGRAM.

    PROGRAM is a compiled Cairo program (JSON) or a Cairo PIE (.zip).
    """
    try:
        stripped = load_stripped_program(program)
    except ProgramLoadError as exc:
        fail("load", exc, EXIT_MALFORMED)

    try:
        program_hash = compute_program_hash(stripped, BOOTLOADER_VERSION)
    except ProgramHashError as exc:
        fail("encode", exc, EXIT_ENCODING)
    except HashChainError as exc:
        fail("hash", exc, EXIT_INTERNAL)

    click.echo(program_hash.to_hex())
