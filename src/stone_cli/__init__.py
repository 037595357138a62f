"""stone-cli - Cairo program hashing and proof verification front end.

Usage:
    from stone_cli import StrippedProgram, compute_program_hash

    program = StrippedProgram(main_offset=0, builtins=["output"], data=[1, 2, 3])
    print(compute_program_hash(program).to_hex())
"""
from __future__ import annotations

from stone_cli.field import STARK_PRIME, FieldElement, FieldElementError
from stone_cli.hash_chain import HashChainError, compute_hash_chain, pedersen
from stone_cli.loader import ProgramLoadError, load_stripped_program
from stone_cli.program_hash import (
    InvalidProgramBuiltinError,
    InvalidProgramDataError,
    ProgramHashError,
    Relocatable,
    StrippedProgram,
    compute_program_hash,
    encode_program,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Field
    "STARK_PRIME",
    "FieldElement",
    "FieldElementError",
    # Hashing
    "StrippedProgram",
    "Relocatable",
    "encode_program",
    "compute_program_hash",
    "compute_hash_chain",
    "pedersen",
    # Loading
    "load_stripped_program",
    # Errors
    "ProgramLoadError",
    "ProgramHashError",
    "InvalidProgramBuiltinError",
    "InvalidProgramDataError",
    "HashChainError",
]
