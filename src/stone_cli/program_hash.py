"""Program hash: the fingerprint a bootloader uses to identify a Cairo program.

The program is linearised as

    [len(body)] + body
    body = [version_tag, main_offset, len(builtins)] + builtins + data

and the result is reduced with :func:`stone_cli.hash_chain.compute_hash_chain`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from .field import MAX_SHORT_BYTES, FieldElement, FieldElementError
from .hash_chain import HashFunction, compute_hash_chain, pedersen

LOGGER = logging.getLogger(__name__)

BUILTIN_SUFFIX = "_builtin"


@dataclass(frozen=True)
class Relocatable:
    """Pointer into a memory segment; never valid inside hashed program data."""
    segment_index: int
    offset: int

    def __str__(self) -> str:
        return f"{self.segment_index}:{self.offset}"


MaybeRelocatable = Union[int, FieldElement, Relocatable]


@dataclass(frozen=True)
class StrippedProgram:
    """Entry point, builtins and data segment of a program; nothing else."""
    main_offset: int
    builtins: tuple[str, ...] = field(default_factory=tuple)
    data: tuple[MaybeRelocatable, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept lists from callers but keep the instance immutable.
        object.__setattr__(self, "builtins", tuple(self.builtins))
        object.__setattr__(self, "data", tuple(self.data))
        if self.main_offset < 0:
            raise ValueError(f"main_offset must be non-negative, got {self.main_offset}")


class ProgramHashError(ValueError):
    """Raised when a program cannot be encoded for hashing."""


class InvalidProgramBuiltinError(ProgramHashError):
    def __init__(self, builtin: str, reason: str = "builtin name too long to be converted to field element"):
        super().__init__(f"Invalid program builtin: {reason}: {builtin}")
        self.builtin = builtin


class InvalidProgramDataError(ProgramHashError):
    def __init__(self, index: int, cell: object):
        super().__init__(
            f"Invalid program data: cell {index} is not a plain value ({cell!s})"
        )
        self.index = index
        self.cell = cell


def builtin_to_field_element(builtin: str) -> FieldElement:
    """Encode a builtin name, without its ``_builtin`` suffix, as a short string."""
    name = builtin[: -len(BUILTIN_SUFFIX)] if builtin.endswith(BUILTIN_SUFFIX) else builtin
    try:
        raw = name.encode("ascii")
    except UnicodeEncodeError:
        raise InvalidProgramBuiltinError(builtin, "builtin name is not ASCII") from None
    try:
        return FieldElement.from_bytes_be(raw, max_len=MAX_SHORT_BYTES)
    except FieldElementError:
        raise InvalidProgramBuiltinError(builtin) from None


def cell_to_field_element(cell: MaybeRelocatable, index: int) -> FieldElement:
    if isinstance(cell, FieldElement):
        return cell
    if isinstance(cell, int) and not isinstance(cell, bool):
        return FieldElement.from_int(cell)
    raise InvalidProgramDataError(index, cell)


def encode_program(program: StrippedProgram, version_tag: int = 0) -> list[FieldElement]:
    """Length-prefixed field element sequence for ``program``."""
    if version_tag < 0:
        raise ValueError(f"version_tag must be non-negative, got {version_tag}")

    body_len = 3 + len(program.builtins) + len(program.data)
    encoded = [
        FieldElement.from_int(body_len),
        FieldElement.from_int(version_tag),
        FieldElement.from_int(program.main_offset),
        FieldElement.from_int(len(program.builtins)),
    ]
    encoded.extend(builtin_to_field_element(b) for b in program.builtins)
    encoded.extend(cell_to_field_element(cell, i) for i, cell in enumerate(program.data))

    LOGGER.debug(
        "encoded program: %d builtins, %d data cells, %d elements",
        len(program.builtins), len(program.data), len(encoded),
    )
    return encoded


def compute_program_hash(
    program: StrippedProgram,
    version_tag: int = 0,
    hash_func: HashFunction = pedersen,
) -> FieldElement:
    """Hash chain over the encoded program. Recomputed on every call."""
    return compute_hash_chain(encode_program(program, version_tag), hash_func)


__all__ = [
    "BUILTIN_SUFFIX",
    "Relocatable",
    "MaybeRelocatable",
    "StrippedProgram",
    "ProgramHashError",
    "InvalidProgramBuiltinError",
    "InvalidProgramDataError",
    "builtin_to_field_element",
    "cell_to_field_element",
    "encode_program",
    "compute_program_hash",
]
