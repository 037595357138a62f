"""Load a :class:`StrippedProgram` from a compiled program or a Cairo PIE.

Two inputs are understood:

    program.json   - output of ``cairo-compile`` (data, builtins, identifiers)
    pie.zip        - Cairo PIE archive; the program lives in metadata.json

Only the fields needed for hashing are read; everything else is ignored.
"""
from __future__ import annotations

import json
import logging
import zipfile
from pathlib import Path
from typing import Any

from .field import STARK_PRIME
from .program_hash import MaybeRelocatable, Relocatable, StrippedProgram

LOGGER = logging.getLogger(__name__)

PIE_METADATA_FILE = "metadata.json"
DEFAULT_MAIN_SCOPE = "__main__"
ENTRYPOINT = "main"
MAX_ALIAS_DEPTH = 32


class ProgramLoadError(RuntimeError):
    """Raised when a program file cannot be opened or parsed."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"failed to load program {path}: {message}")
        self.path = path


def is_zip_file(path: Path) -> bool:
    return path.suffix == ".zip"


def _parse_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value, 0)
    raise ValueError(f"expected an integer, got {value!r}")


def _parse_cell(value: Any) -> MaybeRelocatable:
    if isinstance(value, dict) and "segment_index" in value:
        return Relocatable(_parse_int(value["segment_index"]), _parse_int(value["offset"]))
    if isinstance(value, list) and len(value) == 2:
        return Relocatable(_parse_int(value[0]), _parse_int(value[1]))
    return _parse_int(value)


def _parse_data(path: Path, raw: Any) -> list[MaybeRelocatable]:
    if not isinstance(raw, list):
        raise ProgramLoadError(path, "'data' must be a list")
    cells: list[MaybeRelocatable] = []
    for i, value in enumerate(raw):
        try:
            cells.append(_parse_cell(value))
        except (KeyError, ValueError) as exc:
            raise ProgramLoadError(path, f"invalid data cell {i}: {exc}") from exc
    return cells


def _parse_builtins(path: Path, raw: Any) -> list[str]:
    if not isinstance(raw, list) or not all(isinstance(b, str) for b in raw):
        raise ProgramLoadError(path, "'builtins' must be a list of strings")
    return list(raw)


def _check_prime(path: Path, raw: Any) -> None:
    if raw is None:
        return
    try:
        prime = _parse_int(raw)
    except ValueError as exc:
        raise ProgramLoadError(path, f"invalid prime: {exc}") from exc
    if prime != STARK_PRIME:
        raise ProgramLoadError(path, f"unsupported prime {prime:#x}")


def _read_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as exc:
        raise ProgramLoadError(path, f"could not read file: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise ProgramLoadError(path, f"file is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc
    except json.JSONDecodeError as exc:
        raise ProgramLoadError(path, f"invalid JSON: {exc}") from exc


def _resolve_entrypoint(path: Path, identifiers: Any, full_name: str) -> int:
    if not isinstance(identifiers, dict):
        raise ProgramLoadError(path, "'identifiers' must be an object")
    name = full_name
    for _ in range(MAX_ALIAS_DEPTH):
        entry = identifiers.get(name)
        if not isinstance(entry, dict):
            raise ProgramLoadError(path, f"missing entrypoint identifier '{full_name}'")
        if entry.get("type") == "alias":
            name = entry.get("destination", "")
            continue
        if "pc" not in entry:
            raise ProgramLoadError(path, f"identifier '{name}' has no pc")
        try:
            return _parse_int(entry["pc"])
        except ValueError as exc:
            raise ProgramLoadError(path, f"invalid pc for '{name}': {exc}") from exc
    raise ProgramLoadError(path, f"alias chain too deep while resolving '{full_name}'")


def _build(path: Path, **fields: Any) -> StrippedProgram:
    try:
        return StrippedProgram(**fields)
    except ValueError as exc:
        raise ProgramLoadError(path, str(exc)) from exc


def load_program(path: Path) -> StrippedProgram:
    """Strip a compiled Cairo program down to its hashed fields."""
    raw = _read_json(path)
    if not isinstance(raw, dict):
        raise ProgramLoadError(path, "expected a JSON object")
    for key in ("data", "identifiers"):
        if key not in raw:
            raise ProgramLoadError(path, f"missing '{key}'")

    _check_prime(path, raw.get("prime"))
    main_scope = raw.get("main_scope") or DEFAULT_MAIN_SCOPE
    main_offset = _resolve_entrypoint(path, raw["identifiers"], f"{main_scope}.{ENTRYPOINT}")

    program = _build(
        path,
        main_offset=main_offset,
        builtins=_parse_builtins(path, raw.get("builtins", [])),
        data=_parse_data(path, raw["data"]),
    )
    LOGGER.info("loaded program %s (%d data cells)", path, len(program.data))
    return program


def load_pie_program(path: Path) -> StrippedProgram:
    """Extract the stripped program embedded in a Cairo PIE archive."""
    try:
        with zipfile.ZipFile(path) as archive:
            metadata = json.loads(archive.read(PIE_METADATA_FILE))
    except FileNotFoundError as exc:
        raise ProgramLoadError(path, "no such file") from exc
    except KeyError as exc:
        raise ProgramLoadError(path, f"archive has no {PIE_METADATA_FILE}") from exc
    except zipfile.BadZipFile as exc:
        raise ProgramLoadError(path, f"not a valid zip archive: {exc}") from exc
    except OSError as exc:
        raise ProgramLoadError(path, f"could not read file: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise ProgramLoadError(path, f"{PIE_METADATA_FILE} is not valid UTF-8: {exc.reason} at byte {exc.start}") from exc
    except json.JSONDecodeError as exc:
        raise ProgramLoadError(path, f"invalid {PIE_METADATA_FILE}: {exc}") from exc

    program = metadata.get("program") if isinstance(metadata, dict) else None
    if not isinstance(program, dict):
        raise ProgramLoadError(path, f"{PIE_METADATA_FILE} has no 'program' object")

    main = program.get("main_offset", program.get("main"))
    if main is None:
        raise ProgramLoadError(path, "program metadata has no 'main_offset'")
    try:
        main_offset = _parse_int(main)
    except ValueError as exc:
        raise ProgramLoadError(path, f"invalid main_offset: {exc}") from exc
    if "data" not in program:
        raise ProgramLoadError(path, "program metadata has no 'data'")
    _check_prime(path, program.get("prime"))

    stripped = _build(
        path,
        main_offset=main_offset,
        builtins=_parse_builtins(path, program.get("builtins", [])),
        data=_parse_data(path, program["data"]),
    )
    LOGGER.info("loaded PIE %s (%d data cells)", path, len(stripped.data))
    return stripped


def load_stripped_program(path: Path) -> StrippedProgram:
    """Load either input kind, choosing by file extension."""
    path = Path(path)
    if is_zip_file(path):
        return load_pie_program(path)
    return load_program(path)


__all__ = [
    "ProgramLoadError",
    "is_zip_file",
    "load_program",
    "load_pie_program",
    "load_stripped_program",
]
