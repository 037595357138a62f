"""Pytest configuration and fixtures for stone-cli tests."""
from __future__ import annotations

import json
import os
import zipfile
from pathlib import Path
from typing import Any, Callable

import pytest

from stone_cli.field import STARK_PRIME, FieldElement

FIXTURES = Path(__file__).parent / "fixtures"


def mixing_hash(left: FieldElement, right: FieldElement) -> FieldElement:
    """Cheap hash that is neither commutative nor associative."""
    return FieldElement.from_int(3 * left.value + 5 * right.value + 7)


@pytest.fixture
def recording_hash():
    """Hash function that records its calls; returns (hash_func, calls)."""
    calls: list[tuple[int, int]] = []

    def hash_func(left: FieldElement, right: FieldElement) -> FieldElement:
        calls.append((left.value, right.value))
        return mixing_hash(left, right)

    return hash_func, calls


def compiled_program(
    *,
    data: list[Any] | None = None,
    builtins: list[str] | None = None,
    main_pc: int = 0,
    main_scope: str | None = None,
    prime: str = hex(STARK_PRIME),
) -> dict[str, Any]:
    scope = main_scope or "__main__"
    program: dict[str, Any] = {
        "attributes": [],
        "builtins": builtins if builtins is not None else ["output", "range_check"],
        "compiler_version": "0.13.0",
        "data": data if data is not None else ["0x40780017fff7fff", "0x1", "0x208b7fff7fff7ffe"],
        "debug_info": None,
        "hints": {},
        "identifiers": {
            f"{scope}.main": {"decorators": [], "pc": main_pc, "type": "function"},
        },
        "prime": prime,
        "reference_manager": {"references": []},
    }
    if main_scope is not None:
        program["main_scope"] = main_scope
    return program


@pytest.fixture
def write_program(tmp_path: Path) -> Callable[..., Path]:
    """Write a compiled program JSON file built from keyword overrides."""

    def _write(name: str = "program.json", raw: dict[str, Any] | None = None, **kwargs: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(raw if raw is not None else compiled_program(**kwargs)))
        return path

    return _write


@pytest.fixture
def write_pie(tmp_path: Path) -> Callable[..., Path]:
    """Write a minimal Cairo PIE archive holding the given program metadata."""

    def _write(program: dict[str, Any] | None, name: str = "pie.zip") -> Path:
        path = tmp_path / name
        metadata: dict[str, Any] = {
            "program_segment": {"index": 0, "size": 3},
            "execution_segment": {"index": 1, "size": 10},
            "ret_fp_segment": {"index": 2, "size": 0},
            "ret_pc_segment": {"index": 3, "size": 0},
            "builtin_segments": {},
            "extra_segments": [],
        }
        if program is not None:
            metadata["program"] = program
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("metadata.json", json.dumps(metadata))
            archive.writestr("version.json", json.dumps({"cairo_pie": "1.1"}))
        return path

    return _write


@pytest.fixture
def bootloader_program() -> Path:
    """Reference bootloader v0.13.0 program, if available locally."""
    path = Path(os.environ.get("STONE_BOOTLOADER_PROGRAM", FIXTURES / "bootloader-v0.13.0.json"))
    if not path.exists():
        pytest.skip(f"reference bootloader program not found at {path}")
    return path
