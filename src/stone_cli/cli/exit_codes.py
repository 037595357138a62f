"""Stable exit codes for the stone CLI.

    0  - Success
    10 - Proof verification failed
    20 - Malformed input or load error
    21 - Program could not be encoded for hashing
    30 - Internal error
"""
from __future__ import annotations

EXIT_OK = 0
EXIT_VERIFY_FAILED = 10
EXIT_MALFORMED = 20
EXIT_ENCODING = 21
EXIT_INTERNAL = 30

_DESCRIPTIONS = {
    EXIT_OK: "success",
    EXIT_VERIFY_FAILED: "proof verification failed",
    EXIT_MALFORMED: "malformed input",
    EXIT_ENCODING: "program encoding failed",
    EXIT_INTERNAL: "internal error",
}


def exit_code_description(code: int) -> str:
    return _DESCRIPTIONS.get(code, "unknown")
