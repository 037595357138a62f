"""STARK field elements and their integer / byte conversions."""
from __future__ import annotations

from dataclasses import dataclass

# 2**251 + 17 * 2**192 + 1
STARK_PRIME = 0x800000000000011000000000000000000000000000000000000000000000001

FELT_BYTES = 32
# Largest byte string that always fits below the prime.
MAX_SHORT_BYTES = 31


class FieldElementError(ValueError):
    """Raised when a value cannot be represented as a field element."""


@dataclass(frozen=True)
class FieldElement:
    """Element of the STARK prime field, held as a reduced unsigned int."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise FieldElementError(f"field element value must be an int, got {type(self.value)!r}")
        if not 0 <= self.value < STARK_PRIME:
            raise FieldElementError(f"value {self.value:#x} is outside the field")

    @classmethod
    def from_int(cls, value: int) -> "FieldElement":
        """Reduce an arbitrary integer modulo the field prime."""
        return cls(int(value) % STARK_PRIME)

    @classmethod
    def from_bytes_be(cls, data: bytes, *, max_len: int = FELT_BYTES) -> "FieldElement":
        """Interpret ``data`` as a big-endian unsigned integer.

        Unlike :meth:`from_int`, no reduction happens: byte strings longer
        than ``max_len`` or encoding a value >= the prime are rejected.
        """
        if len(data) > max_len:
            raise FieldElementError(f"{len(data)} bytes exceed the {max_len}-byte limit")
        return cls(int.from_bytes(data, "big", signed=False))

    def to_bytes_be(self) -> bytes:
        return self.value.to_bytes(FELT_BYTES, "big", signed=False)

    def to_hex(self) -> str:
        return hex(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.to_hex()


__all__ = [
    "STARK_PRIME",
    "FELT_BYTES",
    "MAX_SHORT_BYTES",
    "FieldElement",
    "FieldElementError",
]
