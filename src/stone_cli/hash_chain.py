"""Hash chain over a sequence of field elements.

The chain of ``[d0, d1, ..., d(n-1)]`` is

    h(d0, h(d1, h(..., h(d(n-2), d(n-1)))))

which is the construction the Cairo bootloader uses to identify programs.
``h`` is neither commutative nor associative, so the fold direction matters.
"""
from __future__ import annotations

import logging
from typing import Callable, Sequence

from starknet_py.hash.utils import pedersen_hash

from .field import FieldElement

LOGGER = logging.getLogger(__name__)

HashFunction = Callable[[FieldElement, FieldElement], FieldElement]


class HashChainError(ValueError):
    """Raised when a hash chain is requested over no elements."""


def pedersen(left: FieldElement, right: FieldElement) -> FieldElement:
    """StarkWare Pedersen hash of two field elements."""
    return FieldElement(pedersen_hash(left.value, right.value))


def compute_hash_chain(
    data: Sequence[FieldElement],
    hash_func: HashFunction = pedersen,
) -> FieldElement:
    """Fold ``data`` right to left through ``hash_func``."""
    if len(data) < 1:
        raise HashChainError(
            f"len(data) for hash chain computation must be >= 1; got: {len(data)}"
        )
    LOGGER.debug("hash chain over %d elements", len(data))

    chain = data[-1]
    for i in range(len(data) - 2, -1, -1):
        chain = hash_func(data[i], chain)
    return chain


__all__ = ["HashFunction", "HashChainError", "pedersen", "compute_hash_chain"]
