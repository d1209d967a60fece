"""Host memory helpers: byte filling, copying and random integer generation."""

from __future__ import annotations

import random
import time
from collections.abc import MutableSequence, Sequence
from typing import Any

_INT_MAX = 2**31 - 1


def memset(buffer: Any, mask: int = 0x00) -> None:
    """Set every byte of a writable buffer to ``mask``."""
    if not 0 <= mask <= 0xFF:
        raise ValueError(f"mask must be a byte value, got {mask}")
    with memoryview(buffer) as view, view.cast("B") as raw:
        raw[:] = bytes([mask]) * raw.nbytes


def memset_zero(buffer: Any) -> None:
    """Set every byte of a writable buffer to 0x00."""
    memset(buffer, 0x00)


def memset_one(buffer: Any) -> None:
    """Set every byte of a writable buffer to 0xFF."""
    memset(buffer, 0xFF)


def copy(source: Sequence[Any], destination: MutableSequence[Any]) -> None:
    """Copy all items of ``source`` to the start of ``destination``."""
    count = len(source)
    if count > len(destination):
        raise ValueError(
            f"destination holds {len(destination)} items, {count} are needed"
        )
    destination[:count] = source[:]


def generate_randoms(
    num_items: int = 1,
    low: int = 0,
    high: int = _INT_MAX,
    seed: int | None = None,
) -> list[int]:
    """Return ``num_items`` integers drawn uniformly from ``[low, high]``.

    Without a seed the generator is seeded from the current time.
    """
    if num_items < 0:
        raise ValueError(f"num_items must be non-negative, got {num_items}")
    if low > high:
        raise ValueError(f"empty range: low={low} > high={high}")
    engine = random.Random(time.time_ns() if seed is None else seed)
    return [engine.randint(low, high) for _ in range(num_items)]