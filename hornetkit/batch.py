"""Random edge batches for insertion into, or removal from, a graph."""

from __future__ import annotations

import random
import time
from collections.abc import Iterable, Sequence
from enum import Enum, Flag


class BatchGenProperty(Flag):
    """Options that change how a batch is generated and reported."""

    NONE = 0
    WEIGHTED = 1
    """Pick endpoints with probability proportional to their out-degree."""
    PRINT = 2
    """Print the batch, sorted, to standard output."""
    UNIQUE = 4
    """Sort the batch and drop duplicate edges."""


class BatchGenType(Enum):
    """Whether the batch holds edges to insert or edges to remove."""

    INSERT = "insert"
    REMOVE = "remove"


Edge = tuple[int, int]


def _removal_batch(
    adjacency: Sequence[Sequence[int]], batch_size: int, engine: random.Random
) -> list[Edge]:
    if not any(adjacency):
        raise ValueError("cannot pick edges to remove from a graph without edges")
    num_vertices = len(adjacency)
    batch: list[Edge] = []
    while len(batch) < batch_size:
        src = engine.randint(0, num_vertices - 1)
        neighbors = adjacency[src]
        if not neighbors:
            continue
        index = engine.randint(0, len(neighbors) - 1)
        batch.append((src, neighbors[index]))
    return batch


def _weighted_batch(
    adjacency: Sequence[Sequence[int]], batch_size: int, engine: random.Random
) -> list[Edge]:
    degrees = [len(neighbors) for neighbors in adjacency]
    if sum(degrees) == 0:
        raise ValueError("weighted generation needs at least one vertex with edges")
    vertices = range(len(adjacency))
    picks = engine.choices(vertices, weights=degrees, k=2 * batch_size)
    return list(zip(picks[0::2], picks[1::2]))


def _uniform_batch(
    num_vertices: int, batch_size: int, engine: random.Random
) -> list[Edge]:
    last = num_vertices - 1
    return [
        (engine.randint(0, last), engine.randint(0, last)) for _ in range(batch_size)
    ]


def format_batch(pairs: Iterable[Edge]) -> str:
    """Return the text printed for a batch: a header and one ``(src,dst)`` per line."""
    lines = ["Batch:\n"]
    lines.extend(f"({src},{dst})\n" for src, dst in pairs)
    lines.append("\n")
    return "".join(lines)


def generate_batch(
    adjacency: Sequence[Sequence[int]],
    batch_size: int,
    batch_type: BatchGenType = BatchGenType.INSERT,
    prop: BatchGenProperty = BatchGenProperty.NONE,
    seed: int | None = None,
) -> list[Edge]:
    """Return a batch of ``(src, dst)`` edges for the graph given as adjacency lists.

    A removal batch draws existing edges. An insertion batch draws vertex
    pairs uniformly, or weighted by out-degree with ``WEIGHTED``. With
    ``UNIQUE`` the batch is sorted and duplicates are dropped, so it may come
    back shorter than ``batch_size``. With ``PRINT`` the sorted batch is
    written to standard output. Without a seed, the current time is used.
    """
    if batch_size < 0:
        raise ValueError(f"batch_size must be non-negative, got {batch_size}")
    batch_type = BatchGenType(batch_type)
    prop = BatchGenProperty(prop)
    num_vertices = len(adjacency)
    if num_vertices == 0:
        raise ValueError("the graph has no vertices")

    engine = random.Random(time.time_ns() if seed is None else seed)
    if batch_type is BatchGenType.REMOVE:
        batch = _removal_batch(adjacency, batch_size, engine)
    elif BatchGenProperty.WEIGHTED in prop:
        batch = _weighted_batch(adjacency, batch_size, engine)
    else:
        batch = _uniform_batch(num_vertices, batch_size, engine)

    if prop & (BatchGenProperty.PRINT | BatchGenProperty.UNIQUE):
        ordered = sorted(batch)
        if BatchGenProperty.UNIQUE in prop:
            ordered = sorted(set(ordered))
            batch = ordered
        if BatchGenProperty.PRINT in prop:
            print(format_batch(ordered), end="")
    return batch