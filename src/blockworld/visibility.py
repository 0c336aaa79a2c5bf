from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from .blocks import BlockKind
from .grid import Position, WorldGrid

FACE_NEIGHBORS = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)

INSTANCE_DTYPE = np.dtype(
    [
        ("x", np.int32),
        ("y", np.int32),
        ("z", np.int32),
        ("kind", np.uint8),
    ]
)


def is_exposed(grid: WorldGrid, pos: Position) -> bool:
    x, y, z = pos
    for dx, dy, dz in FACE_NEIGHBORS:
        if grid.get((x + dx, y + dy, z + dz)) == BlockKind.EMPTY:
            return True
    return False


def exposed_blocks(grid: WorldGrid) -> Iterator[tuple[Position, BlockKind]]:
    """Yield occupied blocks that touch at least one empty face neighbor.

    Evaluated lazily against the grid as it is now; order is unspecified.
    Don't mutate the grid while consuming the iterator.
    """
    for pos, kind in grid.items():
        if is_exposed(grid, pos):
            yield pos, kind


def within_distance(
    blocks: Iterable[tuple[Position, BlockKind]],
    center: tuple[float, float, float],
    max_distance: float,
) -> Iterator[tuple[Position, BlockKind]]:
    cx, cy, cz = center
    limit2 = max_distance * max_distance
    for pos, kind in blocks:
        dx = pos[0] - cx
        dy = pos[1] - cy
        dz = pos[2] - cz
        if dx * dx + dy * dy + dz * dz <= limit2:
            yield pos, kind


def pack_instances(blocks: Iterable[tuple[Position, BlockKind]]) -> np.ndarray:
    """Pack (position, kind) pairs into a structured array, one row per block."""
    rows = [(x, y, z, int(kind)) for (x, y, z), kind in blocks]
    if not rows:
        return np.zeros((0,), dtype=INSTANCE_DTYPE)
    return np.array(rows, dtype=INSTANCE_DTYPE)
