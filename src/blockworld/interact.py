from __future__ import annotations

from enum import Enum
from typing import Iterator

from . import config
from .blocks import BlockKind
from .grid import Position, WorldGrid
from .linalg import Vec3


class Action(Enum):
    BREAK = "break"
    PLACE = "place"


def march(origin, direction, max_distance: int = config.MAX_REACH) -> Iterator[Position]:
    """Yield the block cell under origin + direction * d for d = 1..max_distance.

    Samples are rounded per axis, so shallow rays can repeat a cell or step
    over one. That is how picking behaves; it is not a voxel traversal.
    """
    o = Vec3.of(origin)
    d = Vec3.of(direction)
    for distance in range(1, max_distance + 1):
        yield (o + d * distance).cell()


def resolve(
    origin,
    direction,
    action: Action,
    selected_kind: BlockKind,
    grid: WorldGrid,
    max_distance: int = config.MAX_REACH,
) -> Position | None:
    """Break or place one block along a view ray.

    BREAK clears the first occupied cell hit. PLACE fills the empty cell the
    ray passed through just before the first occupied cell, so it needs a
    solid backstop within reach and at least one empty step before it.
    Returns the cell that was written, or None when nothing changed.
    """
    d = Vec3.of(direction)
    assert d.is_unit(config.UNIT_TOLERANCE), f"direction must be a unit vector, got {d!r}"
    if action is Action.PLACE:
        assert selected_kind != BlockKind.EMPTY, "cannot place an empty block"

    previous_empty: Position | None = None
    for cell in march(origin, d, max_distance):
        if grid.get(cell) == BlockKind.EMPTY:
            previous_empty = cell
            continue
        if action is Action.BREAK:
            grid.set(cell, BlockKind.EMPTY)
            return cell
        if previous_empty is None:
            return None
        grid.set(previous_empty, selected_kind)
        return previous_empty
    return None
