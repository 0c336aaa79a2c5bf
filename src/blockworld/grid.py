from __future__ import annotations

from numbers import Integral
from typing import Iterator

from .blocks import BlockKind

Position = tuple[int, int, int]


class WorldGrid:
    """Sparse block storage keyed by integer world position.

    Only occupied positions are stored; anything absent reads as EMPTY.
    `revision` increases on every write that changes what `get` returns,
    so readers can tell whether derived data (visible blocks, meshes) is stale.
    """

    def __init__(self) -> None:
        self._blocks: dict[Position, BlockKind] = {}
        self.revision = 0

    def get(self, pos: Position) -> BlockKind:
        return self._blocks.get(pos, BlockKind.EMPTY)

    def set(self, pos: Position, kind: BlockKind) -> None:
        assert all(isinstance(c, Integral) for c in pos), f"non-integer position: {pos!r}"
        if kind == BlockKind.EMPTY:
            if self._blocks.pop(pos, None) is not None:
                self.revision += 1
            return
        if self._blocks.get(pos) == kind:
            return
        self._blocks[tuple(int(c) for c in pos)] = BlockKind(kind)
        self.revision += 1

    def items(self) -> Iterator[tuple[Position, BlockKind]]:
        return iter(self._blocks.items())

    def positions(self) -> Iterator[Position]:
        return iter(self._blocks.keys())

    def __contains__(self, pos: object) -> bool:
        return pos in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)
