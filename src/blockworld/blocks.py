from __future__ import annotations

from enum import IntEnum


class BlockKind(IntEnum):
    EMPTY = 0
    GRASS = 1
    DIRT = 2
    STONE = 3
    WOOD = 4
    SAND = 5


BLOCK_COLORS: dict[BlockKind, tuple[int, int, int]] = {
    BlockKind.GRASS: (92, 186, 71),
    BlockKind.DIRT: (140, 69, 18),
    BlockKind.STONE: (128, 128, 128),
    BlockKind.WOOD: (161, 82, 46),
    BlockKind.SAND: (245, 163, 97),
}

# Number keys 1..5 in the viewer.
SELECTABLE_KINDS = (
    BlockKind.GRASS,
    BlockKind.DIRT,
    BlockKind.STONE,
    BlockKind.WOOD,
    BlockKind.SAND,
)


def color_of(kind: BlockKind) -> tuple[int, int, int] | None:
    return BLOCK_COLORS.get(kind)


def kind_for_slot(slot: int) -> BlockKind | None:
    """Map a 1-based hotbar slot to its block kind."""
    if 1 <= slot <= len(SELECTABLE_KINDS):
        return SELECTABLE_KINDS[slot - 1]
    return None


def kind_from_name(name: str) -> BlockKind:
    try:
        kind = BlockKind[name.strip().upper()]
    except KeyError:
        raise ValueError(f"unknown block kind: {name}") from None
    if kind == BlockKind.EMPTY:
        raise ValueError("empty is not a placeable block kind")
    return kind
