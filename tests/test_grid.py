import pytest

from blockworld.blocks import BlockKind
from blockworld.grid import WorldGrid
from blockworld.visibility import pack_instances


def test_missing_position_reads_empty(grid):
    assert grid.get((0, 0, 0)) == BlockKind.EMPTY
    assert grid.get((-1000, 5, 99999)) == BlockKind.EMPTY
    assert len(grid) == 0


def test_set_then_get(grid):
    grid.set((1, 2, 3), BlockKind.STONE)
    assert grid.get((1, 2, 3)) == BlockKind.STONE
    assert (1, 2, 3) in grid
    grid.set((1, 2, 3), BlockKind.SAND)
    assert grid.get((1, 2, 3)) == BlockKind.SAND
    assert len(grid) == 1


def test_writing_empty_removes_entry(grid):
    grid.set((0, 0, 0), BlockKind.DIRT)
    grid.set((0, 0, 0), BlockKind.EMPTY)
    assert (0, 0, 0) not in grid
    assert len(grid) == 0
    assert all(kind != BlockKind.EMPTY for _, kind in grid.items())


def test_clearing_empty_cell_changes_nothing(grid):
    grid.set((4, 4, 4), BlockKind.WOOD)
    before = dict(grid.items())
    revision = grid.revision
    grid.set((0, 0, 0), BlockKind.EMPTY)
    assert dict(grid.items()) == before
    assert grid.revision == revision


def test_repeated_set_is_idempotent():
    once = WorldGrid()
    once.set((2, 0, 2), BlockKind.GRASS)
    twice = WorldGrid()
    twice.set((2, 0, 2), BlockKind.GRASS)
    twice.set((2, 0, 2), BlockKind.GRASS)
    assert dict(once.items()) == dict(twice.items())
    assert once.revision == twice.revision == 1


def test_revision_tracks_changes(grid):
    assert grid.revision == 0
    grid.set((0, 0, 0), BlockKind.STONE)
    grid.set((0, 0, 0), BlockKind.DIRT)
    grid.set((0, 0, 0), BlockKind.EMPTY)
    assert grid.revision == 3


def test_numpy_coordinates_are_accepted(grid):
    packed = pack_instances([((1, -2, 3), BlockKind.WOOD)])
    row = packed[0]
    pos = (row["x"], row["y"], row["z"])
    grid.set(pos, BlockKind(int(row["kind"])))
    assert grid.get((1, -2, 3)) == BlockKind.WOOD
    assert list(grid.positions()) == [(1, -2, 3)]
    assert all(type(c) is int for c in next(grid.positions()))
    grid.set(pos, BlockKind.EMPTY)
    assert len(grid) == 0


def test_float_coordinates_are_rejected(grid):
    with pytest.raises(AssertionError):
        grid.set((1.5, 0, 0), BlockKind.STONE)
