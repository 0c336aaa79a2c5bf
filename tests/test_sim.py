import pytest

from blockworld.blocks import BlockKind
from blockworld.interact import Action
from blockworld.sim import Simulation
from blockworld.terrain import TerrainGenerator


def test_start_loads_region_around_spawn(sim):
    sim.start(0.0, 0.0)
    assert sim.loaded_chunks == {(x, z) for x in (-1, 0, 1) for z in (-1, 0, 1)}
    assert len(sim.grid) > 0


def test_viewpoint_within_same_chunk_does_no_work(sim):
    sim.update_viewpoint(1.0, 1.0)
    revision = sim.grid.revision
    assert sim.update_viewpoint(15.0, 3.0) == []
    assert sim.grid.revision == revision


def test_crossing_chunk_border_streams_new_chunks(sim):
    sim.update_viewpoint(1.0, 1.0)
    new = sim.update_viewpoint(17.0, 1.0)
    assert set(new) == {(2, -1), (2, 0), (2, 1)}
    assert len(sim.loaded_chunks) == 12


def test_returning_to_loaded_chunk_generates_nothing(sim):
    sim.update_viewpoint(1.0, 1.0)
    sim.update_viewpoint(17.0, 1.0)
    assert sim.update_viewpoint(1.0, 1.0) == []
    assert len(sim.loaded_chunks) == 12


def test_select(sim):
    assert sim.selected_kind == BlockKind.GRASS
    sim.select(BlockKind.SAND)
    assert sim.selected_kind == BlockKind.SAND
    with pytest.raises(ValueError):
        sim.select(BlockKind.EMPTY)
    assert sim.selected_kind == BlockKind.SAND


def test_dig_then_place_on_terrain(sim):
    sim.start(0.0, 0.0)
    h = sim.generator.column_height(3, 3)
    origin = (3.0, float(h + 5), 3.0)
    down = (0.0, -1.0, 0.0)

    assert sim.interact(origin, down, Action.BREAK) == (3, h, 3)
    assert sim.grid.get((3, h, 3)) == BlockKind.EMPTY

    sim.select(BlockKind.WOOD)
    assert sim.interact(origin, down, Action.PLACE) == (3, h, 3)
    assert sim.grid.get((3, h, 3)) == BlockKind.WOOD


def test_exposed_tracks_edits(sim):
    sim.start(0.0, 0.0)
    # Lowest interior column: every side neighbor is at least as tall.
    h, x, z = min(
        (sim.generator.column_height(x, z), x, z) for x in range(1, 15) for z in range(1, 15)
    )
    below = (x, h - 1, z)
    assert below not in dict(sim.exposed())
    sim.interact((float(x), float(h + 2), float(z)), (0.0, -1.0, 0.0), Action.BREAK)
    assert below in dict(sim.exposed())


def test_independent_worlds():
    a = Simulation(load_radius=0)
    b = Simulation(load_radius=0)
    a.start(0.0, 0.0)
    a.select(BlockKind.STONE)
    assert len(b.grid) == 0
    assert b.loaded_chunks == set()
    assert b.selected_kind == BlockKind.GRASS


def test_custom_generator_is_used():
    gen = TerrainGenerator(chunk_size=4, floor_offset=0, amplitude=0)
    sim = Simulation(load_radius=0, generator=gen)
    sim.start(0.0, 0.0)
    assert len(sim.grid) == 16
    assert all(kind == BlockKind.GRASS for _, kind in sim.grid.items())
