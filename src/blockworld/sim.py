from __future__ import annotations

from typing import Iterator

from . import config
from .blocks import BlockKind
from .grid import Position, WorldGrid
from .interact import Action, resolve
from .logutil import log
from .streamer import ChunkCoordinate, ChunkStreamer, chunk_of
from .terrain import TerrainGenerator
from .visibility import exposed_blocks


class Simulation:
    """Everything one world needs: the grid, the loaded chunks and the selection.

    Several simulations can live side by side; nothing is kept in module globals.
    """

    def __init__(
        self,
        seed: int = config.SEED,
        load_radius: int = config.LOAD_RADIUS,
        generator: TerrainGenerator | None = None,
    ) -> None:
        self.grid = WorldGrid()
        self.generator = generator if generator is not None else TerrainGenerator(seed=seed)
        self.streamer = ChunkStreamer(self.grid, self.generator)
        self.load_radius = load_radius
        self.selected_kind = BlockKind.GRASS
        self.viewpoint_chunk: ChunkCoordinate | None = None

    @property
    def loaded_chunks(self) -> set[ChunkCoordinate]:
        return self.streamer.loaded

    def start(self, x: float = config.SPAWN_POS[0], z: float = config.SPAWN_POS[2]) -> None:
        self.update_viewpoint(x, z)

    def update_viewpoint(self, x: float, z: float) -> list[ChunkCoordinate]:
        chunk = chunk_of(x, z, self.generator.chunk_size)
        if chunk == self.viewpoint_chunk:
            return []
        self.viewpoint_chunk = chunk
        return self.streamer.ensure_loaded(chunk, self.load_radius)

    def select(self, kind: BlockKind) -> None:
        if kind == BlockKind.EMPTY:
            raise ValueError("cannot select the empty block kind")
        self.selected_kind = BlockKind(kind)
        log("SELECT", f"selected {self.selected_kind.name.lower()}")

    def interact(self, origin, direction, action: Action) -> Position | None:
        target = resolve(origin, direction, action, self.selected_kind, self.grid)
        if target is not None:
            log("INTERACT", f"{action.value} at {target}")
        return target

    def exposed(self) -> Iterator[tuple[Position, BlockKind]]:
        return exposed_blocks(self.grid)
