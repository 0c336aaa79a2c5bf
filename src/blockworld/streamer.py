from __future__ import annotations

import math

from . import config
from .grid import WorldGrid
from .logutil import log
from .terrain import TerrainGenerator

ChunkCoordinate = tuple[int, int]


def chunk_of(x: float, z: float, chunk_size: int = config.CHUNK_SIZE) -> ChunkCoordinate:
    return (int(math.floor(x / chunk_size)), int(math.floor(z / chunk_size)))


def chunks_in_radius(center: ChunkCoordinate, radius: int) -> list[ChunkCoordinate]:
    pcx, pcz = center
    return [
        (cx, cz)
        for cx in range(pcx - radius, pcx + radius + 1)
        for cz in range(pcz - radius, pcz + radius + 1)
    ]


class ChunkStreamer:
    """Generates terrain for chunks as they come into range.

    The loaded set only grows: a coordinate is added exactly once, right
    after its terrain has been written into the grid.
    """

    def __init__(self, grid: WorldGrid, generator: TerrainGenerator) -> None:
        self.grid = grid
        self.generator = generator
        self.loaded: set[ChunkCoordinate] = set()

    def is_loaded(self, coord: ChunkCoordinate) -> bool:
        return coord in self.loaded

    def ensure_loaded(self, viewpoint_chunk: ChunkCoordinate, radius: int) -> list[ChunkCoordinate]:
        assert radius >= 0, f"negative load radius: {radius}"
        new_chunks: list[ChunkCoordinate] = []
        for coord in chunks_in_radius(viewpoint_chunk, radius):
            if coord in self.loaded:
                continue
            self.generator.generate(self.grid, coord[0], coord[1])
            self.loaded.add(coord)
            new_chunks.append(coord)
        if new_chunks:
            log(
                "STREAM",
                f"loaded {len(new_chunks)} chunk(s) around {viewpoint_chunk}, total={len(self.loaded)}",
            )
        return new_chunks
