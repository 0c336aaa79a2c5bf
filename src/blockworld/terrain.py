from __future__ import annotations

import random

import noise

from . import config
from .blocks import BlockKind
from .grid import WorldGrid
from .linalg.vec3 import round_half_away


class TerrainGenerator:
    """Perlin heightmap columns: grass on top, a dirt band, stone below.

    Heights depend only on world (x, z) and the seed, so a chunk can be
    regenerated at any time and in any order with the same result.
    """

    def __init__(
        self,
        seed: int = config.SEED,
        frequency: float = config.NOISE_FREQUENCY,
        amplitude: int = config.NOISE_AMPLITUDE,
        floor_offset: int = config.FLOOR_OFFSET,
        dirt_depth: int = config.DIRT_DEPTH,
        chunk_size: int = config.CHUNK_SIZE,
        height_cap: int = config.WORLD_HEIGHT,
    ) -> None:
        self.seed = int(seed)
        self.frequency = float(frequency)
        self.amplitude = amplitude
        self.floor_offset = floor_offset
        self.dirt_depth = dirt_depth
        self.chunk_size = chunk_size
        self.height_cap = height_cap
        # pnoise2 wraps at 1024, so the seed picks where in that tile we sample.
        rng = random.Random(self.seed)
        self.offset_x = rng.uniform(0.0, 1024.0)
        self.offset_z = rng.uniform(0.0, 1024.0)

    def column_height(self, world_x: int, world_z: int) -> int:
        n = noise.pnoise2(
            world_x * self.frequency + self.offset_x,
            world_z * self.frequency + self.offset_z,
            repeatx=1024,
            repeaty=1024,
            base=0,
        )
        n = max(-1.0, min(1.0, n))
        h = round_half_away((n + 1.0) * 0.5 * self.amplitude) + self.floor_offset
        return max(0, min(h, self.height_cap - 1))

    def kind_at(self, y: int, height: int) -> BlockKind:
        if y == height:
            return BlockKind.GRASS
        if y >= height - self.dirt_depth:
            return BlockKind.DIRT
        return BlockKind.STONE

    def generate(self, grid: WorldGrid, chunk_x: int, chunk_z: int) -> None:
        x0 = chunk_x * self.chunk_size
        z0 = chunk_z * self.chunk_size
        for lx in range(self.chunk_size):
            for lz in range(self.chunk_size):
                wx = x0 + lx
                wz = z0 + lz
                h = self.column_height(wx, wz)
                for y in range(h + 1):
                    grid.set((wx, y, wz), self.kind_at(y, h))
