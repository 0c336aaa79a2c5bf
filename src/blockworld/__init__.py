from .blocks import BLOCK_COLORS, BlockKind, color_of
from .grid import Position, WorldGrid
from .interact import Action, march, resolve
from .sim import Simulation
from .streamer import ChunkStreamer, chunk_of
from .terrain import TerrainGenerator
from .visibility import exposed_blocks, is_exposed, pack_instances

__all__ = [
    "Action",
    "BLOCK_COLORS",
    "BlockKind",
    "ChunkStreamer",
    "Position",
    "Simulation",
    "TerrainGenerator",
    "WorldGrid",
    "chunk_of",
    "color_of",
    "exposed_blocks",
    "is_exposed",
    "march",
    "pack_instances",
    "resolve",
]
