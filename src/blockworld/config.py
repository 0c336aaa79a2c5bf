from __future__ import annotations

# --- World ---
CHUNK_SIZE = 16  # width and depth (x and z) of a generation chunk
WORLD_HEIGHT = 64  # height cap (y)
LOAD_RADIUS = 3  # chunks around the viewpoint to keep generated (Chebyshev)

# --- Terrain ---
SEED = 42
NOISE_FREQUENCY = 0.05
NOISE_AMPLITUDE = 15
FLOOR_OFFSET = 5
DIRT_DEPTH = 3  # dirt layers directly under the grass

# --- Interaction ---
MAX_REACH = 10  # ray march steps, one block unit each
UNIT_TOLERANCE = 1e-6

# --- Viewer ---
WIDTH = 1280
HEIGHT = 720
FPS_LIMIT = 60
FOV = 70.0
NEAR_PLANE = 0.1
MOUSE_SENSITIVITY = 0.003
SPEED = 10.0
FAST_MOVE_MULT = 3.0
SPAWN_POS = (8.0, 20.0, 8.0)
SPAWN_YAW = 0.0
SPAWN_PITCH = -0.4
SKY_COLOR = (135, 206, 235)

# --- Logging ---
LOG_ENABLED = True
LOG_COLOR = True
