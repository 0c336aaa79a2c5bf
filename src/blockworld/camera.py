from __future__ import annotations

import math

from . import config
from .linalg import Vec3


class Camera:
    def __init__(
        self,
        pos: tuple[float, float, float] = config.SPAWN_POS,
        yaw: float = config.SPAWN_YAW,
        pitch: float = config.SPAWN_PITCH,
    ) -> None:
        self.pos = list(pos)
        self.yaw = yaw
        self.pitch = pitch

    def look(self, mx: float, my: float) -> None:
        self.yaw -= mx * config.MOUSE_SENSITIVITY
        self.pitch -= my * config.MOUSE_SENSITIVITY
        self.pitch = max(
            -math.pi / 2 + 0.01,
            min(math.pi / 2 - 0.01, self.pitch),
        )

    def forward(self) -> Vec3:
        # yaw 0 looks down +z, positive pitch looks up.
        cos_p = math.cos(self.pitch)
        return Vec3(
            math.sin(self.yaw) * cos_p,
            math.sin(self.pitch),
            math.cos(self.yaw) * cos_p,
        ).norm()

    def origin(self) -> Vec3:
        return Vec3(self.pos[0], self.pos[1], self.pos[2])

    def move(
        self,
        forward_input: float,
        right_input: float,
        vertical_input: float,
        dt: float,
        speed: float = config.SPEED,
    ) -> None:
        horizontal_forward = (math.sin(self.yaw), 0.0, math.cos(self.yaw))
        right_vec = (-horizontal_forward[2], 0.0, horizontal_forward[0])
        move_vector = (
            forward_input * horizontal_forward[0] + right_input * right_vec[0],
            vertical_input,
            forward_input * horizontal_forward[2] + right_input * right_vec[2],
        )
        mag = math.sqrt(move_vector[0] ** 2 + move_vector[1] ** 2 + move_vector[2] ** 2)
        if mag > 0:
            move_vector = (move_vector[0] / mag, move_vector[1] / mag, move_vector[2] / mag)
        self.pos[0] += move_vector[0] * speed * dt
        self.pos[1] += move_vector[1] * speed * dt
        self.pos[2] += move_vector[2] * speed * dt
