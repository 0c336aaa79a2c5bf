from __future__ import annotations

import sys

import numpy as np
import pygame
from OpenGL.GL import (
    GL_COLOR_BUFFER_BIT,
    GL_COMPILE,
    GL_CULL_FACE,
    GL_DEPTH_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_LESS,
    GL_MODELVIEW,
    GL_PROJECTION,
    GL_QUADS,
    glBegin,
    glCallList,
    glClear,
    glClearColor,
    glColor3ub,
    glDeleteLists,
    glDepthFunc,
    glDisable,
    glEnable,
    glEnd,
    glEndList,
    glGenLists,
    glLoadIdentity,
    glMatrixMode,
    glNewList,
    glVertex3f,
    glViewport,
)
from OpenGL.GLU import gluLookAt, gluPerspective

from . import config
from .blocks import BLOCK_COLORS, kind_for_slot
from .camera import Camera
from .interact import Action
from .logutil import log
from .sim import Simulation
from .visibility import pack_instances, within_distance

# (corner offsets, brightness) per cube face; cube spans pos +/- 0.5.
_CUBE_FACES = (
    (((0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5), (0.5, -0.5, 0.5)), 0.8),
    (((-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5)), 0.8),
    (((-0.5, 0.5, -0.5), (-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5)), 1.0),
    (((-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5)), 0.5),
    (((0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, -0.5, 0.5)), 0.65),
    (((-0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5), (0.5, -0.5, -0.5)), 0.65),
)

_SLOT_KEYS = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
    pygame.K_5: 5,
}


def _face_colors() -> dict[int, list[tuple[int, int, int]]]:
    shaded: dict[int, list[tuple[int, int, int]]] = {}
    for kind, color in BLOCK_COLORS.items():
        shaded[int(kind)] = [
            tuple(max(0, min(255, int(c * brightness))) for c in color)
            for _, brightness in _CUBE_FACES
        ]
    return shaded


_FACE_COLORS = _face_colors()


def compile_blocks(instances: np.ndarray, list_id: int | None) -> int:
    if list_id is not None:
        glDeleteLists(list_id, 1)
    list_id = glGenLists(1)
    glNewList(list_id, GL_COMPILE)
    glBegin(GL_QUADS)
    for row in instances:
        x = float(row["x"])
        y = float(row["y"])
        z = float(row["z"])
        colors = _FACE_COLORS[int(row["kind"])]
        for (corners, _), color in zip(_CUBE_FACES, colors):
            glColor3ub(*color)
            for ox, oy, oz in corners:
                glVertex3f(x + ox, y + oy, z + oz)
    glEnd()
    glEndList()
    return list_id


def setup_projection(width: int, height: int, far: float) -> None:
    glViewport(0, 0, width, height)
    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    gluPerspective(config.FOV, width / max(1, height), config.NEAR_PLANE, far)
    glMatrixMode(GL_MODELVIEW)
    glEnable(GL_DEPTH_TEST)
    glDepthFunc(GL_LESS)
    glDisable(GL_CULL_FACE)
    r, g, b = config.SKY_COLOR
    glClearColor(r / 255.0, g / 255.0, b / 255.0, 1.0)


def _handle_events(sim: Simulation, cam: Camera) -> None:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            pygame.quit()
            sys.exit()
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
            pygame.quit()
            sys.exit()
        elif event.type == pygame.KEYDOWN and event.key in _SLOT_KEYS:
            kind = kind_for_slot(_SLOT_KEYS[event.key])
            if kind is not None:
                sim.select(kind)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 3):
            # Button-down events only: one action per click, no repeat while held.
            action = Action.BREAK if event.button == 1 else Action.PLACE
            sim.interact(cam.origin(), cam.forward(), action)


def _read_movement(cam: Camera, dt: float) -> None:
    keys = pygame.key.get_pressed()
    forward_input = 0.0
    right_input = 0.0
    if keys[pygame.K_w]:
        forward_input += 1.0
    if keys[pygame.K_s]:
        forward_input -= 1.0
    if keys[pygame.K_d]:
        right_input += 1.0
    if keys[pygame.K_a]:
        right_input -= 1.0

    vertical_input = 0.0
    if keys[pygame.K_SPACE]:
        vertical_input += 1.0
    if keys[pygame.K_LSHIFT] or keys[pygame.K_RSHIFT]:
        vertical_input -= 1.0

    speed = config.SPEED
    if keys[pygame.K_LCTRL] or keys[pygame.K_RCTRL]:
        speed *= config.FAST_MOVE_MULT
    cam.move(forward_input, right_input, vertical_input, dt, speed)


def run(sim: Simulation) -> None:
    pygame.init()
    pygame.display.set_mode((config.WIDTH, config.HEIGHT), pygame.OPENGL | pygame.DOUBLEBUF)
    pygame.display.set_caption("blockworld")
    pygame.mouse.set_visible(False)
    pygame.event.set_grab(True)

    cam = Camera()
    clock = pygame.time.Clock()
    list_id: int | None = None
    built_revision = -1
    max_dist = float(max(1, sim.load_radius) * config.CHUNK_SIZE)
    setup_projection(config.WIDTH, config.HEIGHT, far=max_dist + config.CHUNK_SIZE)
    log("VIEW", f"window {config.WIDTH}x{config.HEIGHT}, selected {sim.selected_kind.name.lower()}")

    while True:
        dt = clock.get_time() / 1000.0
        _handle_events(sim, cam)
        cam.look(*pygame.mouse.get_rel())
        _read_movement(cam, dt)

        sim.update_viewpoint(cam.pos[0], cam.pos[2])

        if sim.grid.revision != built_revision:
            instances = pack_instances(
                within_distance(sim.exposed(), cam.origin().to_tuple(), max_dist)
            )
            list_id = compile_blocks(instances, list_id)
            built_revision = sim.grid.revision
            log("VIEW", f"rebuilt {len(instances)} exposed blocks at revision {built_revision}")

        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        glLoadIdentity()
        eye = cam.origin()
        target = eye + cam.forward()
        gluLookAt(eye.x, eye.y, eye.z, target.x, target.y, target.z, 0.0, 1.0, 0.0)
        if list_id is not None:
            glCallList(list_id)
        pygame.display.flip()

        clock.tick(config.FPS_LIMIT)
