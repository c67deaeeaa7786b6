from __future__ import annotations

import math

import pyglet
from pyglet.gl import (
    GL_CULL_FACE,
    GL_LIGHT0,
    GL_LIGHTING,
    glDisable,
    glEnable,
    glPopMatrix,
    glPushMatrix,
)

from orbitcam.render.glutil import init_gl, mult_matrix, perspective, set_light, set_matrices, set_viewport
from orbitcam.render.primitives import draw_axes, draw_box, draw_grid, draw_plane
from orbitcam.scene import CUBE_SIZE, PLANE_SIZE, DemoScene

class SceneRenderer:
    def __init__(self, scene: DemoScene):
        self.scene = scene
        init_gl()

        self._w = int(scene.cfg.window_w)
        self._h = int(scene.cfg.window_h)

        self._col_cube = (0.8, 0.7, 0.6, 1.0)
        self._col_plane = (0.3, 0.5, 0.3, 1.0)

        self.show_axes = True

    def resize(self, w: int, h: int):
        self._w = int(max(1, w))
        self._h = int(max(1, h))
        set_viewport(self._w, self._h)

    def draw(self, window: pyglet.window.Window):
        w = int(max(1, window.width))
        h = int(max(1, window.height))
        if w != self._w or h != self._h:
            self.resize(w, h)

        scene = self.scene
        aspect = float(w) / float(h)
        set_matrices(perspective(aspect), scene.camera.transform.view_matrix())

        light = scene.position_of(scene.light)
        if light is not None:
            set_light(light)
            glEnable(GL_LIGHTING)
            glEnable(GL_LIGHT0)

        plane = scene.registry.transform(scene.plane)
        if plane is not None:
            glPushMatrix()
            mult_matrix(plane.matrix())
            draw_plane(PLANE_SIZE, 0.0, self._col_plane)
            glPopMatrix()

        cube = scene.position_of(scene.cube)
        if cube is not None:
            glEnable(GL_CULL_FACE)
            draw_box(cube, CUBE_SIZE, self._col_cube)
            glDisable(GL_CULL_FACE)
        glDisable(GL_LIGHTING)

        if plane is not None:
            glPushMatrix()
            mult_matrix(plane.matrix())
            draw_grid(PLANE_SIZE, 0.001, step=1.0)
            glPopMatrix()
        if self.show_axes:
            draw_axes((0.0, 0.002, 0.0), scale=1.0)

        self._update_caption(window)

    def _update_caption(self, window: pyglet.window.Window):
        o = self.scene.camera.orbit
        fx, fy, fz = (float(c) for c in o.focus)
        caption = (
            f"orbitcam | dist {o.distance:5.1f} | pitch {math.degrees(o.pitch):6.1f} "
            f"| yaw {math.degrees(o.yaw):7.1f} | focus ({fx:.1f}, {fy:.1f}, {fz:.1f})"
        )
        if window.caption != caption:
            window.set_caption(caption)
