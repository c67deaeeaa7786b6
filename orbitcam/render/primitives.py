from __future__ import annotations

from typing import Dict, Tuple

from pyglet.gl import (
    GL_COMPILE,
    GL_LINES,
    GL_QUADS,
    glBegin,
    glCallList,
    glColor4f,
    glEnd,
    glEndList,
    glGenLists,
    glNewList,
    glNormal3f,
    glPopMatrix,
    glPushMatrix,
    glScalef,
    glTranslatef,
    glVertex3f,
)

_LAST_COLOR = (None, None, None, None)

def _set_color(rgba: Tuple[float, float, float, float]):
    global _LAST_COLOR
    r, g, b, a = rgba
    if _LAST_COLOR != (r, g, b, a):
        glColor4f(float(r), float(g), float(b), float(a))
        _LAST_COLOR = (r, g, b, a)

# (normal, four corners) per face of a unit cube centred on the origin
_CUBE_FACES = (
    ((0.0, 0.0, 1.0), ((-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5))),
    ((0.0, 0.0, -1.0), ((-0.5, 0.5, -0.5), (0.5, 0.5, -0.5), (0.5, -0.5, -0.5), (-0.5, -0.5, -0.5))),
    ((1.0, 0.0, 0.0), ((0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5), (0.5, -0.5, 0.5))),
    ((-1.0, 0.0, 0.0), ((-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5))),
    ((0.0, 1.0, 0.0), ((-0.5, 0.5, -0.5), (-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5))),
    ((0.0, -1.0, 0.0), ((-0.5, -0.5, 0.5), (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5))),
)

_BOX_DL = 0

def _emit_cube():
    glBegin(GL_QUADS)
    for (nx, ny, nz), corners in _CUBE_FACES:
        glNormal3f(nx, ny, nz)
        for x, y, z in corners:
            glVertex3f(x, y, z)
    glEnd()

def draw_box(
    center: Tuple[float, float, float],
    size: float,
    rgba: Tuple[float, float, float, float],
):
    global _BOX_DL
    if not _BOX_DL:
        _BOX_DL = int(glGenLists(1))
        if _BOX_DL:
            glNewList(_BOX_DL, GL_COMPILE)
            _emit_cube()
            glEndList()

    cx, cy, cz = center
    s = float(size)

    glPushMatrix()
    glTranslatef(float(cx), float(cy), float(cz))
    glScalef(s, s, s)
    _set_color(tuple(map(float, rgba)))
    if _BOX_DL:
        glCallList(_BOX_DL)
    else:
        _emit_cube()
    glPopMatrix()

def draw_plane(size: float, y: float, rgba: Tuple[float, float, float, float]):
    h = float(size) * 0.5
    yy = float(y)
    _set_color(tuple(map(float, rgba)))
    glBegin(GL_QUADS)
    glNormal3f(0.0, 1.0, 0.0)
    glVertex3f(-h, yy, h)
    glVertex3f(h, yy, h)
    glVertex3f(h, yy, -h)
    glVertex3f(-h, yy, -h)
    glEnd()

_GRID_CACHE: Dict[Tuple[float, float, float, float, float, float, float], int] = {}

def _emit_grid(half: float, y: float, step: float):
    glBegin(GL_LINES)
    v = -half
    while v <= half + 1e-6:
        glVertex3f(float(v), y, -half)
        glVertex3f(float(v), y, half)
        glVertex3f(-half, y, float(v))
        glVertex3f(half, y, float(v))
        v += step
    glEnd()

def draw_grid(
    size: float,
    y: float,
    step: float = 1.0,
    rgba: Tuple[float, float, float, float] = (0.15, 0.15, 0.18, 1.0),
):
    half = float(size) * 0.5
    yy = float(y)
    st = float(step)
    r, g, b, a = map(float, rgba)

    key = (half, yy, st, r, g, b, a)
    dl = _GRID_CACHE.get(key, 0)

    if not dl:
        dl = int(glGenLists(1))
        if dl:
            glNewList(dl, GL_COMPILE)
            _set_color((r, g, b, a))
            _emit_grid(half, yy, st)
            glEndList()
            _GRID_CACHE[key] = dl

    if dl:
        glCallList(dl)
        return

    _set_color((r, g, b, a))
    _emit_grid(half, yy, st)

def draw_axes(origin: Tuple[float, float, float], scale: float = 1.0):
    ox, oy, oz = map(float, origin)
    sc = float(scale)

    glBegin(GL_LINES)
    _set_color((1.0, 0.2, 0.2, 1.0))
    glVertex3f(ox, oy, oz)
    glVertex3f(ox + sc, oy, oz)
    _set_color((0.2, 1.0, 0.2, 1.0))
    glVertex3f(ox, oy, oz)
    glVertex3f(ox, oy + sc, oz)
    _set_color((0.2, 0.6, 1.0, 1.0))
    glVertex3f(ox, oy, oz)
    glVertex3f(ox, oy, oz + sc)
    glEnd()
