from __future__ import annotations
import ctypes
import math
import numpy as np
from pyglet.gl import (
    glMatrixMode, glLoadIdentity, glLoadMatrixf, glMultMatrixf,
    glEnable, glBlendFunc,
    glClearColor, glDepthFunc, glViewport,
    glHint, glShadeModel,
    glLightfv, glColorMaterial,
    GL_PROJECTION, GL_MODELVIEW,
    GL_DEPTH_TEST, GL_LEQUAL,
    GL_BLEND, GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA,
    GL_PERSPECTIVE_CORRECTION_HINT, GL_NICEST,
    GL_SMOOTH,
    GL_LIGHT0, GL_POSITION, GL_FRONT_AND_BACK, GL_AMBIENT_AND_DIFFUSE,
    GL_COLOR_MATERIAL, GL_NORMALIZE,
    GLfloat,
)

def init_gl():
    glClearColor(0.06, 0.06, 0.07, 1.0)
    glEnable(GL_DEPTH_TEST)
    glDepthFunc(GL_LEQUAL)
    glEnable(GL_BLEND)
    glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
    glHint(GL_PERSPECTIVE_CORRECTION_HINT, GL_NICEST)
    glShadeModel(GL_SMOOTH)
    glEnable(GL_NORMALIZE)
    glEnable(GL_COLOR_MATERIAL)
    glColorMaterial(GL_FRONT_AND_BACK, GL_AMBIENT_AND_DIFFUSE)

def set_light(position):
    # must be called with the view matrix loaded, GL stores it in eye space
    x, y, z = map(float, position)
    glLightfv(GL_LIGHT0, GL_POSITION, (GLfloat * 4)(x, y, z, 1.0))

def perspective(aspect: float, fov_deg: float = 60.0, near: float = 0.05, far: float = 500.0) -> np.ndarray:
    f = 1.0 / math.tan(math.radians(fov_deg) * 0.5)
    m = np.zeros((4, 4), dtype=np.float32)
    m[0, 0] = f / float(aspect)
    m[1, 1] = f
    m[2, 2] = (far + near) / (near - far)
    m[2, 3] = (2.0 * far * near) / (near - far)
    m[3, 2] = -1.0
    return m

def _as_gl_mat4(m: np.ndarray):
    a = np.asarray(m, dtype=np.float32)
    if a.shape != (4, 4):
        a = a.reshape((4, 4))
    a = a.T.copy()
    return (ctypes.c_float * 16)(*a.ravel(order="C"))

def set_matrices(proj: np.ndarray, view: np.ndarray):
    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    glLoadMatrixf(_as_gl_mat4(proj))

    glMatrixMode(GL_MODELVIEW)
    glLoadIdentity()
    glLoadMatrixf(_as_gl_mat4(view))

def set_viewport(w: int, h: int):
    glViewport(0, 0, int(max(1, w)), int(max(1, h)))

def mult_matrix(m: np.ndarray):
    glMultMatrixf(_as_gl_mat4(m))
