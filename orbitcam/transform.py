from __future__ import annotations

import numpy as np

WORLD_UP = np.array([0.0, 1.0, 0.0], dtype=np.float64)


def _normalize(v: np.ndarray, fallback: np.ndarray) -> np.ndarray:
    n = float(np.linalg.norm(v))
    if n < 1e-9:
        return fallback.copy()
    return v / n


class Transform:
    """World placement of a scene object: a translation and a 3x3 rotation."""

    __slots__ = ("translation", "rotation")

    def __init__(self, translation=(0.0, 0.0, 0.0), rotation=None):
        self.translation = np.array(translation, dtype=np.float64).reshape(3)
        if rotation is None:
            self.rotation = np.eye(3, dtype=np.float64)
        else:
            self.rotation = np.array(rotation, dtype=np.float64).reshape(3, 3)

    def __repr__(self):
        tx, ty, tz = (float(c) for c in self.translation)
        return f"Transform(translation=({tx:.3f}, {ty:.3f}, {tz:.3f}))"

    @classmethod
    def from_translation(cls, translation) -> "Transform":
        return cls(translation=translation)

    def look_at(self, target, up=WORLD_UP) -> "Transform":
        """
        Rotate in place so local -Z points from ``translation`` toward ``target``.

        Basis columns are (right, up, back) with ``back = eye - target``,
        ``right = up x back`` and ``up' = back x right``.
        """
        up = np.asarray(up, dtype=np.float64).reshape(3)
        back = _normalize(self.translation - np.asarray(target, dtype=np.float64).reshape(3), np.array([0.0, 0.0, 1.0]))
        right = _normalize(np.cross(up, back), np.array([1.0, 0.0, 0.0]))
        true_up = np.cross(back, right)

        m = np.empty((3, 3), dtype=np.float64)
        m[:, 0] = right
        m[:, 1] = true_up
        m[:, 2] = back
        self.rotation = m
        return self

    def matrix(self) -> np.ndarray:
        m = np.eye(4, dtype=np.float64)
        m[0:3, 0:3] = self.rotation
        m[0:3, 3] = self.translation
        return m

    def view_matrix(self) -> np.ndarray:
        r_t = self.rotation.T
        m = np.eye(4, dtype=np.float64)
        m[0:3, 0:3] = r_t
        m[0:3, 3] = -(r_t @ self.translation)
        return m
