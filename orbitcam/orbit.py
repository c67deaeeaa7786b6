from __future__ import annotations

import logging
import math
import sys
from typing import Hashable, Optional

import numpy as np

log = logging.getLogger(__name__)

MIN_DISTANCE = 5.0
MAX_DISTANCE = 100.0
EPSILON = sys.float_info.epsilon
MAX_PITCH = math.radians(89.9)
MIN_PITCH = -MAX_PITCH
MAX_YAW = math.pi
MIN_YAW = -MAX_YAW

UNIT_TOLERANCE = 1e-5


def clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v


def wrap(v: float, lo: float, hi: float) -> float:
    """
    Wrap ``v`` into the closed range ``[lo, hi]``.

    Below the range a value re-enters from the top (``hi - (lo - v)``), above it
    re-enters from the bottom (``lo - (hi - v)``). The overshoot is reduced
    modulo the span first, so one pass lands in range for any finite input.
    """
    span = hi - lo
    while v < lo or v > hi:
        if v < lo:
            over = math.fmod(lo - v, span) or span
            v = hi - over
        else:
            over = math.fmod(v - hi, span) or span
            v = lo + over
    return v


def unit_direction(pitch: float, yaw: float) -> np.ndarray:
    cp = math.cos(pitch)
    return np.array([math.sin(yaw) * cp, math.sin(pitch), math.cos(yaw) * cp], dtype=np.float64)


def _finite(name: str, v: float) -> bool:
    if math.isfinite(v):
        return True
    log.warning("ignoring non-finite %s: %r", name, v)
    return False


class OrbitState:
    """
    Orbit parameters of one camera.

    ``pitch`` is measured from the horizontal XZ plane and ``yaw`` around +Y from
    the +Z axis, both in radians. Every numeric write is clamped (distance,
    pitch) or wrapped (yaw), so an instance can never hold an out-of-range value.
    """

    __slots__ = ("target", "focus", "_distance", "_pitch", "_yaw")

    def __init__(
        self,
        target: Optional[Hashable] = None,
        distance: float = MIN_DISTANCE,
        pitch: float = 0.0,
        yaw: float = 0.0,
    ):
        self.target = target
        self.focus = np.zeros(3, dtype=np.float64)
        self._distance = MIN_DISTANCE
        self._pitch = 0.0
        self._yaw = 0.0
        self.set_distance(distance)
        self.set_pitch(pitch)
        self.set_yaw(yaw)

    def __repr__(self):
        return (
            f"OrbitState(target={self.target!r}, focus={tuple(float(c) for c in self.focus)}, "
            f"distance={self._distance:.3f}, pitch={self._pitch:.4f}, yaw={self._yaw:.4f})"
        )

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def pitch(self) -> float:
        return self._pitch

    @property
    def yaw(self) -> float:
        return self._yaw

    def set_focus(self, focus) -> "OrbitState":
        self.focus = np.array(focus, dtype=np.float64).reshape(3)
        return self

    def set_distance(self, distance: float) -> "OrbitState":
        distance = float(distance)
        if _finite("distance", distance):
            self._distance = clamp(max(distance, EPSILON), MIN_DISTANCE, MAX_DISTANCE)
        return self

    def add_distance(self, delta: float) -> "OrbitState":
        return self.set_distance(self._distance + float(delta))

    def set_pitch(self, pitch: float) -> "OrbitState":
        pitch = float(pitch)
        if _finite("pitch", pitch):
            self._pitch = clamp(pitch, MIN_PITCH, MAX_PITCH)
        return self

    def add_pitch(self, delta: float) -> "OrbitState":
        return self.set_pitch(self._pitch + float(delta))

    def set_yaw(self, yaw: float) -> "OrbitState":
        yaw = float(yaw)
        if _finite("yaw", yaw):
            self._yaw = wrap(yaw, MIN_YAW, MAX_YAW)
        return self

    def add_yaw(self, delta: float) -> "OrbitState":
        return self.set_yaw(self._yaw + float(delta))

    def direction(self) -> np.ndarray:
        d = unit_direction(self._pitch, self._yaw)
        assert abs(float(np.linalg.norm(d)) - 1.0) < UNIT_TOLERANCE, f"orbit direction not normalized: {d}"
        return d

    def position(self) -> np.ndarray:
        return self.focus + self.direction() * self._distance
