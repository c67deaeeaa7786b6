from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from orbitcam.orbit import OrbitState


@dataclass(frozen=True)
class InputConfig:
    # full window width -> full turn, full window height -> half turn
    yaw_radians_per_px: float = 2.0 * math.pi / 1280.0
    pitch_radians_per_px: float = math.pi / 720.0
    invert_yaw: bool = True
    zoom_per_wheel_step: float = 1.0
    zoom_rate: float = 100.0
    zoom_period_s: float = 1.0


class OrbitInput:
    """
    Collects raw pointer input during a frame and turns it into orbit deltas.

    Drag deltas are screen-space pixels with +y pointing down. They only count
    while the orbit button is held.
    """

    def __init__(self, cfg: Optional[InputConfig] = None):
        self.cfg = cfg if cfg is not None else InputConfig()
        self.orbiting = False
        self._dx = 0.0
        self._dy = 0.0
        self._wheel = 0.0

    def press(self):
        self.orbiting = True

    def release(self):
        self.orbiting = False

    def drag(self, dx: float, dy: float):
        if not self.orbiting:
            return
        self._dx += float(dx)
        self._dy += float(dy)

    def scroll(self, steps: float):
        self._wheel += float(steps)

    def deltas(self) -> tuple[float, float, float]:
        """Pending (yaw, pitch, distance) deltas."""
        sign = -1.0 if self.cfg.invert_yaw else 1.0
        dyaw = sign * self._dx * self.cfg.yaw_radians_per_px
        dpitch = self._dy * self.cfg.pitch_radians_per_px
        ddist = -self._wheel * self.cfg.zoom_per_wheel_step
        return dyaw, dpitch, ddist

    def reset(self):
        self._dx = self._dy = self._wheel = 0.0

    def apply(self, states: Iterable[OrbitState]):
        dyaw, dpitch, ddist = self.deltas()
        self.reset()
        if dyaw == 0.0 and dpitch == 0.0 and ddist == 0.0:
            return
        for s in states:
            s.add_yaw(dyaw).add_pitch(dpitch).add_distance(ddist)


class OscillatingZoom:
    """Zooms out then in at a fixed rate, flipping direction every period."""

    def __init__(self, rate: float = 100.0, period_s: float = 1.0):
        self.rate = float(rate)
        self.period_s = max(1e-6, float(period_s))
        self.sign = 1.0
        self._elapsed = 0.0

    def step(self, dt: float) -> float:
        dt = max(0.0, float(dt))
        left = self.period_s - self._elapsed
        if dt < left:
            self._elapsed += dt
            return self.sign * self.rate * dt

        # finish the current leg, then whole legs, then the partial one
        delta = self.sign * self.rate * left
        self.sign = -self.sign
        full, rest = divmod(dt - left, self.period_s)
        if int(full) % 2:
            delta += self.sign * self.rate * self.period_s
            self.sign = -self.sign
        delta += self.sign * self.rate * rest
        self._elapsed = rest
        return delta

    def apply(self, states: Iterable[OrbitState], dt: float):
        d = self.step(dt)
        for s in states:
            s.add_distance(d)
