from __future__ import annotations

import math
from typing import Optional, Tuple

import numpy as np

from orbitcam.config import ViewerConfig
from orbitcam.input import OrbitInput, OscillatingZoom
from orbitcam.orbit import OrbitState
from orbitcam.sync import CameraSyncPipeline, OrbitCamera
from orbitcam.targets import TargetMarker, TargetRegistry
from orbitcam.transform import WORLD_UP, Transform

CUBE_SIZE = 1.0
PLANE_SIZE = 10.0
LIGHT_POS = (4.0, 8.0, 4.0)


def circle_step(position: np.ndarray, origin: np.ndarray, dt: float) -> np.ndarray:
    """One Euler step of a spin around the vertical axis through ``origin``."""
    velocity = np.cross(position - origin, WORLD_UP)
    return position + velocity * float(dt)


class DemoScene:
    """
    A cube that circles an origin, a ground plane and one orbit camera
    following the cube.
    """

    def __init__(self, cfg: ViewerConfig):
        self.cfg = cfg
        self.registry = TargetRegistry()
        self.origin = np.array(cfg.target_origin, dtype=np.float64)

        self.cube = self.registry.spawn(Transform.from_translation((0.0, 1.0, 0.0)), TargetMarker())
        self.plane = self.registry.spawn(Transform())
        self.light = self.registry.spawn(Transform.from_translation(LIGHT_POS))

        start = Transform.from_translation((-3.0, 5.0, 8.0)).look_at((0.0, 0.0, 0.0), WORLD_UP)
        self.pipeline = CameraSyncPipeline()
        self.camera = self.pipeline.add(OrbitCamera(self._initial_orbit(), start))

        self.input = OrbitInput(cfg.input_config())
        self.zoom = OscillatingZoom(cfg.zoom_rate, cfg.zoom_period_s) if cfg.zoom_oscillate else None

    def _initial_orbit(self) -> OrbitState:
        return OrbitState(
            self.cube,
            self.cfg.camera_distance,
            math.radians(self.cfg.camera_pitch_deg),
            math.radians(self.cfg.camera_yaw_deg),
        )

    def reset_camera(self):
        self.camera.orbit = self._initial_orbit()
        self.input.reset()

    def position_of(self, handle) -> Optional[Tuple[float, float, float]]:
        t = self.registry.transform(handle)
        if t is None:
            return None
        x, y, z = (float(c) for c in t.translation)
        return (x, y, z)

    def step(self, dt: float):
        t = self.registry.transform(self.cube)
        if t is not None:
            t.translation = circle_step(t.translation, self.origin, dt)

        states = [c.orbit for c in self.pipeline.cameras]
        if self.zoom is not None:
            self.zoom.apply(states, dt)
        self.input.apply(states)
        self.pipeline.run(self.registry)
