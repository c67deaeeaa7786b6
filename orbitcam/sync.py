from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from orbitcam.orbit import OrbitState
from orbitcam.targets import TargetRegistry
from orbitcam.transform import WORLD_UP, Transform

log = logging.getLogger(__name__)


class OrbitCamera:
    """A camera transform driven by the orbit state it owns."""

    __slots__ = ("orbit", "transform")

    def __init__(self, orbit: OrbitState, transform: Optional[Transform] = None):
        self.orbit = orbit
        self.transform = transform if transform is not None else Transform()

    def __repr__(self):
        return f"OrbitCamera({self.orbit!r}, {self.transform!r})"


def update_focus(cameras: Iterable[OrbitCamera], registry: TargetRegistry):
    for cam in cameras:
        handle = cam.orbit.target
        if handle is None:
            continue
        pos = registry.resolve(handle)
        if pos is None:
            log.debug("target %r did not resolve, keeping focus", handle)
            continue
        cam.orbit.focus = pos


def update_transforms(cameras: Iterable[OrbitCamera]):
    for cam in cameras:
        cam.transform.translation = cam.orbit.position()
        cam.transform.look_at(cam.orbit.focus, WORLD_UP)


class CameraSyncPipeline:
    """
    Per-frame camera update.

    Every camera's focus is refreshed from its target before any camera
    transform is recomputed, so a frame never mixes old and new focus points.
    """

    def __init__(self, cameras: Optional[Iterable[OrbitCamera]] = None):
        self.cameras: List[OrbitCamera] = list(cameras or [])

    def add(self, camera: OrbitCamera) -> OrbitCamera:
        self.cameras.append(camera)
        return camera

    def run(self, registry: TargetRegistry):
        update_focus(self.cameras, registry)
        update_transforms(self.cameras)
