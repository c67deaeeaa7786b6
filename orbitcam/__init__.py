# orbitcam/__init__.py
from orbitcam.orbit import (
    MAX_DISTANCE,
    MAX_PITCH,
    MAX_YAW,
    MIN_DISTANCE,
    MIN_PITCH,
    MIN_YAW,
    OrbitState,
)
from orbitcam.sync import CameraSyncPipeline, OrbitCamera, update_focus, update_transforms
from orbitcam.targets import TargetMarker, TargetRegistry
from orbitcam.transform import WORLD_UP, Transform
from orbitcam.input import InputConfig, OrbitInput, OscillatingZoom
