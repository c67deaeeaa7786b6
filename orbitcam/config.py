from __future__ import annotations
from dataclasses import dataclass
import math
import os
from typing import Tuple

from orbitcam.input import InputConfig

def _f(name: str, default: float) -> float:
    v = os.environ.get(name, "")
    if not v:
        return float(default)
    try:
        return float(v)
    except ValueError:
        return float(default)

def _s(name: str, default: str) -> str:
    v = os.environ.get(name, "")
    return v if v else default

def _i(name: str, default: int) -> int:
    v = os.environ.get(name, "")
    if not v:
        return int(default)
    try:
        return int(v)
    except ValueError:
        return int(default)

def _b(name: str, default: bool) -> bool:
    v = os.environ.get(name, "")
    if not v:
        return bool(default)
    vv = v.strip().lower()
    if vv in ("1", "true", "yes", "y", "on"):
        return True
    if vv in ("0", "false", "no", "n", "off"):
        return False
    return bool(default)

def _v3(name: str, default: Tuple[float, float, float]) -> Tuple[float, float, float]:
    v = os.environ.get(name, "")
    if not v:
        return default
    parts = v.replace(",", " ").split()
    if len(parts) != 3:
        return default
    try:
        x, y, z = (float(p) for p in parts)
    except ValueError:
        return default
    return (x, y, z)

@dataclass(frozen=True)
class ViewerConfig:
    window_w: int
    window_h: int
    fps: int
    camera_distance: float
    camera_pitch_deg: float
    camera_yaw_deg: float
    # pixels for a full yaw turn / a half pitch turn
    orbit_yaw_px: float
    orbit_pitch_px: float
    orbit_invert_yaw: bool
    zoom_step: float
    zoom_rate: float
    zoom_period_s: float
    zoom_oscillate: bool
    target_origin: Tuple[float, float, float]
    log_level: str

    def input_config(self) -> InputConfig:
        return InputConfig(
            yaw_radians_per_px=2.0 * math.pi / max(1.0, self.orbit_yaw_px),
            pitch_radians_per_px=math.pi / max(1.0, self.orbit_pitch_px),
            invert_yaw=self.orbit_invert_yaw,
            zoom_per_wheel_step=self.zoom_step,
            zoom_rate=self.zoom_rate,
            zoom_period_s=self.zoom_period_s,
        )

def load_config() -> ViewerConfig:
    return ViewerConfig(
        window_w=_i("WINDOW_W", 1280),
        window_h=_i("WINDOW_H", 720),
        fps=_i("FPS", 60),
        camera_distance=_f("CAMERA_DISTANCE", 50.0),
        camera_pitch_deg=_f("CAMERA_PITCH_DEG", 45.0),
        camera_yaw_deg=_f("CAMERA_YAW_DEG", 45.0),
        orbit_yaw_px=_f("ORBIT_YAW_PX", 1280.0),
        orbit_pitch_px=_f("ORBIT_PITCH_PX", 720.0),
        orbit_invert_yaw=_b("ORBIT_INVERT_YAW", True),
        zoom_step=_f("ZOOM_STEP", 1.0),
        zoom_rate=_f("ZOOM_RATE", 100.0),
        zoom_period_s=_f("ZOOM_PERIOD_S", 1.0),
        zoom_oscillate=_b("ZOOM_OSCILLATE", False),
        # cube circles the vertical axis through this point
        target_origin=_v3("TARGET_ORIGIN", (0.0, 11.0, -10.0)),
        log_level=_s("LOG_LEVEL", "INFO"),
    )
