from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from orbitcam.transform import Transform

log = logging.getLogger(__name__)

Handle = int


@dataclass(frozen=True)
class TargetMarker:
    """Tag for objects an orbit camera is allowed to follow."""


@dataclass
class _Entry:
    transform: Transform
    marker: Optional[TargetMarker]


class TargetRegistry:
    """
    Stable handles to positioned scene objects.

    Handles are never reused, so a handle whose object was despawned keeps
    resolving to ``None`` instead of silently pointing at a newer object.
    """

    def __init__(self):
        self._entries: Dict[Handle, _Entry] = {}
        self._ids = itertools.count(1)

    def spawn(self, transform: Optional[Transform] = None, marker: Optional[TargetMarker] = None) -> Handle:
        handle = next(self._ids)
        self._entries[handle] = _Entry(transform if transform is not None else Transform(), marker)
        log.debug("spawned %d (target=%s)", handle, marker is not None)
        return handle

    def despawn(self, handle: Handle) -> bool:
        removed = self._entries.pop(handle, None) is not None
        if removed:
            log.debug("despawned %d", handle)
        return removed

    def transform(self, handle: Handle) -> Optional[Transform]:
        e = self._entries.get(handle)
        return None if e is None else e.transform

    def is_target(self, handle: Handle) -> bool:
        e = self._entries.get(handle)
        return e is not None and e.marker is not None

    def resolve(self, handle: Handle) -> Optional[np.ndarray]:
        if not self.is_target(handle):
            return None
        return self._entries[handle].transform.translation.copy()
