from __future__ import annotations

import math
import unittest

import numpy as np

from orbitcam.orbit import OrbitState
from orbitcam.sync import CameraSyncPipeline, OrbitCamera, update_focus, update_transforms
from orbitcam.targets import TargetMarker, TargetRegistry
from orbitcam.transform import Transform


def _rig(distance=10.0, pitch=0.0, yaw=0.0, at=(0.0, 0.0, 0.0)):
    reg = TargetRegistry()
    h = reg.spawn(Transform.from_translation(at), TargetMarker())
    cam = OrbitCamera(OrbitState(h, distance, pitch, yaw))
    return reg, h, cam


class TestTargetRegistry(unittest.TestCase):
    def test_resolve_returns_copy_of_current_position(self):
        reg = TargetRegistry()
        h = reg.spawn(Transform.from_translation((1.0, 2.0, 3.0)), TargetMarker())
        p = reg.resolve(h)
        np.testing.assert_array_equal(p, [1.0, 2.0, 3.0])
        p[0] = 99.0
        np.testing.assert_array_equal(reg.resolve(h), [1.0, 2.0, 3.0])

        reg.transform(h).translation = np.array([4.0, 5.0, 6.0])
        np.testing.assert_array_equal(reg.resolve(h), [4.0, 5.0, 6.0])

    def test_unmarked_and_despawned_handles_do_not_resolve(self):
        reg = TargetRegistry()
        plain = reg.spawn(Transform.from_translation((1.0, 0.0, 0.0)))
        marked = reg.spawn(Transform(), TargetMarker())
        self.assertIsNone(reg.resolve(plain))
        self.assertFalse(reg.is_target(plain))
        self.assertTrue(reg.is_target(marked))

        self.assertTrue(reg.despawn(marked))
        self.assertFalse(reg.despawn(marked))
        self.assertIsNone(reg.resolve(marked))
        self.assertIsNone(reg.resolve(12345))

    def test_handles_are_not_reused(self):
        reg = TargetRegistry()
        a = reg.spawn(marker=TargetMarker())
        reg.despawn(a)
        b = reg.spawn(marker=TargetMarker())
        self.assertNotEqual(a, b)
        self.assertIsNone(reg.resolve(a))
        self.assertIsNotNone(reg.resolve(b))


class TestCameraSyncPipeline(unittest.TestCase):
    def test_focus_follows_moving_target(self):
        reg, h, cam = _rig()
        pipe = CameraSyncPipeline([cam])

        pipe.run(reg)
        np.testing.assert_allclose(cam.orbit.focus, [0.0, 0.0, 0.0])
        before = cam.transform.translation.copy()
        np.testing.assert_allclose(before, [0.0, 0.0, 10.0], atol=1e-12)

        reg.transform(h).translation = np.array([5.0, 0.0, 0.0])
        pipe.run(reg)
        np.testing.assert_allclose(cam.orbit.focus, [5.0, 0.0, 0.0])
        np.testing.assert_allclose(cam.transform.translation - before, [5.0, 0.0, 0.0], atol=1e-12)

    def test_missing_target_keeps_focus(self):
        reg, h, cam = _rig(at=(2.0, 3.0, 4.0))
        pipe = CameraSyncPipeline([cam])
        pipe.run(reg)
        focus = cam.orbit.focus.copy()

        reg.despawn(h)
        pipe.run(reg)
        np.testing.assert_array_equal(cam.orbit.focus, focus)
        np.testing.assert_allclose(cam.transform.translation, cam.orbit.position())

    def test_untracked_camera_uses_manual_focus(self):
        reg = TargetRegistry()
        cam = OrbitCamera(OrbitState(None, 10.0, 0.0, 0.0).set_focus((1.0, 1.0, 1.0)))
        CameraSyncPipeline([cam]).run(reg)
        np.testing.assert_allclose(cam.orbit.focus, [1.0, 1.0, 1.0])
        np.testing.assert_allclose(cam.transform.translation, [1.0, 1.0, 11.0], atol=1e-12)

    def test_one_missing_target_does_not_affect_others(self):
        reg = TargetRegistry()
        alive = reg.spawn(Transform.from_translation((7.0, 0.0, 0.0)), TargetMarker())
        gone = reg.spawn(Transform.from_translation((0.0, 7.0, 0.0)), TargetMarker())
        reg.despawn(gone)
        a = OrbitCamera(OrbitState(alive, 10.0, 0.0, 0.0))
        b = OrbitCamera(OrbitState(gone, 10.0, 0.0, 0.0))
        CameraSyncPipeline([a, b]).run(reg)
        np.testing.assert_allclose(a.orbit.focus, [7.0, 0.0, 0.0])
        np.testing.assert_allclose(b.orbit.focus, [0.0, 0.0, 0.0])

    def test_transform_looks_at_focus(self):
        reg, h, cam = _rig(distance=25.0, pitch=0.6, yaw=-2.2, at=(3.0, -1.0, 8.0))
        update_focus([cam], reg)
        update_transforms([cam])
        to_focus = cam.orbit.focus - cam.transform.translation
        to_focus /= np.linalg.norm(to_focus)
        np.testing.assert_allclose(-cam.transform.rotation[:, 2], to_focus, atol=1e-9)
        # no roll: right axis stays horizontal
        self.assertAlmostEqual(float(cam.transform.rotation[1, 0]), 0.0, places=9)
        self.assertGreater(float(cam.transform.rotation[1, 1]), 0.0)

    def test_all_focus_updates_happen_before_transforms(self):
        reg, h, cam = _rig()
        calls = []

        class _Tracking(TargetRegistry):
            def resolve(self, handle):
                calls.append("resolve")
                return reg.resolve(handle)

        class _Orbit(OrbitState):
            __slots__ = ()

            def position(self):
                calls.append("position")
                return super().position()

        cams = [OrbitCamera(_Orbit(h, 10.0, 0.0, 0.0)) for _ in range(3)]
        CameraSyncPipeline(cams).run(_Tracking())
        self.assertEqual(calls, ["resolve"] * 3 + ["position"] * 3)

    def test_add_camera(self):
        reg, h, cam = _rig(at=(1.0, 0.0, 0.0))
        pipe = CameraSyncPipeline()
        self.assertIs(pipe.add(cam), cam)
        pipe.run(reg)
        np.testing.assert_allclose(cam.orbit.focus, [1.0, 0.0, 0.0])


class TestTransform(unittest.TestCase):
    def test_look_at_basis_is_orthonormal(self):
        t = Transform.from_translation((4.0, 9.0, -2.0)).look_at((0.0, 1.0, 0.0))
        r = t.rotation
        np.testing.assert_allclose(r.T @ r, np.eye(3), atol=1e-12)
        self.assertAlmostEqual(float(np.linalg.det(r)), 1.0, places=12)

    def test_look_down_minus_z(self):
        t = Transform.from_translation((0.0, 0.0, 10.0)).look_at((0.0, 0.0, 0.0))
        np.testing.assert_allclose(t.rotation, np.eye(3), atol=1e-12)
        np.testing.assert_allclose(-t.rotation[:, 2], [0.0, 0.0, -1.0], atol=1e-12)

    def test_view_matrix_inverts_model_matrix(self):
        t = Transform.from_translation((1.0, 2.0, 3.0)).look_at((-4.0, 0.5, 2.0))
        np.testing.assert_allclose(t.view_matrix() @ t.matrix(), np.eye(4), atol=1e-12)
        eye_in_view = t.view_matrix() @ np.array([1.0, 2.0, 3.0, 1.0])
        np.testing.assert_allclose(eye_in_view, [0.0, 0.0, 0.0, 1.0], atol=1e-12)

    def test_degenerate_look_at_does_not_produce_nan(self):
        t = Transform.from_translation((0.0, 0.0, 0.0)).look_at((0.0, 0.0, 0.0))
        self.assertTrue(np.all(np.isfinite(t.rotation)))
        t = Transform.from_translation((0.0, 5.0, 0.0)).look_at((0.0, 0.0, 0.0))
        self.assertTrue(np.all(np.isfinite(t.rotation)))

    def test_orbit_pitch_keeps_camera_upright(self):
        for pitch in (-1.5, -0.7, 0.7, 1.5):
            o = OrbitState(None, 10.0, pitch, 0.3)
            t = Transform.from_translation(o.position()).look_at(o.focus)
            self.assertTrue(np.all(np.isfinite(t.rotation)))
            self.assertGreater(float(t.rotation[1, 1]), 0.0, pitch)
            self.assertEqual(math.copysign(1.0, float(-t.rotation[1, 2])), -math.copysign(1.0, pitch))


if __name__ == "__main__":
    unittest.main()
