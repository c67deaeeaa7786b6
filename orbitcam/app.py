from __future__ import annotations

import logging

import pyglet
from pyglet.window import key, mouse

from orbitcam.config import ViewerConfig
from orbitcam.input import OscillatingZoom
from orbitcam.render.scene import SceneRenderer
from orbitcam.scene import DemoScene

log = logging.getLogger(__name__)

ORBIT_BUTTON = mouse.MIDDLE


class ViewerApp:
    def __init__(self, cfg: ViewerConfig):
        self.cfg = cfg
        self.scene = DemoScene(cfg)

        self.window = pyglet.window.Window(
            width=cfg.window_w,
            height=cfg.window_h,
            caption="orbitcam",
            resizable=True,
        )
        self.window.push_handlers(self)

        self.renderer = SceneRenderer(self.scene)

        self._fps_inv = 1.0 / float(max(1, cfg.fps))
        pyglet.clock.schedule_interval(self._tick, self._fps_inv)

    def run(self):
        log.info("window %dx%d at %d fps", self.cfg.window_w, self.cfg.window_h, self.cfg.fps)
        pyglet.app.run()

    def _tick(self, dt: float):
        self.scene.step(dt)
        self.window.invalid = True

    def on_draw(self):
        self.window.clear()
        self.renderer.draw(self.window)

    def on_resize(self, width: int, height: int):
        self.renderer.resize(width, height)

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if button == ORBIT_BUTTON:
            self.scene.input.press()

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int):
        if button == ORBIT_BUTTON:
            self.scene.input.release()

    def on_mouse_drag(self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int):
        # pyglet's y axis points up
        self.scene.input.drag(dx, -dy)

    def on_mouse_scroll(self, x: int, y: int, scroll_x: float, scroll_y: float):
        self.scene.input.scroll(scroll_y)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.R:
            self.scene.reset_camera()
        elif symbol == key.Z:
            if self.scene.zoom is None:
                self.scene.zoom = OscillatingZoom(self.cfg.zoom_rate, self.cfg.zoom_period_s)
            else:
                self.scene.zoom = None
            log.info("oscillating zoom %s", "on" if self.scene.zoom is not None else "off")
        elif symbol == key.A:
            self.renderer.show_axes = not self.renderer.show_axes
