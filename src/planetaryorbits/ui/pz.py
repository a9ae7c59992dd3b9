from planetaryorbits.engine import logger
from planetaryorbits.engine.camera import Camera
from planetaryorbits.engine.inputs import InputState, set_keycode, wheel_steps_to_delta, zoom_from_wheel
from planetaryorbits.ui.gtk4 import Gtk


class CameraController:
    """Feeds WASD and scroll-wheel events into the input state and camera zoom."""

    def __init__(self, widget, camera:Camera):
        self.widget = widget
        self.camera = camera
        self.inputs = InputState()

        scroll = Gtk.EventControllerScroll.new(Gtk.EventControllerScrollFlags.VERTICAL)
        scroll.connect("scroll", self.on_scroll)
        widget.add_controller(scroll)

    def attach_keys(self, window:Gtk.Window):
        controller = Gtk.EventControllerKey.new()
        controller.connect("key-pressed", self.on_key_pressed)
        controller.connect("key-released", self.on_key_released)
        window.add_controller(controller)

    # Matched on the hardware keycode, the keyval depends on the layout
    def on_key_pressed(self, controller, keyval, keycode, state) -> bool:
        return set_keycode(self.inputs, keycode, True)

    def on_key_released(self, controller, keyval, keycode, state):
        set_keycode(self.inputs, keycode, False)

    def on_scroll(self, controller, dx, dy):
        if dy == 0:
            return False
        self.camera.zoom = zoom_from_wheel(self.camera.zoom, wheel_steps_to_delta(dy))
        logger.debug("zoom=%.2f", self.camera.zoom)
        self.widget.queue_draw()
        return True
