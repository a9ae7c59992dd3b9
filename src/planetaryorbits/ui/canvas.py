import cairo

from planetaryorbits.engine.sim import OrbitalSim
from planetaryorbits.ui.gtk4 import Gtk, Gdk, Graphene
from planetaryorbits.ui.pz import CameraController
from planetaryorbits.ui.render import draw_frame


class OrbitalCanvas(Gtk.DrawingArea):

    def __init__(self, sim:OrbitalSim):
        super().__init__()
        self.sim = sim
        self.controller = CameraController(self, sim.camera)

        width, height = int(sim.camera.screen_size.x), int(sim.camera.screen_size.y)
        self.set_size_request(width, height)

        self._cached_surface = None
        self._tick_callback_id = None

    def start(self):
        """Advance and redraw once per display refresh for as long as the widget lives."""
        if self._tick_callback_id is None:
            self._tick_callback_id = self.add_tick_callback(self.on_tick)

    def on_tick(self, widget, frame_clock:Gdk.FrameClock):
        self.sim.step(self.controller.inputs)
        self.queue_draw()
        return True

    def do_snapshot(self, snapshot: Gtk.Snapshot):
        width = self.get_width()
        height = self.get_height()
        if width <= 0 or height <= 0:
            return

        if self._cached_surface is None or \
           self._cached_surface.get_width() != width or \
           self._cached_surface.get_height() != height:
            self._cached_surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)

        cr = cairo.Context(self._cached_surface)
        draw_frame(cr, self.sim)

        # Push cached surface into snapshot every frame
        rect = Graphene.Rect()
        rect.init(0, 0, width, height)
        cr_out = snapshot.append_cairo(rect)
        cr_out.set_source_surface(self._cached_surface, 0, 0)
        cr_out.paint()
