from planetaryorbits.engine import logger
from planetaryorbits.engine.sim import OrbitalSim
from planetaryorbits.ui.gtk4 import Gtk, Gdk, Gio
from planetaryorbits.ui import canvas


APP_ID = "io.github.planetaryorbits"
WINDOW_TITLE = "Planetary Orbits"


class App(Gtk.Application):

    def __init__(self, sim:OrbitalSim):
        super().__init__(application_id=APP_ID, flags=Gio.ApplicationFlags.FLAGS_NONE)
        self.sim = sim
        self.canvas = canvas.OrbitalCanvas(sim)

        act_quit = Gio.SimpleAction.new("quit", None)
        act_quit.connect("activate", lambda a, p: self.quit())
        self.add_action(act_quit)

    def do_startup(self):
        Gtk.Application.do_startup(self)
        self.set_accels_for_action("app.quit", ["<Primary>q"])

    def do_activate(self):
        Gtk.Application.do_activate(self)
        win = self.props.active_window
        if not win:
            win = self._build_window()
        win.present()
        self.canvas.start()
        logger.info("Window presented, simulation running")

    def _build_window(self) -> Gtk.ApplicationWindow:
        win = Gtk.ApplicationWindow(application=self, title=WINDOW_TITLE)
        win.set_resizable(False)
        win.set_child(self.canvas)

        self.canvas.controller.attach_keys(win)

        escape = Gtk.EventControllerKey.new()
        escape.connect("key-pressed", self.on_key_pressed)
        win.add_controller(escape)
        return win

    def on_key_pressed(self, controller, keyval, keycode, state) -> bool:
        if keyval == Gdk.KEY_Escape:
            self.quit()
            return True
        return False
