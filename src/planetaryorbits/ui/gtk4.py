import sys

import gi

from planetaryorbits.engine import logger

try:
    gi.require_version('Gtk', '4.0')
except ValueError:
    logger.critical("GTK 4.0 not available")
    sys.exit(1)
from gi.repository import Gtk, Gdk, GLib, Gio, Graphene  # type: ignore
