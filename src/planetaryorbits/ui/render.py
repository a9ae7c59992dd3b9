import cairo

from planetaryorbits.engine.body import Body
from planetaryorbits.engine.camera import Camera
from planetaryorbits.engine.sim import OrbitalSim

BG_COLOR = (0.005, 0.005, 0.02)

FONT_FAMILY = "Sans"
FONT_SIZE = 20

## Gap between a body and its label, in screen pixels at zoom 1.
LABEL_OFFSET = 20


def draw_background(cr:cairo.Context):
    cr.set_source_rgb(*BG_COLOR)
    cr.paint()


def draw_body(cr:cairo.Context, body:Body, camera:Camera):
    screen = camera.world_to_screen(body.position)
    half = body.radius * camera.zoom

    cr.set_source_rgb(*body.colour)
    cr.rectangle(screen.x - half, screen.y - half, half * 2, half * 2)
    cr.fill()

    if body.draw_name:
        cr.select_font_face(FONT_FAMILY, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL)
        cr.set_font_size(FONT_SIZE)
        te = cr.text_extents(body.name)
        # Centred on x, baseline below the square
        cr.move_to(screen.x - te.x_advance / 2, screen.y + body.radius + LABEL_OFFSET * camera.zoom)
        cr.show_text(body.name)


def draw_frame(cr:cairo.Context, sim:OrbitalSim):
    draw_background(cr)
    for body in sim:
        draw_body(cr, body, sim.camera)
