from planetaryorbits.engine import logger
from planetaryorbits.engine.body import Body, Color_T
from planetaryorbits.engine.camera import Camera
from planetaryorbits.engine.sim import OrbitalSim
from planetaryorbits.engine.vec import Vector2D

STAR_MASS = 1e13


def hex_color(value:str) -> Color_T:
    """Convert "#RRGGBB" into an (r, g, b) tuple in the 0.0 - 1.0 range.

    Returns:
        tuple[float, float, float]: The RGB color tuple.
    """
    value = value.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a #RRGGBB color, got {value!r}")
    r, g, b = (int(value[i:i+2], 16) / 255.0 for i in range(0, 6, 2))
    return (r, g, b)


def create_body(*,
    x:float,
    y:float,
    vx:float = 0,
    vy:float = 0,
    mass:float = 10,
    radius:float = 10,
    name:str = "Body",
    color:str = "#FF0000",
    draw_name:bool = True,
) -> Body:
    if mass <= 0:
        raise ValueError(f"Body mass must be positive, got {mass}")
    if radius < 0:
        raise ValueError(f"Body radius cannot be negative, got {radius}")

    return Body(
        position=Vector2D(x, y),
        velocity=Vector2D(vx, vy),
        mass=mass,
        radius=radius,
        name=name,
        draw_name=draw_name,
        colour=hex_color(color),
    )


def create_star(*, mass:float = STAR_MASS, radius:float = 10) -> Body:
    return create_body(x=0, y=0, mass=mass, radius=radius, name="Star", color="#FFAA00")


def create_default_scene() -> OrbitalSim:
    """The demo setup: a small body passing above a heavy star, camera at the origin."""
    body = create_body(x=-50, y=-150, vx=1.5, vy=0)
    star = create_star()
    sim = OrbitalSim(body, star, Camera(Vector2D(0, 0), 1.0))
    logger.info("Created scene: %s at %s, %s (m=%g) at %s", body.name, body.position, star.name, star.mass, star.position)
    return sim
