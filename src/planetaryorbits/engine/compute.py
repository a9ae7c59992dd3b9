from typing import Optional

from planetaryorbits.engine.vec import Vector2D

## Gravitational constant. The demo runs in pixel/frame units, so the
## value only matters relative to the star's mass.
G = 6.67e-11


def universal_gravitation(G:float, M1:float, M2:float, r:float):
    """Newton's Law of Universal Gravitation

    Args:
        G (float): Gravitational constant
        M1 (float): Mass of first body
        M2 (float): Mass of second body
        r (float): Distance between the two bodies

    Returns:
        float: Magnitude of the force between the two bodies.
    """
    return G * ((M1 * M2) / r**2)


def gravitational_force(
    source_position: Vector2D,
    source_mass: float,
    target_position: Vector2D,
    target_mass: float,
    G: float = G,
) -> Optional[Vector2D]:
    """Force that a source mass exerts on a target mass.

    The force points from the target toward the source. Returns None when
    both positions coincide, since the direction is undefined. No softening
    is applied, so very small separations give very large forces.
    """
    direction = source_position - target_position
    unit = direction.unit()
    if unit is None:
        return None

    magnitude = universal_gravitation(G, source_mass, target_mass, direction.magnitude())
    return unit * magnitude
