from dataclasses import dataclass, field

from planetaryorbits.engine import logger
from planetaryorbits.engine.compute import G, gravitational_force
from planetaryorbits.engine.vec import DegenerateScalarError, Vector2D, ZERO

Color_T = tuple[float, float, float]

RED:Color_T = (1.0, 0.0, 0.0)


@dataclass
class Body:
    """A point mass. Vectors are replaced, never mutated in place."""
    position: Vector2D
    velocity: Vector2D = ZERO
    acceleration: Vector2D = ZERO
    mass: float = 10.0
    radius: float = 10.0
    name: str = "Body"
    draw_name: bool = True
    colour: Color_T = field(default=RED)

    def apply_force(self, force: Vector2D):
        """Accumulate force / mass into the acceleration (Newton's 2nd law)."""
        if self.mass == 0:
            raise DegenerateScalarError(f"cannot apply a force to massless body {self.name!r}")
        self.acceleration = self.acceleration + force / self.mass

    def attract(self, target: "Body", G: float = G):
        """Pull `target` toward this body using Newton's Law of Gravitation.

        Only `target` receives the force; this body is left untouched.
        Coincident bodies are skipped.
        """
        force = gravitational_force(self.position, self.mass, target.position, target.mass, G)
        if force is None:
            logger.debug("%s and %s coincide at %s, no force applied", self.name, target.name, self.position)
            return
        target.apply_force(force)

    def integrate(self):
        """Semi-implicit Euler: velocity first, then position, then reset acceleration."""
        self.velocity = self.velocity + self.acceleration
        self.position = self.position + self.velocity
        self.acceleration = ZERO
