import statistics
import time
from collections import deque

import numpy as np
from numpy.typing import NDArray

from planetaryorbits.engine import logger
from planetaryorbits.engine.body import Body
from planetaryorbits.engine.camera import Camera
from planetaryorbits.engine.compute import G
from planetaryorbits.engine.inputs import PAN_STEP, InputState


class OrbitalSim:
    """One moving body around one fixed star, advanced a tick at a time.

    Ticks are not scaled by wall-clock time; one call to `step` is one
    frame of motion regardless of how long the frame took.
    """

    def __init__(self, body:Body, star:Body, camera:Camera|None=None, G:float=G):
        self.body = body
        self.star = star
        self.camera = Camera() if camera is None else camera
        self.G = G
        self.tick_id = 0
        self.t_step = deque(maxlen=10)

    @property
    def avg_step_duration(self) -> float:
        """Mean wall-clock seconds of the last few ticks, 0.0 before the first one."""
        if not self.t_step:
            return 0.0
        return statistics.mean(self.t_step)

    def __iter__(self):
        # Draw order
        yield self.body
        yield self.star

    def step(self, inputs:InputState|None=None):
        start = time.perf_counter()

        if inputs is not None:
            dx, dy = inputs.pan_vector(PAN_STEP)
            if dx or dy:
                self.camera.pan(dx, dy)

        self.star.attract(self.body, self.G)
        self.body.integrate()

        self.tick_id += 1
        self.t_step.append(time.perf_counter() - start)
        logger.debug("[T+%d] %s pos=%s vel=%s", self.tick_id, self.body.name, self.body.position, self.body.velocity)

    def run(self, steps:int, inputs:InputState|None=None) -> NDArray[np.float64]:
        """Advance `steps` ticks and return the body's position after each one."""
        trajectory = np.zeros((steps, 2), dtype=np.float64)
        for i in range(steps):
            self.step(inputs)
            trajectory[i] = self.body.position.as_tuple()

        if steps:
            logger.info(
                "Ran %d ticks (T+%d), %s at (%.2f, %.2f), avg step %.3f ms",
                steps, self.tick_id, self.body.name, trajectory[-1, 0], trajectory[-1, 1],
                self.avg_step_duration * 1000.0
            )
        return trajectory
