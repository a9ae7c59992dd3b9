import argparse
import sys

import numpy as np

from planetaryorbits.engine import logger
from planetaryorbits.helpers import create_default_scene

DEFAULT_HEADLESS_STEPS = 600


def parse_args(argv:list[str]|None=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="planetaryorbits", description="2D two-body gravity demo")
    parser.add_argument("--headless", action="store_true", help="Run without a window and print the final state.")
    parser.add_argument("--steps", type=int, default=DEFAULT_HEADLESS_STEPS, help="Ticks to simulate in headless mode.")
    args = parser.parse_args(argv)
    if args.steps < 0:
        parser.error("--steps must be >= 0")
    return args


def run_headless(steps:int) -> int:
    sim = create_default_scene()
    trajectory = sim.run(steps)
    body = sim.body
    print(f"T+{sim.tick_id} {body.name} position=({body.position.x:.3f}, {body.position.y:.3f}) "
          f"velocity=({body.velocity.x:.3f}, {body.velocity.y:.3f})")
    if len(trajectory):
        print(f"min distance to {sim.star.name}: {trajectory_min_distance(trajectory, sim.star.position.as_tuple()):.3f}")
    return 0


def trajectory_min_distance(trajectory, point) -> float:
    return float(np.min(np.hypot(trajectory[:, 0] - point[0], trajectory[:, 1] - point[1])))


def run(argv:list[str]|None=None) -> int:
    args = parse_args(argv)
    if args.headless:
        return run_headless(args.steps)

    # GTK is only needed for the window
    from planetaryorbits.ui.mainwindow import App

    app = App(create_default_scene())
    logger.info("Starting %s", app.get_application_id())
    return app.run([sys.argv[0]])


if __name__ == "__main__":
    sys.exit(run())
