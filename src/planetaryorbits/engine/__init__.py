import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FILE = os.environ.get("LOG_FILE", "/tmp/planetaryorbits.log")
DEFAULT_LEVEL = logging.WARN


def resolve_log_level(name:str|None) -> int|None:
    """Map a LOG_LEVEL value such as "debug" to a logging level.

    Returns None when the name is empty or not a known level.
    """
    if not name:
        return None
    return logging.getLevelNamesMapping().get(name.strip().upper())


logging.basicConfig(level=DEFAULT_LEVEL)
logger = logging.getLogger("orbit.engine")

file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5_000_000, backupCount=3, delay=True)
file_handler.setFormatter(logging.Formatter(
    "%(asctime)s [%(levelname)s] %(name)s %(filename)s:%(lineno)d: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
))
logger.addHandler(file_handler)

log_level_env:str|None = os.environ.get("LOG_LEVEL", None)
level = resolve_log_level(log_level_env)
if level is not None:
    logger.setLevel(level)
    logger.propagate = False

    # Short format for the console, the file keeps the full one
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)

else:
    logger.setLevel(DEFAULT_LEVEL)
    if log_level_env:
        logger.warning("Unknown LOG_LEVEL %r, using %s", log_level_env, logging.getLevelName(DEFAULT_LEVEL))
