import sys

from planetaryorbits.app import run

sys.exit(run())
