"""Project-wide defaults.  CLI options override these per invocation."""

from __future__ import annotations

from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent  # python/eightpuzzle/
PROJECT_ROOT = PACKAGE_ROOT.parent.parent
FIXTURES_DIR = PROJECT_ROOT / "fixtures"

DEFAULT_STRATEGY = "astar"

# 9! -- one full pass over every permutation.  Solvable searches stay well
# below it since only 9!/2 states are reachable from any start.
MAX_EXPLORED_STATES = 362_880

# Seconds between frames when replaying a solution.
REPLAY_DELAY = 0.3

SCRAMBLE_STEPS = 60
