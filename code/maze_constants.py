"""Shared constants for the maze generation prototype."""

from __future__ import annotations

MAX_DIMENSION_LENGTH = 255  # Coordinates are stored as unsigned bytes.
DEFAULT_RANDOM_SEED = 123456789

# Default level request used when nothing else is configured.
DEFAULT_LEVEL_LENGTHS = (2, 2)
# Lengths of the level shown by the command-line entry point.
STARTUP_LEVEL_LENGTHS = (4, 15, 5)

# Levels can be loaded with any of these dimension counts.
SUPPORTED_LEVEL_DIMENSIONS = (2, 3, 4, 5, 6)

PRIORITY_BITS = 32
