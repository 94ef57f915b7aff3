from __future__ import annotations

from enum import Enum

AlienId = int


class Direction(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

# Render order for map lines and neighbour lists
DISPLAY_ORDER = (Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.EAST)


class Phase(str, Enum):
    UNINITIALIZED = "uninitialized"
    SCATTERING = "scattering"
    STEPPING = "stepping"
    FINISHED = "finished"
