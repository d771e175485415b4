"""
Direction - unit offsets along the axes of a y-up, north = -z grid.

    UP     ( 0,  1,  0)      NORTH  ( 0,  0, -1)      EAST  ( 1, 0, 0)
    DOWN   ( 0, -1,  0)      SOUTH  ( 0,  0,  1)      WEST  (-1, 0, 0)
"""

from enum import Enum

from .vectors.vector3 import Int3


class Direction(Enum):
    UP = (0, 1, 0)
    DOWN = (0, -1, 0)
    NORTH = (0, 0, -1)
    SOUTH = (0, 0, 1)
    EAST = (1, 0, 0)
    WEST = (-1, 0, 0)

    @property
    def offset_x(self) -> int:
        return self.value[0]

    @property
    def offset_y(self) -> int:
        return self.value[1]

    @property
    def offset_z(self) -> int:
        return self.value[2]

    @property
    def offset(self) -> Int3:
        return Int3(*self.value)

    @property
    def opposite(self) -> "Direction":
        return Direction(tuple(-c for c in self.value))
