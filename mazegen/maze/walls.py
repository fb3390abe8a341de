"""Wall value types shared by the graph builder, carver and border emitter.

A wall is anchored at its south-west corner on the integer grid. Orientation
tells which axis the segment runs along:

    PARALLEL_TO_X at (x, z): spans x..x+1 on the line z
    PARALLEL_TO_Z at (x, z): spans z..z+1 on the line x

Dispositions only move forward: UNKNOWN -> PRESENT or UNKNOWN -> ABSENT.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

Coord2D = Tuple[int, int]


class MazeInvariantError(RuntimeError):
    """Raised when the generator detects a defect in its own output."""


class Orientation(str, Enum):
    PARALLEL_TO_X = "x"
    PARALLEL_TO_Z = "z"


class Disposition(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"


class Wall:
    """Boundary segment between two rooms (or on the outer edge)."""

    __slots__ = ("sw_corner", "orientation", "_disposition")

    def __init__(
        self,
        sw_corner: Coord2D,
        orientation: Orientation,
        disposition: Disposition = Disposition.UNKNOWN,
    ):
        self.sw_corner = (int(sw_corner[0]), int(sw_corner[1]))
        self.orientation = orientation
        self._disposition = disposition

    @property
    def disposition(self) -> Disposition:
        return self._disposition

    def resolve(self, disposition: Disposition) -> None:
        if disposition is Disposition.UNKNOWN:
            raise MazeInvariantError(f"cannot reset wall {self.sw_corner} to unknown")
        if self._disposition is not Disposition.UNKNOWN:
            raise MazeInvariantError(
                f"wall {self.sw_corner}/{self.orientation.value} already {self._disposition.value}"
            )
        self._disposition = disposition

    @property
    def is_present(self) -> bool:
        return self._disposition is Disposition.PRESENT

    def to_dict(self):
        return {
            "x": self.sw_corner[0],
            "z": self.sw_corner[1],
            "orientation": self.orientation.value,
            "disposition": self._disposition.value,
        }

    def __eq__(self, other):
        if not isinstance(other, Wall):
            return NotImplemented
        return (self.sw_corner, self.orientation, self._disposition) == (
            other.sw_corner,
            other.orientation,
            other._disposition,
        )

    def __hash__(self):
        return hash((self.sw_corner, self.orientation))

    def __repr__(self):
        return f"Wall({self.sw_corner}, {self.orientation.name}, {self._disposition.name})"


__all__ = ["Coord2D", "Disposition", "MazeInvariantError", "Orientation", "Wall"]
