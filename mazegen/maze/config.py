from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

IntRange = Tuple[int, int]

SEED_MAX = 2**64 - 1


class Sizes(NamedTuple):
    """Geometric scale handed through to the geometry layer untouched."""

    room_side_length: float = 1.0
    wall_radius: float = 0.1


@dataclass
class MazeConfig:
    x_min: int = 0
    x_max: int = 10
    z_min: int = 0
    z_max: int = 10
    seed: Optional[int] = None
    room_side_length: float = 1.0
    wall_radius: float = 0.1

    @classmethod
    def from_ranges(
        cls,
        x_range: IntRange,
        z_range: IntRange,
        seed: Optional[int] = None,
        sizes: Optional[Sizes] = None,
    ) -> "MazeConfig":
        sizes = sizes or Sizes()
        return cls(
            x_min=x_range[0],
            x_max=x_range[1],
            z_min=z_range[0],
            z_max=z_range[1],
            seed=seed,
            room_side_length=sizes.room_side_length,
            wall_radius=sizes.wall_radius,
        )

    @property
    def x_range(self) -> IntRange:
        return (self.x_min, self.x_max)

    @property
    def z_range(self) -> IntRange:
        return (self.z_min, self.z_max)

    @property
    def sizes(self) -> Sizes:
        return Sizes(self.room_side_length, self.wall_radius)

    @property
    def width(self) -> int:
        return self.x_max - self.x_min

    @property
    def height(self) -> int:
        return self.z_max - self.z_min

    def validate(self) -> None:
        """Raise ValueError for extents or sizes the generator cannot use."""
        validate_range("x_range", self.x_range)
        validate_range("z_range", self.z_range)
        if self.room_side_length <= 0 or self.wall_radius <= 0:
            raise ValueError("room_side_length and wall_radius must be positive")
        if self.seed is not None and not (0 <= self.seed <= SEED_MAX):
            raise ValueError(f"seed must fit in an unsigned 64-bit integer, got {self.seed}")


def validate_range(name: str, rng: IntRange) -> None:
    lo, hi = rng
    if hi <= lo:
        raise ValueError(f"{name} must hold at least one room, got [{lo}, {hi}]")


__all__ = ["IntRange", "MazeConfig", "SEED_MAX", "Sizes", "validate_range"]
