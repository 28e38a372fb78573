"""Core value types for world generation."""

from typing import Iterator

from pydantic import BaseModel, Field

from .biomes import Biome
from .exceptions import RegionOutOfBoundsError

MAX_DIMENSION = 34000


class Position(BaseModel, frozen=True):
    """Immutable 1-indexed block coordinate."""

    x: int
    y: int

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"


class Size(BaseModel, frozen=True):
    """World dimensions in blocks."""

    width: int = Field(default=10, ge=1, le=MAX_DIMENSION, description="Width in blocks")
    height: int = Field(default=10, ge=1, le=MAX_DIMENSION, description="Height in blocks")


class Region(BaseModel, frozen=True):
    """Inclusive rectangle of block coordinates.

    Ordering and bounds are not enforced on construction; call
    ``check_bounds`` against the map size before generating.
    """

    start: Position
    end: Position

    @classmethod
    def full(cls, size: Size) -> "Region":
        """Region covering the whole map."""
        return cls(
            start=Position(x=1, y=1),
            end=Position(x=size.width, y=size.height),
        )

    @property
    def width(self) -> int:
        return self.end.x - self.start.x + 1

    @property
    def height(self) -> int:
        return self.end.y - self.start.y + 1

    @property
    def block_count(self) -> int:
        return self.width * self.height

    def check_bounds(self, size: Size) -> None:
        """Verify the region is ordered and lies within the map.

        Raises:
            RegionOutOfBoundsError: If start > end on either axis, or either
                corner falls outside [1, size].
        """
        for axis, limit in (("x", size.width), ("y", size.height)):
            lo = getattr(self.start, axis)
            hi = getattr(self.end, axis)
            if lo < 1:
                raise RegionOutOfBoundsError(
                    f"Region start.{axis}={lo} is below 1"
                )
            if hi > limit:
                raise RegionOutOfBoundsError(
                    f"Region end.{axis}={hi} exceeds map size {limit}"
                )
            if lo > hi:
                raise RegionOutOfBoundsError(
                    f"Region start.{axis}={lo} is after end.{axis}={hi}"
                )

    def contains(self, position: Position) -> bool:
        return (
            self.start.x <= position.x <= self.end.x
            and self.start.y <= position.y <= self.end.y
        )

    def positions(self) -> Iterator[Position]:
        """Yield every position, x outer and y inner, both ascending."""
        for x in range(self.start.x, self.end.x + 1):
            for y in range(self.start.y, self.end.y + 1):
                yield Position(x=x, y=y)


class TerrainSample(BaseModel, frozen=True):
    """Shaped elevation and moisture at one block."""

    elevation: float
    moisture: float


class Block(BaseModel, frozen=True):
    """One generated cell of the world grid."""

    position: Position
    biome: Biome

    def to_dict(self) -> dict:
        """Serialize to the collection output shape."""
        return {
            "position": {"x": self.position.x, "y": self.position.y},
            "biome": {
                "code": self.biome.code,
                "name": self.biome.display_name,
                "rgb": list(self.biome.rgb),
            },
        }
