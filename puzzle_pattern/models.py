"""Data models for the puzzle cut pattern.

Points are integer valued and immutable. Every pipeline stage creates new
values instead of mutating existing ones.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Literal, Tuple

import numpy as np

from .config import PatternConfig

GridKey = Tuple[int, int]
Orientation = Literal["horizontal", "vertical"]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


@dataclass(frozen=True)
class Point:
    """An integer 2D coordinate."""

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> "Point":
        """Scale both components and round them back to integers."""
        return Point(round_half_away(self.x * factor), round_half_away(self.y * factor))

    def as_array(self) -> np.ndarray:
        """Return the point as a float numpy vector."""
        return np.array([self.x, self.y], dtype=float)

    def norm(self) -> float:
        """Euclidean length of the point seen as a vector."""
        return float(np.linalg.norm(self.as_array()))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


Grid = Dict[GridKey, Point]


@dataclass(frozen=True)
class Edge:
    """A lattice adjacency between two grid points.

    Attributes:
        start: Point at the lower lattice index.
        end: Point at the higher lattice index.
        orientation: Lattice direction the edge was derived from. After
            perturbation the geometry is no longer axis aligned, so this is
            the only reliable way to tell the two kinds apart.
    """

    start: Point
    end: Point
    orientation: Orientation

    def vector(self) -> Point:
        """Vector from start to end."""
        return self.end - self.start

    def is_border(self, width: int, height: int) -> bool:
        """Check whether the edge lies entirely on the canvas boundary."""
        return (
            (self.start.x == 0 and self.end.x == 0)
            or (self.start.x == width and self.end.x == width)
            or (self.start.y == 0 and self.end.y == 0)
            or (self.start.y == height and self.end.y == height)
        )


@dataclass(frozen=True)
class Curve:
    """A tongue: two cubic Bezier segments sharing the middle point.

    The second segment's first control point is the reflection of
    ``middle_control`` through ``middle``, which is what the SVG ``S``
    command produces.
    """

    start: Point
    start_control: Point
    middle: Point
    middle_control: Point
    end_control: Point
    end: Point

    def to_path_d(self) -> str:
        """Serialize the tongue as SVG path data."""
        return (
            f"M {self.start.x},{self.start.y} "
            f"C {self.start_control.x},{self.start_control.y} "
            f"{self.middle_control.x},{self.middle_control.y} "
            f"{self.middle.x},{self.middle.y} "
            f"S {self.end_control.x},{self.end_control.y} "
            f"{self.end.x},{self.end.y}"
        )


@dataclass(frozen=True)
class Pattern:
    """Everything the renderer needs to draw a cut pattern."""

    config: PatternConfig
    grid: Grid
    edges: List[Edge]  # All lattice edges, border included
    interior: List[Edge]  # Edges that carry a tongue
    curves: List[Curve]

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height
