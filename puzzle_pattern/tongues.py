"""Tongue synthesis for interior puzzle edges.

Each interior edge gets one tongue: a curve that leaves the edge start, bulges
across the edge midpoint along an approximate perpendicular, and returns to
the edge end. A coin drawn from the shared random stream decides which side
the bulge goes to.
"""

import logging
from typing import List

from .models import Curve, Edge, Point, round_half_away
from .random_stream import RandomStream

logger = logging.getLogger(__name__)

# Bulge distance relative to the cell size
MIDDLE_SCALE_RATIO = 0.18

# Control point offsets relative to the edge vector
END_CONTROL_RATIO = 0.8
MIDDLE_CONTROL_RATIO = 0.4


class DegenerateEdgeError(ValueError):
    """Raised when an edge has zero length and no perpendicular exists."""


def perpendicular(vector: Point) -> Point:
    """Approximate integer perpendicular of an edge vector.

    The component along the dominant axis is fixed to 1 and the other one is
    rounded, so the result is only roughly perpendicular for skewed edges.

    Raises:
        DegenerateEdgeError: If the vector is zero.
    """
    if vector.y != 0:
        return Point(1, round_half_away(-vector.x / vector.y))
    if vector.x != 0:
        return Point(round_half_away(-vector.y / vector.x), 1)
    raise DegenerateEdgeError("Cannot build a tongue on a zero-length edge")


def make_tongue(edge: Edge, flip: bool, cell_size: int) -> Curve:
    """Build the tongue curve for a single edge.

    Args:
        edge: Interior edge to anchor the tongue to.
        flip: True keeps the perpendicular direction, False inverts it.
        cell_size: Grid cell size in pixels, sets the bulge depth.

    Returns:
        The tongue curve. Its start and end are the edge endpoints.
    """
    vector = edge.vector()
    perp = perpendicular(vector)
    normal = perp.as_array() / perp.norm() * (1 if flip else -1)

    middle_scale = round_half_away(MIDDLE_SCALE_RATIO * cell_size)
    offset = Point(round_half_away(middle_scale * normal[0]), round_half_away(middle_scale * normal[1]))
    middle = (edge.start + edge.end).scaled(0.5) + offset

    return Curve(
        start=edge.start,
        start_control=edge.start + vector.scaled(END_CONTROL_RATIO),
        middle=middle,
        middle_control=middle - vector.scaled(MIDDLE_CONTROL_RATIO),
        end_control=edge.end - vector.scaled(END_CONTROL_RATIO),
        end=edge.end,
    )


def synthesize_tongues(edges: List[Edge], stream: RandomStream, cell_size: int) -> List[Curve]:
    """Build one tongue per edge, drawing one flip coin per edge in order.

    Args:
        edges: Interior edges. Border edges must already be filtered out.
        stream: Random stream to draw flip coins from.
        cell_size: Grid cell size in pixels.

    Returns:
        Tongue curves in the same order as the edges.
    """
    curves = []
    for edge in edges:
        flip = stream.coin()
        curves.append(make_tongue(edge, flip, cell_size))

    logger.debug("Synthesized %d tongues", len(curves))
    return curves
