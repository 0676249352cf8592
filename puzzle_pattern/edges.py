"""Edge derivation from a point grid."""

import logging
from typing import List

from .models import Edge, Grid

logger = logging.getLogger(__name__)


def derive_edges(grid: Grid) -> List[Edge]:
    """Derive the lattice adjacency edges of a grid.

    Horizontal edges come first, ordered by row (iy) and then column. Vertical
    edges follow, ordered by column (ix) and then row. Tongue flip coins are
    drawn in this order, so it must stay stable.

    Args:
        grid: Grid to connect.

    Returns:
        All horizontal then all vertical edges.
    """
    horizontal = []
    vertical = []
    for ix, iy in grid:
        right = (ix + 1, iy)
        if right in grid:
            horizontal.append(((iy, ix), Edge(grid[(ix, iy)], grid[right], "horizontal")))
        below = (ix, iy + 1)
        if below in grid:
            vertical.append(((ix, iy), Edge(grid[(ix, iy)], grid[below], "vertical")))

    horizontal.sort(key=lambda item: item[0])
    vertical.sort(key=lambda item: item[0])

    edges = [edge for _, edge in horizontal] + [edge for _, edge in vertical]
    logger.debug("Derived %d horizontal and %d vertical edges", len(horizontal), len(vertical))
    return edges


def interior_edges(edges: List[Edge], width: int, height: int) -> List[Edge]:
    """Drop edges lying on the canvas border, keeping the original order."""
    return [edge for edge in edges if not edge.is_border(width, height)]
