"""Grid construction and perturbation."""

import logging

from .models import Grid, Point
from .random_stream import RandomStream

logger = logging.getLogger(__name__)


def build_grid(nx: int, ny: int, pixels_per_cell: int) -> Grid:
    """Build an evenly spaced (nx+1) x (ny+1) lattice of points.

    Args:
        nx: Number of cells along x. Zero gives a single column of points.
        ny: Number of cells along y. Zero gives a single row of points.
        pixels_per_cell: Distance between neighbouring lattice points.

    Returns:
        Mapping from lattice index (ix, iy) to its point.

    Raises:
        ValueError: If a cell count is negative or the cell size is not positive.
    """
    if nx < 0 or ny < 0:
        raise ValueError(f"Cell counts must be non-negative, got {nx}x{ny}")
    if pixels_per_cell <= 0:
        raise ValueError(f"pixels_per_cell must be positive, got {pixels_per_cell}")

    grid: Grid = {}
    for ix in range(nx + 1):
        for iy in range(ny + 1):
            grid[(ix, iy)] = Point(ix * pixels_per_cell, iy * pixels_per_cell)

    logger.debug("Built %dx%d grid with %d points", nx, ny, len(grid))
    return grid


def snap_coordinate(value: int, radius: int, extent: int) -> int:
    """Pull a coordinate flush to the border when it is within radius of it.

    The lower border wins when both apply, which only happens on canvases
    narrower than twice the radius.
    """
    if value <= radius:
        return 0
    if value >= extent - radius:
        return extent
    return value


def perturb_grid(grid: Grid, radius: int, width: int, height: int, stream: RandomStream) -> Grid:
    """Jitter every grid point and snap near-border coordinates to the border.

    Keys are visited in sorted (ix, iy) order and each consumes exactly two
    draws from the stream, dx then dy, even when radius is zero.

    Args:
        grid: Grid to perturb. It is not modified.
        radius: Maximum offset per axis, also used as the snap distance.
        width: Canvas width.
        height: Canvas height.
        stream: Random stream to draw offsets from.

    Returns:
        A new grid with the same keys and perturbed points.

    Raises:
        ValueError: If radius is negative.
    """
    if radius < 0:
        raise ValueError(f"Perturbation radius must be non-negative, got {radius}")

    perturbed: Grid = {}
    for key in sorted(grid):
        point = grid[key]
        dx = stream.randint(-radius, radius)
        dy = stream.randint(-radius, radius)
        perturbed[key] = Point(point.x + dx, point.y + dy)

    snapped: Grid = {
        key: Point(snap_coordinate(p.x, radius, width), snap_coordinate(p.y, radius, height))
        for key, p in perturbed.items()
    }

    logger.debug("Perturbed %d points with radius %d", len(snapped), radius)
    return snapped
