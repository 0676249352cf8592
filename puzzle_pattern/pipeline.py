"""Pattern generation pipeline.

Runs the stages in a fixed order with one random stream:

1. build the point grid,
2. perturb it (two draws per grid point),
3. derive the edges and drop the border ones,
4. build a tongue per interior edge (one draw per edge).
"""

import logging

from .config import PatternConfig
from .edges import derive_edges, interior_edges
from .grid import build_grid, perturb_grid
from .models import Pattern
from .random_stream import RandomStream
from .rendering import render_svg
from .tongues import synthesize_tongues

logger = logging.getLogger(__name__)


def generate_pattern(config: PatternConfig) -> Pattern:
    """Generate the geometry of a cut pattern.

    Args:
        config: Pattern parameters.

    Returns:
        The generated pattern. The same config always produces the same pattern.
    """
    if config.grid_perturb * 2 >= config.pixels_per_cell:
        logger.warning(
            "Perturbation radius %d is at least half the cell size %d, neighbouring points may collide",
            config.grid_perturb,
            config.pixels_per_cell,
        )

    stream = RandomStream(config.seed)

    grid = build_grid(config.pieces_x, config.pieces_y, config.pixels_per_cell)
    grid = perturb_grid(grid, config.grid_perturb, config.width, config.height, stream)
    perturb_draws = stream.draws

    edges = derive_edges(grid)
    interior = interior_edges(edges, config.width, config.height)
    curves = synthesize_tongues(interior, stream, config.pixels_per_cell)

    logger.info(
        "Generated %dx%d pattern (seed=%d): %d points, %d edges, %d tongues, %d draws (%d perturbation)",
        config.pieces_x,
        config.pieces_y,
        config.seed,
        len(grid),
        len(edges),
        len(curves),
        stream.draws,
        perturb_draws,
    )
    return Pattern(config=config, grid=grid, edges=edges, interior=interior, curves=curves)


def render_pattern(config: PatternConfig) -> str:
    """Generate a pattern and render it to an SVG document."""
    pattern = generate_pattern(config)
    return render_svg(pattern, draft_mode=config.draft_mode)
