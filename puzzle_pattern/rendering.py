"""SVG rendering for cut patterns."""

import svgwrite  # type: ignore[import-untyped]

from .models import Pattern

# Checkerboard tile size and fills used in draft mode
TILE_SIZE = 10
TILE_COLORS = ("#f0f0f0", "#ffffff")

CUT_COLOR = "black"
CUT_WIDTH = 1
MARKER_COLOR = "red"
MARKER_RADIUS = 2
GRID_LINE_COLOR = "#6495ed"


def _add_checkerboard(dwg: svgwrite.Drawing, width: int, height: int) -> None:
    """Tile the canvas with alternating squares."""
    tiles = dwg.add(dwg.g(id="tiles", stroke="none"))
    for x in range(0, width, TILE_SIZE):
        for y in range(0, height, TILE_SIZE):
            color = TILE_COLORS[(x // TILE_SIZE + y // TILE_SIZE) % 2]
            tiles.add(dwg.rect(insert=(x, y), size=(TILE_SIZE, TILE_SIZE), fill=color))


def render_svg(pattern: Pattern, draft_mode: bool = False) -> str:
    """Render a pattern to an SVG document.

    Args:
        pattern: Generated pattern to draw.
        draft_mode: Also draw the checkerboard background, grid point markers
            and non-border grid edges.

    Returns:
        The serialized SVG document.
    """
    width, height = pattern.width, pattern.height

    dwg = svgwrite.Drawing(size=(width, height), viewBox=f"0 0 {width} {height}", debug=False)

    if draft_mode:
        _add_checkerboard(dwg, width, height)

    dwg.add(
        dwg.rect(
            id="border",
            insert=(0, 0),
            size=(width, height),
            fill="none",
            stroke=CUT_COLOR,
            stroke_width=CUT_WIDTH,
        )
    )

    tongues = dwg.add(dwg.g(id="tongues", fill="none", stroke=CUT_COLOR, stroke_width=CUT_WIDTH))
    for curve in pattern.curves:
        tongues.add(dwg.path(d=curve.to_path_d()))

    if draft_mode:
        markers = dwg.add(dwg.g(id="grid-points", fill=MARKER_COLOR))
        for key in sorted(pattern.grid):
            point = pattern.grid[key]
            markers.add(dwg.circle(center=(point.x, point.y), r=MARKER_RADIUS))

        lines = dwg.add(dwg.g(id="grid-edges", stroke=GRID_LINE_COLOR, stroke_width=CUT_WIDTH))
        for edge in pattern.interior:
            lines.add(dwg.line(start=edge.start.as_tuple(), end=edge.end.as_tuple()))

    return dwg.tostring()
