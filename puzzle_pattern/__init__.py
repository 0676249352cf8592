"""Puzzle pattern - procedural jigsaw cut pattern generator.

This package builds a perturbed point grid, derives the edges between
neighbouring points, adds an interlocking tongue curve to every interior edge
and renders the result as an SVG document.
"""

from .config import PatternConfig
from .edges import derive_edges, interior_edges
from .grid import build_grid, perturb_grid, snap_coordinate
from .models import Curve, Edge, Grid, GridKey, Pattern, Point, round_half_away
from .pipeline import generate_pattern, render_pattern
from .random_stream import RandomStream
from .rendering import render_svg
from .tongues import DegenerateEdgeError, make_tongue, perpendicular, synthesize_tongues

__all__ = [
    # Models
    "Point",
    "Edge",
    "Curve",
    "Grid",
    "GridKey",
    "Pattern",
    "PatternConfig",
    "RandomStream",
    "round_half_away",
    # Grid
    "build_grid",
    "perturb_grid",
    "snap_coordinate",
    # Edges
    "derive_edges",
    "interior_edges",
    # Tongues
    "DegenerateEdgeError",
    "perpendicular",
    "make_tongue",
    "synthesize_tongues",
    # Pipeline
    "generate_pattern",
    "render_pattern",
    "render_svg",
]
