"""Main FastAPI application module for the puzzle pattern service."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from puzzle_pattern.api_models import PatternResponse
from puzzle_pattern.config import PatternConfig, settings
from puzzle_pattern.logging_utils import configure_logging
from puzzle_pattern.models import Pattern
from puzzle_pattern.pipeline import generate_pattern
from puzzle_pattern.rendering import render_svg
from puzzle_pattern.tongues import DegenerateEdgeError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Apply the configured log level when the server starts."""
    configure_logging(settings.LOG_LEVEL)
    yield


# Initialize FastAPI app
app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def build_config(
    draft_mode: Optional[bool] = None,
    pieces_x: Optional[int] = None,
    pieces_y: Optional[int] = None,
    pixels_per_cell: Optional[int] = None,
    seed: Optional[int] = None,
    grid_perturb: Optional[int] = None,
) -> PatternConfig:
    """Merge request overrides into the configured defaults.

    Raises:
        HTTPException: If the merged configuration is invalid.
    """
    defaults = settings.pattern_config()
    overrides = {
        "draft_mode": draft_mode,
        "pieces_x": pieces_x,
        "pieces_y": pieces_y,
        "pixels_per_cell": pixels_per_cell,
        "seed": seed,
        "grid_perturb": grid_perturb,
    }
    values = defaults.model_dump()
    values.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return PatternConfig(**values)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def _generate(config: PatternConfig) -> Pattern:
    try:
        return generate_pattern(config)
    except DegenerateEdgeError as e:
        logger.warning("Pattern generation failed for %s: %s", config, e)
        raise HTTPException(status_code=422, detail=str(e)) from e


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_STR}/pattern.svg")
def get_pattern_svg(
    draft_mode: Optional[bool] = None,
    pieces_x: Optional[int] = Query(default=None, ge=0),
    pieces_y: Optional[int] = Query(default=None, ge=0),
    pixels_per_cell: Optional[int] = Query(default=None, gt=0),
    seed: Optional[int] = None,
    grid_perturb: Optional[int] = Query(default=None, ge=0),
) -> Response:
    """Render a cut pattern as an SVG document.

    Args:
        draft_mode: Overlay grid markers, grid lines and background tiles.
        pieces_x: Number of grid cells along x.
        pieces_y: Number of grid cells along y.
        pixels_per_cell: Size of a grid cell in pixels.
        seed: Seed of the random stream.
        grid_perturb: Perturbation and snap radius in pixels.

    Returns:
        Response: The SVG document.

    Raises:
        HTTPException: If the parameters cannot produce a pattern.
    """
    config = build_config(draft_mode, pieces_x, pieces_y, pixels_per_cell, seed, grid_perturb)
    pattern = _generate(config)
    return Response(content=render_svg(pattern, draft_mode=config.draft_mode), media_type="image/svg+xml")


@app.get(f"{settings.API_V1_STR}/pattern", response_model=PatternResponse)
def get_pattern(
    pieces_x: Optional[int] = Query(default=None, ge=0),
    pieces_y: Optional[int] = Query(default=None, ge=0),
    pixels_per_cell: Optional[int] = Query(default=None, gt=0),
    seed: Optional[int] = None,
    grid_perturb: Optional[int] = Query(default=None, ge=0),
) -> PatternResponse:
    """Describe a cut pattern's geometry.

    Returns:
        PatternResponse: Canvas size, element counts and tongue curves.
    """
    config = build_config(None, pieces_x, pieces_y, pixels_per_cell, seed, grid_perturb)
    return PatternResponse.from_pattern(_generate(config))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
