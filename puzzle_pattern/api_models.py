"""Response models for the pattern API."""

from typing import List

from pydantic import BaseModel, Field

from .models import Curve, Pattern


class PointModel(BaseModel):
    """Model representing a point in 2D space."""

    x: int
    y: int


class CurveModel(BaseModel):
    """Model representing a tongue curve."""

    start: PointModel
    start_control: PointModel
    middle: PointModel
    middle_control: PointModel
    end_control: PointModel
    end: PointModel

    @classmethod
    def from_curve(cls, curve: Curve) -> "CurveModel":
        """Create from a generated curve."""
        return cls(
            start=PointModel(x=curve.start.x, y=curve.start.y),
            start_control=PointModel(x=curve.start_control.x, y=curve.start_control.y),
            middle=PointModel(x=curve.middle.x, y=curve.middle.y),
            middle_control=PointModel(x=curve.middle_control.x, y=curve.middle_control.y),
            end_control=PointModel(x=curve.end_control.x, y=curve.end_control.y),
            end=PointModel(x=curve.end.x, y=curve.end.y),
        )


class PatternResponse(BaseModel):
    """Response model describing a generated pattern."""

    width: int
    height: int
    seed: int
    point_count: int
    edge_count: int
    interior_edge_count: int
    curves: List[CurveModel] = Field(..., description="Tongue curves in generation order")

    @classmethod
    def from_pattern(cls, pattern: Pattern) -> "PatternResponse":
        """Summarize a generated pattern."""
        return cls(
            width=pattern.width,
            height=pattern.height,
            seed=pattern.config.seed,
            point_count=len(pattern.grid),
            edge_count=len(pattern.edges),
            interior_edge_count=len(pattern.interior),
            curves=[CurveModel.from_curve(curve) for curve in pattern.curves],
        )
