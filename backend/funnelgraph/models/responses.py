"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class SegmentPath(BaseModel):
    index: int
    d: str
    color: str | list[str]
    area: float = 0.0
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    centroid: tuple[float, float] = (0.0, 0.0)
    winding: int = 0


class FunnelResponse(BaseModel):
    direction: str
    width: float
    height: float
    labels: list[str] = Field(default_factory=list)
    sub_labels: list[str] = Field(default_factory=list)
    values: list[float] = Field(default_factory=list)
    percentages: list[int] = Field(default_factory=list)
    composition: list[list[int]] | None = None
    main_axis: list[float] = Field(default_factory=list)
    cross_axis: list[list[float]] = Field(default_factory=list)
    paths: list[SegmentPath] = Field(default_factory=list)
    processing_time_ms: float = 0.0
