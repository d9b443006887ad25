"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    passes_registered: int = 0


class OptimizePathResponse(BaseModel):
    d: str
    scale: int = 1
    rescaled: bool = False
    original_length: int = 0
    optimized_length: int = 0
    attributes: dict[str, str] = Field(default_factory=dict)
    max_deviation: float | None = None


class OptimizeSvgResponse(BaseModel):
    svg: str
    paths_optimized: int = 0
