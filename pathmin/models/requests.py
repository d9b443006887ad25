"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ElementPayload(BaseModel):
    attributes: dict[str, str] = Field(default_factory=dict, description="Attributes of the owning <path>")
    ancestors: list[dict[str, str]] = Field(
        default_factory=list,
        description="Attributes of each ancestor, nearest first",
    )


class OptimizePathRequest(BaseModel):
    d: str = Field(default="", description="Raw path data")
    max_decimal_places: int | None = Field(default=None, ge=0, description="Precision budget")
    devmode: bool | None = Field(default=None, description="One command per line")
    element: ElementPayload | None = Field(
        default=None,
        description="Owning element; receives transform / stroke-width side effects",
    )
    verify: bool = Field(default=False, description="Report the max deviation from the input")


class OptimizeSvgRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    max_decimal_places: int | None = Field(default=None, ge=0)
    devmode: bool | None = None
