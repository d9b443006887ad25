"""POST /api/optimize and /api/optimize-svg — path-data optimization."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from lxml import etree

from pathmin.dependencies import get_optimizer_config
from pathmin.engine.errors import PathDataError
from pathmin.engine.pipeline import has_finite_operands, optimize
from pathmin.models.requests import OptimizePathRequest, OptimizeSvgRequest
from pathmin.models.responses import OptimizePathResponse, OptimizeSvgResponse
from pathmin.svg.document import optimize_svg_document
from pathmin.svg.element import StyledElement
from pathmin.utils.geometry import max_deviation

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/optimize", response_model=OptimizePathResponse)
def optimize_path(request: OptimizePathRequest) -> OptimizePathResponse:
    config = get_optimizer_config(request.max_decimal_places, request.devmode)
    element = None
    if request.element is not None:
        element = StyledElement.from_chain(request.element.attributes, request.element.ancestors)

    try:
        ctx = optimize(request.d, config, element)
    except PathDataError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    response = OptimizePathResponse(
        d=ctx.output,
        scale=ctx.scale,
        rescaled=ctx.rescaled,
        original_length=len(request.d),
        optimized_length=len(ctx.output),
        attributes=dict(element.attributes) if element is not None else {},
    )
    if request.verify and has_finite_operands(ctx):
        try:
            response.max_deviation = max_deviation(request.d, ctx.output, ctx.scale)
        except ValueError as e:
            logger.warning("Deviation check skipped: %s", e)
    return response


@router.post("/optimize-svg", response_model=OptimizeSvgResponse)
def optimize_svg(request: OptimizeSvgRequest) -> OptimizeSvgResponse:
    config = get_optimizer_config(request.max_decimal_places, request.devmode)
    try:
        svg, count = optimize_svg_document(request.svg, config)
    except PathDataError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except etree.XMLSyntaxError as e:
        logger.warning("Rejected SVG: %s", e)
        raise HTTPException(status_code=422, detail=f"invalid SVG: {e}") from e
    return OptimizeSvgResponse(svg=svg, paths_optimized=count)
