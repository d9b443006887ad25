"""Pipeline orchestrator — runs passes in dependency order."""

from __future__ import annotations

import importlib
import logging
import math
import pkgutil
import time
from typing import TYPE_CHECKING

from pathmin.engine.config import OptimizerConfig
from pathmin.engine.context import PathContext
from pathmin.engine.registry import PassRegistry, get_registry

if TYPE_CHECKING:
    from pathmin.svg.element import PathElement

logger = logging.getLogger(__name__)


def register_passes() -> None:
    """Import all pass modules so @path_pass decorators fire."""
    package = importlib.import_module("pathmin.engine.passes")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"pathmin.engine.passes.{module_name}")


class Pipeline:
    """Orchestrates the optimization passes."""

    def __init__(self, registry: PassRegistry | None = None) -> None:
        if registry is None:
            register_passes()
            registry = get_registry()
        self.registry = registry

    def run(self, ctx: PathContext) -> PathContext:
        """Run every registered pass on the given context.

        A failing pass is recorded in ``ctx.errors`` and re-raised; the
        remaining passes are not run.
        """
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        logger.info("Pipeline: %d passes queued", len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
                raise
            ctx.completed_passes.append(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            ctx.timings_ms[spec.id] = elapsed
            logger.debug("  %s completed in %.2fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.debug(
            "Pipeline complete: %d passes in %.1fms, %d → %d chars (scale %d)",
            len(ctx.completed_passes),
            total,
            len(ctx.raw or ""),
            len(ctx.output),
            ctx.scale,
        )
        return ctx


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline over the default registry."""
    return Pipeline()


def has_finite_operands(ctx: PathContext) -> bool:
    return all(math.isfinite(v) for cmd in ctx.commands for v in cmd.operands)


def _log_deviation(ctx: PathContext) -> None:
    from pathmin.utils.geometry import max_deviation

    try:
        deviation = max_deviation(ctx.raw, ctx.output, ctx.scale)
    except ValueError as e:
        logger.debug("Max deviation unavailable: %s", e)
        return
    logger.debug("Max deviation from input: %.4f", deviation)


def optimize(
    d: str | None,
    config: OptimizerConfig | None = None,
    element: PathElement | None = None,
) -> PathContext:
    """Optimize one path-data string, returning the full run context."""
    ctx = PathContext(raw=d or "", config=config or OptimizerConfig(), element=element)
    create_pipeline().run(ctx)

    # NaN and infinite operands cannot be sampled
    if (
        ctx.config.devmode
        and ctx.output
        and logger.isEnabledFor(logging.DEBUG)
        and has_finite_operands(ctx)
    ):
        _log_deviation(ctx)
    return ctx


def optimize_path_d(
    d: str | None,
    config: OptimizerConfig | None = None,
    element: PathElement | None = None,
) -> str:
    """Rewrite ``d`` into a shorter, geometrically equivalent path-data string."""
    return optimize(d, config, element).output
