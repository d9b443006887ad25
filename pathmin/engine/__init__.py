"""pathmin path-data optimization engine."""

from pathmin.engine.config import OptimizerConfig
from pathmin.engine.context import Command, PathContext
from pathmin.engine.errors import PathDataError
from pathmin.engine.pipeline import Pipeline, optimize, optimize_path_d
from pathmin.engine.registry import Stage, get_registry, path_pass

__all__ = [
    "path_pass",
    "Stage",
    "get_registry",
    "OptimizerConfig",
    "Command",
    "PathContext",
    "PathDataError",
    "Pipeline",
    "optimize",
    "optimize_path_d",
]
