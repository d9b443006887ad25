"""Pass registry — the optimizer is a fixed chain of passes registered by decorator.

Each pass module declares its slot in the chain:

    @path_pass(id="P04", stage=Stage.RELATIVE, dependencies=["P03"])
    def relative_conversion(ctx: PathContext) -> None:
        ...

Passes run in stage order. A pass may only depend on passes from earlier
stages, so the order is fixed by the stages alone and only has to be checked.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from pathmin.engine.context import PathContext

logger = logging.getLogger(__name__)


class Stage(enum.IntEnum):
    TOKENIZE = 0
    NORMALIZE = 1
    SCALE = 2
    RELATIVE = 3
    SIMPLIFY = 4
    SERIALIZE = 5


@dataclass
class PassSpec:
    id: str
    stage: Stage
    fn: Callable[["PathContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class PassRegistry:
    def __init__(self) -> None:
        self._passes: dict[str, PassSpec] = {}

    def register(self, spec: PassSpec) -> None:
        if spec.id in self._passes:
            raise ValueError(f"Duplicate pass ID: {spec.id}")
        self._passes[spec.id] = spec
        logger.debug("Registered pass %s (%s)", spec.id, spec.stage.name)

    def get(self, pass_id: str) -> PassSpec:
        return self._passes[pass_id]

    def resolve_order(self) -> list[PassSpec]:
        """Passes sorted by (stage, id), checked against their dependencies."""
        ordered = sorted(self._passes.values(), key=lambda s: (s.stage, s.id))
        done: set[str] = set()
        for spec in ordered:
            for dep in spec.dependencies:
                if dep not in self._passes:
                    raise ValueError(f"Pass {spec.id} depends on unknown pass {dep}")
                if dep not in done:
                    raise ValueError(
                        f"Pass {spec.id} ({spec.stage.name}) would run before its dependency {dep}"
                    )
            done.add(spec.id)
        return ordered

    @property
    def count(self) -> int:
        return len(self._passes)


_registry = PassRegistry()


def get_registry() -> PassRegistry:
    return _registry


def path_pass(
    *,
    id: str,
    stage: Stage,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Register the decorated function as pass ``id`` in the default registry."""

    def decorator(fn: Callable[["PathContext"], None]):
        _registry.register(
            PassSpec(
                id=id,
                stage=stage,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
