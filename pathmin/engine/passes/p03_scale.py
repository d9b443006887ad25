"""P03 — Scale Resolver.

Pick one power-of-ten factor for the whole path from the operand precision
(capped by max_decimal_places) and move every coordinate into integer space.
When the caller handed over the owning element, the inverse scale goes onto
its transform and its stroke width is compensated.

Relative operands are rounded against the exact absolute position, so every
point ends up within 0.5 of its scaled position no matter how many relative
steps led to it.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal

from pathmin.engine.context import Command, PathContext
from pathmin.engine.registry import Stage, path_pass
from pathmin.utils.numbers import decimal_places, round_decimal, round_half_up, to_decimal

logger = logging.getLogger(__name__)

# rx, ry, x, y; rotation and the two flags are not coordinates
_ARC_COORDINATES = (0, 1, 5, 6)
_X, _Y = 0, 1


def coordinate_indices(cmd: Command) -> range | tuple[int, ...]:
    if cmd.kind == "a":
        return _ARC_COORDINATES
    return range(len(cmd.operands))


def coordinate_axis(kind: str, index: int) -> int | None:
    """Axis an operand moves along, or None for lengths (arc radii)."""
    if kind == "h":
        return _X
    if kind == "v":
        return _Y
    if kind == "a":
        return {5: _X, 6: _Y}.get(index)
    return index % 2


def resolve_scale(commands: list[Command], max_decimal_places: int) -> int:
    digits = 0
    for cmd in commands:
        for i in coordinate_indices(cmd):
            digits = max(digits, min(max_decimal_places, decimal_places(cmd.operands[i])))
    return 10**digits


class _Pen:
    """Exact and rounded pen positions, both in scaled space."""

    def __init__(self) -> None:
        self.exact = [Decimal(0), Decimal(0)]
        self.rounded = [Decimal(0), Decimal(0)]
        self.start_exact = [Decimal(0), Decimal(0)]
        self.start_rounded = [Decimal(0), Decimal(0)]

    def close(self) -> None:
        self.exact = list(self.start_exact)
        self.rounded = list(self.start_rounded)

    def mark_start(self) -> None:
        self.start_exact = list(self.exact)
        self.start_rounded = list(self.rounded)


def _end_indices(cmd: Command) -> dict[int, int]:
    """Operand index of the end point on each axis it moves."""
    kind = cmd.kind
    if kind == "h":
        return {_X: 0}
    if kind == "v":
        return {_Y: 0}
    n = len(cmd.operands)
    return {_X: n - 2, _Y: n - 1}


def apply_scale(commands: list[Command], scale: int) -> None:
    """Replace coordinates by round(value * scale); a scale of 1 still rounds to integers."""
    pen = _Pen()
    for cmd in commands:
        kind = cmd.kind
        if kind == "z":
            pen.close()
            continue

        indices = coordinate_indices(cmd)
        if not all(math.isfinite(cmd.operands[i]) for i in indices):
            # NaN/inf corrupt this command anyway; keep the pen where it is
            for i in indices:
                cmd.operands[i] = round_half_up(cmd.operands[i], scale)
            continue

        relative = not cmd.is_absolute
        exact: dict[int, Decimal] = {}
        for i in indices:
            value = to_decimal(cmd.operands[i]) * scale
            exact[i] = value
            axis = coordinate_axis(kind, i)
            if relative and axis is not None:
                rounded = round_decimal(pen.exact[axis] + value) - pen.rounded[axis]
            else:
                rounded = round_decimal(value)
            cmd.operands[i] = float(rounded)

        for axis, i in _end_indices(cmd).items():
            if relative:
                pen.exact[axis] += exact[i]
                pen.rounded[axis] += Decimal(int(cmd.operands[i]))
            else:
                pen.exact[axis] = exact[i]
                pen.rounded[axis] = Decimal(int(cmd.operands[i]))

        if kind == "m":
            pen.mark_start()


@path_pass(
    id="P03",
    stage=Stage.SCALE,
    dependencies=["P02"],
    description="Resolve integer scale and rescale coordinates",
)
def scale_path(ctx: PathContext) -> None:
    ctx.scale = resolve_scale(ctx.commands, ctx.config.max_decimal_places)
    apply_scale(ctx.commands, ctx.scale)

    if ctx.rescaled:
        logger.debug("Rescaled path by %d", ctx.scale)
        if ctx.element is not None:
            from pathmin.svg.element import apply_scale_attributes

            apply_scale_attributes(ctx.element, ctx.scale)
