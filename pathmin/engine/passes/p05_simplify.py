"""P05 — Geometric Simplifier.

Pattern rewrites over the atomic, relative command list. Each rule runs once,
in order; later rules rely on the shapes earlier rules leave behind. Only
lowercase (relative) commands are rewritten.

A following s/t takes its first control point from the command before it, so
a rewrite that changes what the next command reflects is skipped.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from pathmin.engine.context import Command, PathContext
from pathmin.engine.registry import Stage, path_pass

logger = logging.getLogger(__name__)

_CUBICS = ("c", "s")
_QUADRATICS = ("q", "t")


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def _is_orphan_smooth(commands: list[Command], i: int) -> bool:
    cmd = commands[i]
    return cmd.code == "s" and i > 0 and commands[i - 1].kind not in _CUBICS


def as_cubic(commands: list[Command], i: int) -> list[float] | None:
    """Explicit cubic operands of commands[i], or None if it is not one."""
    cmd = commands[i]
    if cmd.code == "c":
        return cmd.operands
    if _is_orphan_smooth(commands, i):
        return [0.0, 0.0, *cmd.operands]
    return None


def reflects_cursor(cmd: Command | None, follower: str) -> bool:
    """Would a following ``follower`` (s or t) use the current point as its first control?"""
    if cmd is None:
        return True
    ops = cmd.operands
    if follower == "s":
        if cmd.kind not in _CUBICS:
            return True
        return ops[-4] == ops[-2] and ops[-3] == ops[-1]
    if follower == "t":
        if cmd.kind not in _QUADRATICS:
            return True
        return cmd.kind == "q" and ops[0] == ops[2] and ops[1] == ops[3]
    return True


def _follower(commands: list[Command], i: int) -> str | None:
    if i + 1 < len(commands) and commands[i + 1].kind in ("s", "t"):
        return commands[i + 1].kind
    return None


def can_flatten(commands: list[Command], i: int) -> bool:
    """commands[i] may become a line-type command without changing its follower."""
    follower = _follower(commands, i)
    return follower is None or reflects_cursor(commands[i], follower)


def can_drop(commands: list[Command], i: int) -> bool:
    """commands[i] may be removed without changing its follower."""
    follower = _follower(commands, i)
    if follower is None:
        return True
    previous = commands[i - 1] if i > 0 else None
    return reflects_cursor(commands[i], follower) and reflects_cursor(previous, follower)


def _on_chord(x1: float, y1: float, x2: float, y2: float) -> bool:
    """(x1, y1) lies on the segment from the origin to (x2, y2)."""
    if x2 == 0 and y2 == 0:
        return False
    if x1 * y2 - y1 * x2 != 0:
        return False
    dot = x1 * x2 + y1 * y2
    return 0 <= dot <= x2 * x2 + y2 * y2


def _monotonic(values: list[float]) -> bool:
    rising = all(a <= b for a, b in zip(values, values[1:]))
    falling = all(a >= b for a, b in zip(values, values[1:]))
    return rising or falling


def _reshape(cmd: Command, code: str, operands: list[float]) -> None:
    """Same segment, different spelling: the original text stays a valid fallback."""
    cmd.code = code
    cmd.operands = operands


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def collapse_straight_cubics(commands: list[Command]) -> list[Command]:
    """Rule 1: zero-tangent cubic → line; zero-length one → removed."""
    result = list(commands)
    i = 0
    while i < len(result):
        ops = as_cubic(result, i)
        if ops is not None and ops[0] == 0 and ops[1] == 0:
            x1, y1, x2, y2 = ops[2:6]
            if ((x1 == 0 and y1 == 0) or _on_chord(x1, y1, x2, y2)) and can_flatten(result, i):
                _reshape(result[i], "l", [x2, y2])
            elif x2 == 0 and y2 == 0 and can_drop(result, i):
                del result[i]
                continue
        i += 1
    return result


def collapse_axis_cubics(commands: list[Command]) -> list[Command]:
    """Rule 2: cubic moving along one axis only → h/v."""
    result = list(commands)
    for i in range(len(result)):
        ops = as_cubic(result, i)
        if ops is None or not can_flatten(result, i):
            continue
        xs = [0.0, ops[0], ops[2], ops[4]]
        ys = [0.0, ops[1], ops[3], ops[5]]
        if all(x == 0 for x in xs) and _monotonic(ys):
            _reshape(result[i], "v", [ops[5]])
        elif all(y == 0 for y in ys) and _monotonic(xs):
            _reshape(result[i], "h", [ops[4]])
    return result


def expand_orphan_smooth(commands: list[Command]) -> list[Command]:
    """Rule 3: s with no curve before it → c with its implicit first control spelled out."""
    result = list(commands)
    for i in range(len(result)):
        if _is_orphan_smooth(result, i):
            _reshape(result[i], "c", [0.0, 0.0, *result[i].operands])
    return result


def contract_to_smooth(commands: list[Command]) -> list[Command]:
    """Rule 4: c with a zero first control after l/h/v → s."""
    result = list(commands)
    for i in range(1, len(result)):
        cmd = result[i]
        if (
            cmd.code == "c"
            and cmd.operands[0] == 0
            and cmd.operands[1] == 0
            and result[i - 1].code in ("l", "h", "v")
        ):
            _reshape(cmd, "s", cmd.operands[2:])
    return result


def lines_to_axis(commands: list[Command]) -> list[Command]:
    """Rule 5: l with a zero component → h/v."""
    result = list(commands)
    for cmd in result:
        if cmd.code != "l":
            continue
        x, y = cmd.operands
        if y == 0:
            _reshape(cmd, "h", [x])
        elif x == 0:
            _reshape(cmd, "v", [y])
    return result


def _sign_class(value: float) -> int | None:
    if math.isnan(value):
        return None
    if value == 0:
        return 0
    return 1 if value > 0 else -1


def _same_direction(a: float, b: float) -> bool:
    """A zero joins either direction; otherwise the signs must match."""
    sa, sb = _sign_class(a), _sign_class(b)
    if sa is None or sb is None:
        return False
    return sa == 0 or sb == 0 or sa == sb


def _is_zero_axis(cmd: Command) -> bool:
    return cmd.code in ("h", "v") and cmd.operands[0] == 0


def merge_axis_runs(commands: list[Command]) -> list[Command]:
    """Rule 6: consecutive same-sign h (or v) summed; opposite signs never mix.

    Zero-length h/v in between draw nothing and do not break a run, unless a
    following s/t would reflect a different control point without them.
    """
    result: list[Command] = []
    for i, cmd in enumerate(commands):
        previous = result[-1] if result else None
        if _is_zero_axis(cmd):
            follower = _follower(commands, i)
            if follower is None or reflects_cursor(previous, follower):
                continue
        if (
            previous is not None
            and cmd.code in ("h", "v")
            and previous.code == cmd.code
            and _same_direction(previous.operands[0], cmd.operands[0])
        ):
            result[-1] = Command(code=cmd.code, operands=[previous.operands[0] + cmd.operands[0]])
            continue
        result.append(cmd)
    return result


def drop_zero_axis(commands: list[Command]) -> list[Command]:
    """Rule 7: h0 / v0 draw nothing."""
    result = list(commands)
    i = 0
    while i < len(result):
        cmd = result[i]
        if cmd.code in ("h", "v") and cmd.operands[0] == 0 and can_drop(result, i):
            del result[i]
            continue
        i += 1
    return result


def clean_moves(commands: list[Command]) -> list[Command]:
    """Rule 8: z after a bare move, trailing moves and runs of moves."""
    result: list[Command] = []
    for cmd in commands:
        if cmd.kind == "z" and result and result[-1].kind == "m":
            continue
        result.append(cmd)

    while result and result[-1].kind == "m":
        result.pop()

    merged: list[Command] = []
    for cmd in result:
        previous = merged[-1] if merged else None
        if previous is not None and cmd.kind == "m" and previous.kind == "m":
            if cmd.is_absolute:
                merged[-1] = Command(code=cmd.code, operands=list(cmd.operands))
            else:
                merged[-1] = Command(
                    code=previous.code,
                    operands=[
                        previous.operands[0] + cmd.operands[0],
                        previous.operands[1] + cmd.operands[1],
                    ],
                )
            continue
        merged.append(cmd)
    return merged


RULES: list[tuple[str, Callable[[list[Command]], list[Command]]]] = [
    ("straight_cubics", collapse_straight_cubics),
    ("axis_cubics", collapse_axis_cubics),
    ("orphan_smooth", expand_orphan_smooth),
    ("contract_smooth", contract_to_smooth),
    ("lines_to_axis", lines_to_axis),
    ("merge_axis_runs", merge_axis_runs),
    ("drop_zero_axis", drop_zero_axis),
    ("clean_moves", clean_moves),
]


def simplify(commands: list[Command]) -> list[Command]:
    for name, rule in RULES:
        before = len(commands)
        commands = rule(commands)
        if len(commands) != before:
            logger.debug("Rule %s: %d → %d commands", name, before, len(commands))
    return commands


@path_pass(
    id="P05",
    stage=Stage.SIMPLIFY,
    dependencies=["P04"],
    description="Collapse degenerate segments and merge redundant commands",
)
def simplify_path(ctx: PathContext) -> None:
    ctx.commands = simplify(ctx.commands)
