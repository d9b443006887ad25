"""P04 — Relative Converter.

Walk the commands with a virtual pen and rewrite every absolute command except
the first one relative to the pen. The absolute spelling is kept so the
serializer can fall back to it when it is shorter.
"""

from __future__ import annotations

from pathmin.engine.context import Command, Cursor, PathContext
from pathmin.engine.registry import Stage, path_pass
from pathmin.engine.render import render_command


def advance(cursor: Cursor, cmd: Command) -> None:
    """Move the pen to the end of ``cmd``."""
    kind = cmd.kind
    if kind == "z":
        cursor.close()
        return

    if cmd.is_absolute:
        if kind == "h":
            cursor.x = cmd.operands[0]
        elif kind == "v":
            cursor.y = cmd.operands[0]
        else:
            cursor.x, cursor.y = cmd.end
    else:
        dx, dy = cmd.end
        cursor.x += dx
        cursor.y += dy

    if kind == "m":
        cursor.mark_start()


def make_relative(cmd: Command, cursor: Cursor) -> None:
    ops = cmd.operands
    kind = cmd.kind
    if kind == "h":
        ops[0] -= cursor.x
    elif kind == "v":
        ops[0] -= cursor.y
    elif kind == "a":
        ops[5] -= cursor.x
        ops[6] -= cursor.y
    else:
        for i in range(0, len(ops), 2):
            ops[i] -= cursor.x
            ops[i + 1] -= cursor.y
    cmd.code = kind


def to_relative(commands: list[Command], devmode: bool = False) -> None:
    cursor = Cursor()
    for i, cmd in enumerate(commands):
        if cmd.kind != "z":
            cmd.original_text = render_command(cmd, devmode)
            if cmd.is_absolute and i > 0:
                make_relative(cmd, cursor)
        advance(cursor, cmd)


def trace_positions(commands: list[Command]) -> list[tuple[float, float]]:
    """Absolute pen position after each command, replayed from (0, 0)."""
    cursor = Cursor()
    positions: list[tuple[float, float]] = []
    for cmd in commands:
        advance(cursor, cmd)
        positions.append((cursor.x, cursor.y))
    return positions


@path_pass(
    id="P04",
    stage=Stage.RELATIVE,
    dependencies=["P03"],
    description="Convert absolute commands to relative form",
)
def relative_conversion(ctx: PathContext) -> None:
    if not ctx.config.convert_to_relative:
        return
    to_relative(ctx.commands, ctx.config.devmode)
