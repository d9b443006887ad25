"""P06 — Serializer.

Fold close commands into the command before them, render each command in
its shorter spelling (new relative form or the kept original) and drop
repeated c/l letters where the grammar allows it.
"""

from __future__ import annotations

from pathmin.engine.config import OptimizerConfig
from pathmin.engine.context import Command, PathContext
from pathmin.engine.registry import Stage, path_pass
from pathmin.engine.render import render_command

_COMPACTABLE = ("c", "l")


def fold_closes(commands: list[Command]) -> list[Command]:
    result: list[Command] = []
    for cmd in commands:
        if cmd.kind == "z":
            if result:
                result[-1].closes_subpath = True
            continue
        result.append(cmd)
    return result


def choose_text(cmd: Command, config: OptimizerConfig) -> str:
    """Best of two: ties go to the newly computed spelling."""
    new = render_command(cmd, config.devmode)
    if config.keep_smaller_command and cmd.original_text is not None:
        if len(cmd.original_text) < len(new):
            return cmd.original_text
    return new


def serialize(commands: list[Command], config: OptimizerConfig) -> str:
    compact = config.remove_repeated_letters and not config.devmode
    parts: list[str] = []
    previous_letter = ""
    previous_closed = False

    for cmd in fold_closes(commands):
        text = choose_text(cmd, config)
        letter = text[0]
        if (
            compact
            and letter in _COMPACTABLE
            and letter == previous_letter
            and not previous_closed
            and text[1:].startswith("-")
        ):
            text = text[1:]
        previous_letter = letter
        previous_closed = cmd.closes_subpath

        if config.devmode:
            # one command per line
            parts.append("\n" + text + ("\nz" if cmd.closes_subpath else ""))
            continue
        parts.append(text + ("z" if cmd.closes_subpath else ""))

    return "".join(parts)


@path_pass(
    id="P06",
    stage=Stage.SERIALIZE,
    dependencies=["P05"],
    description="Render the shortest textual form",
)
def serialize_path(ctx: PathContext) -> None:
    ctx.output = serialize(ctx.commands, ctx.config)
