"""Text rendering of single commands, shared by the relative converter and the serializer."""

from __future__ import annotations

from pathmin.engine.context import Command
from pathmin.utils.numbers import format_number


def render_operands(operands: list[float], devmode: bool = False) -> str:
    text = " ".join(format_number(v) for v in operands)
    if devmode:
        return text
    return text.replace(" -", "-")


def render_command(cmd: Command, devmode: bool = False) -> str:
    """code + operands, without the close flag."""
    return cmd.code + render_operands(cmd.operands, devmode)
