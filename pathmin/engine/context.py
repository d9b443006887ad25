"""PathContext — the single mutable state object flowing through all passes.

Token-level results → PathContext.tokens
Command-level results → PathContext.commands (rewritten in place by each pass)
Caller-facing results → PathContext.scale / rescaled / output
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pathmin.engine.config import OptimizerConfig

if TYPE_CHECKING:
    from pathmin.svg.element import PathElement


# Operand count of one atomic segment, keyed by lowercase command code.
ARITY: dict[str, int] = {
    "m": 2,
    "l": 2,
    "t": 2,
    "h": 1,
    "v": 1,
    "s": 4,
    "q": 4,
    "c": 6,
    "a": 7,
    "z": 0,
}

COMMAND_CODES = frozenset(ARITY) | frozenset(c.upper() for c in ARITY)


@dataclass
class Token:
    """One command-letter occurrence and its raw operand text."""

    code: str
    text: str
    operands: list[float] = field(default_factory=list)


@dataclass
class Command:
    """One atomic drawing directive."""

    code: str
    operands: list[float] = field(default_factory=list)
    # Folded-in close flag, set by the serializer
    closes_subpath: bool = False
    # Absolute rendering kept for the best-of-two comparison; None once a
    # rewrite merged this command with others
    original_text: str | None = None

    @property
    def kind(self) -> str:
        return self.code.lower()

    @property
    def is_absolute(self) -> bool:
        return self.code.isupper()

    @property
    def end(self) -> tuple[float, float]:
        """Last operand pair as (x, y); h/v contribute on one axis only."""
        kind = self.kind
        if kind == "z" or not self.operands:
            return (0.0, 0.0)
        if kind == "h":
            return (self.operands[0], 0.0)
        if kind == "v":
            return (0.0, self.operands[0])
        return (self.operands[-2], self.operands[-1])


@dataclass
class Cursor:
    """Virtual pen used while walking a command list."""

    x: float = 0.0
    y: float = 0.0
    start_x: float = 0.0
    start_y: float = 0.0

    def close(self) -> None:
        self.x, self.y = self.start_x, self.start_y

    def mark_start(self) -> None:
        self.start_x, self.start_y = self.x, self.y


@dataclass
class PathContext:
    """Shared state for one optimization run."""

    # Raw d attribute as received
    raw: str = ""
    config: OptimizerConfig = field(default_factory=OptimizerConfig)
    # Owning element for scale side effects (optional)
    element: PathElement | None = None

    # Normalized text and tokens (P01)
    normalized: str = ""
    tokens: list[Token] = field(default_factory=list)
    # Atomic commands (P02 onward)
    commands: list[Command] = field(default_factory=list)

    # Scale resolution (P03)
    scale: int = 1

    # Serialized result (P06)
    output: str = ""

    # --- Pipeline metadata ---
    completed_passes: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)
    timings_ms: dict[str, float] = field(default_factory=dict)

    @property
    def rescaled(self) -> bool:
        return self.scale > 1

    @property
    def inverse_scale(self) -> float:
        return 1.0 / self.scale
