"""Optimizer configuration — controls which rewrites run and how output is rendered."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OptimizerConfig:
    """Immutable per-run settings passed into the pipeline entry point."""

    # Upper bound on fraction digits kept when resolving the integer scale
    max_decimal_places: int = 2
    # Newline before every command letter, no whitespace compaction
    devmode: bool = False

    # Feature switches
    convert_to_relative: bool = True
    keep_smaller_command: bool = True
    remove_repeated_letters: bool = True

    # Reject unparsable operands instead of letting NaN through
    strict_numbers: bool = False

    def __post_init__(self) -> None:
        if self.max_decimal_places < 0:
            raise ValueError("max_decimal_places must be >= 0")
