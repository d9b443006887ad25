"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathmin.engine.config import OptimizerConfig
from pathmin.engine.context import Command
from pathmin.engine.passes.p01_tokenize import normalize_path_text, tokenize
from pathmin.engine.passes.p02_normalize import normalize_commands


# Sample path data taken from common 24x24 outline icons

HOME_DOOR_D = "M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"

HOME_ROOF_D = (
    "M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10"
    "v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"
)

SMILE_D = "M8 14s1.5 2 4 2 4-2 4-2"

SQUARE_ABS_D = "M0 0L10 0L10 10L0 10Z"

CURVES_ABS_D = "M10 10C10 10 20 20 30 30C40 30 50 40 60 40S80 50 90 40Q100 30 110 40T130 40"

GEAR_D = (
    "M12.22 2h-.44a2 2 0 0 0-2 2v.18a2 2 0 0 1-1 1.73l-.43.25a2 2 0 0 1-2 0l-.15-.08"
    "a2 2 0 0 0-2.73.73l-.22.38a2 2 0 0 0 .73 2.73l.15.1a2 2 0 0 1 1 1.72v.51"
    "a2 2 0 0 1-1 1.74l-.15.09a2 2 0 0 0-.73 2.73l.22.38a2 2 0 0 0 2.73.73l.15-.08"
    "a2 2 0 0 1 2 0l.43.25a2 2 0 0 1 1 1.73V20a2 2 0 0 0 2 2h.44a2 2 0 0 0 2-2v-.18"
    "a2 2 0 0 1 1-1.73l.43-.25a2 2 0 0 1 2 0l.15.08a2 2 0 0 0 2.73-.73l.22-.39"
    "a2 2 0 0 0-.73-2.73l-.15-.08a2 2 0 0 1-1-1.74v-.5a2 2 0 0 1 1-1.74l.15-.09"
    "a2 2 0 0 0 .73-2.73l-.22-.38a2 2 0 0 0-2.73-.73l-.15.08a2 2 0 0 1-2 0l-.43-.25"
    "a2 2 0 0 1-1-1.73V4a2 2 0 0 0-2-2z"
)

ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
  <g>
    <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
    <path d="M0.5 1.25L2 3" transform="translate(1 1)"/>
  </g>
  <circle cx="12" cy="12" r="10"/>
</svg>'''


def parse_commands(d: str) -> list[Command]:
    """Tokenize and normalize ``d`` without scaling or conversion."""
    return normalize_commands(tokenize(normalize_path_text(d)))


@pytest.fixture
def default_config() -> OptimizerConfig:
    return OptimizerConfig()


@pytest.fixture
def dev_config() -> OptimizerConfig:
    return OptimizerConfig(devmode=True)


@pytest.fixture
def icon_svg() -> str:
    return ICON_SVG
