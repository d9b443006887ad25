"""FastAPI dependency injection."""

from __future__ import annotations

from pathmin.config import settings
from pathmin.engine.config import OptimizerConfig


def get_settings():
    return settings


def get_optimizer_config(
    max_decimal_places: int | None = None,
    devmode: bool | None = None,
) -> OptimizerConfig:
    """Default optimizer config from settings, with per-request overrides."""
    return OptimizerConfig(
        max_decimal_places=(
            settings.default_max_decimal_places if max_decimal_places is None else max_decimal_places
        ),
        devmode=settings.default_devmode if devmode is None else devmode,
    )
