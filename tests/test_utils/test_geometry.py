"""Tests for geometric equivalence checks."""

import math

import pytest

from pathmin.engine.config import OptimizerConfig
from pathmin.engine.pipeline import optimize
from pathmin.utils.geometry import max_deviation, sample_segments
from tests.conftest import CURVES_ABS_D, GEAR_D, HOME_DOOR_D, HOME_ROOF_D, SMILE_D, SQUARE_ABS_D


def test_sample_segments_skips_moves():
    polylines = sample_segments("M0 0L10 0M20 20L20 30", samples_per_segment=5)
    assert len(polylines) == 2
    assert polylines[0].shape == (5, 2)
    assert polylines[1][-1].tolist() == [20.0, 30.0]


def test_sample_segments_scale():
    polylines = sample_segments("M0 0L100 0", samples_per_segment=3, scale=100)
    assert polylines[0][-1].tolist() == [1.0, 0.0]


def test_identical_paths():
    assert max_deviation(SQUARE_ABS_D, SQUARE_ABS_D) == pytest.approx(0.0, abs=1e-9)


def test_relative_spelling_matches():
    assert max_deviation("M0 0L10 0L10 10", "M0 0h10v10") == pytest.approx(0.0, abs=1e-9)


def test_scaled_spelling_matches():
    assert max_deviation("M0 0L10 0", "M0 0h1000", scale=100) == pytest.approx(0.0, abs=1e-9)


def test_offset_line():
    assert max_deviation("M0 0L10 0", "M0 1L10 1") == pytest.approx(1.0)


def test_move_only_paths():
    assert max_deviation("M0 0", "M5 5") == 0.0
    assert math.isinf(max_deviation("M0 0L1 1", "M0 0"))


@pytest.mark.parametrize("d", [SQUARE_ABS_D, CURVES_ABS_D, HOME_DOOR_D, SMILE_D, GEAR_D])
def test_optimized_paths_draw_the_same(d):
    ctx = optimize(d)
    assert max_deviation(d, ctx.output, ctx.scale) < 1e-6


def test_rounded_path_stays_close():
    # .709 and 2.582 lose their third decimal
    ctx = optimize(HOME_ROOF_D, OptimizerConfig(max_decimal_places=2))
    assert ctx.scale == 100
    assert max_deviation(HOME_ROOF_D, ctx.output, ctx.scale) < 0.02


def test_zero_length_arc_cannot_be_sampled():
    with pytest.raises(ValueError, match="cannot sample"):
        max_deviation("M0 0L10 0A5 5 0 0 1 10 0", "M0 0h10")
