"""Tests for the tokenizer pass."""

import math

import pytest

from pathmin.engine.context import PathContext
from pathmin.engine.config import OptimizerConfig
from pathmin.engine.errors import PathDataError
from pathmin.engine.passes.p01_tokenize import normalize_path_text, split_fields, tokenize, tokenize_path


def test_commas_become_spaces():
    assert normalize_path_text("M10,10L20,30") == "M10 10L20 30"


def test_glued_decimals_are_split():
    assert normalize_path_text("M1.5.5") == "M1.5 .5"
    assert normalize_path_text("l.5.5.5 1") == "l.5 .5 .5 1"


def test_whitespace_before_letters_and_minus_removed():
    assert normalize_path_text("  M 10 10  L 20 -5  z ") == "M 10 10L 20-5z"


def test_split_fields_on_signs():
    assert split_fields("10-5") == ["10", "-5"]
    assert split_fields("-1-2 3") == ["-1", "-2", "3"]


def test_split_fields_keeps_exponent_sign():
    assert split_fields("1e-5 2E+3-4") == ["1e-5", "2E+3", "-4"]


def test_tokenize_one_token_per_letter():
    tokens = tokenize(normalize_path_text("M10 10C10 10 20 20 30 30z"))
    assert [t.code for t in tokens] == ["M", "C", "z"]
    assert tokens[0].operands == [10.0, 10.0]
    assert tokens[1].operands == [10.0, 10.0, 20.0, 20.0, 30.0, 30.0]
    assert tokens[2].operands == []


def test_exponent_is_not_a_command():
    tokens = tokenize("M1e2 0")
    assert len(tokens) == 1
    assert tokens[0].operands == [100.0, 0.0]


def test_empty_input():
    assert tokenize("") == []
    ctx = PathContext(raw="   ")
    tokenize_path(ctx)
    assert ctx.tokens == []


def test_unknown_command_rejected():
    with pytest.raises(PathDataError, match="unknown path command"):
        tokenize("M0 0X5 5")


@pytest.mark.parametrize("d", ["M0 0 1 e", "M0 0 E 5 5", "M0 0 1-e"])
def test_stray_exponent_marker_rejected(d):
    with pytest.raises(PathDataError, match="unknown path command"):
        tokenize(normalize_path_text(d))


def test_text_before_first_command_rejected():
    with pytest.raises(PathDataError):
        tokenize("10 10L5 5")


def test_malformed_operand_becomes_nan():
    tokens = tokenize("M1..2 3")
    assert math.isnan(tokens[0].operands[0])
    assert tokens[0].operands[1] == 3.0


def test_malformed_operand_strict():
    ctx = PathContext(raw="M1..2 3", config=OptimizerConfig(strict_numbers=True))
    with pytest.raises(PathDataError, match="malformed number"):
        tokenize_path(ctx)
