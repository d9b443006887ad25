"""Tests for the scale resolver pass."""

from pathmin.engine.config import OptimizerConfig
from pathmin.engine.context import PathContext
from pathmin.engine.passes.p03_scale import apply_scale, resolve_scale, scale_path
from pathmin.svg.element import StyledElement
from tests.conftest import parse_commands


def _scaled(d: str, max_decimal_places: int = 2, element=None) -> PathContext:
    ctx = PathContext(
        raw=d,
        config=OptimizerConfig(max_decimal_places=max_decimal_places),
        element=element,
    )
    ctx.commands = parse_commands(d)
    scale_path(ctx)
    return ctx


def test_integer_path_keeps_scale_one():
    ctx = _scaled("M10 10C10 10 20 20 30 30")
    assert ctx.scale == 1
    assert not ctx.rescaled
    assert ctx.commands[1].operands == [10, 10, 20, 20, 30, 30]


def test_scale_from_max_precision():
    assert resolve_scale(parse_commands("M0.5 1.25L2 3"), 2) == 100


def test_scale_capped_by_budget():
    assert resolve_scale(parse_commands("M0.5 1.2345L2 3"), 2) == 100
    assert resolve_scale(parse_commands("M0.5 1.2345L2 3"), 0) == 1


def test_trailing_zeros_do_not_count():
    assert resolve_scale(parse_commands("M1.50 2.0"), 3) == 10


def test_coordinates_become_integers():
    ctx = _scaled("M0.5 1.25L2 3")
    assert ctx.scale == 100
    assert ctx.commands[0].operands == [50, 125]
    assert ctx.commands[1].operands == [200, 300]


def test_rounding_half_up():
    ctx = _scaled("M0.5 1.25L2 3", max_decimal_places=1)
    assert ctx.scale == 10
    assert ctx.commands[0].operands == [5, 13]


def test_scale_one_still_rounds():
    ctx = _scaled("M0.4 2.6", max_decimal_places=0)
    assert ctx.scale == 1
    assert ctx.commands[0].operands == [0, 3]


def test_relative_operands_do_not_accumulate_error():
    commands = parse_commands("M0 0l.4 0l.4 0l.4 0")
    apply_scale(commands, 1)
    # absolute x runs .4, .8, 1.2 → 0, 1, 1
    assert [c.operands[0] for c in commands[1:]] == [0, 1, 0]


def test_arc_flags_and_rotation_untouched():
    commands = parse_commands("M0 0a1.5 1.5 30 0 1 2.25 3")
    assert resolve_scale(commands, 3) == 100
    apply_scale(commands, 100)
    assert commands[1].operands == [150, 150, 30, 0, 1, 225, 300]


def test_element_gets_transform_and_stroke_width():
    parent = StyledElement(attributes={"stroke": "red", "stroke-width": "2"})
    element = StyledElement(parent=parent)
    _scaled("M0.5 1.25L2 3", element=element)
    assert element.get("transform") == "scale(.01)"
    assert element.get("stroke-width") == "200"


def test_unstroked_element_only_gets_transform():
    element = StyledElement(attributes={"fill": "blue"})
    _scaled("M0.5 1.25L2 3", element=element)
    assert element.get("transform") == "scale(.01)"
    assert not element.has("stroke-width")


def test_existing_transform_is_kept():
    element = StyledElement(attributes={"transform": "translate(1 1)"})
    _scaled("M0.5 0", element=element)
    assert element.get("transform") == "translate(1 1) scale(.1)"


def test_no_side_effects_without_rescale():
    element = StyledElement(attributes={"stroke": "red"})
    _scaled("M1 2L3 4", element=element)
    assert element.attributes == {"stroke": "red"}
