"""Tests for the document walker: inheritance, transforms, background heuristic."""

import pytest

from svgshapes.engine.config import ParseOptions
from svgshapes.models.shape import Affine, Color, StrokeCap, StrokeJoin
from svgshapes.svg.parser import parse_document, parse_svg
from tests.conftest import BACKGROUND_SVG, CLASS_STYLE_SVG, SMILEY_SVG, TRANSFORM_SVG, USE_SVG


def test_inherited_stroke_style(smiley_svg):
    shapes = parse_svg(smiley_svg)
    assert len(shapes) == 4
    for shape in shapes:
        assert shape.fill is None
        assert shape.stroke == Color(0, 0, 0)
        assert shape.stroke_width == 2.0
        assert shape.stroke_cap is StrokeCap.ROUND
        assert shape.stroke_join is StrokeJoin.ROUND
        assert shape.paints_stroke
        assert not shape.paints_fill


def test_document_order_preserved():
    shapes = parse_svg(SMILEY_SVG)
    assert [round(s.bounds.xmin, 6) for s in shapes[:3]] == [2.0, 7.0, 15.0]


def test_transform_composed_but_not_baked():
    [shape] = parse_svg(TRANSFORM_SVG)
    assert shape.transform == Affine(2, 0, 0, 2, 100, 50)
    assert shape.commands[0].values == [0, 0, 10, 0, 10, 20, 0, 20]
    assert tuple(shape.bounds) == pytest.approx((100, 50, 120, 90))
    assert shape.fill == Color(0, 255, 0)


def test_rotated_bounds_are_envelope():
    svg = '<svg><rect x="0" y="0" width="10" height="10" transform="rotate(45)"/></svg>'
    [shape] = parse_svg(svg)
    half_diag = 10 / 2 ** 0.5
    assert tuple(shape.bounds) == pytest.approx((-half_diag, 0, half_diag, 2 * half_diag))


def test_class_attribute_and_inline_precedence():
    shapes = parse_svg(CLASS_STYLE_SVG)
    assert [s.stroke for s in shapes] == [Color(0xAA, 0, 0), Color(0, 255, 0), Color(0, 0, 255)]
    assert all(s.stroke_width == 4.0 for s in shapes)
    assert all(s.fill is None for s in shapes)


def test_style_does_not_leak_between_siblings():
    svg = (
        '<svg><g fill="#FF0000"><rect width="1" height="1" fill="#0000FF"/>'
        '<rect width="1" height="1"/></g><rect width="1" height="1"/></svg>'
    )
    shapes = parse_svg(svg)
    assert [s.fill for s in shapes] == [Color(0, 0, 255), Color(255, 0, 0), None]


def test_defs_and_use_are_walked():
    shapes = parse_svg(USE_SVG)
    assert len(shapes) == 3
    tile, first, second = shapes
    assert tile.fill is None
    assert tuple(first.bounds) == pytest.approx((20, 30, 30, 40))
    assert tuple(second.bounds) == pytest.approx((50, 50, 60, 60))
    assert first.fill == Color(0x33, 0x66, 0x99)


# ---------------------------------------------------------------------------
# Background-rectangle heuristic
# ---------------------------------------------------------------------------

def test_background_rect_made_transparent(background_svg):
    background, circle = parse_svg(background_svg)
    assert background.fill is None
    assert background.stroke is None
    assert background.stroke_width == 0.0
    assert circle.fill == Color(255, 0, 0)
    assert circle.stroke == Color(0, 0, 0)
    assert circle.stroke_width == 3.0


def test_background_rect_keeps_explicit_fill():
    svg = BACKGROUND_SVG.replace('height="100"/>', 'height="100" fill="#112233"/>')
    background = parse_svg(svg)[0]
    assert background.fill == Color(0x11, 0x22, 0x33)
    assert background.stroke is None


def test_background_rect_keeps_explicit_stroke_in_style():
    svg = BACKGROUND_SVG.replace('height="100"/>', 'height="100" style="stroke:#00FF00"/>')
    background = parse_svg(svg)[0]
    assert background.fill is None
    assert background.stroke == Color(0, 255, 0)
    assert background.stroke_width == 3.0


def test_background_uses_viewbox_when_size_missing():
    svg = (
        '<svg viewBox="0 0 64 32" fill="#FFFFFF">'
        '<rect x="0" y="0" width="64.02" height="32"/></svg>'
    )
    assert parse_svg(svg)[0].fill is None


def test_partial_rect_is_not_background():
    svg = '<svg width="100" height="100" fill="#FFFFFF"><rect x="0" y="0" width="50" height="100"/></svg>'
    assert parse_svg(svg)[0].fill == Color(255, 255, 255)


def test_no_heuristic_without_canvas_size():
    svg = '<svg fill="#FFFFFF"><rect x="0" y="0" width="0.0001" height="0.0001"/></svg>'
    assert parse_svg(svg)[0].fill == Color(255, 255, 255)


# ---------------------------------------------------------------------------
# Diagnostics and limits
# ---------------------------------------------------------------------------

def test_empty_drawable_reported_when_verbose():
    svg = '<svg><path d=""/><rect width="0" height="5"/></svg>'
    result = parse_document(svg)
    assert result.shapes == []
    assert len(result.warnings) == 2

    quiet = parse_document(svg, ParseOptions(verbose_logging=False))
    assert quiet.diagnostics == []


def test_unsupported_elements_are_silent():
    svg = '<svg><text x="1">hi</text><image href="a.png"/><g><circle r="1"/></g></svg>'
    result = parse_document(svg)
    assert len(result.shapes) == 1
    assert result.diagnostics == []


def test_depth_limit_stops_descent_with_one_warning():
    svg = (
        '<svg><rect width="1" height="1"/>'
        '<g><g><g><g><rect width="1" height="1"/></g></g></g></g></svg>'
    )
    result = parse_document(svg, ParseOptions(max_depth=3))
    assert len(result.shapes) == 1
    assert len(result.warnings) == 1
    assert result.warnings[0].element_path == "/svg[1]/g[1]/g[1]/g[1]"
