import pytest

from geogebra_tikz.drawing import ExtractionContext
from geogebra_tikz.markup.shapes import (
    extract_angle_marks,
    extract_arcs,
    extract_circles,
    extract_ellipses,
    extract_sectors,
    extract_segments,
)
from geogebra_tikz.markup.strokes import line_style
from geogebra_tikz.primitives import InlineCoord, Length, PointRef, Rotation


def _context_with_a():
    ctx = ExtractionContext.create()
    ctx.registry.register("A", -2.75, 2.1)
    return ctx


@pytest.mark.parametrize(
    "options, expected",
    [
        (None, ""),
        ("[line width=2pt,color=rvwvcq]", ""),
        ("[line width=2pt,dash pattern=on 1pt off 1pt,color=ffqqqq]", "dashed"),
        ("[line width=2pt,dash pattern=on 1pt off 1pt on 1pt off 4pt]", "dash dot"),
        ("[dotted,line width=1pt]", "dotted"),
        ("[dash pattern=on 3pt off 3pt]", "dashed"),
        ("[dash dot]", "dash dot"),
    ],
)
def test_line_style_collapses_options(options, expected):
    assert line_style(options) == expected


def test_segments_resolve_endpoints_independently():
    ctx = _context_with_a()
    segments = extract_segments(
        r"\draw [line width=2pt,color=rvwvcq] (-2.75,2.1)-- (-4.89,-2.06);", ctx
    )

    assert len(segments) == 1
    assert segments[0].a == PointRef("A")
    assert segments[0].b == InlineCoord(-4.89, -2.06)
    assert segments[0].line_style == ""


def test_circles_skip_point_markers():
    ctx = _context_with_a()
    text = (
        "\\draw [line width=2pt,dash pattern=on 1pt off 1pt] (-2.75,2.1) circle (2.23606797749979cm);\n"
        "\\draw [fill=rvwvcq] (-2.75,2.1) circle (2.5pt);\n"
        "\\draw (A) circle (1.5);\n"
    )
    circles = extract_circles(text, ctx)

    assert [circle.radius for circle in circles] == [Length(2.236, "cm"), Length(1.5, "")]
    assert circles[0].center == PointRef("A")
    assert circles[0].line_style == "dashed"
    assert circles[1].center == PointRef("A")


def test_circle_with_bad_radius_is_reported():
    ctx = _context_with_a()
    circles = extract_circles(r"\draw [line width=2pt] (0,0) circle (r cm);", ctx)

    assert circles == []
    assert [warning.family for warning in ctx.warnings] == ["circles"]


def test_rotated_ellipse():
    ctx = ExtractionContext.create()
    text = (
        r"\draw [rotate around={26.56505117707799:(1.,2.)},line width=2pt] (1.,2.) "
        r"ellipse (2.8284271247461903cm and 1.7320508075688772cm);"
    )
    (ellipse,) = extract_ellipses(text, ctx)

    assert ellipse.center == InlineCoord(1.0, 2.0)
    assert ellipse.x_radius == Length(2.828, "cm")
    assert ellipse.y_radius == Length(1.732, "cm")
    assert ellipse.rotation == Rotation(26.565, InlineCoord(1.0, 2.0))
    assert ellipse.line_style == ""


def test_ellipse_with_one_radius_is_reported():
    ctx = ExtractionContext.create()
    assert extract_ellipses(r"\draw (0,0) ellipse (2cm);", ctx) == []
    assert ctx.warnings[0].family == "ellipses"


def test_arc_keeps_shift_and_rounds_angles():
    ctx = ExtractionContext.create()
    text = (
        r"\draw [shift={(-2.,1.)},line width=2pt,dotted]  plot[domain=0.:1.5707963267948966,variable=\t]"
        r"({1*2.5*cos(\t r)+0*2.5*sin(\t r)},{0*2.5*cos(\t r)+1*2.5*sin(\t r)});"
    )
    (arc,) = extract_arcs(text, ctx)

    assert arc.shift == (-2.0, 1.0)
    assert (arc.start_angle, arc.end_angle, arc.radius) == (0.0, 1.571, 2.5)
    assert arc.line_style == "dotted"


def test_sector_is_not_an_arc():
    ctx = ExtractionContext.create()
    text = (
        r"\draw [shift={(0.,0.)},line width=2pt,color=qqwuqq,fill=qqwuqq,fill opacity=0.1] (0,0) -- "
        r"plot[domain=0.:1.0471975511965976,variable=\t]({1*1.5*cos(\t r)+0*1.5*sin(\t r)},"
        r"{0*1.5*cos(\t r)+1*1.5*sin(\t r)}) -- cycle ;"
    )
    (sector,) = extract_sectors(text, ctx)

    assert extract_arcs(text, ctx) == []
    assert sector.shift == (0.0, 0.0)
    assert (sector.start_angle, sector.end_angle, sector.radius) == (0.0, 1.047, 1.5)


def test_angle_mark_center_resolves_to_point():
    ctx = _context_with_a()
    text = (
        r"\draw [shift={(-2.75,2.1)},line width=2pt,color=qqwuqq,fill=qqwuqq,fill opacity=0.1] "
        r"(0,0) -- (0.:0.6) arc (0.:37.5:0.6) -- cycle;"
    )
    (mark,) = extract_angle_marks(text, ctx)

    assert mark.center == PointRef("A")
    assert (mark.start_angle, mark.end_angle, mark.radius) == (0.0, 37.5, 0.6)
    assert extract_segments(text, ctx) == []
