from geogebra_tikz.drawing import ExtractionContext
from geogebra_tikz.markup.points import extract_points
from geogebra_tikz.options import ConvertOptions


TRIANGLE_POINTS = r"""
\begin{scriptsize}
\draw [fill=rvwvcq] (-2.75,2.1) circle (2.5pt);
\draw[color=rvwvcq] (-2.6,2.5) node {$A$};
\draw [fill=rvwvcq] (-4.89,-2.06) circle (2.5pt);
\draw[color=rvwvcq] (-4.7,-1.7) node {$B$};
\draw [fill=rvwvcq] (1.23456,-1.5) circle (2.5pt);
\draw[color=rvwvcq] (1.4,-1.1) node {$C$};
\draw[color=qqwuqq] (-2.3,1.8) node {$37.5\textrm{\degre}$};
\end{scriptsize}
"""


def test_markers_pair_with_labels_in_order():
    ctx = ExtractionContext.create()
    points = extract_points(TRIANGLE_POINTS, ctx)

    assert [point.label for point in points] == ["A", "B", "C"]
    assert ctx.registry.get("A").coords == (-2.75, 2.1)
    assert ctx.registry.get("C").coords == (1.235, -1.5)
    assert ctx.warnings == []


def test_unrounded_registration_keeps_precision():
    ctx = ExtractionContext.create(ConvertOptions(round=False))
    extract_points(TRIANGLE_POINTS, ctx)

    assert ctx.registry.get("C").coords == (1.23456, -1.5)


def test_angle_values_are_not_point_labels():
    text = (
        "\\draw [fill=black] (0,0) circle (2.5pt);\n"
        "\\draw[color=qqwuqq] (0.3,0.3) node {$90\\textrm{\\degre}$};\n"
        "\\draw[color=black] (0.1,0.1) node {$O$};\n"
    )
    ctx = ExtractionContext.create()
    extract_points(text, ctx)

    assert [point.label for point in ctx.registry] == ["O"]


def test_surplus_markers_are_dropped():
    text = (
        "\\draw [fill=black] (0,0) circle (2.5pt);\n"
        "\\draw [fill=black] (1,1) circle (2.5pt);\n"
        "\\draw[color=black] (0.1,0.1) node {$P$};\n"
    )
    ctx = ExtractionContext.create()
    extract_points(text, ctx)

    assert [point.label for point in ctx.registry] == ["P"]
    assert ctx.registry.get("P").coords == (0.0, 0.0)


def test_coordinate_declarations_register_first():
    text = (
        "\\coordinate (Q) at (3,4);\n"
        "\\draw [fill=black] (0,0) circle (2.5pt);\n"
        "\\draw[color=black] (0.1,0.1) node {$Q$};\n"
    )
    ctx = ExtractionContext.create()
    extract_points(text, ctx)

    assert ctx.registry.get("Q").coords == (3.0, 4.0)
    assert len(ctx.warnings) == 1
    assert ctx.warnings[0].family == "points"
    assert "duplicate" in ctx.warnings[0].message


def test_markers_at_named_coordinates_carry_no_position():
    text = "\\draw[fill=black] (A) circle (1pt);\n"
    ctx = ExtractionContext.create()

    assert extract_points(text, ctx) == []
    assert ctx.warnings == []


def test_nan_marker_is_reported_and_skipped():
    text = "\\draw [fill=ududff] (NaN,NaN) circle (2.5pt);\n"
    ctx = ExtractionContext.create()

    assert extract_points(text, ctx) == []
    assert len(ctx.registry) == 0
    assert [warning.family for warning in ctx.warnings] == ["points"]
