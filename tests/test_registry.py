from geogebra_tikz.primitives import InlineCoord, PointRef, RawCoord
from geogebra_tikz.registry import PointRegistry


def test_register_rounds_and_keeps_order():
    registry = PointRegistry()
    registry.register("B", 1.23456, 0.0)
    registry.register("A", -2.75, 2.1)

    assert [point.label for point in registry] == ["B", "A"]
    assert registry.get("B").coords == (1.235, 0.0)
    assert len(registry) == 2
    assert "A" in registry


def test_duplicate_label_is_ignored():
    registry = PointRegistry()
    first = registry.register("A", 0.0, 0.0)
    second = registry.register("A", 5.0, 5.0)

    assert first is not None
    assert second is None
    assert registry.get("A").coords == (0.0, 0.0)


def test_resolve_matches_within_tolerance():
    registry = PointRegistry(rounding=False)
    registry.register("A", 0.0, 0.0)

    assert registry.resolve("(0.0009,0)") == PointRef("A")
    assert registry.resolve("(0.0011,0)") == InlineCoord(0.0011, 0.0)


def test_resolve_rounds_before_matching():
    registry = PointRegistry()
    registry.register("A", -2.75, 2.1)

    assert registry.resolve("(-2.7501,2.1)") == PointRef("A")
    assert registry.resolve("(-4.8912,-2.06)") == InlineCoord(-4.891, -2.06)


def test_resolve_accepts_labels_and_passes_junk_through():
    registry = PointRegistry()
    registry.register("A", 1.0, 1.0)

    assert registry.resolve("(A)") == PointRef("A")
    assert registry.resolve("(Z)") == RawCoord("(Z)")
    assert registry.resolve("a,b") == RawCoord("(a,b)")


def test_match_returns_first_registered_point():
    registry = PointRegistry()
    registry.register("A", 1.0, 1.0)
    registry.register("B", 1.0, 1.0)

    assert registry.match(1.0, 1.0).label == "A"
    assert registry.match(9.0, 9.0) is None
