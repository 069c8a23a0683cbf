"""Tests for the decimal coordinate type."""

from __future__ import annotations

from decimal import Decimal

import pytest

from decimal_geometry import Coordinate, ValidationError


class TestConstruction:
    def test_defaults_to_origin(self) -> None:
        c = Coordinate()
        assert c.x == Decimal(0)
        assert c.y == Decimal(0)

    def test_values_stored_as_decimal(self) -> None:
        c = Coordinate(3, "4.25")
        assert isinstance(c.x, Decimal)
        assert c.x == Decimal("3")
        assert c.y == Decimal("4.25")

    def test_float_uses_shortest_repr(self) -> None:
        c = Coordinate(0.1, 0.2)
        assert c.x == Decimal("0.1")
        assert c.y == Decimal("0.2")
        assert c.x + c.y == Decimal("0.3")

    def test_assignment_is_coerced(self) -> None:
        c = Coordinate()
        c.x = 2.5
        c.y = "-7"
        assert c == Coordinate(Decimal("2.5"), Decimal("-7"))

    def test_rejects_bool(self) -> None:
        with pytest.raises(ValidationError, match="x must be a number") as exc:
            Coordinate(True, 0)
        assert exc.value.field == "x"

    def test_rejects_nan(self) -> None:
        with pytest.raises(ValidationError, match="finite"):
            Coordinate(0, float("nan"))

    def test_rejects_assignment_of_garbage(self) -> None:
        c = Coordinate(1, 1)
        with pytest.raises(ValidationError):
            c.y = "abc"
        assert c.y == Decimal(1)

    def test_copy_is_independent(self) -> None:
        c = Coordinate(1, 2)
        dup = c.copy()
        dup.x = 10
        assert c.x == Decimal(1)
        assert dup == Coordinate(10, 2)


class TestText:
    def test_str(self) -> None:
        assert str(Coordinate(1.5, -2)) == "1.5,-2"

    def test_str_never_uses_exponent(self) -> None:
        assert str(Coordinate("1E+3", "1E-3")) == "1000,0.001"


class TestDistance:
    def test_three_four_five(self) -> None:
        assert Coordinate(0, 0).distance_to(Coordinate(3, 4)) == 5

    def test_zero_for_same_coordinate(self) -> None:
        a = Coordinate("12.5", "-3.75")
        assert Coordinate.distance_between(a, a) == 0

    def test_symmetric(self) -> None:
        a = Coordinate(1, 2)
        b = Coordinate(-4, 9)
        assert Coordinate.distance_between(a, b) == Coordinate.distance_between(b, a)

    def test_returns_decimal(self) -> None:
        d = Coordinate(0, 0).distance_to(Coordinate(1, 1))
        assert isinstance(d, Decimal)
        assert float(d) == pytest.approx(2**0.5)

    def test_huge_magnitude_does_not_overflow(self) -> None:
        d = Coordinate(Decimal("1e200"), 0).distance_to(Coordinate())
        assert d == Decimal("1e200")

    def test_tiny_separation_is_not_zero(self) -> None:
        d = Coordinate(Decimal("1e-200"), 0).distance_to(Coordinate())
        assert d > 0
        assert d == Decimal("1e-200")

    def test_huge_diagonal(self) -> None:
        d = Coordinate.distance_between(Coordinate(), Coordinate(Decimal("3e400"), Decimal("4e400")))
        assert d == Decimal("5e400")


class TestAngle:
    def test_east_is_zero(self) -> None:
        assert Coordinate(0, 0).angle_to(Coordinate(1, 0)) == 0

    def test_north_is_ninety(self) -> None:
        assert Coordinate(0, 0).angle_to(Coordinate(0, 1)) == 90

    def test_west_is_positive_180(self) -> None:
        assert Coordinate(0, 0).angle_to(Coordinate(-1, 0)) == 180

    def test_west_with_negative_zero_delta(self) -> None:
        assert Coordinate(0, 0).angle_to(Coordinate(-1, "-0")) == 180

    def test_south_is_negative_ninety(self) -> None:
        assert Coordinate(0, 0).angle_to(Coordinate(0, -1)) == -90

    def test_diagonal(self) -> None:
        angle = Coordinate.angle_between(Coordinate(1, 1), Coordinate(2, 2))
        assert float(angle) == pytest.approx(45.0)

    def test_same_coordinate_is_zero(self) -> None:
        a = Coordinate(5, 5)
        assert Coordinate.angle_between(a, a) == 0

    def test_tiny_separation_keeps_direction(self) -> None:
        origin = Coordinate()
        assert origin.angle_to(Coordinate(0, Decimal("1e-400"))) == 90
        assert origin.angle_to(Coordinate(Decimal("-1e-400"), 0)) == 180
        assert origin.angle_to(Coordinate(0, Decimal("-1e-400"))) == -90

    def test_huge_separation_keeps_direction(self) -> None:
        angle = Coordinate().angle_to(Coordinate(Decimal("1e400"), Decimal("1e400")))
        assert float(angle) == pytest.approx(45.0)


class TestToPoint:
    def test_default_tuple(self) -> None:
        assert Coordinate("1.5", -2).to_point() == (1.5, -2.0)

    def test_factory(self) -> None:
        point = Coordinate(3, 4).to_point(lambda x, y: {"X": x, "Y": y})
        assert point == {"X": 3.0, "Y": 4.0}
