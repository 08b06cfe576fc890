"""Tests for the Rectangle data holder."""
from __future__ import annotations

from csskit.objects import Rectangle


class TestRectangle:
    def test_fields(self) -> None:
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self) -> None:
        assert Rectangle(10, 20).area() == 200

    def test_area_follows_mutation(self) -> None:
        r = Rectangle(2, 3)
        r.width = 5
        assert r.area() == 15

    def test_zero_area(self) -> None:
        assert Rectangle(0, 7).area() == 0
