"""Tests for get_json / from_json."""
from __future__ import annotations

import json

import pytest

from csskit.errors import SerializationError
from csskit.objects import Rectangle, from_json, get_json


class Circle:
    def __init__(self, radius: float) -> None:
        self.radius = radius
        self._cache = None

    def diameter(self) -> float:
        return self.radius * 2


class Strict:
    def __init__(self) -> None:
        raise AssertionError("__init__ must not run")


# ---------------------------------------------------------------------------
# get_json
# ---------------------------------------------------------------------------


class TestGetJson:
    def test_list(self) -> None:
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_tuple(self) -> None:
        assert get_json((1, 2)) == "[1,2]"

    def test_dict_preserves_key_order(self) -> None:
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self) -> None:
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_skips_private(self) -> None:
        assert get_json(Circle(5)) == '{"radius":5}'

    def test_nested_objects(self) -> None:
        payload = {"shapes": [Rectangle(1, 2), Circle(3)]}
        assert json.loads(get_json(payload)) == {
            "shapes": [{"width": 1, "height": 2}, {"radius": 3}]
        }

    def test_strings_are_quoted(self) -> None:
        assert get_json({"name": "box"}) == '{"name":"box"}'

    def test_empty(self) -> None:
        assert get_json({}) == "{}"
        assert get_json([]) == "[]"

    @pytest.mark.parametrize("value", [42, "text", None, Rectangle])
    def test_unsupported(self, value: object) -> None:
        with pytest.raises(SerializationError):
            get_json(value)

    def test_circular_reference(self) -> None:
        data: list[object] = []
        data.append(data)
        with pytest.raises(SerializationError):
            get_json(data)


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_circle(self) -> None:
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.diameter() == 20

    def test_rectangle_methods_available(self) -> None:
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.area() == 200

    def test_init_not_called(self) -> None:
        obj = from_json(Strict, '{"a":1}')
        assert obj.a == 1  # type: ignore[attr-defined]

    def test_whitespace_tolerated(self) -> None:
        r = from_json(Rectangle, '{ "width" : 3 , "height" : 4 }')
        assert r.area() == 12

    def test_get_json_output_roundtrips_through_class(self) -> None:
        r = from_json(Rectangle, get_json(Rectangle(6, 7)))
        assert r == Rectangle(6, 7)

    def test_malformed(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            from_json(Circle, '{"radius":')
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_non_object(self) -> None:
        with pytest.raises(SerializationError):
            from_json(Circle, "[1,2,3]")

    @pytest.mark.parametrize("key", ["__class__", "__dict__"])
    def test_reserved_attribute_key(self, key: str) -> None:
        with pytest.raises(SerializationError) as exc_info:
            from_json(Rectangle, f'{{"{key}": 1}}')
        assert isinstance(exc_info.value.__cause__, TypeError)
