"""Plain data objects and their JSON helpers."""

from csskit.objects.rectangle import Rectangle
from csskit.objects.serialization import from_json, get_json

__all__ = ["Rectangle", "get_json", "from_json"]
