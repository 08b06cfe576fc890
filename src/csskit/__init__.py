"""csskit - fluent CSS selector builder with small JSON helpers."""

from csskit.config import BuilderConfig
from csskit.errors import (
    CsskitError,
    DuplicateFragmentError,
    FrozenSelectorError,
    InvalidCombinatorError,
    SelectorError,
    SerializationError,
)
from csskit.objects import Rectangle, from_json, get_json
from csskit.selector import Combinator, Renderable, Selector, SelectorBuilder, combine

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # selector
    "Combinator",
    "Renderable",
    "Selector",
    "SelectorBuilder",
    "combine",
    # config
    "BuilderConfig",
    # objects
    "Rectangle",
    "get_json",
    "from_json",
    # errors
    "CsskitError",
    "SelectorError",
    "DuplicateFragmentError",
    "InvalidCombinatorError",
    "FrozenSelectorError",
    "SerializationError",
]
