"""CSS selector model and fluent builder."""

from csskit.selector.builder import SelectorBuilder
from csskit.selector.model import Combinator, Renderable, Selector, combine

__all__ = ["Combinator", "Renderable", "Selector", "SelectorBuilder", "combine"]
