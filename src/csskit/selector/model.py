r"""Selector model: the compound Selector, Combinator tokens, and combine().

A compound selector renders its fragments in a fixed order:

    element#id.class[attr]:pseudo-class::pseudo-element
              \----/\----/\----------/
              may repeat

A combined selector is the eager result of joining two renderables with a
combinator; it only carries the resolved string.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

from csskit.errors import (
    DuplicateFragmentError,
    FrozenSelectorError,
    InvalidCombinatorError,
)

__all__ = ["Combinator", "Renderable", "Selector", "combine"]

logger = logging.getLogger(__name__)


class Combinator(StrEnum):
    """Structural relationship between two compound selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


class Renderable(Protocol):
    """Anything that can produce a selector string."""

    def render(self) -> str: ...


@dataclass
class Selector:
    """One compound selector, or the resolved string of a combined one."""

    element: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_elements: list[str] = field(default_factory=list)
    resolved: str | None = None
    allow_multiple_pseudo_elements: bool = field(default=False, repr=False)

    @property
    def is_combined(self) -> bool:
        return self.resolved is not None

    @property
    def is_empty(self) -> bool:
        """True for a compound selector with no fragments."""
        return not self.is_combined and not (
            self.element is not None
            or self.id is not None
            or self.classes
            or self.attributes
            or self.pseudo_classes
            or self.pseudo_elements
        )

    # --- mutators -------------------------------------------------------------

    def _ensure_mutable(self) -> None:
        if self.resolved is not None:
            raise FrozenSelectorError(self.resolved)

    def set_element(self, name: str) -> None:
        self._ensure_mutable()
        if self.element is not None:
            raise DuplicateFragmentError("element", self.element, name)
        self.element = name

    def set_id(self, name: str) -> None:
        self._ensure_mutable()
        if self.id is not None:
            raise DuplicateFragmentError("id", self.id, name)
        self.id = name

    def add_class(self, name: str) -> None:
        self._ensure_mutable()
        self.classes.append(name)

    def add_attribute(self, body: str) -> None:
        self._ensure_mutable()
        self.attributes.append(body)

    def add_pseudo_class(self, name: str) -> None:
        self._ensure_mutable()
        self.pseudo_classes.append(name)

    def add_pseudo_element(self, name: str) -> None:
        self._ensure_mutable()
        if self.pseudo_elements and not self.allow_multiple_pseudo_elements:
            raise DuplicateFragmentError(
                "pseudo-element", self.pseudo_elements[0], name
            )
        self.pseudo_elements.append(name)

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the canonical selector string.

        Fragment order is fixed (element, id, classes, attributes,
        pseudo-classes, pseudo-elements) whatever order they were added in.
        """
        if self.resolved is not None:
            return self.resolved
        parts: list[str] = []
        if self.element is not None:
            parts.append(self.element)
        if self.id is not None:
            parts.append(f"#{self.id}")
        parts.extend(f".{name}" for name in self.classes)
        parts.extend(f"[{body}]" for body in self.attributes)
        parts.extend(f":{name}" for name in self.pseudo_classes)
        parts.extend(f"::{name}" for name in self.pseudo_elements)
        return "".join(parts)

    def stringify(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()


def combine(
    left: Renderable, combinator: Combinator | str, right: Renderable
) -> Selector:
    """Join two renderables into a new combined Selector.

    The result renders as ``"<left> <combinator> <right>"`` with exactly one
    space on each side of the token, including the descendant combinator.
    Neither operand is modified.
    """
    try:
        token = Combinator(combinator)
    except ValueError as exc:
        raise InvalidCombinatorError(combinator) from exc

    resolved = f"{left.render()} {token.value} {right.render()}"
    logger.debug("Combined selector (%s): %r", token.name.lower(), resolved)
    return Selector(resolved=resolved)
