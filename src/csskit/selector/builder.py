"""Fluent builder facade for compound and combined CSS selectors."""

from __future__ import annotations

import logging

from csskit.config import BuilderConfig
from csskit.selector.model import Combinator, Renderable, Selector, combine

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates fragments into one in-progress Selector.

    Fragment methods return the builder so calls chain. ``stringify()`` and
    ``build()`` hand the current selector off and start a fresh one, so the
    same builder can be reused for unrelated selectors. Only one selector is
    in progress at a time; use separate builders to interleave constructions.

        builder = SelectorBuilder()
        builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        # 'a[href$=".png"]:focus'
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self._config = config or BuilderConfig()
        self._current = self._new_selector()

    @property
    def config(self) -> BuilderConfig:
        return self._config

    @property
    def current(self) -> Selector:
        """The in-progress selector."""
        return self._current

    def _new_selector(self) -> Selector:
        return Selector(
            allow_multiple_pseudo_elements=self._config.allow_multiple_pseudo_elements
        )

    # --- fragments --------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        self._current.set_element(value)
        return self

    def id(self, value: str) -> SelectorBuilder:
        self._current.set_id(value)
        return self

    def class_(self, value: str) -> SelectorBuilder:
        self._current.add_class(value)
        return self

    def attr(self, value: str) -> SelectorBuilder:
        self._current.add_attribute(value)
        return self

    def pseudo_class(self, value: str) -> SelectorBuilder:
        self._current.add_pseudo_class(value)
        return self

    def pseudo_element(self, value: str) -> SelectorBuilder:
        self._current.add_pseudo_element(value)
        return self

    # --- output -----------------------------------------------------------------

    def render(self) -> str:
        """Render the in-progress selector without resetting the builder."""
        return self._current.render()

    def build(self) -> Selector:
        """Detach the in-progress selector and start a new empty one."""
        selector = self._current
        self._current = self._new_selector()
        logger.debug("Built selector '%s'; builder reset", selector)
        return selector

    def stringify(self) -> str:
        """Render the in-progress selector, then reset the builder."""
        return self.build().render()

    def combine(
        self, left: Renderable, combinator: Combinator | str, right: Renderable
    ) -> Selector:
        """Join *left* and *right* with *combinator*; builder state is untouched."""
        return combine(left, combinator, right)

    def __repr__(self) -> str:
        return f"SelectorBuilder(current={self._current.render()!r})"
