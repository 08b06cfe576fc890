"""Error hierarchy for csskit."""
from __future__ import annotations


class CsskitError(Exception):
    """Base error for all csskit errors."""


class SelectorError(CsskitError):
    """Base error for selector construction failures."""


class DuplicateFragmentError(SelectorError):
    """A single-valued fragment was set twice on the same compound selector."""

    def __init__(self, fragment: str, existing: str, rejected: str) -> None:
        self.fragment = fragment
        self.existing = existing
        self.rejected = rejected
        super().__init__(
            f"Selector already has {fragment} {existing!r}; cannot add {rejected!r}"
        )


class InvalidCombinatorError(SelectorError):
    """The combinator token is not one of ' ', '+', '~', '>'."""

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(f"Invalid combinator: {token!r}")


class FrozenSelectorError(SelectorError):
    """A combined selector was mutated."""

    def __init__(self, resolved: str) -> None:
        self.resolved = resolved
        super().__init__(f"Combined selector {resolved!r} cannot be modified")


class SerializationError(CsskitError):
    """An object could not be converted to or from JSON."""
