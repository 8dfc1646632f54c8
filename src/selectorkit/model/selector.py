"""Selector model: Combinator enum and the simple/combined selector dataclasses.

A selector is one of two immutable shapes:

    SimpleSelector    element#id.class[attr]:pseudo-class::pseudo-element
    CombinedSelector  <left> <combinator> <right>

Every fluent method returns a new value built with ``dataclasses.replace``;
the receiver is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from selectorkit.errors import DuplicateFieldError, InvalidCombinatorError


class Combinator(Enum):
    """Structural relationship between the two halves of a combined selector."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def parse(cls, token: Combinator | str) -> Combinator:
        """Return the member for *token*, accepting members or raw tokens."""
        if isinstance(token, Combinator):
            return token
        try:
            return cls(token)
        except ValueError as exc:
            raise InvalidCombinatorError(token, cause=exc) from exc


@dataclass(frozen=True)
class SimpleSelector:
    """A compound selector made only of fragments, with no combinator.

    Attributes:
        tag: Element type name, e.g. ``div``.
        element_id: Value rendered after ``#``.
        classes: Class names in insertion order, each rendered after ``.``.
        attribute: Raw attribute expression rendered inside ``[...]``.
        pseudo_classes: Pseudo-class names in insertion order, each after ``:``.
        pseudo_element_name: Value rendered after ``::``.
    """

    tag: str | None = None
    element_id: str | None = None
    classes: tuple[str, ...] = ()
    attribute: str | None = None
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element_name: str | None = None

    # --- singular fragments -------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        if self.tag is not None:
            raise DuplicateFieldError("tag")
        return replace(self, tag=value)

    def id(self, value: str) -> SimpleSelector:
        if self.element_id is not None:
            raise DuplicateFieldError("id")
        return replace(self, element_id=value)

    def attr(self, value: str) -> SimpleSelector:
        if self.attribute is not None:
            raise DuplicateFieldError("attribute")
        return replace(self, attribute=value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        if self.pseudo_element_name is not None:
            raise DuplicateFieldError("pseudo_element")
        return replace(self, pseudo_element_name=value)

    # --- repeatable fragments -----------------------------------------------

    def class_(self, value: str) -> SimpleSelector:
        return replace(self, classes=(*self.classes, value))

    def pseudo_class(self, value: str) -> SimpleSelector:
        return replace(self, pseudo_classes=(*self.pseudo_classes, value))

    @property
    def is_empty(self) -> bool:
        """True when no fragment has been set."""
        return self == SimpleSelector()

    def stringify(self) -> str:
        from selectorkit.render import stringify

        return stringify(self)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator."""

    left: Selector
    combinator: Combinator
    right: Selector

    def __post_init__(self) -> None:
        if not isinstance(self.combinator, Combinator):
            raise InvalidCombinatorError(self.combinator)
        for side in (self.left, self.right):
            if not isinstance(side, (SimpleSelector, CombinedSelector)):
                raise TypeError(
                    f"CombinedSelector operands must be selectors, got {type(side).__name__}"
                )

    def stringify(self) -> str:
        from selectorkit.render import stringify

        return stringify(self)

    def __str__(self) -> str:
        return self.stringify()


Selector = Union[SimpleSelector, CombinedSelector]
