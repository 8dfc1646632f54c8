"""Fluent entry points for building CSS selectors.

Example::

    from selectorkit import builder

    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(builder.element("ul"), ">", builder.element("li")).stringify()
    # 'ul > li'
"""

from __future__ import annotations

import logging

from selectorkit.model.selector import (
    Combinator,
    CombinedSelector,
    Selector,
    SimpleSelector,
)
from selectorkit.render import stringify as _stringify

__all__ = ["SelectorBuilder", "builder"]

log = logging.getLogger("selectorkit")


class SelectorBuilder:
    """Stateless facade: each entry point starts a new selector value."""

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(
        self, left: Selector, combinator: Combinator | str, right: Selector
    ) -> CombinedSelector:
        """Join two selectors with a combinator token (' ', '+', '~', '>').

        Raises InvalidCombinatorError for any other token.
        """
        token = Combinator.parse(combinator)
        log.debug("Combining selectors with %s combinator", token.name)
        return CombinedSelector(left=left, combinator=token, right=right)

    def stringify(self, selector: Selector) -> str:
        return _stringify(selector)


builder = SelectorBuilder()
