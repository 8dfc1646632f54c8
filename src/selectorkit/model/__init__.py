"""selectorkit model layer -- public type re-exports."""

from selectorkit.model.rectangle import Rectangle
from selectorkit.model.selector import (
    Combinator,
    CombinedSelector,
    Selector,
    SimpleSelector,
)

__all__ = [
    # selector
    "Combinator",
    "SimpleSelector",
    "CombinedSelector",
    "Selector",
    # rectangle
    "Rectangle",
]
