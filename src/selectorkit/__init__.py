"""selectorkit: immutable fluent builder for CSS selector strings."""
from __future__ import annotations

__version__ = "0.1.0"

# Errors
from selectorkit.errors import (
    DuplicateFieldError,
    InvalidCombinatorError,
    SelectorDecodeError,
    SelectorError,
)

# Model
from selectorkit.model import (
    Combinator,
    CombinedSelector,
    Rectangle,
    Selector,
    SimpleSelector,
)

# Building and rendering
from selectorkit.builder import SelectorBuilder, builder
from selectorkit.render import stringify

# JSON
from selectorkit.codec import from_json, selector_from_dict, selector_to_dict, to_json

from selectorkit.config import SelectorkitConfig

__all__ = [
    "__version__",
    # errors
    "SelectorError",
    "DuplicateFieldError",
    "InvalidCombinatorError",
    "SelectorDecodeError",
    # model
    "Combinator",
    "SimpleSelector",
    "CombinedSelector",
    "Selector",
    "Rectangle",
    # builder
    "SelectorBuilder",
    "builder",
    "stringify",
    # codec
    "to_json",
    "from_json",
    "selector_to_dict",
    "selector_from_dict",
    # config
    "SelectorkitConfig",
]
