"""Error hierarchy for selector construction and decoding."""
from __future__ import annotations

from typing import Any


class SelectorError(Exception):
    """Base error for all selectorkit errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class DuplicateFieldError(SelectorError):
    """A singular field (tag, id, attribute, pseudo-element) was set twice."""

    def __init__(self, field: str, **kwargs: Any) -> None:
        super().__init__(
            f"Selector field {field!r} can only be set once per compound selector",
            **kwargs,
        )
        self.field = field


class InvalidCombinatorError(SelectorError):
    """The combinator token is not one of ' ', '+', '~', '>'."""

    def __init__(self, token: object, **kwargs: Any) -> None:
        super().__init__(f"Invalid combinator: {token!r}", **kwargs)
        self.token = token


class SelectorDecodeError(SelectorError):
    """A JSON document or dict could not be turned back into a value."""
