"""JSON encoding and decoding for selectorkit values.

Selectors are written as tagged dicts::

    {"kind": "simple", "tag": "a", "id": null, "classes": ["nav"],
     "attribute": "href$=\".png\"", "pseudo_classes": ["focus"],
     "pseudo_element": null}

    {"kind": "combined", "left": {...}, "combinator": "+", "right": {...}}

Other dataclasses (e.g. Rectangle) are written as their field dicts and
rebuilt by keyword construction.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.errors import SelectorDecodeError
from selectorkit.model.selector import (
    Combinator,
    CombinedSelector,
    Selector,
    SimpleSelector,
)

__all__ = ["to_json", "from_json", "selector_to_dict", "selector_from_dict"]

log = logging.getLogger("selectorkit")

T = TypeVar("T")

_SELECTOR_TYPES = (SimpleSelector, CombinedSelector)


# ---------------------------------------------------------------------------
# Selector <-> dict
# ---------------------------------------------------------------------------


def selector_to_dict(selector: Selector) -> dict[str, Any]:
    """Convert a selector tree to plain JSON-compatible dicts."""
    if isinstance(selector, SimpleSelector):
        return {
            "kind": "simple",
            "tag": selector.tag,
            "id": selector.element_id,
            "classes": list(selector.classes),
            "attribute": selector.attribute,
            "pseudo_classes": list(selector.pseudo_classes),
            "pseudo_element": selector.pseudo_element_name,
        }
    if isinstance(selector, CombinedSelector):
        return {
            "kind": "combined",
            "left": selector_to_dict(selector.left),
            "combinator": selector.combinator.value,
            "right": selector_to_dict(selector.right),
        }
    raise TypeError(f"Not a selector: {type(selector).__name__}")


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise SelectorDecodeError(f"Field {key!r} must be a string or null, got {value!r}")
    return value


def _str_list(data: dict[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        value = []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise SelectorDecodeError(f"Field {key!r} must be a list of strings, got {value!r}")
    return tuple(value)


def selector_from_dict(data: Any) -> Selector:
    """Rebuild a selector tree from the dict form produced by selector_to_dict.

    Raises SelectorDecodeError for malformed input and InvalidCombinatorError
    for an unknown combinator token.
    """
    if not isinstance(data, dict):
        raise SelectorDecodeError(f"Selector document must be an object, got {type(data).__name__}")

    kind = data.get("kind")
    if kind == "simple":
        return SimpleSelector(
            tag=_optional_str(data, "tag"),
            element_id=_optional_str(data, "id"),
            classes=_str_list(data, "classes"),
            attribute=_optional_str(data, "attribute"),
            pseudo_classes=_str_list(data, "pseudo_classes"),
            pseudo_element_name=_optional_str(data, "pseudo_element"),
        )
    if kind == "combined":
        for key in ("left", "combinator", "right"):
            if key not in data:
                raise SelectorDecodeError(f"Combined selector is missing {key!r}")
        return CombinedSelector(
            left=selector_from_dict(data["left"]),
            combinator=Combinator.parse(data["combinator"]),
            right=selector_from_dict(data["right"]),
        )
    raise SelectorDecodeError(f"Unknown selector kind: {kind!r}")


# ---------------------------------------------------------------------------
# JSON text
# ---------------------------------------------------------------------------


def _encode_default(obj: Any) -> Any:
    if isinstance(obj, _SELECTOR_TYPES):
        return selector_to_dict(obj)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, *, indent: int | None = None) -> str:
    """Return the JSON representation of *obj*.

    Output is compact unless *indent* is given. Plain JSON values pass
    through unchanged; selectors and other dataclasses become dicts first.
    """
    separators = (",", ":") if indent is None else None
    return json.dumps(obj, default=_encode_default, indent=indent, separators=separators)


def from_json(cls: type[T] | Any, text: str) -> T:
    """Return an instance of *cls* built from the JSON document *text*.

    ``cls`` may be a selector type (or the ``Selector`` union), any other
    dataclass, or a plain callable such as ``list`` or ``dict``.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise SelectorDecodeError(f"Invalid JSON: {exc}", cause=exc) from exc

    if cls is Selector or cls in _SELECTOR_TYPES:
        try:
            selector = selector_from_dict(data)
        except RecursionError as exc:
            raise SelectorDecodeError("Selector document is nested too deeply", cause=exc) from exc
        if cls is not Selector and not isinstance(selector, cls):
            raise SelectorDecodeError(
                f"Expected {cls.__name__}, got {type(selector).__name__}"
            )
        log.debug("Decoded %s from JSON", type(selector).__name__)
        return selector  # type: ignore[return-value]

    if dataclasses.is_dataclass(cls):
        if not isinstance(data, dict):
            raise SelectorDecodeError(
                f"{cls.__name__} must be decoded from an object, got {type(data).__name__}"
            )
        try:
            return cls(**data)
        except TypeError as exc:
            raise SelectorDecodeError(f"Cannot build {cls.__name__}: {exc}", cause=exc) from exc

    return cls(data)
