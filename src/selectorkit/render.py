"""Render selector values to canonical CSS selector strings.

Fragment order for a simple selector is fixed, whatever order the builder
methods were called in:

    tag  [attribute]  #id  .class...  :pseudo-class...  ::pseudo-element

A combined selector renders as ``left + " " + combinator + " " + right``,
so the descendant combinator appears as three spaces.
"""

from __future__ import annotations

from selectorkit.model.selector import CombinedSelector, Selector, SimpleSelector

__all__ = ["stringify"]


def _render_simple(selector: SimpleSelector) -> str:
    parts: list[str] = []
    if selector.tag is not None:
        parts.append(selector.tag)
    if selector.attribute is not None:
        parts.append(f"[{selector.attribute}]")
    if selector.element_id is not None:
        parts.append(f"#{selector.element_id}")
    parts.extend(f".{name}" for name in selector.classes)
    parts.extend(f":{name}" for name in selector.pseudo_classes)
    if selector.pseudo_element_name is not None:
        parts.append(f"::{selector.pseudo_element_name}")
    return "".join(parts)


def stringify(selector: Selector) -> str:
    """Return the CSS text for *selector*.

    Pure: calling it repeatedly on the same value returns the same string.
    """
    if isinstance(selector, SimpleSelector):
        return _render_simple(selector)
    if isinstance(selector, CombinedSelector):
        left = stringify(selector.left)
        right = stringify(selector.right)
        return f"{left} {selector.combinator.value} {right}"
    raise TypeError(f"Cannot stringify {type(selector).__name__}")
