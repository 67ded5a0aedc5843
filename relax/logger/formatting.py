"""Text formatting utilities for logging."""

from typing import Any, Iterable


def format_element(element: Any) -> str:
    """Format a set element, nested sets in brace notation."""
    if isinstance(element, str):
        return element
    try:
        members = list(element)
    except TypeError:
        return str(element)
    return format_set(members)


def format_set(s: Iterable[Any]) -> str:
    """Format a set for consistent display, ∅ when empty."""
    members = [format_element(x) for x in s]
    if not members:
        return "∅"
    return "{" + ", ".join(members) + "}"
