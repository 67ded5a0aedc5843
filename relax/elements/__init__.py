"""Ordered set collaborator used as the domain of every relation."""

from relax.elements.ordered_set import (
    OrderedSet,
    SetElement,
    as_element,
    as_members,
    element_key,
)

__all__ = ["OrderedSet", "SetElement", "as_element", "as_members", "element_key"]
