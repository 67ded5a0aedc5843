"""
Constant relations over a given domain.

The empty, universal and identity relations need no table, they answer
eval_at from the indices alone. They are the neutral and absorbing
elements of union, intersection and concatenation.
"""

from __future__ import annotations
from typing import Tuple

from relax.elements.ordered_set import OrderedSet
from relax.exceptions import DomainMismatchError
from relax.relation.relation import Relation
from relax.types import DomainLike, as_domain


class Empty(Relation):
    """The relation that relates nothing."""

    __slots__ = ("_domain",)

    def __init__(self, domain: DomainLike) -> None:
        self._domain = as_domain(domain)

    def get_domain(self) -> Tuple[OrderedSet, OrderedSet]:
        return self._domain

    def eval_at(self, ix: int, iy: int) -> bool:
        self.check_index(ix, iy)
        return False

    def __repr__(self) -> str:
        return f"Empty({self._domain[0]}, {self._domain[1]})"


class Universal(Relation):
    """The relation X × Y."""

    __slots__ = ("_domain",)

    def __init__(self, domain: DomainLike) -> None:
        self._domain = as_domain(domain)

    def get_domain(self) -> Tuple[OrderedSet, OrderedSet]:
        return self._domain

    def eval_at(self, ix: int, iy: int) -> bool:
        self.check_index(ix, iy)
        return True

    def __repr__(self) -> str:
        return f"Universal({self._domain[0]}, {self._domain[1]})"


class Identity(Relation):
    """
    The identity I where xIy ⇔ x = y.

    Raises:
        DomainMismatchError: If the domain is heterogeneous
    """

    __slots__ = ("_domain",)

    def __init__(self, domain: DomainLike) -> None:
        domain_x, domain_y = as_domain(domain)
        if domain_x != domain_y:
            DomainMismatchError.raise_not_homogeneous("Identity", (domain_x, domain_y))
        self._domain = (domain_x, domain_x)

    def get_domain(self) -> Tuple[OrderedSet, OrderedSet]:
        return self._domain

    def eval_at(self, ix: int, iy: int) -> bool:
        self.check_index(ix, iy)
        return ix == iy

    def __repr__(self) -> str:
        return f"Identity({self._domain[0]})"
