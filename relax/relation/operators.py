"""
Lazy relational operators.

Each operator is itself a Relation that evaluates its operands on demand
and never copies their tables. Domain compatibility is checked once, when
the operator is constructed.
"""

from __future__ import annotations
import logging
from typing import Tuple

from relax.elements.ordered_set import OrderedSet
from relax.exceptions import DomainMismatchError
from relax.relation.relation import Relation

logger = logging.getLogger(__name__)


class Complement(Relation):
    """xSy ⇔ not xRy"""

    __slots__ = ("_r",)

    def __init__(self, r: Relation) -> None:
        self._r = r

    def get_domain(self) -> Tuple[OrderedSet, OrderedSet]:
        return self._r.get_domain()

    def eval_at(self, ix: int, iy: int) -> bool:
        self.check_index(ix, iy)
        return not self._r.eval_at(ix, iy)

    def __repr__(self) -> str:
        return f"Complement({self._r!r})"


class Converse(Relation):
    """R^T = { (y, x) | (x, y) ∈ R }"""

    __slots__ = ("_r",)

    def __init__(self, r: Relation) -> None:
        self._r = r

    def get_domain(self) -> Tuple[OrderedSet, OrderedSet]:
        domain_x, domain_y = self._r.get_domain()
        return domain_y, domain_x

    def eval_at(self, ix: int, iy: int) -> bool:
        self.check_index(ix, iy)
        return self._r.eval_at(iy, ix)

    def __repr__(self) -> str:
        return f"Converse({self._r!r})"


class Union(Relation):
    """R ∪ S = { (x, y) | (x, y) ∈ R ∨ (x, y) ∈ S }"""

    __slots__ = ("_p", "_q")

    def __init__(self, p: Relation, q: Relation) -> None:
        if p.get_domain() != q.get_domain():
            DomainMismatchError.raise_unequal_domains(
                "Union", p.get_domain(), q.get_domain()
            )
        logger.debug("Union over a %dx%d domain", *p.shape)
        self._p = p
        self._q = q

    def get_domain(self) -> Tuple[OrderedSet, OrderedSet]:
        return self._p.get_domain()

    def eval_at(self, ix: int, iy: int) -> bool:
        self.check_index(ix, iy)
        return self._p.eval_at(ix, iy) or self._q.eval_at(ix, iy)

    def __repr__(self) -> str:
        return f"Union({self._p!r}, {self._q!r})"


class Intersection(Relation):
    """R ∩ S = { (x, y) | (x, y) ∈ R ∧ (x, y) ∈ S }"""

    __slots__ = ("_p", "_q")

    def __init__(self, p: Relation, q: Relation) -> None:
        if p.get_domain() != q.get_domain():
            DomainMismatchError.raise_unequal_domains(
                "Intersection", p.get_domain(), q.get_domain()
            )
        logger.debug("Intersection over a %dx%d domain", *p.shape)
        self._p = p
        self._q = q

    def get_domain(self) -> Tuple[OrderedSet, OrderedSet]:
        return self._p.get_domain()

    def eval_at(self, ix: int, iy: int) -> bool:
        self.check_index(ix, iy)
        return self._p.eval_at(ix, iy) and self._q.eval_at(ix, iy)

    def __repr__(self) -> str:
        return f"Intersection({self._p!r}, {self._q!r})"


class Concatenation(Relation):
    """
    P ; Q = { (x, z) | ∃y ∈ Y: xPy ∧ yQz }

    P is applied first, so P ⊆ X × Y and Q ⊆ Y × Z give P ; Q ⊆ X × Z.
    """

    __slots__ = ("_p", "_q")

    def __init__(self, p: Relation, q: Relation) -> None:
        if p.get_domain()[1] != q.get_domain()[0]:
            DomainMismatchError.raise_unchainable(p.get_domain(), q.get_domain())
        logger.debug(
            "Concatenation %dx%d ; %dx%d", *p.shape, *q.shape
        )
        self._p = p
        self._q = q

    def get_domain(self) -> Tuple[OrderedSet, OrderedSet]:
        return self._p.get_domain()[0], self._q.get_domain()[1]

    def eval_at(self, ix: int, iz: int) -> bool:
        self.check_index(ix, iz)
        return any(
            self._p.eval_at(ix, iy) and self._q.eval_at(iy, iz) for iy in self._p.iys()
        )

    def __repr__(self) -> str:
        return f"Concatenation({self._p!r}, {self._q!r})"


def complement(r: Relation) -> Complement:
    return Complement(r)


def converse(r: Relation) -> Converse:
    return Converse(r)


def union(p: Relation, q: Relation) -> Union:
    return Union(p, q)


def intersection(p: Relation, q: Relation) -> Intersection:
    return Intersection(p, q)


def concatenation(p: Relation, q: Relation) -> Concatenation:
    """The composition p ; q, p applied first."""
    return Concatenation(p, q)
