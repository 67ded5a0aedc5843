"""
Binary relations over one or two ordered sets.

A relation is defined by two operations only: its domain (X, Y) and
``eval_at(ix, iy)``, the value of its incidence matrix at a pair of
zero-based indices. Every other query and operator in this package is
derived from these two.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable, List, Tuple

from relax.elements.ordered_set import OrderedSet, SetElement, as_members
from relax.exceptions import ElementNotFoundError, IndexOutOfRangeError
from relax.relation.endorelation import EndorelationMixin
from relax.relation.order import PartialOrderMixin

if TYPE_CHECKING:
    from relax.relation.matrix import RelationMatrix
    from relax.relation.operators import (
        Complement,
        Concatenation,
        Converse,
        Intersection,
        Union,
    )
    from relax.types import RenderConfig


class Relation(EndorelationMixin, PartialOrderMixin, ABC):
    """
    Abstract binary relation R ⊆ X × Y.

    Subclasses supply get_domain and eval_at. Relations are logically
    immutable, two relations compare equal iff they have the same domain and
    agree on every cell of the incidence matrix.
    """

    __slots__ = ()

    @abstractmethod
    def get_domain(self) -> Tuple[OrderedSet, OrderedSet]:
        """Return the (X, Y) domain pair."""

    @abstractmethod
    def eval_at(self, ix: int, iy: int) -> bool:
        """Evaluate the incidence matrix at row ix and column iy."""

    def eval(self, x: Any, y: Any) -> bool:
        """
        Return True iff x relates to y.

        Raises:
            ElementNotFoundError: If x is not in X or y is not in Y
        """
        domain_x, domain_y = self.get_domain()
        ix = domain_x.position(x)
        if ix is None:
            raise ElementNotFoundError(x, "X")
        iy = domain_y.position(y)
        if iy is None:
            raise ElementNotFoundError(y, "Y")
        return self.eval_at(ix, iy)

    @property
    def shape(self) -> Tuple[int, int]:
        domain_x, domain_y = self.get_domain()
        return len(domain_x), len(domain_y)

    def ixs(self) -> range:
        """Row indices of the incidence matrix."""
        return range(len(self.get_domain()[0]))

    def iys(self) -> range:
        """Column indices of the incidence matrix."""
        return range(len(self.get_domain()[1]))

    def check_index(self, ix: int, iy: int) -> None:
        """
        Raises:
            IndexOutOfRangeError: If (ix, iy) is not a cell of the incidence matrix
        """
        rows, cols = self.shape
        if not (0 <= ix < rows and 0 <= iy < cols):
            raise IndexOutOfRangeError(ix, iy, (rows, cols))

    # ------------------------------------------------------------------
    # Domain shape
    # ------------------------------------------------------------------

    def is_homogeneous(self) -> bool:
        domain_x, domain_y = self.get_domain()
        return domain_x == domain_y

    def is_heterogeneous(self) -> bool:
        return not self.is_homogeneous()

    # ------------------------------------------------------------------
    # Uniqueness and totality
    # ------------------------------------------------------------------

    def is_injective(self) -> bool:
        """
        Return True if the relation is injective (left-unique).
        ∀y: at most one x with xRy
        """
        for iy in self.iys():
            found_one = False
            for ix in self.ixs():
                if self.eval_at(ix, iy):
                    if found_one:
                        return False
                    found_one = True
        return True

    def is_functional(self) -> bool:
        """
        Return True if the relation is functional (right-unique, univalent).
        ∀x: at most one y with xRy
        """
        for ix in self.ixs():
            found_one = False
            for iy in self.iys():
                if self.eval_at(ix, iy):
                    if found_one:
                        return False
                    found_one = True
        return True

    def is_lefttotal(self) -> bool:
        """∀x ∈ X: ∃y ∈ Y: xRy"""
        return all(any(self.eval_at(ix, iy) for iy in self.iys()) for ix in self.ixs())

    def is_surjective(self) -> bool:
        """
        Return True if the relation is surjective (right-total, onto).
        ∀y ∈ Y: ∃x ∈ X: xRy
        """
        return all(any(self.eval_at(ix, iy) for ix in self.ixs()) for iy in self.iys())

    def is_bijective(self) -> bool:
        return self.is_injective() and self.is_surjective()

    def is_function(self) -> bool:
        return self.is_functional() and self.is_lefttotal()

    # ------------------------------------------------------------------
    # Set valued queries
    # ------------------------------------------------------------------

    def source(self) -> OrderedSet:
        """{ x ∈ X | ∃y ∈ Y: xRy }"""
        domain_x = self.get_domain()[0]
        return OrderedSet(
            x
            for ix, x in enumerate(domain_x)
            if any(self.eval_at(ix, iy) for iy in self.iys())
        )

    def range(self) -> OrderedSet:
        """{ y ∈ Y | ∃x ∈ X: xRy }"""
        domain_y = self.get_domain()[1]
        return OrderedSet(
            y
            for iy, y in enumerate(domain_y)
            if any(self.eval_at(ix, iy) for ix in self.ixs())
        )

    def image(self, subset: Iterable[Any]) -> OrderedSet:
        """{ y ∈ Y | ∃x ∈ U: xRy }"""
        ixs = self._subset_indices(subset, 0)
        domain_y = self.get_domain()[1]
        return OrderedSet(
            y for iy, y in enumerate(domain_y) if any(self.eval_at(ix, iy) for ix in ixs)
        )

    def preimage(self, subset: Iterable[Any]) -> OrderedSet:
        """{ x ∈ X | ∃y ∈ V: xRy }"""
        iys = self._subset_indices(subset, 1)
        domain_x = self.get_domain()[0]
        return OrderedSet(
            x for ix, x in enumerate(domain_x) if any(self.eval_at(ix, iy) for iy in iys)
        )

    def image_strict(self, subset: Iterable[Any]) -> OrderedSet:
        """{ y ∈ Y | ∀x ∈ U: xRy }"""
        ixs = self._subset_indices(subset, 0)
        domain_y = self.get_domain()[1]
        return OrderedSet(
            y for iy, y in enumerate(domain_y) if all(self.eval_at(ix, iy) for ix in ixs)
        )

    def preimage_strict(self, subset: Iterable[Any]) -> OrderedSet:
        """{ x ∈ X | ∀y ∈ V: xRy }"""
        iys = self._subset_indices(subset, 1)
        domain_x = self.get_domain()[0]
        return OrderedSet(
            x for ix, x in enumerate(domain_x) if all(self.eval_at(ix, iy) for iy in iys)
        )

    def _subset_indices(self, subset: Iterable[Any], side: int) -> List[int]:
        """
        Resolve a subset of one side of the domain to its positions there.

        Raises:
            ElementNotFoundError: If subset has an element outside that side
        """
        domain = self.get_domain()[side]
        members = as_members(subset)
        if not members.is_subset(domain):
            missing: SetElement = next(iter(members - domain))
            raise ElementNotFoundError(missing, "XY"[side])
        return [i for (i, _), _ in domain.intersection_enumerated(members)]

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __or__(self, other: object) -> "Union":
        if not isinstance(other, Relation):
            return NotImplemented
        from relax.relation.operators import Union

        return Union(self, other)

    def __and__(self, other: object) -> "Intersection":
        if not isinstance(other, Relation):
            return NotImplemented
        from relax.relation.operators import Intersection

        return Intersection(self, other)

    def __matmul__(self, other: object) -> "Concatenation":
        """self @ other is the concatenation self ; other (self first)."""
        if not isinstance(other, Relation):
            return NotImplemented
        from relax.relation.operators import Concatenation

        return Concatenation(self, other)

    def __invert__(self) -> "Complement":
        from relax.relation.operators import Complement

        return Complement(self)

    @property
    def T(self) -> "Converse":
        from relax.relation.operators import Converse

        return Converse(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return relations_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def freeze(self) -> "RelationMatrix":
        """Materialize the relation into an incidence table."""
        from relax.relation.matrix import RelationMatrix

        return RelationMatrix.from_relation(self)

    def to_tex(self, config: "RenderConfig | None" = None) -> str:
        from relax.render import to_tex

        return to_tex(self, config)

    def to_table(self, tablefmt: str = "simple") -> str:
        from relax.render import to_table

        return to_table(self, tablefmt)

    def __str__(self) -> str:
        return self.to_table()


def relations_equal(p: Relation, q: Relation) -> bool:
    """Compare two relations for extensional equality."""
    if p.get_domain() != q.get_domain():
        return False
    for ix in p.ixs():
        for iy in p.iys():
            if p.eval_at(ix, iy) != q.eval_at(ix, iy):
                return False
    return True


# Short name kept for callers that prefer it
eq = relations_equal
