"""
Predicates of homogeneous relations (endorelations).

Every predicate here is defined only for X == Y. Called on a heterogeneous
relation it returns False instead of raising.
"""

from __future__ import annotations
import logging
from itertools import combinations
from typing import TYPE_CHECKING, Iterator, Tuple

if TYPE_CHECKING:
    from relax.relation.operators import Union
    from relax.relation.relation import Relation

logger = logging.getLogger(__name__)


class EndorelationMixin:
    """Reflexivity, symmetry, transitivity and the orders built from them."""

    __slots__ = ()

    def _upper_pairs(self) -> Iterator[Tuple[int, int]]:
        """All index pairs (i, j) with i < j."""
        return combinations(self.ixs(), 2)

    def is_reflexive(self) -> bool:
        """∀x ∈ X: xRx"""
        if not self.is_homogeneous():
            return False
        return all(self.eval_at(i, i) for i in self.ixs())

    def is_irreflexive(self) -> bool:
        """
        ∀x ∈ X: not xRx

        aka strict
        """
        if not self.is_homogeneous():
            return False
        return all(not self.eval_at(i, i) for i in self.ixs())

    def is_antisymmetric(self) -> bool:
        """∀x,y ∈ X: xRy ∧ yRx ⇒ x = y"""
        if not self.is_homogeneous():
            return False
        return all(
            not (self.eval_at(i, j) and self.eval_at(j, i))
            for i, j in self._upper_pairs()
        )

    def is_transitive(self) -> bool:
        """∀x,y,z ∈ X: xRy ∧ yRz ⇒ xRz"""
        if not self.is_homogeneous():
            return False
        for ix in self.ixs():
            for iy in self.ixs():
                if ix == iy or not self.eval_at(ix, iy):
                    continue
                for iz in self.ixs():
                    if self.eval_at(iy, iz) and not self.eval_at(ix, iz):
                        return False
        return True

    def is_symmetric(self) -> bool:
        """∀x,y ∈ X: xRy ⇔ yRx"""
        if not self.is_homogeneous():
            return False
        return all(self.eval_at(i, j) == self.eval_at(j, i) for i, j in self._upper_pairs())

    def is_asymmetric(self) -> bool:
        return self.is_irreflexive() and self.is_antisymmetric()

    def is_preorder(self) -> bool:
        return self.is_reflexive() and self.is_transitive()

    def is_partial_order(self) -> bool:
        return self.is_preorder() and self.is_antisymmetric()

    def is_equivalent(self) -> bool:
        return self.is_preorder() and self.is_symmetric()

    def is_difunctional(self) -> bool:
        """
        ∀w,x,y,z ∈ X: xRy ∧ zRy ∧ zRw ⇒ xRw

        aka regular. Equivalently, two rows that share a true column are equal.
        """
        if not self.is_homogeneous():
            return False
        for ix in self.ixs():
            for iy in self.ixs():
                if not self.eval_at(ix, iy):
                    continue
                for iz in range(ix + 1, len(self.ixs())):
                    if not self.eval_at(iz, iy):
                        continue
                    if any(self.eval_at(ix, iw) != self.eval_at(iz, iw) for iw in self.ixs()):
                        return False
        return True

    def is_lattice(self) -> bool:
        """Lattice detection is not supported, always False."""
        logger.warning("is_lattice is not implemented, reporting False")
        return False

    def is_sublattice(self, other: "Relation") -> bool:
        """Sublattice detection is not supported, always False."""
        logger.warning("is_sublattice is not implemented, reporting False")
        return False

    # ------------------------------------------------------------------
    # Closures
    # ------------------------------------------------------------------

    def closure_reflexive(self) -> "Union":
        """R ∪ I, evaluated lazily."""
        from relax.relation.constants import Identity
        from relax.relation.operators import Union

        return Union(self, Identity(self.get_domain()))  # type: ignore[arg-type]

    def closure_symmetric(self) -> "Union":
        """R ∪ R^T, evaluated lazily."""
        from relax.exceptions import DomainMismatchError
        from relax.relation.operators import Converse, Union

        if not self.is_homogeneous():
            DomainMismatchError.raise_not_homogeneous("closure_symmetric", self.get_domain())
        return Union(self, Converse(self))  # type: ignore[arg-type]
