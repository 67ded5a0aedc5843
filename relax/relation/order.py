"""
Order queries on partial orders.

Given a partial order R over U:
- upset(x)    = { y ∈ U | xRy }
- downset(x)  = { y ∈ U | yRx }
- upr_R(u)    = { y ∈ U | ∀x ∈ u: xRy }
- lwr_R(u)    = { y ∈ U | ∀x ∈ u: yRx }
- grt_R(u)    = upr_R(u) ∩ u
- sml_R(u)    = lwr_R(u) ∩ u
- sup_R(u)    = sml_R(upr_R(u))
- inf_R(u)    = grt_R(lwr_R(u))
"""

from __future__ import annotations
from typing import Any, Iterable, List

from relax.elements.ordered_set import OrderedSet, as_members
from relax.exceptions import ElementNotFoundError, NotAPartialOrderError
from relax.logger import relax_logger, format_set


class PartialOrderMixin:
    """Bounds, extremal elements, suprema and infima of a partial order."""

    __slots__ = ()

    def _require_partial_order(self, query: str) -> None:
        if not self.is_partial_order():
            raise NotAPartialOrderError(
                f"{query} requires a partial order "
                "(reflexive, transitive, antisymmetric and homogeneous)"
            )

    def _member_indices(self, subset: Iterable[Any]) -> List[int]:
        universe: OrderedSet = self.get_domain()[0]
        members = as_members(subset)
        missing = members - universe
        if missing:
            raise ElementNotFoundError(missing[0], "X")
        return [i for (i, _), _ in universe.intersection_enumerated(members)]

    # unchecked helpers, callers validate once

    def _upper(self, ixs: List[int], transposed: bool = False) -> OrderedSet:
        universe: OrderedSet = self.get_domain()[0]
        if transposed:
            return OrderedSet(
                y for iy, y in enumerate(universe) if all(self.eval_at(iy, ix) for ix in ixs)
            )
        return OrderedSet(
            y for iy, y in enumerate(universe) if all(self.eval_at(ix, iy) for ix in ixs)
        )

    def upset(self, x: Any) -> OrderedSet:
        """Return the principal upset { y | xRy }."""
        self._require_partial_order("upset")
        return self._upper(self._member_indices([x]))

    def downset(self, x: Any) -> OrderedSet:
        """Return the principal downset { y | yRx }."""
        self._require_partial_order("downset")
        return self._upper(self._member_indices([x]), transposed=True)

    def bound_upper(self, subset: Iterable[Any]) -> OrderedSet:
        """Upper bounds of subset. The empty subset is bounded by every element."""
        self._require_partial_order("bound_upper")
        return self._upper(self._member_indices(subset))

    def bound_lower(self, subset: Iterable[Any]) -> OrderedSet:
        """Lower bounds of subset. The empty subset is bounded by every element."""
        self._require_partial_order("bound_lower")
        return self._upper(self._member_indices(subset), transposed=True)

    def elements_greatest(self, subset: Iterable[Any]) -> OrderedSet:
        self._require_partial_order("elements_greatest")
        ixs = self._member_indices(subset)
        return self._upper(ixs) & self._members(ixs)

    def elements_smallest(self, subset: Iterable[Any]) -> OrderedSet:
        self._require_partial_order("elements_smallest")
        ixs = self._member_indices(subset)
        return self._upper(ixs, transposed=True) & self._members(ixs)

    def supremum(self, subset: Iterable[Any]) -> OrderedSet:
        """Least upper bounds, sml(upr(u)). Empty when no least bound exists."""
        self._require_partial_order("supremum")
        bounds = self._upper(self._member_indices(subset))
        ixs = self._member_indices(bounds)
        result = self._upper(ixs, transposed=True) & bounds
        relax_logger.subsection("Supremum")
        relax_logger.result("Upper bounds", format_set(bounds))
        relax_logger.result("Least upper bounds", format_set(result))
        return result

    def infimum(self, subset: Iterable[Any]) -> OrderedSet:
        """Greatest lower bounds, grt(lwr(u)). Empty when no greatest bound exists."""
        self._require_partial_order("infimum")
        bounds = self._upper(self._member_indices(subset), transposed=True)
        ixs = self._member_indices(bounds)
        result = self._upper(ixs) & bounds
        relax_logger.subsection("Infimum")
        relax_logger.result("Lower bounds", format_set(bounds))
        relax_logger.result("Greatest lower bounds", format_set(result))
        return result

    def _members(self, ixs: List[int]) -> OrderedSet:
        universe: OrderedSet = self.get_domain()[0]
        return OrderedSet(universe[i] for i in ixs)
