"""
Custom exceptions for relation construction and evaluation.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, NoReturn, Optional, Tuple

if TYPE_CHECKING:
    from relax.elements.ordered_set import OrderedSet


class RelaxError(Exception):
    """Base exception for relation algebra errors."""

    pass


class IndexOutOfRangeError(RelaxError, IndexError):
    """Raised when an incidence matrix is evaluated outside of its domain."""

    def __init__(self, ix: int, iy: int, shape: Tuple[int, int]) -> None:
        self.ix = ix
        self.iy = iy
        self.shape = shape
        super().__init__(
            f"Index pair ({ix}, {iy}) is out of range for a "
            f"{shape[0]}x{shape[1]} incidence matrix"
        )


class ElementNotFoundError(RelaxError, KeyError):
    """Raised when an element is looked up in a domain that does not contain it."""

    def __init__(self, element: Any, side: Optional[str] = None) -> None:
        self.element = element
        self.side = side
        where = f"domain {side}" if side else "the set"
        self.message = f"Element {element!s} is not a member of {where}"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would otherwise render the message with quotes
        return self.message


class DomainMismatchError(RelaxError, ValueError):
    """Raised when operands of a relational operator have incompatible domains."""

    def __init__(
        self,
        operator: str,
        message: str,
        left: Optional[Tuple["OrderedSet", "OrderedSet"]] = None,
        right: Optional[Tuple["OrderedSet", "OrderedSet"]] = None,
    ) -> None:
        self.operator = operator
        self.left = left
        self.right = right
        super().__init__(f"{operator}: {message}")

    @staticmethod
    def raise_unequal_domains(
        operator: str,
        left: Tuple["OrderedSet", "OrderedSet"],
        right: Tuple["OrderedSet", "OrderedSet"],
    ) -> NoReturn:
        """
        Raise for operators (union, intersection) whose operands must share a domain.

        Args:
            operator: Name of the operator being constructed
            left: Domain of the left operand
            right: Domain of the right operand

        Raises:
            DomainMismatchError: Always
        """
        raise DomainMismatchError(
            operator,
            f"operands must share one domain, got "
            f"{left[0]} x {left[1]} and {right[0]} x {right[1]}",
            left,
            right,
        )

    @staticmethod
    def raise_unchainable(
        left: Tuple["OrderedSet", "OrderedSet"],
        right: Tuple["OrderedSet", "OrderedSet"],
    ) -> NoReturn:
        """
        Raise for a concatenation whose intermediate domains differ.

        Args:
            left: Domain of the first relation (p)
            right: Domain of the second relation (q)

        Raises:
            DomainMismatchError: Always
        """
        raise DomainMismatchError(
            "Concatenation",
            f"codomain of the first operand {left[1]} does not equal "
            f"the domain of the second operand {right[0]}",
            left,
            right,
        )

    @staticmethod
    def raise_not_homogeneous(
        operator: str, domain: Tuple["OrderedSet", "OrderedSet"]
    ) -> NoReturn:
        """Raise for operators that are only defined on endorelations."""
        raise DomainMismatchError(
            operator,
            f"requires a homogeneous domain, got {domain[0]} x {domain[1]}",
            domain,
        )


class TableLengthMismatchError(RelaxError, ValueError):
    """Raised when an incidence table does not cover the cross product of its domain."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Incidence table has {actual} entries, expected |X|*|Y| = {expected}"
        )


class NotAPartialOrderError(RelaxError, ValueError):
    """Raised when an order query is made on a relation that is not a partial order."""

    pass
