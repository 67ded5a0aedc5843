"""
Materialized relations.

RelationMatrix is the only relation that owns data: a flat, read-only numpy
boolean table of length |X|*|Y|, stored row-major by the X index
(``index = ix * |Y| + iy``).
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, Sequence, Tuple, Union as TypingUnion

import numpy as np
import numpy.typing as npt

from relax.elements.ordered_set import OrderedSet
from relax.exceptions import DomainMismatchError, TableLengthMismatchError
from relax.relation.relation import Relation
from relax.types import DomainLike, Predicate, as_domain

try:  # Python 3.11+
    from typing import Self  # type: ignore
except ImportError:  # Python <3.11
    from typing_extensions import Self  # type: ignore

logger = logging.getLogger(__name__)

TableLike = TypingUnion[npt.ArrayLike, Iterable[bool]]


class RelationMatrix(Relation):
    __slots__ = ("_domain", "_table")
    """
    A binary relation backed by an explicit incidence table.

    Attributes:
        _domain: The (X, Y) pair of ordered sets
        _table: Flat read-only boolean array, row-major by the X index
    """

    def __init__(self, domain: DomainLike, table: TableLike) -> None:
        """
        Args:
            domain: The (X, Y) pair of ordered sets, or one set for (X, X)
            table: |X|*|Y| booleans, flat or nested by rows

        Raises:
            TableLengthMismatchError: If table does not have |X|*|Y| entries
        """
        domain_x, domain_y = as_domain(domain)
        expected = len(domain_x) * len(domain_y)
        if isinstance(table, np.ndarray):
            flat = table.astype(bool).ravel()
        else:
            rows = list(table)
            try:
                flat = np.array(rows, dtype=bool).ravel()
            except ValueError:
                # ragged nested rows
                actual = sum(int(np.size(row)) for row in rows)
                raise TableLengthMismatchError(expected, actual) from None

        if flat.size != expected:
            raise TableLengthMismatchError(expected, int(flat.size))

        flat = flat.copy()
        flat.setflags(write=False)
        self._domain: Tuple[OrderedSet, OrderedSet] = (domain_x, domain_y)
        self._table: npt.NDArray[np.bool_] = flat

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_relation(cls, r: Relation) -> Self:
        """Capture every cell of r into an owned table."""
        rows, cols = r.shape
        logger.debug("Materializing %r as a %dx%d table", type(r).__name__, rows, cols)
        table = np.fromiter(
            (r.eval_at(ix, iy) for ix in range(rows) for iy in range(cols)),
            dtype=bool,
            count=rows * cols,
        )
        return cls(r.get_domain(), table)

    @classmethod
    def from_predicate(cls, sequence: Iterable[Any], predicate: Predicate) -> Self:
        """
        Build the homogeneous relation { (x, y) | predicate(x, y) } over sequence.

        The domain is the sequence stringified into an OrderedSet. Duplicates
        collapse to their first occurrence, which is the object passed to
        the predicate.
        """
        items = list(sequence)
        domain = OrderedSet(items)
        representatives: Dict[int, Any] = {}
        for item in items:
            representatives.setdefault(domain.index(item), item)
        ordered = [representatives[i] for i in range(len(domain))]
        table = [bool(predicate(x, y)) for x in ordered for y in ordered]
        return cls((domain, domain), table)

    @classmethod
    def empty(cls, domain: DomainLike) -> Self:
        domain_x, domain_y = as_domain(domain)
        return cls((domain_x, domain_y), np.zeros(len(domain_x) * len(domain_y), dtype=bool))

    @classmethod
    def universal(cls, domain: DomainLike) -> Self:
        domain_x, domain_y = as_domain(domain)
        return cls((domain_x, domain_y), np.ones(len(domain_x) * len(domain_y), dtype=bool))

    @classmethod
    def identity(cls, domain: DomainLike) -> Self:
        """
        Raises:
            DomainMismatchError: If X != Y
        """
        domain_x, domain_y = as_domain(domain)
        if domain_x != domain_y:
            DomainMismatchError.raise_not_homogeneous("identity", (domain_x, domain_y))
        return cls((domain_x, domain_x), np.eye(len(domain_x), dtype=bool))

    # ------------------------------------------------------------------
    # Relation contract
    # ------------------------------------------------------------------

    def get_domain(self) -> Tuple[OrderedSet, OrderedSet]:
        return self._domain

    def eval_at(self, ix: int, iy: int) -> bool:
        self.check_index(ix, iy)
        return bool(self._table[ix * len(self._domain[1]) + iy])

    # ------------------------------------------------------------------
    # Table access
    # ------------------------------------------------------------------

    @property
    def table(self) -> npt.NDArray[np.bool_]:
        """The flat read-only incidence table."""
        return self._table

    def as_matrix(self) -> npt.NDArray[np.bool_]:
        """The incidence table as a read-only |X| x |Y| view."""
        return self._table.reshape(self.shape)

    def to_rows(self) -> Sequence[Sequence[bool]]:
        return self.as_matrix().tolist()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RelationMatrix):
            return self._domain == other._domain and bool(
                np.array_equal(self._table, other._table)
            )
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((self._domain, self._table.tobytes()))

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"RelationMatrix({self._domain[0]} x {self._domain[1]}, {rows}x{cols})"
