# ordered_set.py
from bisect import bisect_left
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    Optional,
    Tuple,
    Union,
)

from relax.exceptions import ElementNotFoundError

# An element is either a scalar label or a nested set
SetElement = Union[str, "OrderedSet"]

# Sort key of an element: scalars are tagged 0, nested sets 1
ElementKey = Tuple[Any, ...]

# Positions of an element in the left and right operand of a merge walk
WalkStep = Tuple[Optional[int], Optional[int], SetElement]


def as_element(value: Any) -> SetElement:
    """
    Convert an arbitrary value into its canonical set element.

    Strings and OrderedSets are kept, python sets become nested OrderedSets
    and every other value is stringified.
    """
    if isinstance(value, (str, OrderedSet)):
        return value
    if isinstance(value, (set, frozenset)):
        return OrderedSet(value)
    return str(value)


def element_key(element: SetElement) -> ElementKey:
    """
    Return the total-order key of a canonical element.

    Every scalar precedes every nested set. Scalars compare as strings,
    nested sets compare lexicographically by their ordered elements.
    """
    if isinstance(element, OrderedSet):
        return (1, element.keys)
    return (0, element)


class OrderedSet:
    __slots__ = ("_elements", "_keys", "_hash")
    """
    A finite, deduplicated, totally ordered and immutable set of elements.

    Iteration follows the total order of the elements, not the order in
    which they were supplied. Elements are strings or nested OrderedSets.

    Attributes:
        _elements: The canonical elements in ascending order
        _keys: Sort keys of _elements, used for lookups and comparisons
        _hash: Cached hash of the key tuple
    """

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        canonical: Dict[ElementKey, SetElement] = {}
        for value in elements:
            element = as_element(value)
            canonical.setdefault(element_key(element), element)
        self._keys: Tuple[ElementKey, ...] = tuple(sorted(canonical))
        self._elements: Tuple[SetElement, ...] = tuple(
            canonical[k] for k in self._keys
        )
        self._hash: int = hash(self._keys)

    @property
    def keys(self) -> Tuple[ElementKey, ...]:
        return self._keys

    def cardinality(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[SetElement]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> SetElement:
        return self._elements[index]

    def __bool__(self) -> bool:
        return bool(self._elements)

    def position(self, value: Any) -> Optional[int]:
        """
        Return the position of value in the ordered sequence, or None if absent.

        Lookup is a bisection over the sorted keys.
        """
        key = element_key(as_element(value))
        i = bisect_left(self._keys, key)
        if i < len(self._keys) and self._keys[i] == key:
            return i
        return None

    def index(self, value: Any) -> int:
        """
        Return the position of value in the ordered sequence.

        Raises:
            ElementNotFoundError: If value is not a member of this set
        """
        i = self.position(value)
        if i is None:
            raise ElementNotFoundError(as_element(value))
        return i

    def __contains__(self, value: object) -> bool:
        return self.position(value) is not None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedSet):
            return self._keys == other._keys
        return NotImplemented

    def __hash__(self) -> int:
        return self._hash

    # ------------------------------------------------------------------
    # Lazy merge walks
    # ------------------------------------------------------------------

    def _walk(self, other: "OrderedSet") -> Iterator[WalkStep]:
        """
        Merge-walk self and other in ascending order.

        Yields (i, j, element) where i and j are the positions of element in
        self and other, or None on the side that lacks it.
        """
        i, j = 0, 0
        a, b = self._keys, other._keys
        while i < len(a) and j < len(b):
            if a[i] == b[j]:
                yield i, j, self._elements[i]
                i += 1
                j += 1
            elif a[i] < b[j]:
                yield i, None, self._elements[i]
                i += 1
            else:
                yield None, j, other._elements[j]
                j += 1
        for k in range(i, len(a)):
            yield k, None, self._elements[k]
        for k in range(j, len(b)):
            yield None, k, other._elements[k]

    def iter_union(self, other: "OrderedSet") -> Iterator[SetElement]:
        """Yield the elements of self ∪ other in ascending order."""
        for _, _, element in self._walk(other):
            yield element

    def iter_intersection(self, other: "OrderedSet") -> Iterator[SetElement]:
        """Yield the elements of self ∩ other in ascending order."""
        for i, j, element in self._walk(other):
            if i is not None and j is not None:
                yield element

    def intersection_enumerated(
        self, other: "OrderedSet"
    ) -> Iterator[Tuple[Tuple[int, SetElement], Tuple[int, SetElement]]]:
        """
        Yield ((i, x), (j, x)) for every common element x, where i is its
        position in self and j its position in other.
        """
        for i, j, element in self._walk(other):
            if i is not None and j is not None:
                yield (i, element), (j, other._elements[j])

    # ------------------------------------------------------------------
    # Set algebra
    # ------------------------------------------------------------------

    def is_subset(self, other: "OrderedSet") -> bool:
        """Return True if every element of self is also in other."""
        if len(self) > len(other):
            return False
        return all(j is not None for i, j, _ in self._walk(other) if i is not None)

    def is_superset(self, other: "OrderedSet") -> bool:
        """Return True if every element of other is also in self."""
        return other.is_subset(self)

    def union(self, *others: Iterable[Any]) -> "OrderedSet":
        result = self
        for other in others:
            result = OrderedSet(result.iter_union(_coerce(other)))
        return result

    def intersection(self, *others: Iterable[Any]) -> "OrderedSet":
        result = self
        for other in others:
            result = OrderedSet(result.iter_intersection(_coerce(other)))
        return result

    def difference(self, *others: Iterable[Any]) -> "OrderedSet":
        result = self
        for other in others:
            other_set = _coerce(other)
            result = OrderedSet(
                element
                for i, j, element in result._walk(other_set)
                if i is not None and j is None
            )
        return result

    def __or__(self, other: object) -> "OrderedSet":
        """Implement the | operator (union)."""
        if isinstance(other, OrderedSet):
            return self.union(other)
        return NotImplemented

    def __and__(self, other: object) -> "OrderedSet":
        """Implement the & operator (intersection)."""
        if isinstance(other, OrderedSet):
            return self.intersection(other)
        return NotImplemented

    def __sub__(self, other: object) -> "OrderedSet":
        """Implement the - operator (difference)."""
        if isinstance(other, OrderedSet):
            return self.difference(other)
        return NotImplemented

    def __le__(self, other: object) -> bool:
        """Return True if self <= other (issubset)."""
        if isinstance(other, OrderedSet):
            return self.is_subset(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        """Return True if self < other (strict subset)."""
        if isinstance(other, OrderedSet):
            return self.is_subset(other) and self != other
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        """Return True if self >= other (issuperset)."""
        if isinstance(other, OrderedSet):
            return self.is_superset(other)
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        """Return True if self > other (strict superset)."""
        if isinstance(other, OrderedSet):
            return self.is_superset(other) and self != other
        return NotImplemented

    def __str__(self) -> str:
        return "{" + " ".join(str(e) for e in self._elements) + "}"

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._elements)!r})"


def _coerce(values: Iterable[Any]) -> OrderedSet:
    if isinstance(values, OrderedSet):
        return values
    return OrderedSet(values)


def as_members(values: Any) -> OrderedSet:
    """
    Coerce a subset argument to an OrderedSet.

    A bare string is one element, not an iterable of characters.
    """
    if isinstance(values, str):
        return OrderedSet([values])
    return _coerce(values)
