"""
Relation Type Definitions
=========================

Shared aliases and configuration objects.

Domain Concepts:
- **Domain**: the pair (X, Y) of ordered sets a relation is defined over
- **Incidence table**: the flat, row-major |X|*|Y| boolean table of a relation
- **Predicate**: a binary test used to materialize a relation from a sequence
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Tuple, TypeAlias, Union

from relax.elements.ordered_set import OrderedSet

# ============================================================================
# Core Types
# ============================================================================

# The (X, Y) pair of a relation; homogeneous iff both sides are equal
Domain: TypeAlias = Tuple[OrderedSet, OrderedSet]

# A single set stands for the homogeneous domain (set, set)
DomainLike: TypeAlias = Union[OrderedSet, Domain]

# A binary test on two members of a sequence
Predicate: TypeAlias = Callable[[Any, Any], bool]

# Position of a cell in the incidence matrix
IndexPair: TypeAlias = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================


@dataclass(frozen=True)
class RenderConfig:
    """Tokens used when a relation is rendered as a LaTeX array."""

    true_token: str = r"\true "
    false_token: str = r"\false"
    row_terminator: str = r"\\"
    separator: str = r"\hline"


# ============================================================================
# Normalization
# ============================================================================


def as_domain(domain: DomainLike) -> Domain:
    """
    Normalize a domain argument to its (X, Y) pair.

    A single OrderedSet stands for the homogeneous domain (set, set).

    Raises:
        TypeError: If domain is neither an OrderedSet nor a pair of them
    """
    if isinstance(domain, OrderedSet):
        return domain, domain
    if (
        isinstance(domain, (tuple, list))
        and len(domain) == 2
        and all(isinstance(side, OrderedSet) for side in domain)
    ):
        return domain[0], domain[1]
    raise TypeError(
        f"A domain is an OrderedSet or a pair of OrderedSets, got {type(domain).__name__}"
    )
