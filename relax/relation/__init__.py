"""Relation contract, operators and materialized relations."""

from relax.relation.relation import Relation, eq, relations_equal
from relax.relation.operators import (
    Complement,
    Concatenation,
    Converse,
    Intersection,
    Union,
    complement,
    concatenation,
    converse,
    intersection,
    union,
)
from relax.relation.constants import Empty, Identity, Universal
from relax.relation.matrix import RelationMatrix

__all__ = [
    "Relation",
    "RelationMatrix",
    "Complement",
    "Concatenation",
    "Converse",
    "Intersection",
    "Union",
    "Empty",
    "Identity",
    "Universal",
    "complement",
    "concatenation",
    "converse",
    "intersection",
    "union",
    "eq",
    "relations_equal",
]
