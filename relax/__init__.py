"""Finite binary relations, their operator algebra and property predicates."""

from relax.elements import OrderedSet, SetElement, as_element
from relax.exceptions import (
    DomainMismatchError,
    ElementNotFoundError,
    IndexOutOfRangeError,
    NotAPartialOrderError,
    RelaxError,
    TableLengthMismatchError,
)
from relax.relation import (
    Complement,
    Concatenation,
    Converse,
    Empty,
    Identity,
    Intersection,
    Relation,
    RelationMatrix,
    Union,
    Universal,
    complement,
    concatenation,
    converse,
    eq,
    intersection,
    relations_equal,
    union,
)
from relax.random import generate_random
from relax.render import to_table, to_tex
from relax.types import Domain, DomainLike, RenderConfig, as_domain

__all__ = [
    "OrderedSet",
    "SetElement",
    "as_element",
    "Domain",
    "DomainLike",
    "as_domain",
    "RenderConfig",
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
    "generate_random",
    "to_tex",
    "to_table",
    "RelaxError",
    "IndexOutOfRangeError",
    "ElementNotFoundError",
    "DomainMismatchError",
    "TableLengthMismatchError",
    "NotAPartialOrderError",
]
