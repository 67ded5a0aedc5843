"""Hypothesis strategies for domains and relations."""

from hypothesis import strategies as st

from relax.elements import OrderedSet
from relax.relation import RelationMatrix

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def domain_homogeneous(max_size: int = 6):
    """Domains ({1, ..., n}, {1, ..., n})."""
    return (
        st.integers(min_value=1, max_value=max_size)
        .map(lambda n: OrderedSet(range(1, n + 1)))
        .map(lambda s: (s, s))
    )


def domain_heterogeneous(max_size: int = 6):
    """Domains ({1, ..., n}, {a, ..., c}) for independent n and c."""
    return st.tuples(
        st.integers(min_value=1, max_value=max_size),
        st.integers(min_value=1, max_value=max_size),
    ).map(lambda nc: (OrderedSet(range(1, nc[0] + 1)), OrderedSet(ALPHABET[: nc[1]])))


def domain_arbitrary(max_size: int = 6):
    return st.one_of(domain_homogeneous(max_size), domain_heterogeneous(max_size))


def relation_for_domain(domain):
    size = len(domain[0]) * len(domain[1])
    return st.lists(st.booleans(), min_size=size, max_size=size).map(
        lambda table: RelationMatrix(domain, table)
    )


def relations(domains=None):
    domains = domain_arbitrary() if domains is None else domains
    return domains.flatmap(relation_for_domain)


@st.composite
def three_relations(draw, max_size: int = 5):
    """Three relations over one shared homogeneous domain."""
    domain = draw(domain_homogeneous(max_size))
    return (
        draw(relation_for_domain(domain)),
        draw(relation_for_domain(domain)),
        draw(relation_for_domain(domain)),
    )


@st.composite
def chainable_relations(draw, max_size: int = 4):
    """Relations p ⊆ W×X, q ⊆ X×Y, r ⊆ Y×Z that can be concatenated in order."""
    sizes = [draw(st.integers(min_value=1, max_value=max_size)) for _ in range(4)]
    sets = [
        OrderedSet(f"{name}{i}" for i in range(n))
        for name, n in zip("wxyz", sizes)
    ]
    p = draw(relation_for_domain((sets[0], sets[1])))
    q = draw(relation_for_domain((sets[1], sets[2])))
    r = draw(relation_for_domain((sets[2], sets[3])))
    return p, q, r
