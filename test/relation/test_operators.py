import pytest

from relax.elements import OrderedSet
from relax.exceptions import DomainMismatchError, IndexOutOfRangeError
from relax.relation import (
    Complement,
    Concatenation,
    Converse,
    Empty,
    Identity,
    Intersection,
    RelationMatrix,
    Union,
    Universal,
    complement,
    concatenation,
    converse,
    intersection,
    relations_equal,
    union,
)

T, F = True, False
N8 = range(1, 9)


@pytest.fixture
def le():
    return RelationMatrix.from_predicate(N8, lambda x, y: x <= y)


@pytest.fixture
def ge():
    return RelationMatrix.from_predicate(N8, lambda x, y: x >= y)


@pytest.fixture
def lt():
    return RelationMatrix.from_predicate(N8, lambda x, y: x < y)


def test_union_of_le_and_ge_is_universal(le, ge):
    domain = le.get_domain()
    assert relations_equal(union(le, ge), Universal(domain))
    assert le | ge == RelationMatrix.universal(domain)


def test_intersection_of_le_and_ge_is_identity(le, ge):
    domain = le.get_domain()
    assert relations_equal(intersection(le, ge), Identity(domain))
    assert le & ge == RelationMatrix.identity(domain)


def test_complement_of_ge_is_lt(ge, lt):
    assert relations_equal(complement(ge), lt)
    assert ~ge == lt


def test_converse_of_le_is_ge(le, ge):
    assert converse(le) == ge
    assert le.T == ge


def test_converse_swaps_heterogeneous_domain():
    x = OrderedSet([1, 2, 3])
    y = OrderedSet(["a", "b"])
    r = RelationMatrix((x, y), [[T, F], [F, F], [T, T]])
    c = Converse(r)
    assert c.get_domain() == (y, x)
    assert c.shape == (2, 3)
    assert c.eval("a", "1")
    assert c.eval("b", "3")
    assert not c.eval("b", "1")
    with pytest.raises(IndexOutOfRangeError):
        c.eval_at(2, 0)


def test_complement_keeps_domain():
    x = OrderedSet([1, 2, 3])
    y = OrderedSet(["a", "b"])
    r = RelationMatrix((x, y), [[T, F], [F, F], [T, T]])
    c = Complement(r)
    assert c.get_domain() == (x, y)
    assert c.freeze().table.tolist() == [F, T, T, T, F, F]


def test_concatenation_chains_through_shared_domain():
    x = OrderedSet([1, 2])
    y = OrderedSet(["a", "b", "c"])
    z = OrderedSet(["u", "v"])
    # 1 -> a, 2 -> b, 2 -> c
    p = RelationMatrix((x, y), [[T, F, F], [F, T, T]])
    # a -> v, c -> u
    q = RelationMatrix((y, z), [[F, T], [F, F], [T, F]])

    pq = concatenation(p, q)
    assert pq.get_domain() == (x, z)
    assert pq.freeze().to_rows() == [[F, T], [T, F]]
    assert p @ q == pq


def test_concatenation_is_not_commutative():
    s = OrderedSet([0, 1])
    r = RelationMatrix((s, s), [[F, T], [F, F]])
    t = RelationMatrix((s, s), [[T, F], [F, F]])
    # r ; t relates nothing, t ; r relates 0 to 1
    assert concatenation(r, t) == Empty((s, s))
    assert concatenation(t, r) == r
    assert not relations_equal(concatenation(r, t), concatenation(t, r))


def test_concatenation_rejects_unchainable_domains():
    x = OrderedSet([1, 2])
    y = OrderedSet(["a", "b"])
    p = RelationMatrix.universal((x, y))
    with pytest.raises(DomainMismatchError) as excinfo:
        Concatenation(p, p)
    assert excinfo.value.operator == "Concatenation"
    assert "Concatenation" in str(excinfo.value)


def test_concatenation_checks_indices_with_empty_middle_domain():
    x = OrderedSet([1, 2])
    empty = OrderedSet()
    p = RelationMatrix.empty((x, empty))
    q = RelationMatrix.empty((empty, x))
    pq = Concatenation(p, q)
    assert pq.shape == (2, 2)
    assert not pq.eval_at(1, 1)
    with pytest.raises(IndexOutOfRangeError):
        pq.eval_at(2, 0)


@pytest.mark.parametrize("operator", [Union, Intersection])
def test_binary_operators_reject_different_domains(operator):
    x = OrderedSet([1, 2])
    y = OrderedSet(["a", "b"])
    p = RelationMatrix.universal((x, x))
    q = RelationMatrix.universal((x, y))
    with pytest.raises(DomainMismatchError) as excinfo:
        operator(p, q)
    assert excinfo.value.operator == operator.__name__
    assert excinfo.value.left == (x, x)
    assert excinfo.value.right == (x, y)


def test_operator_overloads_reject_non_relations(le):
    with pytest.raises(TypeError):
        le | 1
    with pytest.raises(TypeError):
        le @ "x"


def test_operators_compose_lazily(le, ge, lt):
    """A chain of operators evaluates through to the operand tables."""
    chain = ~(le.T | lt) & ge
    # le.T is ge, so ge | lt is universal and its complement is empty
    assert chain == Empty(le.get_domain())
    assert isinstance(chain, Intersection)


def test_reflexive_closure(lt, le):
    closure = lt.closure_reflexive()
    assert closure == le
    assert closure.is_reflexive()


def test_symmetric_closure(lt):
    closure = lt.closure_symmetric()
    assert closure.is_symmetric()
    assert closure == ~Identity(lt.get_domain())


def test_closures_require_homogeneous_domain():
    x = OrderedSet([1, 2])
    y = OrderedSet(["a", "b"])
    r = RelationMatrix.empty((x, y))
    with pytest.raises(DomainMismatchError):
        r.closure_reflexive()
    with pytest.raises(DomainMismatchError):
        r.closure_symmetric()


def test_relation_is_not_equal_to_other_types(le):
    assert le != "le"
    assert (Union(le, le) == 3) is False


def test_lazy_relations_are_unhashable(le):
    with pytest.raises(TypeError):
        hash(Complement(le))


@pytest.mark.parametrize(
    "build",
    [
        lambda r: Complement(r),
        lambda r: Converse(r),
        lambda r: Union(r, r),
        lambda r: Intersection(r, r),
        lambda r: Concatenation(r, r),
        lambda r: Empty(r.get_domain()),
        lambda r: Identity(r.get_domain()),
    ],
)
def test_relations_have_no_instance_dict(build):
    s = OrderedSet(["a", "b"])
    relation = build(RelationMatrix.identity(s))
    assert not hasattr(relation, "__dict__")
    with pytest.raises(AttributeError):
        relation.extra = 1
