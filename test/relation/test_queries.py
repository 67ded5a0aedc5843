import pytest

from relax.elements import OrderedSet
from relax.exceptions import ElementNotFoundError, NotAPartialOrderError
from relax.logger import relax_logger
from relax.relation import RelationMatrix

T, F = True, False


@pytest.fixture
def r():
    #    a  b  c
    # 1  T  T  F
    # 2  F  T  F
    # 3  F  F  F
    return RelationMatrix(
        (OrderedSet([1, 2, 3]), OrderedSet("abc")),
        [
            T, T, F,
            F, T, F,
            F, F, F,
        ],
    )


@pytest.fixture
def divides():
    return RelationMatrix.from_predicate(range(1, 7), lambda a, b: b % a == 0)


@pytest.fixture
def strictly_less():
    return RelationMatrix.from_predicate(range(1, 5), lambda a, b: a < b)


# =============================================================================
# Source, range, images
# =============================================================================


def test_source_and_range(r):
    assert r.source() == OrderedSet([1, 2])
    assert r.range() == OrderedSet("ab")


def test_image(r):
    assert r.image([1, 2]) == OrderedSet("ab")
    assert r.image([2]) == OrderedSet("b")
    assert r.image([3]) == OrderedSet()
    assert r.image([]) == OrderedSet()


def test_image_strict(r):
    assert r.image_strict([1, 2]) == OrderedSet("b")
    assert r.image_strict([1, 2, 3]) == OrderedSet()
    # vacuously true for every y
    assert r.image_strict([]) == OrderedSet("abc")


def test_preimage(r):
    assert r.preimage(["b"]) == OrderedSet([1, 2])
    assert r.preimage(["a", "c"]) == OrderedSet([1])
    assert r.preimage(["c"]) == OrderedSet()


def test_preimage_strict(r):
    assert r.preimage_strict(["a", "b"]) == OrderedSet([1])
    assert r.preimage_strict(["b"]) == OrderedSet([1, 2])
    assert r.preimage_strict([]) == OrderedSet([1, 2, 3])


def test_queries_accept_ordered_sets(r):
    assert r.image(OrderedSet([1])) == r.image(["1"])


def test_image_of_foreign_element_raises(r):
    with pytest.raises(ElementNotFoundError) as excinfo:
        r.image([1, 9])
    assert excinfo.value.element == "9"
    assert excinfo.value.side == "X"


def test_preimage_of_foreign_element_raises(r):
    with pytest.raises(ElementNotFoundError) as excinfo:
        r.preimage_strict(["z"])
    assert excinfo.value.side == "Y"


def test_eval_by_element(r):
    assert r.eval(1, "a")
    assert not r.eval(2, "a")
    with pytest.raises(ElementNotFoundError):
        r.eval(4, "a")
    with pytest.raises(ElementNotFoundError) as excinfo:
        r.eval(1, "d")
    assert excinfo.value.side == "Y"


# =============================================================================
# Order queries
# =============================================================================


def test_divides_is_a_partial_order(divides):
    assert divides.is_partial_order()
    assert divides.is_lefttotal()


def test_upset_and_downset(divides):
    assert divides.upset(2) == OrderedSet([2, 4, 6])
    assert divides.downset(6) == OrderedSet([1, 2, 3, 6])
    assert divides.upset(1) == OrderedSet(range(1, 7))
    assert divides.downset(5) == OrderedSet([1, 5])


def test_bounds(divides):
    assert divides.bound_upper([2, 3]) == OrderedSet([6])
    assert divides.bound_lower([4, 6]) == OrderedSet([1, 2])
    assert divides.bound_upper([4, 6]) == OrderedSet()
    # every element bounds the empty set
    assert divides.bound_upper([]) == OrderedSet(range(1, 7))
    assert divides.bound_lower([]) == OrderedSet(range(1, 7))


def test_greatest_and_smallest_elements(divides):
    assert divides.elements_greatest([1, 2, 4]) == OrderedSet([4])
    assert divides.elements_smallest([1, 2, 4]) == OrderedSet([1])
    assert divides.elements_smallest([2, 3]) == OrderedSet()
    assert divides.elements_greatest([2, 3]) == OrderedSet()


def test_supremum_and_infimum(divides):
    assert divides.supremum([2, 3]) == OrderedSet([6])
    assert divides.infimum([4, 6]) == OrderedSet([2])
    assert divides.supremum([4, 6]) == OrderedSet()
    assert divides.infimum([5, 3]) == OrderedSet([1])


def test_supremum_of_empty_set_is_least_element(divides):
    assert divides.supremum([]) == OrderedSet([1])
    # 4, 5 and 6 are all maximal, no greatest element exists
    assert divides.infimum([]) == OrderedSet()


def test_order_query_on_foreign_element_raises(divides):
    with pytest.raises(ElementNotFoundError):
        divides.upset(7)
    with pytest.raises(ElementNotFoundError):
        divides.supremum([2, 8])


@pytest.mark.parametrize(
    "query, argument",
    [
        ("upset", 1),
        ("downset", 1),
        ("bound_upper", [1]),
        ("bound_lower", [1]),
        ("elements_greatest", [1]),
        ("elements_smallest", [1]),
        ("supremum", [1]),
        ("infimum", [1]),
    ],
)
def test_order_queries_require_partial_order(strictly_less, query, argument):
    with pytest.raises(NotAPartialOrderError):
        getattr(strictly_less, query)(argument)


def test_order_queries_on_heterogeneous_relation_raise(r):
    with pytest.raises(NotAPartialOrderError):
        r.upset(1)


def test_supremum_is_traced_when_enabled(divides):
    relax_logger.clear()
    relax_logger.disabled = False
    try:
        divides.supremum([2, 3])
    finally:
        relax_logger.disabled = True
    transcript = relax_logger.get_transcript()
    assert "Supremum" in transcript
    assert "Upper bounds: {6}" in transcript
    assert "Least upper bounds: {6}" in transcript
    relax_logger.clear()


def test_disabled_tracer_records_nothing(divides):
    relax_logger.clear()
    divides.infimum([4, 6])
    assert relax_logger.get_transcript() == ""


def test_string_subset_is_one_element():
    x = OrderedSet(["ab", "a", "b"])
    r = RelationMatrix(
        x,
        [
            T, F, F,
            F, T, F,
            F, F, T,
        ],
    )
    assert r.image("ab") == OrderedSet(["ab"])
    assert r.preimage_strict("b") == OrderedSet(["b"])
    with pytest.raises(ElementNotFoundError):
        r.image("abc")


def test_order_query_string_subset_is_one_element(divides):
    assert divides.bound_upper("2") == divides.upset(2)
    assert divides.elements_greatest("4") == OrderedSet([4])
