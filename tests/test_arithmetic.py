import pytest

from consfold.arithmetic import (
    product2,
    product_cons_list,
    product_fold_left,
    sum2,
    sum_cons_list,
    sum_fold_left,
)
from consfold.cons import NIL, Cons, of, to_cons_list

INT_LISTS = [[], [0], [1, 2, 3, 4, 5], [-3, 7, 0, 12], list(range(200))]

FLOAT_LISTS = [
    [],
    [2.5],
    [1.0, 2.0, 3.0, 4.0, 5.0],
    [1.5, -2.0, 0.25, 8.0],
    [3.0, 0.0, 7.0],
    [-1.0, 0.0],
]


def test_sum_of_nil():
    assert 0 == sum_cons_list(NIL)
    assert 0 == sum2(NIL)
    assert 0 == sum_fold_left(NIL)


def test_sum():
    assert 15 == sum_cons_list(of(1, 2, 3, 4, 5))


@pytest.mark.parametrize("ints", INT_LISTS)
def test_sum_forms_agree(ints: list[int]):
    l = to_cons_list(ints)
    assert sum(ints) == sum_cons_list(l) == sum2(l) == sum_fold_left(l)


def test_product_of_nil():
    assert 1.0 == product_cons_list(NIL)
    assert 1.0 == product2(NIL)
    assert 1.0 == product_fold_left(NIL)


def test_product():
    assert 120.0 == product_cons_list(of(1.0, 2.0, 3.0, 4.0, 5.0))
    assert 120.0 == product_fold_left(of(1, 2, 3, 4, 5))


@pytest.mark.parametrize("ds", FLOAT_LISTS)
def test_product_forms_agree(ds: list[float]):
    l = to_cons_list(ds)
    assert product_cons_list(l) == product2(l) == product_fold_left(l)


def test_product_stops_at_zero():
    # Anything after the 0.0 is never multiplied
    l = Cons(2.0, Cons(0.0, of("not a number")))
    assert 0.0 == product_cons_list(l)  # type: ignore
    with pytest.raises(TypeError):
        product2(l)  # type: ignore
