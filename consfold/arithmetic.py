from operator import add, mul
from typing import assert_never

from .cons import Cons, ConsList, Nil
from .fold import fold_left, fold_right


def sum_cons_list(ints: ConsList[int]) -> int:
    match ints:
        case Nil():
            return 0
        case Cons(x, xs):
            return x + sum_cons_list(xs)
        case _:
            assert_never(ints)


def sum2(ints: ConsList[int]) -> int:
    return fold_right(ints, 0, add)


def sum_fold_left(ints: ConsList[int]) -> int:
    return fold_left(ints, 0, add)


def product_cons_list(ds: ConsList[float]) -> float:
    """Stops at the first 0.0 without looking at the rest"""
    match ds:
        case Nil():
            return 1.0
        case Cons(0.0, _):
            return 0.0
        case Cons(x, xs):
            return x * product_cons_list(xs)
        case _:
            assert_never(ds)


def product2(ds: ConsList[float]) -> float:
    return fold_right(ds, 1.0, mul)


def product_fold_left(ds: ConsList[float]) -> float:
    return fold_left(ds, 1.0, mul)
