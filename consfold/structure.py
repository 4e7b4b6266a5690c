from typing import Callable, assert_never

from .cons import NIL, Cons, ConsList, Nil
from .fold import fold_left, fold_right


def length[T](l: ConsList[T]) -> int:
    return fold_right(l, 0, lambda _, acc: acc + 1)


def length_fold_left[T](l: ConsList[T]) -> int:
    return fold_left(l, 0, lambda acc, _: acc + 1)


def reverse[T](l: ConsList[T]) -> ConsList[T]:
    empty: ConsList[T] = NIL
    return fold_left(l, empty, lambda acc, x: Cons(x, acc))


def append[T](a1: ConsList[T], a2: ConsList[T]) -> ConsList[T]:
    """a1's links are copied, a2 becomes the shared suffix"""
    match a1:
        case Nil():
            return a2
        case Cons(head, tail):
            return Cons(head, append(tail, a2))
        case _:
            assert_never(a1)


def append_fold_right[T](a1: ConsList[T], a2: ConsList[T]) -> ConsList[T]:
    return fold_right(a1, a2, Cons)


def concatenate[T](ll: ConsList[ConsList[T]]) -> ConsList[T]:
    empty: ConsList[T] = NIL
    return fold_right(ll, empty, append_fold_right)


def map_cons_list[A, B](l: ConsList[A], f: Callable[[A], B]) -> ConsList[B]:
    empty: ConsList[B] = NIL
    return fold_right(l, empty, lambda x, acc: Cons(f(x), acc))
