from typing import Callable, assert_never

from .cons import Cons, ConsList, Nil


def fold_right[A, B](l: ConsList[A], z: B, f: Callable[[A, B], B]) -> B:
    """
    f(e1, f(e2, ... f(en, z)))

    Plain structural recursion, one frame per element, so a list longer
    than the interpreter's recursion limit raises RecursionError.
    """
    match l:
        case Nil():
            return z
        case Cons(head, tail):
            return f(head, fold_right(tail, z, f))
        case _:
            assert_never(l)


def fold_left[A, B](l: ConsList[A], z: B, f: Callable[[B, A], B]) -> B:
    """f(... f(f(z, e1), e2) ..., en), as a loop so any length is fine"""
    acc = z
    while True:
        match l:
            case Nil():
                return acc
            case Cons(head, tail):
                acc = f(acc, head)
                l = tail
            case _:
                assert_never(l)
