from typing import Callable, assert_never

from .cons import NIL, Cons, ConsList, Nil


def tail[T](l: ConsList[T]) -> ConsList[T]:
    match l:
        case Nil():
            return NIL
        case Cons(_, rest):
            return rest
        case _:
            assert_never(l)


def set_head[T](l: ConsList[T], new_head: T) -> ConsList[T]:
    match l:
        case Nil():
            return NIL
        case Cons(_, rest):
            return Cons(new_head, rest)
        case _:
            assert_never(l)


def drop[T](l: ConsList[T], n: int) -> ConsList[T]:
    """Drop up to n elements. The result is the original suffix, not a copy."""
    while n >= 1:
        match l:
            case Nil():
                return NIL
            case Cons(_, rest):
                l = rest
                n -= 1
            case _:
                assert_never(l)
    return l


def drop_while[T](l: ConsList[T], f: Callable[[T], bool]) -> ConsList[T]:
    while True:
        match l:
            case Cons(head, rest) if f(head):
                l = rest
            case Cons() | Nil():
                return l
            case _:
                assert_never(l)


def init[T](l: ConsList[T]) -> ConsList[T]:
    """
    Everything but the last element. Recursive, one frame per element.
    Every link gets rebuilt, so nothing is shared with l.
    """
    match l:
        case Nil() | Cons(_, Nil()):
            return NIL
        case Cons(head, rest):
            return Cons(head, init(rest))
        case _:
            assert_never(l)
