from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, TypeVar, assert_never

T = TypeVar("T", covariant=True)

type ConsList[T] = Cons[T] | Nil


@dataclass(frozen=True, eq=False)
class Nil:
    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Nil)

    def __hash__(self) -> int:
        return hash(Nil)

    def __repr__(self) -> str:
        return "Nil()"


NIL = Nil()


@dataclass(frozen=True, eq=False)
class Cons(Generic[T]):
    """
    One link of the list. Tails are shared freely between lists since
    nothing here can be reassigned after construction.

    The dataclass-generated __eq__ and __repr__ would recurse down the
    tail, so long lists would hit the recursion limit just by being
    compared or printed. These walk the links instead.
    """

    head: T
    tail: ConsList[T]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Cons):
            return False

        left: ConsList[Any] = self
        right: ConsList[Any] = other
        while isinstance(left, Cons) and isinstance(right, Cons):
            if left is right:
                return True
            if left.head != right.head:
                return False
            left, right = left.tail, right.tail

        return isinstance(left, Nil) and isinstance(right, Nil)

    def __hash__(self) -> int:
        return hash(tuple(iter_cons_list(self)))

    def __repr__(self) -> str:
        return f"Cons[{', '.join(map(repr, iter_cons_list(self)))}]"


def to_cons_list[T](it: Iterable[T]) -> ConsList[T]:
    items = tuple(it)
    l: ConsList[T] = NIL
    for item in reversed(items):
        l = Cons(item, l)
    return l


def of[T](*items: T) -> ConsList[T]:
    return to_cons_list(items)


def iter_cons_list[T](l: ConsList[T]) -> Iterator[T]:
    while True:
        match l:
            case Cons(head, tail):
                yield head
                l = tail
            case Nil():
                return
            case _:
                assert_never(l)
