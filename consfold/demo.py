from typing import Callable

from frozendict import frozendict

from .arithmetic import product_fold_left, sum_cons_list, sum_fold_left
from .cons import NIL, Cons, ConsList, Nil, of
from .deconstruct import drop, drop_while, init, set_head, tail
from .fold import fold_left, fold_right
from .format import mk_string
from .structure import (
    append_fold_right,
    concatenate,
    length,
    length_fold_left,
    map_cons_list,
    reverse,
)


def match_result(l: ConsList[int]) -> int:
    """First matching case wins, so [1, 2, 3, 4, 5] gives 1 + 2"""
    match l:
        case Cons(x, Cons(2, Cons(4, _))):
            return x
        case Nil():
            return 42
        case Cons(x, Cons(y, Cons(3, Cons(4, _)))):
            return x + y
        case Cons(h, t):
            return h + sum_cons_list(t)
        case _:
            return 101


def _one_to_five() -> ConsList[int]:
    return of(1, 2, 3, 4, 5)


SCENARIOS: frozendict[str, Callable[[], object]] = frozendict(
    {
        "match_result": lambda: match_result(_one_to_five()),
        "tail": lambda: mk_string(tail(_one_to_five())),
        "set_head": lambda: mk_string(set_head(_one_to_five(), 6)),
        "drop": lambda: mk_string(drop(_one_to_five(), 2)),
        "drop_while": lambda: mk_string(drop_while(_one_to_five(), lambda x: x < 4)),
        "init": lambda: mk_string(init(_one_to_five())),
        "fold_right": lambda: mk_string(fold_right(of(1, 2, 3), NIL, Cons)),
        "length": lambda: length(_one_to_five()),
        "fold_left": lambda: fold_left(
            _one_to_five(), "0", lambda acc, x: f"{x}, {acc}"
        ),
        "sum_fold_left": lambda: sum_fold_left(_one_to_five()),
        "product_fold_left": lambda: product_fold_left(_one_to_five()),
        "length_fold_left": lambda: length_fold_left(_one_to_five()),
        "reverse": lambda: mk_string(reverse(_one_to_five())),
        "append": lambda: mk_string(append_fold_right(_one_to_five(), of(7, 8, 9))),
        "concatenate": lambda: mk_string(
            concatenate(of(_one_to_five(), of(7, 8, 9), of(10, 11, 12)))
        ),
        "map": lambda: mk_string(map_cons_list(_one_to_five(), lambda x: x * 2), " "),
    }
)


def main() -> None:
    for scenario in SCENARIOS.values():
        print(scenario())
