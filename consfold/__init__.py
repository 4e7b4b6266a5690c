from .arithmetic import (
    product2,
    product_cons_list,
    product_fold_left,
    sum2,
    sum_cons_list,
    sum_fold_left,
)
from .cons import NIL, Cons, ConsList, Nil, iter_cons_list, of, to_cons_list
from .deconstruct import drop, drop_while, init, set_head, tail
from .fold import fold_left, fold_right
from .format import mk_string
from .structure import (
    append,
    append_fold_right,
    concatenate,
    length,
    length_fold_left,
    map_cons_list,
    reverse,
)

__all__ = [
    "NIL",
    "Cons",
    "ConsList",
    "Nil",
    "append",
    "append_fold_right",
    "concatenate",
    "drop",
    "drop_while",
    "fold_left",
    "fold_right",
    "init",
    "iter_cons_list",
    "length",
    "length_fold_left",
    "map_cons_list",
    "mk_string",
    "of",
    "product2",
    "product_cons_list",
    "product_fold_left",
    "reverse",
    "set_head",
    "sum2",
    "sum_cons_list",
    "sum_fold_left",
    "tail",
    "to_cons_list",
]
