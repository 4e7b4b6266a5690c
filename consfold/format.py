from .cons import ConsList, iter_cons_list


def mk_string[T](l: ConsList[T], sep: str = "") -> str:
    """
    Elements run together by default, so of(1, 2, 3) gives "123".
    Pass sep for anything more readable.
    """
    return sep.join(map(str, iter_cons_list(l)))
