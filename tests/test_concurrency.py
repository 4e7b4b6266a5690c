from concurrent.futures import ThreadPoolExecutor

from consfold.arithmetic import sum_fold_left
from consfold.cons import to_cons_list
from consfold.structure import length_fold_left, reverse


def test_shared_list_read_from_many_threads():
    n = 5_000
    shared = to_cons_list(range(n))
    expected_reversed = to_cons_list(range(n - 1, -1, -1))

    def read(_: int) -> tuple[int, int, bool]:
        return (
            length_fold_left(shared),
            sum_fold_left(shared),
            reverse(shared) == expected_reversed,
        )

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(read, range(32)))

    assert [(n, n * (n - 1) // 2, True)] * 32 == results
    assert to_cons_list(range(n)) == shared
