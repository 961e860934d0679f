from typing import Callable, Iterable, Sequence, TypeVar

From = TypeVar("From")
To = TypeVar("To")
Ctx = TypeVar("Ctx")

class FoldError(Exception):
    """
    raised by the *_err variants when the combining fn raises.\n
    index: source position of the failing element\n
    value: accumulated value at the time of failure\n
    cause: the exception fn raised (also chained as __cause__)
    """
    def __init__(self, index: int, value: any, cause: Exception):
        super().__init__(f"Fold stopped at index {index}: {cause}")
        self.index = index
        self.value = value
        self.cause = cause

def reduce(from_seq: Iterable[From], fn: Callable[[From, To, int], To], initial: To) -> To:
    to = initial
    for idx, item in enumerate(from_seq):
        to = fn(item, to, idx)
    return to

def reduce_err(from_seq: Iterable[From], fn: Callable[[From, To, int], To], initial: To) -> To:
    to = initial
    for idx, item in enumerate(from_seq):
        try:
            to = fn(item, to, idx)
        except Exception as e:
            # nothing after idx is visited
            raise FoldError(idx, to, e) from e
    return to

def map_(from_seq: Sequence[From], fn: Callable[[From, int], To]) -> list[To]:
    def assign(item: From, to_list: list[To], idx: int) -> list[To]:
        to_list[idx] = fn(item, idx)
        return to_list

    return reduce(from_seq, assign, [None] * len(from_seq))

def map_err(from_seq: Sequence[From], fn: Callable[[From, int], To]) -> list[To]:
    # on failure FoldError.value is the partial list; idx and beyond stay None
    def assign(item: From, to_list: list[To], idx: int) -> list[To]:
        to_list[idx] = fn(item, idx)
        return to_list

    return reduce_err(from_seq, assign, [None] * len(from_seq))

def for_each_err(from_seq: Iterable[From], fn: Callable[[From, int], None]):
    def call(item: From, _, idx: int):
        fn(item, idx)

    reduce_err(from_seq, call, None)

def for_each_err1(from_seq: Iterable[From], ctx: Ctx, fn: Callable[[Ctx, From, int], None]):
    def call(item: From, _, idx: int):
        fn(ctx, item, idx)

    reduce_err(from_seq, call, None)
