from typing import Sequence

def slice_idx(seq: Sequence, i: int) -> int:
    # python modulo is already non-negative; empty seq raises ZeroDivisionError
    return i % len(seq)

def slice_at(seq: Sequence, i: int) -> any:
    return seq[slice_idx(seq, i)]

def is_ends_with(source: Sequence, ends: Sequence) -> bool:
    if len(ends) > len(source):
        return False

    # empty separator or empty buffer never matches
    if len(ends) == 0 or len(source) == 0:
        return False

    for i in range(len(ends)):
        idx = -(i + 1)
        if slice_at(ends, idx) != slice_at(source, idx):
            return False

    return True

def contains(seq: Sequence, e: any) -> bool:
    for item in seq:
        if item == e:
            return True

    return False
