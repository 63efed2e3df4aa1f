"""
merge_sort.py — Merge Sort
============================
Top-down merge sort.  Split at mid = (low + high) // 2, sort [low, mid]
and [mid+1, high], then merge the two runs back into place.

The merge works inside the array: when the right head wins it is rotated
in front of the remaining left run.  Every snapshot is therefore a
permutation of the input, and the two compared heads are always at the
positions the COMPARE step names.

Yields during each merge:
  • COMPARE (k, j) before every take-left / take-right decision, where k
    and j are the current positions of the left and right heads
  • SWAP (k,) right after output position k is filled
  • SWAP (k,) for every element of the tail once one side runs out

"Swap" here means "array position k was written", not an exchange of two
positions.  Merge sort emits no SORTED steps.
"""

from typing import Generator, List, Sequence

from algorithms.step import Compare, SortStep, Swap


PSEUDOCODE: List[str] = [
    "def MergeSort(a, low, high):",                     # 0
    "    if low < high:",                               # 1
    "        mid ← (low + high) // 2",                  # 2
    "        MergeSort(a, low, mid)",                   # 3
    "        MergeSort(a, mid + 1, high)",              # 4
    "        Merge(a, low, mid, high)",                 # 5
    "def Merge(a, low, mid, high):",                    # 6
    "    k ← low;  j ← mid + 1",                        # 7
    "    while both runs are non-empty:",               # 8
    "        if a[j] < a[k]: rotate a[j] in front of a[k]",  # 9
    "        k ← k + 1;  j ← k + len(left run)",        # 10
    "    the leftover run is already in place",         # 11
]


def merge_sort(values: Sequence[int]) -> Generator[SortStep, None, None]:
    """Yields Compare / Swap steps for a full merge sort of `values`."""
    array = list(values)
    yield from _sort(array, 0, len(array) - 1)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _sort(array: List[int], low: int, high: int) -> Generator[SortStep, None, None]:
    if low < high:
        mid = (low + high) // 2
        yield from _sort(array, low, mid)
        yield from _sort(array, mid + 1, high)
        yield from _merge(array, low, mid, high)


def _merge(array: List[int], low: int, mid: int, high: int) -> Generator[SortStep, None, None]:
    # The unmerged left run always sits at array[k : k + n_left], directly
    # followed by the unmerged right run, so every snapshot is a permutation
    # of the input.
    n_left  = mid - low + 1
    n_right = high - mid
    k = low

    while n_left and n_right:
        j = k + n_left
        yield Compare(indices=(k, j), array=tuple(array))

        # ties take the left run, keeping the sort stable
        if array[k] > array[j]:
            value = array[j]
            array[k + 1:j + 1] = array[k:j]
            array[k] = value
            n_right -= 1
        else:
            n_left -= 1

        yield Swap(indices=(k,), array=tuple(array))
        k += 1

    # the tail is already in place; each position still counts as written
    while k <= high:
        yield Swap(indices=(k,), array=tuple(array))
        k += 1
