"""
quick_sort.py — Quick Sort (Lomuto partition)
===============================================
Pivot = last element of the current sub-range.

Yields:
  1. COMPARE (j, high) for every element examined against the pivot
  2. SWAP (i, j) whenever an element smaller than the pivot is moved
     behind the partition boundary (also when i == j)
  3. SWAP (i+1, high) placing the pivot at its resolved position

Recurses on [low, p-1] and [p+1, high].  No SORTED steps are emitted;
sortedness is visible only in the final array.
"""

from typing import Generator, List, Sequence

from algorithms.step import Compare, SortStep, Swap


PSEUDOCODE: List[str] = [
    "def QuickSort(a, low, high):",                 # 0
    "    if low < high:",                           # 1
    "        p ← Partition(a, low, high)",          # 2
    "        QuickSort(a, low, p - 1)",             # 3
    "        QuickSort(a, p + 1, high)",            # 4
    "def Partition(a, low, high):",                 # 5
    "    pivot ← a[high];  i ← low - 1",            # 6
    "    for j in low … high-1:",                   # 7
    "        if a[j] < pivot:",                     # 8
    "            i ← i + 1;  swap a[i], a[j]",      # 9
    "    swap a[i+1], a[high]",                     # 10
    "    return i + 1",                             # 11
]


def quick_sort(values: Sequence[int]) -> Generator[SortStep, None, None]:
    """Yields Compare / Swap steps for a full quick sort of `values`."""
    array = list(values)
    yield from _sort(array, 0, len(array) - 1)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _sort(array: List[int], low: int, high: int) -> Generator[SortStep, None, None]:
    if low < high:
        # Partition is a generator too; its return value is the pivot index
        pivot_index = yield from _partition(array, low, high)
        yield from _sort(array, low, pivot_index - 1)
        yield from _sort(array, pivot_index + 1, high)


def _partition(array: List[int], low: int, high: int) -> Generator[SortStep, None, int]:
    pivot = array[high]
    i = low - 1

    for j in range(low, high):
        yield Compare(indices=(j, high), array=tuple(array))

        if array[j] < pivot:
            i += 1
            array[i], array[j] = array[j], array[i]
            yield Swap(indices=(i, j), array=tuple(array))

    array[i + 1], array[high] = array[high], array[i + 1]
    yield Swap(indices=(i + 1, high), array=tuple(array))

    return i + 1
