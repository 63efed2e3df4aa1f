"""
bubble_sort.py — Bubble Sort
==============================
Generator-based bubble sort.  Yields a Step at:
  1. Every adjacent comparison            →  COMPARE
  2. Every inversion that gets fixed      →  SWAP
  3. The end of every outer pass          →  SORTED (the settled suffix)

All n passes run even when the array becomes sorted early, so the number
of comparisons is always n(n-1)/2.
"""

from typing import Generator, List, Sequence

from algorithms.step import Compare, Sorted, SortStep, Swap


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BubbleSort(a):",                           # 0
    "    n ← len(a)",                               # 1
    "    for i in 0 … n-1:",                        # 2
    "        for j in 0 … n-i-2:",                  # 3
    "            compare a[j], a[j+1]",             # 4
    "            if a[j] > a[j+1]:",                # 5
    "                swap a[j], a[j+1]",            # 6
    "        mark a[n-i-1 … n-1] sorted",           # 7
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bubble_sort(values: Sequence[int]) -> Generator[SortStep, None, None]:
    """
    Args:
        values : The input array.  Never mutated; a private copy is sorted.

    Yields:
        Compare / Swap / Sorted steps, each carrying a snapshot of the array.
    """

    array = list(values)
    n     = len(array)

    for i in range(n):
        for j in range(n - i - 1):
            yield Compare(indices=(j, j + 1), array=tuple(array))

            if array[j] > array[j + 1]:
                array[j], array[j + 1] = array[j + 1], array[j]
                yield Swap(indices=(j, j + 1), array=tuple(array))

        # after pass i the largest i+1 values sit at the end
        yield Sorted(indices=tuple(range(n - 1, n - 2 - i, -1)), array=tuple(array))
