"""Sorting engine: final state, step taxonomy, comparison counts, snapshot isolation."""

from collections import Counter

import pytest

from algorithms import sort
from algorithms.bubble_sort import bubble_sort
from algorithms.step import Compare, Sorted, Swap
from structures import generate_random_array

ALGORITHMS = ["bubble", "merge", "quick"]

SAMPLE_ARRAYS = [
    [3, 1, 2],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [7, 7, 7, 7],
    [42, 5, 17, 5, 99, 23, 5, 64],
    [2, 1],
]


# ---------------------------------------------------------------------------
# Properties shared by all three algorithms
# ---------------------------------------------------------------------------


class TestSortProperties:

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    @pytest.mark.parametrize("array", SAMPLE_ARRAYS)
    def test_final_snapshot_is_sorted(self, algorithm, array):
        steps = sort(algorithm, array)
        assert list(steps[-1].array) == sorted(array)

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_multiset_preserved_in_every_snapshot(self, algorithm):
        array = generate_random_array(30, seed=7)
        expected = Counter(array)
        for step in sort(algorithm, array):
            assert Counter(step.array) == expected

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_random_arrays_end_sorted(self, algorithm):
        for seed in range(10):
            array = generate_random_array(25, seed=seed)
            steps = sort(algorithm, array)
            assert list(steps[-1].array) == sorted(array)

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_input_not_mutated(self, algorithm):
        array = [9, 3, 7, 1]
        sort(algorithm, array)
        assert array == [9, 3, 7, 1]

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_deterministic(self, algorithm):
        array = generate_random_array(20, seed=3)
        assert sort(algorithm, array) == sort(algorithm, array)

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    @pytest.mark.parametrize("array", [[], [4]])
    def test_trivial_inputs_have_no_comparisons(self, algorithm, array):
        steps = sort(algorithm, array)
        assert not any(isinstance(s, Compare) for s in steps)

    @pytest.mark.parametrize("algorithm", ALGORITHMS)
    def test_snapshots_are_independent_copies(self, algorithm):
        steps = sort(algorithm, [4, 3, 2, 1])
        snapshots = [s.array for s in steps]
        assert all(isinstance(a, tuple) for a in snapshots)
        # history is not rewritten: the first snapshot still shows the input
        assert list(snapshots[0]) == [4, 3, 2, 1]

    def test_unknown_algorithm_raises(self):
        with pytest.raises(ValueError):
            sort("bogo", [1, 2])


# ---------------------------------------------------------------------------
# Bubble sort
# ---------------------------------------------------------------------------


class TestBubbleSort:

    def test_worked_example(self):
        steps = sort("bubble", [3, 1, 2])
        assert list(steps[-1].array) == [1, 2, 3]
        assert sum(isinstance(s, Compare) for s in steps) == 3
        assert any(isinstance(s, Swap) for s in steps)

    def test_exact_trace(self):
        steps = list(bubble_sort([3, 1, 2]))
        assert steps == [
            Compare(indices=(0, 1), array=(3, 1, 2)),
            Swap(indices=(0, 1), array=(1, 3, 2)),
            Compare(indices=(1, 2), array=(1, 3, 2)),
            Swap(indices=(1, 2), array=(1, 2, 3)),
            Sorted(indices=(2,), array=(1, 2, 3)),
            Compare(indices=(0, 1), array=(1, 2, 3)),
            Sorted(indices=(2, 1), array=(1, 2, 3)),
            Sorted(indices=(2, 1, 0), array=(1, 2, 3)),
        ]

    @pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 17])
    def test_compare_count_is_n_choose_2(self, n):
        array = generate_random_array(n, seed=n)
        steps = sort("bubble", array)
        assert sum(isinstance(s, Compare) for s in steps) == n * (n - 1) // 2

    def test_compare_count_independent_of_values(self):
        ascending = sort("bubble", [1, 2, 3, 4, 5, 6])
        descending = sort("bubble", [6, 5, 4, 3, 2, 1])
        count = lambda steps: sum(isinstance(s, Compare) for s in steps)
        assert count(ascending) == count(descending) == 15

    def test_no_swaps_on_sorted_input(self):
        steps = sort("bubble", [1, 2, 3, 4])
        assert not any(isinstance(s, Swap) for s in steps)

    def test_one_sorted_step_per_pass(self):
        steps = sort("bubble", [5, 1, 4, 2, 8])
        sorted_steps = [s for s in steps if isinstance(s, Sorted)]
        assert len(sorted_steps) == 5
        for i, step in enumerate(sorted_steps):
            assert sorted(step.indices) == list(range(5 - i - 1, 5))

    def test_swap_only_fixes_inversions(self):
        steps = sort("bubble", [4, 2, 2, 1])
        for prev, step in zip(steps, steps[1:]):
            if isinstance(step, Swap):
                i, j = step.indices
                assert isinstance(prev, Compare) and prev.indices == (i, j)
                assert prev.array[i] > prev.array[j]


# ---------------------------------------------------------------------------
# Merge sort
# ---------------------------------------------------------------------------


class TestMergeSort:

    def test_every_compare_followed_by_single_index_swap(self):
        steps = sort("merge", [8, 3, 5, 1, 9, 2])
        for i, step in enumerate(steps):
            if isinstance(step, Compare):
                nxt = steps[i + 1]
                assert isinstance(nxt, Swap)
                assert len(nxt.indices) == 1

    def test_no_sorted_steps(self):
        steps = sort("merge", [8, 3, 5, 1])
        assert not any(isinstance(s, Sorted) for s in steps)

    def test_compare_indices_point_at_run_heads(self):
        steps = sort("merge", [3, 1])
        assert steps[0] == Compare(indices=(0, 1), array=(3, 1))
        assert steps[1] == Swap(indices=(0,), array=(1, 3))
        # left run tail copy
        assert steps[2] == Swap(indices=(1,), array=(1, 3))
        assert len(steps) == 3

    def test_writes_cover_each_merged_range(self):
        # n = 4: two merges of size 2, one of size 4 → 8 writes
        steps = sort("merge", [4, 3, 2, 1])
        assert sum(isinstance(s, Swap) for s in steps) == 8

    def test_stable_on_ties(self):
        # equal heads take the left run: no rotation, position unchanged
        steps = sort("merge", [5, 5])
        assert steps[0] == Compare(indices=(0, 1), array=(5, 5))
        assert steps[1] == Swap(indices=(0,), array=(5, 5))


# ---------------------------------------------------------------------------
# Quick sort
# ---------------------------------------------------------------------------


class TestQuickSort:

    def test_compares_against_last_element(self):
        steps = sort("quick", [3, 6, 1, 5, 4])
        first_partition = steps[:4]
        compares = [s for s in first_partition if isinstance(s, Compare)]
        assert all(c.indices[1] == 4 for c in compares)

    def test_pivot_placement_swap_closes_partition(self):
        # [2, 1]: compare (0,1); 2 < 1 false; pivot swap (0, 1)
        steps = sort("quick", [2, 1])
        assert steps == [
            Compare(indices=(0, 1), array=(2, 1)),
            Swap(indices=(0, 1), array=(1, 2)),
        ]

    def test_compare_count_on_sorted_input_is_quadratic(self):
        # Lomuto with last-element pivot degrades on sorted input
        n = 8
        steps = sort("quick", list(range(n)))
        assert sum(isinstance(s, Compare) for s in steps) == n * (n - 1) // 2

    def test_no_sorted_steps(self):
        assert not any(isinstance(s, Sorted) for s in sort("quick", [3, 1, 2]))
