"""Sorting algorithms that report every step they take."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import ClassVar

from sortscope.items import TIME_INTERVAL, Complexity, Item

Snapshot = list[Item]


def _snapshot(items: list[Item]) -> Snapshot:
    return [copy.copy(item) for item in items]


class Sorter(ABC):
    """A sorting algorithm whose progress can be watched step by step."""

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    complexity: ClassVar[Complexity] = Complexity()
    interval: ClassVar[float] = TIME_INTERVAL

    @abstractmethod
    def steps(self, items: list[Item]) -> Iterator[Snapshot]:
        """Sort ``items`` in place, yielding a copy of the list after each step."""


class BubbleSort(Sorter):
    name = "bubblesort"
    description = (
        "Bubble sort, sometimes referred to as sinking sort, is a simple sorting "
        "algorithm that repeatedly steps through the input list element by element,"
        "comparing the current element with the one after it, swapping their values if "
        "needed. These passes through the list are repeated until no swaps had to be "
        "performed during a pass, meaning that the list has become fully sorted.\n\n"
        "This simple algorithm performs poorly in real world use and is used primarily "
        "as an educational tool. More efficient algorithms such as quicksort, timsort, or "
        "merge sort are used by the sorting libraries built into popular programming languages "
        "such as Python and Java. However, if parallel processing is allowed, bubble sort "
        "sorts in O(n) time, making it considerably faster than parallel implementations of "
        "insertion sort or selection sort which do not parallelize as effectively."
    )
    complexity = Complexity(
        time_best="O(n)", time_avg="O(n^2)", time_worst="O(n^2)", space_worst="O(1)"
    )

    def steps(self, items: list[Item]) -> Iterator[Snapshot]:
        last = len(items) - 1
        for _ in range(last):
            swapped = False
            for j in range(last):
                if items[j].value > items[j + 1].value:
                    items[j], items[j + 1] = items[j + 1], items[j]
                    items[j + 1].focused = True
                    yield _snapshot(items)
                    swapped = True
                    items[j + 1].focused = False
            if not swapped:
                break


class InsertionSort(Sorter):
    name = "insertionsort"
    description = (
        "Insertion sort is a simple sorting algorithm that builds the final sorted array "
        "(or list) one item at a time by comparisons. It is much less efficient on large "
        "lists than more advanced algorithms such as quicksort, heapsort, or merge sort. "
        "However, insertion sort provides several advantages: \n\n"
        "1) Simple Implementation \n"
        "2) Efficient over small data sets \n"
        "3) Stable: preserves order of duplicate keys."
    )
    complexity = Complexity(
        time_best="O(n)", time_avg="O(n^2)", time_worst="O(n^2)", space_worst="O(1)"
    )

    def steps(self, items: list[Item]) -> Iterator[Snapshot]:
        for start in range(len(items)):
            j = start
            while j > 0 and items[j - 1].value > items[j].value:
                items[j], items[j - 1] = items[j - 1], items[j]
                items[j - 1].focused = True
                yield _snapshot(items)
                items[j - 1].focused = False
                j -= 1


class SelectionSort(Sorter):
    name = "selectionsort"
    description = (
        "Selection sort is an in place comparison sorting algorithm. It has quadratic time complexity "
        "which makes it inefficient on large lists, and generally performs worse than the similar insertion sort. "
        "Selection sort is noted for its simplicity and has performance advantages over more complicated algorithms "
        "in certain situations, particularly where auxiliary memory is limited.\n\n"
        "The algorithm divides the input list into two parts: a sorted sublist of items which is built up from left to "
        "right at the front of the list and a sublist of the remaining unsorted items that occupy the rest of the list. "
        "Initially, the sorted sublist is empty and the unsorted sublist is the entire input list. The algorithm proceeds "
        "by finding the smallest element in the unsorted sublist, swapping it with the leftmost unsorted element "
        "and moving the sublist boundaries one element to the right."
    )
    complexity = Complexity(
        time_best="O(n^2)", time_avg="O(n^2)", time_worst="O(n^2)", space_worst="O(1)"
    )

    def steps(self, items: list[Item]) -> Iterator[Snapshot]:
        for i in range(len(items) - 1):
            items[i].focused = True
            smallest = i
            for j in range(i + 1, len(items)):
                items[j].focused = True
                if items[j].value < items[smallest].value:
                    smallest = j
                yield _snapshot(items)
                items[j].focused = False
            if smallest != i:
                items[i], items[smallest] = items[smallest], items[i]
            items[i].focused = False
            items[smallest].focused = False


class MergeSort(Sorter):
    name = "mergesort"
    interval = TIME_INTERVAL / 2

    def steps(self, items: list[Item]) -> Iterator[Snapshot]:
        yield from self._sort(items, 0, len(items))

    def _sort(self, items: list[Item], low: int, high: int) -> Iterator[Snapshot]:
        if high - low <= 1:
            return
        mid = (low + high) // 2
        yield from self._sort(items, low, mid)
        yield from self._sort(items, mid, high)
        yield from self._merge(items, low, mid, high)

    @staticmethod
    def _merge(items: list[Item], low: int, mid: int, high: int) -> Iterator[Snapshot]:
        left = items[low:mid]
        right = items[mid:high]
        i = j = 0
        for target in range(low, high):
            if i >= len(left):
                chosen = right[j]
                j += 1
            elif j >= len(right):
                chosen = left[i]
                i += 1
            elif left[i].value < right[j].value:
                chosen = left[i]
                i += 1
            else:
                chosen = right[j]
                j += 1
            position = next(p for p in range(low, high) if items[p] is chosen)
            items[position], items[target] = items[target], items[position]
            yield _snapshot(items)


class QuickSort(Sorter):
    name = "quicksort"
    complexity = Complexity(
        time_best="O(nlogn)",
        time_avg="O(nlogn)",
        time_worst="O(n^2)",
        space_worst="O(logn)",
    )

    def steps(self, items: list[Item]) -> Iterator[Snapshot]:
        self._quicksort(items, 0, len(items) - 1)
        yield _snapshot(items)

    def _quicksort(self, items: list[Item], low: int, high: int) -> None:
        if low < high:
            pivot = self._partition(items, low, high)
            self._quicksort(items, low, pivot - 1)
            self._quicksort(items, pivot + 1, high)

    @staticmethod
    def _partition(items: list[Item], low: int, high: int) -> int:
        pivot = items[high]
        boundary = low
        for j in range(low, high):
            if items[j].value < pivot.value:
                items[boundary], items[j] = items[j], items[boundary]
                boundary += 1
        items[boundary], items[high] = items[high], items[boundary]
        return boundary


def default_sorters() -> list[Sorter]:
    """Return the algorithms offered in the menu, in display order."""
    return [InsertionSort(), BubbleSort(), SelectionSort(), MergeSort(), QuickSort()]