"""Binary max and min heaps, and an absolute-value priority queue."""

from __future__ import annotations

import heapq
import operator
from collections.abc import Callable, Iterable, Iterator

_Outranks = Callable[[int, int], bool]


def _sift_push(items: list[int], value: int, outranks: _Outranks) -> None:
    """Append value to an array-backed heap and restore the heap order."""
    items.append(value)
    idx = len(items) - 1
    while idx > 0:
        parent = (idx - 1) // 2
        if not outranks(value, items[parent]):
            break
        items[idx] = items[parent]
        idx = parent
    items[idx] = value


def _sift_pop(items: list[int], outranks: _Outranks) -> int:
    """Remove and return the top of an array-backed heap."""
    if not items:
        raise IndexError("pop from empty heap")
    top = items[0]
    last = items.pop()
    size = len(items)
    if size == 0:
        return top
    idx = 0
    while True:
        left = 2 * idx + 1
        if left >= size:
            break
        right = left + 1
        child = right if right < size and outranks(items[right], items[left]) else left
        if not outranks(items[child], last):
            break
        items[idx] = items[child]
        idx = child
    items[idx] = last
    return top


class MaxHeap:
    """Heap that pops its largest value first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        _sift_push(self._items, value, operator.gt)

    def pop(self) -> int:
        return _sift_pop(self._items, operator.gt)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Yield the stored values in level order."""
        return iter(list(self._items))


class MinHeap:
    """Heap that pops its smallest value first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        _sift_push(self._items, value, operator.lt)

    def pop(self) -> int:
        return _sift_pop(self._items, operator.lt)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Yield the stored values in level order."""
        return iter(list(self._items))


class AbsHeap:
    """Priority queue popping the smallest absolute value, the smaller value on ties."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[tuple[int, int]] = [(abs(v), v) for v in values]
        heapq.heapify(self._items)

    def push(self, value: int) -> None:
        heapq.heappush(self._items, (abs(value), value))

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty heap")
        return heapq.heappop(self._items)[1]

    def __len__(self) -> int:
        return len(self._items)


def run_heap_operations(heap: MaxHeap | MinHeap, values: Iterable[int]) -> str:
    """Apply operations to a heap: -1 shows it, 0 pops (0 if empty), others push.

    Returns the text the operations print.
    """
    parts: list[str] = []
    for value in values:
        if value == -1:
            parts.append("".join(f"{item} " for item in heap))
        elif value == 0:
            try:
                parts.append(f"{heap.pop()}\n")
            except IndexError:
                parts.append("0\n")
        else:
            heap.push(value)
    return "".join(parts)


def run_abs_heap_operations(values: Iterable[int]) -> list[int]:
    """Apply operations to an absolute-value heap: 0 pops (0 if empty), others push."""
    heap = AbsHeap()
    outputs: list[int] = []
    for value in values:
        if value == 0:
            outputs.append(heap.pop() if len(heap) else 0)
        else:
            heap.push(value)
    return outputs