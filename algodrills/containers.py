"""Stack, queue and deque containers, plus command interpreters for each."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable

_MISSING = -1


class Stack:
    """Last-in, first-out stack."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = list(values)

    def push(self, value: int) -> None:
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class Queue:
    """First-in, first-out queue."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def push(self, value: int) -> None:
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def front(self) -> int:
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def back(self) -> int:
        if not self._items:
            raise IndexError("back of empty queue")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class Deque:
    """Double-ended queue."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def push_front(self, value: int) -> None:
        self._items.appendleft(value)

    def push_back(self, value: int) -> None:
        self._items.append(value)

    def pop_front(self) -> int:
        if not self._items:
            raise IndexError("pop from empty deque")
        return self._items.popleft()

    def pop_back(self) -> int:
        if not self._items:
            raise IndexError("pop from empty deque")
        return self._items.pop()

    def front(self) -> int:
        if not self._items:
            raise IndexError("front of empty deque")
        return self._items[0]

    def back(self) -> int:
        if not self._items:
            raise IndexError("back of empty deque")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def _or_missing(action: Callable[[], int]) -> Callable[[], int]:
    def call() -> int:
        try:
            return action()
        except IndexError:
            return _MISSING

    return call


def _execute(commands: Iterable[str], handlers: dict[str, Callable[..., int | None]]) -> list[int]:
    outputs: list[int] = []
    for line in commands:
        words = line.split()
        if not words:
            continue
        name, *args = words
        handler = handlers.get(name)
        if handler is None:
            continue
        result = handler(*(int(arg) for arg in args))
        if result is not None:
            outputs.append(result)
    return outputs


def execute_stack(commands: Iterable[str]) -> list[int]:
    """Run stack commands (push N, pop, size, empty, top) and return what they print."""
    stack = Stack()
    return _execute(
        commands,
        {
            "push": stack.push,
            "pop": _or_missing(stack.pop),
            "top": _or_missing(stack.top),
            "size": lambda: len(stack),
            "empty": lambda: int(stack.is_empty()),
        },
    )


def execute_queue(commands: Iterable[str]) -> list[int]:
    """Run queue commands (push N, pop, size, empty, front, back) and return what they print."""
    queue = Queue()
    return _execute(
        commands,
        {
            "push": queue.push,
            "pop": _or_missing(queue.pop),
            "front": _or_missing(queue.front),
            "back": _or_missing(queue.back),
            "size": lambda: len(queue),
            "empty": lambda: int(queue.is_empty()),
        },
    )


def execute_deque(commands: Iterable[str]) -> list[int]:
    """Run deque commands and return what they print."""
    items = Deque()
    return _execute(
        commands,
        {
            "push_front": items.push_front,
            "push_back": items.push_back,
            "pop_front": _or_missing(items.pop_front),
            "pop_back": _or_missing(items.pop_back),
            "front": _or_missing(items.front),
            "back": _or_missing(items.back),
            "size": lambda: len(items),
            "empty": lambda: int(items.is_empty()),
        },
    )