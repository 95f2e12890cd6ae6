"""Lists, cons lists, clone-on-write data and sharing work between threads."""

from __future__ import annotations

import threading
from collections.abc import Iterator, MutableSequence, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import SimpleQueue


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: MutableSequence[int]) -> MutableSequence[int]:
    """Double every element of ``values`` in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Sequence[int]) -> list[int]:
    """Return a new list with every element of ``values`` doubled."""
    return [value * 2 for value in values]


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; ``rest`` is None at the end of the list."""

    value: int
    rest: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.rest


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding 1, 2 and 3."""
    return Cons(1, Cons(2, Cons(3)))


class Cow:
    """Data that is borrowed until it must be changed, then copied and owned."""

    def __init__(self, data: Sequence[int], *, owned: bool = False) -> None:
        if owned and not isinstance(data, list):
            data = list(data)
        self._data = data
        self._owned = owned

    @property
    def owned(self) -> bool:
        return self._owned

    @property
    def data(self) -> Sequence[int]:
        return self._data

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def to_mut(self) -> list[int]:
        """Return the owned list, copying the borrowed data first if needed."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if one is negative."""
    if any(value < 0 for value in cow):
        data = cow.to_mut()
        data[:] = [abs(value) for value in data]
    return cow


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every ``workers``-th number per offset, one thread per offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")

    def total(offset: int) -> int:
        return sum(n for n in numbers if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(total, range(workers)))


@dataclass
class Queue:
    """Ten numbers split into two halves to be sent by two threads."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_queue(queue: Queue) -> list[int]:
    """Send both halves from two threads over one channel and collect what arrives."""
    channel: SimpleQueue = SimpleQueue()
    done = object()

    def sender(values: Sequence[int]) -> None:
        try:
            for value in values:
                channel.put(value)
        finally:
            channel.put(done)

    halves = (queue.first_half, queue.second_half)
    threads = [threading.Thread(target=sender, args=(half,)) for half in halves]
    for thread in threads:
        thread.start()

    received = []
    finished = 0
    while finished < len(threads):
        item = channel.get()
        if item is done:
            finished += 1
        else:
            received.append(item)
    for thread in threads:
        thread.join()
    return received