from typing import Any, List

from logger import print_
from rwlock import RWLock
from utils import Comparator


class EmptyHeapError(IndexError):
    """Raised when popping or peeking a heap with no elements."""


class Heap:
    """
    Array-backed binary heap over a caller-owned list.

    The node at index i has its children at 2i+1 and 2i+2. Only the first
    `index` slots of `data` belong to the heap; any slot past it is left
    alone. The list is not copied, so every holder of `lock` sees the same
    storage.
    """

    def __init__(self, lock: RWLock, data: List[Any], compare: Comparator):
        self.lock = lock
        self.data = data
        self.compare = compare

        with self.lock.write_locked():
            self.index = len(data)
            self._heapify()

    @classmethod
    def _wrap(cls, lock, data, compare):
        # Bypasses __init__ so the caller can heapify under a lock it already holds.
        heap = cls.__new__(cls)
        heap.lock = lock
        heap.data = data
        heap.index = len(data)
        heap.compare = compare
        return heap

    def push(self, value):
        with self.lock.write_locked():
            if self.index < len(self.data):
                self.data[self.index] = value
            else:
                self.data.append(value)
            self.index += 1
            self._sift_up(self.index - 1)

    def pop(self):
        with self.lock.write_locked():
            if self.index == 0:
                print_("pop on empty heap")
                raise EmptyHeapError("no element to remove")

            root = self.data[0]
            self.index -= 1
            # The old root rests just past the logical end, as in heapsort.
            self._swap(0, self.index)
            self._sift_down(self.index, 0)
            return root

    def peek(self):
        with self.lock.read_locked():
            if self.index == 0:
                raise EmptyHeapError("no element to peek")
            return self.data[0]

    def size(self) -> int:
        with self.lock.read_locked():
            return self.index

    def get_values(self) -> List[Any]:
        """Return a copy of the elements currently in the heap, root first."""
        with self.lock.read_locked():
            return self.data[:self.index]

    def __len__(self):
        return self.size()

    def _heapify(self):
        for i in range(self.index // 2 - 1, -1, -1):
            self._sift_down(self.index, i)
        print_("heapified %d elements", self.index)

    def _swap(self, i, j):
        self.data[i], self.data[j] = self.data[j], self.data[i]

    # Helper function to maintain heap property from child to parent
    def _sift_up(self, i):
        parent = (i - 1) // 2
        while i > 0 and self.compare(self.data[i], self.data[parent]):
            self._swap(i, parent)
            i = parent
            parent = (i - 1) // 2

    # Helper function to maintain heap property from parent to child,
    # looking only at data[:size]
    def _sift_down(self, size, i):
        while True:
            left = 2 * i + 1
            right = 2 * i + 2
            dominant = i

            if left < size and self.compare(self.data[left], self.data[dominant]):
                dominant = left
            if right < size and self.compare(self.data[right], self.data[dominant]):
                dominant = right

            if dominant == i:
                break

            self._swap(i, dominant)
            i = dominant


def from_list(lock: RWLock, data: List[Any], compare: Comparator) -> Heap:
    """Heapify `data` in place, bottom-up, and return the heap wrapping it."""
    return Heap(lock, data, compare)
