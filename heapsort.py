from typing import Any, List

from heap_ import Heap
from logger import print_
from rwlock import RWLock
from utils import Comparator


def sort(lock: RWLock, data: List[Any], compare: Comparator) -> List[Any]:
    """
    Sort `data` in place with heapsort and return it.

    The final order is the inverse of the heap order: with a max-heap
    comparator (`greater`) the list ends up ascending, with a min-heap
    comparator (`less`) it ends up descending. Each pass moves the current
    root to the back of the shrinking heap region.
    """
    with lock.write_locked():
        heap = Heap._wrap(lock, data, compare)
        heap._heapify()

        print_("sorting %d elements", heap.index)
        for i in range(heap.index - 1, 0, -1):
            heap._swap(0, i)
            heap._sift_down(i, 0)

    return data
