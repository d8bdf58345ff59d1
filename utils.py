from typing import Any, Callable

# A comparator returns True when `a` must sit closer to the root than `b`.
Comparator = Callable[[Any, Any], bool]


def greater(a, b) -> bool:
    """Max-heap ordering: the larger element dominates."""
    return a > b


def less(a, b) -> bool:
    """Min-heap ordering: the smaller element dominates."""
    return a < b


def by_key(key: Callable[[Any], Any], compare: Comparator) -> Comparator:
    """Build a comparator that orders elements on `key(element)`."""
    def compare_by_key(a, b) -> bool:
        return compare(key(a), key(b))
    return compare_by_key


def is_heap(data, size: int, compare: Comparator) -> bool:
    """Check that every node in data[:size] dominates its children."""
    for i in range(size):
        for child in (2 * i + 1, 2 * i + 2):
            if child < size and compare(data[child], data[i]):
                return False
    return True
