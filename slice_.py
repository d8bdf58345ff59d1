from typing import Any, Callable, Dict, List

import numpy as np


def sum_(values):
    # object dtype keeps Python ints, which do not overflow
    return np.sum(np.asarray(values, dtype=object)) if len(values) else 0


def sum_by(values, fn: Callable[[Any], Any]):
    return sum_([fn(value) for value in values])


def mean(values) -> float:
    if len(values) == 0:
        raise ValueError("mean of empty sequence")
    return float(np.mean(values))


def index_of(values, target) -> int:
    """Return the index of the first occurrence of target, or -1."""
    for i, value in enumerate(values):
        if value == target:
            return i
    return -1


def last_index_of(values, target) -> int:
    for i in range(len(values) - 1, -1, -1):
        if values[i] == target:
            return i
    return -1


def map_(values, fn: Callable[[Any], Any]) -> List[Any]:
    return [fn(value) for value in values]


def for_each(values, fn: Callable[[Any], None]) -> None:
    for value in values:
        fn(value)


_missing = object()


def reduce(values, fn: Callable[[Any, Any], Any], initial=_missing):
    """Fold values from the left. Without `initial` the first value seeds the fold."""
    iterator = iter(values)
    if initial is _missing:
        try:
            accumulator = next(iterator)
        except StopIteration:
            raise ValueError("reduce of empty sequence with no initial value")
    else:
        accumulator = initial
    for value in iterator:
        accumulator = fn(accumulator, value)
    return accumulator


def reverse(values) -> List[Any]:
    return list(values)[::-1]


def unique(values) -> List[Any]:
    return unique_by(values, lambda value: value)


def unique_by(values, fn: Callable[[Any], Any]) -> List[Any]:
    # First occurrence wins, input order is kept.
    seen = set()
    result = []
    for value in values:
        key = fn(value)
        if key not in seen:
            seen.add(key)
            result.append(value)
    return result


def every(values, predicate: Callable[[Any], bool]) -> bool:
    return all(predicate(value) for value in values)


def some(values, predicate: Callable[[Any], bool]) -> bool:
    return any(predicate(value) for value in values)


def contains(values, target) -> bool:
    return index_of(values, target) != -1


def group_by(values, fn: Callable[[Any], Any]) -> Dict[Any, List[Any]]:
    groups: Dict[Any, List[Any]] = {}
    for value in values:
        groups.setdefault(fn(value), []).append(value)
    return groups


def chunk(values, size: int) -> List[List[Any]]:
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    values = list(values)
    return [values[i:i + size] for i in range(0, len(values), size)]
