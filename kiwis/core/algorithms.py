"""
Generic data algorithms. This module is experimental at the moment and not
intended for public consumption
"""
import math
from typing import Any, Dict, Hashable, List, Sequence, Tuple

from kiwis.core.dtypes.inference import is_bool, is_float, is_hashable, is_number


def _strict_key(value: Any) -> Hashable:
    """
    Hashable key implementing strict equality between Series values.

    Numbers compare by value (``1 == 1.0``), but never equal booleans or
    strings holding the same digits; NaN equals NaN; values that cannot be
    hashed (lists, dicts, ...) are only equal to themselves.
    """
    if is_bool(value):
        return ("bool", bool(value))
    if is_number(value):
        if is_float(value) and math.isnan(value):
            return ("nan",)
        return ("number", value)
    if is_hashable(value):
        return (type(value).__name__, value)
    return ("id", id(value))


def unique(values: Sequence) -> List:
    """
    Return the distinct values in order of first appearance.

    Parameters
    ----------
    values : sequence

    Returns
    -------
    list

    Examples
    --------
    >>> unique([3, 1, 3, 2, 1])
    [3, 1, 2]
    >>> unique([1, "1", True])
    [1, '1', True]
    """
    seen = set()
    uniques = []
    for value in values:
        key = _strict_key(value)
        if key not in seen:
            seen.add(key)
            uniques.append(value)
    return uniques


def value_counts(
    values: Sequence,
    sort: bool = True,
    ascending: bool = False,
    normalize: bool = False,
) -> List[Tuple[Any, Any]]:
    """
    Compute the number of occurrences of each distinct value.

    Parameters
    ----------
    values : sequence
    sort : bool, default True
        Sort by count. Sorting is stable, so equal counts keep the order of
        first appearance.
    ascending : bool, default False
        Sort in ascending order.
    normalize : bool, default False
        If True then compute relative frequencies (count / number of values).

    Returns
    -------
    list of (value, count) tuples
        Values appear in order of first appearance unless `sort` is set.

    Examples
    --------
    >>> value_counts(["a", "b", "a", "c", "b", "a"])
    [('a', 3), ('b', 2), ('c', 1)]
    >>> value_counts(["a", "b", "a"], sort=False, normalize=True)
    [('a', 0.6666666666666666), ('b', 0.3333333333333333)]
    """
    counts: Dict[Hashable, List] = {}
    for value in values:
        key = _strict_key(value)
        if key in counts:
            counts[key][1] += 1
        else:
            counts[key] = [value, 1]

    result = [(value, count) for value, count in counts.values()]

    if sort:
        result.sort(key=lambda pair: pair[1], reverse=not ascending)

    if normalize:
        total = len(values)
        result = [(value, count / total) for value, count in result]

    return result
