"""
missing types & inference
"""
import math
from typing import Any, Iterable, Sequence

import numpy as np

from kiwis.core.dtypes.inference import is_bool, is_float, is_list_like, is_number

# falsy values that still count as data by default
DEFAULT_KEEP = (0, False)


def _same_value(left, right) -> bool:
    """
    Strict equality used to match values against a ``keep`` list.

    Booleans only match booleans, numbers only match numbers (so ``False``
    does not match ``0``), and NaN matches NaN.
    """
    if is_bool(left) or is_bool(right):
        return is_bool(left) and is_bool(right) and bool(left) == bool(right)
    if is_float(left) and is_float(right) and math.isnan(left) and math.isnan(right):
        return True
    if is_number(left) != is_number(right):
        return False
    try:
        return bool(left == right)
    except (TypeError, ValueError):
        return left is right


def _is_falsy(obj) -> bool:
    if obj is None:
        return True
    if is_float(obj) and math.isnan(obj):
        return True
    if is_bool(obj):
        return not obj
    if is_number(obj):
        return obj == 0
    if isinstance(obj, (str, bytes)):
        return len(obj) == 0
    return False


def _isna_scalar(obj, keep: Iterable) -> bool:
    if not _is_falsy(obj):
        return False
    return not any(_same_value(obj, kept) for kept in keep)


def isna(obj: Any, keep: Iterable = DEFAULT_KEEP):
    """
    Detect missing values for a scalar or array-like object.

    A value is missing when it is empty: ``None``, NaN, an empty string, or a
    zero / ``False`` value. Values listed in `keep` are never missing; by
    default ``0`` and ``False`` are kept, so they count as data.

    Parameters
    ----------
    obj : scalar or array-like
        Object to check for missing values.
    keep : iterable, default (0, False)
        Empty values that should be considered as data. Matching is strict:
        ``False`` does not match ``0`` and NaN matches NaN.

    Returns
    -------
    bool or np.ndarray of bool
        For scalar input, returns a scalar boolean.
        For list-like input (including a Series), returns an array of
        booleans indicating whether each element is missing.

    See Also
    --------
    notna : Boolean inverse of kiwis.isna.
    Series.dropna : Drop missing values from a Series.

    Examples
    --------
    >>> ks.isna(None)
    True
    >>> ks.isna(float("nan"))
    True
    >>> ks.isna("")
    True
    >>> ks.isna(0)
    False
    >>> ks.isna(0, keep=[])
    True
    >>> ks.isna(ks.Series([1, None, "", "a"]))
    array([False,  True,  True, False])
    """
    keep = list(keep)
    if is_list_like(obj):
        values = obj.to_array() if hasattr(obj, "to_array") else list(obj)
        return np.array([_isna_scalar(x, keep) for x in values], dtype=bool)
    return _isna_scalar(obj, keep)


isnull = isna


def notna(obj: Any, keep: Iterable = DEFAULT_KEEP):
    """
    Detect non-missing values for a scalar or array-like object.

    This is the boolean inverse of :func:`isna`.

    Examples
    --------
    >>> ks.notna("dog")
    True
    >>> ks.notna(ks.Series([1, None]))
    array([ True, False])
    """
    res = isna(obj, keep=keep)
    if isinstance(res, np.ndarray):
        return ~res
    return not res


notnull = notna


def array_equivalent(left: Sequence, right: Sequence) -> bool:
    """
    True if two sequences have equal length and equal elements in the same
    positions.

    Elements are compared strictly: NaN equals NaN, but booleans never equal
    numbers and numbers never equal strings.

    Parameters
    ----------
    left, right : sequence

    Returns
    -------
    b : bool
        Returns True if the sequences are equivalent.

    Examples
    --------
    >>> array_equivalent([1, np.nan, "a"], [1.0, np.nan, "a"])
    True
    >>> array_equivalent([1, 2], [True, 2])
    False
    """
    if len(left) != len(right):
        return False
    return all(
        left_value is right_value or _same_value(left_value, right_value)
        for left_value, right_value in zip(left, right)
    )
