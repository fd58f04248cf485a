"""
Numeric reductions used by Series aggregations.

Every function takes a one-dimensional numeric ndarray that has already been
coerced (see ``kiwis.core.dtypes.cast.to_numeric_array``) and returns a
Python scalar. An empty input has no minimum, maximum, mean, etc., so those
reductions return None; only ``nansum`` has a defined value (``0``).
"""
import functools
from typing import Optional, Tuple, Union

import numpy as np

from kiwis._typing import F

Number = Union[int, float]


def _to_python(result) -> Number:
    if isinstance(result, np.generic):
        return result.item()
    return result


def _empty_is_none(f: F) -> F:
    """
    Return None instead of calling the reduction on an empty array.
    """

    @functools.wraps(f)
    def _f(values: np.ndarray, **kwargs):
        if values.size == 0:
            return None
        with np.errstate(invalid="ignore", over="ignore"):
            return f(values, **kwargs)

    return _f


def nansum(values: np.ndarray) -> Number:
    """
    Sum the elements of an array.

    Integer arrays are summed with Python ints, so the result never wraps
    around at the int64 bounds.

    Examples
    --------
    >>> import kiwis.core.nanops as nanops
    >>> nanops.nansum(np.array([1, 2, 3]))
    6
    >>> nanops.nansum(np.array([], dtype=np.float64))
    0
    """
    if values.size == 0:
        return 0
    if values.dtype.kind in "iu":
        return sum(values.tolist())
    return _to_python(values.sum())


@_empty_is_none
def nanmin(values: np.ndarray) -> Optional[Number]:
    """
    Examples
    --------
    >>> import kiwis.core.nanops as nanops
    >>> nanops.nanmin(np.array([3, 1, 2]))
    1
    """
    return _to_python(values.min())


@_empty_is_none
def nanmax(values: np.ndarray) -> Optional[Number]:
    return _to_python(values.max())


def nanextent(values: np.ndarray) -> Tuple[Optional[Number], Optional[Number]]:
    """
    Return the ``(min, max)`` pair of an array, ``(None, None)`` if empty.
    """
    return nanmin(values), nanmax(values)


@_empty_is_none
def nanmean(values: np.ndarray) -> Optional[float]:
    """
    Compute the arithmetic mean of an array.

    Integer input is summed as float64 to avoid overflow.

    Examples
    --------
    >>> import kiwis.core.nanops as nanops
    >>> nanops.nanmean(np.array([1, 2]))
    1.5
    """
    the_sum = values.sum(dtype=np.float64)
    return _to_python(the_sum / values.size)


@_empty_is_none
def nanmedian(values: np.ndarray) -> Optional[Number]:
    """
    Examples
    --------
    >>> import kiwis.core.nanops as nanops
    >>> nanops.nanmedian(np.array([1, 3, 2, 2]))
    2.0
    """
    return _to_python(np.median(values.astype(np.float64)))


@_empty_is_none
def nanvar(values: np.ndarray, *, ddof: int = 1) -> Optional[float]:
    """
    Compute the variance of an array.

    Parameters
    ----------
    values : ndarray
    ddof : int, default 1
        Delta Degrees of Freedom. The divisor used in calculations is N - ddof,
        where N represents the number of elements.

    Returns
    -------
    float or None
        None when there are not more than `ddof` values.
    """
    count = values.size
    if count <= ddof:
        return None
    values = values.astype(np.float64)
    avg = values.sum() / count
    sqr = (avg - values) ** 2
    return _to_python(sqr.sum() / (count - ddof))


def nanstd(values: np.ndarray, *, ddof: int = 1) -> Optional[float]:
    """
    Compute the standard deviation of an array.

    Parameters
    ----------
    values : ndarray
    ddof : int, default 1
        Delta Degrees of Freedom. The divisor used in calculations is N - ddof,
        where N represents the number of elements. The default gives the
        sample standard deviation.

    Returns
    -------
    float or None

    Examples
    --------
    >>> import kiwis.core.nanops as nanops
    >>> nanops.nanstd(np.array([1, 2, 3]))
    1.0
    """
    var = nanvar(values, ddof=ddof)
    if var is None:
        return None
    return float(np.sqrt(var))
