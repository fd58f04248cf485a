""" basic inference routines """

from collections import abc
from numbers import Number

import numpy as np


def is_bool(obj) -> bool:
    """
    Check if the object is a boolean, Python or numpy.
    """
    return isinstance(obj, (bool, np.bool_))


def is_integer(obj) -> bool:
    """
    Check if the object is an integer, excluding booleans.

    Examples
    --------
    >>> is_integer(1)
    True
    >>> is_integer(True)
    False
    >>> is_integer(1.0)
    False
    """
    return isinstance(obj, (int, np.integer)) and not is_bool(obj)


def is_float(obj) -> bool:
    return isinstance(obj, (float, np.floating))


def is_number(obj) -> bool:
    """
    Check if the object is a number.

    Returns True when the object is a number, and False if is not.
    Booleans are not considered numbers here, unlike ``numbers.Number``.

    Parameters
    ----------
    obj : any type
        The object to check if is a number.

    Returns
    -------
    is_number : bool
        Whether `obj` is a number or not.

    Examples
    --------
    >>> is_number(1)
    True
    >>> is_number(7.15)
    True
    >>> is_number(False)
    False
    >>> is_number("5")
    False
    """
    return isinstance(obj, (Number, np.number)) and not is_bool(obj)


def is_list_like(obj) -> bool:
    """
    Check if the object is list-like.

    Objects that are considered list-like are for example Python
    lists, tuples, sets, NumPy arrays, and kiwis Series.

    Strings, bytes, mappings and zero-dimensional arrays are not.

    Parameters
    ----------
    obj : object
        Object to check.

    Returns
    -------
    bool
        Whether `obj` has list-like properties.

    Examples
    --------
    >>> is_list_like([1, 2, 3])
    True
    >>> is_list_like({1, 2, 3})
    True
    >>> is_list_like("foo")
    False
    >>> is_list_like({"a": 1})
    False
    >>> is_list_like(np.array(2))
    False
    """
    return (
        isinstance(obj, abc.Iterable)
        and not isinstance(obj, (str, bytes, abc.Mapping))
        and not (isinstance(obj, np.ndarray) and obj.ndim == 0)
    )


def is_file_like(obj) -> bool:
    """
    Check if the object is a file-like object.

    For objects to be considered file-like, they must
    be an iterator AND have either a `read` and/or `write`
    method as an attribute.

    Parameters
    ----------
    obj : The object to check

    Returns
    -------
    is_file_like : bool
        Whether `obj` has file-like properties.

    Examples
    --------
    >>> import io
    >>> buffer = io.StringIO("data")
    >>> is_file_like(buffer)
    True
    >>> is_file_like([1, 2, 3])
    False
    """
    if not (hasattr(obj, "read") or hasattr(obj, "write")):
        return False

    if not hasattr(obj, "__iter__"):
        return False

    return True


def is_hashable(obj) -> bool:
    """
    Return True if hash(obj) will succeed, False otherwise.

    Some types will pass a test against collections.abc.Hashable but fail when
    they are actually hashed with hash(), e.g. tuples holding lists.

    Distinguish between these and other types by trying the call to hash() and
    seeing if they raise TypeError.

    Returns
    -------
    bool

    Examples
    --------
    >>> a = ([],)
    >>> isinstance(a, collections.abc.Hashable)
    True
    >>> is_hashable(a)
    False
    """
    try:
        hash(obj)
    except TypeError:
        return False
    else:
        return True
