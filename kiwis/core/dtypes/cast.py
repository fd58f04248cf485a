"""
Routines for casting.
"""

import math
from typing import Any, List, Optional, Sequence, Union

import numpy as np

from kiwis.core.dtypes.inference import is_bool, is_float, is_integer, is_number


def _parse_number(text: str) -> Optional[Union[int, float]]:
    """
    Parse the text of a finite decimal number.

    Integer text gives an ``int``, any other numeric text a ``float``.
    Returns None when the text is not a finite number.
    """
    text = text.strip()
    # python accepts digit separators, plain numeric text does not
    if not text or "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        result = float(text)
    except ValueError:
        return None
    if not math.isfinite(result):
        return None
    return result


def _as_python_number(value) -> Union[int, float]:
    # numpy scalars are unwrapped so a Series only ever holds python objects
    if isinstance(value, np.generic):
        return value.item()
    return value


def maybe_convert_numeric(value: Any) -> Any:
    """
    Convert a value to a number when it looks like one.

    This is the default coercion strategy applied to every value when a
    Series is constructed. It is a pure function and can be replaced by
    passing ``coerce=`` to the Series constructor.

    Parameters
    ----------
    value : object

    Returns
    -------
    object
        A Python ``int`` or ``float`` when `value` is a non-boolean number or
        a string holding a finite number, `value` unchanged otherwise.

    Notes
    -----
    Booleans and falsy values (``None``, ``0``, ``""``) are never touched, so
    an empty string stays an empty string rather than becoming ``0``.

    Examples
    --------
    >>> maybe_convert_numeric("42")
    42
    >>> maybe_convert_numeric(" 4.5 ")
    4.5
    >>> maybe_convert_numeric("abc")
    'abc'
    >>> maybe_convert_numeric(True)
    True
    >>> maybe_convert_numeric("inf")
    'inf'
    """
    if is_bool(value):
        return value
    if is_number(value):
        return _as_python_number(value)
    if isinstance(value, str) and value:
        parsed = _parse_number(value)
        if parsed is not None:
            return parsed
    return value


def to_numeric_scalar(value: Any) -> Union[int, float]:
    """
    Coerce a single value to a number for numeric computations.

    Numbers are returned as Python numbers, booleans count as ``1``/``0`` and
    strings are parsed, with empty or blank text counting as ``0``.
    Everything else (``None``, non-numeric text, containers) coerces to NaN.

    Examples
    --------
    >>> to_numeric_scalar("3")
    3
    >>> to_numeric_scalar(False)
    0
    >>> to_numeric_scalar(" ")
    0
    >>> to_numeric_scalar(None)
    nan
    """
    if is_bool(value):
        return int(value)
    if is_number(value):
        return _as_python_number(value)
    if isinstance(value, str):
        if not value.strip():
            return 0
        parsed = _parse_number(value)
        if parsed is not None:
            return parsed
    return np.nan


def is_numeric_coercible(value: Any) -> bool:
    """
    Return True if `value` coerces to a number that is not NaN.
    """
    result = to_numeric_scalar(value)
    return not (is_float(result) and math.isnan(result))


def to_numeric_array(values: Sequence) -> np.ndarray:
    """
    Coerce a sequence of values to a numeric ndarray.

    Parameters
    ----------
    values : sequence

    Returns
    -------
    np.ndarray
        ``int64`` when every coerced value is an integer that fits,
        ``float64`` otherwise.

    Raises
    ------
    ValueError
        If any value does not coerce to a number (coerces to NaN).
    """
    coerced: List[Union[int, float]] = []
    for position, value in enumerate(values):
        result = to_numeric_scalar(value)
        if is_float(result) and math.isnan(result):
            raise ValueError(
                f"value {repr(value)} at position {position} is not numeric"
            )
        coerced.append(result)

    if coerced and all(is_integer(x) for x in coerced):
        try:
            return np.array(coerced, dtype=np.int64)
        except OverflowError:
            pass
    return np.array(coerced, dtype=np.float64)
