"""
Module that contains many useful utilities
for validating data or function arguments
"""
from typing import Any, Optional, Sequence, Tuple, Type, Union

from kiwis.core.dtypes.inference import is_bool, is_integer, is_list_like
from kiwis.errors import InvalidArgument, OperandMismatch


def validate_integer(
    fname: str,
    arg_name: str,
    value: Any,
    range: Optional[Tuple[int, int]] = None,
) -> int:
    """
    Ensures that `value` is an integer, optionally within a closed range.

    Parameters
    ----------
    fname : str
        The qualified name of the function being validated, e.g.
        ``"Series.get"``. Used in the error message.
    arg_name : str
        The name of the argument being validated.
    value : object
        The value passed for `arg_name`.
    range : tuple of (int, int), optional
        Inclusive bounds ``(low, high)`` the integer must fall in. An empty
        range (``high < low``) rejects every value.

    Returns
    -------
    int

    Raises
    ------
    InvalidArgument
        If `value` is not an integer (booleans are rejected) or is out of
        range.
    """
    if not is_integer(value):
        raise InvalidArgument(
            fname,
            arg_name,
            f"must be an integer, received type {type(value).__name__}",
        )
    if range is not None:
        low, high = range
        if not low <= value <= high:
            raise InvalidArgument(
                fname,
                arg_name,
                f"must be an integer in the range [{low}, {high}], got {value}",
            )
    return int(value)


def validate_callable(fname: str, arg_name: str, value: Any):
    """
    Ensures that the argument passed in `arg_name` is callable.
    """
    if not callable(value):
        raise InvalidArgument(
            fname,
            arg_name,
            f"must be a function, received type {type(value).__name__}",
        )
    return value


def validate_bool_kwarg(fname: str, arg_name: str, value: Any) -> bool:
    """ Ensures that argument passed in arg_name is of type bool. """
    if not is_bool(value):
        raise InvalidArgument(
            fname,
            arg_name,
            f"expected type bool, received type {type(value).__name__}",
        )
    return bool(value)


def validate_string(fname: str, arg_name: str, value: Any) -> str:
    """ Ensures that argument passed in arg_name is a non-empty str. """
    if not isinstance(value, str) or not value:
        raise InvalidArgument(
            fname,
            arg_name,
            f"must be a non-empty string, received {repr(value)}",
        )
    return value


def validate_list_like(fname: str, arg_name: str, value: Any) -> Sequence:
    """
    Ensures that argument passed in arg_name is list-like and returns it
    as a list.
    """
    if not is_list_like(value):
        raise InvalidArgument(
            fname,
            arg_name,
            f"must be list-like, received type {type(value).__name__}",
        )
    return list(value)


def validate_instance(
    fname: str,
    arg_name: str,
    value: Any,
    klass: Union[Type, Tuple[Type, ...]],
):
    """
    Ensures that the operand passed in `arg_name` is an instance of `klass`.

    Raises
    ------
    OperandMismatch
        If `value` is not an instance of `klass`.
    """
    if not isinstance(value, klass):
        if isinstance(klass, tuple):
            expected = " or ".join(k.__name__ for k in klass)
        else:
            expected = klass.__name__
        raise OperandMismatch(
            fname,
            arg_name,
            f"must be an instance of {expected}, "
            f"received type {type(value).__name__}",
        )
    return value
