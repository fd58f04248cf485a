"""
Expose public exceptions
"""

from kiwis._config.config import OptionError  # noqa: F401


class InvalidArgument(ValueError, TypeError):
    """
    Error raised when an argument passed to a Series method does not have
    the expected type, range or shape.

    The check always runs before the method changes any state, so a Series
    is left untouched when this error is raised.

    Parameters
    ----------
    fname : str
        Qualified name of the method that rejected the argument,
        e.g. ``"Series.get"``.
    arg_name : str
        Name of the offending argument.
    message : str
        Description of what was expected.

    Examples
    --------
    >>> ks.Series([1, 2, 3]).get(3)
    Traceback (most recent call last):
    InvalidArgument: Error in Series.get(): argument 'index' must be an integer
    in the range [0, 2], got 3
    """

    def __init__(self, fname: str, arg_name: str, message: str):
        self.fname = fname
        self.arg_name = arg_name
        super().__init__(f"Error in {fname}(): argument '{arg_name}' {message}")


class OperandMismatch(InvalidArgument):
    """
    Error raised when an operation receives an operand of the wrong kind,
    e.g. concatenating a Series with a plain list.
    """


class TypeMismatch(TypeError):
    """
    Error raised by numeric-only operations (``round``, ``sum``, ``min``,
    ``max``, ``extent``, ``mean``, ``median``, ``std``) when a value of the
    Series cannot be coerced to a number.

    Examples
    --------
    >>> ks.Series([1, "x", 3]).sum()
    Traceback (most recent call last):
    TypeMismatch: Error in Series.sum(): cannot sum non-number values
    """

    def __init__(self, fname: str, message: str):
        self.fname = fname
        super().__init__(f"Error in {fname}(): {message}")

