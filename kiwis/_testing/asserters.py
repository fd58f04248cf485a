import math
from typing import Union

import numpy as np

from kiwis.core.dtypes.inference import is_bool, is_float, is_number
from kiwis.core.dtypes.missing import _same_value
from kiwis.core.series import Series
from kiwis.io.formats.printing import pprint_thing


def _values_close(left, right, rtol: float, atol: float) -> bool:
    if is_bool(left) or is_bool(right):
        return _same_value(left, right)
    if is_number(left) and is_number(right):
        if is_float(left) and is_float(right) and math.isnan(left) and math.isnan(right):
            return True
        return math.isclose(left, right, rel_tol=rtol, abs_tol=atol)
    return _same_value(left, right)


def raise_assert_detail(obj, message, left, right, diff=None, index_values=None):
    __tracebackhide__ = True

    msg = f"""{obj} are different

{message}"""

    if isinstance(index_values, np.ndarray):
        msg += f"\n[index]: {pprint_thing(index_values)}"

    if isinstance(left, np.ndarray):
        left = pprint_thing(left)
    if isinstance(right, np.ndarray):
        right = pprint_thing(right)

    msg += f"""
[left]:  {left}
[right]: {right}"""

    if diff is not None:
        msg += f"\n[diff]: {diff}"

    raise AssertionError(msg)


def assert_class_equal(left, right, obj: str = "Input"):
    """
    Checks classes are equal.
    """
    __tracebackhide__ = True

    if type(left) != type(right):
        msg = f"{obj} classes are different"
        raise_assert_detail(obj, msg, type(left).__name__, type(right).__name__)


def assert_series_equal(
    left: Series,
    right: Series,
    check_series_type: bool = True,
    check_exact: bool = False,
    rtol: float = 1.0e-5,
    atol: float = 1.0e-8,
    obj: str = "Series",
) -> None:
    """
    Check that left and right Series are equal.

    Parameters
    ----------
    left : Series
    right : Series
    check_series_type : bool, default True
         Whether to check the Series class is identical.
    check_exact : bool, default False
        Whether to compare numbers exactly.
    rtol : float, default 1e-5
        Relative tolerance. Only used when check_exact is False.
    atol : float, default 1e-8
        Absolute tolerance. Only used when check_exact is False.
    obj : str, default 'Series'
        Specify object name being compared, internally used to show appropriate
        assertion message.

    Notes
    -----
    Values are compared strictly: ``1`` and ``"1"`` differ, as do ``True``
    and ``1``. NaN values in the same position are considered equal.
    """
    __tracebackhide__ = True

    if not isinstance(left, Series):
        raise AssertionError(
            f"{obj} Expected type {Series}, found {type(left)} instead"
        )
    if not isinstance(right, Series):
        raise AssertionError(
            f"{obj} Expected type {Series}, found {type(right)} instead"
        )

    if check_series_type:
        assert_class_equal(left, right, obj=obj)

    if len(left) != len(right):
        msg1 = f"{len(left)}, {left.to_array()}"
        msg2 = f"{len(right)}, {right.to_array()}"
        raise_assert_detail(obj, "Series length are different", msg1, msg2)

    left_values = left.to_array()
    right_values = right.to_array()
    for position, (lvalue, rvalue) in enumerate(zip(left_values, right_values)):
        if check_exact:
            equal = lvalue is rvalue or _same_value(lvalue, rvalue)
        else:
            equal = _values_close(lvalue, rvalue, rtol, atol)
        if not equal:
            diff = sum(
                not _values_close(lv, rv, rtol, atol)
                for lv, rv in zip(left_values, right_values)
            )
            pct: Union[int, float] = round(diff / len(left_values) * 100, 5)
            msg = f"{obj} values are different ({pct} %), first at position {position}"
            raise_assert_detail(obj, msg, left_values, right_values)
