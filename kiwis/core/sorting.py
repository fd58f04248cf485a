""" miscellaneous sorting / groupby utilities """
import math
from typing import List, Sequence

from kiwis.core.dtypes.cast import to_numeric_scalar
from kiwis.core.dtypes.inference import is_float


def nargsort(
    items: Sequence, ascending: bool = True, na_position: str = "last"
) -> List[int]:
    """
    Return the positions that would sort `items` numerically.

    Each value is compared through its numeric coercion; values that do not
    coerce to a number are gathered at `na_position`, keeping their relative
    order. The sort is stable in both directions.

    Parameters
    ----------
    items : sequence
    ascending : bool, default True
    na_position : {'first', 'last'}, default 'last'

    Returns
    -------
    list of int

    Examples
    --------
    >>> nargsort([3, "x", 1, 2])
    [2, 3, 0, 1]
    >>> nargsort([3, "x", 1, 2], ascending=False)
    [0, 3, 2, 1]
    """
    keyed = []
    nan_idx = []
    for position, value in enumerate(items):
        key = to_numeric_scalar(value)
        if is_float(key) and math.isnan(key):
            nan_idx.append(position)
        else:
            keyed.append((key, position))

    keyed.sort(key=lambda pair: pair[0], reverse=not ascending)
    indexer = [position for _, position in keyed]

    if na_position == "last":
        return indexer + nan_idx
    elif na_position == "first":
        return nan_idx + indexer
    else:
        raise ValueError(f"invalid na_position: {na_position}")
