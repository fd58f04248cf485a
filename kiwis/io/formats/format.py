"""
Internal module for formatting output data in text form.
"""
from decimal import ROUND_HALF_UP, Decimal, localcontext
import logging
from typing import TYPE_CHECKING, List, Optional, Union

from kiwis._config.config import get_option
from kiwis._typing import FilePathOrBuffer
from kiwis.core.dtypes.missing import isna
from kiwis.io.common import get_handle
from kiwis.io.formats.printing import justify, pprint_thing

if TYPE_CHECKING:
    from kiwis.core.series import Series

logger = logging.getLogger(__name__)

# enough significant digits for any float to 100 decimal places
_FIXED_PRECISION = 450


def to_fixed(number: Union[int, float], digits: int = 0) -> str:
    """
    Format a number with a fixed number of decimal places.

    Rounding is applied to the exact binary value of `number`, with ties
    rounded away from zero. Zero is never signed, but negative values that
    round to zero keep their sign.

    Parameters
    ----------
    number : int or float
    digits : int, default 0

    Returns
    -------
    str

    Examples
    --------
    >>> to_fixed(2.5)
    '3'
    >>> to_fixed(1.005, 2)
    '1.00'
    >>> to_fixed(-0.25, 1)
    '-0.3'
    >>> to_fixed(7, 2)
    '7.00'
    """
    exact = Decimal(number)
    if exact.is_zero():
        exact = Decimal(0)
    with localcontext() as ctx:
        ctx.prec = _FIXED_PRECISION
        rounded = exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


class SeriesFormatter:
    """
    Render the tabular preview of a Series.

    Each shown row reads ``"<position> | <value>"``. Positions are left
    justified, values right justified to the widest shown value. Values wider
    than ``display.max_colwidth`` are cut and end with ``"..."``; missing
    values are shown as ``display.na_rep``.
    """

    def __init__(
        self,
        series: "Series",
        max_rows: Optional[int] = None,
        max_colwidth: Optional[int] = None,
        na_rep: Optional[str] = None,
    ):
        self.series = series
        self.max_rows = max_rows if max_rows is not None else get_option(
            "display.max_rows"
        )
        self.max_colwidth = (
            max_colwidth
            if max_colwidth is not None
            else get_option("display.max_colwidth")
        )
        self.na_rep = na_rep if na_rep is not None else get_option("display.na_rep")

        self._chk_truncate()

    def _chk_truncate(self) -> None:
        values = self.series.to_array()
        self.is_truncated_vertically = len(values) > self.max_rows
        self.tr_values = values[: self.max_rows]

    def _get_footer(self) -> str:
        return f"Length: {len(self.series)}"

    def _get_formatted_values(self) -> List[str]:
        fmt_values = []
        for value, missing in zip(self.tr_values, isna(self.tr_values)):
            if missing:
                fmt_values.append(self.na_rep)
            else:
                fmt_values.append(pprint_thing(value, escape_chars=("\t", "\n", "\r")))
        return fmt_values

    def _get_formatted_index(self) -> List[str]:
        width = min(len(str(self.max_rows)), len(str(len(self.series))))
        return justify(
            [str(i) for i in range(len(self.tr_values))], width, mode="left"
        )

    def to_string(self) -> str:
        if len(self.series) == 0:
            return f"Empty {type(self.series).__name__}"

        fmt_index = self._get_formatted_index()
        fmt_values = self._get_formatted_values()

        # missing values do not widen the column
        widths = [
            len(value)
            for value, missing in zip(fmt_values, isna(self.tr_values))
            if not missing
        ]
        width = min(self.max_colwidth, max(widths, default=0))
        lines = []
        for idx, value in zip(fmt_index, fmt_values):
            if len(value) > self.max_colwidth:
                value = value[: self.max_colwidth - 3] + "..."
            else:
                value = value.rjust(width)
            lines.append(f"{idx} | {value}")

        if self.is_truncated_vertically:
            lines.append("...")

        lines.append("")
        lines.append(self._get_footer())
        return "\n".join(lines)


def save_to_buffer(
    string: str,
    buf: Optional[FilePathOrBuffer[str]] = None,
    encoding: Optional[str] = None,
) -> Optional[str]:
    """
    Perform serialization. Write to buf or return as string if buf is None.
    """
    if buf is None:
        return string

    with get_handle(buf, "w", encoding=encoding) as handles:
        handles.handle.write(string)
    logger.debug("wrote %d characters to %r", len(string), buf)
    return None
