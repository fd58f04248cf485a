"""
Module for formatting output data into CSV files.
"""
import logging
import math
from typing import TYPE_CHECKING, Iterator, Optional

from kiwis._typing import FilePathOrBuffer
from kiwis.core.dtypes.inference import is_float
from kiwis.io.formats.format import save_to_buffer

if TYPE_CHECKING:
    from kiwis.core.series import Series

logger = logging.getLogger(__name__)


class CSVFormatter:
    """
    Write a Series as a single CSV column.

    The first line holds the column name, then one value per line. Values
    are written as their ``str`` and are neither quoted nor escaped; ``None``
    and NaN are written as `na_rep`. Lines are joined by ``"\\n"`` with no
    trailing newline.
    """

    def __init__(
        self,
        series: "Series",
        name: str = "series",
        na_rep: str = "",
        encoding: Optional[str] = None,
    ):
        self.obj = series
        self.name = name
        self.na_rep = na_rep
        self.encoding = encoding

    def _format_value(self, value) -> str:
        if value is None or (is_float(value) and math.isnan(value)):
            return self.na_rep
        return str(value)

    def _iter_lines(self) -> Iterator[str]:
        yield self.name
        for value in self.obj.to_array():
            yield self._format_value(value)

    def to_string(self) -> str:
        return "\n".join(self._iter_lines())

    def save(self, path_or_buf: Optional[FilePathOrBuffer[str]] = None) -> Optional[str]:
        """
        Create the CSV text and write it to `path_or_buf`, or return it.
        """
        return save_to_buffer(self.to_string(), buf=path_or_buf, encoding=self.encoding)
