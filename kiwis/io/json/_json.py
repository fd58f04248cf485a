import json
import math
from typing import Any, Callable, Optional, Union

from kiwis._config import get_option
from kiwis._typing import FilePathOrBuffer, JSONSerializable
from kiwis.core.dtypes.inference import is_float
from kiwis.io.formats.format import save_to_buffer

loads = json.loads
dumps = json.dumps


def to_json(
    path_or_buf: Optional[FilePathOrBuffer],
    obj,
    name: str = "series",
    prettify: bool = True,
    default_handler: Optional[Callable[[Any], JSONSerializable]] = None,
) -> Optional[str]:
    s = SeriesWriter(
        obj, name=name, prettify=prettify, default_handler=default_handler
    ).write()
    return save_to_buffer(s, buf=path_or_buf)


def _sanitize(value):
    """
    Replace the non-finite floats JSON cannot represent by None, recursing
    into lists, tuples and dicts.
    """
    if is_float(value) and not math.isfinite(value):
        return None
    if isinstance(value, (list, tuple)):
        return [_sanitize(v) for v in value]
    if isinstance(value, dict):
        return {k: _sanitize(v) for k, v in value.items()}
    return value


class SeriesWriter:
    """
    Serialize a Series as ``{name: [values]}``.
    """

    def __init__(
        self,
        obj,
        name: str,
        prettify: bool = True,
        default_handler: Optional[Callable[[Any], JSONSerializable]] = None,
    ):
        self.obj = obj
        self.name = name
        self.default_handler = default_handler
        self.indent: Optional[Union[str, int]]
        if prettify:
            self.indent = get_option("io.json.indent")
        else:
            self.indent = None

    @property
    def obj_to_write(self):
        return {self.name: _sanitize(self.obj.to_array())}

    def write(self) -> str:
        separators = None if self.indent is not None else (",", ":")
        return dumps(
            self.obj_to_write,
            indent=self.indent,
            separators=separators,
            ensure_ascii=False,
            allow_nan=False,
            default=self.default_handler,
        )
