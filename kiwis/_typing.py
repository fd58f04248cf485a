from io import BufferedIOBase, RawIOBase, TextIOBase, TextIOWrapper
from os import PathLike
from typing import (
    IO,
    Any,
    AnyStr,
    Callable,
    Dict,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

# scalars a Series holds after numeric coercion
PythonScalar = Union[str, int, float, bool]
Number = Union[int, float]

JSONSerializable = Optional[Union[PythonScalar, List, Dict]]

# callables accepted by the Series API
FuncType = Callable[..., Any]
F = TypeVar("F", bound=FuncType)
Predicate = Callable[[Any], Any]
CoerceFunc = Callable[[Any], Any]
Reducer = Callable[[Any, Any], Any]

# value/count pairs produced by Series.counts / Series.frequencies
CountPairs = List[Tuple[Any, Number]]

# file handling
T = TypeVar("T")
Buffer = Union[IO[AnyStr], RawIOBase, BufferedIOBase, TextIOBase, TextIOWrapper]
FileOrBuffer = Union[str, Buffer[T]]
FilePathOrBuffer = Union["PathLike[str]", FileOrBuffer[T]]
