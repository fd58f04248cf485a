"""Common IO api utilities"""

import dataclasses
import logging
import os
from typing import IO, AnyStr, List, Optional, cast

from kiwis._typing import Buffer, FileOrBuffer, FilePathOrBuffer
from kiwis.core.dtypes.inference import is_file_like

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class IOHandles:
    """
    Return value of io/common.py:get_handle

    Can be used as a context manager.

    Only the handles opened by ``get_handle`` are closed; a buffer passed in
    by the caller is left open.
    """

    handle: Buffer
    created_handles: List[Buffer] = dataclasses.field(default_factory=list)

    def close(self) -> None:
        """
        Close all created buffers.
        """
        try:
            for handle in self.created_handles:
                handle.close()
        except (OSError, ValueError):
            pass
        self.created_handles = []

    def __enter__(self) -> "IOHandles":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def _expand_user(filepath_or_buffer: FileOrBuffer[AnyStr]) -> FileOrBuffer[AnyStr]:
    """
    Return the argument with an initial component of ~ or ~user
    replaced by that user's home directory.
    """
    if isinstance(filepath_or_buffer, str):
        return os.path.expanduser(filepath_or_buffer)
    return filepath_or_buffer


def stringify_path(
    filepath_or_buffer: FilePathOrBuffer[AnyStr],
) -> FileOrBuffer[AnyStr]:
    """
    Attempt to convert a path-like object to a string.

    Parameters
    ----------
    filepath_or_buffer : object to be converted

    Returns
    -------
    str_filepath_or_buffer : maybe a string version of the object

    Notes
    -----
    Objects supporting the fspath protocol are coerced according to their
    __fspath__ method.

    Any other object is passed through unchanged, which includes bytes,
    strings, buffers, or anything else that's not even path-like.
    """
    if is_file_like(filepath_or_buffer):
        return cast(FileOrBuffer[AnyStr], filepath_or_buffer)

    if isinstance(filepath_or_buffer, os.PathLike):
        filepath_or_buffer = filepath_or_buffer.__fspath__()
    return _expand_user(filepath_or_buffer)


def get_handle(
    path_or_buf: FilePathOrBuffer,
    mode: str,
    encoding: Optional[str] = None,
    errors: Optional[str] = None,
) -> IOHandles:
    """
    Get file handle for given path/buffer and mode.

    Parameters
    ----------
    path_or_buf : str, path object or file-like object
        File path or an open text buffer.
    mode : str
        Mode to open path_or_buf with.
    encoding : str or None
        Encoding to use. Defaults to UTF-8.
    errors : str, default 'strict'
        Specifies how encoding and decoding errors are to be handled.
        See the errors argument for :func:`open` for a full list
        of options.

    Returns
    -------
    IOHandles

    Raises
    ------
    TypeError
        If `path_or_buf` is neither a path nor a file-like object.
    """
    if encoding is None:
        encoding = "utf-8"

    handle = stringify_path(path_or_buf)
    handles: List[Buffer] = []

    if isinstance(handle, str):
        logger.debug("opening %r with mode %r (%s)", handle, mode, encoding)
        handle = open(handle, mode, encoding=encoding, errors=errors, newline="")
        handles.append(handle)
    elif not is_file_like(handle):
        raise TypeError(
            "path_or_buf must be a file path or have a write method, "
            f"received type {type(path_or_buf).__name__}"
        )

    return IOHandles(handle=cast(IO, handle), created_handles=handles)

