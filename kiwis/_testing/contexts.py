from contextlib import contextmanager
import os
import tempfile


@contextmanager
def ensure_clean(filename=None, return_filelike: bool = False, **kwargs):
    """
    Yield a temporary file target for an export test and remove it afterwards.

    Parameters
    ----------
    filename : str, optional
        Suffix of the temporary file, e.g. ``"__series__.csv"``. Must not
        contain a directory.
    return_filelike : bool, default False
        Yield an open UTF-8 text buffer instead of a path. The buffer is
        closed on exit.
    **kwargs
        Passed to :func:`tempfile.TemporaryFile` when `return_filelike` is
        True, to :func:`tempfile.mkstemp` otherwise.

    Examples
    --------
    >>> with ensure_clean("__series__.csv") as path:
    ...     ks.Series([1, 2]).to_csv(path)
    ...     with open(path, encoding="utf-8") as fh:
    ...         fh.read()
    'series\\n1\\n2'
    """
    suffix = filename or ""
    kwargs["suffix"] = suffix

    if return_filelike:
        kwargs.setdefault("mode", "w+")
        kwargs.setdefault("encoding", "utf-8")
        with tempfile.TemporaryFile(**kwargs) as f:
            yield f
        return

    if os.path.dirname(suffix):
        raise ValueError("Can't pass a qualified name to ensure_clean()")

    fd, path = tempfile.mkstemp(**kwargs)
    os.close(fd)
    try:
        yield path
    finally:
        if os.path.exists(path):
            os.remove(path)
