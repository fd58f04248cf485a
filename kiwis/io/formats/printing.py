"""
Printing tools used to render Series values as text.

Containers held by a Series (lists, tuples, sets, dicts) are rendered
recursively up to ``display.pprint_nest_depth`` levels, showing at most
``display.max_seq_items`` items per level.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from kiwis._config import get_option

EscapeChars = Union[Mapping[str, str], Iterable[str]]


def justify(texts: Iterable[str], max_len: int, mode: str = "right") -> List[str]:
    """
    Pad every text to `max_len` characters.

    `mode` is one of ``"left"``, ``"center"`` or ``"right"``.
    """
    if mode == "left":
        return [x.ljust(max_len) for x in texts]
    elif mode == "center":
        return [x.center(max_len) for x in texts]
    else:
        return [x.rjust(max_len) for x in texts]


def _max_items(max_seq_items: Optional[int], length: int) -> int:
    return max_seq_items or get_option("display.max_seq_items") or length


def _pprint_seq(
    seq: Union[list, tuple, set],
    _nest_lvl: int = 0,
    max_seq_items: Optional[int] = None,
    **kwds,
) -> str:
    """
    Render a list as ``[a, b]``, a tuple as ``(a,)`` or ``(a, b)`` and a set
    as ``{a, b}``. Items past the limit are replaced by ``...``.
    """
    if isinstance(seq, set):
        fmt = "{{{body}}}"
    elif isinstance(seq, tuple):
        fmt = "({body})"
    else:
        fmt = "[{body}]"

    nitems = _max_items(max_seq_items, len(seq))

    # sets cannot be sliced
    items = [item for _, item in zip(range(nitems), seq)]
    body = ", ".join(
        pprint_thing(item, _nest_lvl + 1, max_seq_items=max_seq_items, **kwds)
        for item in items
    )

    if nitems < len(seq):
        body += ", ..."
    elif isinstance(seq, tuple) and len(seq) == 1:
        body += ","

    return fmt.format(body=body)


def _pprint_dict(
    seq: Mapping, _nest_lvl: int = 0, max_seq_items: Optional[int] = None, **kwds
) -> str:
    """
    Render a mapping as ``{key: value, ...}``.
    """
    nitems = _max_items(max_seq_items, len(seq))

    pairs = []
    for k, v in list(seq.items())[:nitems]:
        key = pprint_thing(k, _nest_lvl + 1, max_seq_items=max_seq_items, **kwds)
        val = pprint_thing(v, _nest_lvl + 1, max_seq_items=max_seq_items, **kwds)
        pairs.append(f"{key}: {val}")

    body = ", ".join(pairs)
    if nitems < len(seq):
        body += ", ..."
    return "{" + body + "}"


_ESCAPES = {"\t": r"\t", "\n": r"\n", "\r": r"\r"}


def _escape(thing: Any, escape_chars: Optional[EscapeChars]) -> str:
    result = str(thing)
    translate: Dict[str, str]
    if isinstance(escape_chars, dict):
        translate = escape_chars
    else:
        translate = {c: _ESCAPES[c] for c in escape_chars or ()}
    for c, replacement in translate.items():
        result = result.replace(c, replacement)
    return result


def pprint_thing(
    thing: Any,
    _nest_lvl: int = 0,
    escape_chars: Optional[EscapeChars] = None,
    quote_strings: bool = False,
    max_seq_items: Optional[int] = None,
) -> str:
    """
    Convert a value to the text shown in a Series preview.

    Containers are rendered item by item until ``display.pprint_nest_depth``
    levels deep, below which ``str`` is used. Strings inside a dict are
    always quoted.

    Parameters
    ----------
    thing : object
    _nest_lvl : int, default 0
        Current nesting level, tracked by the container printers.
    escape_chars : list or dict, optional
        Characters to show as their escape sequence (``\\t``, ``\\n`` or
        ``\\r``). If a dict is passed the values are the replacements.
    quote_strings : bool, default False
        Whether strings are quoted.
    max_seq_items : int, optional
        Overrides ``display.max_seq_items``.

    Returns
    -------
    str

    Examples
    --------
    >>> pprint_thing([1, "a", {"b": 2}])
    "[1, a, {'b': 2}]"
    >>> pprint_thing("a\\tb", escape_chars=("\\t",))
    'a\\\\tb'
    """
    if _nest_lvl < get_option("display.pprint_nest_depth"):
        if isinstance(thing, dict):
            return _pprint_dict(
                thing, _nest_lvl, quote_strings=True, max_seq_items=max_seq_items
            )
        if isinstance(thing, (list, tuple, set)):
            return _pprint_seq(
                thing,
                _nest_lvl,
                escape_chars=escape_chars,
                quote_strings=quote_strings,
                max_seq_items=max_seq_items,
            )

    if isinstance(thing, str) and quote_strings:
        return f"'{_escape(thing, escape_chars)}'"
    return _escape(thing, escape_chars)
