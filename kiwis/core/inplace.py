"""
Mutating counterparts of the Series transforms, exposed as ``Series.inplace``.

Every method changes the contents of the Series it was accessed from and
returns that same Series, so calls can be chained::

    s.inplace.dropna().inplace.sort(reverse=True)

Methods on the Series itself never mutate; the two forms compute the same
values through the shared ``Series._*_values`` helpers.
"""
from typing import TYPE_CHECKING

from kiwis.core.dtypes.missing import DEFAULT_KEEP
from kiwis.core.shared_docs import _inplace_doc_kwargs, _shared_docs
from kiwis.util._decorators import doc

if TYPE_CHECKING:
    from kiwis.core.series import Series


class InPlaceMethods:
    """
    Mutating transforms of a Series.

    Examples
    --------
    >>> s = ks.Series([3, None, 1])
    >>> s.inplace.dropna() is s
    True
    >>> s.to_array()
    [3, 1]
    """

    def __init__(self, data: "Series"):
        self._series = data

    def _fname(self, method: str) -> str:
        return f"Series.inplace.{method}"

    @doc(_shared_docs["append"], **_inplace_doc_kwargs)
    def append(self, values) -> "Series":
        s = self._series
        return s._update_inplace(s._append_values(values))

    @doc(_shared_docs["insert"], **_inplace_doc_kwargs)
    def insert(self, values, index: int = 0) -> "Series":
        s = self._series
        return s._update_inplace(s._insert_values(self._fname("insert"), values, index))

    @doc(_shared_docs["concat"], **_inplace_doc_kwargs)
    def concat(self, other: "Series") -> "Series":
        s = self._series
        return s._update_inplace(s._concat_values(self._fname("concat"), other))

    @doc(_shared_docs["filter"], **_inplace_doc_kwargs)
    def filter(self, func) -> "Series":
        s = self._series
        return s._update_inplace(s._filter_values(self._fname("filter"), func))

    @doc(_shared_docs["drop"], **_inplace_doc_kwargs)
    def drop(self, func) -> "Series":
        s = self._series
        return s._update_inplace(s._drop_values(self._fname("drop"), func))

    @doc(_shared_docs["dropna"], **_inplace_doc_kwargs)
    def dropna(self, keep=DEFAULT_KEEP) -> "Series":
        s = self._series
        return s._update_inplace(s._dropna_values(self._fname("dropna"), keep))

    @doc(_shared_docs["drop_duplicates"], **_inplace_doc_kwargs)
    def drop_duplicates(self) -> "Series":
        s = self._series
        return s._update_inplace(s._drop_duplicates_values())

    @doc(_shared_docs["sort"], **_inplace_doc_kwargs)
    def sort(self, reverse: bool = False) -> "Series":
        s = self._series
        return s._update_inplace(s._sort_values(self._fname("sort"), reverse))

    @doc(_shared_docs["shuffle"], **_inplace_doc_kwargs)
    def shuffle(self, random_state=None) -> "Series":
        s = self._series
        return s._update_inplace(
            s._shuffle_values(self._fname("shuffle"), random_state)
        )

    @doc(_shared_docs["round"], **_inplace_doc_kwargs)
    def round(self, digits: int = 0) -> "Series":
        s = self._series
        return s._update_inplace(s._round_values(self._fname("round"), digits))
