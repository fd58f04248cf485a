"""
Data structure for 1-dimensional, dynamically typed data
"""
from collections import abc
import copy
import functools
from typing import IO, Any, Callable, Iterable, List, Optional, Tuple, Union

from kiwis._typing import (
    CoerceFunc,
    CountPairs,
    FilePathOrBuffer,
    JSONSerializable,
    Number,
    Predicate,
    Reducer,
)
from kiwis.core import algorithms, nanops
from kiwis.core.accessor import CachedAccessor
import kiwis.core.common as com
from kiwis.core.common import no_default
from kiwis.core.dtypes.cast import (
    is_numeric_coercible,
    maybe_convert_numeric,
    to_numeric_array,
    to_numeric_scalar,
)
from kiwis.core.dtypes.inference import is_list_like
from kiwis.core.dtypes.missing import DEFAULT_KEEP, array_equivalent, isna, notna
from kiwis.core.inplace import InPlaceMethods
from kiwis.core.shared_docs import _shared_doc_kwargs, _shared_docs
from kiwis.core.sorting import nargsort
from kiwis.errors import InvalidArgument, TypeMismatch
from kiwis.io.formats import format as fmt
from kiwis.io.formats.csvs import CSVFormatter
from kiwis.util._decorators import doc
from kiwis.util._validators import (
    validate_bool_kwarg,
    validate_callable,
    validate_instance,
    validate_integer,
    validate_list_like,
    validate_string,
)

__all__ = ["Series", "SeriesIterator"]


class SeriesIterator(abc.Iterator):
    """
    Cursor over the values of a Series.

    The cursor reads the Series storage at each ``next()``, so values
    changed in place after the cursor was created are seen. Once it has
    run past the end, the cursor stays exhausted.

    Parameters
    ----------
    data : list
        The storage of the Series.
    with_index : bool, default False
        Yield ``(index, value)`` tuples instead of values.
    """

    def __init__(self, data: List, with_index: bool = False):
        self._data = data
        self._with_index = with_index
        self._position = 0
        self._exhausted = False

    def __next__(self):
        if self._exhausted or self._position >= len(self._data):
            self._exhausted = True
            raise StopIteration

        position = self._position
        self._position += 1
        value = self._data[position]
        if self._with_index:
            return position, value
        return value


class Series:
    """
    One-dimensional ordered sequence of dynamically typed values.

    Values are addressed by position only; position 0 is the head. Numbers
    written as text are converted to numbers when the Series is built, so
    ``Series(["1", "2.5", "a"])`` holds ``[1, 2.5, "a"]``.

    Transforms such as ``filter`` or ``sort`` return a new Series and leave
    the original untouched; the same transforms on ``Series.inplace`` modify
    the Series and return it.

    Parameters
    ----------
    data : list-like or Series, optional
        Values of the Series. The values are deep-copied, so later changes
        to `data` do not affect the Series. Strings and mappings are not
        accepted as `data`.
    coerce : callable, default kiwis.core.dtypes.cast.maybe_convert_numeric
        Function applied to every value when the Series is built. It is
        remembered and used again by ``clone`` and ``map``.

    Raises
    ------
    InvalidArgument
        If `data` is not list-like or `coerce` is not callable.

    See Also
    --------
    Series.view : Series sharing the storage of another one.
    Series.clone : Independent copy of a Series.

    Examples
    --------
    >>> s = ks.Series([1, "2", None, "a"])
    >>> s.to_array()
    [1, 2, None, 'a']

    Building a Series from another Series copies the values:

    >>> s2 = ks.Series(s)
    >>> s2.set(0, 42)
    >>> s.first()
    1

    Identity coercion keeps the values as they are:

    >>> ks.Series(["1", "2"], coerce=lambda x: x).to_array()
    ['1', '2']
    """

    _data: List
    _coerce: CoerceFunc

    inplace = CachedAccessor("inplace", InPlaceMethods)

    def __init__(
        self,
        data: Optional[Union[Iterable, "Series"]] = None,
        coerce: CoerceFunc = maybe_convert_numeric,
        fastpath: bool = False,
    ):
        # data is a list the new Series takes over as its storage
        if fastpath:
            self._data = data
            self._coerce = coerce
            return

        validate_callable("Series", "coerce", coerce)

        if data is None:
            values = []
        elif isinstance(data, Series):
            values = data._data
        elif is_list_like(data):
            values = data
        else:
            raise InvalidArgument(
                "Series",
                "data",
                f"must be list-like or a Series, received type {type(data).__name__}",
            )

        self._data = [coerce(value) for value in copy.deepcopy(list(values))]
        self._coerce = coerce

    def _from_values(self, values: List) -> "Series":
        """
        Wrap `values` in a new Series without copying or coercing them.
        """
        return type(self)(values, coerce=self._coerce, fastpath=True)

    def _update_inplace(self, values: List) -> "Series":
        """
        Replace the contents of the storage, keeping the list object so that
        views and cursors see the new values.
        """
        self._data[:] = values
        return self

    @staticmethod
    def _as_values(values) -> List:
        if is_list_like(values):
            return list(values)
        return [values]

    # ----------------------------------------------------------------------
    # Accessors

    @property
    def length(self) -> int:
        """
        Number of values in the Series.
        """
        return len(self._data)

    def __len__(self) -> int:
        """
        Return the length of the Series.
        """
        return len(self._data)

    @property
    def empty(self) -> bool:
        """
        True if the Series holds no values.
        """
        return len(self._data) == 0

    def to_array(self) -> List:
        """
        Return the storage of the Series.

        The returned list is the Series storage itself, not a copy: changing
        it changes the Series. Use ``to_list`` for a copy.

        Returns
        -------
        list

        Examples
        --------
        >>> s = ks.Series([1, 2])
        >>> s.to_array().append(3)
        >>> s.length
        3
        """
        return self._data

    def to_list(self) -> List:
        """
        Return a shallow copy of the values as a list.
        """
        return list(self._data)

    def get(self, index: int):
        """
        Return the value at a position.

        Parameters
        ----------
        index : int
            Position in ``[0, len(s) - 1]``.

        Returns
        -------
        object

        Raises
        ------
        InvalidArgument
            If `index` is not an integer in range.

        Examples
        --------
        >>> s = ks.Series([1, 42, 101])
        >>> s.get(1)
        42
        """
        index = validate_integer(
            "Series.get", "index", index, range=(0, len(self._data) - 1)
        )
        return self._data[index]

    def set(self, index: int, value) -> None:
        """
        Replace the value at a position.

        The value is stored as it is, without coercion.

        Parameters
        ----------
        index : int
            Position in ``[0, len(s) - 1]``.
        value : object

        Raises
        ------
        InvalidArgument
            If `index` is not an integer in range. The Series is unchanged.
        """
        index = validate_integer(
            "Series.set", "index", index, range=(0, len(self._data) - 1)
        )
        self._data[index] = value

    def first(self):
        """
        Return the first value, or None if the Series is empty.
        """
        return self._data[0] if self._data else None

    def last(self):
        """
        Return the last value, or None if the Series is empty.
        """
        return self._data[-1] if self._data else None

    def view(self) -> "Series":
        """
        Create a new Series sharing the storage of this one.

        Changes made in place through either Series are seen by both.

        Returns
        -------
        Series

        Examples
        --------
        >>> s = ks.Series([3, 1, 2])
        >>> v = s.view()
        >>> v.inplace.sort().to_array()
        [1, 2, 3]
        >>> s.to_array()
        [1, 2, 3]
        """
        return self._from_values(self._data)

    def clone(self) -> "Series":
        """
        Make an independent copy of the Series.

        The values are deep-copied and coerced again with the coercion
        function of the Series.

        Returns
        -------
        Series
        """
        return type(self)(self, coerce=self._coerce)

    def equals(self, other: Any) -> bool:
        """
        Test whether two Series contain the same values in the same order.

        Values are compared strictly, except that NaN equals NaN.

        Parameters
        ----------
        other : Series

        Returns
        -------
        bool
            False if `other` is not a Series.

        Examples
        --------
        >>> ks.Series([1, "2"]).equals(ks.Series([1, 2]))
        True
        >>> ks.Series([1, 2]).equals([1, 2])
        False
        """
        if not isinstance(other, Series):
            return False
        return array_equivalent(self._data, other._data)

    def find(self, condition: Predicate):
        """
        Return the first value for which `condition` is true.

        Parameters
        ----------
        condition : callable
            Called with each value in turn.

        Returns
        -------
        object
            The first matching value, or None if no value matches.

        Examples
        --------
        >>> s = ks.Series([1, 42, 101])
        >>> s.find(lambda x: x > 41)
        42
        """
        validate_callable("Series.find", "condition", condition)
        for value in self._data:
            if condition(value):
                return value
        return None

    # ----------------------------------------------------------------------
    # Iteration

    def values(self) -> SeriesIterator:
        """
        Return an iterator over the values of the Series.

        Each call returns a new iterator starting at position 0.

        Examples
        --------
        >>> it = ks.Series([10, 20]).values()
        >>> next(it), next(it)
        (10, 20)
        """
        return SeriesIterator(self._data)

    def items(self) -> SeriesIterator:
        """
        Return an iterator over ``(index, value)`` tuples.

        Examples
        --------
        >>> list(ks.Series([10, 20]).items())
        [(0, 10), (1, 20)]
        """
        return SeriesIterator(self._data, with_index=True)

    def __iter__(self) -> SeriesIterator:
        return self.values()

    def for_each(self, func: Callable[[Any, int, List], Any]) -> None:
        """
        Call a function on every value.

        Parameters
        ----------
        func : callable
            Called as ``func(value, index, storage)``, where `storage` is the
            list returned by ``to_array``.
        """
        validate_callable("Series.for_each", "func", func)
        for index, value in enumerate(self._data):
            func(value, index, self._data)

    def map(self, func: Callable[[Any], Any]) -> "Series":
        """
        Build a new Series from the results of a function.

        The results are copied and coerced like any other Series data.

        Parameters
        ----------
        func : callable
            Called with each value.

        Returns
        -------
        Series

        Examples
        --------
        >>> ks.Series([1, 2]).map(lambda x: f"{x}0").to_array()
        [10, 20]
        """
        validate_callable("Series.map", "func", func)
        return type(self)([func(value) for value in self._data], coerce=self._coerce)

    # ----------------------------------------------------------------------
    # Transforms
    #
    # Each transform computes the new values in a ``_*_values`` helper. The
    # public method wraps them in a new Series; ``InPlaceMethods`` writes them
    # back into the storage.

    def _append_values(self, values) -> List:
        return self._data + self._as_values(values)

    def _insert_values(self, fname: str, values, index: int) -> List:
        index = validate_integer(fname, "index", index, range=(0, len(self._data) - 1))
        result = list(self._data)
        result[index:index] = self._as_values(values)
        return result

    def _concat_values(self, fname: str, other: "Series") -> List:
        validate_instance(fname, "other", other, Series)
        return self._data + other._data

    def _filter_values(self, fname: str, func: Predicate) -> List:
        validate_callable(fname, "func", func)
        return [value for value in self._data if func(value)]

    def _drop_values(self, fname: str, func: Predicate) -> List:
        validate_callable(fname, "func", func)
        return [value for value in self._data if not func(value)]

    def _dropna_values(self, fname: str, keep: Iterable) -> List:
        keep = validate_list_like(fname, "keep", keep)
        mask = isna(self._data, keep=keep)
        return [value for value, missing in zip(self._data, mask) if not missing]

    def _drop_duplicates_values(self) -> List:
        return algorithms.unique(self._data)

    def _sort_values(self, fname: str, reverse: bool) -> List:
        reverse = validate_bool_kwarg(fname, "reverse", reverse)
        indexer = nargsort(self._data, ascending=not reverse)
        return [self._data[i] for i in indexer]

    def _shuffle_values(self, fname: str, random_state) -> List:
        try:
            rs = com.random_state(random_state)
        except ValueError as err:
            raise InvalidArgument(
                fname,
                "random_state",
                "must be an integer, a numpy RandomState or Generator, or None",
            ) from err
        indexer = rs.permutation(len(self._data))
        return [self._data[i] for i in indexer]

    def _round_values(self, fname: str, digits: int) -> List[str]:
        digits = validate_integer(fname, "digits", digits, range=(0, 100))
        if not all(is_numeric_coercible(value) for value in self._data):
            raise TypeMismatch(fname, "cannot round non-number values")
        return [fmt.to_fixed(to_numeric_scalar(value), digits) for value in self._data]

    @doc(_shared_docs["append"], **_shared_doc_kwargs)
    def append(self, values) -> "Series":
        return self._from_values(self._append_values(values))

    @doc(_shared_docs["insert"], **_shared_doc_kwargs)
    def insert(self, values, index: int = 0) -> "Series":
        return self._from_values(self._insert_values("Series.insert", values, index))

    @doc(_shared_docs["concat"], **_shared_doc_kwargs)
    def concat(self, other: "Series") -> "Series":
        return self._from_values(self._concat_values("Series.concat", other))

    def slice(self, start: int = 0, end: Optional[int] = None) -> "Series":
        """
        Return the values between two positions as a new Series.

        Works like Python slicing: `end` is excluded, negative positions
        count from the end, and out-of-range positions are clipped.

        Parameters
        ----------
        start : int, default 0
        end : int, optional
            Defaults to the length of the Series.

        Returns
        -------
        Series

        Examples
        --------
        >>> s = ks.Series([1, 2, 3, 4])
        >>> s.slice(1, 3).to_array()
        [2, 3]
        >>> s.slice(-1).to_array()
        [4]
        """
        start = validate_integer("Series.slice", "start", start)
        if end is None:
            end = len(self._data)
        else:
            end = validate_integer("Series.slice", "end", end)
        return self._from_values(self._data[start:end])

    def head(self, n: int = 5) -> "Series":
        """
        Return the first `n` values.

        Parameters
        ----------
        n : int, default 5

        Returns
        -------
        Series

        See Also
        --------
        Series.tail : The last `n` values.
        """
        n = validate_integer("Series.head", "n", n)
        return self.slice(0, n)

    def tail(self, n: int = 5) -> "Series":
        """
        Return the last `n` values.

        Parameters
        ----------
        n : int, default 5

        Returns
        -------
        Series
            Empty if `n` is 0.
        """
        n = validate_integer("Series.tail", "n", n)
        if n == 0:
            return self._from_values([])
        return self.slice(-n)

    @doc(_shared_docs["filter"], **_shared_doc_kwargs)
    def filter(self, func: Predicate) -> "Series":
        return self._from_values(self._filter_values("Series.filter", func))

    @doc(_shared_docs["drop"], **_shared_doc_kwargs)
    def drop(self, func: Predicate) -> "Series":
        return self._from_values(self._drop_values("Series.drop", func))

    @doc(_shared_docs["dropna"], **_shared_doc_kwargs)
    def dropna(self, keep: Iterable = DEFAULT_KEEP) -> "Series":
        return self._from_values(self._dropna_values("Series.dropna", keep))

    @doc(_shared_docs["drop_duplicates"], **_shared_doc_kwargs)
    def drop_duplicates(self) -> "Series":
        return self._from_values(self._drop_duplicates_values())

    @doc(_shared_docs["sort"], **_shared_doc_kwargs)
    def sort(self, reverse: bool = False) -> "Series":
        return self._from_values(self._sort_values("Series.sort", reverse))

    @doc(_shared_docs["shuffle"], **_shared_doc_kwargs)
    def shuffle(self, random_state=None) -> "Series":
        return self._from_values(self._shuffle_values("Series.shuffle", random_state))

    @doc(_shared_docs["round"], **_shared_doc_kwargs)
    def round(self, digits: int = 0) -> "Series":
        return self._from_values(self._round_values("Series.round", digits))

    # ----------------------------------------------------------------------
    # Predicates and reductions

    def any(self, condition: Optional[Predicate] = None) -> bool:
        """
        Return whether any value satisfies a condition.

        Parameters
        ----------
        condition : callable, optional
            Called with each value. By default, tests that the value is not
            missing (see :func:`kiwis.isna`).

        Returns
        -------
        bool
            False for an empty Series.
        """
        if condition is None:
            return bool(notna(self._data).any())
        validate_callable("Series.any", "condition", condition)
        return any(condition(value) for value in self._data)

    def all(self, condition: Optional[Predicate] = None) -> bool:
        """
        Return whether all values satisfy a condition.

        Parameters
        ----------
        condition : callable, optional
            Called with each value. By default, tests that the value is not
            missing (see :func:`kiwis.isna`).

        Returns
        -------
        bool
            True for an empty Series.

        Examples
        --------
        >>> s = ks.Series([1, 0, "a"])
        >>> s.all()
        True
        >>> s.all(lambda x: x != 0)
        False
        """
        if condition is None:
            return bool(notna(self._data).all())
        validate_callable("Series.all", "condition", condition)
        return all(condition(value) for value in self._data)

    def reduce(self, func: Reducer, initial=no_default):
        """
        Reduce the values to a single value, from left to right.

        Parameters
        ----------
        func : callable
            Called as ``func(accumulator, value)``.
        initial : object, optional
            Starting value of the accumulator. When omitted, the first value
            of the Series is used and the reduction starts at the second.

        Returns
        -------
        object

        Raises
        ------
        TypeError
            If the Series is empty and no `initial` value is given.

        Examples
        --------
        >>> s = ks.Series([1, 2, 3])
        >>> s.reduce(lambda acc, x: acc + x)
        6
        >>> s.reduce(lambda acc, x: acc + [x * 2], [])
        [2, 4, 6]
        """
        validate_callable("Series.reduce", "func", func)
        if initial is no_default:
            return functools.reduce(func, self._data)
        return functools.reduce(func, self._data, initial)

    def unique(self) -> List:
        """
        Return the distinct values in order of first appearance.

        Returns
        -------
        list

        See Also
        --------
        Series.drop_duplicates : Same values, as a Series.
        """
        return algorithms.unique(self._data)

    def counts(self, sort: bool = True, reverse: bool = True) -> CountPairs:
        """
        Count the occurrences of each distinct value.

        Values are compared strictly: ``1`` and ``"1"`` are counted apart,
        and NaN values are counted together.

        Parameters
        ----------
        sort : bool, default True
            Sort by count. Values with the same count stay in order of first
            appearance.
        reverse : bool, default True
            Sort in descending order of count.

        Returns
        -------
        list of (value, count) tuples

        See Also
        --------
        Series.frequencies : Relative counts.

        Examples
        --------
        >>> ks.Series(["a", "b", "a", "c", "b", "a"]).counts()
        [('a', 3), ('b', 2), ('c', 1)]
        """
        sort = validate_bool_kwarg("Series.counts", "sort", sort)
        reverse = validate_bool_kwarg("Series.counts", "reverse", reverse)
        return algorithms.value_counts(self._data, sort=sort, ascending=not reverse)

    def frequencies(self, sort: bool = True, reverse: bool = True) -> CountPairs:
        """
        Compute the relative frequency of each distinct value.

        Same as ``counts``, with each count divided by the length of the
        Series.

        Parameters
        ----------
        sort : bool, default True
        reverse : bool, default True

        Returns
        -------
        list of (value, frequency) tuples

        Examples
        --------
        >>> ks.Series(["a", "b", "a", "a"]).frequencies()
        [('a', 0.75), ('b', 0.25)]
        """
        sort = validate_bool_kwarg("Series.frequencies", "sort", sort)
        reverse = validate_bool_kwarg("Series.frequencies", "reverse", reverse)
        return algorithms.value_counts(
            self._data, sort=sort, ascending=not reverse, normalize=True
        )

    # ----------------------------------------------------------------------
    # Numeric aggregations

    def _reduce(self, op, name: str, verb: str = "compute", **kwds):
        """
        Perform a numeric reduction over the values coerced to numbers.
        """
        fname = f"Series.{name}"
        try:
            values = to_numeric_array(self._data)
        except ValueError as err:
            raise TypeMismatch(fname, f"cannot {verb} non-number values") from err
        return op(values, **kwds)

    def sum(self) -> Number:
        """
        Return the sum of the values.

        Returns
        -------
        int or float
            0 for an empty Series.

        Raises
        ------
        TypeMismatch
            If a value cannot be coerced to a number.

        Examples
        --------
        >>> ks.Series([1, 2, 3]).sum()
        6
        >>> ks.Series([1, "2", True]).sum()
        4
        """
        return self._reduce(nanops.nansum, "sum", verb="sum")

    def min(self) -> Optional[Number]:
        """
        Return the minimum of the values, or None if the Series is empty.
        """
        return self._reduce(nanops.nanmin, "min")

    def max(self) -> Optional[Number]:
        """
        Return the maximum of the values, or None if the Series is empty.
        """
        return self._reduce(nanops.nanmax, "max")

    def extent(self) -> Tuple[Optional[Number], Optional[Number]]:
        """
        Return the ``(min, max)`` pair of the values.

        Returns
        -------
        tuple
            ``(None, None)`` for an empty Series.

        Examples
        --------
        >>> ks.Series([3, 1, 2]).extent()
        (1, 3)
        """
        return self._reduce(nanops.nanextent, "extent")

    def mean(self) -> Optional[float]:
        """
        Return the arithmetic mean of the values, or None if the Series is
        empty.
        """
        return self._reduce(nanops.nanmean, "mean", verb="average")

    def median(self) -> Optional[Number]:
        """
        Return the median of the values, or None if the Series is empty.
        """
        return self._reduce(nanops.nanmedian, "median")

    def std(self) -> Optional[float]:
        """
        Return the sample standard deviation of the values.

        Normalized by N-1.

        Returns
        -------
        float or None
            None when the Series holds fewer than two values.

        Examples
        --------
        >>> ks.Series([1, 2, 3, 4]).std()
        1.2909944487358056
        """
        return self._reduce(nanops.nanstd, "std", ddof=1)

    # ----------------------------------------------------------------------
    # Rendering and export

    def __repr__(self) -> str:
        """
        Return a string representation for a particular Series.
        """
        return self.to_string()

    def to_string(
        self,
        buf: Optional[FilePathOrBuffer[str]] = None,
        max_rows: Optional[int] = None,
        max_colwidth: Optional[int] = None,
        na_rep: Optional[str] = None,
    ) -> Optional[str]:
        """
        Render a tabular preview of the Series.

        Parameters
        ----------
        buf : str, path object or StringIO-like, optional
            Buffer to write to.
        max_rows : int, optional
            Maximum number of rows to show. Defaults to the
            ``display.max_rows`` option.
        max_colwidth : int, optional
            Maximum width of a value. Defaults to the
            ``display.max_colwidth`` option.
        na_rep : str, optional
            Text of missing values. Defaults to the ``display.na_rep``
            option.

        Returns
        -------
        str or None
            String representation of Series if ``buf=None``, otherwise None.

        Examples
        --------
        >>> print(ks.Series([1, None, "abc"]).to_string())
        0 |   1
        1 | N/A
        2 | abc
        <BLANKLINE>
        Length: 3
        """
        formatter = fmt.SeriesFormatter(
            self, max_rows=max_rows, max_colwidth=max_colwidth, na_rep=na_rep
        )
        result = formatter.to_string()
        return fmt.save_to_buffer(result, buf=buf)

    def show(self) -> None:
        """
        Print the preview of the Series, followed by a blank line.
        """
        print(self.to_string())
        print()

    def to_csv(
        self,
        path_or_buf: Optional[FilePathOrBuffer[str]] = None,
        name: str = "series",
        na_rep: str = "",
    ) -> Optional[str]:
        """
        Write the Series as a single-column CSV.

        The first line holds `name`, followed by one value per line. Values
        are neither quoted nor escaped.

        Parameters
        ----------
        path_or_buf : str, path object or file-like object, optional
            File path or object. If None is provided the result is returned
            as a string.
        name : str, default 'series'
            Column name.
        na_rep : str, default ''
            Text of None and NaN values.

        Returns
        -------
        None or str
            If path_or_buf is None, returns the resulting csv format as a
            string. Otherwise returns None.

        Examples
        --------
        >>> ks.Series([1, 2]).to_csv(name="s")
        's\\n1\\n2'
        """
        name = validate_string("Series.to_csv", "name", name)
        validate_instance("Series.to_csv", "na_rep", na_rep, str)
        return CSVFormatter(self, name=name, na_rep=na_rep).save(path_or_buf)

    def to_json(
        self,
        path_or_buf: Optional[Union[FilePathOrBuffer[str], IO[str]]] = None,
        name: str = "series",
        prettify: bool = True,
        default_handler: Optional[Callable[[Any], JSONSerializable]] = None,
    ) -> Optional[str]:
        """
        Write the Series as a JSON object ``{name: [values]}``.

        Parameters
        ----------
        path_or_buf : str, path object or file-like object, optional
            File path or object. If not specified, the result is returned as
            a string.
        name : str, default 'series'
            Key of the values.
        prettify : bool, default True
            Indent the output with the ``io.json.indent`` option. When False
            the output is compact.
        default_handler : callable, optional
            Handler to call if a value cannot otherwise be converted to a
            suitable format for JSON. Should receive a single argument which
            is the object to convert and return a serialisable object.

        Returns
        -------
        None or str
            If path_or_buf is None, returns the resulting json format as a
            string. Otherwise returns None.

        Raises
        ------
        TypeError
            If a value cannot be serialized and no `default_handler` is
            given.

        Notes
        -----
        NaN and infinite values are written as ``null``.

        Examples
        --------
        >>> ks.Series([1, None, "a"]).to_json(name="s", prettify=False)
        '{"s":[1,null,"a"]}'
        """
        from kiwis.io import json

        name = validate_string("Series.to_json", "name", name)
        prettify = validate_bool_kwarg("Series.to_json", "prettify", prettify)
        if default_handler is not None:
            validate_callable("Series.to_json", "default_handler", default_handler)

        return json.to_json(
            path_or_buf=path_or_buf,
            obj=self,
            name=name,
            prettify=prettify,
            default_handler=default_handler,
        )
