from typing import Dict

# Docstrings shared between the pure Series transforms and their mutating
# counterparts on ``Series.inplace``. Templates take:
#   accessor - "" or ".inplace", spliced into the examples
#   returns  - description of the returned object
_shared_docs: Dict[str, str] = {}

_shared_doc_kwargs = {
    "accessor": "",
    "returns": "Series\n    A new Series. The original Series is left unchanged.",
}

_inplace_doc_kwargs = {
    "accessor": ".inplace",
    "returns": "Series\n    The same Series, modified in place, to allow chaining.",
}

_shared_docs[
    "append"
] = """
Append one value or a list-like of values at the end of the Series.

Parameters
----------
values : object or list-like
    A single value, or a list-like whose elements are appended in order.
    Strings and mappings are appended as single values.

Returns
-------
{returns}

See Also
--------
Series.insert : Insert values at a position.
Series.concat : Append the values of another Series.

Examples
--------
>>> s = ks.Series([1, 2])
>>> s{accessor}.append([42, 101]).to_array()
[1, 2, 42, 101]
"""

_shared_docs[
    "insert"
] = """
Insert one value or a list-like of values into the Series.

Parameters
----------
values : object or list-like
    A single value, or a list-like whose elements are inserted in order.
index : int, default 0
    Position before which the values are inserted. Must be in
    ``[0, len(s) - 1]``; use ``append`` to add values at the end.

Returns
-------
{returns}

Raises
------
InvalidArgument
    If `index` is not an integer in range.

Examples
--------
>>> s = ks.Series([1, 2, 3])
>>> s{accessor}.insert(42, 2).to_array()
[1, 2, 42, 3]
"""

_shared_docs[
    "concat"
] = """
Append the values of another Series at the end of the Series.

Parameters
----------
other : Series

Returns
-------
{returns}

Raises
------
OperandMismatch
    If `other` is not a Series.

Examples
--------
>>> s1 = ks.Series([1, 2])
>>> s2 = ks.Series([3])
>>> s1{accessor}.concat(s2).to_array()
[1, 2, 3]
"""

_shared_docs[
    "filter"
] = """
Keep the values for which a condition is true.

Parameters
----------
func : callable
    Called with each value; the value is kept when the result is truthy.

Returns
-------
{returns}

See Also
--------
Series.drop : Drop the values for which a condition is true.

Examples
--------
>>> s = ks.Series([1, 42, 101])
>>> s{accessor}.filter(lambda x: x > 41).to_array()
[42, 101]
"""

_shared_docs[
    "drop"
] = """
Drop the values for which a condition is true.

This is the complement of ``filter``.

Parameters
----------
func : callable
    Called with each value; the value is dropped when the result is truthy.

Returns
-------
{returns}

Examples
--------
>>> s = ks.Series([1, 42, 101])
>>> s{accessor}.drop(lambda x: x > 41).to_array()
[1]
"""

_shared_docs[
    "dropna"
] = """
Drop missing values.

Parameters
----------
keep : list-like, default (0, False)
    Empty values that count as data and are kept. See :func:`kiwis.isna`.

Returns
-------
{returns}

Examples
--------
>>> s = ks.Series([1, None, "", 0])
>>> s{accessor}.dropna().to_array()
[1, 0]

Keep empty strings but drop zeros:

>>> s = ks.Series([1, None, "", 0])
>>> s{accessor}.dropna(keep=[""]).to_array()
[1, '']
"""

_shared_docs[
    "drop_duplicates"
] = """
Drop repeated values, keeping the first occurrence of each.

Values are compared strictly: ``1`` and ``"1"`` are different values, and
two lists are only duplicates if they are the same object.

Returns
-------
{returns}

Examples
--------
>>> s = ks.Series([3, 1, 3, 2, 1])
>>> s{accessor}.drop_duplicates().to_array()
[3, 1, 2]
"""

_shared_docs[
    "sort"
] = """
Sort the values numerically.

Values are compared through their numeric coercion. Values that cannot be
coerced to a number are placed after all numeric values, in their original
order.

Parameters
----------
reverse : bool, default False
    Sort in descending order.

Returns
-------
{returns}

Examples
--------
>>> s = ks.Series([3, 1, 2])
>>> s{accessor}.sort(reverse=True).to_array()
[3, 2, 1]
"""

_shared_docs[
    "shuffle"
] = """
Randomly reorder the values.

Parameters
----------
random_state : int, numpy RandomState or Generator, optional
    Seed or generator for the permutation. The shuffle is not suitable
    for cryptographic use.

Returns
-------
{returns}

Examples
--------
>>> s = ks.Series([1, 2, 3, 4])
>>> sorted(s{accessor}.shuffle(random_state=0).to_array())
[1, 2, 3, 4]
"""

_shared_docs[
    "round"
] = """
Round each value to a number of decimals.

Each value becomes its fixed-point *string* representation, ties rounding
away from zero. The strings are stored as they are; numeric operations on
the result coerce them back to numbers.

Parameters
----------
digits : int, default 0
    Number of decimal places, between 0 and 100.

Returns
-------
{returns}

Raises
------
TypeMismatch
    If any value cannot be coerced to a number. The Series is unchanged.

Examples
--------
>>> s = ks.Series([1.005, 2.5, -0.25])
>>> s{accessor}.round(1).to_array()
['1.0', '2.5', '-0.3']
"""
