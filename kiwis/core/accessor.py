"""
Descriptor used to attach method namespaces such as ``Series.inplace``.
"""


class CachedAccessor:
    """
    Property-like descriptor creating a namespace object on first access.

    The namespace object is built with the owning Series as its single
    argument and stored on that Series, so later lookups skip the
    descriptor.

    Parameters
    ----------
    name : str
        Attribute the namespace is reached under, e.g. ``"inplace"``.
    accessor : type
        Class of the namespace, taking the Series in its ``__init__``.
    """

    def __init__(self, name: str, accessor) -> None:
        self._name = name
        self._accessor = accessor

    def __get__(self, obj, cls):
        if obj is None:
            # class access, e.g. Series.inplace, for introspection
            return self._accessor
        accessor_obj = self._accessor(obj)
        object.__setattr__(obj, self._name, accessor_obj)
        return accessor_obj
