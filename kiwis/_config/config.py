"""
The config module holds package-wide configurables and provides
a uniform API for working with them.

Overview
========

- options are referenced using keys in dot.notation, e.g. "display.max_rows".
- keys are case-insensitive.
- functions accept partial/regex keys, when unambiguous.
- options are registered at import time by ``kiwis.core.config_init``.
- options have a default value, and (optionally) a description and
  validation function associated with them.
- options can be reset to their default value, one at a time, by
  sub-namespace, or all at once with the special key "all".
- a callback can be registered to run whenever an option is set or reset.

Implementation
==============

- Values are stored in nested dictionaries and should be accessed
  through the provided API.
- Registered option metadata is kept in an auxiliary dictionary keyed
  on the fully-qualified key, e.g. "display.max_rows".
- `config_prefix` is a context manager which can save developers some
  typing when registering a group of options, see its docstring.
"""
from collections import namedtuple
from contextlib import ContextDecorator, contextmanager
import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, cast

from kiwis._typing import F

logger = logging.getLogger(__name__)

RegisteredOption = namedtuple("RegisteredOption", "key defval doc validator cb")

# holds registered option metadata
_registered_options: Dict[str, RegisteredOption] = {}

# holds the current values for registered options
_global_config: Dict[str, Any] = {}

# keys which have a special meaning
_reserved_keys: List[str] = ["all"]


class OptionError(AttributeError, KeyError):
    """
    Exception for kiwis.options, backwards compatible with KeyError
    checks.
    """


#
# User API


def _get_single_key(pat: str) -> str:
    keys = _select_options(pat)
    if len(keys) == 0:
        raise OptionError(f"No such keys(s): {repr(pat)}")
    if len(keys) > 1:
        raise OptionError("Pattern matched multiple keys")
    return keys[0]


def _get_option(pat: str) -> Any:
    key = _get_single_key(pat)

    # walk the nested dict
    root, k = _get_root(key)
    return root[k]


def _set_option(*args) -> None:
    # must at least 1 arg deal with constraints later
    nargs = len(args)
    if not nargs or nargs % 2 != 0:
        raise ValueError("Must provide an even number of non-keyword arguments")

    for k, v in zip(args[::2], args[1::2]):
        key = _get_single_key(k)

        o = _get_registered_option(key)
        if o and o.validator:
            o.validator(v)

        # walk the nested dict
        root, k = _get_root(key)
        root[k] = v
        logger.debug("option %r set to %r", key, v)

        if o.cb:
            o.cb(key)


def _describe_option(pat: str = "", _print_desc: bool = True):
    keys = _select_options(pat)
    if len(keys) == 0:
        raise OptionError("No such keys(s)")

    s = "\n".join(_build_option_description(k) for k in keys)

    if _print_desc:
        print(s)
    else:
        return s


def _reset_option(pat: str) -> None:
    keys = _select_options(pat)

    if len(keys) == 0:
        raise OptionError("No such keys(s)")

    if len(keys) > 1 and len(pat) < 4 and pat != "all":
        raise ValueError(
            "You must specify at least 4 characters when "
            "resetting multiple keys, use the special keyword "
            '"all" to reset all the options to their default value'
        )

    for k in keys:
        _set_option(k, _registered_options[k].defval)


def get_default_val(pat: str) -> Any:
    key = _get_single_key(pat)
    return _get_registered_option(key).defval


class DictWrapper:
    """ provide attribute-style access to a nested dict"""

    def __init__(self, d: Dict[str, Any], prefix: str = ""):
        object.__setattr__(self, "d", d)
        object.__setattr__(self, "prefix", prefix)

    def __setattr__(self, key: str, val: Any) -> None:
        prefix = object.__getattribute__(self, "prefix")
        if prefix:
            prefix += "."
        prefix += key
        # you can't set new keys
        # can you can't overwrite subtrees
        if key in self.d and not isinstance(self.d[key], dict):
            _set_option(prefix, val)
        else:
            raise OptionError("You can only set the value of existing options")

    def __getattr__(self, key: str):
        prefix = object.__getattribute__(self, "prefix")
        if prefix:
            prefix += "."
        prefix += key
        try:
            v = object.__getattribute__(self, "d")[key]
        except KeyError as err:
            raise OptionError("No such option") from err
        if isinstance(v, dict):
            return DictWrapper(v, prefix)
        else:
            return _get_option(prefix)

    def __dir__(self) -> Iterable[str]:
        return list(self.d.keys())


# For user convenience, we'd like to have the available options described
# in the docstring. For dev convenience we'd like to generate the docstrings
# dynamically instead of maintaining them by hand. To this, we use the
# class below which wraps functions inside a callable, and converts
# __doc__ into a property function. The doctsrings below are templates
# using the py2.6+ advanced formatting syntax to plug in a concise list
# of options, and option descriptions.


class CallableDynamicDoc:
    def __init__(self, func: Callable, doc_tmpl: str):
        self.__doc_tmpl__ = doc_tmpl
        self.__func__ = func

    def __call__(self, *args, **kwds):
        return self.__func__(*args, **kwds)

    @property
    def __doc__(self):
        opts_desc = _describe_option("all", _print_desc=False)
        opts_list = pp_options_list(list(_registered_options.keys()))
        return self.__doc_tmpl__.format(opts_desc=opts_desc, opts_list=opts_list)


_get_option_tmpl = """
get_option(pat)

Return the current value of an option.

Parameters
----------
pat : str
    Option key, or a case-insensitive regex matching exactly one key.

Returns
-------
object

Raises
------
OptionError
    If `pat` matches no option or more than one.

Examples
--------
>>> ks.get_option("display.max_rows")
25

Notes
-----
Registered options:

{opts_list}

{opts_desc}
"""

_set_option_tmpl = """
set_option(pat, value, [pat, value, ...])

Set the value of one or more options.

Parameters
----------
pat : str
    Option key, or a case-insensitive regex matching exactly one key.
value : object
    New value. Options with a validator reject invalid values with a
    ValueError and keep their current value.

Raises
------
OptionError
    If `pat` matches no option or more than one.
ValueError
    If the arguments do not come in pairs or a value is invalid.

Examples
--------
>>> ks.set_option("display.max_rows", 10, "display.na_rep", "-")

Notes
-----
Registered options:

{opts_list}

{opts_desc}
"""

_describe_option_tmpl = """
describe_option(pat="", _print_desc=True)

Show the documentation, default and current value of options.

Parameters
----------
pat : str, default ""
    Regex selecting the options. The empty pattern selects every option.
_print_desc : bool, default True
    Print the description instead of returning it.

Returns
-------
None or str
    The description when `_print_desc` is False.

Notes
-----
Registered options:

{opts_list}
"""

_reset_option_tmpl = """
reset_option(pat)

Restore options to their default value.

Parameters
----------
pat : str
    Regex selecting the options; at least 4 characters when it matches
    several options. ``"all"`` resets every option.

Examples
--------
>>> ks.reset_option("display")

Notes
-----
Registered options:

{opts_list}

{opts_desc}
"""
# bind the functions with their docstrings into a Callable
# and use that as the functions exposed in kiwis.api
get_option = CallableDynamicDoc(_get_option, _get_option_tmpl)
set_option = CallableDynamicDoc(_set_option, _set_option_tmpl)
reset_option = CallableDynamicDoc(_reset_option, _reset_option_tmpl)
describe_option = CallableDynamicDoc(_describe_option, _describe_option_tmpl)
options = DictWrapper(_global_config)

#
# Functions for use by kiwis developers, in addition to User - api


class option_context(ContextDecorator):
    """
    Set options for the duration of a `with` block, then restore them.

    Takes alternating keys and values: ``option_context(pat, val, pat, val, ...)``.
    Can also decorate a function.

    Examples
    --------
    >>> with option_context('display.max_rows', 10, 'display.na_rep', '-'):
    ...     ...
    """

    def __init__(self, *args):
        if len(args) % 2 != 0 or len(args) < 2:
            raise ValueError(
                "Need to invoke as option_context(pat, val, [(pat, val), ...])."
            )

        self.ops = list(zip(args[::2], args[1::2]))

    def __enter__(self):
        self.undo = [(pat, _get_option(pat)) for pat, val in self.ops]

        for pat, val in self.ops:
            _set_option(pat, val)

    def __exit__(self, *args):
        if self.undo:
            for pat, val in self.undo:
                _set_option(pat, val)


def register_option(
    key: str,
    defval: object,
    doc: str = "",
    validator: Optional[Callable[[Any], Any]] = None,
    cb: Optional[Callable[[str], Any]] = None,
) -> None:
    """
    Register an option and set it to its default value.

    Parameters
    ----------
    key : str
        Dotted key, e.g. ``"display.max_rows"``. Keys are lower-cased and
        every component must be a Python identifier.
    defval : object
        Default value of the option.
    doc : str, default ""
        Description shown by ``describe_option``.
    validator : callable, optional
        Called with every new value; raises ValueError to reject it.
    cb : callable, optional
        Called with the full key after the option is set or reset.

    Raises
    ------
    OptionError
        If the key is already registered, is reserved, or a prefix of it is
        already an option.
    ValueError
        If the key is not made of identifiers or `defval` fails the
        validator.
    """
    import keyword
    import tokenize

    key = key.lower()

    if key in _registered_options:
        raise OptionError(f"Option '{key}' has already been registered")
    if key in _reserved_keys:
        raise OptionError(f"Option '{key}' is a reserved key")

    # the default value should be legal
    if validator:
        validator(defval)

    # walk the nested dict, creating dicts as needed along the path
    path = key.split(".")

    for k in path:
        if not re.match("^" + tokenize.Name + "$", k):
            raise ValueError(f"{k} is not a valid identifier")
        if keyword.iskeyword(k):
            raise ValueError(f"{k} is a python keyword")

    cursor = _global_config
    msg = "Path prefix to option '{option}' is already an option"

    for i, p in enumerate(path[:-1]):
        if not isinstance(cursor, dict):
            raise OptionError(msg.format(option=".".join(path[:i])))
        if p not in cursor:
            cursor[p] = {}
        cursor = cursor[p]

    if not isinstance(cursor, dict):
        raise OptionError(msg.format(option=".".join(path[:-1])))

    cursor[path[-1]] = defval  # initialize

    # save the option metadata
    _registered_options[key] = RegisteredOption(
        key=key, defval=defval, doc=doc, validator=validator, cb=cb
    )


#
# functions internal to the module


def _select_options(pat: str) -> List[str]:
    """
    returns a list of keys matching `pat`

    if pat=="all", returns all registered options
    """
    # short-circuit for exact key
    if pat in _registered_options:
        return [pat]

    # else look through all of them
    keys = sorted(_registered_options.keys())
    if pat == "all":  # reserved key
        return keys

    return [k for k in keys if re.search(pat, k, re.I)]


def _get_root(key: str) -> Tuple[Dict[str, Any], str]:
    path = key.split(".")
    cursor = _global_config
    for p in path[:-1]:
        cursor = cursor[p]
    return cursor, path[-1]


def _get_registered_option(key: str):
    """
    Retrieves the option metadata if `key` is a registered option.

    Returns
    -------
    RegisteredOption (namedtuple) if key is registered, None otherwise
    """
    return _registered_options.get(key)


def _build_option_description(k: str) -> str:
    """ Builds a formatted description of a registered option and prints it """
    o = _get_registered_option(k)

    s = f"{k} "

    if o.doc:
        s += "\n".join(o.doc.strip().split("\n"))
    else:
        s += "No description available."

    s += f"\n    [default: {repr(o.defval)}] [currently: {repr(_get_option(k))}]"

    return s


def pp_options_list(keys: Iterable[str], width=80, _print: bool = False):
    """ Builds a concise listing of available options, grouped by prefix """
    from itertools import groupby
    from textwrap import wrap

    def pp(name: str, ks: Iterable[str]) -> List[str]:
        pfx = "- " + name + ".[" if name else ""
        ls = wrap(
            ", ".join(ks),
            width,
            initial_indent=pfx,
            subsequent_indent="  ",
            break_long_words=False,
        )
        if ls and ls[-1] and name:
            ls[-1] = ls[-1] + "]"
        return ls

    ls: List[str] = []
    singles = [x for x in sorted(keys) if x.find(".") < 0]
    if singles:
        ls += pp("", singles)
    keys = [x for x in keys if x.find(".") >= 0]

    for k, g in groupby(sorted(keys), lambda x: x[: x.rfind(".")]):
        ks = [x[len(k) + 1 :] for x in list(g)]
        ls += pp(k, ks)
    s = "\n".join(ls)
    if _print:
        print(s)
    else:
        return s


#
# helpers


@contextmanager
def config_prefix(prefix):
    """
    contextmanager for multiple invocations of API with a common prefix

    supported API functions: (register / get / set )__option

    Warning: This is not thread - safe, and won't work properly if you import
    the API functions into your module using the "from x import y" construct.

    Example
    -------
    import kiwis._config.config as cf
    with cf.config_prefix("display"):
        cf.register_option("na_rep", "N/A")
        cf.set_option("na_rep", "-")
        cf.get_option("na_rep")

    will register the option "display.na_rep", then set and read it.
    """
    # Note: reset_option relies on set_option, and on key directly
    # it does not fit in to this monkey-patching scheme

    global register_option, get_option, set_option

    def wrap(func: F) -> F:
        def inner(key: str, *args, **kwds):
            pkey = f"{prefix}.{key}"
            return func(pkey, *args, **kwds)

        return cast(F, inner)

    _register_option = register_option
    _get_option = get_option
    _set_option = set_option
    set_option = wrap(set_option)
    get_option = wrap(get_option)
    register_option = wrap(register_option)
    yield None
    set_option = _set_option
    get_option = _get_option
    register_option = _register_option


# These factories and methods are handy for use as the validator
# arg in register_option


def is_type_factory(_type):
    """
    Build a validator accepting values whose type is exactly `_type`.

    Subclasses are rejected, so ``is_type_factory(int)`` refuses ``True``.
    """

    def inner(x) -> None:
        if type(x) != _type:
            raise ValueError(f"Value must have type '{_type}'")

    return inner


def is_instance_factory(_type):
    """
    Build a validator accepting instances of `_type`, a type or a tuple of
    types.
    """
    if isinstance(_type, (tuple, list)):
        _type = tuple(_type)
        type_repr = "|".join(map(str, _type))
    else:
        type_repr = f"'{_type}'"

    def inner(x) -> None:
        if not isinstance(x, _type):
            raise ValueError(f"Value must be an instance of {type_repr}")

    return inner


def is_nonnegative_int(value: Optional[int]) -> None:
    """
    Verify that value is None or a positive int.

    Parameters
    ----------
    value : None or int
            The `value` to be checked.

    Raises
    ------
    ValueError
        When the value is not None or is a negative integer
    """
    if value is None:
        return

    elif isinstance(value, int) and not isinstance(value, bool):
        if value >= 0:
            return

    msg = "Value must be a nonnegative integer or None"
    raise ValueError(msg)


def is_positive_int(value: int) -> None:
    """
    Verify that value is an int greater than zero.
    """
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return
    raise ValueError("Value must be a positive integer")


# common type validators, for convenience
# usage: register_option(... , validator = is_int)
is_int = is_type_factory(int)
is_bool = is_type_factory(bool)
is_str = is_type_factory(str)
is_text = is_instance_factory((str, bytes))
