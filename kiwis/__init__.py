# flake8: noqa

__docformat__ = "restructuredtext"

# Let users know if they're missing any of our hard dependencies
hard_dependencies = ("numpy",)
missing_dependencies = []

for dependency in hard_dependencies:
    try:
        __import__(dependency)
    except ImportError as e:
        missing_dependencies.append(f"{dependency}: {e}")

if missing_dependencies:
    raise ImportError(
        "Unable to import required dependencies:\n" + "\n".join(missing_dependencies)
    )
del hard_dependencies, dependency, missing_dependencies

from kiwis._config import (
    get_option,
    set_option,
    reset_option,
    describe_option,
    option_context,
    options,
)

# let init-time option registration happen
import kiwis.core.config_init

from kiwis.core.api import (
    # missing
    isna,
    isnull,
    notna,
    notnull,
    # container
    Series,
)

from kiwis import errors

__version__ = "0.1.0"

# module level doc-string
__doc__ = """
kiwis - a lightweight container for one-dimensional data
=========================================================

**kiwis** is a Python package providing an ordered, dynamically typed
container of values, the ``Series``, with the usual tools to access, clean,
reorder, aggregate and export its values.

Main Features
-------------
Here are just a few of the things that kiwis does well:

  - Numbers written as text are converted to numbers when data is loaded.
  - Flexible detection and removal of missing values (``dropna``, ``isna``).
  - Filtering, sorting, shuffling and rounding, either returning a new
    Series or modifying it in place through ``Series.inplace``.
  - Counts, frequencies and numeric aggregations backed by NumPy.
  - A readable tabular preview, and export to CSV and JSON.
"""
