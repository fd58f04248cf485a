"""
This module is imported from the kiwis package __init__.py file
in order to ensure that the core.config options registered here will
be available as soon as the user loads the package. if register_option
is invoked inside specific modules, they will not be registered until that
module is imported, which may or may not be a problem.

If you need to make sure options are available even before a certain
module is imported, register them here rather than in the module.

"""
import kiwis._config.config as cf
from kiwis._config.config import (
    is_instance_factory,
    is_int,
    is_nonnegative_int,
    is_positive_int,
    is_str,
)

# -----------------------------------------------------------------------------
# display

pc_max_rows_doc = """
: int
    The maximum number of rows shown by Series.to_string and repr. Longer
    Series are cut after `max_rows` rows and a "..." row is added.
"""

max_colwidth_doc = """
: int
    The maximum width in characters of a value in the repr of a Series.
    When a value overflows, it is cut and ends with a "..." placeholder.
    Must be at least 4.
"""

pc_na_rep_doc = """
: str
    The text shown in place of missing values by Series.to_string and repr.
"""

pc_pprint_nest_depth = """
: int
    Controls the number of nested levels to process when pretty-printing
"""

pc_max_seq_items = """
: int or None
    When pretty-printing a long sequence, no more then `max_seq_items`
    will be printed. If items are omitted, they will be denoted by the
    addition of "..." to the resulting string.

    If set to None, the number of items to be printed is unlimited.
"""


def is_colwidth(value) -> None:
    """
    Verify that value is an int wide enough to hold the "..." placeholder.
    """
    is_positive_int(value)
    if value < 4:
        raise ValueError("Value must be at least 4")


with cf.config_prefix("display"):
    cf.register_option("max_rows", 25, pc_max_rows_doc, validator=is_positive_int)
    cf.register_option("max_colwidth", 42, max_colwidth_doc, validator=is_colwidth)
    cf.register_option("na_rep", "N/A", pc_na_rep_doc, validator=is_str)
    cf.register_option(
        "pprint_nest_depth", 3, pc_pprint_nest_depth, validator=is_int
    )
    cf.register_option(
        "max_seq_items", 100, pc_max_seq_items, validator=is_nonnegative_int
    )

# -----------------------------------------------------------------------------
# io.json

json_indent_doc = """
: str or int
    The indentation used by Series.to_json when `prettify` is True: a string
    (such as a tab) or a number of spaces.
    The default is a tab.
"""

with cf.config_prefix("io.json"):
    cf.register_option(
        "indent", "\t", json_indent_doc, validator=is_instance_factory((str, int))
    )
