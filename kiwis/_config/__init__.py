"""
kiwis._config is considered explicitly upstream of everything else in kiwis,
should have no intra-kiwis dependencies.
"""
__all__ = [
    "config",
    "get_option",
    "set_option",
    "reset_option",
    "describe_option",
    "option_context",
    "options",
]
from kiwis._config import config
from kiwis._config.config import (
    describe_option,
    get_option,
    option_context,
    options,
    reset_option,
    set_option,
)
