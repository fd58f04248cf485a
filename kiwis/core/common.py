"""
Misc tools for implementing data structures

Note: kiwis.core.common is *not* part of the public API.
"""
from enum import Enum

import numpy as np

from kiwis.core.dtypes.inference import is_integer


class _NoDefault(Enum):
    no_default = "NO_DEFAULT"

    def __repr__(self) -> str:
        return "<no_default>"


# sentinel for arguments where None is a meaningful value
no_default = _NoDefault.no_default


def random_state(state=None):
    """
    Helper function for processing random_state arguments.

    Parameters
    ----------
    state : int, np.random.RandomState, np.random.Generator, None.
        If receives an int, passes to np.random.RandomState() as seed.
        If receives a RandomState or Generator object, just returns object.
        If receives `None`, returns np.random.
        If receives anything else, raises an informative ValueError.

    Returns
    -------
    np.random.RandomState, np.random.Generator or the np.random module
    """
    if is_integer(state):
        return np.random.RandomState(state)
    elif isinstance(state, (np.random.RandomState, np.random.Generator)):
        return state
    elif state is None:
        return np.random
    else:
        raise ValueError(
            "random_state must be an integer, a numpy RandomState, "
            "a numpy Generator, or None"
        )
