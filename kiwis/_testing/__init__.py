# flake8: noqa

from kiwis._config import option_context

from kiwis._testing.asserters import (
    assert_class_equal,
    assert_series_equal,
    raise_assert_detail,
)
from kiwis._testing.contexts import ensure_clean
