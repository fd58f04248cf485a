# flake8: noqa

from kiwis.core.dtypes.missing import isna, isnull, notna, notnull
from kiwis.core.series import Series
