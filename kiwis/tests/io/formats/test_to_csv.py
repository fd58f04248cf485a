from io import StringIO
import os
from pathlib import Path

import numpy as np
import pytest

from kiwis import Series
import kiwis._testing as tm
from kiwis.errors import InvalidArgument


class TestSeriesToCSV:
    def test_to_csv(self):
        assert Series([1, 2]).to_csv(name="s") == "s\n1\n2"

    def test_to_csv_default_name(self):
        assert Series(["a", 1.5]).to_csv() == "series\na\n1.5"

    def test_to_csv_empty(self):
        assert Series().to_csv() == "series"

    def test_to_csv_missing_values(self):
        s = Series([1, None, np.nan, "", 0])
        assert s.to_csv(name="x") == "x\n1\n\n\n\n0"
        assert s.to_csv(name="x", na_rep="NA") == "x\n1\nNA\nNA\n\n0"

    def test_to_csv_no_escaping(self):
        s = Series(["a,b", 'say "hi"'])
        assert s.to_csv() == 'series\na,b\nsay "hi"'

    def test_to_csv_path(self):
        s = Series([1, "é"])
        with tm.ensure_clean("__tmp_to_csv__.csv") as path:
            result = s.to_csv(path, name="s")
            assert result is None
            with open(path, encoding="utf-8") as f:
                assert f.read() == "s\n1\né"

    def test_to_csv_pathlike(self):
        with tm.ensure_clean("__tmp_to_csv_pathlike__.csv") as path:
            Series([1]).to_csv(Path(path))
            assert Path(path).read_text(encoding="utf-8") == "series\n1"

    def test_to_csv_buffer(self):
        buf = StringIO()
        assert Series([1, 2]).to_csv(buf) is None
        assert buf.getvalue() == "series\n1\n2"
        assert not buf.closed

    def test_to_csv_overwrites(self):
        with tm.ensure_clean("__tmp_to_csv_overwrite__.csv") as path:
            Series([1, 2, 3]).to_csv(path)
            Series([4]).to_csv(path)
            with open(path, encoding="utf-8") as f:
                assert f.read() == "series\n4"

    @pytest.mark.parametrize("name", ["", None, 1])
    def test_to_csv_invalid_name(self, name):
        with pytest.raises(InvalidArgument, match=r"Series\.to_csv\(\): argument 'name'"):
            Series([1]).to_csv(name=name)

    def test_to_csv_invalid_target(self):
        with pytest.raises(TypeError, match="path_or_buf"):
            Series([1]).to_csv(1)

    def test_to_csv_missing_directory(self):
        with tm.ensure_clean("__tmp__.csv") as path:
            missing = os.path.join(path, "nope", "out.csv")
            with pytest.raises(OSError):
                Series([1]).to_csv(missing)
