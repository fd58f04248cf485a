import numpy as np
import pytest

from kiwis import Series
from kiwis.errors import InvalidArgument, OperandMismatch


class TestAppend:
    def test_append_list(self):
        s = Series([1, 2])
        result = s.append([42, 101])
        assert result.to_array() == [1, 2, 42, 101]
        assert s.to_array() == [1, 2]

    @pytest.mark.parametrize("value", [3, "abc", None, {"a": 1}])
    def test_append_single_value(self, value):
        result = Series([1]).append(value)
        assert result.to_array() == [1, value]

    @pytest.mark.parametrize("values", [(3, 4), np.array([3, 4]), Series([3, 4])])
    def test_append_list_like(self, values):
        assert Series([1]).append(values).to_array() == [1, 3, 4]

    def test_append_does_not_coerce(self):
        assert Series([1]).append("2").to_array() == [1, "2"]

    def test_append_inplace(self):
        s = Series([1, 2])
        storage = s.to_array()
        result = s.inplace.append([3])
        assert result is s
        assert s.to_array() == [1, 2, 3]
        assert s.to_array() is storage


class TestInsert:
    def test_insert(self):
        s = Series([1, 2, 3])
        assert s.insert(42, 2).to_array() == [1, 2, 42, 3]
        assert s.insert([7, 8]).to_array() == [7, 8, 1, 2, 3]
        assert s.to_array() == [1, 2, 3]

    def test_insert_inplace(self):
        s = Series([1, 2, 3])
        assert s.inplace.insert("a", 1) is s
        assert s.to_array() == [1, "a", 2, 3]

    @pytest.mark.parametrize("index", [-1, 3, 1.5, "0"])
    def test_insert_invalid_index(self, index):
        s = Series([1, 2, 3])
        with pytest.raises(InvalidArgument, match=r"Series\.inplace\.insert"):
            s.inplace.insert(42, index)
        assert s.to_array() == [1, 2, 3]

    def test_insert_into_empty(self):
        with pytest.raises(InvalidArgument, match=r"Error in Series\.insert\(\)"):
            Series().insert(1)


class TestConcat:
    def test_concat(self):
        s1 = Series([1, 2])
        s2 = Series([3])
        result = s1.concat(s2)
        assert result.to_array() == [1, 2, 3]
        assert s1.to_array() == [1, 2]
        assert s2.to_array() == [3]

    def test_concat_inplace(self):
        s1 = Series([1, 2])
        assert s1.inplace.concat(Series(["a"])) is s1
        assert s1.to_array() == [1, 2, "a"]

    def test_concat_self(self):
        s = Series([1, 2])
        s.inplace.concat(s)
        assert s.to_array() == [1, 2, 1, 2]

    @pytest.mark.parametrize("other", [[3], (3,), None, 3])
    def test_concat_not_a_series(self, other):
        msg = (
            r"Error in Series\.concat\(\): argument 'other' must be an instance "
            r"of Series"
        )
        with pytest.raises(OperandMismatch, match=msg):
            Series([1]).concat(other)
